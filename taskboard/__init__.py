"""taskboard: task board API with a conversational task assistant."""
