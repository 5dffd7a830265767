"""Infrastructure layer: persistence and external service adapters."""
