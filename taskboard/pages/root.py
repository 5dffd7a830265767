"""Root landing page with links to the board and assistant APIs."""

from html import escape


def render_root_page(app_name: str, assistant_name: str) -> str:
    """Return HTML for the root landing page."""
    name = escape(app_name)
    assistant = escape(assistant_name)
    return f"""
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{name}</title>
    <style>
        * {{ box-sizing: border-box; }}
        body {{
            font-family: system-ui, sans-serif;
            margin: 0;
            min-height: 100vh;
            background: #111;
            color: #e0e0e0;
            padding: 2rem 1rem;
        }}
        .wrap {{ max-width: 560px; margin: 0 auto; }}
        h1 {{ color: #fff; font-weight: 600; margin-bottom: 0.25rem; }}
        .tagline {{ color: #888; margin-top: 0; }}
        ul {{ padding-left: 1.25rem; line-height: 1.8; }}
        a {{ color: #9cf; }}
        code {{ font-family: ui-monospace, monospace; color: #ccc; }}
    </style>
</head>
<body>
    <div class="wrap">
        <h1>{name}</h1>
        <p class="tagline">Task board with {assistant}, a conversational assistant that proposes changes and waits for your confirmation.</p>
        <ul>
            <li><a href="/docs">Interactive API docs</a></li>
            <li><a href="/api/v1/health">Health</a> / <a href="/api/v1/health/ready">Readiness</a></li>
            <li><a href="/api/v1/taxonomy">Board taxonomy</a></li>
            <li><code>GET /api/v1/tasks</code> list and filter tasks</li>
            <li><code>POST /api/v1/assistant/chat</code> talk to {assistant}</li>
        </ul>
    </div>
</body>
</html>
"""
