"""Static HTML pages served by the app (landing page)."""

from taskboard.pages.root import render_root_page

__all__ = ["render_root_page"]
