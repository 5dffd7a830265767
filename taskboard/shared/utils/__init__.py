"""Shared utilities (ids, dates)."""

from taskboard.shared.utils.datetime import today_in
from taskboard.shared.utils.generators import generate_cuid

__all__ = ["generate_cuid", "today_in"]
