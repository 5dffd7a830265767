"""Identifier generation."""

from cuid2 import cuid_wrapper

_next_cuid = cuid_wrapper()


def generate_cuid() -> str:
    """Return a new CUID2 string, used as the task primary key."""
    return str(_next_cuid())
