"""Domain value objects."""

from taskboard.domain.value_objects.taxonomy import Taxonomy

__all__ = ["Taxonomy"]
