"""Services built on top of a loaded quest catalog."""

from .quest_graph import build_touch_index, link_touch_edges, validate_prerequisites

__all__ = [
    "build_touch_index",
    "link_touch_edges",
    "validate_prerequisites",
]
