"""Binary trees: building, traversing, measuring and drawing them, with demos."""

__version__ = "0.1.0"
__all__ = ["tree", "render", "demo"]