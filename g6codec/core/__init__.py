from .graph import Edge, Graph  # noqa: F401

__all__ = ["Edge", "Graph"]
