"""Application layer package: wires settings, logging and logs together."""

from .factory import InvocationLogFactory

__all__ = ["InvocationLogFactory"]
