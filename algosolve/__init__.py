"""Solutions to classic algorithm problems, grouped by technique into modules."""

__version__ = "0.1.0"
__all__ = ["arrays", "dynamic", "graphs", "grids", "strings", "structures", "trees"]