"""Interactive car assembly simulator with part compatibility checks."""

__version__ = "0.1.0"
__all__ = ["parts", "car", "assembler", "cli"]