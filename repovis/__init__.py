"""Layout and animation state for visualising version control history."""

__version__ = "0.56.0"

__all__ = ["key", "slider", "textbox", "pawn", "spline", "logmill"]