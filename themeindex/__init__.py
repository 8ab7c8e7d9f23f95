"""Build the theme registry index for a themes repository."""

__version__ = "1.0.0"
