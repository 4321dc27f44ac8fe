"""canopy - List directory contents as an indented tree."""

__version__ = "0.1.0"
