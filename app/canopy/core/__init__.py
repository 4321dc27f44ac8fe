"""Core configuration for canopy: XDG paths, user settings and theme."""
