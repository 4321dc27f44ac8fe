"""Allow running canopy as ``python -m canopy``."""

from canopy.cli.main import app

app(prog_name="canopy")
