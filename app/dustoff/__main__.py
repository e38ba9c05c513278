"""Allow running dustoff as ``python -m dustoff``."""

from dustoff.cli.main import app

app(prog_name="dustoff")
