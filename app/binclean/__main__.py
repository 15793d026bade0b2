"""Allow running binclean with ``python -m binclean``."""

from binclean.cli.main import app

app(prog_name="binclean")
