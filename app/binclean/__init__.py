"""binclean - Remove bin/ and obj/ build artifact directories."""

__version__ = "0.1.0"
