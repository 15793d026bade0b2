"""Core infrastructure for binclean: CLI theming."""
