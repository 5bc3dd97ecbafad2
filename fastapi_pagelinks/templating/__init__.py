"""Jinja2 integration."""

from .globals import build_globals, install_pagination_globals

__all__ = ["build_globals", "install_pagination_globals"]
