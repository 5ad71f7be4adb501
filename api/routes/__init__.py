"""Rutas de la API."""

from . import scripts

__all__ = ["scripts"]
