"""Folio - personal portfolio backend and workspace project scanner."""

__version__ = "0.1.0"
