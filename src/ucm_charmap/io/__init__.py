"""Mapping sources and output files."""

from ucm_charmap.io.reader import fetch_mapping, load_mapping
from ucm_charmap.io.writer import save

__all__ = ["fetch_mapping", "load_mapping", "save"]
