"""Decode/encode table construction."""

from ucm_charmap.table.builder import TableBuilder, build_charmap

__all__ = ["TableBuilder", "build_charmap"]
