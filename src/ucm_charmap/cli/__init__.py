"""Command-line interface for ucm-charmap."""

from ucm_charmap.cli.app import create_app
from ucm_charmap.cli.main import main

__all__ = ["create_app", "main"]
