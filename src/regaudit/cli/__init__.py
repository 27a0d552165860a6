"""
Registration audit command line interface.
"""

from regaudit.cli.main import app, main

__all__ = ["app", "main"]
