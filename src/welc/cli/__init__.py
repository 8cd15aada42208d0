"""
Command-line interface for welc.
"""

from .main import build_parser, main_cli

__all__ = ["build_parser", "main_cli"]
