"""
CLI module for Vendorize.

Provides the command-line interface using Click.
"""

from vendorize.cli.main import cli

__all__ = ["cli"]
