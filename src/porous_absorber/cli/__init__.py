"""Command-line interface: the ``absorb`` command group."""

from .compute import main

__all__ = ["main"]
