"""Bundlegate CLI — Typer-based command-line interface.

Provides the ``bundlegate`` command. Run bare, it gates the bundle build;
subcommands print the current fingerprint or the cache status.

All output uses Rich for formatted terminal display.
"""
