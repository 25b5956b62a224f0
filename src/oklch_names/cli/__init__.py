"""Command-line interface (needs the ``cli`` extra: typer and rich)."""
