"""Command modules registered on the createos Typer application."""
