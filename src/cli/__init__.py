"""CLI `coordinador` (Typer + Rich)."""
