"""Command implementations for the memalloc CLI."""
