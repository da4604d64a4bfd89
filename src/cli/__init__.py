"""Command-line entry points for repofix."""
