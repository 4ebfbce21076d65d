"""Command-line host for foldertree."""
