"""Command groups for the runtrack CLI."""
