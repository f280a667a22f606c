"""Commands for managing other commands."""
