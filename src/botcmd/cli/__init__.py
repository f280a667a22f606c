"""Command-line entry points for botcmd."""
