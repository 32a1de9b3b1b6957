"""Command-line interface for room wall chains."""
