"""Shared helpers used by both the builder and the command line."""
