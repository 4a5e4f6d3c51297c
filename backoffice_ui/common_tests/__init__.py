"""Shared scenario steps."""
