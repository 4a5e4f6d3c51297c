"""Fake records for back office forms."""
