"""Utility modules for the navigator."""
