"""Packaged vendor profiles."""
