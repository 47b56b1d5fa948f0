"""Bundled JSON form schemas."""
