"""Dependency resolution: cache lookup, graph walk, and rendering."""
