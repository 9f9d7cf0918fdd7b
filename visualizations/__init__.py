"""Downstream renderers for engine results (matplotlib)."""
