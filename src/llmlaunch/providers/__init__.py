"""Pluggable strategies: clipboard readers and dispatchers."""
