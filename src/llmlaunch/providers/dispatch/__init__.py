"""Launch strategies: browser and delegated search command."""
