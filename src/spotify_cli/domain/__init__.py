"""Domain layer: album library and windowed navigation."""
