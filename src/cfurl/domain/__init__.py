"""Domain layer: command catalog, request model, URL templates."""
