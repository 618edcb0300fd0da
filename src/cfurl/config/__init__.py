"""Configuration: settings, file discovery, logging."""
