"""Configuration layer — typed models, config-file loading, settings, logging."""
