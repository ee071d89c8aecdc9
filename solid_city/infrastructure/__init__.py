"""Infrastructure layer: console adapters and logging."""
