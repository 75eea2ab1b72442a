"""Core world configuration model and persistence."""
