"""Output layer: render ServiceResult as Rich text, quiet text, or JSON."""
