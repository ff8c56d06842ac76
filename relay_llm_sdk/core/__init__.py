"""Core layer: protocol policy, model metadata and normalization."""
