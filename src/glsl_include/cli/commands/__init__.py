"""Top-level glsl-include commands."""
