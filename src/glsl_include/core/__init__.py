"""Core library for glsl-include."""
