"""Shared helpers for glsl-include."""
