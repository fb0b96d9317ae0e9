"""Pantry inventory tooling."""
