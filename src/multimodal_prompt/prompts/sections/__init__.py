"""Prompt section builders. Each takes the builder context and returns text ("" = absent)."""
