"""Escavador lookups — normalization transformers and use cases."""
