"""Stockroom — in-memory warehouse item registry."""
