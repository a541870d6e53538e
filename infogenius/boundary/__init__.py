"""Boundary adapters: object storage and local persistence."""
