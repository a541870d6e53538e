"""Core generative clients, prompt lookups and exceptions."""
