"""Gateways wrapping the external collaborators (git, gh, PATH lookups)."""
