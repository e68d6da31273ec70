"""Domain layer — employee models, the registry, and value parsing.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
