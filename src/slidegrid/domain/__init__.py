"""Domain layer: layout models, errors, and zone diff primitives.

This layer depends only on stdlib and pydantic.
It must never import from services, plugins, commands, or config.
"""
