"""Domain layer — graph data model and key matching.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
