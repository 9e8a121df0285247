"""Domain layer — types, lifecycle rules, validation, and mapping.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
