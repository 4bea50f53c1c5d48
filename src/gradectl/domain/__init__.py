"""Domain layer — grading scale, pipeline stages, and catalog records.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
