"""Domain layer — handles, allocation, and the error hierarchy.

This layer depends only on stdlib.
It must never import from core, services, commands, or config.
"""
