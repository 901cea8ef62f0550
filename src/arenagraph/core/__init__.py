"""Core layer — payload stores, edge index, cursors, and the Graph facade.

This layer depends on the domain layer and stdlib only.
It must never import from config, services, commands, or output.
"""
