"""Infrastructure layer — snapshot files, NetworkX bridge, workspace.

This layer depends on stdlib, third-party libs (pydantic, NetworkX) and the
domain layer. It must never import from services, commands, or output.
Settings are only imported for type checking.
"""
