"""Service layer — graph algorithms and the ServiceResult-returning graph service.

Services may import from domain and infrastructure layers.
They must never import from commands or output.
"""
