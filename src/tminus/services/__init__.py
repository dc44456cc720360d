"""Service layer: countdown operations returning ServiceResult.

Services may import from domain, runtime and infrastructure layers.
They must never import from commands or output.
"""
