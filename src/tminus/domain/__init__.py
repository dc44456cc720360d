"""Domain layer: results, form fields, events, URL codec and countdown math.

This layer depends only on the stdlib.
It must never import from runtime, services, infrastructure, commands, or config.
"""
