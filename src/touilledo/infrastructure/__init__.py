"""Infrastructure layer — the key-value store gateway.

This layer depends on stdlib, third-party libs (redis-py), and the domain
model it persists. It must never import from services, commands, or output.
"""
