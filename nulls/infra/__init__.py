"""
Infrastructure primitives.

Logging setup and the exception hierarchy shared by every nullable type.

No business logic.
"""
