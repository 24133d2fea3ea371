"""Domain exceptions shared by every module.

Modules subclass ``NotFound`` for their own "missing entity" errors so the
API layer can translate all of them into a single 404 response shape.
"""

from __future__ import annotations


class NotFound(Exception):
    """The requested entity does not exist."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
