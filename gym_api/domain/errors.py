"""Error kinds raised by the validation layer, queries and services."""
from __future__ import annotations


class GymError(Exception):
    """Base class; carries a short code and the HTTP status it maps to."""

    code = "error"
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(GymError):
    """A required input is missing, empty or structurally invalid."""

    code = "invalid"
    status_code = 400


class NotFoundError(GymError):
    """The referenced identifier is not in the collection."""

    code = "not_found"
    status_code = 404
