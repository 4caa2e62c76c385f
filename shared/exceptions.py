"""Errors raised by the service layer.

Routers translate these into HTTP responses; nothing below the router
knows about status codes.
"""


class EntityNotFoundError(LookupError):
    """A referenced entity (product, order) does not exist."""

    def __init__(self, entity: str, key) -> None:
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} {key} not found")


class ValidationError(ValueError):
    """Input is well-formed but violates a business rule."""
