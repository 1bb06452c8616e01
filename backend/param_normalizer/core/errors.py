from typing import List


class DomainError(ValueError):
    """Request rejected in a domain sense (invalid params, undecodable body, etc.)."""


class ParamValidationError(DomainError):
    """Raised by the request middleware when params fail schema validation."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("; \n".join(self.errors))


class RequestBodyError(DomainError):
    """Request body could not be decoded into a mapping of params."""


class SchemaError(ValueError):
    """Malformed param schema (unknown type, bad descriptor)."""
