# riskmap/errors.py
class InputValidationError(ValueError):
    """Malformed external input, with the offending field."""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message}


class NotFoundError(LookupError):
    """Identifier lookup (region, intervention, seasonal event, saved record) with no match."""

    def __init__(self, kind: str, identifier):
        super().__init__(f"{kind} {identifier!r} not found")
        self.kind = kind
        self.identifier = identifier


class ConfigurationWarning(UserWarning):
    """Advisory only: never blocks a computation."""
