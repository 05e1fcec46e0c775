"""Custom exceptions for configuration and formatting errors."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Base exception for configuration errors with optional suggestions."""

    def __init__(self, message: str, suggestion: str | None = None) -> None:
        self.message = message
        self.suggestion = suggestion
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = f"[Configuration Error] {self.message}"
        if self.suggestion:
            msg += f"\n[Suggestion] {self.suggestion}"
        return msg


class MissingIdentifierError(ConfigurationError):
    """Error when an entry has no value for its collection's identifier field."""

    def __init__(self, collection: str, field: str) -> None:
        self.collection = collection
        self.field = field
        super().__init__(
            f"Entry in collection '{collection}' has no value for identifier field '{field}'",
            "Give the collection a field name that is a valid entry identifier, "
            "or set `identifier_field`.",
        )


class UnknownActionError(ConfigurationError):
    """Error when a commit message is requested for an unsupported action."""

    def __init__(self, action: str, supported: tuple[str, ...]) -> None:
        self.action = action
        super().__init__(
            f"Unknown commit action '{action}'",
            f"Use one of: {', '.join(supported)}.",
        )
