# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Custom exception hierarchy for sarifkit."""

from __future__ import annotations


class SarifError(Exception):
    """Base exception for all sarifkit errors."""


class ConfigurationError(SarifError):
    """Invalid or missing configuration."""


class DecodeError(SarifError):
    """A document or entity does not conform to the SARIF object model.

    ``field`` is the wire name of the innermost declared field involved and
    ``path`` the chain of keys and list indexes leading to the offending value
    from the value being converted.
    """

    def __init__(self, message: str, *, field: str = "", path: tuple[str | int, ...] = ()) -> None:
        super().__init__(message)
        self.field = field
        self.path = path

    @property
    def pointer(self) -> str:
        """The failing location as a JSON pointer, e.g. ``/runs/0/tool``."""
        return "".join(f"/{part}" for part in self.path)


class MissingFieldError(DecodeError):
    """A required field is absent."""


class UnrecognizedFieldError(DecodeError):
    """A closed entity received a field it does not declare."""


class MalformedValueError(DecodeError):
    """A field value cannot be read as the declared type."""

    def __init__(
        self,
        message: str,
        *,
        field: str = "",
        path: tuple[str | int, ...] = (),
        detail: str = "",
    ) -> None:
        super().__init__(message, field=field, path=path)
        self.detail = detail
