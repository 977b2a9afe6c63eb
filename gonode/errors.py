"""Generation-time errors.

Every error raised while loading configuration, parsing Go sources or
emitting bindings derives from ``GonodeError``. Any of them aborts the whole
run: the pipeline never writes partial output.
"""

from __future__ import annotations


class GonodeError(Exception):
    """Base class for all generation-time failures."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        declaration: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.file_path = file_path
        self.declaration = declaration

    @property
    def location(self) -> str:
        """``file:declaration`` for whatever parts of the location are known."""
        parts = [p for p in (self.file_path, self.declaration) if p]
        return ":".join(parts)

    def __str__(self) -> str:
        if self.location:
            return f"{self.location}: {self.message}"
        return self.message


class ConfigError(GonodeError):
    """The project configuration is missing or malformed."""


class ParseError(GonodeError):
    """A source file could not be parsed."""


class UnsupportedTypeError(GonodeError):
    """A type expression has no boundary type."""

    def __init__(
        self,
        raw_type: str,
        file_path: str | None = None,
        declaration: str | None = None,
    ):
        super().__init__(f"unsupported type: {raw_type}", file_path, declaration)
        self.raw_type = raw_type


class MultipleReturnValuesError(GonodeError):
    """An exported function declares more than one result."""

    def __init__(
        self,
        count: int,
        file_path: str | None = None,
        declaration: str | None = None,
    ):
        super().__init__(
            f"an exported function can only have one return value (found {count})",
            file_path,
            declaration,
        )
        self.count = count


class UnsupportedReturnTypeError(GonodeError):
    """An emitter has no conversion rule for a return type."""
