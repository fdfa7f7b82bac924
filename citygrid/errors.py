# citygrid/errors.py
from __future__ import annotations

from typing import Optional


class ParseError(ValueError):
    """Base class for OBJ/MTL grammar errors."""

    def __init__(self, message: str, line_no: Optional[int] = None) -> None:
        self.line_no = line_no
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)


class MalformedNumberError(ParseError):
    """A token that should be a float or int is not numeric."""


class NoActiveMaterialError(ParseError):
    """An MTL attribute appeared before any `newmtl`."""


class UnterminatedFaceError(ParseError):
    """An `f` line listed fewer than three vertices."""


class BadIndexError(ParseError):
    """A face index resolved outside its attribute pool."""


class EmptyInputError(ValueError):
    pass


class LayoutError(ValueError):
    pass


class InvalidConfigError(LayoutError):
    pass


class AssetLoadError(RuntimeError):
    """Raised when any asset of a batch fails to import."""

    def __init__(self, path: str, cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to load {path}: {cause}")
