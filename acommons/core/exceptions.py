"""Custom exception classes for the library."""

from __future__ import annotations

from typing import Any, NoReturn, TypeVar

T = TypeVar("T")


class ACommonsException(Exception):
    """Base library exception.

    All custom exceptions should inherit from this class. Mirrors the
    shape of RFC 7807 Problem Details so errors can be rendered the same
    way by every caller (CLI, logs, JSON).

    Attributes:
        detail: Human-readable error message.
        type: Error type identifier.
        title: Short, human-readable summary of the problem type.
        extra: Additional context-specific information about the error.

    Example:
            raise ACommonsException(
            detail="Lock file is not writable",
            type="file-lock-error",
            extra={"path": "/var/lock/app.lock"}
        )
    """

    default_type = "about:blank"
    default_title = "Error"

    def __init__(
        self,
        detail: str,
        type: str | None = None,
        title: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        """Initialize library exception.

        Args:
            detail: Human-readable error message.
            type: Error type identifier. Defaults to the class default.
            title: Short summary of the problem type.
            extra: Additional context about the error.
        """
        self.detail = detail
        self.type = type or self.default_type
        self.title = title or self.default_title
        self.extra = extra or {}
        super().__init__(detail)

    def to_dict(self) -> dict[str, Any]:
        """Return the exception as a serializable dict."""
        return {
            "type": self.type,
            "title": self.title,
            "detail": self.detail,
            **self.extra,
        }


class ArgumentException(ACommonsException, ValueError):
    """Exception raised when a function receives an invalid argument.

    Example:
            raise ArgumentException(
            detail="delay must be >= 0",
            extra={"delay": -1}
        )
    """

    default_type = "invalid-argument"
    default_title = "Invalid Argument"


class NullArgumentException(ArgumentException):
    """Exception raised when a required argument is None."""

    default_type = "null-argument"
    default_title = "Null Argument"


class MustBeOverriddenException(ACommonsException, NotImplementedError):
    """Exception raised by abstract hooks that a subclass did not override."""

    default_type = "must-be-overridden"
    default_title = "Must Be Overridden"


class FileLockException(ACommonsException):
    """Exception raised when a lock file cannot be opened, locked or released.

    Example:
            raise FileLockException(
            detail="Timed out waiting for lock",
            extra={"path": "/tmp/app.lock", "timeout": 5.0}
        )
    """

    default_type = "file-lock-error"
    default_title = "File Lock Error"


class PunycodeException(ACommonsException, ValueError):
    """Exception raised when a label or domain cannot be converted."""

    default_type = "punycode-error"
    default_title = "Punycode Error"


class WildcardPatternException(ACommonsException, ValueError):
    """Exception raised for malformed wildcard patterns."""

    default_type = "invalid-wildcard"
    default_title = "Invalid Wildcard Pattern"


def require_not_none(value: T | None, name: str) -> T:
    """Return ``value`` or raise if it is None.

    Args:
        value: Value to check.
        name: Argument name used in the error message.

    Raises:
        NullArgumentException: If value is None.
    """
    if value is None:
        raise NullArgumentException(
            detail=f"Argument '{name}' must not be None",
            extra={"argument": name},
        )
    return value


def require_argument(condition: bool, detail: str, **extra: Any) -> None:
    """Raise ArgumentException with ``detail`` when ``condition`` is false."""
    if not condition:
        raise ArgumentException(detail=detail, extra=extra)


def must_be_overridden(instance: object, method_name: str) -> NoReturn:
    """Raise MustBeOverriddenException for ``instance.method_name``.

    Example:
            class Base:
            def run(self) -> None:
                must_be_overridden(self, "run")
    """
    cls_name = type(instance).__name__
    raise MustBeOverriddenException(
        detail=f"{cls_name}.{method_name}() must be overridden in a subclass",
        extra={"class": cls_name, "method": method_name},
    )
