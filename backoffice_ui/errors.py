"""Typed errors raised by the Page Object layer.

Scenarios never catch these; pytest reports the failing step with the
selector or label carried in the message.
"""

from __future__ import annotations


class UIError(Exception):
    """Base class for every error surfaced by page objects and helpers."""


class Timeout(UIError):
    """A bounded wait exceeded its deadline."""

    def __init__(self, message: str, *, selector: str = "", timeout: float = 0) -> None:
        super().__init__(message)
        self.selector = selector
        self.timeout = timeout


class ElementNotVisible(Timeout):
    """The element did not reach the expected visibility state in time."""

    def __init__(self, selector: str, timeout: float, state: str = "visible") -> None:
        super().__init__(
            f"Element '{selector}' not {state} after {timeout:g} ms",
            selector=selector,
            timeout=timeout,
        )
        self.state = state


class OptionNotFound(UIError):
    def __init__(self, selector: str, label: str, available: list[str] | None = None) -> None:
        available = available or []
        super().__init__(
            f"No option labelled '{label}' in '{selector}' (available: {available})"
        )
        self.selector = selector
        self.label = label
        self.available = available


class DownloadMissing(Timeout):
    def __init__(self, selector: str, reason: str = "", timeout: float = 0) -> None:
        message = f"No download was produced by clicking '{selector}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, selector=selector, timeout=timeout)


class DriverError(UIError):
    """Unrecoverable browser-layer failure (crash, disconnect, closed target)."""
