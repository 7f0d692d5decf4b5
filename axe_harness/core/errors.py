"""Error taxonomy for the accessibility harness.

Every error surfaces to pytest as a failed test. Nothing here is retried.
"""


class HarnessError(Exception):
    """Base class for all harness errors."""


class FixtureNotFoundError(HarnessError, LookupError):
    def __init__(self, name: str, known: list[str] | None = None) -> None:
        self.name = name
        self.known = sorted(known or [])
        msg = f"Unknown fixture '{name}'"
        if self.known:
            msg += f" (known: {', '.join(self.known)})"
        super().__init__(msg)


class SessionStartError(HarnessError):
    """The browser could not be launched."""


class SessionClosedError(HarnessError):
    """The session was used after teardown began."""


class NavigationError(HarnessError):
    """The browser failed to load a document."""


class InvalidConfigurationError(HarnessError, ValueError):
    """A scan request or setting is malformed."""


class ConflictingScopeError(InvalidConfigurationError):
    """Explicit targets were combined with include/exclude selectors."""


class ScanExecutionError(HarnessError):
    """axe-core could not be injected, run, or its result parsed."""


class AssertionFailure(HarnessError, AssertionError):
    def __init__(self, message: str, expected=None, actual=None) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(message)
