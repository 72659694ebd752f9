"""Exception hierarchy for portalcheck."""


class PortalCheckError(Exception):
    """Base exception for all portalcheck errors."""


class TransientError(PortalCheckError):
    """Retry-able errors such as slow pages or elements that have not rendered."""


class PermanentError(PortalCheckError):
    """Non-retry-able errors that require configuration or code changes."""


class ConfigurationError(PermanentError):
    """Invalid or missing configuration."""


class BrowserLaunchError(PermanentError):
    """The browser engine could not be started.

    Usually means the Playwright browsers have not been installed
    (``playwright install chromium``).
    """

    def __init__(self, browser: str) -> None:
        """Initialize BrowserLaunchError with the engine name.

        Args:
            browser: Name of the browser engine that failed to start.
        """
        self.browser = browser
        super().__init__(
            f"Cannot launch {browser}. Is it installed? "
            f"Try: playwright install {browser}"
        )


class ElementNotFound(TransientError):  # noqa: N818
    """A query resolved to zero elements where one was required."""

    def __init__(self, message: str, queries: list[str] | None = None) -> None:
        self.queries = queries or []
        super().__init__(message)


class Timeout(TransientError):  # noqa: N818
    """An action or settle-wait exceeded its time bound."""

    def __init__(self, message: str, target: str | None = None) -> None:
        self.target = target
        super().__init__(message)


class NavigationError(TransientError):
    """Page navigation failed, may succeed on retry."""


class AssertionFailed(PortalCheckError, AssertionError):  # noqa: N818
    """An observed value violates an expected page invariant."""
