"""Utilities module for portalcheck."""

from .config import AppConfig, ConfigLoader
from .events import EventLog, ScenarioEvent
from .exceptions import (
    AssertionFailed,
    BrowserLaunchError,
    ConfigurationError,
    ElementNotFound,
    NavigationError,
    PermanentError,
    PortalCheckError,
    Timeout,
    TransientError,
)

__all__ = [
    "AppConfig",
    "AssertionFailed",
    "BrowserLaunchError",
    "ConfigLoader",
    "ConfigurationError",
    "ElementNotFound",
    "EventLog",
    "NavigationError",
    "PermanentError",
    "PortalCheckError",
    "ScenarioEvent",
    "Timeout",
    "TransientError",
]
