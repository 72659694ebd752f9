"""Core module for portalcheck page interaction.

This module exports the element locator, action executor, session and the
value types they share. The browser lifecycle lives in
``portalcheck.core.browser``.
"""

from portalcheck.core.executor import ActionExecutor
from portalcheck.core.locator import ElementLocator
from portalcheck.core.protocols import (
    ActionResult,
    Cardinality,
    ElementQuery,
    LocatorHandle,
    Strategy,
)
from portalcheck.core.selectors import SelectorConfig
from portalcheck.core.session import Session
from portalcheck.core.states import SessionStateMachine

__all__ = [
    "ActionExecutor",
    "ActionResult",
    "Cardinality",
    "ElementLocator",
    "ElementQuery",
    "LocatorHandle",
    "SelectorConfig",
    "Session",
    "SessionStateMachine",
    "Strategy",
]
