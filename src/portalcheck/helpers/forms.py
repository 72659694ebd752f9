"""Form helpers: labelled inputs, buttons and submission."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from portalcheck.core.protocols import ElementQuery, LocatorHandle
from portalcheck.core.selectors import SelectorConfig
from portalcheck.helpers.base import css_string, permissive
from portalcheck.utils.exceptions import ElementNotFound

if TYPE_CHECKING:
    from portalcheck.core.session import Session

logger = logging.getLogger(__name__)

FORM_FIELDS = "input, textarea, select"


async def _input_for_label(session: Session, label_text: str) -> LocatorHandle:
    """Find the input a visible label points at, or one with that aria-label."""
    label = ElementQuery.css(f"label:has-text({css_string(label_text)})")
    targets = await session.locator.attributes(label, "for", limit=1)
    input_id = targets[0] if targets else None

    css = []
    if input_id:
        css.append(f"[id={css_string(input_id)}]")
    css.append(f"[aria-label={css_string(label_text)}]")

    handle = await session.locator.resolve_optional(SelectorConfig(css=tuple(css)))
    if handle is None:
        raise ElementNotFound(
            f"No input labelled {label_text!r}", queries=[f"css={c}" for c in css]
        )
    return handle


async def fill_form_input(session: Session, label_text: str, value: str) -> None:
    """Fill the input labelled ``label_text``.

    The input is the target of a ``<label for=...>`` whose text contains
    ``label_text``. If there is no such label, an input whose ``aria-label``
    equals ``label_text`` is used instead.

    Raises:
        ElementNotFound: If neither lookup finds an input.
    """
    handle = await _input_for_label(session, label_text)
    await session.executor.fill(handle, value)


async def submit_form(session: Session, form_selector: str = "form") -> None:
    """Click the submit button of the first matching form and wait for the page.

    Raises:
        ElementNotFound: If the form has no submit control.
    """
    submit = SelectorConfig(
        css=("button[type='submit']", "input[type='submit']"),
        within=form_selector,
    )
    handle = await session.locator.resolve(submit)
    await session.executor.click(handle)
    session.state.navigate()
    await session.await_settled()


async def click_button(session: Session, name: str) -> None:
    """Click the button whose accessible name contains ``name``."""
    handle = await session.locator.resolve(SelectorConfig(aria=("button", name)))
    await session.executor.click(handle)
    session.state.navigate()
    await session.await_settled()


async def clear_input(session: Session, selector: str) -> None:
    handle = await session.locator.resolve(ElementQuery.css(selector))
    await session.executor.clear(handle)


@permissive(False)
async def is_input_required(session: Session, selector: str) -> bool:
    values = await session.locator.attributes(
        ElementQuery.css(selector), "required", limit=1
    )
    return bool(values) and values[0] is not None


@permissive("")
async def get_input_value(session: Session, selector: str) -> str:
    handle = await session.locator.resolve_optional(ElementQuery.css(selector))
    if handle is None:
        return ""
    return await session.executor.input_value(handle)


@permissive(0)
async def form_input_count(session: Session, form_selector: str = "form") -> int:
    """Number of input, textarea and select controls inside the form."""
    return await session.locator.count(
        ElementQuery.css(FORM_FIELDS, within=form_selector)
    )
