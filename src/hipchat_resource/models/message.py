# -*- coding: utf-8 -*-
"""Message shapes accepted in the ``message`` param.

A message is either plain text or a ``{"template": ...}`` object. Composition
always works on the templated form.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True)
class PlainText:
    """Message given as a bare string."""

    text: str


@dataclass(frozen=True)
class Templated:
    """Message given as ``{"template": ...}``.

    ``template`` is kept as provided; a missing or non-string template is
    replaced by the default status text during composition.
    """

    template: Any = None


Message = Union[PlainText, Templated]


def as_message(raw: Any) -> Optional[Message]:
    """Wrap a raw ``message`` param value in its variant (None when unset)."""
    if raw is None:
        return None
    if isinstance(raw, (PlainText, Templated)):
        return raw
    if isinstance(raw, str):
        return PlainText(raw)
    if isinstance(raw, dict):
        return Templated(raw.get("template"))
    return Templated(raw)


def to_templated(message: Optional[Message]) -> Templated:
    """Normalize any message variant to the templated form."""
    if message is None:
        return Templated(None)
    if isinstance(message, PlainText):
        return Templated(message.text)
    return message


def message_text(message: Optional[Message]) -> Optional[str]:
    """Return the text to send, or None if the message has no usable text."""
    template = to_templated(message).template
    if isinstance(template, str) and template:
        return template
    return None
