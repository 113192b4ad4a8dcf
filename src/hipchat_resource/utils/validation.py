"""Validation and masking helpers."""

from __future__ import annotations

from typing import Any


def is_blank(value: Any) -> bool:
    """Return True if value is None or an empty/whitespace-only string."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def mask_secret(secret: str | None) -> str:
    """Return a masked secret for logging (e.g. ab12...yz89)."""
    if not secret or len(secret) < 10:
        return "***"
    return f"{secret[:4]}...{secret[-4:]}"
