# -*- coding: utf-8 -*-
"""Unit tests for MessageStatus and its defaults."""

from __future__ import annotations

import pytest

from hipchat_resource.models.status import STATUS_DEFAULTS, MessageStatus, defaults_for


@pytest.mark.parametrize("value", [s.value for s in MessageStatus])
def test_parse_supported_values(value: str) -> None:
    assert MessageStatus.parse(value) is MessageStatus(value)


@pytest.mark.parametrize("value", ["", "FAILED", "pr_", "unknown", "pr_unknown"])
def test_parse_unsupported_values(value: str) -> None:
    assert MessageStatus.parse(value) is None


def test_pull_request_variants_share_icon_and_style() -> None:
    for base in ("pending", "started", "succeeded", "failed", "aborted"):
        plain = defaults_for(MessageStatus(base))
        pr = defaults_for(MessageStatus(f"pr_{base}"))

        assert pr.icon_name == plain.icon_name == base
        assert pr.color == plain.color
        assert pr.notify == plain.notify
        assert pr.status_text == f"Pull Request {plain.status_text}"


def test_only_failures_notify_by_default() -> None:
    notifying = {status for status, defaults in STATUS_DEFAULTS.items() if defaults.notify}

    assert notifying == {MessageStatus.FAILED, MessageStatus.PR_FAILED}


def test_status_defaults_cover_every_status() -> None:
    assert set(STATUS_DEFAULTS) == set(MessageStatus)
