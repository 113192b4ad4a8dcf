# -*- coding: utf-8 -*-
"""Resolve ``${NAME}`` placeholders in a message.

Resolution order:
1. Build tokens (BUILD_ID, BUILD_TEAM_NAME, ..., ATC_EXTERNAL_URL) from the
   build context; unset values become empty strings.
2. User tokens from the ``tokens`` param. Values are literals or
   ``file://`` references read relative to the root directory.
3. Each user token goes through the interceptor chain; accepted values are
   substituted, rejected tokens are removed from the message.

A token defined both by the build and by the user is substituted by the build
value first, so the user value never sees the placeholder. Errors never abort
resolution: a token that cannot be read is logged and left in place.
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Callable, Optional, Union
from urllib.parse import urlsplit

import structlog

from hipchat_resource.config import BuildContext
from hipchat_resource.tokens.interceptors import DEFAULT_CHAIN, InterceptorChain

FILE_SCHEME = "file"

RootDir = Optional[Union[str, Path]]


def placeholder(key: str) -> str:
    """Return the placeholder text for ``key`` (``FOO`` -> ``${FOO}``)."""
    return "${" + key + "}"


def is_file_reference(value: Any) -> bool:
    """True if ``value`` is a ``file://`` reference.

    Values that do not parse as a URL (e.g. an unbalanced ``[``) are literals.
    """
    if not isinstance(value, str):
        return False
    try:
        return urlsplit(value).scheme == FILE_SCHEME
    except ValueError:
        return False


def file_reference_path(root_dir: Union[str, Path], reference: str) -> Path:
    """Map ``file://<dir>/<name>`` (or ``file://<name>``) onto ``root_dir``."""
    parts = urlsplit(reference)
    path = parts.path if len(parts.path) > 1 else ""
    return Path(f"{root_dir}/{parts.netloc}{path}")


def replace_all(message: str, key: str, value: Any) -> str:
    """Replace every ``${key}`` in ``message``; None substitutes as ''."""
    return message.replace(placeholder(key), "" if value is None else str(value))


class TokenResolver:
    """Substitute build tokens and user tokens into message text."""

    def __init__(
        self,
        build_context: BuildContext,
        *,
        interceptors: InterceptorChain = DEFAULT_CHAIN,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        self._build_tokens = build_context.tokens()
        self._interceptors = interceptors
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def resolve(
        self,
        message: Any,
        user_tokens: Optional[Mapping[str, Any]] = None,
        root_dir: RootDir = None,
    ) -> Any:
        """Return ``message`` with every known placeholder resolved.

        A non-string or empty ``message`` is logged and returned unchanged.
        """
        if not isinstance(message, str) or not message:
            self._logger.error(
                "token_message_invalid",
                message_type=type(message).__name__,
            )
            return message

        message = self.replace_build_tokens(message)
        if not user_tokens:
            return message

        keys = list(user_tokens.keys())
        results = await asyncio.gather(
            *(self._load_value(key, user_tokens[key], root_dir) for key in keys)
        )

        accepted: dict[str, Any] = {}
        rejected: list[str] = []
        for key, (ok, value) in zip(keys, results):
            if not ok:
                continue
            self._interceptors.intercept(
                key,
                value,
                lambda k, v: accepted.__setitem__(k, v),
                rejected.append,
            )

        for key, value in accepted.items():
            message = replace_all(message, key, value)
        for key in rejected:
            self._logger.debug("token_rejected", token=key)
            message = replace_all(message, key, "")
        return message

    def replace_build_tokens(self, message: str) -> str:
        """Substitute the build context tokens."""
        for key, value in self._build_tokens.items():
            message = replace_all(message, key, value)
        return message

    async def _load_value(self, key: str, value: Any, root_dir: RootDir) -> tuple[bool, Any]:
        """Return (True, value) for literals and readable files, (False, None) on read errors."""
        if not is_file_reference(value):
            return True, value
        if root_dir is None:
            self._logger.error(
                "token_file_read_failed",
                token=key,
                reference=value,
                error_message="no root directory to resolve file reference against",
            )
            return False, None

        try:
            path = file_reference_path(root_dir, value)
            contents = await asyncio.to_thread(path.read_text, encoding="utf-8")
        except (OSError, ValueError) as exc:
            # UnicodeDecodeError is a ValueError
            self._logger.error(
                "token_file_read_failed",
                token=key,
                reference=value,
                error_type=type(exc).__name__,
                error_message=str(exc),
            )
            return False, None
        return True, contents
