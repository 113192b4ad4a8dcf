# -*- coding: utf-8 -*-
"""Token interceptors: per-token policies applied before substitution.

An interceptor is called as ``interceptor(key, value, accept, reject)`` and
must finish by calling exactly one of ``accept(key, value)`` (possibly with a
transformed value) or ``reject(key)``. Rejected tokens are removed from the
message.

Interceptors are chained by :class:`InterceptorChain`: ``accept`` hands the
value to the next interceptor, and the last ``accept`` is final.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Optional, Protocol

AcceptFn = Callable[[Any, Any], None]
RejectFn = Callable[[Any], None]

MAX_TRUNCATED_LENGTH = 75
ELLIPSIS = "..."

TRUNCATE_AT_NEWLINE_TOKENS = frozenset({"GIT_COMMIT_MESSAGE"})
TRUNCATE_AT_LENGTH_TOKENS = frozenset({"GIT_COMMIT_MESSAGE"})


class TokenInterceptor(Protocol):
    """Inspect, transform or veto one token value."""

    def __call__(self, key: Any, value: Any, accept: AcceptFn, reject: RejectFn) -> None:
        ...


def default_interceptor(key: Any, value: Any, accept: AcceptFn, reject: RejectFn) -> None:
    """Accept every token as-is (None key/value included)."""
    accept(key, value)


def truncating_interceptor(key: Any, value: Any, accept: AcceptFn, reject: RejectFn) -> None:
    """Shorten long token values.

    For keys in ``TRUNCATE_AT_NEWLINE_TOKENS`` the value is cut at its first
    line break. Then, for keys in ``TRUNCATE_AT_LENGTH_TOKENS``, a value longer
    than 75 characters keeps its first 75 characters followed by ``"..."``.
    Anything else (other keys, non-string key or value) is passed on unchanged.
    """
    if key and value and isinstance(key, str) and isinstance(value, str):
        if key in TRUNCATE_AT_NEWLINE_TOKENS:
            value = value.splitlines()[0]
        if key in TRUNCATE_AT_LENGTH_TOKENS and len(value) > MAX_TRUNCATED_LENGTH:
            value = value[:MAX_TRUNCATED_LENGTH] + ELLIPSIS

    default_interceptor(key, value, accept, reject)


@dataclass(frozen=True)
class InterceptorChain:
    """Ordered interceptors run for each token before substitution.

    New policies are added with :meth:`with_interceptor`, leaving the
    existing ones untouched.
    """

    interceptors: tuple[TokenInterceptor, ...] = (truncating_interceptor, default_interceptor)

    def with_interceptor(
        self,
        interceptor: TokenInterceptor,
        *,
        index: Optional[int] = None,
    ) -> InterceptorChain:
        """Return a new chain with ``interceptor`` inserted at ``index`` (default: first)."""
        items = list(self.interceptors)
        items.insert(0 if index is None else index, interceptor)
        return InterceptorChain(tuple(items))

    def intercept(self, key: Any, value: Any, accept: AcceptFn, reject: RejectFn) -> None:
        """Run ``key``/``value`` through the chain, ending in ``accept`` or ``reject``."""
        self._run(self.interceptors, key, value, accept, reject)

    def _run(
        self,
        remaining: Sequence[TokenInterceptor],
        key: Any,
        value: Any,
        accept: AcceptFn,
        reject: RejectFn,
    ) -> None:
        if not remaining:
            accept(key, value)
            return
        head, tail = remaining[0], remaining[1:]

        def proceed(next_key: Any, next_value: Any) -> None:
            self._run(tail, next_key, next_value, accept, reject)

        head(key, value, proceed, reject)


DEFAULT_CHAIN = InterceptorChain()
