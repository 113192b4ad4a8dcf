"""Token substitution: resolver and interceptors."""

from hipchat_resource.tokens.interceptors import (
    DEFAULT_CHAIN,
    InterceptorChain,
    TokenInterceptor,
    default_interceptor,
    truncating_interceptor,
)
from hipchat_resource.tokens.resolver import (
    TokenResolver,
    file_reference_path,
    is_file_reference,
    placeholder,
)

__all__ = [
    "DEFAULT_CHAIN",
    "InterceptorChain",
    "TokenInterceptor",
    "TokenResolver",
    "default_interceptor",
    "file_reference_path",
    "is_file_reference",
    "placeholder",
    "truncating_interceptor",
]
