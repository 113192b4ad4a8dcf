"""HipChat notification resource for Concourse: token templating, opinionated messages and delivery."""

from hipchat_resource.config import get_build_context, get_settings
from hipchat_resource.DI import Container
from hipchat_resource.messages import MessageComposer
from hipchat_resource.services import OutResource
from hipchat_resource.tokens import InterceptorChain, TokenResolver

__version__ = "0.1.0"
__all__ = [
    "Container",
    "InterceptorChain",
    "MessageComposer",
    "OutResource",
    "TokenResolver",
    "get_build_context",
    "get_settings",
]
