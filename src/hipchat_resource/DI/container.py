# -*- coding: utf-8 -*-
"""Dependency injection container (dependency-injector)."""

from __future__ import annotations

from dependency_injector import containers, providers

from hipchat_resource.clients.hipchat_client import HipChatClient
from hipchat_resource.clients.http import AsyncHttpClient
from hipchat_resource.config import get_build_context, get_settings
from hipchat_resource.messages.composer import MessageComposer
from hipchat_resource.services.out_resource import OutResource
from hipchat_resource.tokens.interceptors import DEFAULT_CHAIN
from hipchat_resource.tokens.resolver import TokenResolver


class Container(containers.DeclarativeContainer):
    """Application container. Wires settings, build context, HTTP client and the out step."""

    config = providers.Callable(get_settings)

    build_context = providers.Callable(get_build_context)

    http_client = providers.Singleton(
        AsyncHttpClient,
        settings=config,
    )

    hipchat_client = providers.Singleton(
        HipChatClient,
        http_client=http_client,
    )

    interceptors = providers.Object(DEFAULT_CHAIN)

    token_resolver = providers.Singleton(
        TokenResolver,
        build_context=build_context,
        interceptors=interceptors,
    )

    message_composer = providers.Singleton(MessageComposer)

    out_resource = providers.Singleton(
        OutResource,
        composer=message_composer,
        resolver=token_resolver,
        hipchat_client=hipchat_client,
    )
