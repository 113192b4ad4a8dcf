# -*- coding: utf-8 -*-
"""structlog setup for the ``out`` script.

stdout carries the JSON response Concourse reads, so console logs go to
stderr. Every event is tagged with the build it belongs to.
"""

from __future__ import annotations

import logging
import sys
import logfire
import structlog
from typing import Any
from structlog.types import EventDict, Processor
from pathlib import Path

from hipchat_resource.config import LoggingSettings, get_build_context, get_settings

LOG_LEVEL_TO_LOGFIRE: dict[str, str] = {
    "DEBUG": "debug",
    "INFO": "info",
    "WARNING": "warn",
    "ERROR": "error",
    "CRITICAL": "fatal",
}

# Build fields attached to log events (event key -> BuildContext attribute)
BUILD_LOG_FIELDS: dict[str, str] = {
    "build_id": "build_id",
    "build_team": "build_team_name",
    "build_pipeline": "build_pipeline_name",
    "build_job": "build_job_name",
    "build_name": "build_name",
}


def _add_resource_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Attach logger name, app name and the current build to every event."""
    stdlib_logger = getattr(logger, "_logger", None)
    event_dict["logger"] = (
        getattr(stdlib_logger, "name", None) or getattr(logger, "name", "") or ""
    )
    event_dict["app_name"] = get_settings().app.app_name
    build = get_build_context()
    for key, attribute in BUILD_LOG_FIELDS.items():
        value = getattr(build, attribute)
        if value:
            event_dict.setdefault(key, value)
    return event_dict


def _stdlib_handlers(settings: LoggingSettings) -> list[logging.Handler]:
    handlers: list[logging.Handler] = []
    if settings.log_to_console:
        console = logging.StreamHandler(sys.stderr)
        console.setLevel(settings.console_level)
        handlers.append(console)
    if settings.log_to_file:
        path = Path(settings.log_file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setLevel(settings.file_level)
        handlers.append(file_handler)
    for handler in handlers:
        handler.setFormatter(logging.Formatter("%(message)s"))
    return handlers


def _renderer(settings: LoggingSettings) -> Processor:
    # a log file is always JSON lines
    if settings.log_to_file or settings.json_format:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


def configure_logging() -> None:
    """Configure stdlib handlers, optional Logfire and the structlog chain."""
    settings = get_settings()
    logging_settings = settings.logging

    handlers = _stdlib_handlers(logging_settings)
    if handlers:
        logging.basicConfig(
            level=min(handler.level for handler in handlers),
            handlers=handlers,
            force=True,
        )

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        _add_resource_context,
    ]

    if logging_settings.logfire_enabled:
        logfire.configure(
            token=logging_settings.logfire_token,
            service_name=settings.app.service_name or settings.app.app_name,
            service_version=settings.app.service_version,
            min_level=LOG_LEVEL_TO_LOGFIRE[logging_settings.logfire_level],  # type: ignore[arg-type]
            environment=settings.app.environment,
        )
        processors.append(logfire.StructlogProcessor())  # type: ignore[arg-type]

    if handlers:
        processors.append(_renderer(logging_settings))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
