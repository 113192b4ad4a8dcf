# -*- coding: utf-8 -*-
"""
Entry point for the resource's ``out`` script.

Concourse runs ``out <root_dir>`` with ``{"source": ..., "params": ...}`` on
stdin and reads ``{"version": ...}`` from stdout. Logs go to stderr.

Run with: python -m hipchat_resource.main /tmp/build/put < request.json
"""
from __future__ import annotations

import asyncio
import json
import sys
import structlog
from typing import Optional, Sequence, TextIO

from pydantic import ValidationError

from hipchat_resource.DI import Container
from hipchat_resource.exceptions import HipChatResourceError, MissingRequiredConfigError
from hipchat_resource.logging.config import configure_logging
from hipchat_resource.models.resource import OutRequest
from hipchat_resource.services.out_resource import EXIT_FAILURE


async def run(
    argv: Optional[Sequence[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    container: Optional[Container] = None,
) -> int:
    """Run one ``out`` invocation and return the process exit code."""
    configure_logging()
    logger = structlog.get_logger("main")
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        logger.error("main_missing_root_dir", message="usage: out <root_dir>")
        raise MissingRequiredConfigError("root directory argument")
    root_dir = args[0]

    raw = (stdin or sys.stdin).read()
    try:
        request = OutRequest.model_validate_json(raw)
    except ValidationError as exc:
        logger.error(
            "main_invalid_request",
            error_count=exc.error_count(),
            errors=exc.errors(include_url=False, include_input=False),
        )
        return EXIT_FAILURE

    container = container or Container()
    out_resource = container.out_resource()
    http_client = container.http_client()
    try:
        result = await out_resource.run(request, root_dir)
    finally:
        await http_client.aclose()

    if result.version is not None:
        print(json.dumps({"version": result.version}), file=stdout or sys.stdout)
    logger.debug("main_out_complete", exit_code=result.exit_code)
    return result.exit_code


def main() -> None:
    try:
        exit_code = asyncio.run(run())
    except HipChatResourceError:
        exit_code = EXIT_FAILURE
    sys.exit(exit_code)


__all__ = ["run", "main"]

if __name__ == "__main__":
    main()
