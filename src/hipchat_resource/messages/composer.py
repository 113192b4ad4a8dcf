# -*- coding: utf-8 -*-
"""Opinionated message composition driven by ``message_type``.

The composed body is, in order: status icon, pipeline breadcrumb, the
message text (or the status default), git commit summary and ``fly``
instructions. Each decorative segment can be overridden through
``message_type_config``. Placeholders are left in place for the token
resolver.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Optional, Union

import structlog

from hipchat_resource.messages import segments
from hipchat_resource.models.message import Message, Templated, to_templated
from hipchat_resource.models.resource import MessageTypeConfig, Params
from hipchat_resource.models.status import MessageStatus, StatusDefaults, defaults_for

DEFAULT_FROM = "Concourse CI"
UNKNOWN_GIT_VALUE = "<unknown>"

GIT_METADATA_DIR = ("src", ".git")
GIT_METADATA_FILES: dict[str, str] = {
    "GIT_COMMITTER": "committer",
    "GIT_SHORT_REF": "short_ref",
    "GIT_COMMIT_MESSAGE": "commit_message",
}

RootDir = Optional[Union[str, Path]]


class MessageComposer:
    """Apply status-driven defaults and markup to step params."""

    def __init__(
        self,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def compose(self, params: Params, root_dir: RootDir = None) -> Optional[Params]:
        """Return params with opinionated defaults applied.

        - No ``message_type``: ``params`` is returned unchanged.
        - Unsupported ``message_type``: an error is logged and None is returned
          (nothing was composed).
        - Otherwise ``from``, ``color`` and ``notify`` are filled in where the
          caller left them unset, the message is wrapped in markup, and git
          tokens may be added to ``tokens``.
        """
        if not params.message_type:
            return params

        status = MessageStatus.parse(params.message_type)
        if status is None:
            self._logger.error(
                "message_type_unsupported",
                message_type=params.message_type,
            )
            return None

        defaults = defaults_for(status)
        tokens = dict(params.tokens)
        body = self.render(
            defaults,
            params.parsed_message,
            params.message_type_config,
            root_dir,
            tokens,
        )
        self._logger.debug(
            "message_composed",
            message_type=status.value,
            git_tokens_added=sorted(set(tokens) - set(params.tokens)),
        )
        return params.model_copy(
            update={
                "from_": params.from_ or DEFAULT_FROM,
                "color": params.color or defaults.color,
                "notify": defaults.notify if params.notify is None else params.notify,
                "message": Templated(body),
                "tokens": tokens,
            }
        )

    def render(
        self,
        defaults: StatusDefaults,
        message: Optional[Message],
        config: Optional[MessageTypeConfig],
        root_dir: RootDir,
        tokens: dict[str, Any],
    ) -> str:
        """Build the decorated message body.

        ``tokens`` is updated in place with git metadata references when the
        git segment is rendered.
        """
        config = config or MessageTypeConfig()

        template = to_templated(message).template
        text = template if isinstance(template, str) and template else defaults.status_text

        pipeline_info = segments.select_segment(
            config.pipeline_info, segments.default_pipeline_info()
        )

        git_info = ""
        if not segments.is_disabled(config.git_info) and self.add_git_tokens(root_dir, tokens):
            git_info = segments.select_segment(config.git_info, segments.default_git_info())
        if git_info:
            git_info = segments.GIT_INFO_INDENT + git_info

        fly_info = segments.select_segment(config.fly_info, segments.default_fly_info())
        if fly_info:
            fly_info = segments.NEWLINE + fly_info

        return (
            segments.status_icon(defaults.icon_name)
            + pipeline_info
            + text
            + git_info
            + fly_info
        )

    def add_git_tokens(self, root_dir: RootDir, tokens: dict[str, Any]) -> bool:
        """Point the GIT_* tokens at ``<root>/src/.git/*`` metadata files.

        Tokens already set by the caller are kept, even empty ones. A missing
        file gives ``<unknown>`` for its token. Returns False (and adds
        nothing) when no metadata file exists.
        """
        if all(name in tokens for name in GIT_METADATA_FILES):
            return True
        if root_dir is None:
            return False

        git_dir = Path(root_dir).joinpath(*GIT_METADATA_DIR)
        present = {
            name: (git_dir / filename).is_file()
            for name, filename in GIT_METADATA_FILES.items()
        }
        if not any(present.values()):
            self._logger.debug("git_metadata_not_found", git_dir=str(git_dir))
            return False

        relative_dir = "/".join(GIT_METADATA_DIR)
        for name, filename in GIT_METADATA_FILES.items():
            if name in tokens:
                continue
            if present[name]:
                tokens[name] = f"file://{relative_dir}/{filename}"
            else:
                self._logger.warning(
                    "git_metadata_file_missing",
                    token=name,
                    path=str(git_dir / filename),
                )
                tokens[name] = UNKNOWN_GIT_VALUE
        return True
