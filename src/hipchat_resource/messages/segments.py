# -*- coding: utf-8 -*-
"""HTML markup for the opinionated message segments.

All markup keeps its ``${...}`` placeholders; they are filled in later by the
token resolver.
"""

from __future__ import annotations

from typing import Optional

SEGMENT_ENABLED = "enabled"
SEGMENT_DISABLED = "disabled"

SPACE = "&nbsp;"
SPACE_DOUBLE = SPACE + SPACE
NEWLINE = "<br>"
GIT_INFO_INDENT = "  "

_IMAGES = "${ATC_EXTERNAL_URL}/public/images"


def img(src: str, *, size: int = 16) -> str:
    """Return an ``<img>`` tag with an empty alt text."""
    return f'<img src="{src}" alt="" width="{size}" height="{size}">'


def href(text: str, url: str) -> str:
    """Return an ``<a>`` tag."""
    return f'<a href="{url}">{text}</a>'


def status_icon(icon_name: str) -> str:
    """Large favicon matching the build status (e.g. ``favicon-failed.png``)."""
    return img(f"{_IMAGES}/favicon-{icon_name}.png", size=24)


def url_to_team() -> str:
    return "${ATC_EXTERNAL_URL}/?search=team: ${BUILD_TEAM_NAME}"


def url_to_pipeline() -> str:
    return "${ATC_EXTERNAL_URL}/teams/${BUILD_TEAM_NAME}/pipelines/${BUILD_PIPELINE_NAME}"


def url_to_job() -> str:
    return url_to_pipeline() + "/jobs/${BUILD_JOB_NAME}/builds/${BUILD_NAME}"


def default_pipeline_info() -> str:
    """Team / pipeline / job breadcrumb, each linking back to Concourse."""
    return (
        img(f"{_IMAGES}/baseline-people-24px.svg")
        + href("<b>${BUILD_TEAM_NAME}</b>", url_to_team())
        + SPACE_DOUBLE
        + img(f"{_IMAGES}/ic-breadcrumb-pipeline.svg")
        + href("<b>${BUILD_PIPELINE_NAME}</b>", url_to_pipeline())
        + SPACE_DOUBLE
        + img(f"{_IMAGES}/ic-breadcrumb-job.svg")
        + href("<b>${BUILD_JOB_NAME} #${BUILD_NAME}</b>", url_to_job())
        + img(f"{_IMAGES}/baseline-keyboard-arrow-right-24px.svg")
    )


def default_git_info() -> str:
    """Committer and commit summary of the ``src`` input."""
    return (
        "Changes by ${GIT_COMMITTER}."
        + NEWLINE
        + "- [${GIT_SHORT_REF}] ${GIT_COMMIT_MESSAGE}"
    )


def _cli_download(platform: str, logo: str) -> str:
    return href(
        img(f"{_IMAGES}/{logo}"),
        f"${{ATC_EXTERNAL_URL}}/api/v1/cli?arch=amd64&platform={platform}",
    )


def default_fly_info() -> str:
    """Instructions for watching the build with the ``fly`` CLI."""
    terminal = img(f"{_IMAGES}/ic-terminal.svg")
    login = "<code>fly -t ${BUILD_TEAM_NAME} login ${ATC_EXTERNAL_URL} -n ${BUILD_TEAM_NAME} --insecure</code>"
    watch = "<code>fly -t ${BUILD_TEAM_NAME} watch -b ${BUILD_ID}</code>"
    return (
        "<i>To watch this build in your terminal using</i>&nbsp;<code><b>fly</b></code>"
        + SPACE_DOUBLE
        + _cli_download("darwin", "apple-logo-grey-ic.svg")
        + _cli_download("windows", "windows-logo-grey-ic.svg")
        + _cli_download("linux", "linxus-logo-grey-ic.svg")
        + NEWLINE
        + terminal
        + SPACE
        + login
        + NEWLINE
        + terminal
        + SPACE
        + watch
    )


def select_segment(override: Optional[str], default: str) -> str:
    """Pick the segment text for an override value.

    None or ``"enabled"`` -> ``default``; ``"disabled"`` -> ``""``; anything
    else is used verbatim. Matching is case-insensitive.
    """
    if override is None:
        return default
    lowered = override.lower()
    if lowered == SEGMENT_ENABLED:
        return default
    if lowered == SEGMENT_DISABLED:
        return ""
    return override


def is_disabled(override: Optional[str]) -> bool:
    return override is not None and override.lower() == SEGMENT_DISABLED
