"""Version bump kinds and npm command templates.

The set of bump kinds is closed and declared here explicitly:
- "patch", "minor", "major" are always offered
- "prepatch", "preminor", "premajor", "prerelease" are offered only when
  a pre-release identifier is configured
"""

from __future__ import annotations

from typing import Literal

from .models import Choice

BumpKind = Literal[
    "patch", "minor", "major", "prepatch", "preminor", "premajor", "prerelease"
]

BASE_BUMP_KINDS: tuple[BumpKind, ...] = ("patch", "minor", "major")
PRE_RELEASE_BUMP_KINDS: tuple[BumpKind, ...] = (
    "prepatch",
    "preminor",
    "premajor",
    "prerelease",
)
RELEASE_TYPES: frozenset[str] = frozenset(BASE_BUMP_KINDS + PRE_RELEASE_BUMP_KINDS)


def is_valid_bump_kind(candidate: object) -> bool:
    """Return True if candidate is exactly one of the known release types.

    Matching is exact: "Patch", "patches" and "" are all rejected.
    """
    return isinstance(candidate, str) and candidate in RELEASE_TYPES


def available_bump_kinds(pre_release_id: str) -> list[BumpKind]:
    """List the bump kinds to offer, base kinds first."""
    kinds = list(BASE_BUMP_KINDS)
    if pre_release_id:
        kinds.extend(PRE_RELEASE_BUMP_KINDS)
    return kinds


def bump_choices(pre_release_id: str) -> list[Choice]:
    """Build the ordered prompt entries for the available bump kinds."""
    return [
        Choice(name=kind, value=kind, description=kind.capitalize())
        for kind in available_bump_kinds(pre_release_id)
    ]


def npm_version_command(kind: str, version_args: str, tag_commit: bool) -> str:
    """Render the ``npm version`` command line.

    The tag flag is always emitted, even when version_args is empty or
    already carries its own git-tag flag:
        npm_version_command("patch", "", False)
        → "npm version patch  --git-tag-version=false"
    """
    tag_flag = "--git-tag-version=true" if tag_commit else "--git-tag-version=false"
    return f"npm version {kind} {version_args} {tag_flag}"


def npm_publish_command(publish_args: str) -> str:
    """Render the ``npm publish`` command line."""
    return f"npm publish {publish_args}"
