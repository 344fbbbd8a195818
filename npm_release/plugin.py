"""Lifecycle hooks for releasing an npm package.

The host calls the hooks once per release, in this order:
1. pre_bump    - build the package and log the current version
2. bump        - ask for a bump kind and run ``npm version``
3. pre_publish - log the (bumped) version
4. publish     - run ``npm publish``

The plugin does not enforce the order; the host owns it.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from .collaborators import Collaborators
from .errors import InvalidBumpKindError, ManifestParseError
from .models import Choice, PluginConfig
from .versions import (
    BumpKind,
    bump_choices,
    is_valid_bump_kind,
    npm_publish_command,
    npm_version_command,
)

MANIFEST_PATH = "./package.json"
BUMP_QUESTION = "What type of update do you want to perform?"

HOOKS: tuple[str, ...] = ("pre_bump", "bump", "pre_publish", "publish")


class NpmPlugin:
    """Release hooks for an npm package.

    Args:
        collaborators: Host capabilities used for all I/O.
        config: A PluginConfig, or a partial mapping of config fields.
                Unset fields take their defaults.
    """

    name = "npm"

    def __init__(
        self,
        collaborators: Collaborators,
        config: PluginConfig | Mapping[str, Any] | None = None,
    ) -> None:
        if not isinstance(config, PluginConfig):
            config = PluginConfig.model_validate(dict(config or {}))
        self.config = config
        self._io = collaborators

    async def read_current_version(self) -> str:
        """Read the version from package.json.

        Raises:
            ManifestParseError: If the file is not a JSON object with a
                string "version" field.
        """
        data = await self._io.read(MANIFEST_PATH)

        try:
            manifest = json.loads(data)
        except json.JSONDecodeError as exc:
            raise ManifestParseError() from exc

        version = manifest.get("version") if isinstance(manifest, dict) else None
        if not isinstance(version, str):
            raise ManifestParseError("Failed to parse package json: no version field")
        return version

    async def log_current_version(self) -> None:
        version = await self.read_current_version()
        self._io.log(f"Package version: {version}")

    async def run_build(self) -> None:
        await self._io.exec(self.config.build_cmd)

    def is_valid_bump_kind(self, candidate: object) -> bool:
        """Check candidate against the full set of release types.

        This does not depend on pre_release_id: the prompt only offers
        the allowed subset, this only guards against unknown values.
        """
        return is_valid_bump_kind(candidate)

    def bump_choices(self) -> list[Choice]:
        return bump_choices(self.config.pre_release_id)

    async def prompt_bump_kind(self) -> BumpKind:
        """Ask the operator which kind of version bump to perform.

        Raises:
            InvalidBumpKindError: If the chooser returns an unknown value.
        """
        choice = await self._io.prompt_select(
            BUMP_QUESTION, self.bump_choices(), self.config.default_choice
        )
        if not self.is_valid_bump_kind(choice):
            raise InvalidBumpKindError(choice)
        return choice  # type: ignore[return-value]

    def version_command(self, kind: str) -> str:
        """Build the ``npm version`` command line for a bump kind.

        Raises:
            InvalidBumpKindError: If kind is not a known release type.
        """
        if not self.is_valid_bump_kind(kind):
            raise InvalidBumpKindError(kind)
        return npm_version_command(
            kind, self.config.version_args, self.config.tag_commit
        )

    def publish_command(self) -> str:
        return npm_publish_command(self.config.publish_args)

    async def pre_bump(self) -> None:
        """Build the package, then log its version."""
        await self.run_build()
        await self.log_current_version()

    async def bump(self) -> None:
        """Prompt for a bump kind and bump the package version."""
        kind = await self.prompt_bump_kind()
        await self._io.exec(self.version_command(kind))

    async def pre_publish(self) -> None:
        """Log the package version."""
        await self.log_current_version()

    async def publish(self) -> None:
        """Publish the package."""
        await self._io.exec(self.publish_command())
