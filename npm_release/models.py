"""Data models for npm-release.

These Pydantic models hold the plugin configuration and the choices
offered to the operator when picking a version bump.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator


def _drop_unset(data: Any) -> Any:
    """Remove None values so those fields fall back to their defaults."""
    if not isinstance(data, dict):
        return data
    return {k: v for k, v in data.items() if v is not None}


def _aliases(name: str, camel: str) -> AliasChoices:
    # Accept snake_case, camelCase (package.json style) and kebab-case (TOML style)
    return AliasChoices(name, camel, name.replace("_", "-"))


class DefaultsConfig(BaseModel):
    """Pre-selected answers for operator prompts.

    Attributes:
        choice: Bump kind highlighted when the prompt opens. Empty means
                no default.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    choice: str = ""

    @model_validator(mode="before")
    @classmethod
    def _unset_choice(cls, data: Any) -> Any:
        return _drop_unset(data)


class PluginConfig(BaseModel):
    """Configuration for the npm plugin.

    Every field has a default, so a partial mapping is merged field by
    field. The model is frozen once built.

    Attributes:
        tag_commit: Let ``npm version`` create a git tag.
        pre_release_id: Non-empty value enables the pre-release bump kinds.
        build_cmd: Shell command run before bumping.
        version_args: Extra arguments for ``npm version``.
        publish_args: Extra arguments for ``npm publish``.
        defaults: Pre-selected prompt answers.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    tag_commit: bool = Field(False, validation_alias=_aliases("tag_commit", "tagCommit"))
    pre_release_id: str = Field(
        "", validation_alias=_aliases("pre_release_id", "preReleaseId")
    )
    build_cmd: str = Field(
        "npm run build", validation_alias=_aliases("build_cmd", "buildCmd")
    )
    version_args: str = Field(
        "", validation_alias=_aliases("version_args", "versionArgs")
    )
    publish_args: str = Field(
        "", validation_alias=_aliases("publish_args", "publishArgs")
    )
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)

    @model_validator(mode="before")
    @classmethod
    def _fold_default_choice(cls, data: Any) -> Any:
        """Treat None as unset and move a flat ``defaultChoice`` key into
        ``defaults.choice``.
        """
        data = _drop_unset(data)
        if not isinstance(data, dict):
            return data
        flat_keys = [
            k for k in ("default_choice", "defaultChoice", "default-choice") if k in data
        ]
        if not flat_keys:
            return data
        data = dict(data)
        choice = data.pop(flat_keys[0])
        for extra in flat_keys[1:]:
            data.pop(extra)
        defaults = _drop_unset(dict(data.get("defaults") or {}))
        # An explicit defaults.choice wins over the flat key
        defaults.setdefault("choice", choice)
        data["defaults"] = defaults
        return data

    @property
    def default_choice(self) -> str:
        return self.defaults.choice


class Choice(BaseModel):
    """One entry offered to the interactive chooser.

    Attributes:
        name: Label shown to the operator.
        value: Value returned when this entry is picked.
        description: Short human-readable description.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    value: str
    description: str
