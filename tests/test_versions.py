"""Tests for npm_release.versions."""

from __future__ import annotations

import pytest

from npm_release.versions import (
    BASE_BUMP_KINDS,
    PRE_RELEASE_BUMP_KINDS,
    RELEASE_TYPES,
    available_bump_kinds,
    bump_choices,
    is_valid_bump_kind,
    npm_publish_command,
    npm_version_command,
)


class TestIsValidBumpKind:
    """Tests for is_valid_bump_kind()."""

    @pytest.mark.parametrize("kind", sorted(RELEASE_TYPES))
    def test_known_kinds(self, kind: str) -> None:
        assert is_valid_bump_kind(kind)

    @pytest.mark.parametrize(
        "candidate", ["", "Patch", "MAJOR", "patches", "minors", "pre", "1.0.0", None, 1]
    )
    def test_rejects_others(self, candidate: object) -> None:
        assert not is_valid_bump_kind(candidate)

    def test_release_types_is_closed_set_of_seven(self) -> None:
        assert RELEASE_TYPES == {
            "patch",
            "minor",
            "major",
            "prepatch",
            "preminor",
            "premajor",
            "prerelease",
        }


class TestAvailableBumpKinds:
    """Tests for available_bump_kinds()."""

    def test_base_only_without_pre_release_id(self) -> None:
        assert available_bump_kinds("") == ["patch", "minor", "major"]

    def test_pre_release_kinds_appended(self) -> None:
        assert available_bump_kinds("beta") == [
            *BASE_BUMP_KINDS,
            *PRE_RELEASE_BUMP_KINDS,
        ]


class TestBumpChoices:
    """Tests for bump_choices()."""

    def test_choice_fields(self) -> None:
        choices = bump_choices("")
        assert [(c.name, c.value, c.description) for c in choices] == [
            ("patch", "patch", "Patch"),
            ("minor", "minor", "Minor"),
            ("major", "major", "Major"),
        ]

    def test_pre_release_descriptions(self) -> None:
        descriptions = [c.description for c in bump_choices("rc")][3:]
        assert descriptions == ["Prepatch", "Preminor", "Premajor", "Prerelease"]


class TestCommandTemplates:
    """Tests for the npm command templates."""

    def test_version_with_args_and_tag(self) -> None:
        assert (
            npm_version_command("minor", "--no-verify", True)
            == "npm version minor --no-verify --git-tag-version=true"
        )

    def test_version_empty_args_keeps_flag(self) -> None:
        assert (
            npm_version_command("patch", "", False)
            == "npm version patch  --git-tag-version=false"
        )

    def test_version_flag_not_deduplicated(self) -> None:
        assert (
            npm_version_command("major", "--git-tag-version=true", False)
            == "npm version major --git-tag-version=true --git-tag-version=false"
        )

    def test_publish_with_args(self) -> None:
        assert npm_publish_command("--tag next") == "npm publish --tag next"

    def test_publish_without_args(self) -> None:
        assert npm_publish_command("") == "npm publish "
