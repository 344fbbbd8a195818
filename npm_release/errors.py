"""Errors raised by the npm plugin.

Failures coming from collaborators (file reads, command execution,
prompts) are not wrapped; they propagate as raised.
"""

from __future__ import annotations


class ReleasePluginError(Exception):
    """Base class for errors raised by the plugin itself."""


class ManifestParseError(ReleasePluginError):
    """The package manifest was read but could not be parsed."""

    def __init__(self, message: str = "Failed to parse package json") -> None:
        super().__init__(message)


class InvalidBumpKindError(ReleasePluginError):
    """A bump kind outside the known release types was selected."""

    def __init__(
        self, choice: object, message: str = "Must select a valid release type for bump"
    ) -> None:
        super().__init__(message)
        self.choice = choice
