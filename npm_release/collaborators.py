"""Capabilities the host hands to the plugin.

The plugin never touches the filesystem, a subprocess or the terminal
directly. It calls these four functions instead, which keeps the hook
logic testable with plain fakes.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from .models import Choice

ReadFile = Callable[[str], Awaitable[str]]
ExecCommand = Callable[[str], Awaitable[None]]
PromptSelect = Callable[[str, list[Choice], str], Awaitable[str]]
Log = Callable[[str], None]


@dataclass(frozen=True)
class Collaborators:
    """Bundle of host capabilities.

    Attributes:
        read: Return the text of a file; raise OSError if unreadable.
        exec: Run a shell command line; raise if it exits non-zero.
        prompt_select: Ask the operator to pick one of the choices and
                       return its value. The third argument is the
                       pre-selected value ("" for none).
        log: Emit an informational message.
    """

    read: ReadFile
    exec: ExecCommand
    prompt_select: PromptSelect
    log: Log
