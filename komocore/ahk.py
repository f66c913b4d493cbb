"""Generating an AutoHotkey function library for komorebic commands."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

LIBRARY_HEADER = "; Generated by komorebic.exe"


def _split_chunk(chunk: str) -> list[str]:
    words: list[str] = []
    start = 0
    mode: str | None = None
    for i, char in enumerate(chunk):
        if char.islower():
            next_mode = "lower"
        elif char.isupper():
            next_mode = "upper"
        else:
            next_mode = mode
        following = chunk[i + 1] if i + 1 < len(chunk) else ""
        if following:
            if next_mode == "lower" and following.isupper():
                words.append(chunk[start : i + 1])
                start = i + 1
                mode = None
                continue
            if mode == "upper" and char.isupper() and following.islower() and i > start:
                words.append(chunk[start:i])
                start = i
        mode = next_mode
    if start < len(chunk):
        words.append(chunk[start:])
    return words


def to_kebab_case(name: str) -> str:
    """Convert an identifier such as ``FocusWorkspace`` to ``focus-workspace``."""
    words = [
        word.lower()
        for chunk in re.split(r"[\W_]+", name)
        if chunk
        for word in _split_chunk(chunk)
    ]
    return "-".join(words)


def _check_identifier(name: str, what: str) -> None:
    if not isinstance(name, str) or not name.isidentifier():
        raise ValueError(f"{what} must be an identifier, not {name!r}")


def generate_ahk_function(
    name: str, arguments: Sequence[str] = (), flags: Sequence[str] = ()
) -> str:
    """Return an AutoHotkey function that runs the komorebic command ``name``.

    Arguments are passed positionally; flags are passed as ``--flag-name value``.
    """
    _check_identifier(name, "a command name")
    arguments = list(arguments)
    flags = list(flags)
    for item in (*arguments, *flags):
        _check_identifier(item, "an argument name")

    command = to_kebab_case(name)
    called = " ".join(f"%{argument}%" for argument in arguments)
    if flags:
        parameters = ", ".join(arguments + flags)
        flag_text = " ".join(f"--{flag.replace('_', '-')} %{flag}%" for flag in flags)
        body = f"RunWait, komorebic.exe {command} {called} {flag_text}, , Hide"
    else:
        parameters = ", ".join(arguments)
        body = f"RunWait, komorebic.exe {command} {called}, , Hide"
    return f"\n{name}({parameters}) {{\n    {body}\n}}"


def _generate_unit_function(name: str) -> str:
    _check_identifier(name, "a command name")
    return f"\n{name}() {{\n    RunWait, komorebic.exe {to_kebab_case(name)}, , Hide\n}}"


@dataclass(frozen=True)
class AhkCommand:
    """A komorebic command exposed as an AutoHotkey function.

    A ``unit`` command takes no options at all and is called by name alone.
    """

    name: str
    arguments: tuple[str, ...] = ()
    flags: tuple[str, ...] = ()
    unit: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "arguments", tuple(self.arguments))
        object.__setattr__(self, "flags", tuple(self.flags))
        if self.unit and (self.arguments or self.flags):
            raise ValueError("a unit command takes no arguments or flags")

    def function(self) -> str:
        """Return the AutoHotkey function for this command."""
        if self.unit:
            return _generate_unit_function(self.name)
        return generate_ahk_function(self.name, self.arguments, self.flags)


def generate_ahk_library(commands: Iterable[AhkCommand]) -> str:
    """Return a library holding one AutoHotkey function per command."""
    return "\n".join([LIBRARY_HEADER, *(command.function() for command in commands)])