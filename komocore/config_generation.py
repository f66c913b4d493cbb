"""Generating komorebic rule scripts from application configuration YAML."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

import yaml

from .types import ApplicationIdentifier

_TRAY_NOTE = (
    "If you have disabled minimize/close to tray for this application, "
    "you can delete/comment out the next line"
)


class ApplicationOptions(Enum):
    OBJECT_NAME_CHANGE = "object_name_change"
    LAYERED = "layered"
    BORDER_OVERFLOW = "border_overflow"
    TRAY_AND_MULTI_WINDOW = "tray_and_multi_window"
    FORCE = "force"

    def __str__(self) -> str:
        return self.value

    def raw_cfgen(self, kind: ApplicationIdentifier, id_: str) -> str:
        """Return the komorebic command line that applies this option."""
        return f'komorebic.exe {_COMMANDS[self]} {kind} "{id_}"'

    def cfgen(self, kind: ApplicationIdentifier, id_: str) -> str:
        """Return the AutoHotkey statement that runs the command hidden."""
        return f"RunWait('{self.raw_cfgen(kind, id_)}', , \"Hide\")"


_COMMANDS = {
    ApplicationOptions.OBJECT_NAME_CHANGE: "identify-object-name-change-application",
    ApplicationOptions.LAYERED: "identify-layered-application",
    ApplicationOptions.BORDER_OVERFLOW: "identify-border-overflow-application",
    ApplicationOptions.TRAY_AND_MULTI_WINDOW: "identify-tray-application",
    ApplicationOptions.FORCE: "manage-rule",
}


@dataclass
class IdWithIdentifier:
    kind: ApplicationIdentifier
    id: str


@dataclass
class IdWithIdentifierAndComment:
    kind: ApplicationIdentifier
    id: str
    comment: str | None = None


@dataclass
class ApplicationConfiguration:
    name: str
    identifier: IdWithIdentifier
    options: list[ApplicationOptions] | None = None
    float_identifiers: list[IdWithIdentifierAndComment] | None = None


def _mapping(raw: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(raw, Mapping):
        raise ValueError(f"{what} must be a mapping, not {raw!r}")
    return raw


def _string(data: Mapping[str, Any], key: str, what: str) -> str:
    if key not in data:
        raise ValueError(f"{what} is missing the field {key!r}")
    value = data[key]
    if not isinstance(value, str):
        raise ValueError(f"{what} field {key!r} must be a string, not {value!r}")
    return value


def _kind(data: Mapping[str, Any], what: str) -> ApplicationIdentifier:
    return ApplicationIdentifier.from_str(_string(data, "kind", what))


def _optional_list(data: Mapping[str, Any], key: str) -> list[Any] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        raise ValueError(f"field {key!r} must be a list, not {value!r}")
    return value


def _option(raw: Any) -> ApplicationOptions:
    try:
        return ApplicationOptions(raw)
    except ValueError:
        raise ValueError(f"unknown application option {raw!r}") from None


def _float_identifier(raw: Any) -> IdWithIdentifierAndComment:
    data = _mapping(raw, "a float identifier")
    comment = data.get("comment")
    if comment is not None and not isinstance(comment, str):
        raise ValueError(f"a comment must be a string, not {comment!r}")
    return IdWithIdentifierAndComment(
        kind=_kind(data, "a float identifier"),
        id=_string(data, "id", "a float identifier"),
        comment=comment,
    )


def _configuration(raw: Any) -> ApplicationConfiguration:
    data = _mapping(raw, "an application configuration")
    if "identifier" not in data:
        raise ValueError("an application configuration is missing the field 'identifier'")
    ident = _mapping(data["identifier"], "an identifier")
    options = _optional_list(data, "options")
    floats = _optional_list(data, "float_identifiers")
    return ApplicationConfiguration(
        name=_string(data, "name", "an application configuration"),
        identifier=IdWithIdentifier(
            kind=_kind(ident, "an identifier"), id=_string(ident, "id", "an identifier")
        ),
        options=None if options is None else [_option(o) for o in options],
        float_identifiers=None if floats is None else [_float_identifier(f) for f in floats],
    )


def _configuration_to_data(app: ApplicationConfiguration) -> dict[str, Any]:
    data: dict[str, Any] = {
        "name": app.name,
        "identifier": {"kind": app.identifier.kind.value, "id": app.identifier.id},
    }
    if app.options is not None:
        data["options"] = [option.value for option in app.options]
    if app.float_identifiers is not None:
        floats = []
        for entry in app.float_identifiers:
            item: dict[str, Any] = {"kind": entry.kind.value, "id": entry.id}
            if entry.comment is not None:
                item["comment"] = entry.comment
            floats.append(item)
        data["float_identifiers"] = floats
    return data


def load_configurations(content: str) -> list[ApplicationConfiguration]:
    """Parse a YAML list of application configurations, raising ValueError if invalid."""
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as error:
        raise ValueError(f"invalid application configuration yaml: {error}") from error
    if not isinstance(data, list):
        raise ValueError("application configurations must be a list")
    return [_configuration(item) for item in data]


def format_configurations(content: str) -> str:
    """Return the configurations sorted by name and re-serialised as YAML."""
    configurations = sorted(load_configurations(content), key=lambda app: app.name)
    return yaml.safe_dump(
        [_configuration_to_data(app) for app in configurations],
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )


def merge_configurations(
    base_content: str, override_content: str
) -> list[ApplicationConfiguration]:
    """Apply overrides to the base list: entries with a base entry's name replace it."""
    base = load_configurations(base_content)
    overrides = load_configurations(override_content)
    merged = list(base)
    for entry in overrides:
        matches = [idx for idx, existing in enumerate(base) if existing.name == entry.name]
        if matches:
            merged[matches[-1]] = entry
        else:
            merged.append(entry)
    return merged


def _sorted_configurations(
    base_content: str, override_content: str | None
) -> list[ApplicationConfiguration]:
    if override_content is not None:
        configurations = merge_configurations(base_content, override_content)
    else:
        configurations = load_configurations(base_content)
    return sorted(configurations, key=lambda app: app.name)


def _generate(
    base_content: str,
    override_content: str | None,
    comment_prefix: str,
    option_line,
    float_line,
) -> list[str]:
    lines = [f"{comment_prefix} Generated by komorebic.exe", ""]
    seen_float_rules: set[str] = set()

    for app in _sorted_configurations(base_content, override_content):
        lines.append(f"{comment_prefix} {app.name}")
        for option in app.options or ():
            if option is ApplicationOptions.TRAY_AND_MULTI_WINDOW:
                lines.append(f"{comment_prefix} {_TRAY_NOTE}")
            lines.append(option_line(option, app.identifier.kind, app.identifier.id))

        for entry in app.float_identifiers or ():
            rule = float_line(entry.kind, entry.id)
            if rule in seen_float_rules:
                continue
            seen_float_rules.add(rule)
            if entry.comment is not None:
                lines.append(f"{comment_prefix} {entry.comment}")
            lines.append(rule)

        lines.append("")

    return lines


def generate_pwsh(base_content: str, override_content: str | None = None) -> list[str]:
    """Return the lines of a PowerShell script applying every configuration."""
    return _generate(
        base_content,
        override_content,
        "#",
        ApplicationOptions.raw_cfgen,
        lambda kind, id_: f'komorebic.exe float-rule {kind} "{id_}"',
    )


def generate_ahk(base_content: str, override_content: str | None = None) -> list[str]:
    """Return the lines of an AutoHotkey script applying every configuration."""
    return _generate(
        base_content,
        override_content,
        ";",
        ApplicationOptions.cfgen,
        lambda kind, id_: f"RunWait('komorebic.exe float-rule {kind} \"{id_}\"', , \"Hide\")",
    )