"""Shared enumerations and the socket message protocol."""

from __future__ import annotations

import dataclasses
import json
from enum import Enum
from pathlib import Path, PurePath
from typing import Any

from .rect import Rect


class _WireEnum(Enum):
    """Enum whose value is its snake_case display name.

    ``wire_name`` is the name used inside socket messages.
    """

    def __str__(self) -> str:
        return self.value

    @property
    def wire_name(self) -> str:
        return "".join(part.capitalize() for part in self.value.split("_"))

    @classmethod
    def from_str(cls, text: str):
        """Parse the snake_case display name."""
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"{text!r} is not a valid {cls.__name__}") from None

    @classmethod
    def from_wire(cls, name: str):
        """Parse the name used inside socket messages."""
        for member in cls:
            if member.wire_name == name:
                return member
        raise ValueError(f"{name!r} is not a valid {cls.__name__}")


class Axis(_WireEnum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    HORIZONTAL_AND_VERTICAL = "horizontal_and_vertical"


class WindowKind(_WireEnum):
    SINGLE = "single"
    STACK = "stack"
    MONOCLE = "monocle"


class StateQuery(_WireEnum):
    FOCUSED_MONITOR_INDEX = "focused_monitor_index"
    FOCUSED_WORKSPACE_INDEX = "focused_workspace_index"
    FOCUSED_CONTAINER_INDEX = "focused_container_index"
    FOCUSED_WINDOW_INDEX = "focused_window_index"


class ApplicationIdentifier(_WireEnum):
    EXE = "exe"
    CLASS = "class"
    TITLE = "title"

    @property
    def wire_name(self) -> str:
        return self.value


class FocusFollowsMouseImplementation(_WireEnum):
    KOMOREBI = "komorebi"
    WINDOWS = "windows"


class WindowContainerBehaviour(_WireEnum):
    CREATE = "create"
    APPEND = "append"


class MoveBehaviour(_WireEnum):
    SWAP = "swap"
    INSERT = "insert"


class HidingBehaviour(_WireEnum):
    HIDE = "hide"
    MINIMIZE = "minimize"
    CLOAK = "cloak"


class OperationBehaviour(_WireEnum):
    OP = "op"
    NO_OP = "no_op"


class Sizing(_WireEnum):
    INCREASE = "increase"
    DECREASE = "decrease"

    def adjust_by(self, value: int, adjustment: int) -> int:
        """Apply the adjustment; a decrease never takes the value below zero."""
        if self is Sizing.INCREASE:
            return value + adjustment
        if value > 0 and value - adjustment >= 0:
            return value - adjustment
        return value


_LOCAL_ENUMS: dict[str, type[_WireEnum]] = {
    cls.__name__: cls
    for cls in (
        Axis,
        WindowKind,
        StateQuery,
        ApplicationIdentifier,
        FocusFollowsMouseImplementation,
        WindowContainerBehaviour,
        MoveBehaviour,
        HidingBehaviour,
        OperationBehaviour,
        Sizing,
    )
}


def _enum_type(name: str) -> type[_WireEnum]:
    if name == "OperationDirection":
        from .operation_direction import OperationDirection

        return OperationDirection
    if name == "CycleDirection":
        from .cycle_direction import CycleDirection

        return CycleDirection
    if name == "DefaultLayout":
        from .default_layout import DefaultLayout

        return DefaultLayout
    return _LOCAL_ENUMS[name]


_INT_RANGES = {
    "usize": (0, 2**64 - 1),
    "u32": (0, 2**32 - 1),
    "i32": (-(2**31), 2**31 - 1),
}

_U, _I, _B, _S, _P = "usize", "i32", "bool", "str", "path"
_AI, _CD, _OD, _DL = (
    "ApplicationIdentifier",
    "CycleDirection",
    "OperationDirection",
    "DefaultLayout",
)

_SIGNATURES: dict[str, tuple[str, ...]] = {
    "FocusWindow": (_OD,),
    "MoveWindow": (_OD,),
    "CycleFocusWindow": (_CD,),
    "CycleMoveWindow": (_CD,),
    "StackWindow": (_OD,),
    "ResizeWindowEdge": (_OD, "Sizing"),
    "ResizeWindowAxis": ("Axis", "Sizing"),
    "UnstackWindow": (),
    "CycleStack": (_CD,),
    "MoveContainerToMonitorNumber": (_U,),
    "CycleMoveContainerToMonitor": (_CD,),
    "MoveContainerToWorkspaceNumber": (_U,),
    "MoveContainerToNamedWorkspace": (_S,),
    "CycleMoveContainerToWorkspace": (_CD,),
    "SendContainerToMonitorNumber": (_U,),
    "CycleSendContainerToMonitor": (_CD,),
    "SendContainerToWorkspaceNumber": (_U,),
    "CycleSendContainerToWorkspace": (_CD,),
    "SendContainerToMonitorWorkspaceNumber": (_U, _U),
    "SendContainerToNamedWorkspace": (_S,),
    "MoveWorkspaceToMonitorNumber": (_U,),
    "SwapWorkspacesToMonitorNumber": (_U,),
    "ForceFocus": (),
    "Close": (),
    "Minimize": (),
    "Promote": (),
    "PromoteFocus": (),
    "ToggleFloat": (),
    "ToggleMonocle": (),
    "ToggleMaximize": (),
    "ToggleWindowContainerBehaviour": (),
    "WindowHidingBehaviour": ("HidingBehaviour",),
    "ToggleCrossMonitorMoveBehaviour": (),
    "CrossMonitorMoveBehaviour": ("MoveBehaviour",),
    "UnmanagedWindowOperationBehaviour": ("OperationBehaviour",),
    "ManageFocusedWindow": (),
    "UnmanageFocusedWindow": (),
    "AdjustContainerPadding": ("Sizing", _I),
    "AdjustWorkspacePadding": ("Sizing", _I),
    "ChangeLayout": (_DL,),
    "ChangeLayoutCustom": (_P,),
    "FlipLayout": ("Axis",),
    "MonitorIndexPreference": (_U, _I, _I, _I, _I),
    "EnsureWorkspaces": (_U, _U),
    "EnsureNamedWorkspaces": (_U, "strs"),
    "NewWorkspace": (),
    "ToggleTiling": (),
    "Stop": (),
    "TogglePause": (),
    "Retile": (),
    "QuickSave": (),
    "QuickLoad": (),
    "Save": (_P,),
    "Load": (_P,),
    "CycleFocusMonitor": (_CD,),
    "CycleFocusWorkspace": (_CD,),
    "FocusMonitorNumber": (_U,),
    "FocusWorkspaceNumber": (_U,),
    "FocusWorkspaceNumbers": (_U,),
    "FocusMonitorWorkspaceNumber": (_U, _U),
    "FocusNamedWorkspace": (_S,),
    "ContainerPadding": (_U, _U, _I),
    "NamedWorkspaceContainerPadding": (_S, _I),
    "WorkspacePadding": (_U, _U, _I),
    "NamedWorkspacePadding": (_S, _I),
    "WorkspaceTiling": (_U, _U, _B),
    "NamedWorkspaceTiling": (_S, _B),
    "WorkspaceName": (_U, _U, _S),
    "WorkspaceLayout": (_U, _U, _DL),
    "NamedWorkspaceLayout": (_S, _DL),
    "WorkspaceLayoutCustom": (_U, _U, _P),
    "NamedWorkspaceLayoutCustom": (_S, _P),
    "WorkspaceLayoutRule": (_U, _U, _U, _DL),
    "NamedWorkspaceLayoutRule": (_S, _U, _DL),
    "WorkspaceLayoutCustomRule": (_U, _U, _U, _P),
    "NamedWorkspaceLayoutCustomRule": (_S, _U, _P),
    "ClearWorkspaceLayoutRules": (_U, _U),
    "ClearNamedWorkspaceLayoutRules": (_S,),
    "ReloadConfiguration": (),
    "WatchConfiguration": (_B,),
    "CompleteConfiguration": (),
    "AltFocusHack": (_B,),
    "ActiveWindowBorder": (_B,),
    "ActiveWindowBorderColour": ("WindowKind", "u32", "u32", "u32"),
    "ActiveWindowBorderWidth": (_I,),
    "ActiveWindowBorderOffset": (_I,),
    "InvisibleBorders": ("Rect",),
    "WorkAreaOffset": ("Rect",),
    "MonitorWorkAreaOffset": (_U, "Rect"),
    "ResizeDelta": (_I,),
    "InitialWorkspaceRule": (_AI, _S, _U, _U),
    "InitialNamedWorkspaceRule": (_AI, _S, _S),
    "WorkspaceRule": (_AI, _S, _U, _U),
    "NamedWorkspaceRule": (_AI, _S, _S),
    "FloatRule": (_AI, _S),
    "ManageRule": (_AI, _S),
    "IdentifyObjectNameChangeApplication": (_AI, _S),
    "IdentifyTrayApplication": (_AI, _S),
    "IdentifyLayeredApplication": (_AI, _S),
    "IdentifyBorderOverflowApplication": (_AI, _S),
    "State": (),
    "Query": ("StateQuery",),
    "FocusFollowsMouse": ("FocusFollowsMouseImplementation", _B),
    "ToggleFocusFollowsMouse": ("FocusFollowsMouseImplementation",),
    "MouseFollowsFocus": (_B,),
    "ToggleMouseFollowsFocus": (),
    "RemoveTitleBar": (_AI, _S),
    "ToggleTitleBars": (),
    "AddSubscriber": (_S,),
    "RemoveSubscriber": (_S,),
    "NotificationSchema": (),
    "SocketSchema": (),
}


def _coerce(token: str, value: Any) -> Any:
    if token in _INT_RANGES:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"expected an integer, got {value!r}")
        low, high = _INT_RANGES[token]
        if not low <= value <= high:
            raise ValueError(f"{value} is out of range for {token}")
        return value
    if token == "bool":
        if not isinstance(value, bool):
            raise TypeError(f"expected a bool, got {value!r}")
        return value
    if token == "str":
        if not isinstance(value, str):
            raise TypeError(f"expected a string, got {value!r}")
        return value
    if token == "path":
        if not isinstance(value, (str, PurePath)):
            raise TypeError(f"expected a path, got {value!r}")
        return Path(value)
    if token == "strs":
        if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
            raise TypeError(f"expected a list of strings, got {value!r}")
        return tuple(value)
    if token == "Rect":
        if not isinstance(value, Rect):
            raise TypeError(f"expected a Rect, got {value!r}")
        return dataclasses.replace(value)
    enum_type = _enum_type(token)
    if not isinstance(value, enum_type):
        raise TypeError(f"expected a {token}, got {value!r}")
    return value


def _encode(token: str, value: Any) -> Any:
    if token == "path":
        return str(value)
    if token == "strs":
        return list(value)
    if token == "Rect":
        return value.to_dict()
    if isinstance(value, _WireEnum):
        return value.wire_name
    return value


def _decode(token: str, raw: Any) -> Any:
    if token == "path" and not isinstance(raw, str):
        raise ValueError(f"expected a path string, got {raw!r}")
    if token == "strs" and not isinstance(raw, list):
        raise ValueError(f"expected a list of strings, got {raw!r}")
    if token == "Rect":
        return Rect.from_dict(raw)
    if token in _INT_RANGES or token in ("bool", "str", "path", "strs"):
        return raw
    if not isinstance(raw, str):
        raise ValueError(f"expected a {token} name, got {raw!r}")
    return _enum_type(token).from_wire(raw)


class SocketMessage:
    """A command sent to the window manager over its socket."""

    __slots__ = ("kind", "args")

    def __init__(self, kind: str, *args: Any) -> None:
        try:
            signature = _SIGNATURES[kind]
        except KeyError:
            raise ValueError(f"unknown socket message {kind!r}") from None
        if len(args) != len(signature):
            raise ValueError(
                f"{kind} takes {len(signature)} argument(s), {len(args)} given"
            )
        self.kind = kind
        self.args = tuple(_coerce(token, value) for token, value in zip(signature, args))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SocketMessage):
            return NotImplemented
        return self.kind == other.kind and self.args == other.args

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        inner = ", ".join(repr(a) for a in (self.kind, *self.args))
        return f"SocketMessage({inner})"

    def __str__(self) -> str:
        return self.kind

    def to_json(self) -> str:
        """Serialise to the compact JSON form used on the wire."""
        signature = _SIGNATURES[self.kind]
        payload: dict[str, Any] = {"type": self.kind}
        encoded = [_encode(token, value) for token, value in zip(signature, self.args)]
        if len(signature) == 1:
            payload["content"] = encoded[0]
        elif signature:
            payload["content"] = encoded
        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)

    def as_bytes(self) -> bytes:
        """Return the UTF-8 encoded JSON form."""
        return self.to_json().encode("utf-8")


def parse_socket_message(text: str | bytes) -> SocketMessage:
    """Parse a socket message from its JSON form, raising ValueError if invalid."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as error:
        raise ValueError(f"invalid socket message: {error}") from error
    if not isinstance(data, dict) or not isinstance(data.get("type"), str):
        raise ValueError("a socket message must be an object with a string 'type'")
    kind = data["type"]
    if kind not in _SIGNATURES:
        raise ValueError(f"unknown socket message {kind!r}")
    signature = _SIGNATURES[kind]
    if not signature:
        if data.get("content") is not None:
            raise ValueError(f"{kind} takes no content")
        return SocketMessage(kind)
    if "content" not in data:
        raise ValueError(f"{kind} requires content")
    content = data["content"]
    if len(signature) == 1:
        raw_args = [content]
    else:
        if not isinstance(content, list) or len(content) != len(signature):
            raise ValueError(f"{kind} requires a list of {len(signature)} values")
        raw_args = content
    try:
        args = [_decode(token, raw) for token, raw in zip(signature, raw_args)]
        return SocketMessage(kind, *args)
    except TypeError as error:
        raise ValueError(f"invalid content for {kind}: {error}") from error