# komocore

Core building blocks of a tiling window manager, usable without any window
system attached. Everything here is plain computation on rectangles, indices,
JSON and YAML.

## What is in the package

- `komocore.rect`: `Rect`, a rectangle whose `right` and `bottom` hold its
  width and height. `Rect.from_corners` builds one from absolute corners,
  `add_padding` shrinks it in place, `contains_point` hit-tests a point
  (edges included), and `to_dict` / `from_dict` convert to and from mappings.
- `komocore.default_layout`: `DefaultLayout` (`BSP`, `COLUMNS`, `ROWS`,
  `VERTICAL_STACK`, `HORIZONTAL_STACK`, `ULTRAWIDE_VERTICAL_STACK`) with
  directional navigation (`index_in_direction`, `is_valid_direction`,
  `up_index`, `down_index`, `left_index`, `right_index`) and BSP edge
  resizing (`resize`, which returns `None` for every other layout).
- `komocore.custom_layout`: user-defined column layouts. `CustomLayout` holds
  a list of `Column`s (`Primary`, `Secondary` or `Tertiary`, configured with
  `ColumnWidth`, `ColumnSplitWithCapacity` or `ColumnSplit`), checks itself
  with `is_valid`, maps containers to columns and navigates between them.
  `load_custom_layout` reads and validates a `.json`, `.yaml` or `.yml` file
  and raises `ValueError` for any other suffix or an invalid layout.
- `komocore.arrangement`: `calculate` returns the area of every container for
  a `DefaultLayout` or `CustomLayout`, with optional padding, flip axis and
  per-container resize adjustments. The helpers `columns`, `rows`,
  `recursive_fibonacci` and `calculate_resize_adjustments` are public too.
- `komocore.layout`: `Layout` wraps either kind of layout behind one
  `calculate` / `index_in_direction` interface and converts to and from its
  tagged form with `to_data` / `from_data`.
- `komocore.operation_direction`: `OperationDirection` with `opposite`,
  `flip` (for a flipped layout) and `destination`.
- `komocore.cycle_direction`: `CycleDirection.next_idx`, wrapping around at
  either end.
- `komocore.types`: the shared enumerations (`Axis`, `Sizing`,
  `ApplicationIdentifier`, `HidingBehaviour` and others) and the socket
  message protocol: `SocketMessage`, with `to_json` / `as_bytes`, and
  `parse_socket_message`, which raises `ValueError` for malformed messages.
- `komocore.config_generation`: reads a YAML list of application
  configurations and produces rule scripts: `generate_pwsh`, `generate_ahk`,
  `format_configurations` (sorted, re-serialised YAML),
  `merge_configurations` and `load_configurations`.
- `komocore.ahk`: builds an AutoHotkey function library for commands:
  `AhkCommand`, `generate_ahk_function`, `generate_ahk_library` and
  `to_kebab_case`.

## Installation

```
pip install .
```

## Examples

Tile four windows in a BSP layout on a 1920x1080 work area with 10 pixels of
padding:

```python
from komocore.arrangement import calculate
from komocore.default_layout import DefaultLayout
from komocore.rect import Rect

area = Rect(left=0, top=0, right=1920, bottom=1080)
for rect in calculate(DefaultLayout.BSP, area, 4, 10, None, []):
    print(rect)
```

Find where focus moves from container 2 of 4 when moving left:

```python
from komocore.default_layout import DefaultLayout
from komocore.operation_direction import OperationDirection

OperationDirection.LEFT.destination(DefaultLayout.BSP, None, 2, 4)  # 0
```

Load a custom layout and wrap it:

```python
from komocore.custom_layout import load_custom_layout
from komocore.layout import Layout

layout = Layout(load_custom_layout("layouts/three-column.yaml"))
```

Generate an AutoHotkey rules file from an application configuration
document:

```python
from pathlib import Path
from komocore.config_generation import generate_ahk

lines = generate_ahk(Path("applications.yaml").read_text(), None)
Path("rules.generated.ahk").write_text("\n".join(lines))
```

Encode and decode socket messages:

```python
from komocore.types import parse_socket_message

message = parse_socket_message('{"type": "FocusWindow", "content": "Left"}')
message.as_bytes()  # b'{"type":"FocusWindow","content":"Left"}'
```

Build an AutoHotkey command library:

```python
from komocore.ahk import AhkCommand, generate_ahk_library

print(generate_ahk_library([
    AhkCommand("Focus", ("operation_direction",)),
    AhkCommand("Stop", unit=True),
]))
```

## What this package does not do

It does not manage windows. There is no running window manager, no socket or
TCP server that receives `SocketMessage`s, no event listener, no window
borders and no command-line program; the package only computes layouts,
navigation, messages and generated scripts for such a program to use.

## Running the tests

```
pip install .[test]
pytest
```