import pytest

from komocore.ahk import (
    AhkCommand,
    generate_ahk_function,
    generate_ahk_library,
    to_kebab_case,
)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("FocusWorkspace", "focus-workspace"),
        ("HTTPServer", "http-server"),
    ],
)
def test_to_kebab_case(name, expected):
    assert to_kebab_case(name) == expected


def test_to_kebab_case_is_idempotent_and_lowercase():
    for name in ["ResizeEdge", "CycleFocusMonitor", "BSP", "already-kebab"]:
        kebab = to_kebab_case(name)
        assert kebab == kebab.lower()
        assert to_kebab_case(kebab) == kebab


def test_to_kebab_case_single_word():
    assert to_kebab_case("Stop") == "stop"


def test_function_with_argument():
    text = generate_ahk_function("Focus", ["operation_direction"], [])
    assert text == (
        "\nFocus(operation_direction) {\n"
        "    RunWait, komorebic.exe focus %operation_direction%, , Hide\n"
        "}"
    )


def test_function_with_two_arguments_lists_them_in_order():
    text = generate_ahk_function("ResizeEdge", ["edge", "sizing"])
    assert text.startswith("\nResizeEdge(edge, sizing) {")
    assert "%edge% %sizing%, , Hide" in text
    assert f"komorebic.exe {to_kebab_case('ResizeEdge')} " in text
    assert text.endswith("\n}")


def test_function_with_flags():
    text = generate_ahk_function("Start", [], ["await_configuration"])
    assert text.startswith("\nStart(await_configuration) {")
    assert "--await-configuration %await_configuration%, , Hide" in text


def test_function_with_arguments_and_flags_puts_flags_last():
    text = generate_ahk_function("Run", ["target"], ["fast_mode"])
    assert "Run(target, fast_mode)" in text
    assert text.index("%target%") < text.index("--fast-mode")


def test_invalid_names_rejected():
    with pytest.raises(ValueError):
        generate_ahk_function("not a name", [], [])
    with pytest.raises(ValueError):
        generate_ahk_function("Focus", ["bad-arg"], [])


def test_unit_command_cannot_take_arguments():
    with pytest.raises(ValueError):
        AhkCommand("Stop", arguments=("x",), unit=True)


def test_unit_command_function():
    text = AhkCommand("Stop", unit=True).function()
    assert text == "\nStop() {\n    RunWait, komorebic.exe stop, , Hide\n}"


def test_library_joins_functions_after_header():
    commands = [
        AhkCommand("Stop", unit=True),
        AhkCommand("Focus", ("operation_direction",)),
    ]
    library = generate_ahk_library(commands)
    assert library.startswith("; Generated by komorebic.exe\n")
    for command in commands:
        assert command.function() in library
    assert library.index("Stop()") < library.index("Focus(")


def test_empty_library_is_header_only():
    assert generate_ahk_library([]) == "; Generated by komorebic.exe"