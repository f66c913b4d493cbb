import pytest

from komocore.config_generation import (
    ApplicationConfiguration,
    ApplicationOptions,
    generate_ahk,
    generate_pwsh,
    load_configurations,
    format_configurations,
    merge_configurations,
)
from komocore.types import ApplicationIdentifier

BASE = """
- name: Firefox
  identifier:
    kind: exe
    id: firefox.exe
  options:
    - object_name_change
    - tray_and_multi_window
  float_identifiers:
    - kind: class
      id: MozillaDialogClass
      comment: dialogs
- name: Alpha
  identifier:
    kind: exe
    id: alpha.exe
  options:
    - force
  float_identifiers:
    - kind: class
      id: MozillaDialogClass
"""

OVERRIDE = """
- name: Alpha
  identifier:
    kind: class
    id: AlphaWindow
- name: Zeta
  identifier:
    kind: title
    id: Zeta Window
"""


def test_raw_cfgen_for_object_name_change():
    line = ApplicationOptions.OBJECT_NAME_CHANGE.raw_cfgen(
        ApplicationIdentifier.EXE, "firefox.exe"
    )
    assert line == 'komorebic.exe identify-object-name-change-application exe "firefox.exe"'


def test_raw_cfgen_for_force_is_manage_rule():
    line = ApplicationOptions.FORCE.raw_cfgen(ApplicationIdentifier.CLASS, "X")
    assert line.startswith("komorebic.exe manage-rule class ")
    assert line.endswith('"X"')


def test_cfgen_wraps_raw_command():
    option = ApplicationOptions.LAYERED
    raw = option.raw_cfgen(ApplicationIdentifier.TITLE, "t")
    wrapped = option.cfgen(ApplicationIdentifier.TITLE, "t")
    assert wrapped.startswith("RunWait('")
    assert raw in wrapped
    assert wrapped.endswith(', , "Hide")')


def test_load_configurations_reads_fields():
    apps = load_configurations(BASE)
    assert [app.name for app in apps] == ["Firefox", "Alpha"]
    firefox = apps[0]
    assert firefox.identifier.kind is ApplicationIdentifier.EXE
    assert firefox.identifier.id == "firefox.exe"
    assert firefox.options == [
        ApplicationOptions.OBJECT_NAME_CHANGE,
        ApplicationOptions.TRAY_AND_MULTI_WINDOW,
    ]
    assert firefox.float_identifiers[0].comment == "dialogs"
    assert apps[1].float_identifiers[0].comment is None


def test_optional_fields_default_to_none():
    apps = load_configurations(OVERRIDE)
    assert apps[0].options is None
    assert apps[0].float_identifiers is None


@pytest.mark.parametrize(
    "content",
    [
        "not: [a list",
        "name: single",
        "- name: A\n  identifier:\n    kind: window\n    id: a\n",
        "- name: A\n  identifier:\n    kind: exe\n    id: a\n  options: [sparkle]\n",
        "- identifier:\n    kind: exe\n    id: a\n",
    ],
)
def test_invalid_content_raises(content):
    with pytest.raises(ValueError):
        load_configurations(content)


def test_format_sorts_and_round_trips():
    formatted = format_configurations(BASE)
    reloaded = load_configurations(formatted)
    assert [app.name for app in reloaded] == ["Alpha", "Firefox"]
    original = sorted(load_configurations(BASE), key=lambda app: app.name)
    assert reloaded == original
    assert format_configurations(formatted) == formatted


def test_format_omits_missing_optional_fields():
    formatted = format_configurations(OVERRIDE)
    assert "options" not in formatted
    assert "float_identifiers" not in formatted


def test_merge_replaces_by_name_and_appends_new():
    merged = merge_configurations(BASE, OVERRIDE)
    assert [app.name for app in merged] == ["Firefox", "Alpha", "Zeta"]
    alpha = merged[1]
    assert isinstance(alpha, ApplicationConfiguration)
    assert alpha.identifier.kind is ApplicationIdentifier.CLASS
    assert alpha.options is None


def test_generate_pwsh_structure():
    lines = generate_pwsh(BASE)
    assert lines[:2] == ["# Generated by komorebic.exe", ""]
    assert lines.index("# Alpha") < lines.index("# Firefox")
    tray = ApplicationOptions.TRAY_AND_MULTI_WINDOW.raw_cfgen(
        ApplicationIdentifier.EXE, "firefox.exe"
    )
    tray_idx = lines.index(tray)
    assert lines[tray_idx - 1].startswith("# If you have disabled minimize/close to tray")
    assert lines[-1] == ""


def test_generate_pwsh_deduplicates_float_rules():
    lines = generate_pwsh(BASE)
    rule = 'komorebic.exe float-rule class "MozillaDialogClass"'
    assert lines.count(rule) == 1
    # The rule first appears under Alpha, which has no comment for it.
    assert "# dialogs" not in lines


def test_generate_pwsh_with_override():
    lines = generate_pwsh(BASE, OVERRIDE)
    assert "# Zeta" in lines
    assert (
        ApplicationOptions.FORCE.raw_cfgen(ApplicationIdentifier.EXE, "alpha.exe")
        not in lines
    )


def test_generate_ahk_structure():
    lines = generate_ahk(BASE)
    assert lines[:2] == ["; Generated by komorebic.exe", ""]
    assert lines.index("; Alpha") < lines.index("; Firefox")
    force = ApplicationOptions.FORCE.cfgen(ApplicationIdentifier.EXE, "alpha.exe")
    assert force in lines
    float_rules = [line for line in lines if "float-rule" in line]
    assert len(float_rules) == 1
    assert float_rules[0].startswith("RunWait('komorebic.exe float-rule class ")


def test_generate_line_counts_match_between_formats():
    assert len(generate_ahk(BASE, OVERRIDE)) == len(generate_pwsh(BASE, OVERRIDE))