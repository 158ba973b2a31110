# topmark:header:start
#
#   project      : HiCat
#   file         : test_config_resolution.py
#   file_relpath : tests/config/test_config_resolution.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for config discovery, parsing and merge precedence."""

from __future__ import annotations

import re
from pathlib import Path

import pytest

from hicat.config import Config, ConfigValueError, MutableConfig
from hicat.config.io import load_defaults_dict, to_toml
from hicat.constants import DEFAULT_THEME
from hicat.core.diagnostics import DiagnosticLevel
from tests.conftest import parametrize


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults_freeze_to_all_off() -> None:
    cfg: Config = MutableConfig.from_defaults().freeze()
    assert not cfg.number_lines
    assert not cfg.squeeze_blank
    assert not cfg.show_non_printing
    assert not cfg.syntax_highlight
    assert not cfg.background
    assert cfg.language is None
    assert cfg.theme == DEFAULT_THEME
    assert cfg.config_files == ("<defaults>",)
    assert cfg.diagnostics == ()


def test_empty_builder_freezes_like_defaults() -> None:
    a: Config = MutableConfig().freeze()
    b: Config = MutableConfig.from_defaults().freeze()
    assert a.to_toml_dict() == b.to_toml_dict()


def test_hicat_toml_is_parsed(tmp_path: Path) -> None:
    path: Path = _write(
        tmp_path / "hicat.toml",
        """
[render]
number_lines = true
squeeze_blank = true

[highlight]
language = "python"
theme = "  "
""",
    )
    draft: MutableConfig | None = MutableConfig.from_toml_file(path)
    assert draft is not None
    assert draft.number_lines is True
    assert draft.squeeze_blank is True
    assert draft.show_non_printing is None
    assert draft.language == "python"
    assert draft.theme is None
    assert draft.config_files == [path]


def test_pyproject_tool_table_is_used(tmp_path: Path) -> None:
    path: Path = _write(
        tmp_path / "pyproject.toml",
        """
[project]
name = "demo"

[tool.hicat.render]
syntax_highlight = true

[tool.hicat.highlight]
theme = "friendly"
""",
    )
    draft: MutableConfig | None = MutableConfig.from_toml_file(path)
    assert draft is not None
    assert draft.syntax_highlight is True
    assert draft.theme == "friendly"


def test_pyproject_without_tool_table_is_ignored(tmp_path: Path) -> None:
    path: Path = _write(tmp_path / "pyproject.toml", '[project]\nname = "demo"\n')
    assert MutableConfig.from_toml_file(path) is None


def test_pyproject_tool_hicat_must_be_a_table(tmp_path: Path) -> None:
    path: Path = _write(tmp_path / "pyproject.toml", '[tool]\nhicat = "yes"\n')
    with pytest.raises(ConfigValueError):
        MutableConfig.from_toml_file(path)


@parametrize("text", ['tool = "hicat"\n', "tool = [1, 2]\n"])
def test_pyproject_tool_must_be_a_table(tmp_path: Path, text: str) -> None:
    path: Path = _write(tmp_path / "pyproject.toml", text)
    with pytest.raises(ConfigValueError, match=r"\[tool\] must be a table"):
        MutableConfig.from_toml_file(path)


def test_malformed_toml_raises(tmp_path: Path) -> None:
    path: Path = _write(tmp_path / "hicat.toml", "[render\nnumber_lines = true\n")
    with pytest.raises(ConfigValueError, match="Invalid TOML"):
        MutableConfig.from_toml_file(path)


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigValueError, match="Cannot read"):
        MutableConfig.from_toml_file(tmp_path / "hicat.toml")


@parametrize(
    "text",
    [
        "[render]\nnumber_lines = 1\n",
        '[render]\nsqueeze_blank = "yes"\n',
        "[highlight]\ntheme = 3\n",
        "render = true\n",
        'root = "true"\n',
    ],
)
def test_wrongly_typed_values_raise(tmp_path: Path, text: str) -> None:
    path: Path = _write(tmp_path / "hicat.toml", text)
    with pytest.raises(ConfigValueError, match=re.escape(str(path))):
        MutableConfig.from_toml_file(path)


def test_unknown_keys_become_warnings(tmp_path: Path) -> None:
    path: Path = _write(
        tmp_path / "hicat.toml",
        "colour = 1\n[render]\nnumber = true\n[highlight]\nstyle = 'x'\n",
    )
    draft: MutableConfig | None = MutableConfig.from_toml_file(path)
    assert draft is not None
    messages: list[str] = [d.message for d in draft.diagnostics]
    assert all(d.level == DiagnosticLevel.WARNING for d in draft.diagnostics)
    assert len(messages) == 3
    assert any("'colour'" in m for m in messages)
    assert any("'render.number'" in m for m in messages)
    assert any("'highlight.style'" in m for m in messages)


def test_discovery_orders_root_most_first(tmp_path: Path) -> None:
    top: Path = _write(tmp_path / "a" / "hicat.toml", "root = true\n")
    mid_py: Path = _write(tmp_path / "a" / "b" / "pyproject.toml", "[tool.hicat]\n")
    mid: Path = _write(tmp_path / "a" / "b" / "hicat.toml", "")
    leaf: Path = tmp_path / "a" / "b" / "c"
    leaf.mkdir()

    found: list[Path] = MutableConfig.discover_local_config_files(leaf)
    assert found == [top.resolve(), mid_py.resolve(), mid.resolve()]


def test_discovery_stops_at_root(tmp_path: Path) -> None:
    _write(tmp_path / "hicat.toml", "[render]\nnumber_lines = true\n")
    inner: Path = _write(tmp_path / "inner" / "hicat.toml", "root = true\n")

    found: list[Path] = MutableConfig.discover_local_config_files(inner.parent)
    assert found == [inner.resolve()]


def test_discovery_honors_root_in_pyproject(tmp_path: Path) -> None:
    _write(tmp_path / "hicat.toml", "")
    inner: Path = _write(tmp_path / "inner" / "pyproject.toml", "[tool.hicat]\nroot = true\n")

    assert MutableConfig.discover_local_config_files(inner.parent) == [inner.resolve()]


def test_nearest_config_wins(tmp_path: Path) -> None:
    _write(
        tmp_path / "hicat.toml",
        "root = true\n[render]\nnumber_lines = true\nsqueeze_blank = true\n",
    )
    inner: Path = _write(tmp_path / "inner" / "hicat.toml", "[render]\nnumber_lines = false\n")

    cfg: Config = MutableConfig.load_merged(anchor=inner.parent).freeze()
    assert cfg.number_lines is False
    assert cfg.squeeze_blank is True


def test_user_config_is_lowest_file_layer(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    xdg: Path = tmp_path / "xdg"
    user: Path = _write(
        xdg / "hicat" / "hicat.toml",
        "[render]\nsyntax_highlight = true\n[highlight]\ntheme = 'friendly'\n",
    )
    monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg))
    proj: Path = tmp_path / "proj"
    _write(proj / "hicat.toml", "root = true\n[highlight]\ntheme = 'vim'\n")

    assert MutableConfig.discover_user_config_file() == user
    cfg: Config = MutableConfig.load_merged(anchor=proj).freeze()
    assert cfg.syntax_highlight is True
    assert cfg.theme == "vim"
    assert cfg.config_files[0] == "<defaults>"
    assert cfg.config_files[1] == user


def test_no_config_skips_discovery_but_keeps_extra_files(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    proj: Path = tmp_path / "proj"
    _write(proj / "hicat.toml", "root = true\n[render]\nnumber_lines = true\n")
    extra: Path = _write(tmp_path / "extra.toml", "[render]\nsqueeze_blank = true\n")

    cfg: Config = MutableConfig.load_merged(
        anchor=proj, extra_config_files=[extra], no_config=True
    ).freeze()
    assert cfg.number_lines is False
    assert cfg.squeeze_blank is True
    assert cfg.config_files == ("<defaults>", extra)


def test_extra_config_files_override_discovered(isolation: Path, tmp_path: Path) -> None:
    _write(isolation / "hicat.toml", "root = true\n[highlight]\ntheme = 'vim'\n")
    extra: Path = _write(tmp_path / "extra.toml", "[highlight]\ntheme = 'friendly'\n")

    cfg: Config = MutableConfig.load_merged(extra_config_files=[extra]).freeze()
    assert cfg.theme == "friendly"


def test_merge_is_last_explicit_value_wins() -> None:
    low = MutableConfig(number_lines=True, theme="vim", language="c")
    high = MutableConfig(number_lines=False, language=None)
    merged: MutableConfig = low.merge_with(high)
    assert merged.number_lines is False
    assert merged.theme == "vim"
    assert merged.language == "c"


def test_merge_concatenates_provenance_and_diagnostics() -> None:
    low = MutableConfig(config_files=["a"])
    low.diagnostics.warning("first")
    high = MutableConfig(config_files=["b"])
    high.diagnostics.warning("second")

    merged: MutableConfig = low.merge_with(high)
    assert merged.config_files == ["a", "b"]
    assert [d.message for d in merged.diagnostics] == ["first", "second"]
    assert [d.message for d in merged.freeze().diagnostics] == ["first", "second"]


def test_cli_args_override_only_explicit_values() -> None:
    draft = MutableConfig(number_lines=True, squeeze_blank=True, theme="vim")
    draft.apply_cli_args(
        {"number_lines": None, "squeeze_blank": False, "theme": "friendly", "files": ["x"]}
    )
    assert draft.number_lines is True
    assert draft.squeeze_blank is False
    assert draft.theme == "friendly"
    assert draft.config_files[-1] == "<CLI overrides>"


def test_to_toml_drops_unset_language() -> None:
    text: str = to_toml(MutableConfig.from_defaults().freeze().to_toml_dict())
    assert "language" not in text
    assert f'theme = "{DEFAULT_THEME}"' in text


def test_defaults_dict_covers_render_keys() -> None:
    data = load_defaults_dict()
    assert set(data["render"]) == {
        "number_lines",
        "squeeze_blank",
        "show_non_printing",
        "syntax_highlight",
    }
