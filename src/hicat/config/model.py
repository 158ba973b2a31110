# topmark:header:start
#
#   project      : HiCat
#   file         : model.py
#   file_relpath : src/hicat/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot read by the render pipeline.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      is frozen into `Config` once all layers are merged.

Tri-state fields:
    Every option is ``bool | None`` (or ``str | None``) on the builder. ``None``
    means "inherit from the previous layer"; merging is last-wins for explicit
    values. `MutableConfig.freeze` turns remaining ``None`` flags into ``False``.

Merge order (lowest → highest precedence), see `MutableConfig.load_merged`:
    1) Built-in defaults
    2) User config (``$XDG_CONFIG_HOME/hicat/hicat.toml``)
    3) Project configs discovered upward, root-most first
    4) Extra config files passed explicitly via ``--config``
    5) CLI overrides (`MutableConfig.apply_cli_args`)
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from hicat.config.io import (
    HIGHLIGHT_KEYS,
    KEY_ROOT,
    RENDER_KEYS,
    SECTION_HIGHLIGHT,
    SECTION_RENDER,
    ConfigValueError,
    get_bool_value_or_none,
    get_string_value_or_none,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
    unknown_keys,
)
from hicat.config.logging import get_logger
from hicat.constants import DEFAULT_THEME, HICAT_TOML_NAME, PYPROJECT_TOML_NAME
from hicat.core.diagnostics import Diagnostic, DiagnosticLog

if TYPE_CHECKING:
    from hicat.config.io import TomlTable
    from hicat.config.logging import HicatLogger

# ArgsLike: generic mapping accepted by config loaders (CLI params or API dicts).
ArgsLike = Mapping[str, Any]

logger: HicatLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for one HiCat invocation.

    Attributes:
        number_lines (bool): Prefix every non-blank output line with its number.
        squeeze_blank (bool): Collapse runs of blank lines into one.
        show_non_printing (bool): Replace the six control characters with mnemonics.
        syntax_highlight (bool): Color output with 24-bit terminal escapes.
        language (str | None): Explicit grammar name; overrides file name detection.
        theme (str): Color theme name.
        background (bool): Also paint the theme's background color.
        config_files (tuple[Path | str, ...]): Config sources that were merged.
        diagnostics (tuple[Diagnostic, ...]): Warnings collected while loading config.
    """

    number_lines: bool = False
    squeeze_blank: bool = False
    show_non_printing: bool = False
    syntax_highlight: bool = False

    language: str | None = None
    theme: str = DEFAULT_THEME
    background: bool = False

    config_files: tuple[Path | str, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()

    def to_toml_dict(self) -> TomlTable:
        """Convert this config into a TOML-serializable dict (``hicat.toml`` schema)."""
        return {
            SECTION_RENDER: {
                "number_lines": self.number_lines,
                "squeeze_blank": self.squeeze_blank,
                "show_non_printing": self.show_non_printing,
                "syntax_highlight": self.syntax_highlight,
            },
            SECTION_HIGHLIGHT: {
                "language": self.language,
                "theme": self.theme,
                "background": self.background,
            },
        }


# -------------------------- Mutable builder --------------------------
@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    TOML I/O is delegated to `hicat.config.io` to keep this class focused on
    merge policy.
    """

    number_lines: bool | None = None
    squeeze_blank: bool | None = None
    show_non_printing: bool | None = None
    syntax_highlight: bool | None = None

    language: str | None = None
    theme: str | None = None
    background: bool | None = None

    # Provenance
    config_files: list[Path | str] = field(default_factory=lambda: [])

    # Collected diagnostics while loading / merging config.
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze this mutable builder into an immutable `Config`."""
        return Config(
            number_lines=bool(self.number_lines),
            squeeze_blank=bool(self.squeeze_blank),
            show_non_printing=bool(self.show_non_printing),
            syntax_highlight=bool(self.syntax_highlight),
            language=self.language,
            theme=self.theme or DEFAULT_THEME,
            background=bool(self.background),
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with HiCat's built-in defaults."""
        draft: MutableConfig = cls.from_toml_dict(load_defaults_dict())
        draft.config_files = ["<defaults>"]
        return draft

    @classmethod
    def from_toml_dict(cls, data: TomlTable, config_file: Path | None = None) -> MutableConfig:
        """Create a draft config from a parsed TOML dict.

        Unknown keys are recorded as warning diagnostics; wrongly typed values
        raise.

        Args:
            data (TomlTable): The parsed TOML data (``hicat.toml`` schema).
            config_file (Path | None): Source file, used in messages.

        Returns:
            MutableConfig: The resulting draft.

        Raises:
            ConfigValueError: If a table or value has the wrong type.
        """
        source: str = str(config_file) if config_file else "<defaults>"
        draft = cls()

        try:
            render_tbl: TomlTable = get_table_value(data, SECTION_RENDER)
            highlight_tbl: TomlTable = get_table_value(data, SECTION_HIGHLIGHT)

            draft.number_lines = get_bool_value_or_none(render_tbl, "number_lines")
            draft.squeeze_blank = get_bool_value_or_none(render_tbl, "squeeze_blank")
            draft.show_non_printing = get_bool_value_or_none(render_tbl, "show_non_printing")
            draft.syntax_highlight = get_bool_value_or_none(render_tbl, "syntax_highlight")

            draft.language = get_string_value_or_none(highlight_tbl, "language")
            draft.theme = get_string_value_or_none(highlight_tbl, "theme")
            draft.background = get_bool_value_or_none(highlight_tbl, "background")

            get_bool_value_or_none(data, KEY_ROOT)
        except ConfigValueError as e:
            raise ConfigValueError(f"{source}: {e}") from e

        for key in unknown_keys(data, (SECTION_RENDER, SECTION_HIGHLIGHT, KEY_ROOT)):
            draft.diagnostics.warning(f"{source}: unknown key '{key}' ignored")
        for key in unknown_keys(render_tbl, RENDER_KEYS):
            draft.diagnostics.warning(f"{source}: unknown key '{SECTION_RENDER}.{key}' ignored")
        for key in unknown_keys(highlight_tbl, HIGHLIGHT_KEYS):
            draft.diagnostics.warning(
                f"{source}: unknown key '{SECTION_HIGHLIGHT}.{key}' ignored"
            )

        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``hicat.toml`` and ``pyproject.toml``; for the latter the
        ``[tool.hicat]`` table is used.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The draft, or None if a ``pyproject.toml`` has
            no ``[tool.hicat]`` table.

        Raises:
            ConfigValueError: If the file is unreadable, not TOML, or has
                wrongly typed values.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        toml_data: TomlTable = load_toml_dict(path)

        if path.name == PYPROJECT_TOML_NAME:
            try:
                tool_tbl: TomlTable = get_table_value(toml_data, "tool")
            except ConfigValueError as e:
                raise ConfigValueError(f"{path}: {e}") from e
            tool_section: Any = tool_tbl.get("hicat")
            if tool_section is None:
                logger.debug("No [tool.hicat] section in %s", path)
                return None
            if not isinstance(tool_section, dict):
                raise ConfigValueError(f"{path}: [tool.hicat] must be a table")
            toml_data = tool_section

        draft: MutableConfig = cls.from_toml_dict(toml_data, config_file=path)
        draft.config_files = [path]
        logger.trace("Generated MutableConfig: %s", draft)
        return draft

    @staticmethod
    def _declares_root(path: Path) -> bool:
        """Return True if the config file at ``path`` sets ``root = true``."""
        try:
            data: TomlTable = load_toml_dict(path)
        except ConfigValueError as e:
            # Reported again, with its exit code, when the file is merged
            logger.debug("Ignoring parse error during discovery of %s: %s", path, e)
            return False
        if path.name == PYPROJECT_TOML_NAME:
            tool: Any = data.get("tool", {})
            data = tool.get("hicat", {}) if isinstance(tool, dict) else {}
            if not isinstance(data, dict):
                return False
        return data.get(KEY_ROOT) is True

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files discovered by walking upward from ``start``.

        Files are returned root-most first, nearest last. Within one directory
        ``pyproject.toml`` comes before ``hicat.toml`` so the latter wins on
        merge. A file setting ``root = true`` stops the walk after its
        directory.

        Args:
            start (Path): Directory (or file) where discovery starts.

        Returns:
            list[Path]: Discovered config file paths ordered for merging.
        """
        per_dir: list[list[Path]] = []
        cur: Path = start.resolve()
        if cur.is_file():
            cur = cur.parent

        while True:
            root_stop_here = False
            dir_entries: list[Path] = []
            for name in (PYPROJECT_TOML_NAME, HICAT_TOML_NAME):
                p: Path = cur / name
                if p.is_file():
                    dir_entries.append(p)
                    logger.debug("Discovered config file: %s", p)
                    if cls._declares_root(p):
                        root_stop_here = True
            if dir_entries:
                per_dir.append(dir_entries)

            parent: Path = cur.parent
            if parent == cur:
                break
            if root_stop_here:
                logger.debug("Stopping upward config discovery at %s due to root=true", cur)
                break
            cur = parent

        ordered: list[Path] = []
        for dir_list in reversed(per_dir):
            ordered.extend(dir_list)
        return ordered

    @classmethod
    def discover_user_config_file(cls) -> Path | None:
        """Return ``$XDG_CONFIG_HOME/hicat/hicat.toml`` (or ``~/.config/...``) if it exists."""
        xdg: str | None = os.environ.get("XDG_CONFIG_HOME")
        base: Path = Path(xdg) if xdg else Path.home() / ".config"
        p: Path = base / "hicat" / HICAT_TOML_NAME
        return p if p.is_file() else None

    @classmethod
    def load_merged(
        cls,
        *,
        anchor: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft `MutableConfig`.

        Args:
            anchor (Path | None): Directory where upward discovery starts
                (defaults to the CWD).
            extra_config_files (Iterable[Path] | None): Explicit config files
                merged after discovery, in the given order.
            no_config (bool): If True, skip user and project discovery.

        Returns:
            MutableConfig: A draft ready for CLI overrides and freezing.

        Raises:
            ConfigValueError: If any merged file is malformed.
        """
        draft: MutableConfig = cls.from_defaults()

        if not no_config:
            user_cfg_path: Path | None = cls.discover_user_config_file()
            if user_cfg_path is not None:
                user_cfg: MutableConfig | None = cls.from_toml_file(user_cfg_path)
                if user_cfg is not None:
                    draft = draft.merge_with(user_cfg)

            for cfg_path in cls.discover_local_config_files(anchor or Path.cwd()):
                mc: MutableConfig | None = cls.from_toml_file(cfg_path)
                if mc is not None:
                    draft = draft.merge_with(mc)

        for extra in extra_config_files or ():
            mc = cls.from_toml_file(Path(extra))
            if mc is not None:
                draft = draft.merge_with(mc)

        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where explicit values from ``other`` override this draft.

        Args:
            other (MutableConfig): The config whose values override those of this draft.

        Returns:
            MutableConfig: A new draft representing the merged result.
        """

        def pick(mine: Any, theirs: Any) -> Any:
            return theirs if theirs is not None else mine

        merged = MutableConfig(
            number_lines=pick(self.number_lines, other.number_lines),
            squeeze_blank=pick(self.squeeze_blank, other.squeeze_blank),
            show_non_printing=pick(self.show_non_printing, other.show_non_printing),
            syntax_highlight=pick(self.syntax_highlight, other.syntax_highlight),
            language=pick(self.language, other.language),
            theme=pick(self.theme, other.theme),
            background=pick(self.background, other.background),
            config_files=self.config_files + other.config_files,
        )
        merged.diagnostics.extend(list(self.diagnostics))
        merged.diagnostics.extend(list(other.diagnostics))
        return merged

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Overlay explicitly given CLI (or API) values onto this draft.

        Keys that are missing or ``None`` inherit the merged value. Flags that
        steer config discovery (``--config``, ``--no-config``) are handled by
        the caller.

        Args:
            args (ArgsLike): Parsed arguments mapping.

        Returns:
            MutableConfig: This draft, updated in place.
        """
        for key in (
            "number_lines",
            "squeeze_blank",
            "show_non_printing",
            "syntax_highlight",
            "language",
            "theme",
            "background",
        ):
            value: Any = args.get(key)
            if value is not None:
                setattr(self, key, value)
        self.config_files.append("<CLI overrides>")
        return self
