# topmark:header:start
#
#   project      : ApiMark
#   file         : model.py
#   file_relpath : src/apimark/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable, runtime snapshot used by the generators.
    - `MutableConfig`: a mutable builder used while layering sources; it can be
      frozen into `Config` and thawed back for edits.

Layering (lowest to highest precedence):
    1. built-in defaults,
    2. ``[tool.apimark]`` in ``pyproject.toml`` (working directory),
    3. ``apimark.toml`` (working directory),
    4. an explicit ``--config`` file,
    5. CLI overrides.

Path semantics:
    - Paths declared in a config file are normalized against that file's directory.
    - CLI paths are kept as given and resolve against the invocation CWD.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from apimark.config.io import (
    extract_pyproject_table,
    get_string_value_or_none,
    load_toml_dict,
)
from apimark.config.logging import get_logger
from apimark.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_BASE_URL,
    DEFAULT_INFILE,
    DEFAULT_NAMESPACE,
    DEFAULT_OUTDIR,
    DEFAULT_OUTFILE,
    PYPROJECT_FILE_NAME,
)
from apimark.diagnostics import Diagnostic, DiagnosticLog

if TYPE_CHECKING:
    from collections.abc import Mapping

    from apimark.config.io import TomlTable
    from apimark.config.logging import ApimarkLogger

logger: ApimarkLogger = get_logger(__name__)

# Keys understood in a config table; path-valued keys are normalized per source.
PATH_KEYS: tuple[str, ...] = ("infile", "testfile", "outfile", "outdir")
STRING_KEYS: tuple[str, ...] = ("namespace", "base_url")
KNOWN_KEYS: frozenset[str] = frozenset(PATH_KEYS + STRING_KEYS)


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for ApiMark.

    Attributes:
        infile (Path): The reflection tree (``type-info.json``).
        testfile (Path | None): The test report, or ``None`` when not configured.
            Each generator decides what an unset test file means.
        outfile (Path): Target of the HTML generator (a file, or a directory).
        outdir (Path): Target directory of the markdown generator.
        namespace (str): First segment of test report keys (``ssf``).
        base_url (str): Link prefix used in the markdown navigation page.
        config_files (tuple[Path, ...]): Config sources that contributed, in merge order.
        diagnostics (tuple[Diagnostic, ...]): Warnings raised while loading config.
    """

    infile: Path
    testfile: Path | None
    outfile: Path
    outdir: Path
    namespace: str
    base_url: str
    config_files: tuple[Path, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this configuration."""
        log = DiagnosticLog(items=list(self.diagnostics))
        return MutableConfig(
            infile=self.infile,
            testfile=self.testfile,
            outfile=self.outfile,
            outdir=self.outdir,
            namespace=self.namespace,
            base_url=self.base_url,
            config_files=list(self.config_files),
            diagnostics=log,
        )


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    Use `from_defaults` to start, `merge_table` / `merge_file` to layer config
    sources, `apply_overrides` for CLI values, then `freeze` to obtain a `Config`.
    """

    infile: Path = Path(DEFAULT_INFILE)
    testfile: Path | None = None
    outfile: Path = Path(DEFAULT_OUTFILE)
    outdir: Path = Path(DEFAULT_OUTDIR)
    namespace: str = DEFAULT_NAMESPACE
    base_url: str = DEFAULT_BASE_URL
    config_files: list[Path] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the built-in defaults."""
        return cls()

    def merge_table(self, table: TomlTable, *, base_dir: Path | None = None) -> MutableConfig:
        """Merge a parsed config table on top of the current values.

        Args:
            table: Flat table of ApiMark keys.
            base_dir: Directory relative paths in ``table`` are resolved against.

        Returns:
            This builder, for chaining.
        """
        for key in sorted(set(table) - KNOWN_KEYS):
            message: str = f"Unknown configuration key '{key}' ignored"
            logger.warning(message)
            self.diagnostics.add_warning(message)

        for key in PATH_KEYS:
            value: str | None = get_string_value_or_none(
                table, key, diagnostics=self.diagnostics
            )
            if value is None:
                continue
            path = Path(value)
            if base_dir is not None and not path.is_absolute():
                path = base_dir / path
            setattr(self, key, path)

        for key in STRING_KEYS:
            value = get_string_value_or_none(table, key, diagnostics=self.diagnostics)
            if value is not None:
                setattr(self, key, value)
        return self

    def merge_file(self, path: Path, *, pyproject: bool = False) -> MutableConfig:
        """Load a TOML file and merge it (``[tool.apimark]`` only for pyproject files).

        Raises:
            ConfigLoadError: If the file cannot be read or parsed.
        """
        data: TomlTable = load_toml_dict(path)
        table: TomlTable = extract_pyproject_table(data) if pyproject else data
        if pyproject and not table:
            logger.debug("No [tool.apimark] table in %s", path)
            return self
        logger.debug("Merging config from %s", path)
        self.config_files.append(path)
        return self.merge_table(table, base_dir=path.parent)

    def apply_overrides(self, overrides: Mapping[str, Any]) -> MutableConfig:
        """Apply CLI overrides; ``None`` values leave the current setting untouched."""
        for key, value in overrides.items():
            if value is None:
                continue
            if key not in KNOWN_KEYS:
                raise KeyError(f"Unknown configuration override: {key}")
            setattr(self, key, Path(value) if key in PATH_KEYS else str(value))
        return self

    def freeze(self) -> Config:
        """Return an immutable `Config` snapshot of this builder."""
        return Config(
            infile=self.infile,
            testfile=self.testfile,
            outfile=self.outfile,
            outdir=self.outdir,
            namespace=self.namespace,
            base_url=self.base_url,
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )

    @classmethod
    def load_merged(
        cls,
        *,
        cwd: Path | None = None,
        extra_config: Path | None = None,
        overrides: Mapping[str, Any] | None = None,
    ) -> MutableConfig:
        """Build a configuration from all layers, in precedence order.

        Args:
            cwd: Directory searched for ``pyproject.toml`` and ``apimark.toml``.
                Defaults to the process working directory.
            extra_config: Explicit config file (``--config``); must exist.
            overrides: CLI overrides, merged last.

        Returns:
            The merged builder.

        Raises:
            ConfigLoadError: If a discovered or explicit config file is malformed,
                or if ``extra_config`` does not exist.
        """
        root: Path = cwd or Path.cwd()
        draft: MutableConfig = cls.from_defaults()

        pyproject: Path = root / PYPROJECT_FILE_NAME
        if pyproject.is_file():
            draft.merge_file(pyproject, pyproject=True)

        local: Path = root / CONFIG_FILE_NAME
        if local.is_file():
            draft.merge_file(local)

        if extra_config is not None:
            draft.merge_file(extra_config)

        if overrides:
            draft.apply_overrides(overrides)
        return draft
