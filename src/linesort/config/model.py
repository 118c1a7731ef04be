# topmark:header:start
#
#   project      : LineSort
#   file         : model.py
#   file_relpath : src/linesort/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable, runtime snapshot used by the pipeline steps.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config` and thawed back for edits.

Precedence (last wins): runtime defaults < discovered files in the working
directory (``pyproject.toml`` then ``linesort.toml``) < explicit ``--config``
files < CLI arguments.

Path semantics:
    - ``input``/``output`` declared in a config file are resolved against that
      file's directory.
    - CLI paths are left as given (relative to the invocation CWD).

TOML layout:

    ```toml
    [files]
    input = "Onegin2.txt"
    output = "NewOnegin.txt"

    [split]
    delimiter = "\\n"

    [sort]
    suffix_strategy = "precompute"   # or "per-comparison"
    strict = true

    [diagnostics]
    trace_compare = false
    ```
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from linesort.config.io import (
    LINESORT_TOML,
    PYPROJECT_TOML,
    extract_linesort_table,
    get_bool_value_checked,
    get_string_value_checked,
    get_table_value,
    load_toml_dict,
    to_toml,
)
from linesort.config.logging import get_logger
from linesort.constants import DEFAULT_INPUT_FILE, DEFAULT_OUTPUT_FILE
from linesort.core.diagnostics import Diagnostic, DiagnosticLog
from linesort.core.errors import StringError
from linesort.text.lines import delimiter_byte
from linesort.text.sort import SuffixStrategy

if TYPE_CHECKING:
    from linesort.config.io import TomlTable
    from linesort.config.logging import LinesortLogger

# ArgsLike: generic mapping accepted by config loaders (CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

logger: LinesortLogger = get_logger(__name__)

#: Marker recorded in ``config_files`` when CLI arguments were applied.
CLI_OVERRIDE_STR = "<CLI overrides>"


def load_defaults_dict() -> TomlTable:
    """Return the runtime defaults as a TOML-table-compatible dict (no I/O)."""
    return {
        "files": {"input": DEFAULT_INPUT_FILE, "output": DEFAULT_OUTPUT_FILE},
        "split": {"delimiter": "\n"},
        "sort": {"suffix_strategy": SuffixStrategy.PRECOMPUTE.value, "strict": True},
        "diagnostics": {"trace_compare": False},
    }


def is_valid_delimiter(value: str) -> bool:
    """Return True if ``value`` is one character encoding to one non-terminator byte."""
    try:
        encoded: bytes = value.encode("utf-8")
        delimiter_byte(encoded)
    except (UnicodeEncodeError, StringError):
        return False
    return True


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for LineSort.

    Attributes:
        input_path (Path): File to read.
        output_path (Path): File receiving the three dumps (truncated first).
        delimiter (str): Single character separating input lines.
        suffix_strategy (SuffixStrategy): Evaluation strategy for the suffix sort.
        strict (bool): Propagate write/sort failures as terminal errors; when False
            they are recorded as warnings and the run continues.
        trace_compare (bool): Log every comparison at TRACE level.
        verbosity_level (int | None): None = inherit, 0 = terse, 1+ = per-pass summaries.
        config_files (tuple[Path | str, ...]): Config sources that were merged.
        diagnostics (tuple[Diagnostic, ...]): Warnings or errors encountered while loading,
            merging or validating config.
    """

    input_path: Path
    output_path: Path
    delimiter: str
    suffix_strategy: SuffixStrategy
    strict: bool
    trace_compare: bool
    verbosity_level: int | None
    config_files: tuple[Path | str, ...]
    diagnostics: tuple[Diagnostic, ...]

    @property
    def delimiter_bytes(self) -> bytes:
        """Return the delimiter as a single byte."""
        return self.delimiter.encode("utf-8")

    def to_toml_dict(self) -> TomlTable:
        """Convert this Config into a TOML-serializable dict."""
        return {
            "files": {"input": str(self.input_path), "output": str(self.output_path)},
            "split": {"delimiter": self.delimiter},
            "sort": {"suffix_strategy": self.suffix_strategy.value, "strict": self.strict},
            "diagnostics": {"trace_compare": self.trace_compare},
        }

    def to_toml(self) -> str:
        """Render this Config as a TOML document."""
        return to_toml(self.to_toml_dict())

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            input_path=self.input_path,
            output_path=self.output_path,
            delimiter=self.delimiter,
            suffix_strategy=self.suffix_strategy,
            strict=self.strict,
            trace_compare=self.trace_compare,
            verbosity_level=self.verbosity_level,
            config_files=list(self.config_files),
            diagnostics=DiagnosticLog.from_iterable(self.diagnostics),
        )


# -------------------------- Mutable builder --------------------------
@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Every field is tri-state: ``None`` means "not set here, inherit". `freeze`
    fills remaining gaps from the runtime defaults.
    """

    input_path: Path | None = None
    output_path: Path | None = None
    delimiter: str | None = None
    suffix_strategy: SuffixStrategy | None = None
    strict: bool | None = None
    trace_compare: bool | None = None
    verbosity_level: int | None = None
    config_files: list[Path | str] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    # ------------------------------- Loading -------------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict(), config_file=None)

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, config_file: Path | None) -> MutableConfig:
        """Build a draft from a parsed LineSort TOML table.

        Args:
            data (TomlTable): The LineSort section (top-level tables ``files``,
                ``split``, ``sort``, ``diagnostics``).
            config_file (Path | None): Source file, used to resolve relative paths
                and in diagnostics; ``None`` for in-memory defaults.

        Returns:
            MutableConfig: The draft; invalid values are skipped with a warning.
        """
        draft = cls()
        where: str = str(config_file) if config_file is not None else "<defaults>"
        base: Path | None = config_file.parent if config_file is not None else None

        files_tbl: TomlTable = get_table_value(data, "files")
        for key, attr in (("input", "input_path"), ("output", "output_path")):
            raw: str | None = get_string_value_checked(
                files_tbl, key, where=f"{where}: files", diagnostics=draft.diagnostics
            )
            if raw is not None:
                path = Path(raw)
                if base is not None and not path.is_absolute():
                    path = base / path
                setattr(draft, attr, path)

        split_tbl: TomlTable = get_table_value(data, "split")
        delimiter: str | None = get_string_value_checked(
            split_tbl, "delimiter", where=f"{where}: split", diagnostics=draft.diagnostics
        )
        if delimiter is not None:
            if is_valid_delimiter(delimiter):
                draft.delimiter = delimiter
            else:
                draft.diagnostics.add_warning(
                    f"{where}: split.delimiter: {delimiter!r} is not a single-byte character "
                    "(ignored)"
                )

        sort_tbl: TomlTable = get_table_value(data, "sort")
        strategy: str | None = get_string_value_checked(
            sort_tbl, "suffix_strategy", where=f"{where}: sort", diagnostics=draft.diagnostics
        )
        if strategy is not None:
            try:
                draft.suffix_strategy = SuffixStrategy(strategy)
            except ValueError:
                choices: str = ", ".join(s.value for s in SuffixStrategy)
                draft.diagnostics.add_warning(
                    f"{where}: sort.suffix_strategy: {strategy!r} is not one of {choices} "
                    "(ignored)"
                )
        draft.strict = get_bool_value_checked(
            sort_tbl, "strict", where=f"{where}: sort", diagnostics=draft.diagnostics
        )

        diag_tbl: TomlTable = get_table_value(data, "diagnostics")
        draft.trace_compare = get_bool_value_checked(
            diag_tbl, "trace_compare", where=f"{where}: diagnostics", diagnostics=draft.diagnostics
        )
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports ``linesort.toml`` and the ``[tool.linesort]`` section of
        ``pyproject.toml``.

        Returns:
            MutableConfig | None: The draft, or ``None`` when ``pyproject.toml``
            has no LineSort section. Unreadable or malformed files yield an empty
            draft carrying an error diagnostic.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        diagnostics = DiagnosticLog()
        data: TomlTable = load_toml_dict(path, diagnostics)
        section: TomlTable | None = extract_linesort_table(path, data)
        if section is None:
            return None
        draft: MutableConfig = cls.from_toml_dict(section, config_file=path)
        diagnostics.extend(draft.diagnostics.items)
        draft.diagnostics = diagnostics
        draft.config_files = [path]
        return draft

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files present in ``start``, lowest precedence first."""
        return [p for p in (start / PYPROJECT_TOML, start / LINESORT_TOML) if p.is_file()]

    @classmethod
    def load_merged(
        cls,
        *,
        start: Path | None = None,
        extra_config_files: list[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Merge defaults, discovered files and explicit files (in that order).

        Args:
            start (Path | None): Directory searched for config files (default: CWD).
            extra_config_files (list[Path] | None): Explicit files; they override discovery.
            no_config (bool): Skip discovery (explicit files still apply).

        Returns:
            MutableConfig: The merged draft.
        """
        draft: MutableConfig = cls.from_defaults()
        sources: list[Path] = []
        if not no_config:
            sources.extend(cls.discover_local_config_files(start or Path.cwd()))
        sources.extend(extra_config_files or ())
        for path in sources:
            mc: MutableConfig | None = cls.from_toml_file(path)
            if mc is not None:
                draft = draft.merge_with(mc)
        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft."""

        def pick(mine: Any, theirs: Any) -> Any:
            return theirs if theirs is not None else mine

        return MutableConfig(
            input_path=pick(self.input_path, other.input_path),
            output_path=pick(self.output_path, other.output_path),
            delimiter=pick(self.delimiter, other.delimiter),
            suffix_strategy=pick(self.suffix_strategy, other.suffix_strategy),
            strict=pick(self.strict, other.strict),
            trace_compare=pick(self.trace_compare, other.trace_compare),
            verbosity_level=pick(self.verbosity_level, other.verbosity_level),
            config_files=self.config_files + other.config_files,
            diagnostics=DiagnosticLog.from_iterable(
                [*self.diagnostics.items, *other.diagnostics.items]
            ),
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Update fields from an arguments mapping (CLI or API).

        Keys that are absent or ``None`` leave the current value untouched.

        Returns:
            MutableConfig: This instance, updated in place.
        """
        logger.debug("Applying CLI arguments to MutableConfig: %s", args)
        self.config_files.append(CLI_OVERRIDE_STR)

        if args.get("input_path") is not None:
            self.input_path = Path(args["input_path"])
        if args.get("output_path") is not None:
            self.output_path = Path(args["output_path"])
        if args.get("delimiter") is not None:
            self.delimiter = args["delimiter"]
        if args.get("suffix_strategy") is not None:
            self.suffix_strategy = SuffixStrategy(args["suffix_strategy"])
        if args.get("strict") is not None:
            self.strict = bool(args["strict"])
        if args.get("trace_compare") is not None:
            self.trace_compare = bool(args["trace_compare"])
        if args.get("verbosity_level") is not None:
            self.verbosity_level = int(args["verbosity_level"])
        return self

    def freeze(self) -> Config:
        """Return an immutable `Config`, filling unset fields from the defaults."""
        defaults: Config | None = None
        if None in (
            self.input_path,
            self.output_path,
            self.delimiter,
            self.suffix_strategy,
            self.strict,
            self.trace_compare,
        ):
            defaults = MutableConfig.from_defaults().freeze()

        def pick(value: Any, name: str) -> Any:
            if value is not None:
                return value
            assert defaults is not None
            return getattr(defaults, name)

        return Config(
            input_path=pick(self.input_path, "input_path"),
            output_path=pick(self.output_path, "output_path"),
            delimiter=pick(self.delimiter, "delimiter"),
            suffix_strategy=pick(self.suffix_strategy, "suffix_strategy"),
            strict=pick(self.strict, "strict"),
            trace_compare=pick(self.trace_compare, "trace_compare"),
            verbosity_level=self.verbosity_level,
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics.items),
        )
