# topmark:header:start
#
#   project      : LineSort
#   file         : test_run.py
#   file_relpath : tests/cli/test_run.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI `run` command: output content, exit codes and flags."""

from __future__ import annotations

from typing import TYPE_CHECKING

from linesort.constants import DEFAULT_INPUT_FILE, DEFAULT_OUTPUT_FILE
from linesort.core.exit_codes import ExitCode
from tests.cli.conftest import (
    assert_exit,
    assert_SUCCESS,
    assert_USAGE_ERROR,
    run_cli,
    run_cli_in,
)
from tests.conftest import SAMPLE_OUTPUT, SAMPLE_TEXT, mark_cli, parametrize

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result


@mark_cli
def test_run_with_explicit_paths(sample_file: Path) -> None:
    out: Path = sample_file.parent / "out.txt"

    result: Result = run_cli(["run", str(sample_file), str(out)])

    assert_SUCCESS(result)
    assert out.read_bytes() == SAMPLE_OUTPUT
    assert result.output == ""


@mark_cli
def test_run_uses_historical_default_names(tmp_path: Path) -> None:
    (tmp_path / DEFAULT_INPUT_FILE).write_bytes(SAMPLE_TEXT)

    result: Result = run_cli_in(tmp_path, ["run"])

    assert_SUCCESS(result)
    assert (tmp_path / DEFAULT_OUTPUT_FILE).read_bytes() == SAMPLE_OUTPUT


@mark_cli
def test_verbose_prints_pass_summary(sample_file: Path) -> None:
    out: Path = sample_file.parent / "out.txt"

    result: Result = run_cli(["-v", "run", str(sample_file), str(out)])

    assert_SUCCESS(result)
    assert "unsorted: written, 4 lines, 21 bytes" in result.output
    assert "forward: written, 4 lines, 21 bytes" in result.output
    assert "suffix: written, 4 lines, 21 bytes" in result.output
    assert f"Wrote {out}" in result.output


@mark_cli
def test_missing_input_exit_code(tmp_path: Path) -> None:
    out: Path = tmp_path / "out.txt"
    out.write_bytes(b"previous\n")

    result: Result = run_cli(["run", str(tmp_path / "missing.txt"), str(out)])

    assert_exit(result, ExitCode.INPUT_FILE_ERROR)
    assert "Cannot open input file" in result.output
    assert out.read_bytes() == b"previous\n"


@mark_cli
def test_unopenable_output_strict(sample_file: Path) -> None:
    out: Path = sample_file.parent / "missing-dir" / "out.txt"

    result: Result = run_cli(["run", str(sample_file), str(out)])

    assert_exit(result, ExitCode.OUTPUT_FILE_ERROR)
    assert "Cannot open output file" in result.output


@mark_cli
def test_unopenable_output_lenient(sample_file: Path) -> None:
    out: Path = sample_file.parent / "missing-dir" / "out.txt"

    result: Result = run_cli(["run", "--lenient", str(sample_file), str(out)])

    assert_SUCCESS(result)
    assert "Warning: Cannot open output file" in result.output


@mark_cli
def test_quiet_hides_warnings(sample_file: Path) -> None:
    out: Path = sample_file.parent / "missing-dir" / "out.txt"

    result: Result = run_cli(["-q", "run", "--lenient", str(sample_file), str(out)])

    assert_SUCCESS(result)
    assert "Warning" not in result.output


@mark_cli
@parametrize("flag", [";", "\\x3b"])
def test_delimiter_option(tmp_path: Path, flag: str) -> None:
    src: Path = tmp_path / "in.txt"
    src.write_bytes(b"b;a;c")
    out: Path = tmp_path / "out.txt"

    result: Result = run_cli(["run", "--delimiter", flag, str(src), str(out)])

    assert_SUCCESS(result)
    assert out.read_bytes() == b"b\na\nc\n" + b"a\nb\nc\n" * 2


@mark_cli
def test_tab_delimiter_escape(tmp_path: Path) -> None:
    src: Path = tmp_path / "in.txt"
    src.write_bytes(b"y\tx")
    out: Path = tmp_path / "out.txt"

    result: Result = run_cli(["run", "--delimiter", "\\t", str(src), str(out)])

    assert_SUCCESS(result)
    assert out.read_bytes() == b"y\nx\n" + b"x\ny\n" * 2


@mark_cli
@parametrize("bad", ["ab", "\\0", "é"])
def test_invalid_delimiter_is_usage_error(sample_file: Path, bad: str) -> None:
    result: Result = run_cli(["run", "--delimiter", bad, str(sample_file), "out.txt"])

    assert_USAGE_ERROR(result)
    assert "single-byte" in result.output


@mark_cli
@parametrize("strategy", ["precompute", "per-comparison"])
def test_suffix_strategy_option(sample_file: Path, strategy: str) -> None:
    out: Path = sample_file.parent / "out.txt"

    result: Result = run_cli(
        ["run", "--suffix-strategy", strategy, "--trace-compare", str(sample_file), str(out)]
    )

    assert_SUCCESS(result)
    assert out.read_bytes() == SAMPLE_OUTPUT


@mark_cli
def test_config_file_supplies_paths(tmp_path: Path) -> None:
    (tmp_path / "poem.txt").write_bytes(SAMPLE_TEXT)
    (tmp_path / "linesort.toml").write_text(
        '[files]\ninput = "poem.txt"\noutput = "sorted.txt"\n', encoding="utf-8"
    )

    result: Result = run_cli_in(tmp_path, ["run"])

    assert_SUCCESS(result)
    assert (tmp_path / "sorted.txt").read_bytes() == SAMPLE_OUTPUT


@mark_cli
def test_cli_arguments_override_config(tmp_path: Path) -> None:
    (tmp_path / "poem.txt").write_bytes(SAMPLE_TEXT)
    (tmp_path / "linesort.toml").write_text(
        '[files]\ninput = "poem.txt"\noutput = "sorted.txt"\n', encoding="utf-8"
    )

    result: Result = run_cli_in(tmp_path, ["run", "poem.txt", "other.txt"])

    assert_SUCCESS(result)
    assert (tmp_path / "other.txt").read_bytes() == SAMPLE_OUTPUT
    assert not (tmp_path / "sorted.txt").exists()


@mark_cli
def test_no_config_ignores_local_file(tmp_path: Path) -> None:
    (tmp_path / "poem.txt").write_bytes(SAMPLE_TEXT)
    (tmp_path / "linesort.toml").write_text('[files]\ninput = "poem.txt"\n', encoding="utf-8")

    result: Result = run_cli_in(tmp_path, ["run", "--no-config"])

    assert_exit(result, ExitCode.INPUT_FILE_ERROR)
    assert DEFAULT_INPUT_FILE in result.output


@mark_cli
def test_lenient_from_config_can_be_overridden(sample_file: Path) -> None:
    cfg: Path = sample_file.parent / "lenient.toml"
    cfg.write_text("[sort]\nstrict = false\n", encoding="utf-8")
    out: Path = sample_file.parent / "missing-dir" / "out.txt"

    lenient: Result = run_cli(["run", "--config", str(cfg), str(sample_file), str(out)])
    strict: Result = run_cli(
        ["run", "--config", str(cfg), "--strict", str(sample_file), str(out)]
    )

    assert_SUCCESS(lenient)
    assert_exit(strict, ExitCode.OUTPUT_FILE_ERROR)


@mark_cli
def test_config_warning_is_shown(sample_file: Path) -> None:
    cfg: Path = sample_file.parent / "bad.toml"
    cfg.write_text('[sort]\nsuffix_strategy = "fast"\n', encoding="utf-8")
    out: Path = sample_file.parent / "out.txt"

    result: Result = run_cli(["run", "--config", str(cfg), str(sample_file), str(out)])

    assert_SUCCESS(result)
    assert "Warning:" in result.output
    assert "suffix_strategy" in result.output
