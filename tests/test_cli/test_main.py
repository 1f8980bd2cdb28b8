"""Tests for vercmp CLI."""

import json
import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from vercmp.cli.main import app

runner = CliRunner()


@pytest.fixture
def reset_logging() -> Iterator[None]:
    """Remove handlers installed by --verbose."""
    yield
    logger = logging.getLogger("vercmp")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def strict_project(project_dir: Path) -> Path:
    """Project with strict parsing and a shallow depth limit."""
    (project_dir / "vercmp.toml").write_text(
        "[vercmp]\nstrict_parsing = true\nmax_depth = 1\n"
    )
    return project_dir


# parse
def test_parse_table(project_dir: Path) -> None:
    """Test the component table."""
    result = runner.invoke(app, ["parse", "1.2.0.5"])

    assert result.exit_code == 0
    assert "Version 1.2" in result.stdout
    assert "revision" in result.stdout
    assert "Rendered: 1.2" in result.stdout
    assert "Valid: yes" in result.stdout


def test_parse_json(project_dir: Path) -> None:
    """Test JSON output of parse."""
    result = runner.invoke(app, ["parse", "2.10.3", "--json"])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {
        "major": 2,
        "minor": 10,
        "build": 3,
        "revision": None,
        "text": "2.10.3",
        "valid": True,
    }


def test_parse_invalid(project_dir: Path) -> None:
    """Test that parse failures exit with an error."""
    result = runner.invoke(app, ["parse", "1.2.3.4.5"])

    assert result.exit_code == 1
    assert "Unable to parse" in result.output


def test_parse_lenient_by_default(project_dir: Path) -> None:
    """Test that non-numeric major text is coerced without config."""
    result = runner.invoke(app, ["parse", "v1.2", "--json"])

    assert result.exit_code == 0
    assert json.loads(result.stdout)["major"] == 0


def test_parse_strict_from_config(strict_project: Path) -> None:
    """Test that strict_parsing from config rejects non-numeric text."""
    result = runner.invoke(app, ["parse", "v1.2"])

    assert result.exit_code == 1
    assert "not a number" in result.output


def test_parse_with_explicit_config(project_dir: Path, tmp_path: Path) -> None:
    """Test the --config option."""
    config = tmp_path / "strict.toml"
    config.write_text("[vercmp]\nstrict_parsing = true\n")

    result = runner.invoke(app, ["--config", str(config), "parse", "x.1"])

    assert result.exit_code == 1


def test_invalid_config(project_dir: Path) -> None:
    """Test that config errors are reported."""
    (project_dir / "vercmp.toml").write_text("[vercmp]\nmax_depth = 0\n")

    result = runner.invoke(app, ["parse", "1.0"])

    assert result.exit_code == 1
    assert "Invalid configuration" in result.output


# compare
@pytest.mark.parametrize(
    ("left", "right", "expected"),
    [
        ("2.10.3", "2.9.99", "2.10.3 > 2.9.99 (1)"),
        ("1.0", "1.0.0", "1.0 < 1.0.0 (-1)"),
        ("1.2.3", "1.2.3", "1.2.3 = 1.2.3 (0)"),
    ],
)
def test_compare_versions(
    project_dir: Path, left: str, right: str, expected: str
) -> None:
    """Test comparing two versions."""
    result = runner.invoke(app, ["compare", left, right])

    assert result.exit_code == 0
    assert expected in result.stdout


def test_compare_invalid_version(project_dir: Path) -> None:
    """Test that an invalid operand exits with an error."""
    result = runner.invoke(app, ["compare", "1", "1.0"])

    assert result.exit_code == 1
    assert "Unable to parse" in result.output


def test_compare_values(project_dir: Path) -> None:
    """Test generic comparison of JSON values."""
    result = runner.invoke(app, ["compare", "--values", "[1, 2]", "[1, 3]"])

    assert result.exit_code == 0
    assert "[1, 2] < [1, 3] (-1)" in result.stdout


def test_compare_values_key_order(project_dir: Path) -> None:
    """Test that mapping keys decide before values."""
    result = runner.invoke(app, ["compare", "--values", '{"one": "world"}', '["hello"]'])

    assert result.exit_code == 0
    assert "(1)" in result.stdout


def test_compare_values_incomparable(project_dir: Path) -> None:
    """Test reporting of incomparable values."""
    result = runner.invoke(app, ["compare", "--values", "1", '"1"'])

    assert result.exit_code == 0
    assert "are incomparable" in result.stdout


def test_compare_values_invalid_json(project_dir: Path) -> None:
    """Test that invalid JSON exits with an error."""
    result = runner.invoke(app, ["compare", "--values", "[1", "2"])

    assert result.exit_code == 1
    assert "Invalid JSON" in result.output


def test_compare_values_depth_limit(strict_project: Path) -> None:
    """Test that max_depth from config is applied."""
    result = runner.invoke(app, ["compare", "--values", "[[1]]", "[[1]]"])

    assert result.exit_code == 1
    assert "nested deeper than 1" in result.output


def test_verbose_logging(project_dir: Path, reset_logging: None) -> None:
    """Test that --verbose shows the comparator's debug output."""
    result = runner.invoke(app, ["--verbose", "compare", "--values", "1", '"1"'])

    assert result.exit_code == 0
    assert "as incomparable" in result.output


# sort
def test_sort(project_dir: Path) -> None:
    """Test sorting versions."""
    result = runner.invoke(app, ["sort", "1.2", "1.0", "1.2.1", "2.9.99", "2.10"])

    assert result.exit_code == 0
    assert result.stdout.split() == ["1.0", "1.2", "1.2.1", "2.9.99", "2.10"]


def test_sort_reverse(project_dir: Path) -> None:
    """Test sorting in descending order."""
    result = runner.invoke(app, ["sort", "--reverse", "1.0", "1.0.1", "1.0.1.1"])

    assert result.exit_code == 0
    assert result.stdout.split() == ["1.0.1.1", "1.0.1", "1.0"]


def test_sort_keeps_input_text(project_dir: Path) -> None:
    """Test that sorted output echoes the inputs as given."""
    result = runner.invoke(app, ["sort", "1.2.0", "1.1"])

    assert result.exit_code == 0
    assert result.stdout.split() == ["1.1", "1.2.0"]


def test_sort_invalid(project_dir: Path) -> None:
    """Test that an invalid version exits with an error."""
    result = runner.invoke(app, ["sort", "1.0", "1.0.x"])

    assert result.exit_code == 1


# check
def test_check_valid(project_dir: Path) -> None:
    """Test a version carrying information."""
    result = runner.invoke(app, ["check", "0.0.1"])

    assert result.exit_code == 0
    assert "0.0.1 is valid" in result.stdout


def test_check_invalid(project_dir: Path) -> None:
    """Test a version with all components zero."""
    result = runner.invoke(app, ["check", "0.0.0.0"])

    assert result.exit_code == 1
    assert "not a valid version" in result.output


def test_check_unparseable(project_dir: Path) -> None:
    """Test that parse failures exit with an error."""
    result = runner.invoke(app, ["check", "nope"])

    assert result.exit_code == 1
    assert "Unable to parse" in result.output


def test_compare_values_beyond_stack_depth(project_dir: Path) -> None:
    """Test that nesting deeper than the stack allows is reported, not raised."""
    (project_dir / "vercmp.toml").write_text("[vercmp]\nmax_depth = 5000\n")
    nested = "[" * 700 + "]" * 700

    result = runner.invoke(app, ["compare", "--values", nested, nested])

    assert result.exit_code == 1
    assert not isinstance(result.exception, RecursionError)
    assert "nested deeper than" in result.output


def test_verbose_overrides_configured_log_level(
    project_dir: Path, reset_logging: None
) -> None:
    """Test that --verbose wins over log_level from the config file."""
    (project_dir / "vercmp.toml").write_text('[vercmp]\nlog_level = "ERROR"\n')

    result = runner.invoke(app, ["--verbose", "compare", "--values", "1", '"1"'])

    assert result.exit_code == 0
    assert logging.getLogger("vercmp").level == logging.DEBUG
    assert "as incomparable" in result.output
