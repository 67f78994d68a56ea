"""Tests for CLI commands."""

from collections.abc import Callable
from pathlib import Path

import pytest
from typer.testing import CliRunner

from exprcalc.cli import app

EXPECTED_TREE = """BinOp {
    left: IntLiteral {
        value: 14
    }
    right: BinOp {
        left: IntLiteral {
            value: 2
        }
        right: IntLiteral {
            value: 3
        }
        op: Add
    }
    op: Mult
}
"""


class TestEvalCommand:
    def test_prints_tree_then_answer(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "14*(2+3)"])
        assert result.exit_code == 0
        assert result.stdout == EXPECTED_TREE + "\nanswer = 70\n"

    def test_integral_float_prints_as_integer(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "--no-tree", "1.5+2.5"])
        assert result.exit_code == 0
        assert result.stdout == "answer = 4\n"

    def test_fractional_answer(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "--no-tree", "7/2"])
        assert result.stdout == "answer = 3.5\n"

    def test_leading_minus_after_separator(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "--no-tree", "--", "-2+3"])
        assert result.exit_code == 0
        assert result.stdout == "answer = 1\n"

    @pytest.mark.parametrize("source", ["1 2", "(1+2", "1+", "2 $ 2", "1."])
    def test_malformed_input(self, cli_runner: CliRunner, source: str) -> None:
        result = cli_runner.invoke(app, ["eval", source])
        assert result.exit_code == 1
        assert "Failed to parse" in result.output
        assert "answer" not in result.output
        assert "BinOp" not in result.output

    def test_division_by_zero(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "1/0"])
        assert result.exit_code == 1
        assert "Failed to evaluate: Division by zero" in result.output
        assert "answer" not in result.output

    def test_error_shows_position(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "1 2"])
        assert "position 2" in result.output
        assert "  1 2\n    ^" in result.output

    def test_reads_stdin(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "--no-tree", "-"], input="6/4\n")
        assert result.exit_code == 0
        assert result.stdout == "answer = 1.5\n"

    def test_reads_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        expr_file = tmp_path / "expr.txt"
        expr_file.write_text("8 - 3 - 2\n")
        result = cli_runner.invoke(app, ["eval", "--no-tree", "--file", str(expr_file)])
        assert result.exit_code == 0
        assert result.stdout == "answer = 3\n"

    def test_requires_expression_or_file(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval"])
        assert result.exit_code == 1
        assert "Error: give exactly one of EXPRESSION or --file" in result.output

    def test_rejects_expression_and_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        expr_file = tmp_path / "expr.txt"
        expr_file.write_text("1")
        result = cli_runner.invoke(app, ["eval", "--file", str(expr_file), "2"])
        assert result.exit_code == 1

    def test_config_indent(
        self, cli_runner: CliRunner, write_config: Callable[[str], Path]
    ) -> None:
        path = write_config("[display]\nindent = 2\n")
        result = cli_runner.invoke(app, ["eval", "--config", str(path), "1+2"])
        assert result.exit_code == 0
        assert "\n  left: IntLiteral {\n    value: 1\n  }\n" in result.stdout

    def test_config_hides_tree(
        self, cli_runner: CliRunner, write_config: Callable[[str], Path]
    ) -> None:
        path = write_config("[display]\nshow_tree = false\n")
        result = cli_runner.invoke(app, ["eval", "--config", str(path), "2*3"])
        assert result.stdout == "answer = 6\n"

    def test_config_depth_limit(
        self, cli_runner: CliRunner, write_config: Callable[[str], Path]
    ) -> None:
        path = write_config("[parser]\nmax_depth = 2\n")
        result = cli_runner.invoke(app, ["eval", "--config", str(path), "(((1)))"])
        assert result.exit_code == 1
        assert "nests deeper than 2 levels" in result.output

    def test_deep_nesting_at_configured_cap(
        self, cli_runner: CliRunner, write_config: Callable[[str], Path]
    ) -> None:
        path = write_config("[parser]\nmax_depth = 250\n")
        nested = "(" * 250 + "7" + ")" * 250
        result = cli_runner.invoke(app, ["eval", "--no-tree", "--config", str(path), nested])
        assert result.exit_code == 0
        assert result.stdout == "answer = 7\n"

    def test_nesting_past_cap_fails_cleanly(
        self, cli_runner: CliRunner, write_config: Callable[[str], Path]
    ) -> None:
        path = write_config("[parser]\nmax_depth = 250\n")
        nested = "(" * 2000 + "1" + ")" * 2000
        result = cli_runner.invoke(app, ["eval", "--config", str(path), nested])
        assert result.exit_code == 1
        assert "Failed to parse: Expression nests deeper than 250 levels" in result.output
        assert not isinstance(result.exception, RecursionError)

    def test_long_flat_chain(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "--no-tree", "+".join(["1"] * 1000)])
        assert result.exit_code == 0
        assert result.stdout == "answer = 1000\n"

    def test_config_discovered_in_cwd(
        self,
        cli_runner: CliRunner,
        write_config: Callable[[str], Path],
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        write_config("[display]\nshow_tree = false\n")
        monkeypatch.chdir(tmp_path)
        result = cli_runner.invoke(app, ["eval", "1+1"])
        assert result.stdout == "answer = 2\n"

    def test_bad_config(
        self, cli_runner: CliRunner, write_config: Callable[[str], Path]
    ) -> None:
        path = write_config("[display]\nindent = -1\n")
        result = cli_runner.invoke(app, ["eval", "--config", str(path), "1"])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output


class TestReplCommand:
    def test_evaluates_each_line(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["repl", "--no-tree"], input="1+1\n2*3\n")
        assert result.exit_code == 0
        assert "answer = 2" in result.stdout
        assert "answer = 6" in result.stdout
        assert result.stdout.startswith("> ")

    def test_continues_after_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["repl", "--no-tree"], input="1 2\n\n4-1\nquit\n5\n")
        assert result.exit_code == 0
        assert "Failed to parse" in result.output
        assert "answer = 3" in result.output
        assert "answer = 5" not in result.output

    def test_prints_tree_by_default(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["repl"], input="14*(2+3)\nexit\n")
        assert EXPECTED_TREE in result.stdout
        assert "answer = 70" in result.stdout

    def test_custom_prompt(
        self, cli_runner: CliRunner, write_config: Callable[[str], Path]
    ) -> None:
        path = write_config('[repl]\nprompt = "calc> "\n')
        result = cli_runner.invoke(app, ["repl", "--config", str(path)], input="")
        assert result.exit_code == 0
        assert result.stdout.startswith("calc> ")


class TestGlobalOptions:
    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert result.stdout.startswith("exprcalc ")

    def test_verbose_flag_accepted(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--verbose", "eval", "--no-tree", "2+2"])
        assert result.exit_code == 0
        assert "answer = 4" in result.stdout

    def test_no_args_shows_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, [])
        assert "eval" in result.output
        assert "repl" in result.output
