"""
Tests for the whalec command-line tool.
"""

from pathlib import Path

from click.testing import CliRunner

from whalec import __version__
from whalec.cli.errors import ExitCode
from whalec.cli.whalec import main


ADD_SOURCE = "int add(int a, int b) { return a + b; }\n"


class TestWhalecCli:
    """End-to-end runs of the whalec command."""

    def test_prints_ast_by_default(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("add.c").write_text(ADD_SOURCE)
            result = runner.invoke(main, ["add.c"])

            assert result.exit_code == ExitCode.SUCCESS, f"Run failed: {result.output}"
            assert "Function: int add(int a, int b)" in result.output
            assert "Return (a + b)" in result.output

    def test_tokens_flag(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("add.c").write_text(ADD_SOURCE)
            result = runner.invoke(main, ["--tokens", "add.c"])

            assert result.exit_code == 0
            assert "Token(INT, 1:1)" in result.output
            assert "Token(IDENTIFIER, 'add', 1:5)" in result.output
            assert "Token(EOF," in result.output
            assert "Function:" not in result.output

    def test_tokens_and_ast(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("add.c").write_text(ADD_SOURCE)
            result = runner.invoke(main, ["--tokens", "--ast", "add.c"])

            assert result.exit_code == 0
            assert "Token(IDENTIFIER, 'add', 1:5)" in result.output
            assert "Function: int add(int a, int b)" in result.output
            assert result.output.index("Token(EOF,") < result.output.index("Program")

    def test_parse_error_exit_code(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("bad.c").write_text("int main() { return 1 }\n")
            result = runner.invoke(main, ["bad.c"])

            assert result.exit_code == ExitCode.BUILD_ERROR
            assert "parse error: expected ';', got '}'" in result.output

    def test_lexical_error_exit_code(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("bad.c").write_text("int main() { $ }\n")
            result = runner.invoke(main, ["bad.c"])

            assert result.exit_code == 1
            assert "parse error: unexpected char: '$' (1:14)" in result.output

    def test_deep_nesting_is_a_parse_error(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("deep.c").write_text("int main() { return " + "(" * 1000 + "1" + ")" * 1000 + "; }\n")
            result = runner.invoke(main, ["deep.c"])

            assert result.exit_code == ExitCode.BUILD_ERROR
            assert "parse error: nesting too deep" in result.output

    def test_no_target_option(self):
        """The CLI runs no lowering stage, so it takes no target triple."""
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("add.c").write_text(ADD_SOURCE)
            result = runner.invoke(main, ["--target", "bogus-triple", "add.c"])

            assert result.exit_code == ExitCode.INVALID_ARGS
            assert "No such option" in result.output

    def test_ast_flag_alone_matches_default(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("add.c").write_text(ADD_SOURCE)
            default = runner.invoke(main, ["add.c"])
            explicit = runner.invoke(main, ["--ast", "add.c"])

            assert explicit.exit_code == 0
            assert explicit.output == default.output

    def test_missing_argument(self):
        result = CliRunner().invoke(main, [])
        assert result.exit_code == ExitCode.INVALID_ARGS

    def test_unreadable_file(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(main, ["nowhere.c"])

            assert result.exit_code == ExitCode.INVALID_ARGS
            assert "failed to read nowhere.c" in result.output

    def test_version(self):
        result = CliRunner().invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output
