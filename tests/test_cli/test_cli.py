"""Tests for the cssbuild CLI commands."""
from __future__ import annotations

from click.testing import CliRunner

from cssbuild import __version__
from cssbuild.cli.main import cli


def _run(*args: str, env: dict[str, str] | None = None):
    return CliRunner().invoke(cli, list(args), env=env)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help(self) -> None:
        result = _run("--help")
        assert result.exit_code == 0
        assert "build CSS selectors part by part" in result.output

    def test_lists_commands(self) -> None:
        result = _run("--help")
        assert "build" in result.output
        assert "kinds" in result.output

    def test_version(self) -> None:
        result = _run("--version")
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_log_level_option(self) -> None:
        result = _run("--log-level", "debug", "build", "element=div")
        assert result.exit_code == 0
        assert "div" in result.output

    def test_invalid_log_level_option(self) -> None:
        result = _run("--log-level", "loud", "kinds")
        assert result.exit_code == 2

    def test_invalid_log_level_env(self) -> None:
        result = _run("kinds", env={"CSSBUILD_LOG_LEVEL": "loud"})
        assert result.exit_code == 2
        assert "Unknown log level" in result.output


# ---------------------------------------------------------------------------
# build command
# ---------------------------------------------------------------------------


class TestBuildCommand:
    def test_single_compound(self) -> None:
        result = _run("build", "element=a", 'attr=href$=".png"', "pseudo-class=focus")
        assert result.exit_code == 0
        assert result.output == 'a[href$=".png"]:focus\n'

    def test_repeated_class(self) -> None:
        result = _run("build", "id=main", "class=container", "class=editable")
        assert result.exit_code == 0
        assert result.output == "#main.container.editable\n"

    def test_named_combinators(self) -> None:
        result = _run(
            "build",
            "element=div", "id=main",
            "next-sibling",
            "element=table", "id=data",
            "subsequent-sibling",
            "element=tr", "pseudo-class=nth-of-type(even)",
            "descendant",
            "element=td", "pseudo-class=nth-of-type(even)",
        )
        assert result.exit_code == 0
        assert result.output == (
            "div#main + table#data ~ tr:nth-of-type(even)   td:nth-of-type(even)\n"
        )

    def test_symbol_combinators(self) -> None:
        result = _run("build", "element=ul", ">", "element=li", "+", "class=x")
        assert result.exit_code == 0
        assert result.output == "ul > li + .x\n"

    def test_json_output(self) -> None:
        result = _run("build", "--json", "element=p", "pseudo-element=first-line")
        assert result.exit_code == 0
        assert result.output == '{"selector":"p::first-line"}\n'

    def test_json_indent_from_env(self) -> None:
        result = _run(
            "build", "--json", "element=p", env={"CSSBUILD_JSON_INDENT": "2"}
        )
        assert result.exit_code == 0
        assert result.output == '{\n  "selector": "p"\n}\n'

    def test_order_error_exits_1(self) -> None:
        result = _run("build", "class=a", "id=b")
        assert result.exit_code == 1
        assert "Error: Selector parts should be arranged" in result.output

    def test_duplicate_error_exits_1(self) -> None:
        result = _run("build", "pseudo-element=before", "pseudo-element=after")
        assert result.exit_code == 1
        assert "should not occur more then one time" in result.output

    def test_compounds_validated_independently(self) -> None:
        result = _run("build", "element=div", "child", "element=p")
        assert result.exit_code == 0
        assert result.output == "div > p\n"

    def test_invalid_token(self) -> None:
        result = _run("build", "colour=red")
        assert result.exit_code == 2
        assert "Invalid token" in result.output

    def test_leading_combinator(self) -> None:
        result = _run("build", ">", "element=p")
        assert result.exit_code == 2

    def test_trailing_combinator(self) -> None:
        result = _run("build", "element=p", "~")
        assert result.exit_code == 2

    def test_requires_tokens(self) -> None:
        result = _run("build")
        assert result.exit_code == 2


# ---------------------------------------------------------------------------
# kinds command
# ---------------------------------------------------------------------------


class TestKindsCommand:
    def test_lists_kinds_in_order(self) -> None:
        result = _run("kinds")
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert len(lines) == 6
        assert lines[0].startswith("0  element")
        assert lines[5].startswith("5  pseudo-element")

    def test_marks_repeatable(self) -> None:
        result = _run("kinds")
        lines = result.output.splitlines()
        assert "*" in lines[2]
        assert "*" not in lines[1]
        assert lines[3].endswith("[x]")
