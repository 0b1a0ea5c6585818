"""Tests for the selectorkit CLI commands."""
from __future__ import annotations

from click.testing import CliRunner

from selectorkit import __version__
from selectorkit.cli.main import cli


def _invoke(*args: str):
    return CliRunner().invoke(cli, list(args))


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help(self) -> None:
        result = _invoke("--help")
        assert result.exit_code == 0
        assert "build CSS selectors" in result.output

    def test_lists_commands(self) -> None:
        result = _invoke("--help")
        for name in ("selector", "combine", "area", "json"):
            assert name in result.output

    def test_version(self) -> None:
        result = _invoke("--version")
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_verbose_flag_accepted(self) -> None:
        result = _invoke("--verbose", "area", "2", "3")
        assert result.exit_code == 0
        assert result.output.strip().endswith("6")


# ---------------------------------------------------------------------------
# selector command
# ---------------------------------------------------------------------------


class TestSelectorCommand:
    def test_compound(self) -> None:
        result = _invoke("selector", "id=main", "class=container", "class=editable")
        assert result.exit_code == 0
        assert result.output == "#main.container.editable\n"

    def test_value_may_contain_equals(self) -> None:
        result = _invoke("selector", "element=a", 'attr=href$=".png"', "pseudo-class=focus")
        assert result.exit_code == 0
        assert result.output == 'a[href$=".png"]:focus\n'

    def test_pseudo_element(self) -> None:
        result = _invoke("selector", "element=p", "pseudo-element=first-line")
        assert result.output == "p::first-line\n"

    def test_out_of_order(self) -> None:
        result = _invoke("selector", "class=x", "id=main")
        assert result.exit_code == 1
        assert "Error: Selector parts should be arranged" in result.output

    def test_duplicate(self) -> None:
        result = _invoke("selector", "element=div", "element=span")
        assert result.exit_code == 1
        assert "more than one time" in result.output

    def test_malformed_part(self) -> None:
        result = _invoke("selector", "bogus")
        assert result.exit_code == 2
        assert "KIND=VALUE" in result.output

    def test_unknown_kind(self) -> None:
        result = _invoke("selector", "tag=div")
        assert result.exit_code == 2

    def test_requires_parts(self) -> None:
        result = _invoke("selector")
        assert result.exit_code == 2


# ---------------------------------------------------------------------------
# combine command
# ---------------------------------------------------------------------------


class TestCombineCommand:
    def test_sibling(self) -> None:
        result = _invoke(
            "combine", "~",
            "-l", "element=div", "-l", "id=main",
            "-r", "element=table", "-r", "id=data",
        )
        assert result.exit_code == 0
        assert result.output == "div#main ~ table#data\n"

    def test_descendant(self) -> None:
        result = _invoke("combine", " ", "--left", "element=ul", "--right", "element=li")
        assert result.output == "ul   li\n"

    def test_operand_error(self) -> None:
        result = _invoke("combine", ">", "-l", "class=a", "-l", "element=b", "-r", "element=c")
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_requires_both_sides(self) -> None:
        result = _invoke("combine", "+", "-l", "element=a")
        assert result.exit_code == 2


# ---------------------------------------------------------------------------
# area / json commands
# ---------------------------------------------------------------------------


class TestAreaCommand:
    def test_area(self) -> None:
        result = _invoke("area", "10", "20")
        assert result.exit_code == 0
        assert result.output == "200\n"

    def test_zero(self) -> None:
        assert _invoke("area", "0", "5").output == "0\n"

    def test_fractional(self) -> None:
        assert _invoke("area", "1.5", "3").output == "4.5\n"

    def test_large_integer_area_not_in_exponent_form(self) -> None:
        assert _invoke("area", "1234", "1000").output == "1234000\n"

    def test_full_precision(self) -> None:
        assert _invoke("area", "1.23456789", "1").output == "1.23456789\n"

    def test_rejects_non_number(self) -> None:
        assert _invoke("area", "ten", "20").exit_code == 2


class TestJsonCommand:
    def test_compacts(self) -> None:
        result = _invoke("json", '{"b": 1, "a": [1, 2]}')
        assert result.exit_code == 0
        assert result.output == '{"b":1,"a":[1,2]}\n'

    def test_sort_keys(self) -> None:
        result = _invoke("json", "--sort-keys", '{"b": 1, "a": 2}')
        assert result.output == '{"a":2,"b":1}\n'

    def test_indent(self) -> None:
        result = _invoke("json", "--indent", '{"a": 1}')
        assert result.output == '{\n  "a": 1\n}\n'

    def test_ascii(self) -> None:
        result = _invoke("json", "--ascii", '"é"')
        assert result.output == '"\\u00e9"\n'

    def test_parse_error(self) -> None:
        result = _invoke("json", "{nope")
        assert result.exit_code == 1
        assert "Parse error" in result.output
