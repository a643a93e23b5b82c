"""
Tests for the bitz command line interface in bitz/commands
"""

from typer.testing import CliRunner

from bitz import BitSet
from bitz.commands import app

runner = CliRunner()


def make(bits, capacity=64):
    result = BitSet(capacity)
    for bit in bits:
        result.set(bit)
    return result


class TestShow:
    """Tests for the show command."""

    def test_show_table(self):
        """Test rendering a bitset as a table."""
        result = runner.invoke(app, ["show", "--bits", "1,5,10", "--capacity", "16", "--width", "16"])
        assert result.exit_code == 0
        assert result.output == make([1, 5, 10], 16).to_ascii(width=16)

    def test_show_compact(self):
        """Test the --compact 0/1 string output."""
        result = runner.invoke(app, ["show", "--compact", "--capacity", "8", "--bits", "0,2"])
        assert result.exit_code == 0
        assert result.output == "10100000\n"

    def test_show_fill(self):
        """Test that --fill starts with every bit set."""
        result = runner.invoke(app, ["show", "--compact", "--capacity", "8", "--fill"])
        assert result.exit_code == 0
        assert result.output == "11111111\n"

    def test_show_empty(self):
        """Test that a zero width renders the empty marker."""
        result = runner.invoke(app, ["show", "--width", "0"])
        assert result.exit_code == 0
        assert result.output == "Empty bitset\n"

    def test_show_bad_bits(self):
        """Test that a malformed bit list exits with code 1."""
        result = runner.invoke(app, ["show", "--bits", "x"])
        assert result.exit_code == 1
        assert "Invalid bit specifier" in result.output

    def test_show_uses_config(self, tmp_path):
        """Test that capacity and width come from the config file."""
        path = tmp_path / "bitz.toml"
        path.write_text("[bitset]\ncapacity = 16\n\n[render]\nwidth = 8\n", encoding="utf-8")
        result = runner.invoke(app, ["show", "--bits", "9", "--config", str(path)])
        assert result.exit_code == 0
        assert result.output == make([9], 16).to_ascii(width=8)

    def test_options_override_config(self, tmp_path):
        """Test that command line options win over the config file."""
        path = tmp_path / "bitz.toml"
        path.write_text("[render]\nwidth = 8\n", encoding="utf-8")
        result = runner.invoke(
            app, ["show", "--capacity", "16", "--width", "16", "-c", str(path)]
        )
        assert result.exit_code == 0
        assert result.output == BitSet(16).to_ascii(width=16)

    def test_bad_config(self, tmp_path):
        """Test that a missing config file exits with code 1."""
        result = runner.invoke(app, ["show", "--config", str(tmp_path / "missing.toml")])
        assert result.exit_code == 1
        assert "Cannot load config file" in result.output


class TestCount:
    """Tests for the count command."""

    def test_count(self):
        """Test counting the bits of a range."""
        result = runner.invoke(app, ["count", "--bits", "1-3"])
        assert result.exit_code == 0
        assert result.output == "3/64 bits set\n"

    def test_count_grows(self):
        """Test that counting a bit beyond the capacity reports the grown capacity."""
        result = runner.invoke(app, ["count", "--bits", "100"])
        assert result.exit_code == 0
        assert result.output == "1/128 bits set\n"


class TestCombine:
    """Tests for the combine and complement commands."""

    def test_union(self):
        """Test the union operation."""
        result = runner.invoke(
            app, ["combine", "union", "--left", "1", "--right", "2", "--capacity", "8"]
        )
        assert result.exit_code == 0
        assert result.output == make([1, 2], 8).to_ascii()

    def test_intersection(self):
        """Test the intersection operation."""
        result = runner.invoke(
            app, ["combine", "intersection", "-l", "1,2", "-r", "2,3", "--capacity", "8"]
        )
        assert result.exit_code == 0
        assert result.output == make([2], 8).to_ascii()

    def test_capacity_mismatch(self):
        """Test that mismatched capacities exit with code 1 and both capacities."""
        result = runner.invoke(
            app, ["combine", "intersection", "--capacity", "64", "--right-capacity", "128"]
        )
        assert result.exit_code == 1
        assert "Cannot intersect bitsets with different capacities: 64 != 128" in result.output

    def test_unknown_operation(self):
        """Test that an unknown operation is rejected."""
        result = runner.invoke(app, ["combine", "xor"])
        assert result.exit_code != 0

    def test_complement(self):
        """Test the complement command."""
        result = runner.invoke(app, ["complement", "--bits", "0", "--capacity", "8"])
        assert result.exit_code == 0
        assert result.output == make(range(1, 8), 8).to_ascii()

    def test_combine_fill_options(self):
        """Test that --fill and --right-no-fill set each operand's fill separately."""
        result = runner.invoke(
            app,
            ["combine", "intersection", "-r", "1", "--capacity", "8", "--fill", "--right-no-fill"],
        )
        assert result.exit_code == 0
        assert result.output == make([1], 8).to_ascii()

    def test_combine_right_fill_defaults_to_left(self):
        """Test that the right operand follows --fill unless told otherwise."""
        result = runner.invoke(app, ["combine", "union", "--capacity", "8", "--fill"])
        assert result.exit_code == 0
        assert result.output == make(range(8), 8).to_ascii()

    def test_complement_fill(self):
        """Test that complementing a filled bitset clears every bit."""
        result = runner.invoke(app, ["complement", "--capacity", "8", "--fill"])
        assert result.exit_code == 0
        assert result.output == BitSet(8).to_ascii()

    def test_invalid_log_dir_in_config(self, tmp_path):
        """Test that a non-string log directory exits with code 1 instead of a traceback."""
        path = tmp_path / "bitz.toml"
        path.write_text('[logging]\nfile = "x.log"\nlog-dir = 5\n', encoding="utf-8")
        result = runner.invoke(app, ["count", "-c", str(path)])
        assert result.exit_code == 1
        assert "'log-dir' must be a string, got 5" in result.output
