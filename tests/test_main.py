"""Tests for the command line interface."""

import pytest
import sys
from pathlib import Path

from click.testing import CliRunner

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from main import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("The cat sat.\nThe CAT ran.\n", encoding="utf-8")
    return path


class TestOptions:
    """Test non-interactive use."""

    def test_generates_cloud(self, runner, sample_file, tmp_path):
        output = tmp_path / "out.html"
        result = runner.invoke(main, ["-i", str(sample_file), "-n", "2", "-o", str(output)])

        assert result.exit_code == 0, result.output
        assert "[1/3] Counting words..." in result.output
        assert "[2/3] Selecting top words..." in result.output
        assert "[3/3] Writing tag cloud..." in result.output
        assert "Distinct words: 4 (6 total)" in result.output
        assert "Selected: 2 | Max count: 2" in result.output
        html = output.read_text(encoding="utf-8")
        assert html.count("<span") == 2

    def test_quiet(self, runner, sample_file, tmp_path):
        output = tmp_path / "out.html"
        result = runner.invoke(main, ["-i", str(sample_file), "-n", "2", "-o", str(output), "-q"])
        assert result.exit_code == 0
        assert result.output == ""
        assert output.exists()

    def test_stylesheet_option(self, runner, sample_file, tmp_path):
        output = tmp_path / "out.html"
        result = runner.invoke(main, [
            "-i", str(sample_file), "-n", "1", "-o", str(output), "--stylesheet", "x.css", "-q",
        ])
        assert result.exit_code == 0
        assert 'href="x.css"' in output.read_text(encoding="utf-8")

    @pytest.mark.parametrize("count", ["0", "-3", "many"])
    def test_invalid_count_rejected(self, runner, sample_file, tmp_path, count):
        output = tmp_path / "out.html"
        result = runner.invoke(main, ["-i", str(sample_file), "-n", count, "-o", str(output)])
        assert result.exit_code == 2
        assert not output.exists()

    def test_missing_input(self, runner, tmp_path):
        output = tmp_path / "out.html"
        result = runner.invoke(main, ["-i", str(tmp_path / "nope.txt"), "-n", "3", "-o", str(output)])
        assert result.exit_code == 1
        assert "Error: Cannot read input file" in result.output
        assert not output.exists()

    def test_unwritable_output(self, runner, sample_file, tmp_path):
        output = tmp_path / "missing_dir" / "out.html"
        result = runner.invoke(main, ["-i", str(sample_file), "-n", "3", "-o", str(output)])
        assert result.exit_code == 1
        assert "Error: Cannot write output file" in result.output


class TestPrompts:
    """Test interactive use."""

    def test_prompts_for_everything(self, runner, sample_file, tmp_path):
        output = tmp_path / "out.html"
        result = runner.invoke(main, input=f"{sample_file}\n3\n{output}\n")

        assert result.exit_code == 0, result.output
        assert "Input the location/file name" in result.output
        assert "How many words would you like in the tag cloud" in result.output
        assert output.read_text(encoding="utf-8").count("<span") == 3

    def test_reprompts_on_bad_count(self, runner, sample_file, tmp_path):
        output = tmp_path / "out.html"
        result = runner.invoke(main, input=f"{sample_file}\n0\nabc\n1\n{output}\n")

        assert result.exit_code == 0, result.output
        assert result.output.count("How many words would you like in the tag cloud") == 3
        assert output.read_text(encoding="utf-8").count("<span") == 1

    def test_empty_count_answer_uses_default(self, runner, tmp_path):
        """Pressing enter at the count prompt takes the configured default."""
        source = tmp_path / "many.txt"
        source.write_text(" ".join(f"w{i:03d}" for i in range(150)), encoding="utf-8")
        output = tmp_path / "out.html"

        result = runner.invoke(main, input=f"{source}\n\n{output}\n")

        assert result.exit_code == 0, result.output
        assert "[100]" in result.output
        html = output.read_text(encoding="utf-8")
        assert "<title>Top 100 words in" in html
        assert html.count("<span") == 100


class TestSteps:
    """Test step reporting."""

    def test_failed_count_stops_before_later_steps(self, runner, tmp_path):
        result = runner.invoke(main, ["-i", str(tmp_path / "nope.txt"), "-n", "3", "-o", str(tmp_path / "o.html")])
        assert "[1/3] Counting words..." in result.output
        assert "[2/3]" not in result.output
        assert "[3/3]" not in result.output

    def test_failed_write_after_counting(self, runner, sample_file, tmp_path):
        output = tmp_path / "missing_dir" / "out.html"
        result = runner.invoke(main, ["-i", str(sample_file), "-n", "3", "-o", str(output)])
        assert result.exit_code == 1
        assert "[3/3] Writing tag cloud..." in result.output
