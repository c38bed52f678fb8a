"""Unit tests for the command-line interface."""

import json

import pytest
from typer.testing import CliRunner

from rectcanvas import __version__
from rectcanvas.cli.app import app, prompt_canvas_dimension

runner = CliRunner()


@pytest.fixture
def input_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("R1 0 0 5 5\nR2 5 5 5 5\nbroken line\n", encoding="utf-8")
    return path


class TestPromptCanvasDimension:
    """Tests for the dimension retry loop."""

    def test_retries_until_valid(self, capsys):
        """Every rejected entry prints its reason and asks again."""
        answers = iter(["abc", "-1", "99999999999", "12"])
        prompts = []

        def read(prompt: str) -> str:
            prompts.append(prompt)
            return next(answers)

        assert prompt_canvas_dimension("Canvas width", read=read) == 12
        assert prompts == ["Canvas width: "] * 4

        out = capsys.readouterr().out
        assert "Please enter a valid number." in out
        assert "Please enter a number >= 0." in out
        assert "Please enter a number less than 2,147,483,648." in out

    def test_eof_propagates(self):
        def read(prompt: str) -> str:
            raise EOFError

        with pytest.raises(EOFError):
            prompt_canvas_dimension("Canvas height", read=read)


class TestAnalyzeCommand:
    """Tests for the analyze command."""

    def test_results_with_options(self, input_file):
        result = runner.invoke(
            app, [str(input_file), "--width", "10", "--height", "10", "--quiet"]
        )

        assert result.exit_code == 0, result.output
        assert "Rectangles in canvas:" in result.output
        assert "Name: R1, X: 0, Y: 0, Width: 5, Height: 5" in result.output
        assert "Rectangles with no overlap:" in result.output
        assert "Rectangles in another rectangle:" in result.output
        assert "Free area in canvas: 50" in result.output

    def test_sections_in_order(self, input_file):
        result = runner.invoke(app, [str(input_file), "-W", "10", "-H", "10", "-q"])

        out = result.output
        positions = [
            out.index("Rectangles in canvas:"),
            out.index("Rectangles with no overlap:"),
            out.index("Rectangles in another rectangle:"),
            out.index("Free area in canvas:"),
        ]
        assert positions == sorted(positions)

    def test_prompts_for_missing_dimensions(self, input_file):
        """Invalid answers are reported and asked again."""
        result = runner.invoke(app, [str(input_file)], input="abc\n-5\n10\n10\n")

        assert result.exit_code == 0, result.output
        assert "Please enter a valid number." in result.output
        assert "Please enter a number >= 0." in result.output
        assert "Free area in canvas: 50" in result.output

    def test_prompt_input_ends(self, input_file):
        result = runner.invoke(app, [str(input_file)], input="")
        assert result.exit_code == 1

    def test_invalid_dimension_option(self, input_file):
        result = runner.invoke(app, [str(input_file), "--width=-3", "--height=4"])
        assert result.exit_code == 1
        assert "Please enter a number >= 0." in result.output

    def test_missing_input_file(self, tmp_path):
        """A missing source aborts before prompting."""
        missing = tmp_path / "nope.txt"
        result = runner.invoke(app, [str(missing)], input="10\n10\n")

        assert result.exit_code == 1
        assert "was not found" in result.output
        assert "Canvas width" not in result.output
        assert "Free area" not in result.output

    def test_exact_method(self, tmp_path):
        path = tmp_path / "input.txt"
        path.write_text("R1 0 0 2 4\nR2 0 0 4 2\n", encoding="utf-8")

        sweep = runner.invoke(app, [str(path), "-W", "4", "-H", "4", "-q"])
        exact = runner.invoke(app, [str(path), "-W", "4", "-H", "4", "-q", "--method", "exact"])

        assert "Free area in canvas: 8" in sweep.output
        assert "Free area in canvas: 4" in exact.output

    def test_invalid_method(self, input_file):
        result = runner.invoke(app, [str(input_file), "-W", "1", "-H", "1", "--method", "grid"])
        assert result.exit_code == 1
        assert "Invalid method" in result.output

    def test_verbose_and_quiet_conflict(self, input_file):
        result = runner.invoke(app, [str(input_file), "-v", "-q"])
        assert result.exit_code == 1

    def test_verbose_summary(self, input_file):
        result = runner.invoke(app, [str(input_file), "-W", "10", "-H", "10", "-v"])
        assert result.exit_code == 0, result.output
        assert "1 rejected" in result.output

    def test_json_output(self, input_file, tmp_path):
        out_path = tmp_path / "report.json"
        result = runner.invoke(
            app,
            [str(input_file), "-W", "10", "-H", "10", "-q", "--json", str(out_path)],
        )

        assert result.exit_code == 0, result.output
        data = json.loads(out_path.read_text(encoding="utf-8"))
        assert data["free_area"] == 50
        assert [r["name"] for r in data["non_overlapping"]] == ["R1", "R2"]

    def test_log_file(self, input_file, tmp_path):
        log_path = tmp_path / "run.log"
        result = runner.invoke(
            app,
            [str(input_file), "-W", "10", "-H", "10", "-q", "--log-file", str(log_path)],
        )

        assert result.exit_code == 0, result.output
        assert "Snapshot built" in log_path.read_text(encoding="utf-8")

    def test_undecodable_bytes_in_input(self, tmp_path):
        """A line with invalid bytes is still analyzed, with a replaced name."""
        path = tmp_path / "input.txt"
        path.write_bytes(b"R1 0 0 5 5\nR\xf6 5 5 5 5\n")

        result = runner.invoke(app, [str(path), "-W", "10", "-H", "10", "-q"])

        assert result.exit_code == 0, result.output
        assert "Name: R1, X: 0, Y: 0, Width: 5, Height: 5" in result.output
        assert "Name: R\ufffd, X: 5, Y: 5, Width: 5, Height: 5" in result.output
        assert "Free area in canvas: 50" in result.output

    def test_path_with_brackets_shown_verbatim(self, tmp_path):
        path = tmp_path / "[red]rects.txt"
        path.write_text("R1 0 0 5 5\n", encoding="utf-8")

        result = runner.invoke(app, [str(path), "-W", "10", "-H", "10"])

        assert result.exit_code == 0, result.output
        assert "[red]rects.txt" in result.output

    def test_invalid_log_level(self, input_file):
        result = runner.invoke(
            app, [str(input_file), "-W", "10", "-H", "10", "--log-level", "FOO"]
        )
        assert result.exit_code == 1
        assert "Invalid log level" in result.output
        assert "Unexpected error" not in result.output

    def test_log_level_case_insensitive(self, input_file):
        result = runner.invoke(
            app, [str(input_file), "-W", "10", "-H", "10", "-q", "--log-level", "info"]
        )
        assert result.exit_code == 0, result.output

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output
