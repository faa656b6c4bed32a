"""End-to-end tests for the logotyper command line."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from logotyper import __version__
from logotyper.cli.app import app


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner."""
    return CliRunner()


class TestVersion:
    """Tests for the --version flag."""

    def test_version(self, runner: CliRunner) -> None:
        """Test that --version prints the package version."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestPreviewCommand:
    """Tests for the preview command."""

    def test_preview_summary(self, runner: CliRunner) -> None:
        """Test the human-readable summary."""
        result = runner.invoke(app, ["preview", "LogoType", "--dots", "2", "--lines", "1"])
        assert result.exit_code == 0
        assert "LogoType" in result.output
        assert "8 characters" in result.output
        assert "2 dots" in result.output
        assert "1 lines" in result.output
        assert "#1F2937" in result.output
        assert "liga, clig, kern" in result.output

    def test_preview_json(self, runner: CliRunner) -> None:
        """Test the JSON snapshot."""
        result = runner.invoke(
            app,
            [
                "preview",
                "Ab",
                "--font",
                "Inter",
                "--text-color",
                "#FF0000",
                "--gradient",
                "linear-gradient(to right, #000, #fff)",
                "--dots",
                "1",
                "--hide",
                "lines",
                "--json",
            ],
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["id"] == "Inter-Ab"
        assert [c["color"] for c in data["characters"]] == ["#FF0000", "#FF0000"]
        assert data["background"]["paint"] == "linear-gradient(90deg, #000, #fff)"
        assert data["dots"][0]["id"] == "dot-1"
        assert data["selection"] is None
        assert data["font_feature_settings"].startswith('"liga" 1, "clig" 1, "kern" 1')
        lines_layer = next(layer for layer in data["layers"] if layer["id"] == "layer-lines")
        assert lines_layer["visible"] is False

    def test_preview_toggle_features(self, runner: CliRunner) -> None:
        """Test toggling OpenType features by tag."""
        result = runner.invoke(
            app, ["preview", "Ab", "--feature", "kern", "--feature", "ss01", "--json"]
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        settings = data["font_feature_settings"]
        assert '"kern" 0' in settings
        assert '"ss01" 1' in settings
        enabled = [f["tag"] for f in data["font_features"] if f["enabled"]]
        assert enabled == ["liga", "clig", "ss01"]

    def test_preview_invalid_gradient(self, runner: CliRunner) -> None:
        """Test that a malformed gradient is an error on the command line."""
        result = runner.invoke(app, ["preview", "A", "--gradient", "radial-gradient(#000, #fff)"])
        assert result.exit_code == 1
        assert "Invalid gradient" in result.output

    def test_preview_invalid_hide(self, runner: CliRunner) -> None:
        """Test that unknown layer categories are rejected."""
        result = runner.invoke(app, ["preview", "A", "--hide", "icons"])
        assert result.exit_code == 1
        assert "Invalid layer category" in result.output

    def test_preview_log_file(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test that --log-file writes a log."""
        log_file = tmp_path / "preview.log"
        result = runner.invoke(
            app, ["preview", "A", "--dots", "1", "--log-file", str(log_file)]
        )
        assert result.exit_code == 0
        assert log_file.exists()
        assert "Operation applied" in log_file.read_text(encoding="utf-8")


class TestPathCommand:
    """Tests for the path command."""

    def test_straight_path(self, runner: CliRunner) -> None:
        """Test a straight line."""
        result = runner.invoke(app, ["path", "20,50", "80,50"])
        assert result.exit_code == 0
        assert "M 20 50 L 80 50" in result.output
        assert "1 segment " in result.output
        assert "60.00" in result.output

    def test_curved_path(self, runner: CliRunner) -> None:
        """Test a line bent by two control points."""
        result = runner.invoke(app, ["path", "20,50", "80,50", "-p", "30,20", "-p", "70,80"])
        assert result.exit_code == 0
        assert "M 20 50 Q 30 20 50 50 Q 70 80 80 50" in result.output
        assert "2 segments" in result.output

    def test_control_points_clamped(self, runner: CliRunner) -> None:
        """Test that control points are clamped like edits."""
        result = runner.invoke(app, ["path", "0,0", "100,0", "-p", "50,-40"])
        assert result.exit_code == 0
        assert "M 0 0 Q 50 0 100 0" in result.output

    def test_bad_point(self, runner: CliRunner) -> None:
        """Test that malformed points are usage errors."""
        result = runner.invoke(app, ["path", "20;50", "80,50"])
        assert result.exit_code == 2


class TestGradientCommand:
    """Tests for the gradient command."""

    def test_valid_gradient(self, runner: CliRunner) -> None:
        """Test canonical output for a keyword direction."""
        result = runner.invoke(app, ["gradient", "linear-gradient(to top left, red, blue, green)"])
        assert result.exit_code == 0
        assert "linear-gradient(315deg, red, blue, green)" in result.output
        assert "3 colors" in result.output
        assert "Gradient is valid" in result.output

    def test_invalid_gradient(self, runner: CliRunner) -> None:
        """Test that malformed text exits with an error."""
        result = runner.invoke(app, ["gradient", "linear-gradient(45deg, #000)"])
        assert result.exit_code == 1
        assert "Invalid gradient" in result.output


class TestPalettesCommand:
    """Tests for the palettes command."""

    def test_list_palettes(self, runner: CliRunner) -> None:
        """Test listing palettes."""
        result = runner.invoke(app, ["palettes", "--limit", "2"])
        assert result.exit_code == 0
        assert "Professional Triadic 1" in result.output
        assert "Professional Complementary 2" in result.output

    def test_palettes_as_gradients(self, runner: CliRunner) -> None:
        """Test printing palettes as gradients."""
        result = runner.invoke(app, ["palettes", "-c", "minimal", "-n", "1", "--gradient"])
        assert result.exit_code == 0
        assert "linear-gradient(45deg, hsl(0" in result.output

    def test_unknown_category(self, runner: CliRunner) -> None:
        """Test that unknown categories are rejected."""
        result = runner.invoke(app, ["palettes", "--category", "neon"])
        assert result.exit_code == 1
        assert "Unknown category" in result.output
