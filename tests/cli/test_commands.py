"""Tests for the coordconv command-line interface."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from coordconv.cli import app
from coordconv.cli.convert import infer_axis
from coordconv.session_config import CONFIG_ENV_VAR
from coordconv.types import Axis

runner = CliRunner()


@pytest.fixture(autouse=True)
def no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


class TestInferAxis:
    """Tests for infer_axis."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("221530E", Axis.LONGITUDE),
            ("118° 48′ 36″ w ", Axis.LONGITUDE),
            ("354555S", Axis.LATITUDE),
            ("34° 1′ 48″ N", Axis.LATITUDE),
            ("-118.81", Axis.LATITUDE),
            ("", Axis.LATITUDE),
        ],
        ids=["compact-east", "dms-west-lower", "compact-south", "dms-north", "plain-number", "empty"],
    )
    def test_infer(self, text: str, expected: Axis) -> None:
        """Test the trailing hemisphere letter selects the axis."""
        assert infer_axis(text) is expected


class TestConvertCommand:
    """Tests for `coordconv convert`."""

    def test_decimal_pair_all(self) -> None:
        """Test a decimal pair prints all three notations."""
        result = runner.invoke(app, ["convert", "34.03,-118.81"])

        assert result.exit_code == 0
        assert "Decimal: 34.030000, -118.810000" in result.output
        assert "DMS: 34° 1′ 48.000″ N, 118° 48′ 36.000″ W" in result.output
        assert "Compact: 340148N, 1184836W" in result.output

    def test_single_dms_to_compact(self) -> None:
        """Test a single DMS value converts on the latitude axis by default."""
        result = runner.invoke(app, ["convert", "--to", "compact", "34° 01′ 59.740″ N"])

        assert result.exit_code == 0
        assert result.output.strip() == "Compact: 340200N"

    def test_single_value_longitude_axis(self) -> None:
        """Test --axis selects the hemisphere alphabet for a single value."""
        result = runner.invoke(app, ["convert", "--to", "dms", "--axis", "lon", "221530E"])

        assert result.exit_code == 0
        assert result.output.strip() == "DMS: 22° 15′ 30.000″ E"

    @pytest.mark.parametrize(
        "args,expected",
        [
            (["--to", "compact", "221530E"], "Compact: 221530E"),
            (["--to", "compact", "354555S"], "Compact: 354555S"),
            (["--to", "dms", "118° 48′ 36″ W"], "DMS: 118° 48′ 36.000″ W"),
            (["--to", "decimal", "221530W"], "Decimal: -22.258333"),
            (["--to", "dms", "--", "-33.8688"], "DMS: 33° 52′ 7.680″ S"),
        ],
        ids=["compact-east", "compact-south", "dms-west", "compact-west-decimal", "decimal-falls-back-to-latitude"],
    )
    def test_single_value_keeps_hemisphere(self, args: list[str], expected: str) -> None:
        """Test a lone value is formatted on the axis its hemisphere letter names."""
        result = runner.invoke(app, ["convert", *args])

        assert result.exit_code == 0
        assert result.output.strip() == expected

    def test_bad_decimal_pair(self) -> None:
        """Test a malformed decimal pair exits with status 1."""
        result = runner.invoke(app, ["convert", "abc.,1.0"])

        assert result.exit_code == 1
        assert "Invalid decimal pair" in result.output

    def test_latitude_and_longitude(self) -> None:
        """Test two values are read as latitude then longitude."""
        result = runner.invoke(app, ["convert", "--to", "decimal", "--", "354555N", "-118.81"])

        assert result.exit_code == 0
        assert result.output.strip() == "Decimal: 35.765278, -118.810000"

    def test_unrecognized_value(self) -> None:
        """Test unparseable input exits with status 1 and the format help."""
        result = runner.invoke(app, ["convert", "garbage"])

        assert result.exit_code == 1
        assert "Unrecognized coordinate format" in result.output
        assert "Valid formats:" in result.output

    def test_too_many_values(self) -> None:
        """Test more than two values are rejected."""
        result = runner.invoke(app, ["convert", "1.0", "2.0", "3.0"])

        assert result.exit_code == 1
        assert "Expected one or two values" in result.output


class TestInteractiveCommand:
    """Tests for `coordconv interactive`."""

    def test_decimal_pair_session(self) -> None:
        """Test a full session over stdin."""
        result = runner.invoke(app, ["interactive"], input="34.03,-118.81\nall\n")

        assert result.exit_code == 0
        assert "Enter a coordinate" in result.output
        assert "Decimal: 34.030000, -118.810000" in result.output
        assert "Compact: 340148N, 1184836W" in result.output

    def test_reprompt_then_exit(self) -> None:
        """Test invalid input is re-asked and exit ends the session."""
        result = runner.invoke(app, ["interactive"], input="12345\nexit\n")

        assert result.exit_code == 0
        assert "Valid formats:" in result.output
        assert result.output.count("Enter a coordinate") == 2
        assert "Decimal:" not in result.output

    def test_end_of_input(self) -> None:
        """Test an empty stdin ends the session successfully."""
        result = runner.invoke(app, ["interactive"], input="")

        assert result.exit_code == 0

    def test_split_flow_japanese(self) -> None:
        """Test command-line options select flow and language."""
        result = runner.invoke(
            app,
            ["interactive", "--flow", "split", "--language", "ja"],
            input="354555N\n221530E\ncompact\n",
        )

        assert result.exit_code == 0
        assert "緯度を入力してください" in result.output
        assert "経度も同様にCompact形式で入力してください" in result.output
        assert "Compact: 354555N, 221530E" in result.output

    def test_config_file(self, tmp_path: Path) -> None:
        """Test a configuration file given with --config is used."""
        path = tmp_path / "coordconv.yaml"
        path.write_text("coordconv:\n  flow: split\n  echo_decimal: false\n", encoding="utf-8")

        result = runner.invoke(app, ["interactive", "--config", str(path)], input="34.03\n-118.81\ndecimal\n")

        assert result.exit_code == 0
        assert "Enter the latitude" in result.output
        assert "Input coordinate" not in result.output
        assert "Decimal: 34.030000, -118.810000" in result.output

    def test_config_from_environment(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the configuration file can be named by environment variable."""
        path = tmp_path / "coordconv.yaml"
        path.write_text("coordconv:\n  language: ja\n", encoding="utf-8")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

        result = runner.invoke(app, ["interactive"], input="exit\n")

        assert result.exit_code == 0
        assert "座標を入力してください" in result.output

    def test_missing_config_file(self, tmp_path: Path) -> None:
        """Test a missing configuration file exits with status 1."""
        result = runner.invoke(app, ["interactive", "--config", str(tmp_path / "missing.yaml")])

        assert result.exit_code == 1
        assert "Configuration file not found" in result.output
