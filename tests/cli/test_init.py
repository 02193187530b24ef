"""Tests for the init command."""

from pathlib import Path

from click.testing import CliRunner

from webrev.cli import main
from webrev.config import load_config


class TestInitCommand:
    """Tests for webrev init."""

    def test_init_creates_config(self, cli_runner: CliRunner, isolated_filesystem: Path):
        """Creates webrev.yaml in current directory."""
        result = cli_runner.invoke(main, ["init"])

        assert result.exit_code == 0
        assert (isolated_filesystem / "webrev.yaml").exists()
        assert "Created config file" in result.output

    def test_init_config_loads(self, cli_runner: CliRunner, isolated_filesystem: Path):
        """Created config validates and holds the default context sizes."""
        cli_runner.invoke(main, ["init"])

        config = load_config(isolated_filesystem / "webrev.yaml")

        assert config.views.sdiff_context == 20
        assert config.views.patch_context == 3
        assert config.source.webrev_dir is None

    def test_init_no_overwrite_without_confirm(self, cli_runner: CliRunner, isolated_filesystem: Path):
        """Doesn't overwrite without confirmation."""
        config_path = isolated_filesystem / "webrev.yaml"
        config_path.write_text("# Existing config")

        result = cli_runner.invoke(main, ["init"], input="n\n")

        assert "already exists" in result.output
        assert config_path.read_text() == "# Existing config"

    def test_init_overwrite_with_confirm(self, cli_runner: CliRunner, isolated_filesystem: Path):
        """Overwrites with confirmation."""
        config_path = isolated_filesystem / "webrev.yaml"
        config_path.write_text("# Existing config")

        result = cli_runner.invoke(main, ["init"], input="y\n")

        assert result.exit_code == 0
        assert "views:" in config_path.read_text()

    def test_init_force(self, cli_runner: CliRunner, isolated_filesystem: Path):
        """--force overwrites without asking."""
        config_path = isolated_filesystem / "webrev.yaml"
        config_path.write_text("# Existing config")

        result = cli_runner.invoke(main, ["init", "--force"])

        assert result.exit_code == 0
        assert "Overwrite?" not in result.output
        assert "views:" in config_path.read_text()
