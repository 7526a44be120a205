"""Tests for pocketbook.config."""

import stat
import tomllib
from pathlib import Path

import pytest

from pocketbook.config import (
    create_default_config,
    get_config_path,
    get_currency_symbol,
    get_database_path,
    load_config,
    load_config_or_default,
    save_config,
)


class TestConfigFile:
    """Tests for reading and writing the TOML config."""

    def test_create_default(self, tmp_path: Path) -> None:
        """Should write defaults with owner-only permissions."""
        config_path = tmp_path / "pocketbook" / "config.toml"

        create_default_config(config_path)

        assert load_config(config_path) == {"currency_symbol": "$"}
        assert stat.S_IMODE(config_path.stat().st_mode) == 0o600

    def test_save_and_load(self, tmp_path: Path) -> None:
        """Should round-trip values."""
        config_path = tmp_path / "config.toml"

        save_config({"currency_symbol": "£", "database_path": "~/money.db"}, config_path)

        assert load_config(config_path)["currency_symbol"] == "£"

    def test_missing_file_uses_defaults(self, tmp_path: Path) -> None:
        """Should fall back to defaults when no config exists."""
        config = load_config_or_default(tmp_path / "missing.toml")

        assert get_currency_symbol(config) == "$"
        assert get_database_path(config) is None

    def test_database_path_expanded(self) -> None:
        """Should expand ~ in the database override."""
        path = get_database_path({"database_path": "~/money.db"})

        assert path == Path.home() / "money.db"

    def test_xdg_config_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should honour XDG_CONFIG_HOME."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert get_config_path() == tmp_path / "pocketbook" / "config.toml"

    def test_invalid_toml_raises(self, tmp_path: Path) -> None:
        """Should not hide a malformed config file behind the defaults."""
        config_path = tmp_path / "config.toml"
        config_path.write_text("currency_symbol = \n")

        with pytest.raises(tomllib.TOMLDecodeError):
            load_config_or_default(config_path)
