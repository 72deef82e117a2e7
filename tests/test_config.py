"""Tests for src/cmsadmin/config.py: CmsAdminConfig, TOML loading, overrides."""

from pathlib import Path
from unittest.mock import patch

import pytest

from cmsadmin.config import CmsAdminConfig, load_config, merge_cli_overrides
from cmsadmin.content.store import SchemaDeletePolicy

ENV_VARS = (
    "CMS_ADMIN_PREFERENCES_FILE",
    "CMS_ADMIN_SEED_DEMO",
    "CMS_ADMIN_ON_SCHEMA_DELETE",
    "CMS_ADMIN_HOST",
    "CMS_ADMIN_PORT",
    "CMS_ADMIN_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Remove env vars that _apply_env_vars reads so tests see TOML values."""
    for key in ENV_VARS:
        monkeypatch.delenv(key, raising=False)


class TestDefaults:
    def test_storage(self):
        cfg = CmsAdminConfig()
        assert cfg.storage.preferences_path.name == "preferences.json"

    def test_content(self):
        cfg = CmsAdminConfig()
        assert cfg.content.seed_demo is True
        assert cfg.content.on_schema_delete is SchemaDeletePolicy.RETAIN

    def test_server_and_logging(self):
        cfg = CmsAdminConfig()
        assert cfg.server.host == "127.0.0.1"
        assert cfg.server.port == 8080
        assert cfg.logging.level == "WARNING"


class TestLoadConfig:
    def test_load_from_explicit_path(self, tmp_path):
        toml_path = tmp_path / ".cms-admin.toml"
        toml_path.write_text(
            "[content]\n"
            "seed_demo = false\n"
            'on_schema_delete = "cascade"\n\n'
            "[server]\n"
            "port = 9000\n"
        )
        cfg = load_config(toml_path)
        assert cfg.content.seed_demo is False
        assert cfg.content.on_schema_delete is SchemaDeletePolicy.CASCADE
        assert cfg.server.port == 9000
        assert cfg.server.host == "127.0.0.1"

    def test_load_missing_path_returns_defaults(self, tmp_path):
        cfg = load_config(tmp_path / "nonexistent.toml")
        assert cfg == CmsAdminConfig()

    def test_load_searches_cwd(self, tmp_path):
        (tmp_path / ".cms-admin.toml").write_text('[logging]\nlevel = "debug"\n')
        with patch("cmsadmin.config.CONFIG_SEARCH_PATHS", [tmp_path]):
            cfg = load_config()
        assert cfg.logging.level == "DEBUG"

    def test_malformed_toml_returns_defaults(self, tmp_path):
        toml_path = tmp_path / ".cms-admin.toml"
        toml_path.write_text("[server\nport = ")
        assert load_config(toml_path) == CmsAdminConfig()

    def test_invalid_values_return_defaults(self, tmp_path):
        toml_path = tmp_path / ".cms-admin.toml"
        toml_path.write_text('[content]\non_schema_delete = "block"\n')
        assert load_config(toml_path).content.on_schema_delete is SchemaDeletePolicy.RETAIN


class TestEnvVars:
    def test_env_overrides_toml(self, tmp_path, monkeypatch):
        toml_path = tmp_path / ".cms-admin.toml"
        toml_path.write_text("[server]\nport = 9000\n")
        monkeypatch.setenv("CMS_ADMIN_PORT", "9100")
        monkeypatch.setenv("CMS_ADMIN_SEED_DEMO", "false")
        monkeypatch.setenv("CMS_ADMIN_PREFERENCES_FILE", str(tmp_path / "p.json"))

        cfg = load_config(toml_path)

        assert cfg.server.port == 9100
        assert cfg.content.seed_demo is False
        assert cfg.storage.preferences_path == tmp_path / "p.json"

    def test_invalid_env_ignored(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CMS_ADMIN_PORT", "not-a-port")
        cfg = load_config(tmp_path / "nonexistent.toml")
        assert cfg.server.port == 8080


class TestMergeCliOverrides:
    def test_none_values_ignored(self):
        cfg = merge_cli_overrides(CmsAdminConfig(), server_port=None, log_level=None)
        assert cfg == CmsAdminConfig()

    def test_overrides_applied(self):
        cfg = merge_cli_overrides(
            CmsAdminConfig(),
            server_host="0.0.0.0",
            server_port=7000,
            log_level="info",
            preferences_file="/tmp/prefs.json",
        )
        assert cfg.server.host == "0.0.0.0"
        assert cfg.server.port == 7000
        assert cfg.logging.level == "INFO"
        assert cfg.storage.preferences_path == Path("/tmp/prefs.json")

    def test_unknown_keys_ignored(self):
        assert merge_cli_overrides(CmsAdminConfig(), colour="red") == CmsAdminConfig()
