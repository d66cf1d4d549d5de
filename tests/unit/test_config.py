"""
Test configuration directory resolution.
"""

from pathlib import Path

from acmeconf.config import AcmeConfig, default_config_dir, same_dir


class TestAcmeConfig:
    """Test AcmeConfig."""

    def test_default_under_home(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))

        config = AcmeConfig()

        assert config.config_dir == tmp_path / ".config" / "acme"
        assert default_config_dir() == tmp_path / ".config" / "acme"

    def test_environment_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv("ACME_CONFIG", str(tmp_path / "custom"))

        assert AcmeConfig().config_dir == tmp_path / "custom"

    def test_empty_environment_uses_default(self, monkeypatch, tmp_path):
        """An empty ACME_CONFIG counts as unset."""
        monkeypatch.setenv("HOME", str(tmp_path))
        monkeypatch.setenv("ACME_CONFIG", "")

        assert AcmeConfig().config_dir == tmp_path / ".config" / "acme"

    def test_explicit_override(self, monkeypatch, tmp_path):
        """An explicit override wins over the environment."""
        monkeypatch.setenv("ACME_CONFIG", str(tmp_path / "env"))
        config = AcmeConfig()

        overridden = config.with_override(tmp_path / "flag")

        assert overridden.config_dir == tmp_path / "flag"
        assert config.config_dir == tmp_path / "env"
        assert config.with_override(None) is config

    def test_tilde_expanded(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))
        monkeypatch.setenv("ACME_CONFIG", "~/acme")

        assert AcmeConfig().config_dir == tmp_path / "acme"
        assert AcmeConfig().with_override("~/other").config_dir == tmp_path / "other"

    def test_file_paths(self, tmp_path):
        config = AcmeConfig(config_dir=tmp_path)

        assert config.account_path == tmp_path / "account.json"
        assert config.key_path == tmp_path / "account.key"

    def test_log_level(self, monkeypatch):
        monkeypatch.setenv("ACME_LOG_LEVEL", "debug")

        assert AcmeConfig().log_level == "debug"


def test_same_dir():
    assert same_dir("/etc/acme/account.json", "account.key") == Path("/etc/acme/account.key")
