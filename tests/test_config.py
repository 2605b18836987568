"""Tests for the YAML configuration loader."""

from ghstatus.config import load_config
from ghstatus.models import DashboardSettings


class TestLoadConfig:
    def test_missing_file_uses_defaults(self, tmp_path, monkeypatch, capsys):
        monkeypatch.delenv("PORT", raising=False)
        settings = load_config(tmp_path / "nope.yaml")
        assert settings == DashboardSettings()
        assert "using defaults" in capsys.readouterr().out

    def test_overrides(self, tmp_path, monkeypatch):
        monkeypatch.delenv("PORT", raising=False)
        path = tmp_path / "config.yaml"
        path.write_text(
            "dashboard:\n"
            "  feed_url: https://example.com/history.atom\n"
            "  window_months: 2\n"
            "  issue_window_minutes: 15\n"
            "  serve: true\n"
        )
        settings = load_config(path)
        assert settings.feed_url == "https://example.com/history.atom"
        assert settings.window_months == 2
        assert settings.issue_window_minutes == 15
        assert settings.serve is True
        assert settings.request_timeout == 15

    def test_empty_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("PORT", raising=False)
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(path) == DashboardSettings()

    def test_port_env_override(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        path = tmp_path / "config.yaml"
        path.write_text("dashboard:\n  port: 9000\n")
        assert load_config(path).port == 8080
