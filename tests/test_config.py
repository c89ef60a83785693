"""
Tests for fedpost.config — config loading.
"""

from pathlib import Path

from fedpost.config import DEFAULT_SHELL, load_config


_DEFAULTS = {"scripts_dir": None, "shell": DEFAULT_SHELL}


class TestLoadConfig:
    def test_missing_file_returns_defaults(self, tmp_path):
        assert load_config(path=tmp_path / "nonexistent" / "config.toml") == _DEFAULTS

    def test_scripts_dir_and_shell(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text('scripts_dir = "/opt/fedora-post-install"\nshell = "zsh"\n')
        assert load_config(path=cfg) == {
            "scripts_dir": Path("/opt/fedora-post-install"),
            "shell": "zsh",
        }

    def test_scripts_dir_expands_home(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        cfg = tmp_path / "config.toml"
        cfg.write_text('scripts_dir = "~/fpi"\n')
        assert load_config(path=cfg)["scripts_dir"] == tmp_path / "fpi"

    def test_malformed_toml_returns_defaults(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text("scripts_dir = [not valid toml\n")
        assert load_config(path=cfg) == _DEFAULTS

    def test_bad_shapes_fall_back_per_key(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text('scripts_dir = 42\nshell = "sh"\n')
        assert load_config(path=cfg) == {"scripts_dir": None, "shell": "sh"}

    def test_blank_shell_keeps_default(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text('shell = "   "\n')
        assert load_config(path=cfg)["shell"] == DEFAULT_SHELL

    def test_unknown_keys_ignored(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text('# comment\ntitle = "workstation"\n')
        assert load_config(path=cfg) == _DEFAULTS

    def test_unreadable_file_returns_defaults(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text('shell = "zsh"\n')
        cfg.chmod(0o000)
        try:
            result = load_config(path=cfg)
        finally:
            cfg.chmod(0o644)  # restore for cleanup
        # root ignores file permissions; either outcome must be a valid config
        assert result in (_DEFAULTS, {"scripts_dir": None, "shell": "zsh"})
