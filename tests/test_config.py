"""
Tests for configuration and variables files.
"""

import pytest

from cfmt.config import Settings, load_settings, load_vars_file
from cfmt.errors import CFUserError, ConfigError

from .conftest import write


class TestLoadSettings:

    def test_no_config_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("CFMT_LOCALE", raising=False)
        assert load_settings(tmp_path) == Settings()

    def test_full_config(self, tmp_path, monkeypatch):
        monkeypatch.delenv("CFMT_LOCALE", raising=False)
        write(tmp_path / "cfmt.yaml", """
            locale: de-DE
            vars:
              name: Ann
              total: 1234.5
              1: one
        """)

        settings = load_settings(tmp_path)

        assert settings.locale == "de-DE"
        assert settings.vars == {"name": "Ann", "total": 1234.5, "1": "one"}

    def test_empty_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("CFMT_LOCALE", raising=False)
        write(tmp_path / "cfmt.yaml", "")
        assert load_settings(tmp_path) == Settings()

    def test_environment_overrides_locale(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CFMT_LOCALE", "fr")
        write(tmp_path / "cfmt.yaml", "locale: de\n")
        assert load_settings(tmp_path).locale == "fr"

    @pytest.mark.parametrize("text, message", [
        ("- a\n- b\n", "must be a mapping"),
        ("colour: red\n", "unknown keys colour"),
        ("locale: 5\n", "'locale' must be a string"),
        ("vars: [1, 2]\n", "'vars' must be a mapping"),
        ("vars: {a: 1\n", "Invalid YAML"),
    ])
    def test_invalid(self, tmp_path, text, message):
        write(tmp_path / "cfmt.yaml", text)

        with pytest.raises(ConfigError, match=message):
            load_settings(tmp_path)

    def test_config_error_is_user_error(self):
        assert issubclass(ConfigError, CFUserError)


class TestLoadVarsFile:

    def test_mapping(self, tmp_path):
        path = write(tmp_path / "vars.yaml", """
            name: Ann
            count: 3
            ratio: 0.25
            empty:
        """)

        assert load_vars_file(path) == {"name": "Ann", "count": 3, "ratio": 0.25, "empty": None}

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_vars_file(tmp_path / "nope.yaml")

    def test_not_a_mapping(self, tmp_path):
        path = write(tmp_path / "vars.yaml", "just text\n")
        with pytest.raises(ConfigError, match="must be a mapping"):
            load_vars_file(path)

    def test_non_scalar_key(self, tmp_path):
        path = write(tmp_path / "vars.yaml", "true: 1\n")
        with pytest.raises(ConfigError, match="scalars"):
            load_vars_file(path)
