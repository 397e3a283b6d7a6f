"""
Tests for the user defaults loader.
"""

import textwrap
from pathlib import Path

import pytest

from cinit.core.config.loader import (
    ConfigError,
    UserDefaults,
    default_config_path,
    find_config_file,
    load_defaults,
)
from cinit.core.models.options import ColorMode, Compiler, Strictness


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch):
    """Keep the real ~/.config out of every test."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.delenv("CINIT_CONFIG", raising=False)


class TestFindConfigFile:
    def test_explicit_returned_even_if_missing(self, tmp_path: Path):
        missing = tmp_path / "nope.yml"
        assert find_config_file(missing) == missing

    def test_env_var(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("CINIT_CONFIG", str(tmp_path / "env.yml"))
        assert find_config_file() == tmp_path / "env.yml"

    def test_implicit_missing(self):
        assert find_config_file() is None

    def test_implicit_present(self, tmp_path: Path):
        path = default_config_path()
        assert path == tmp_path / "xdg" / "c-init" / "config.yml"
        path.parent.mkdir(parents=True)
        path.write_text("cc: gcc\n")
        assert find_config_file() == path


class TestLoadDefaults:
    def test_no_file_gives_builtins(self):
        assert load_defaults() == UserDefaults()

    def test_builtins(self):
        d = UserDefaults()
        assert d.cc is Compiler.CLANG
        assert d.strictness is Strictness.STRICT
        assert d.linter_strictness is None
        assert d.color is ColorMode.AUTO
        assert not (d.no_git or d.no_commit or d.no_hello or d.no_tests)

    def test_valid_file(self, tmp_path: Path):
        path = tmp_path / "config.yml"
        path.write_text(textwrap.dedent("""\
            cc: gcc
            strictness: strictest
            linter-strictness: loose
            color: never
            no-commit: true
        """))
        d = load_defaults(path)
        assert d.cc is Compiler.GCC
        assert d.strictness is Strictness.STRICTEST
        assert d.linter_strictness is Strictness.LOOSE
        assert d.color is ColorMode.NEVER
        assert d.no_commit is True

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "config.yml"
        path.write_text("")
        assert load_defaults(path) == UserDefaults()

    def test_explicit_missing(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_defaults(tmp_path / "nope.yml")

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "config.yml"
        path.write_text("cc: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_defaults(path)

    def test_not_a_mapping(self, tmp_path: Path):
        path = tmp_path / "config.yml"
        path.write_text("- gcc\n- clang\n")
        with pytest.raises(ConfigError, match="Expected a YAML mapping"):
            load_defaults(path)

    def test_unknown_value(self, tmp_path: Path):
        path = tmp_path / "config.yml"
        path.write_text("cc: tcc\n")
        with pytest.raises(ConfigError, match="Invalid defaults"):
            load_defaults(path)

    def test_unknown_key(self, tmp_path: Path):
        path = tmp_path / "config.yml"
        path.write_text("compiler: gcc\n")
        with pytest.raises(ConfigError):
            load_defaults(path)

    def test_env_var_file(self, tmp_path: Path, monkeypatch):
        path = tmp_path / "env.yml"
        path.write_text("strictness: loose\n")
        monkeypatch.setenv("CINIT_CONFIG", str(path))
        assert load_defaults().strictness is Strictness.LOOSE
