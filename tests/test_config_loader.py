# tests/test_config_loader.py
"""
Tests for layered YAML configuration.
"""

from __future__ import annotations

import pytest

from rfcli.config.loader import (
    ConfigParseError,
    ConfigValidationError,
    deep_merge,
    load_config,
    load_config_dict,
)
from rfcli.core.paths import user_config_path

pytestmark = pytest.mark.tier2


class TestDeepMerge:
    """Nested dicts merge, everything else is replaced."""

    def test_nested_merge(self):
        assert deep_merge({"a": 1, "b": {"c": 2, "d": 3}}, {"b": {"c": 10}}) == {"a": 1, "b": {"c": 10, "d": 3}}

    def test_lists_replaced(self):
        assert deep_merge({"a": [1, 2]}, {"a": [3]}) == {"a": [3]}

    def test_inputs_not_mutated(self):
        base = {"b": {"c": 1}}

        deep_merge(base, {"b": {"c": 2}})

        assert base == {"b": {"c": 1}}


class TestLoadConfig:
    """Package defaults plus the user file."""

    def test_defaults(self, isolated_env):
        config = load_config()

        assert config.source.base_url == "https://www.rfc-editor.org"
        assert config.tldr.backend == "groq"
        assert config.tldr.context_lines == 300
        assert config.tldr.backends["groq"].model == "llama-3.1-8b-instant"
        assert config.tldr.backends["groq"].api_key_env == "GROQ_API_KEY"
        assert config.tldr.backends["ollama"].api_key_env is None
        assert config.selector.command == "fzf"
        assert config.logging.level == "WARNING"

    def test_user_file_under_xdg_config_home(self, isolated_env):
        path = user_config_path()
        path.parent.mkdir(parents=True)
        path.write_text("read:\n  error_pause_seconds: 0.5\n", encoding="utf-8")

        config = load_config()

        assert path == isolated_env / "xdg-config" / "rfcli" / "config.yaml"
        assert config.read.error_pause_seconds == 0.5
        assert config.read.max_consecutive_errors == 3

    def test_env_override_path(self, isolated_env, monkeypatch, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("tldr:\n  backend: ollama\nlogging:\n  level: debug\n", encoding="utf-8")
        monkeypatch.setenv("RFCLI_CONFIG", str(path))

        config = load_config()

        assert config.tldr.backend == "ollama"
        assert config.tldr.backends["groq"].model == "llama-3.1-8b-instant"
        assert config.logging.level == "DEBUG"

    def test_new_backend_entry(self, tmp_path):
        path = tmp_path / "c.yaml"
        path.write_text(
            "tldr:\n"
            "  backend: openai\n"
            "  backends:\n"
            "    openai:\n"
            "      base_url: https://api.openai.com/v1/\n"
            "      model: gpt-4o-mini\n"
            "      api_key_env: OPENAI_API_KEY\n",
            encoding="utf-8",
        )

        config = load_config(path)

        assert set(config.tldr.backends) == {"groq", "ollama", "openai"}

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "c.yaml"
        path.write_text("read: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigParseError, match="Invalid YAML"):
            load_config(path)

    def test_non_mapping_root(self, tmp_path):
        path = tmp_path / "c.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ConfigParseError, match="mapping"):
            load_config(path)

    def test_unknown_key_rejected(self, tmp_path):
        path = tmp_path / "c.yaml"
        path.write_text("read:\n  colour: blue\n", encoding="utf-8")

        with pytest.raises(ConfigValidationError) as exc_info:
            load_config(path)

        assert exc_info.value.path == path

    def test_backend_without_entry_rejected(self, tmp_path):
        path = tmp_path / "c.yaml"
        path.write_text("tldr:\n  backend: nowhere\n", encoding="utf-8")

        with pytest.raises(ConfigValidationError, match="nowhere"):
            load_config(path)

    def test_unbalanced_pager_quote_rejected(self, tmp_path):
        path = tmp_path / "c.yaml"
        path.write_text("read:\n  pager: \"less '-R\"\n", encoding="utf-8")

        with pytest.raises(ConfigValidationError, match="pager"):
            load_config(path)

    def test_blank_pager_means_default(self, tmp_path):
        path = tmp_path / "c.yaml"
        path.write_text("read:\n  pager: \"  \"\n", encoding="utf-8")

        assert load_config(path).read.pager is None

    def test_empty_user_file_means_defaults(self, tmp_path):
        path = tmp_path / "c.yaml"
        path.write_text("", encoding="utf-8")

        assert load_config_dict(path)["tldr"]["backend"] == "groq"
