"""Tests for release_issues.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from release_issues.core.config import (
    DEFAULT_GITLAB_URL,
    DEFAULT_TOKEN_FILE,
    Config,
    ConfigError,
    GitLabConfig,
    ReportConfig,
    load_config,
    load_config_or_default,
)
from release_issues.core.links import DEFAULT_ISSUES_LINK
from release_issues.core.result import Err, Ok


class TestDefaults:
    def test_gitlab_defaults(self) -> None:
        config = GitLabConfig()
        assert config.url is None
        assert config.issues_link == DEFAULT_ISSUES_LINK
        assert config.token_file == "~/.gitlab"

    def test_report_defaults(self) -> None:
        assert ReportConfig().output_dir == "."

    def test_frozen(self) -> None:
        config = Config()
        with pytest.raises(AttributeError):
            config.gitlab = GitLabConfig()  # type: ignore[misc]


class TestServer:
    def test_derived_from_issues_link(self) -> None:
        config = GitLabConfig(issues_link="https://gitlab.example.org/a/b/c/d/-/issues")
        assert config.server() == "https://gitlab.example.org"

    def test_explicit_url_wins(self) -> None:
        config = GitLabConfig(url="https://mirror.example.org")
        assert config.server() == "https://mirror.example.org"

    def test_fallback(self) -> None:
        assert GitLabConfig(issues_link="not a link").server() == DEFAULT_GITLAB_URL


class TestFromDict:
    def test_empty(self) -> None:
        assert Config.from_dict({}) == Config()

    def test_full(self) -> None:
        config = Config.from_dict(
            {
                "gitlab": {
                    "url": "https://gitlab.example.org",
                    "issues_link": "https://gitlab.example.org/g/s/t/p/-/issues",
                    "token_file": "~/.config/gitlab-token",
                },
                "report": {"output_dir": "reports"},
            }
        )
        assert config.gitlab.url == "https://gitlab.example.org"
        assert config.gitlab.issues_link == "https://gitlab.example.org/g/s/t/p/-/issues"
        assert config.gitlab.token_file == "~/.config/gitlab-token"
        assert config.report.output_dir == "reports"

    def test_wrong_types_fall_back(self) -> None:
        config = Config.from_dict({"gitlab": {"token_file": 42}, "report": "nope"})
        assert config.gitlab.token_file == DEFAULT_TOKEN_FILE
        assert config.report == ReportConfig()


class TestLoadConfig:
    def test_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text('[report]\noutput_dir = "out"\n', encoding="utf-8")

        result = load_config(path)
        assert isinstance(result, Ok)
        assert result.value.report.output_dir == "out"

    def test_missing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "missing.toml"
        result = load_config(path)
        assert isinstance(result, Err)
        assert isinstance(result.error, ConfigError)
        assert result.error.path == path
        assert "not found" in result.error.message

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text("[gitlab\n", encoding="utf-8")
        result = load_config(path)
        assert isinstance(result, Err)
        assert "Invalid TOML" in result.error.message

    def test_directory_is_an_error(self, tmp_path: Path) -> None:
        result = load_config(tmp_path)
        assert isinstance(result, Err)
        assert result.error.path == tmp_path
        assert "Error reading config" in result.error.message


class TestLoadConfigOrDefault:
    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        assert load_config_or_default(tmp_path / "missing.toml") == Ok(Config())

    def test_broken_file_is_still_an_error(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text("= nope", encoding="utf-8")
        assert isinstance(load_config_or_default(path), Err)
