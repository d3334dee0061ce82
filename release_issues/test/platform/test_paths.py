"""Tests for release_issues.platform.paths module."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from release_issues.core.result import Err, Ok
from release_issues.platform.paths import (
    APP_NAME,
    clear_caches,
    expand_home,
    home,
    user_config_dir,
    user_config_path,
)


@pytest.fixture(autouse=True)
def clear_path_caches() -> None:
    clear_caches()


class TestHome:
    def test_uses_home_on_unix(self) -> None:
        with (
            patch("release_issues.platform.paths.is_windows", return_value=False),
            patch.dict(os.environ, {"HOME": "/home/qa"}),
        ):
            clear_caches()
            assert home() == Path("/home/qa")

    def test_uses_userprofile_on_windows(self) -> None:
        with (
            patch("release_issues.platform.paths.is_windows", return_value=True),
            patch.dict(os.environ, {"USERPROFILE": r"C:\Users\qa"}),
        ):
            clear_caches()
            assert home() == Path(r"C:\Users\qa")


class TestExpandHome:
    def test_replaces_first_tilde(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("release_issues.platform.paths.home", lambda: Path("/home/qa"))
        assert expand_home("~/.gitlab") == Ok("/home/qa/.gitlab")

    def test_only_first_tilde(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("release_issues.platform.paths.home", lambda: Path("/home/qa"))
        assert expand_home("~/a~b") == Ok("/home/qa/a~b")

    def test_no_tilde_is_unchanged(self) -> None:
        assert expand_home("/etc/gitlab-token") == Ok("/etc/gitlab-token")

    def test_unresolvable_home(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def no_home() -> Path:
            raise RuntimeError("Could not determine home directory.")

        monkeypatch.setattr("release_issues.platform.paths.home", no_home)
        result = expand_home("~/.gitlab")
        assert isinstance(result, Err)
        assert "cannot resolve home directory" in result.error.message


class TestUserConfigDir:
    def test_xdg_config_home(self) -> None:
        with (
            patch("release_issues.platform.paths.is_windows", return_value=False),
            patch.dict(os.environ, {"XDG_CONFIG_HOME": "/tmp/xdg"}),
        ):
            clear_caches()
            assert user_config_dir() == Path("/tmp/xdg") / APP_NAME

    def test_defaults_to_dot_config(self) -> None:
        env = {k: v for k, v in os.environ.items() if k != "XDG_CONFIG_HOME"}
        env["HOME"] = "/home/qa"
        with (
            patch("release_issues.platform.paths.is_windows", return_value=False),
            patch.dict(os.environ, env, clear=True),
        ):
            clear_caches()
            assert user_config_dir() == Path("/home/qa/.config") / APP_NAME

    def test_config_path(self) -> None:
        with (
            patch("release_issues.platform.paths.is_windows", return_value=False),
            patch.dict(os.environ, {"XDG_CONFIG_HOME": "/tmp/xdg"}),
        ):
            clear_caches()
            assert user_config_path() == Path("/tmp/xdg/release-issues/config.toml")
