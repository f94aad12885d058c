"""Tests for launching the file finder with a fallback."""

import subprocess
from typing import Any
from unittest.mock import call, patch

import pytest

from super_toolbelt.quick_open import build_command, execute_quick_open


@pytest.fixture
def config() -> dict[str, Any]:
    """Return settings with distinct primary and fallback finder commands."""
    return {
        "quick_open": {
            "primary": ["fzf", "--query", "{query}"],
            "fallback": ["fd", "--full-path", "{query}"],
        }
    }


def test_build_command() -> None:
    """Verify that the placeholder is substituted into every argument."""
    assert build_command(["fzf", "--query={query}"], "a/b") == ["fzf", "--query=a/b"]
    assert build_command(["fzf", "--query", "{query}"], "") == ["fzf", "--query", ""]


def test_primary_succeeds(config: dict[str, Any]) -> None:
    """Verify that the fallback is not run when the primary succeeds."""
    with patch("super_toolbelt.quick_open.subprocess.run") as run:
        assert execute_quick_open("foo/bar", config) == 0
    run.assert_called_once_with(["fzf", "--query", "foo/bar"], check=True)


def test_falls_back_when_primary_missing(config: dict[str, Any]) -> None:
    """Verify that a primary command that cannot start triggers the fallback."""
    with patch(
        "super_toolbelt.quick_open.subprocess.run",
        side_effect=[FileNotFoundError("fzf"), None],
    ) as run:
        assert execute_quick_open("foo/bar", config) == 0
    assert run.call_args_list == [
        call(["fzf", "--query", "foo/bar"], check=True),
        call(["fd", "--full-path", "foo/bar"], check=True),
    ]


@pytest.mark.parametrize("status", [1, 130])
def test_finder_exit_status_does_not_fall_back(
    config: dict[str, Any], status: int
) -> None:
    """Verify that a cancelled or empty finder run does not start the fallback."""
    error = subprocess.CalledProcessError(status, ["fzf"])
    with patch(
        "super_toolbelt.quick_open.subprocess.run", side_effect=[error, None]
    ) as run:
        assert execute_quick_open("x", config) == status
    run.assert_called_once_with(["fzf", "--query", "x"], check=True)


def test_fallback_failure_status(config: dict[str, Any]) -> None:
    """Verify that the fallback's exit code is returned when it fails."""
    errors = [FileNotFoundError("fzf"), subprocess.CalledProcessError(3, ["fd"])]
    with patch("super_toolbelt.quick_open.subprocess.run", side_effect=errors):
        assert execute_quick_open("x", config) == 3  # noqa: PLR2004


def test_unconfigured_commands() -> None:
    """Verify that missing commands fail without raising."""
    with patch("super_toolbelt.quick_open.subprocess.run") as run:
        assert execute_quick_open("x", {}) == 1
    run.assert_not_called()
