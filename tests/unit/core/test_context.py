"""Tests for context wiring."""

import logging
from pathlib import Path

import pytest

from graylog_installer.core.context import DEBUG_ENV_VAR, configure_debug_logging, create_feedback
from graylog_installer.core.run_config import RunConfig
from graylog_installer.core.user_feedback import CapturedFeedback, InteractiveFeedback
from tests.fakes.context import create_test_context
from tests.fakes.prompter import FakePrompter
from tests.fakes.user_feedback import FakeUserFeedback


def test_interactive_run_uses_terminal_feedback() -> None:
    run_config = RunConfig.from_flags(verbose=True, no_colour=True, assume_yes=False)

    assert isinstance(create_feedback(run_config), InteractiveFeedback)


def test_unattended_run_captures_feedback() -> None:
    run_config = RunConfig.from_flags(verbose=False, no_colour=False, assume_yes=True)

    feedback = create_feedback(run_config)
    try:
        assert isinstance(feedback, CapturedFeedback)
        assert feedback.log_path.name.startswith("graylog-installer.")
        assert feedback.log_path.exists()
    finally:
        feedback.close()


def test_assume_yes_sets_package_manager_flag() -> None:
    assert RunConfig.from_flags(verbose=False, no_colour=False, assume_yes=True) == RunConfig(
        verbose=False, color_disabled=False, assume_yes=True, package_manager_yes_flag="-y"
    )
    interactive = RunConfig.from_flags(verbose=False, no_colour=False, assume_yes=False)
    assert interactive.package_manager_yes_flag is None


def test_derived_collaborators_share_context(tmp_path: Path) -> None:
    """consent, steps and escalator are built over the context's fakes."""
    feedback = FakeUserFeedback()
    ctx = create_test_context(tmp_path, feedback=feedback, prompter=FakePrompter(["y"]))

    assert ctx.consent.confirm("Are you sure ? [N/y]") is True
    assert feedback.messages == [("prompt", "Are you sure ? [N/y]")]
    assert ctx.escalator.ensure_elevated() is True


def test_debug_logging_only_with_env_var(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    monkeypatch.delenv(DEBUG_ENV_VAR, raising=False)
    configure_debug_logging()
    assert calls == []

    monkeypatch.setenv(DEBUG_ENV_VAR, "1")
    configure_debug_logging()
    assert calls[0]["level"] == logging.DEBUG
