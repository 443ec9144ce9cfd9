"""Tests for the Graylog readiness poll."""

from pathlib import Path

import pytest

from graylog_installer.core.errors import HealthCheckFailure, PollTimeout
from graylog_installer.core.settings import InstallerSettings
from graylog_installer.steps.readiness import wait_until_healthy
from tests.fakes.context import create_test_context
from tests.fakes.docker_fake import EXITED, HEALTHY, STARTING, FakeDocker
from tests.fakes.time import FakeTime
from tests.fakes.user_feedback import FakeUserFeedback


def test_polls_until_healthy(tmp_path: Path) -> None:
    """Two "starting" statuses then healthy: three queries, initial wait then two intervals."""
    docker = FakeDocker(statuses=[STARTING, STARTING, HEALTHY])
    time = FakeTime()
    feedback = FakeUserFeedback()
    ctx = create_test_context(tmp_path, docker=docker, time=time, feedback=feedback)

    attempts = wait_until_healthy(ctx)

    assert attempts == 3
    assert docker.status_queries == ["graylog_graylog"] * 3
    assert time.sleep_calls == [10.0, 2.0, 2.0]
    assert feedback.texts("info").count("Current status : starting)") == 2


def test_healthy_at_first_query(tmp_path: Path) -> None:
    time = FakeTime()
    ctx = create_test_context(tmp_path, time=time)

    assert wait_until_healthy(ctx) == 1
    assert time.sleep_calls == [10.0]


def test_container_not_running_aborts_immediately(tmp_path: Path) -> None:
    docker = FakeDocker(statuses=[EXITED])
    time = FakeTime()
    ctx = create_test_context(tmp_path, docker=docker, time=time)

    with pytest.raises(HealthCheckFailure) as exc_info:
        wait_until_healthy(ctx)

    assert exc_info.value.exit_code == 5
    assert "Error when starting graylog" in exc_info.value.message
    assert len(docker.status_queries) == 1
    assert time.sleep_calls == [10.0]


def test_container_stopping_while_starting_aborts(tmp_path: Path) -> None:
    docker = FakeDocker(statuses=[STARTING, EXITED])
    ctx = create_test_context(tmp_path, docker=docker)

    with pytest.raises(HealthCheckFailure):
        wait_until_healthy(ctx)

    assert len(docker.status_queries) == 2


def test_attempt_budget_exhausted(tmp_path: Path) -> None:
    docker = FakeDocker(statuses=[STARTING])
    time = FakeTime()
    settings = InstallerSettings(poll_max_attempts=4, lock_dir=tmp_path)
    ctx = create_test_context(tmp_path, docker=docker, time=time, settings=settings)

    with pytest.raises(PollTimeout) as exc_info:
        wait_until_healthy(ctx)

    assert exc_info.value.exit_code == 6
    assert len(docker.status_queries) == 4
    assert time.sleep_calls == [10.0, 2.0, 2.0, 2.0]
    assert time.total_slept == 16.0


def test_zero_budget_polls_without_limit(tmp_path: Path) -> None:
    docker = FakeDocker(statuses=[STARTING] * 200 + [HEALTHY])
    settings = InstallerSettings(poll_max_attempts=0, lock_dir=tmp_path)
    ctx = create_test_context(tmp_path, docker=docker, settings=settings)

    assert wait_until_healthy(ctx) == 201


def test_log_hint_points_at_install_dir(tmp_path: Path) -> None:
    feedback = FakeUserFeedback()
    ctx = create_test_context(tmp_path, feedback=feedback)

    wait_until_healthy(ctx)

    install_dir = tmp_path / "home" / "docker" / "graylog"
    assert (
        f"You can view startup logs in {install_dir} by running 'bash viewlogs.sh graylog'"
        in feedback.texts("info")
    )


def test_container_filter_follows_install_dir_name(tmp_path: Path) -> None:
    """docker-compose names containers after the project directory."""
    docker = FakeDocker()
    settings = InstallerSettings(install_dir=Path("/srv/logstack"), lock_dir=tmp_path)
    ctx = create_test_context(tmp_path, docker=docker, settings=settings)

    wait_until_healthy(ctx)

    assert docker.status_queries == ["logstack_graylog"]
