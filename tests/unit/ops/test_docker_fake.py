"""Tests for FakeDocker (Layer 1: Fake Infrastructure Tests).

These tests verify the fake implementation itself works correctly.
They ensure the test infrastructure is reliable for higher-layer tests.
"""

from pathlib import Path

from tests.fakes.docker_fake import EXITED, HEALTHY, STARTING, FakeDocker


def test_fake_docker_records_pull_and_up(tmp_path: Path) -> None:
    fake = FakeDocker()

    fake.pull(tmp_path)
    fake.up(tmp_path)

    assert fake.pull_calls == [tmp_path]
    assert fake.up_calls == [tmp_path]


def test_fake_docker_defaults_to_healthy() -> None:
    fake = FakeDocker()

    assert fake.container_status("graylog_graylog") == HEALTHY


def test_fake_docker_serves_statuses_in_order_then_repeats_last() -> None:
    fake = FakeDocker(statuses=[STARTING, EXITED])

    results = [fake.container_status("graylog_graylog") for _ in range(3)]

    assert results == [STARTING, EXITED, EXITED]
    assert fake.status_queries == ["graylog_graylog"] * 3
