"""Tests for kernel parameter configuration."""

from pathlib import Path

from graylog_installer.steps.kernel_tuner import MAX_MAP_COUNT, SWAPPINESS, configure_kernel
from tests.fakes.command_runner import FakeCommandRunner
from tests.fakes.context import create_test_context
from tests.fakes.host import FakeHost


def test_parameters_applied_live_and_persisted(tmp_path: Path) -> None:
    runner = FakeCommandRunner()
    ctx = create_test_context(tmp_path, runner=runner)

    configure_kernel(ctx)

    assert runner.argvs == [
        ("sysctl", "-w", "vm.max_map_count=262144"),
        ("tee", "/etc/sysctl.d/999-graylog-max_map_count.cfg"),
        ("tee", "/etc/sysctl.d/999-graylog-swappiness.cfg"),
        ("sysctl", "-w", "vm.swappiness=1"),
    ]
    assert [call.input_text for call in runner.calls] == [
        None,
        "vm.max_map_count=262144\n",
        "vm.swappiness=1\n",
        None,
    ]


def test_persisted_fragments_are_written_through_sudo(tmp_path: Path) -> None:
    runner = FakeCommandRunner()
    host = FakeHost(home=tmp_path, elevated=False)
    ctx = create_test_context(tmp_path, runner=runner, host=host)

    configure_kernel(ctx)

    assert runner.argvs[1] == ("sudo", "-H", "--", "tee", str(MAX_MAP_COUNT.fragment_path))


def test_parameter_values() -> None:
    assert MAX_MAP_COUNT.assignment == "vm.max_map_count=262144"
    assert SWAPPINESS.assignment == "vm.swappiness=1"
