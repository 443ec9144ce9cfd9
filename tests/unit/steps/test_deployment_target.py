from pathlib import Path

import pytest

from graylog_installer.steps.deployment_target import DeploymentTarget


def test_fields_are_write_once() -> None:
    target = DeploymentTarget()
    target.external_address = "192.168.1.10"

    with pytest.raises(AttributeError, match="external_address"):
        target.external_address = "10.0.0.1"

    assert target.external_address == "192.168.1.10"


def test_false_counts_as_set() -> None:
    target = DeploymentTarget()
    target.password_defaulted = False

    with pytest.raises(AttributeError):
        target.password_defaulted = True


def test_complete_only_when_every_field_is_set() -> None:
    target = DeploymentTarget()
    assert not target.is_complete

    target.external_address = "192.168.1.10"
    target.root_password = "admin"
    target.root_password_digest = "digest"
    target.password_secret = "secret"
    target.install_directory = Path("/home/deploy/docker/graylog")
    target.password_defaulted = True

    assert target.is_complete
    assert target.web_url == "http://192.168.1.10:9000/"
