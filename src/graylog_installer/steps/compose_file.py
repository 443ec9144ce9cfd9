"""Rendering of the Graylog docker-compose project files."""

import re
from pathlib import Path
from typing import Any

import yaml

COMPOSE_FILE_NAME = "docker-compose.yaml"
VIEWLOGS_SCRIPT_NAME = "viewlogs.sh"

VIEWLOGS_SCRIPT = """#!/bin/bash
docker-compose logs -f --tail=1000 $1
"""


def compose_project_name(project_dir: Path) -> str:
    """Return the project name docker-compose derives from the directory name.

    Containers are named `<project>_<service>_<index>`.

    Example:
        >>> compose_project_name(Path("/srv/Log.Stack"))
        'logstack'
    """
    return re.sub(r"[^-_a-z0-9]", "", project_dir.name.lower())


def build_compose_services(
    password_secret: str, root_password_digest: str, external_address: str
) -> dict[str, Any]:
    """Return the compose document for MongoDB, Elasticsearch, Graylog and the MaxMind updater.

    Only the SHA-256 digest of the root password is embedded, never the
    password itself.
    """
    return {
        "version": "2",
        "services": {
            "mongodb": {
                "image": "mongo:3",
                "volumes": ["./data/mongodb:/data/db"],
            },
            "elasticsearch": {
                "image": "docker.elastic.co/elasticsearch/elasticsearch-oss:6.6.1",
                "environment": [
                    "http.host=0.0.0.0",
                    "transport.host=localhost",
                    "network.host=0.0.0.0",
                    "cluster.name=graylog",
                ],
                "volumes": ["./data/elasticsearch/data:/data"],
                "ulimits": {"memlock": {"soft": -1, "hard": -1}},
                "mem_limit": "1g",
            },
            "graylog": {
                "image": "graylog/graylog:3.0",
                "environment": [
                    f"GRAYLOG_PASSWORD_SECRET={password_secret}",
                    f"GRAYLOG_ROOT_PASSWORD_SHA2={root_password_digest}",
                    f"GRAYLOG_HTTP_EXTERNAL_URI=http://{external_address}:9000/",
                ],
                "links": ["mongodb:mongo", "elasticsearch"],
                "depends_on": ["mongodb", "elasticsearch"],
                "volumes": ["./data/graylog/:/etc/graylog/"],
                "ports": [
                    # web interface and REST API
                    "9000:9000",
                    # syslog
                    "514:514",
                    "514:514/udp",
                    # GELF
                    "12201:12201",
                    "12201:12201/udp",
                ],
            },
            "maxmind-updater": {
                "image": "pockost/maxmind-updater",
                "volumes": ["./data/graylog/server:/database"],
            },
        },
    }


def render_compose_file(
    password_secret: str, root_password_digest: str, external_address: str
) -> str:
    """Render the compose document as YAML text."""
    document = build_compose_services(password_secret, root_password_digest, external_address)
    return yaml.safe_dump(
        document,
        default_flow_style=False,
        allow_unicode=True,
        sort_keys=False,
    )
