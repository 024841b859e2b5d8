"""
Pytest configuration and fixtures for craftenv tests.
"""

from pathlib import Path
from typing import List, Optional

import pytest
import yaml

from craftenv.config.settings import resolve_project_config
from craftenv.core.command_runner import CommandResult, CommandRunner


class FakeRunner(CommandRunner):
    """Records commands instead of running them.

    ``fail_on`` is a list of substrings; a command whose joined text contains
    one of them returns exit code 1.
    """

    def __init__(self, fail_on: Optional[List[str]] = None):
        self.calls = []
        self.fail_on = fail_on or []

    def run(self, command, cwd=None, input_text=None):
        args = [str(part) for part in command]
        self.calls.append({"command": args, "cwd": cwd, "input": input_text})
        joined = " ".join(args)
        if any(marker in joined for marker in self.fail_on):
            return CommandResult(args, 1, "", f"{args[0]}: failed")
        return CommandResult(args, 0, "", "")

    @property
    def commands(self) -> List[str]:
        return [" ".join(call["command"]) for call in self.calls]


def write_box_config(path: Path, data: dict) -> Path:
    with path.open("w") as handle:
        yaml.safe_dump(data, handle, sort_keys=False)
    return path


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def project_dir(tmp_path) -> Path:
    root = tmp_path / "my-site"
    root.mkdir()
    return root


@pytest.fixture
def homestead_dir(tmp_path) -> Path:
    root = tmp_path / "Homestead"
    root.mkdir()
    write_box_config(
        root / "Homestead.yaml",
        {
            "ip": "192.168.10.10",
            "provider": "virtualbox",
            "folders": [],
            "sites": [],
            "databases": [],
        },
    )
    return root


@pytest.fixture
def ssl_dir(tmp_path) -> Path:
    return tmp_path / ".homesteadssl"


@pytest.fixture
def hosts_file(tmp_path) -> Path:
    hosts = tmp_path / "hosts"
    hosts.write_text("127.0.0.1 localhost\n")
    return hosts


@pytest.fixture
def project_config(project_dir, homestead_dir, ssl_dir):
    return resolve_project_config(
        project_root=project_dir,
        homestead_path=homestead_dir,
        ssl_path=ssl_dir,
    )


@pytest.fixture
def craft_templates(project_dir) -> Path:
    """Example env files as shipped by the Craft starter project."""
    (project_dir / "craft").mkdir()
    (project_dir / "scripts").mkdir()
    (project_dir / "craft" / ".env.example").write_text(
        "# Craft environment\n"
        'ENVIRONMENT="dev"\n'
        'SECURITY_KEY=""\n'
        'DB_DRIVER="mysql"\n'
        'DB_SERVER="localhost"\n'
        'DB_USER="root"\n'
        'DB_PASSWORD=""\n'
        'DB_DATABASE=""\n'
        'DB_SCHEMA="public"\n'
        'DB_TABLE_PREFIX=""\n'
        'DB_PORT=""\n'
    )
    (project_dir / "scripts" / "craft3-example.env.sh").write_text(
        "# Local settings\n"
        'GLOBAL_CRAFT_PATH="./"\n'
        'GLOBAL_DB_TABLE_PREFIX=""\n'
        'LOCAL_ROOT_PATH="REPLACE_ME"\n'
        'LOCAL_ASSETS_PATH=${LOCAL_ROOT_PATH}"REPLACE_ME"\n'
        'LOCAL_DB_NAME="REPLACE_ME"\n'
        'LOCAL_DB_PASSWORD="REPLACE_ME"\n'
        'LOCAL_DB_USER="REPLACE_ME"\n'
        'LOCAL_DB_HOST="localhost"\n'
        "# Remote settings\n"
        'REMOTE_DB_NAME="REPLACE_ME"\n'
        'REMOTE_DB_PASSWORD="REPLACE_ME"\n'
        'REMOTE_DB_USER="REPLACE_ME"\n'
        'REMOTE_DB_HOST="localhost"\n'
        'REMOTE_DB_PORT="3306"\n'
        'REMOTE_DB_SCHEMA="public"\n'
    )
    return project_dir
