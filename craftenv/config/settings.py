"""
Configuration settings for craftenv CLI.

This module contains the constants used throughout the provisioning run and
the resolver that turns command-line options into a ProjectConfig.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# Version information
VERSION = "1.0.0"

# Homestead box layout
BOX_CONFIG_FILENAME = "Homestead.yaml"
GUEST_NAMESPACE = "homestead"
GUEST_HOME = "/home/vagrant"
GUEST_PROJECTS_DIR = f"{GUEST_HOME}/{GUEST_NAMESPACE}"
GUEST_SSL_DIR = f"{GUEST_HOME}/.{GUEST_NAMESPACE}ssl"
GUEST_NGINX_SSL_DIR = "/etc/nginx/ssl"
SHARED_FOLDER_TYPE = "nfs"

# Database credentials Homestead creates for every database
HOMESTEAD_DB_USER = "homestead"
HOMESTEAD_DB_PASSWORD = "secret"

# Remote database defaults
DEFAULT_REMOTE_DB_PORT = 3306
DEFAULT_REMOTE_DB_SCHEMA = "public"

# Host files
HOSTS_FILE = Path("/etc/hosts")
MANIFEST_FILENAME = "package.json"

# Templates, relative to the project root
DOTENV_EXAMPLE = Path("craft") / ".env.example"
DOTENV = Path("craft") / ".env"
ENV_SH_EXAMPLE = Path("scripts") / "craft3-example.env.sh"
ENV_SH = Path("scripts") / ".env.sh"

# External commands
VAGRANT = "vagrant"
SECURITY_KEY_COMMAND = ["./craft/craft", "setup/security-key"]
SYSTEM_KEYCHAIN = "/Library/Keychains/System.keychain"


def get_default_homestead_path() -> Path:
    """Default location of the Homestead checkout."""
    return Path.home() / "homestead" / "Homestead"


def get_default_ssl_path() -> Path:
    """Default host directory shared with the guest for certificates."""
    return Path.home() / f".{GUEST_NAMESPACE}ssl"


@dataclass(frozen=True)
class RemoteDatabaseConfig:
    """Connection settings for the remote database pulled by scripts/.env.sh."""

    user: str
    password: str
    host: str
    name: str
    port: int = DEFAULT_REMOTE_DB_PORT
    schema: str = DEFAULT_REMOTE_DB_SCHEMA


@dataclass(frozen=True)
class ProjectConfig:
    """Fully resolved settings for one provisioning run."""

    project: str
    local_domain: str
    homestead_path: Path
    ssl_path: Path
    project_root: Path
    database_prefix: Optional[str] = None
    security_key: Optional[str] = None
    remote_database: Optional[RemoteDatabaseConfig] = None

    @property
    def box_config_path(self) -> Path:
        return self.homestead_path / BOX_CONFIG_FILENAME

    @property
    def guest_project_path(self) -> str:
        return f"{GUEST_PROJECTS_DIR}/{self.project}"

    @property
    def certificate_path(self) -> Path:
        return self.ssl_path / f"{self.local_domain}.crt"


def read_manifest_name(project_root: Path) -> Optional[str]:
    """Read the package name from package.json, without any npm scope.

    Any failure to read or parse the manifest returns None so that callers
    fall back to the directory name.
    """
    manifest = project_root / MANIFEST_FILENAME
    try:
        with open(manifest, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return None

    if not isinstance(data, dict):
        return None
    name = data.get("name")
    if not isinstance(name, str) or not name:
        return None
    return name.split("/")[-1] or None


def get_project_name(project_root: Path) -> str:
    """Get project name from package.json or fallback to directory name."""
    return read_manifest_name(project_root) or project_root.name


def resolve_remote_database(
    project: str,
    user: Optional[str] = None,
    password: Optional[str] = None,
    host: Optional[str] = None,
    name: Optional[str] = None,
    port: Optional[int] = None,
    schema: Optional[str] = None,
) -> Optional[RemoteDatabaseConfig]:
    """Build the remote database settings.

    User, password and host are all required; if any one is missing the
    remote database is treated as not configured at all.
    """
    if not all(isinstance(value, str) for value in (user, password, host)):
        return None

    return RemoteDatabaseConfig(
        user=user,
        password=password,
        host=host,
        name=name if isinstance(name, str) else project,
        port=port if isinstance(port, int) else DEFAULT_REMOTE_DB_PORT,
        schema=schema if isinstance(schema, str) else DEFAULT_REMOTE_DB_SCHEMA,
    )


def resolve_project_config(
    project_root: Optional[Path] = None,
    security_key: Optional[str] = None,
    domain: Optional[str] = None,
    homestead_path: Optional[Path] = None,
    ssl_path: Optional[Path] = None,
    db_prefix: Optional[str] = None,
    remote_db_user: Optional[str] = None,
    remote_db_password: Optional[str] = None,
    remote_db_host: Optional[str] = None,
    remote_db_name: Optional[str] = None,
    remote_db_port: Optional[int] = None,
    remote_db_schema: Optional[str] = None,
) -> ProjectConfig:
    """Resolve command-line options and defaults into a ProjectConfig."""
    root = Path(project_root) if project_root else Path.cwd()
    project = get_project_name(root)

    return ProjectConfig(
        project=project,
        local_domain=domain or f"{project}.local",
        homestead_path=Path(homestead_path) if homestead_path else get_default_homestead_path(),
        ssl_path=Path(ssl_path) if ssl_path else get_default_ssl_path(),
        project_root=root,
        database_prefix=db_prefix or None,
        security_key=security_key or None,
        remote_database=resolve_remote_database(
            project,
            user=remote_db_user,
            password=remote_db_password,
            host=remote_db_host,
            name=remote_db_name,
            port=remote_db_port,
            schema=remote_db_schema,
        ),
    )
