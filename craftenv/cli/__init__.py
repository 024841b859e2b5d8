"""
Click CLI for craftenv.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click

from craftenv.cli.helpers import add_verbose_option, env_option
from craftenv.config.settings import VERSION, resolve_project_config
from craftenv.core.command_runner import CommandRunner
from craftenv.core.orchestrator import EnvironmentOrchestrator
from craftenv.utils.logging import error_exit, log_error, show_next_steps, show_summary


@click.command(
    help="""Configure a Craft CMS project to run on Laravel Homestead.

Registers the current directory, its local domain and database with
Homestead.yaml, maps the domain in /etc/hosts, provisions the box, trusts
the site's SSL certificate and creates craft/.env and scripts/.env.sh from
their examples.

Examples:
    craftenv
    craftenv --domain=example.local --security-key=abc123
    craftenv --remote-db-user=me --remote-db-password=pw --remote-db-host=db.example.com
"""
)
@env_option("--security-key", "CRAFTENV_SECURITY_KEY", help="Craft security key (generated when omitted)")
@env_option("--domain", "CRAFTENV_DOMAIN", help="Local domain (default: <project>.local)")
@env_option(
    "--homestead-path",
    "CRAFTENV_HOMESTEAD_PATH",
    type=click.Path(file_okay=False, path_type=Path),
    help="Homestead checkout (default: ~/homestead/Homestead)",
)
@env_option(
    "--ssl-path",
    "CRAFTENV_SSL_PATH",
    type=click.Path(file_okay=False, path_type=Path),
    help="Host directory for site certificates (default: ~/.homesteadssl)",
)
@env_option("--db-prefix", "CRAFTENV_DB_PREFIX", help="Database table prefix")
@env_option("--remote-db-user", "CRAFTENV_REMOTE_DB_USER", help="Remote database user")
@env_option("--remote-db-password", "CRAFTENV_REMOTE_DB_PASSWORD", help="Remote database password")
@env_option("--remote-db-host", "CRAFTENV_REMOTE_DB_HOST", help="Remote database host")
@env_option("--remote-db-name", "CRAFTENV_REMOTE_DB_NAME", help="Remote database name (default: project name)")
@env_option("--remote-db-port", "CRAFTENV_REMOTE_DB_PORT", type=int, help="Remote database port (default: 3306)")
@env_option("--remote-db-schema", "CRAFTENV_REMOTE_DB_SCHEMA", help="Remote database schema (default: public)")
@click.version_option(version=VERSION, prog_name="craftenv")
@add_verbose_option
def cli(
    security_key: Optional[str],
    domain: Optional[str],
    homestead_path: Optional[Path],
    ssl_path: Optional[Path],
    db_prefix: Optional[str],
    remote_db_user: Optional[str],
    remote_db_password: Optional[str],
    remote_db_host: Optional[str],
    remote_db_name: Optional[str],
    remote_db_port: Optional[int],
    remote_db_schema: Optional[str],
):
    config = resolve_project_config(
        security_key=security_key,
        domain=domain,
        homestead_path=homestead_path,
        ssl_path=ssl_path,
        db_prefix=db_prefix,
        remote_db_user=remote_db_user,
        remote_db_password=remote_db_password,
        remote_db_host=remote_db_host,
        remote_db_name=remote_db_name,
        remote_db_port=remote_db_port,
        remote_db_schema=remote_db_schema,
    )
    show_summary(config.project, config.local_domain, str(config.homestead_path))

    result = EnvironmentOrchestrator(config, runner=CommandRunner()).run()
    if not result.success:
        error_exit(f"Failed to configure the development environment: {result.message}")

    show_next_steps(config.local_domain)


def main():
    """Main entry point for the CLI."""
    try:
        cli()
    except KeyboardInterrupt:
        log_error("Operation cancelled by user")
        sys.exit(1)
    except Exception as exc:
        log_error(f"Unexpected error: {exc}")
        sys.exit(1)


__all__ = ["cli", "main"]
