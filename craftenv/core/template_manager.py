"""
Environment file generation for craftenv.

This module copies the project's example env files to their live names and
fills in the values for the Homestead box. Placeholders are replaced
literally, first occurrence only.
"""

import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List

from ..config.settings import (
    DOTENV,
    DOTENV_EXAMPLE,
    ENV_SH,
    ENV_SH_EXAMPLE,
    HOMESTEAD_DB_PASSWORD,
    HOMESTEAD_DB_USER,
    ProjectConfig,
)
from ..utils.file_utils import replace_in_file
from ..utils.logging import log_error, log_info
from .pipeline import StepResult


@dataclass
class EnvTemplate:
    """An example file, its live location and the values to fill in."""

    example: Path
    target: Path
    replacements: Dict[str, str]


def build_dotenv_replacements(config: ProjectConfig, ip: str) -> Dict[str, str]:
    """Replacements for craft/.env."""
    replacements = {}
    if config.security_key:
        replacements['SECURITY_KEY=""'] = f'SECURITY_KEY="{config.security_key}"'
    replacements.update({
        'DB_SERVER="localhost"': f'DB_SERVER="{ip}"',
        'DB_USER="root"': f'DB_USER="{HOMESTEAD_DB_USER}"',
        'DB_PASSWORD=""': f'DB_PASSWORD="{HOMESTEAD_DB_PASSWORD}"',
        'DB_DATABASE=""': f'DB_DATABASE="{config.project}"',
    })
    if config.database_prefix:
        replacements['DB_TABLE_PREFIX=""'] = f'DB_TABLE_PREFIX="{config.database_prefix}"'
    return replacements


def build_env_sh_replacements(config: ProjectConfig, ip: str) -> Dict[str, str]:
    """Replacements for scripts/.env.sh, the db pull/push script settings."""
    replacements = {
        'GLOBAL_CRAFT_PATH="./"': 'GLOBAL_CRAFT_PATH="./craft/"',
        'LOCAL_ROOT_PATH="REPLACE_ME"': f'LOCAL_ROOT_PATH="{config.project_root}/"',
        'LOCAL_ASSETS_PATH=${LOCAL_ROOT_PATH}"REPLACE_ME"': 'LOCAL_ASSETS_PATH=${LOCAL_ROOT_PATH}"files/"',
        'LOCAL_DB_NAME="REPLACE_ME"': f'LOCAL_DB_NAME="{config.project}"',
        'LOCAL_DB_PASSWORD="REPLACE_ME"': f'LOCAL_DB_PASSWORD="{HOMESTEAD_DB_PASSWORD}"',
        'LOCAL_DB_USER="REPLACE_ME"': f'LOCAL_DB_USER="{HOMESTEAD_DB_USER}"',
        'LOCAL_DB_HOST="localhost"': f'LOCAL_DB_HOST="{ip}"',
    }

    remote = config.remote_database
    if remote:
        replacements.update({
            'REMOTE_DB_NAME="REPLACE_ME"': f'REMOTE_DB_NAME="{remote.name}"',
            'REMOTE_DB_PASSWORD="REPLACE_ME"': f'REMOTE_DB_PASSWORD="{remote.password}"',
            'REMOTE_DB_USER="REPLACE_ME"': f'REMOTE_DB_USER="{remote.user}"',
            'REMOTE_DB_HOST="localhost"': f'REMOTE_DB_HOST="{remote.host}"',
            'REMOTE_DB_PORT="3306"': f'REMOTE_DB_PORT="{remote.port}"',
            'REMOTE_DB_SCHEMA="public"': f'REMOTE_DB_SCHEMA="{remote.schema}"',
        })

    if config.database_prefix:
        replacements['GLOBAL_DB_TABLE_PREFIX=""'] = f'GLOBAL_DB_TABLE_PREFIX="{config.database_prefix}_"'

    return replacements


def build_env_templates(config: ProjectConfig, ip: str) -> List[EnvTemplate]:
    """The env files a Craft project ships examples for."""
    root = config.project_root
    return [
        EnvTemplate(root / DOTENV_EXAMPLE, root / DOTENV, build_dotenv_replacements(config, ip)),
        EnvTemplate(root / ENV_SH_EXAMPLE, root / ENV_SH, build_env_sh_replacements(config, ip)),
    ]


class TemplateManager:
    """Materializes env files from their examples."""

    def materialize_one(self, template: EnvTemplate) -> StepResult:
        """Copy one example over its live file and fill in the values.

        Failures are reported in the result rather than raised.
        """
        if not template.example.exists():
            return StepResult.failure(
                f"Could not create {template.target}: {template.example} not found",
                target=str(template.target),
            )

        try:
            shutil.copyfile(template.example, template.target)
            replace_in_file(template.target, template.replacements)
        except OSError as e:
            return StepResult.failure(f"Could not create {template.target}: {e}", target=str(template.target))

        log_info(f"Created {template.target} from {template.example.name}")
        return StepResult.ok(f"Created {template.target}", target=str(template.target))

    def materialize(self, templates: List[EnvTemplate]) -> List[StepResult]:
        """Materialize every template; one failing never stops the others."""
        results = []
        for template in templates:
            result = self.materialize_one(template)
            if not result.success:
                log_error(result.message)
            results.append(result)
        return results
