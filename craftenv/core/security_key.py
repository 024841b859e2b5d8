"""
Craft security key generation.
"""

from pathlib import Path
from typing import Optional

from ..config.settings import SECURITY_KEY_COMMAND
from .command_runner import CommandResult, CommandRunner


def generate_security_key(project_root: Path, runner: Optional[CommandRunner] = None) -> CommandResult:
    """Have Craft generate a security key and write it to craft/.env."""
    runner = runner or CommandRunner()
    return runner.run(SECURITY_KEY_COMMAND, cwd=project_root).check()
