"""
Vagrant operations for craftenv.

This module reloads and provisions the Homestead box and runs shell
commands inside the guest through ``vagrant ssh``.
"""

import shlex
from pathlib import Path
from typing import Optional

from ..config.settings import VAGRANT
from .command_runner import CommandResult, CommandRunner


class VagrantManager:
    """Runs Vagrant commands against the Homestead checkout."""

    def __init__(self, homestead_path: Path, runner: Optional[CommandRunner] = None):
        self.homestead_path = Path(homestead_path)
        self.runner = runner or CommandRunner()

    def reload_and_provision(self) -> CommandResult:
        """Restart the box and re-run provisioning so new sites and folders apply.

        Blocks until Vagrant exits.
        """
        return self.runner.run([VAGRANT, "reload", "--provision"], cwd=self.homestead_path).check()

    def ssh(self, guest_command: str) -> CommandResult:
        """Run a shell command inside the guest."""
        return self.runner.run([VAGRANT, "ssh", "--", "-t", guest_command], cwd=self.homestead_path).check()

    def alias_domain(self, domain: str) -> CommandResult:
        """Point ``domain`` at the loopback address inside the guest."""
        line = shlex.quote(f"127.0.0.1 {domain}")
        return self.ssh(f"grep -qxF {line} /etc/hosts || echo {line} | sudo tee -a /etc/hosts")
