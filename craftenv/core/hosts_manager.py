"""
Host name registration for craftenv.

This module maps the local domain to the Homestead box IP in the host's
hosts file, escalating through sudo when the file is not writable.
"""

from pathlib import Path
from typing import Optional

from ..config.settings import HOSTS_FILE
from ..utils.file_utils import append_line_to_file, format_appended_line, line_in_file
from ..utils.logging import log_info, log_warning
from .command_runner import CommandResult, CommandRunner


class HostsManager:
    """Manages entries in the host's hosts file."""

    def __init__(self, runner: Optional[CommandRunner] = None, hosts_file: Path = HOSTS_FILE):
        self.runner = runner or CommandRunner()
        self.hosts_file = Path(hosts_file)

    def register(self, ip: str, domain: str) -> Optional[CommandResult]:
        """Map ``domain`` to ``ip``.

        Returns:
            The sudo command result when the privileged fallback was used,
            otherwise None

        Raises:
            CommandFailedError: If the privileged fallback fails
        """
        line = f"{ip} {domain}"

        if line_in_file(self.hosts_file, line):
            log_info(f"{self.hosts_file} already maps {domain} to {ip}")
            return None

        try:
            append_line_to_file(self.hosts_file, line)
            log_info(f"Appended '{line}' to {self.hosts_file}")
            return None
        except PermissionError:
            log_warning(f"No write access to {self.hosts_file}, retrying with sudo")

        return self.runner.run(
            ["sudo", "tee", "-a", str(self.hosts_file)],
            input_text=format_appended_line(self.hosts_file, line),
        ).check()
