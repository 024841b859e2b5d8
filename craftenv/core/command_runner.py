"""
External command execution for craftenv.

Every shell-out in the provisioning run goes through a CommandRunner so that
tests can substitute a fake and record the calls instead of touching the
host, the Vagrant box or the keychain.
"""

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Union

from ..exceptions import CommandFailedError
from ..utils.logging import log_info

# Return code used when the executable could not be started at all
COMMAND_NOT_FOUND = 127


@dataclass
class CommandResult:
    """Outcome of one external command."""

    command: List[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def success(self) -> bool:
        return self.returncode == 0

    def describe(self) -> str:
        return " ".join(self.command)

    def check(self) -> "CommandResult":
        """Raise CommandFailedError unless the command succeeded."""
        if not self.success:
            output = (self.stderr or self.stdout).strip()
            message = f"Command '{self.describe()}' failed with exit code {self.returncode}"
            if output:
                message = f"{message}: {output}"
            raise CommandFailedError(
                message,
                error_code="command_failed",
                details={"command": self.command, "returncode": self.returncode},
            )
        return self


class CommandRunner:
    """Runs external commands synchronously and captures their output.

    There is no timeout: a command that hangs blocks the run.
    """

    def run(
        self,
        command: Sequence[str],
        cwd: Optional[Union[str, Path]] = None,
        input_text: Optional[str] = None,
    ) -> CommandResult:
        args = [str(part) for part in command]
        log_info(f"Running: {' '.join(args)}" + (f" (in {cwd})" if cwd else ""))
        try:
            completed = subprocess.run(
                args,
                cwd=str(cwd) if cwd else None,
                input=input_text,
                capture_output=True,
                text=True,
            )
        except FileNotFoundError as e:
            return CommandResult(args, COMMAND_NOT_FOUND, "", str(e))

        result = CommandResult(args, completed.returncode, completed.stdout or "", completed.stderr or "")
        for line in result.stdout.splitlines():
            log_info(f"  {line}")
        return result
