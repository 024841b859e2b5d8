"""
Logging and output utilities for craftenv CLI.

This module provides colored output for the provisioning run. INFO and
WARNING lines are only shown in verbose mode; phases, successes and errors
are always printed.
"""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

# Initialize console for colored output
console = Console()

# Global verbose mode flag
_verbose_mode = False


class Colors:
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    PURPLE = "purple"


def set_verbose(enabled: bool) -> None:
    """Set verbose mode for logging output."""
    global _verbose_mode
    _verbose_mode = enabled


def log_info(message: str) -> None:
    """Log an info message (only shown in verbose mode)."""
    if _verbose_mode:
        console.print(f"[{Colors.BLUE}][INFO][/{Colors.BLUE}] {escape(message)}")


def log_success(message: str) -> None:
    """Log a success message."""
    console.print(f"[{Colors.GREEN}][SUCCESS][/{Colors.GREEN}] {escape(message)}")


def log_warning(message: str) -> None:
    """Log a warning message (only shown in verbose mode)."""
    if _verbose_mode:
        console.print(f"[{Colors.YELLOW}][WARNING][/{Colors.YELLOW}] {escape(message)}")


def log_error(message: str) -> None:
    """Log an error message."""
    console.print(f"[{Colors.RED}][ERROR][/{Colors.RED}] {escape(message)}")


def log_phase(message: str) -> None:
    """Log a phase message."""
    console.print(f"[{Colors.PURPLE}][PHASE][/{Colors.PURPLE}] {escape(message)}")


def show_summary(project: str, local_domain: str, homestead_path: str) -> None:
    """Show the resolved settings before the run starts."""
    summary = f"""Project name:    {project}
Local domain:    {local_domain}
Homestead path:  {homestead_path}"""

    console.print(Panel(summary, title="Configuring your development environment", border_style=Colors.BLUE))


def show_next_steps(local_domain: str) -> None:
    """Show what to do once the environment is ready."""
    next_steps = f"""If this is a new site, you can finish your installation:
    http://{local_domain}/index.php?p=admin

If this is an existing site, import the remote database:
    $ ./scripts/pull_db.sh"""

    console.print(Panel(next_steps, title="Get ready to rumble!", border_style=Colors.GREEN))


def error_exit(message: str, exit_code: int = 1) -> None:
    """Log an error and exit."""
    log_error(message)
    raise SystemExit(exit_code)
