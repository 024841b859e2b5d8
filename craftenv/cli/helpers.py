"""
Shared helpers and decorators for craftenv CLI commands.
"""

from __future__ import annotations

from typing import Any, Callable

import click

from craftenv.utils.logging import set_verbose


def verbose_callback(_: click.Context, __: click.Option, value: bool) -> bool:
    """Callback used by the --verbose option."""
    set_verbose(value)
    return value


def add_verbose_option(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator to add the shared verbose flag to a command."""
    return click.option(
        "--verbose",
        "-v",
        is_flag=True,
        default=False,
        help="Enable verbose output (show INFO and WARNING messages)",
        callback=verbose_callback,
        expose_value=False,
        is_eager=True,
    )(func)


def env_option(name: str, envvar: str, **kwargs: Any) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """A string option that can also be set through an environment variable."""
    kwargs.setdefault("default", None)
    return click.option(name, envvar=envvar, show_envvar=True, **kwargs)
