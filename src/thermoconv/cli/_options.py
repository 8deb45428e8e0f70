"""Shared CLI option types and the decorator that propagates global options."""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING, Any

import click

from thermoconv.models.units import TemperatureUnit
from thermoconv.output.formatter import FORMATS

if TYPE_CHECKING:
    from thermoconv.cli.main import AppContext


class UnitParamType(click.ParamType):
    """Accepts ``c``/``f``/``k``, full names or symbols, case-insensitively."""

    name = "unit"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> TemperatureUnit:
        if isinstance(value, TemperatureUnit):
            return value
        try:
            return TemperatureUnit.parse(str(value))
        except ValueError as exc:
            self.fail(str(exc), param, ctx)


UNIT = UnitParamType()


def global_options(f: Any) -> Any:
    """Add global CLI options to a leaf command.

    Allows ``--format``, ``--quiet`` and ``--verbose`` to be given **after**
    the subcommand name (e.g. ``thermoconv convert 10 --format json``).
    Command-level values override the root-group values stored in
    :class:`AppContext`.
    """

    @click.option(
        "--verbose",
        "local_verbose",
        is_flag=True,
        default=False,
        help="Enable verbose logging",
    )
    @click.option(
        "--quiet",
        "local_quiet",
        is_flag=True,
        default=False,
        help="Suppress normal output",
    )
    @click.option(
        "--format",
        "local_output_format",
        type=click.Choice(FORMATS),
        default=None,
        help="Output format (default: auto-detect)",
    )
    @click.pass_obj
    def wrapper(app_ctx: AppContext, /, **kwargs: Any) -> Any:
        local_output_format: str | None = kwargs.pop("local_output_format", None)
        local_quiet: bool = kwargs.pop("local_quiet", False)
        local_verbose: bool = kwargs.pop("local_verbose", False)

        if local_output_format is not None:
            app_ctx.output_format = local_output_format
            app_ctx._formatter = None  # reset cached formatter
        if local_quiet:
            app_ctx.quiet = True
            app_ctx._formatter = None
        if local_verbose:
            app_ctx.verbose = True

        return f(app_ctx, **kwargs)

    functools.update_wrapper(wrapper, f)
    return wrapper
