from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any

from rich.console import Console

from thermoconv.output.json_output import format_json_error, format_json_response
from thermoconv.output.rich_output import RichOutput

if TYPE_CHECKING:
    from io import TextIOBase

FORMATS = ("rich", "json", "quiet")


class OutputFormatter:
    """Chooses between Rich and JSON output.

    A forced format always wins. Otherwise a TTY *stream* gets ``"rich"``
    and anything piped or redirected gets ``"json"``. ``"quiet"`` sends the
    Rich console to stderr so stdout stays empty.
    """

    def __init__(
        self,
        *,
        stream: TextIOBase | Any | None = None,
        force_format: str | None = None,
        console: Console | None = None,
    ) -> None:
        self._stream = stream or sys.stdout
        if force_format is not None:
            if force_format not in FORMATS:
                raise ValueError(f"Unknown output format: {force_format!r}")
            self._format = force_format
        elif hasattr(self._stream, "isatty") and self._stream.isatty():
            self._format = "rich"
        else:
            self._format = "json"

        if console is not None:
            self._console = console
        elif self._format == "quiet":
            self._console = Console(stderr=True)
        else:
            self._console = Console()

        self._rich = RichOutput(self._console)

    @property
    def format(self) -> str:  # noqa: A003
        return self._format

    @property
    def rich(self) -> RichOutput:
        return self._rich

    def output(self, data: Any, *, command: str) -> None:
        """Emit *data*: a JSON envelope in json mode, ``str(data)`` otherwise.

        Commands with typed data normally call :attr:`rich` directly and use
        this for the JSON branch.
        """
        if self._format == "json":
            print(format_json_response(data=data, command=command))  # noqa: T201
        else:
            self._rich.info(str(data))

    def output_error(self, *, code: str, message: str, command: str) -> None:
        if self._format == "json":
            print(format_json_error(code=code, message=message, command=command))  # noqa: T201
        else:
            self._rich.error(message)
