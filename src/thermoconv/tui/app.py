"""Full-screen Textual converter.

One screen with an input field, From/To unit pickers, a precision picker
and a live converted value. Saved conversions are listed in a modal
history screen that can be cleared.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ClassVar

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, DataTable, Footer, Header, Input, Label, Select, Static

from thermoconv.errors import InvalidInputError
from thermoconv.models.config import MAX_DECIMAL_PLACES
from thermoconv.models.units import TemperatureUnit
from thermoconv.session import ConverterSession

if TYPE_CHECKING:
    from collections.abc import Callable

    from thermoconv.history import HistoryBuffer

logger = logging.getLogger(__name__)

SAVE_ERROR_TITLE = "Conversion Error"
SAVE_ERROR_MESSAGE = "Please enter a valid temperature."
EMPTY_HISTORY_TEXT = "No conversion history yet"

_UNIT_OPTIONS: list[tuple[str, TemperatureUnit]] = [(unit.value, unit) for unit in TemperatureUnit]
_PRECISION_OPTIONS: list[tuple[str, int]] = [
    (str(places), places) for places in range(MAX_DECIMAL_PLACES + 1)
]

# Converter actions that stay inactive while the history modal is open.
_CONVERTER_ACTIONS = frozenset({"save", "history", "swap_units"})


# ---------------------------------------------------------------------------
# History modal screen
# ---------------------------------------------------------------------------


class HistoryScreen(ModalScreen[None]):
    """Saved conversions, newest first, with Clear and Done buttons."""

    BINDINGS: ClassVar[list[Binding]] = [  # type: ignore[assignment]
        Binding("escape", "dismiss", "Done"),
        Binding("c", "clear_history", "Clear"),
    ]

    CSS = """
    HistoryScreen {
        align: center middle;
    }
    #history-container {
        width: 64;
        height: auto;
        max-height: 80%;
        background: $surface;
        border: thick $primary;
        padding: 1 2;
    }
    #history-title {
        text-align: center;
        text-style: bold;
        padding-bottom: 1;
    }
    #history-table {
        height: auto;
        max-height: 14;
    }
    #history-empty {
        color: $text-muted;
        text-style: italic;
    }
    #history-buttons {
        height: auto;
        margin-top: 1;
        align-horizontal: right;
    }
    #history-buttons Button {
        margin-left: 1;
    }
    """

    def __init__(self, history: HistoryBuffer) -> None:
        super().__init__()
        self._history = history
        self._unsubscribe: Callable[[], None] | None = None

    def compose(self) -> ComposeResult:
        with Vertical(id="history-container"):
            yield Static("Conversion History", id="history-title")
            yield Static(EMPTY_HISTORY_TEXT, id="history-empty")
            yield DataTable(id="history-table", cursor_type="none", zebra_stripes=True)
            with Horizontal(id="history-buttons"):
                yield Button("Clear", id="clear-history", variant="error")
                yield Button("Done", id="done", variant="primary")

    def on_mount(self) -> None:
        table = self.query_one("#history-table", DataTable)
        table.add_column("Conversion", key="summary")
        table.add_column("Time", key="time")
        self._unsubscribe = self._history.subscribe(self._on_history_changed)
        self._refresh_rows()

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "clear-history":
            self.action_clear_history()
        elif event.button.id == "done":
            self.dismiss()

    def check_action(self, action: str, parameters: tuple[object, ...]) -> bool | None:
        if action == "clear_history":
            return not self._history.is_empty
        return True

    def action_clear_history(self) -> None:
        if self._history.is_empty:
            return
        self._history.clear_history()

    def _on_history_changed(self, _history: HistoryBuffer) -> None:
        self._refresh_rows()

    def _refresh_rows(self) -> None:
        table = self.query_one("#history-table", DataTable)
        table.clear()
        for record in self._history.records:
            table.add_row(record.summary, record.caption, key=record.id)

        empty = self._history.is_empty
        table.display = not empty
        self.query_one("#history-empty", Static).display = empty
        self.query_one("#clear-history", Button).disabled = empty
        self.refresh_bindings()


# ---------------------------------------------------------------------------
# Main converter application
# ---------------------------------------------------------------------------


class ConverterTUI(App[None]):
    """Interactive temperature converter.

    All state lives in a :class:`ConverterSession`; widgets only forward
    changes to it and re-render the preview. Errors are reported on save,
    never while typing.
    """

    TITLE = "Temperature Converter"

    CSS = """
    #converter {
        padding: 1 2;
        height: 1fr;
    }
    #temperature-input {
        margin-bottom: 1;
    }
    #temperature-input.valid-temperature {
        border: tall $success;
    }
    #temperature-input.invalid-temperature {
        border: tall $error;
    }
    .picker-row {
        height: auto;
        margin-bottom: 1;
    }
    .picker-row Label {
        width: 12;
        padding: 1 0;
        text-style: bold;
    }
    .picker-row Select {
        width: 1fr;
    }
    #converted {
        padding: 1 0;
        text-style: bold;
    }
    #converter Button {
        width: 100%;
        margin-bottom: 1;
    }
    """

    BINDINGS: ClassVar[list[Binding]] = [  # type: ignore[assignment]
        Binding("ctrl+s", "save", "Save", priority=True),
        Binding("ctrl+r", "history", "History", priority=True),
        Binding("f3", "swap_units", "Swap units"),
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, session: ConverterSession | None = None) -> None:
        super().__init__()
        self.session = session or ConverterSession()
        self._unsubscribe: Callable[[], None] | None = None

    # -- Compose layout -------------------------------------------------------

    def compose(self) -> ComposeResult:
        session = self.session
        yield Header()
        with Vertical(id="converter"):
            yield Input(
                value=session.input_text,
                placeholder="Enter temperature",
                id="temperature-input",
            )
            with Horizontal(classes="picker-row"):
                yield Label("From:")
                yield Select(
                    _UNIT_OPTIONS, value=session.from_unit, allow_blank=False, id="from-unit"
                )
            with Horizontal(classes="picker-row"):
                yield Label("To:")
                yield Select(_UNIT_OPTIONS, value=session.to_unit, allow_blank=False, id="to-unit")
            with Horizontal(classes="picker-row"):
                yield Label("Precision:")
                yield Select(
                    _PRECISION_OPTIONS,
                    value=session.decimal_places,
                    allow_blank=False,
                    id="precision",
                )
            yield Static(id="converted")
            yield Button("Save Conversion", id="save", variant="primary")
            yield Button("View History", id="show-history")
        yield Footer()

    def on_mount(self) -> None:
        self._unsubscribe = self.session.history.subscribe(self._on_history_changed)
        self._update_view()
        self._update_history_count()

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    # -- Widget events ----------------------------------------------------------

    def on_input_changed(self, event: Input.Changed) -> None:
        self.session.input_text = event.value
        self._update_view()

    def on_input_submitted(self, _event: Input.Submitted) -> None:
        self.action_save()

    def on_select_changed(self, event: Select.Changed) -> None:
        value: Any = event.value
        if value is Select.BLANK:
            return
        select_id = event.select.id
        if select_id == "from-unit":
            self.session.from_unit = value
        elif select_id == "to-unit":
            self.session.to_unit = value
        elif select_id == "precision":
            self.session.set_decimal_places(value)
        self._update_view()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "save":
            self.action_save()
        elif event.button.id == "show-history":
            self.action_history()

    # -- Actions ------------------------------------------------------------------

    def check_action(self, action: str, parameters: tuple[object, ...]) -> bool | None:
        if action in _CONVERTER_ACTIONS and self._history_open:
            return False
        return True

    @property
    def _history_open(self) -> bool:
        return any(isinstance(screen, HistoryScreen) for screen in self.screen_stack)

    def action_save(self) -> None:
        if not self.session.can_save:
            return
        try:
            record = self.session.save()
        except InvalidInputError:
            self.notify(SAVE_ERROR_MESSAGE, title=SAVE_ERROR_TITLE, severity="error")
            return
        self.notify(record.summary, title="Saved")

    def action_history(self) -> None:
        logger.debug("Opening history with %d records", len(self.session.history))
        self.push_screen(HistoryScreen(self.session.history))

    def action_swap_units(self) -> None:
        self.session.swap_units()
        # The Changed events these post carry the values already swapped in.
        self.query_one("#from-unit", Select).value = self.session.from_unit
        self.query_one("#to-unit", Select).value = self.session.to_unit
        self._update_view()

    # -- Rendering ------------------------------------------------------------------

    def _update_view(self) -> None:
        session = self.session
        self.query_one("#converted", Static).update(
            f"Converted Temperature: {session.preview_label}"
        )
        self.query_one("#save", Button).disabled = not session.can_save

        field = self.query_one("#temperature-input", Input)
        has_text = bool(session.input_text)
        valid = session.input_is_valid
        field.set_class(has_text and valid, "valid-temperature")
        field.set_class(has_text and not valid, "invalid-temperature")

    def _on_history_changed(self, _history: HistoryBuffer) -> None:
        self._update_history_count()

    def _update_history_count(self) -> None:
        count = len(self.session.history)
        self.sub_title = f"{count} saved" if count else ""
