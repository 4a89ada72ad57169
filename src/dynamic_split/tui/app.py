"""Textual App — split layout demo."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, Static

from dynamic_split.config import Settings
from dynamic_split.tui.help_screen import HelpScreen
from dynamic_split.tui.widgets.split_container import SplitContainer

if TYPE_CHECKING:
    from textual.binding import BindingType

logger = logging.getLogger(__name__)


class _Pane(Static):
    """Placeholder pane content."""

    DEFAULT_CSS = """
    _Pane {
        padding: 0 1;
        content-align: center middle;
    }
    """


class DemoApp(App[None]):
    """Resizable split panes, optionally nested."""

    TITLE = "dynamic-split"

    BINDINGS: ClassVar[list[BindingType]] = [
        Binding("q", "quit", "Quit", show=True),
        Binding("question_mark", "show_help", "Help", show=True),
        Binding("c", "recenter", "Center", show=True),
    ]

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self._settings = settings if settings is not None else Settings()

    def compose(self) -> ComposeResult:
        """Create the split layout."""
        axis = self._settings.axis
        yield Header()
        if self._settings.nested:
            second: Static | SplitContainer = SplitContainer(
                _Pane("Second pane", id="pane-second"),
                _Pane("Third pane", id="pane-third"),
                axis=axis.other,
                id="inner-split",
            )
        else:
            second = _Pane("Second pane", id="pane-second")
        yield SplitContainer(
            _Pane("First pane", id="pane-first"),
            second,
            axis=axis,
            id="outer-split",
        )
        yield Footer()

    def on_split_container_offset_changed(self, event: SplitContainer.OffsetChanged) -> None:
        """Show the latest divider position in the header."""
        self.sub_title = f"{event.container.id}: offset {event.offset}"
        logger.debug("%s offset now %d", event.container.id, event.offset)

    def action_recenter(self) -> None:
        """Reset every divider to its midpoint."""
        for container in self.query(SplitContainer):
            container.recenter()

    def action_show_help(self) -> None:
        """Show the help overlay."""
        self.push_screen(HelpScreen())
