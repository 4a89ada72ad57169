"""Help screen — modal overlay showing how to work the splits."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from textual.containers import Center, Middle
from textual.screen import ModalScreen
from textual.widgets import Static

if TYPE_CHECKING:
    from textual.app import ComposeResult
    from textual.binding import BindingType

_HELP = """\
[bold]Split Demo[/bold]

[bold]Mouse[/bold]
  Press the left button on a divider
  and drag to resize the panes.

[bold]Keys[/bold]
  [bold]c[/bold]         Re-center all dividers
  [bold]?[/bold]         This help
  [bold]q[/bold]         Quit

Press [bold]?[/bold] or [bold]Escape[/bold] to dismiss.
"""


class HelpScreen(ModalScreen[None]):
    """Modal help overlay."""

    BINDINGS: ClassVar[list[BindingType]] = [
        ("escape", "dismiss_help", "Close"),
        ("question_mark", "dismiss_help", "Close"),
    ]

    DEFAULT_CSS = """
    HelpScreen {
        align: center middle;
    }
    HelpScreen > Center > Middle > Static {
        width: 44;
        padding: 2 4;
        background: $surface;
        border: tall $primary;
    }
    """

    def compose(self) -> ComposeResult:
        with Center(), Middle():
            yield Static(_HELP, markup=True, id="help-text")

    def action_dismiss_help(self) -> None:
        """Dismiss the help screen."""
        self.dismiss(None)
