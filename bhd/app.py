from rich.text import Text
from textual import events
from textual.app import App
from textual.binding import Binding
from textual.widgets import Static

from .wizard import (
    CARET,
    Action,
    AppendChar,
    Backspace,
    Confirm,
    MoveCursorDown,
    MoveCursorUp,
    Quit,
    Reset,
    Step,
    WizardState,
    apply,
    render,
)


CARET_STYLE = "color(205)"

QUIT_KEYS = {"q", "ctrl+c"}
UP_KEYS = {"up", "k"}
DOWN_KEYS = {"down", "j"}
RESET_KEY = "r"


def key_to_action(state: WizardState, key: str, character: str | None = None) -> Action | None:
    if key in QUIT_KEYS:
        return Quit()
    if key == RESET_KEY:
        return Reset() if state.step > Step.CHOOSE_INPUT_BASE else None
    if key in UP_KEYS:
        return MoveCursorUp()
    if key in DOWN_KEYS:
        return MoveCursorDown()
    if key == "enter":
        return Confirm()
    if key == "backspace":
        return Backspace()
    if state.step == Step.ENTER_VALUE and character and character.isprintable():
        return AppendChar(character)
    return None


def styled_view(state: WizardState) -> Text:
    text = Text(render(state))
    if state.step == Step.ENTER_VALUE:
        # caret starts the second line
        start = text.plain.index("\n" + CARET) + 1
        text.stylize(CARET_STYLE, start, start + len(CARET))
    return text


class ConverterApp(App):
    """Binary-Hex-Decimal converter wizard."""

    TITLE = "Binary-Hex-Decimal Converter"
    CSS = """
    #view {
        padding: 1 2;
    }
    """
    BINDINGS = [
        Binding("q", "quit", "Quit", priority=True),
        Binding("ctrl+c", "quit", "Quit", priority=True),
    ]

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.wizard_state = WizardState()
        self.fatal_error: Exception | None = None

    def compose(self):
        yield Static(id="view")

    def on_mount(self) -> None:
        self._refresh_view()

    def on_key(self, event: events.Key) -> None:
        action = key_to_action(self.wizard_state, event.key, event.character)
        if action is None:
            return
        event.stop()

        if isinstance(action, Quit):
            self.exit()
            return

        previous = self.wizard_state.step
        self.wizard_state = apply(self.wizard_state, action)
        if self.wizard_state.step != previous:
            self.log(f"step {previous.name} -> {self.wizard_state.step.name}")
        self._refresh_view()

    def _handle_exception(self, error: Exception) -> None:
        # main() reports this after the app has left the alternate screen
        self.fatal_error = error
        super()._handle_exception(error)

    def _refresh_view(self) -> None:
        self.query_one("#view", Static).update(styled_view(self.wizard_state))
