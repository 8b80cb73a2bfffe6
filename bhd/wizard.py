"""Wizard flow: choose input base, choose output base, enter a value, show result.

The whole flow is a value (`WizardState`) threaded through `apply`. Nothing
here touches the terminal; `render` only produces the text to show.
"""

from dataclasses import dataclass, replace
from enum import IntEnum

from .converter import Base, ConversionError, convert


BASE_CHOICES = (Base.BINARY, Base.HEXADECIMAL, Base.DECIMAL)

INPUT_PROMPT = "What type of input would you like to convert?"
OUTPUT_PROMPT = "What type of output would you like?"
CURSOR_MARKER = ">"
CARET = "> "


class Step(IntEnum):
    CHOOSE_INPUT_BASE = 0
    CHOOSE_OUTPUT_BASE = 1
    ENTER_VALUE = 2
    SHOW_RESULT = 3


class Action:
    pass


class MoveCursorUp(Action):
    pass


class MoveCursorDown(Action):
    pass


class Confirm(Action):
    pass


class Backspace(Action):
    pass


class Reset(Action):
    pass


class Quit(Action):
    pass


@dataclass(frozen=True)
class AppendChar(Action):
    char: str


@dataclass(frozen=True)
class WizardState:
    step: Step = Step.CHOOSE_INPUT_BASE
    output_choices: tuple[Base, ...] = BASE_CHOICES
    cursor: int = 0
    input_base: Base | None = None
    output_base: Base | None = None
    raw_input: str = ""
    result_text: str = ""
    error_message: str = ""

    @property
    def choices(self) -> tuple[Base, ...]:
        if self.step == Step.CHOOSE_INPUT_BASE:
            return BASE_CHOICES
        if self.step == Step.CHOOSE_OUTPUT_BASE:
            return self.output_choices
        return ()

    @property
    def selected(self) -> Base:
        return self.choices[self.cursor]


def _confirm(state: WizardState) -> WizardState:
    if state.step == Step.CHOOSE_INPUT_BASE:
        chosen = state.selected
        return replace(
            state,
            step=Step.CHOOSE_OUTPUT_BASE,
            input_base=chosen,
            cursor=0,
            output_choices=tuple(b for b in state.output_choices if b is not chosen),
        )

    if state.step == Step.CHOOSE_OUTPUT_BASE:
        chosen = state.selected
        # unreachable while the input base is filtered out of output_choices
        if chosen is state.input_base:
            return state
        return replace(state, step=Step.ENTER_VALUE, output_base=chosen)

    if state.step == Step.ENTER_VALUE:
        try:
            result = convert(state.raw_input, state.input_base, state.output_base)
        except ConversionError as e:
            return replace(state, raw_input="", error_message=str(e))
        return replace(state, step=Step.SHOW_RESULT, result_text=result, error_message="")

    return WizardState()


def apply(state: WizardState, action: Action) -> WizardState:
    if isinstance(action, (MoveCursorUp, MoveCursorDown)):
        if not state.choices:
            return state
        delta = -1 if isinstance(action, MoveCursorUp) else 1
        cursor = min(max(state.cursor + delta, 0), len(state.choices) - 1)
        return replace(state, cursor=cursor)

    if isinstance(action, Confirm):
        return _confirm(state)

    if isinstance(action, AppendChar):
        if state.step != Step.ENTER_VALUE:
            return state
        return replace(state, raw_input=state.raw_input + action.char, error_message="")

    if isinstance(action, Backspace):
        if state.step != Step.ENTER_VALUE or not state.raw_input:
            return state
        return replace(state, raw_input=state.raw_input[:-1], error_message="")

    if isinstance(action, Reset):
        if state.step == Step.CHOOSE_INPUT_BASE:
            return state
        return WizardState()

    return state


def _choice_lines(state: WizardState) -> list[str]:
    lines = []
    for i, choice in enumerate(state.choices):
        marker = CURSOR_MARKER if i == state.cursor else " "
        lines.append(f"{marker} {choice}")
    return lines


def render(state: WizardState) -> str:
    if state.step == Step.CHOOSE_INPUT_BASE:
        lines = [INPUT_PROMPT, "", *_choice_lines(state)]
    elif state.step == Step.CHOOSE_OUTPUT_BASE:
        lines = [OUTPUT_PROMPT, "", *_choice_lines(state)]
    elif state.step == Step.ENTER_VALUE:
        lines = [f"Enter your {state.input_base} input:", CARET + state.raw_input]
        if state.error_message:
            lines += ["", f"Error: {state.error_message}. Press Enter to try again."]
    else:
        lines = [
            f"Input ({state.input_base}): {state.raw_input}",
            f"Output ({state.output_base}): {state.result_text}",
            "",
            "Press Enter to start over.",
        ]

    lines += ["", "Press q to quit."]
    if state.step > Step.CHOOSE_INPUT_BASE:
        lines.append("Press r to reset.")
    return "\n".join(lines) + "\n"
