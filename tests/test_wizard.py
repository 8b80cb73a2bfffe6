from bhd.converter import Base
from bhd.wizard import (
    BASE_CHOICES,
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


def run(state, *actions):
    for action in actions:
        state = apply(state, action)
    return state


def type_text(state, text):
    return run(state, *(AppendChar(c) for c in text))


def choose(input_index, output_index):
    state = run(WizardState(), *[MoveCursorDown()] * input_index, Confirm())
    return run(state, *[MoveCursorDown()] * output_index, Confirm())


def test_initial_state():
    state = WizardState()
    assert state.step == Step.CHOOSE_INPUT_BASE
    assert state.choices == BASE_CHOICES
    assert state.cursor == 0


def test_cursor_clamps_at_boundaries():
    state = run(WizardState(), MoveCursorUp())
    assert state.cursor == 0

    state = run(state, *[MoveCursorDown()] * 10)
    assert state.cursor == len(BASE_CHOICES) - 1


def test_input_base_removed_from_output_choices():
    for index, base in enumerate(BASE_CHOICES):
        state = run(WizardState(), *[MoveCursorDown()] * index, Confirm())
        assert state.step == Step.CHOOSE_OUTPUT_BASE
        assert state.input_base is base
        assert state.cursor == 0
        assert base not in state.choices
        assert len(state.choices) == len(BASE_CHOICES) - 1


def test_output_cursor_clamps_to_shorter_list():
    state = run(WizardState(), Confirm(), *[MoveCursorDown()] * 5)
    assert state.cursor == 1


def test_confirm_output_base_enters_value_step():
    # decimal in, hexadecimal out
    state = choose(2, 1)
    assert state.step == Step.ENTER_VALUE
    assert state.input_base is Base.DECIMAL
    assert state.output_base is Base.HEXADECIMAL


def test_output_equal_to_input_stays_on_step():
    state = WizardState(
        step=Step.CHOOSE_OUTPUT_BASE,
        input_base=Base.BINARY,
        output_choices=BASE_CHOICES,
    )
    assert apply(state, Confirm()) == state


def test_decimal_to_hex_scenario():
    state = type_text(choose(2, 1), "255")
    state = apply(state, Confirm())

    assert state.step == Step.SHOW_RESULT
    assert state.result_text == "ff"
    assert state.error_message == ""


def test_hex_to_binary_scenario():
    state = type_text(choose(1, 0), "ff.ab")
    state = apply(state, Confirm())

    assert state.step == Step.SHOW_RESULT
    assert state.result_text == "11111111.10101011"


def test_invalid_input_clears_entry_and_sets_error():
    state = type_text(choose(2, 1), "xyz")
    state = apply(state, Confirm())

    assert state.step == Step.ENTER_VALUE
    assert state.raw_input == ""
    assert state.error_message == "Invalid input"


def test_empty_input_is_rejected():
    state = apply(choose(0, 1), Confirm())
    assert state.step == Step.ENTER_VALUE
    assert state.error_message == "Invalid input"


def test_typing_clears_error():
    state = apply(type_text(choose(2, 1), "x"), Confirm())
    state = apply(state, AppendChar("1"))
    assert state.error_message == ""
    assert state.raw_input == "1"


def test_backspace():
    state = type_text(choose(2, 1), "12")
    state = apply(state, Backspace())
    assert state.raw_input == "1"

    state = run(state, Backspace(), Backspace())
    assert state.raw_input == ""


def test_editing_ignored_outside_entry_step():
    state = WizardState()
    assert apply(state, AppendChar("1")) == state
    assert apply(state, Backspace()) == state


def test_cursor_moves_ignored_outside_choice_steps():
    state = choose(2, 1)
    assert apply(state, MoveCursorDown()) == state
    assert apply(state, MoveCursorUp()) == state


def test_confirm_on_result_starts_over():
    state = apply(type_text(choose(2, 1), "1"), Confirm())
    assert apply(state, Confirm()) == WizardState()


def test_reset_returns_initial_state():
    state = type_text(choose(2, 1), "12")
    assert apply(state, Reset()) == WizardState()


def test_reset_is_noop_on_first_step():
    state = run(WizardState(), MoveCursorDown())
    assert apply(state, Reset()) == state


def test_quit_does_not_change_state():
    state = choose(1, 1)
    assert apply(state, Quit()) == state


def test_render_input_choices():
    text = render(run(WizardState(), MoveCursorDown()))
    lines = text.splitlines()

    assert lines[0] == "What type of input would you like to convert?"
    assert lines[2:5] == ["  binary", "> hexadecimal", "  decimal"]
    assert "Press q to quit." in text
    assert "Press r to reset." not in text


def test_render_output_choices():
    text = render(run(WizardState(), Confirm()))
    lines = text.splitlines()

    assert lines[0] == "What type of output would you like?"
    assert lines[2:4] == ["> hexadecimal", "  decimal"]
    assert "binary" not in text
    assert "Press r to reset." in text


def test_render_entry_with_error():
    state = apply(type_text(choose(2, 1), "zz"), Confirm())
    text = render(state)

    assert text.startswith("Enter your decimal input:\n> \n")
    assert "Invalid input. Press Enter to try again." in text


def test_render_entry_echoes_input():
    text = render(type_text(choose(0, 0), "101"))
    assert "Enter your binary input:\n> 101\n" in text
    assert "Press Enter to try again." not in text


def test_render_result():
    state = apply(type_text(choose(1, 0), "ff.ab"), Confirm())
    text = render(state)

    assert "Input (hexadecimal): ff.ab" in text
    assert "Output (binary): 11111111.10101011" in text
    assert "Press Enter to start over." in text
    assert text.endswith("Press q to quit.\nPress r to reset.\n")
