"""Tests for the completion session: end-to-end cycling on a text buffer."""
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from unittest.mock import MagicMock

from cyclecomplete.buffer import TextBuffer
from cyclecomplete.config import Config
from cyclecomplete.cycler import Direction
from cyclecomplete.session import SessionController


def make_controller(tmp_path, **values):
    config = Config(tmp_path / 'config.json')
    for key, value in values.items():
        setattr(config, key, value)
    report = MagicMock()
    return SessionController(config, report=report), report


def test_cycle_forward_through_all(tmp_path):
    controller, report = make_controller(tmp_path)
    buf = TextBuffer('foobar foo food fo')

    seen = []
    for _ in range(5):
        seen.append(controller.cycle(buf, Direction.FORWARD))
        assert buf.text.endswith(' ' + seen[-1])
        assert buf.get_cursor_position() == buf.get_length()

    assert seen == ['food', 'foo', 'foobar', 'fo', 'food']
    assert buf.text == 'foobar foo food food'
    report.assert_not_called()


def test_cycle_backward(tmp_path):
    controller, _ = make_controller(tmp_path)
    buf = TextBuffer('foobar foo food fo')

    assert controller.cycle_backward(buf) == 'food'
    assert controller.cycle_backward(buf) == 'fo'
    assert controller.cycle_backward(buf) == 'foobar'
    assert buf.text == 'foobar foo food foobar'


def test_session_state_tracks_prefix_and_selection(tmp_path):
    controller, _ = make_controller(tmp_path)
    buf = TextBuffer('foobar foo food fo')
    controller.cycle_forward(buf)
    controller.cycle_forward(buf)
    state = controller.state
    assert state.previous_prefix == 'fo'
    assert state.previous_selection == 'foo'
    assert state.candidates.texts() == ['food', 'foo', 'foobar', 'fo']


def test_no_prefix_is_noop(tmp_path):
    controller, report = make_controller(tmp_path)
    buf = TextBuffer('foo bar ')
    assert controller.cycle_forward(buf) is None
    assert buf.text == 'foo bar '
    report.assert_not_called()

    # cursor in front of a word
    buf = TextBuffer('foo bar', cursor=4)
    assert controller.cycle_forward(buf) is None
    assert buf.text == 'foo bar'


def test_no_completions_reported(tmp_path):
    controller, report = make_controller(tmp_path)
    buf = TextBuffer('hello world zq')
    assert controller.cycle_forward(buf) is None
    report.assert_called_once_with('No completions found for "zq".')
    assert buf.text == 'hello world zq'
    assert buf.undo_stack.size == 0


def test_each_cycle_is_one_undo_step(tmp_path):
    controller, _ = make_controller(tmp_path)
    buf = TextBuffer('fab fob fox f')
    controller.cycle_forward(buf)
    controller.cycle_forward(buf)
    assert buf.undo_stack.size == 2
    buf.undo()
    assert buf.text == 'fab fob fox fox'
    buf.undo()
    assert buf.text == 'fab fob fox f'
    assert buf.get_cursor_position() == 13


def test_typing_restarts_cycle(tmp_path):
    controller, _ = make_controller(tmp_path)
    buf = TextBuffer('fab fob fox f')
    for _ in range(4):
        controller.cycle_forward(buf)
    assert buf.text == 'fab fob fox f'

    # continuing would give 'fox'; the new prefix must rescan instead
    buf.insert('a')
    assert controller.cycle_forward(buf) == 'fab'
    assert controller.state.previous_prefix == 'fa'
    assert controller.state.candidates.texts() == ['fab', 'fa']


def test_backspace_restarts_cycle(tmp_path):
    controller, _ = make_controller(tmp_path)
    buf = TextBuffer('fab fob fox f')
    controller.cycle_forward(buf)
    assert controller.cycle_forward(buf) == 'fob'

    buf.replace_range(14, 15, '')
    assert buf.text == 'fab fob fox fo'
    assert controller.cycle_forward(buf) == 'fox'
    assert controller.state.candidates.texts() == ['fox', 'fob', 'fo']


def test_other_document_restarts_cycle(tmp_path):
    controller, _ = make_controller(tmp_path)
    first = TextBuffer('fab fob fox f')
    controller.cycle_forward(first)

    second = TextBuffer('fix fox')
    second.set_cursor_position(5)
    assert controller.cycle_forward(second) == 'fix'
    assert controller.state.document is second


def test_reset(tmp_path):
    controller, _ = make_controller(tmp_path)
    buf = TextBuffer('fab fob fox f')
    controller.cycle_forward(buf)
    controller.reset()
    assert controller.state.previous_selection is None
    assert not controller.state.candidates


def test_remove_trailing_word_part(tmp_path):
    controller, _ = make_controller(tmp_path, remove_trailing_word_part=True)
    buf = TextBuffer('foobar foxyz', cursor=9)
    assert controller.cycle_forward(buf) == 'foobar'
    assert buf.text == 'foobar foobar'
    assert buf.get_cursor_position() == 13
    assert controller.cycle_forward(buf) == 'foxyz'
    assert buf.text == 'foobar foxyz'


def test_keep_trailing_word_part(tmp_path):
    controller, _ = make_controller(tmp_path)
    buf = TextBuffer('foobar foxyz', cursor=9)
    assert controller.cycle_forward(buf) == 'foobar'
    assert buf.text == 'foobar foobarxyz'
    assert controller.cycle_forward(buf) == 'fo'
    assert buf.text == 'foobar foxyz'
    assert buf.get_cursor_position() == 9


def test_prefix_word_in_buffer_does_not_trap_cycle(tmp_path):
    # cursor inside "foxyz"; the buffer also holds a whole word "fo"
    controller, _ = make_controller(tmp_path)
    buf = TextBuffer('fab fo fob foxyz', cursor=13)

    seen = [controller.cycle_forward(buf) for _ in range(6)]

    assert controller.state.candidates.texts() == ['fob', 'fo']
    assert seen == ['fob', 'fo', 'fob', 'fo', 'fob', 'fo']
    assert buf.text == 'fab fo fob foxyz'
    assert buf.get_cursor_position() == 13


def test_popup_dismissed(tmp_path):
    controller, _ = make_controller(tmp_path)
    buf = TextBuffer('foo fo')
    buf.popup_visible = True
    controller.cycle_forward(buf)
    assert not buf.popup_visible


def test_config_change_applies_on_next_session(tmp_path):
    controller, _ = make_controller(tmp_path)
    buf = TextBuffer('Hello help hover he')
    assert controller.cycle_forward(buf) == 'help'
    controller.config.skip_fuzzy_if_exact = True
    controller.reset()
    buf.undo()
    controller.cycle_forward(buf)
    assert controller.state.candidates.texts() == ['help', 'he']
