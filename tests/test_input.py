import pytest

from cardtable.input import Input, Key, KeyCode, KeyState


def make_input():
    inp = Input()
    inp.initialize()
    return inp


def test_key_codes_follow_keyboard_rows():
    codes = list(KeyCode)
    assert codes[:3] == [KeyCode.Q, KeyCode.W, KeyCode.E]
    assert codes[-1] is KeyCode.M
    assert KeyCode("N") is KeyCode.N


def test_initial_state_is_none():
    inp = make_input()
    assert len(inp.keys) == len(KeyCode)
    assert all(k.state is KeyState.NONE and not k.pressed for k in inp.keys)


def test_press_hold_release_cycle():
    inp = make_input()
    held = {KeyCode.N}
    inp.update(lambda code: code in held)
    assert inp.get_key_state(KeyCode.N) is KeyState.DOWN
    inp.update(lambda code: code in held)
    assert inp.get_key_state(KeyCode.N) is KeyState.PRESSED
    held.clear()
    inp.update(lambda code: code in held)
    assert inp.get_key_state(KeyCode.N) is KeyState.UP
    inp.update(lambda code: code in held)
    assert inp.get_key_state(KeyCode.N) is KeyState.NONE


def test_other_keys_unaffected():
    inp = make_input()
    inp.update(lambda code: code is KeyCode.A)
    assert inp.get_key_state(KeyCode.A) is KeyState.DOWN
    assert inp.get_key_state(KeyCode.B) is KeyState.NONE


def test_is_down_receives_every_key_once():
    inp = make_input()
    seen = []
    inp.update(lambda code: seen.append(code) or False)
    assert seen == list(KeyCode)


def test_state_before_initialize_raises():
    with pytest.raises(KeyError):
        Input().get_key_state(KeyCode.Q)


def test_initialize_resets_state():
    inp = make_input()
    inp.update(lambda code: True)
    inp.initialize()
    assert inp.get_key_state(KeyCode.Q) is KeyState.NONE
    assert inp.keys[0] == Key(KeyCode.Q)