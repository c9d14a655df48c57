import pytest

from pablaide.keys import KeyPressHandler, Modifier


@pytest.fixture
def calls():
    return []


@pytest.fixture
def handler(calls):
    return KeyPressHandler(lambda: calls.append("save"), lambda: calls.append("undo"))


@pytest.mark.parametrize("key", ["s", "S"])
def test_ctrl_s_saves(handler, calls, key):
    assert handler.handle(key, Modifier.CONTROL) is True
    assert calls == ["save"]


def test_ctrl_z_undoes(handler, calls):
    assert handler.handle("z", Modifier.CONTROL) is True
    assert calls == ["undo"]


def test_other_key_passes_through(handler, calls):
    assert handler.handle("a", Modifier.CONTROL) is False
    assert calls == []


@pytest.mark.parametrize(
    "modifiers", [Modifier.NONE, Modifier.CONTROL | Modifier.SHIFT, Modifier.ALT]
)
def test_modifiers_must_be_control_alone(handler, calls, modifiers):
    assert handler.handle("s", modifiers) is False
    assert calls == []