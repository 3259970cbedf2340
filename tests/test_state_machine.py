import pytest

from quadkit.coroutines import CoroutinesContext
from quadkit.state_machine import MAX_STATE, State, StateMachine


class Player:
    def __init__(self):
        self.events = []


def _enter_then_second(log, target):
    log.append("enter")
    yield
    log.append("second")


def test_set_state_is_deferred_until_update():
    sm = StateMachine()
    sm.set_state(2)
    assert sm.state() == 0
    sm.update(Player(), 0.1)
    assert sm.state() == 2


def test_transition_calls_on_end_then_update():
    sm = StateMachine()
    sm.add_state(0, State().with_on_end(lambda t: t.events.append("end0")))
    sm.add_state(1, State().with_update(lambda t, dt: t.events.append(("upd1", dt))))
    player = Player()
    sm.set_state(1)
    sm.update(player, 0.5)
    assert player.events == ["end0", ("upd1", 0.5)]


def test_same_state_does_not_call_on_end():
    sm = StateMachine()
    sm.add_state(
        0,
        State()
        .with_on_end(lambda t: t.events.append("end"))
        .with_update(lambda t, dt: t.events.append("upd")),
    )
    player = Player()
    sm.set_state(0)
    sm.update(player, 0.1)
    assert player.events == ["upd"]


@pytest.mark.parametrize("bad", [MAX_STATE, -1])
def test_add_state_out_of_range(bad):
    with pytest.raises(IndexError):
        StateMachine().add_state(bad, State())


def test_set_state_out_of_range():
    with pytest.raises(IndexError):
        StateMachine().set_state(MAX_STATE)


def test_entry_coroutine_is_polled_manually():
    ctx = CoroutinesContext()
    log = []

    sm = StateMachine()
    sm.add_state(
        1,
        State().with_coroutine(
            lambda t: ctx.start(_enter_then_second(log, t), has_value=False)
        ),
    )
    player = Player()
    sm.set_state(1)
    sm.update(player, 0.1)
    ctx.update(0.1)
    assert log == []
    sm.poll_coroutine(0.1)
    assert log == ["enter"]
    sm.poll_coroutine(0.1)
    assert log == ["enter", "second"]
    assert sm.active_coroutine.is_done()


def test_set_state_inside_update_applies_next_frame():
    sm = StateMachine()
    sm.add_state(0, State().with_update(lambda t, dt: sm.set_state(3)))
    player = Player()
    sm.update(player, 0.1)
    assert sm.state() == 0
    sm.update(player, 0.1)
    assert sm.state() == 3


def test_builders_leave_original_untouched():
    def upd(t, dt):
        return None

    base = State()
    built = base.with_update(upd)
    assert base.update is None
    assert built.update is upd
    assert built.on_end is None