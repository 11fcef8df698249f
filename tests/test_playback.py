from nconv.dispatcher import convert
from nconv.playback import PlaybackController

class FakeClock:
    def __init__(self): self.now = 0.0
    def __call__(self): return self.now

def _controller(interval_ms=500):
    clock = FakeClock()
    res = convert("Infix", "Postfix", "A + B")   # 4 steps
    return PlaybackController.for_result(res, interval_ms=interval_ms, clock=clock), clock

def test_manual_stepping_and_reset():
    ctrl, _ = _controller()
    assert ctrl.active_index is None
    assert ctrl.step().sequence_index == 1
    assert ctrl.step().sequence_index == 2
    assert ctrl.active_index == 1
    ctrl.reset()
    assert ctrl.cursor == 0 and ctrl.revealed == ()

def test_timer_reveals_on_interval():
    ctrl, clock = _controller(500)
    ctrl.start()
    assert ctrl.running
    assert ctrl.tick() == []
    clock.now = 0.5
    assert [s.sequence_index for s in ctrl.tick()] == [1]
    clock.now = 1.6   # two more intervals elapsed
    assert [s.sequence_index for s in ctrl.tick()] == [2, 3]
    assert abs(ctrl.seconds_until_due() - 0.4) < 1e-9

def test_timer_stops_at_end():
    ctrl, clock = _controller(100)
    ctrl.start()
    clock.now = 10.0
    assert len(ctrl.tick()) == 4
    assert ctrl.finished and not ctrl.running
    ctrl.start()
    assert not ctrl.running

def test_pause_blocks_ticks_and_step_ignored_while_running():
    ctrl, clock = _controller(100)
    ctrl.start()
    assert ctrl.step() is None
    ctrl.pause()
    clock.now = 5.0
    assert ctrl.tick() == []
    assert ctrl.step().sequence_index == 1

def test_set_interval_rearms_running_timer():
    ctrl, clock = _controller(1000)
    ctrl.start()
    clock.now = 0.9
    ctrl.set_interval(200)
    assert ctrl.interval_ms == 200
    clock.now = 1.0
    assert ctrl.tick() == []
    clock.now = 1.2
    assert len(ctrl.tick()) == 1

def test_controllers_share_no_state():
    a, _ = _controller()
    b, _ = _controller()
    a.step()
    assert b.cursor == 0
