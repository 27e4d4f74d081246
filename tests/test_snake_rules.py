# tests/test_snake_rules.py
import pytest
from snakegame.core.interfaces import GameEvent, Heading, TickOutcome

REVERSE_PAIRS = {(Heading.LEFT, Heading.RIGHT), (Heading.RIGHT, Heading.LEFT),
                 (Heading.UP, Heading.DOWN), (Heading.DOWN, Heading.UP)}

def test_initial_state(rules_factory):
    r = rules_factory()
    assert r.body == [(0, 0), (1, 0), (2, 0), (3, 0), (4, 0)]
    assert r.head == (4, 0)
    assert r.heading is Heading.RIGHT
    assert r.score == 0
    assert r.alive and r.reason is None

@pytest.mark.parametrize("current", list(Heading))
@pytest.mark.parametrize("requested", list(Heading))
def test_set_heading_rejects_only_reversal(rules_factory, current, requested):
    r = rules_factory()
    r.heading = current
    changed = r.set_heading(requested)
    forbidden = (current, requested) in REVERSE_PAIRS
    assert changed is (not forbidden)
    assert r.heading is (current if forbidden else requested)

def test_set_heading_notifies_moved_only_on_change(rules_factory):
    events = []
    r = rules_factory(listeners=[events.append])
    assert r.set_heading(Heading.LEFT) is False
    assert events == []
    assert r.set_heading(Heading.DOWN) is True
    assert events == [GameEvent.MOVED]

def test_tick_without_food_slides_forward(rules_factory):
    r = rules_factory()
    assert r.tick() is TickOutcome.CONTINUE
    assert r.body == [(1, 0), (2, 0), (3, 0), (4, 0), (5, 0)]
    assert r.head == (5, 0)
    assert r.tick_count == 1

def test_tick_on_food_grows_and_scores(rules_factory):
    events = []
    r = rules_factory(foods=[(4, 0), (7, 7)], listeners=[events.append])
    assert r.food == (4, 0)
    assert r.tick() is TickOutcome.ATE
    assert len(r.body) == 6
    assert r.body[0] == (0, 0)
    assert r.head == (5, 0)
    assert r.score == 1
    assert r.food == (7, 7)
    assert r.grid.calls == 2
    assert events == [GameEvent.ATE]

def test_heading_change_applies_to_next_tick(rules_factory):
    r = rules_factory()
    r.set_heading(Heading.DOWN)
    r.tick()
    assert r.head == (4, 1)

@pytest.mark.parametrize("start, heading", [
    ((0, 5), Heading.LEFT),
    ((32, 5), Heading.RIGHT),
    ((5, 0), Heading.UP),
    ((5, 19), Heading.DOWN),
])
def test_wall_collision_kills(rules_factory, start, heading):
    r = rules_factory()
    r.body = [start]
    r.heading = heading
    assert r.tick() is TickOutcome.GAME_OVER
    assert not r.alive
    assert r.reason == "wall"

def test_running_off_the_right_edge(rules_factory):
    events = []
    r = rules_factory(listeners=[events.append])
    outcomes = [r.tick() for _ in range(29)]
    assert outcomes[:-1] == [TickOutcome.CONTINUE] * 28
    assert outcomes[-1] is TickOutcome.GAME_OVER
    # tail already dropped this tick, new head never appended
    assert r.body == [(29, 0), (30, 0), (31, 0), (32, 0)]
    assert events == [GameEvent.GAME_OVER]

def test_dead_snake_does_not_move(rules_factory):
    r = rules_factory()
    r.set_heading(Heading.UP)
    r.tick()
    before = r.snapshot()
    assert r.tick() is TickOutcome.GAME_OVER
    assert r.set_heading(Heading.RIGHT) is False
    assert r.snapshot() == before

# A hook shape: head at (3,2) with the tail at (2,2) right beside it
HOOK = [(2, 2), (2, 1), (3, 1), (4, 1), (4, 2), (3, 2)]

def test_self_collision_kills(rules_factory):
    r = rules_factory()
    r.body = list(HOOK)
    r.heading = Heading.UP
    assert r.tick() is TickOutcome.GAME_OVER
    assert r.reason == "self"

def test_moving_into_vacated_tail_is_legal(rules_factory):
    r = rules_factory()
    r.body = list(HOOK)
    r.heading = Heading.LEFT
    assert r.tick() is TickOutcome.CONTINUE
    assert r.head == (2, 2)
    assert r.alive

def test_tail_is_kept_when_eating_so_it_blocks(rules_factory):
    r = rules_factory()
    r.body = list(HOOK)
    r.food = (3, 2)
    r.heading = Heading.LEFT
    assert r.tick() is TickOutcome.GAME_OVER
    assert r.reason == "self"
    assert r.score == 1

def test_reset_restores_initial_snake(rules_factory):
    r = rules_factory()
    r.set_heading(Heading.UP)
    r.tick()
    snap = r.reset()
    assert snap.body == ((0, 0), (1, 0), (2, 0), (3, 0), (4, 0))
    assert snap.heading is Heading.RIGHT
    assert snap.alive and snap.score == 0

def test_snapshot_is_detached(rules_factory):
    r = rules_factory()
    snap = r.snapshot()
    r.tick()
    assert snap.head == (4, 0)
    assert snap.grid_w == 33 and snap.grid_h == 20
