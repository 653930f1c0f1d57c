import random

import pytest

from zoroadventure.entities import Character, Obstacle
from zoroadventure.game import (
    HIT_DAMAGE,
    OBSTACLE_VELOCITY,
    SCORE_STEP,
    SPAWN_MARGIN,
    START_LIFE,
    Direction,
    GameState,
    main,
)


@pytest.fixture
def state():
    return GameState(now=0.0)


def test_initial_state(state):
    assert state.life == 100
    assert state.score == 0
    assert (state.width, state.height) == (1080, 540)
    assert state.obstacles == []
    assert not state.is_over()


def test_diagonal_steer_follows_direction_steps(state):
    x0, y0 = state.character.x, state.character.y
    assert state.steer([Direction.LEFT, Direction.DOWN], now=0.0) is True
    assert (Direction.LEFT.dx, Direction.LEFT.dy) == (-1, 0)
    assert (Direction.DOWN.dx, Direction.DOWN.dy) == (0, 1)
    assert state.character.x == x0 - state.speed
    assert state.character.y == y0 + state.speed


@pytest.mark.parametrize(
    "direction", [Direction.LEFT, Direction.RIGHT, Direction.UP, Direction.DOWN]
)
def test_steer_moves_by_speed(state, direction):
    x0, y0 = state.character.x, state.character.y
    assert state.steer([direction], now=0.0) is True
    assert state.character.x == x0 + direction.dx * state.speed
    assert state.character.y == y0 + direction.dy * state.speed


def test_opposite_keys_cancel(state):
    x0 = state.character.x
    assert state.steer({Direction.LEFT, Direction.RIGHT}, now=0.0) is True
    assert state.character.x == x0


def test_no_keys_stands_still(state):
    x0, y0 = state.character.x, state.character.y
    assert state.steer([], now=0.0) is False
    assert state.character.rect == Character.IDLE_RECT
    assert (state.character.x, state.character.y) == (x0, y0)


def test_steer_advances_animation(state):
    state.steer([Direction.RIGHT], now=0.5)
    assert state.character.animation.current == 1


def test_collision_removes_obstacle_and_costs_life(state):
    c = state.character
    state.obstacles.append(Obstacle(c.x, c.y, 2, 4))
    assert state.resolve_collisions() == 1
    assert state.obstacles == []
    assert state.life == START_LIFE - HIT_DAMAGE


def test_distant_obstacle_is_kept(state):
    far = Obstacle(0, 0, 2, 4)
    state.obstacles.append(far)
    assert state.resolve_collisions() == 0
    assert state.obstacles == [far]
    assert state.life == START_LIFE


def test_game_over_after_enough_hits(state):
    c = state.character
    hits_needed = START_LIFE // HIT_DAMAGE
    state.obstacles.extend(Obstacle(c.x, c.y, 2, 4) for _ in range(hits_needed))
    assert state.resolve_collisions() == hits_needed
    assert state.is_over()


def test_score_ticks_each_second(state):
    assert state.tick_score(0.5) is False
    assert state.score == 0
    assert state.tick_score(1.0) is True
    assert state.score == SCORE_STEP
    assert state.tick_score(1.5) is False
    assert state.tick_score(2.0) is True
    assert state.score == 2 * SCORE_STEP


def test_spawn_waits_for_interval(state):
    rng = random.Random(1)
    assert state.maybe_spawn(1.9, rng) is None
    obstacle = state.maybe_spawn(2.0, rng)
    assert state.obstacles == [obstacle]
    assert (obstacle.vx, obstacle.vy) == OBSTACLE_VELOCITY
    assert state.maybe_spawn(3.0, rng) is None
    assert state.maybe_spawn(4.0, rng) is not None
    assert len(state.obstacles) == 2


@pytest.mark.parametrize("seed", range(20))
def test_spawn_stays_inside_window(seed):
    state = GameState(now=0.0)
    obstacle = state.maybe_spawn(2.0, random.Random(seed))
    assert 0 <= obstacle.x < state.width - SPAWN_MARGIN
    assert 0 <= obstacle.y < state.height - SPAWN_MARGIN


def test_spawn_is_reproducible():
    a, b = GameState(), GameState()
    first = a.maybe_spawn(2.0, random.Random(7))
    second = b.maybe_spawn(2.0, random.Random(7))
    assert (first.x, first.y) == (second.x, second.y)


def test_obstacles_move_by_velocity(state):
    obstacle = Obstacle(500, 200, 2, 4)
    state.obstacles.append(obstacle)
    state.move_obstacles(0.0)
    assert (obstacle.x, obstacle.y) == (500 + obstacle.vx, 200 + obstacle.vy)


def test_obstacle_bounces_off_left_edge(state):
    obstacle = Obstacle(0, 200, 2, 4)
    state.obstacles.append(obstacle)
    state.move_obstacles(0.0)
    assert obstacle.vx == -2
    assert obstacle.x < 0 + 2


def test_obstacle_bounces_off_right_edge(state):
    obstacle = Obstacle(state.width - Obstacle.START_RECT[2], 200, 2, 4)
    state.obstacles.append(obstacle)
    state.move_obstacles(0.0)
    assert obstacle.vx == -2
    assert obstacle.vy == 4


def test_obstacle_animation_advances(state):
    obstacle = Obstacle(500, 200, 2, 4)
    state.obstacles.append(obstacle)
    state.move_obstacles(0.5)
    assert obstacle.animation.current == 1
    assert obstacle.rect == obstacle.animation.frame_rect()


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit):
        main(["--no-such-option"])