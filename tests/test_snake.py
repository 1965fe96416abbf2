import random

import pytest

from almondkit.snake import Direction, Point, SnakeGame


def make_game(width=10, height=10, seed=1):
    game = SnakeGame(width, height, random.Random(seed))
    game.food = Point(0, 0)
    return game


def test_starts_in_middle_with_one_segment():
    game = make_game()
    assert game.body == (Point(10 // 2, 10 // 2),)
    assert game.length == 1
    assert game.direction is Direction.RIGHT


def test_food_not_on_snake():
    for seed in range(20):
        game = SnakeGame(3, 3, random.Random(seed))
        assert game.food not in game.body
        assert 0 <= game.food.x < 3 and 0 <= game.food.y < 3


def test_no_move_before_interval():
    game = make_game()
    start = game.head
    assert game.update(0.05) is False
    assert game.head == start


def test_moves_right_after_interval():
    game = make_game()
    start = game.head
    assert game.update(SnakeGame.MOVE_INTERVAL) is True
    assert game.head == Point(start.x + 1, start.y)
    assert len(game.body) == 1


def test_accumulated_time_adds_up():
    game = make_game()
    start = game.head
    game.update(0.06)
    game.update(0.06)
    assert game.head == Point(start.x + 1, start.y)


def test_wraps_around_edge():
    game = make_game(4, 4)
    start = game.head
    for _ in range(4):
        game.update(SnakeGame.MOVE_INTERVAL)
    assert game.head == start


def test_reverse_turn_is_ignored():
    game = make_game()
    game.update_direction(Direction.LEFT)
    assert game.direction is Direction.RIGHT
    game.update_direction(Direction.UP)
    assert game.direction is Direction.UP


def grow_to(game, length):
    while game.length < length:
        game.food = _step_ahead(game)
        game.update(SnakeGame.MOVE_INTERVAL)
    game.food = Point(0, 0)


def _step_ahead(game):
    return Point(game.head.x + 1, game.head.y)


def test_eating_food_grows_snake():
    game = make_game()
    game.food = _step_ahead(game)
    game.update(SnakeGame.MOVE_INTERVAL)
    assert game.length == 2
    assert game.food not in game.body
    game.food = Point(0, 0)
    game.update(SnakeGame.MOVE_INTERVAL)
    assert len(game.body) == 2


def test_two_segment_snake_cannot_turn_into_tail():
    game = make_game()
    grow_to(game, 2)
    game.update(SnakeGame.MOVE_INTERVAL)
    assert len(game.body) == 2
    game.update_direction(Direction.LEFT)
    assert game.direction is Direction.RIGHT


def test_self_collision_resets():
    game = make_game()
    grow_to(game, 4)
    game.update(SnakeGame.MOVE_INTERVAL)
    assert len(game.body) == 4
    game.update_direction(Direction.DOWN)
    game.update(SnakeGame.MOVE_INTERVAL)
    game.update_direction(Direction.LEFT)
    game.update(SnakeGame.MOVE_INTERVAL)
    game.update_direction(Direction.UP)
    game.update(SnakeGame.MOVE_INTERVAL)
    assert game.length == 1
    assert game.body == (Point(10 // 2, 10 // 2),)
    assert game.direction is Direction.RIGHT


def test_reset_restores_start():
    game = make_game()
    grow_to(game, 3)
    game.update_direction(Direction.DOWN)
    game.reset()
    assert game.length == 1
    assert game.body == (Point(10 // 2, 10 // 2),)
    assert game.direction is Direction.RIGHT
    assert game.food not in game.body


def test_invalid_size_rejected():
    with pytest.raises(ValueError):
        SnakeGame(0, 5)


def test_full_board_has_no_room_for_food():
    with pytest.raises(RuntimeError):
        SnakeGame(1, 1, random.Random(0))