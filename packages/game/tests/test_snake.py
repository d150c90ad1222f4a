"""Tests for snake_game.snake and snake_game.geometry"""
import pytest

from snake_game.geometry import Arena, Point
from snake_game.snake import Direction, Snake, turn


class TestPoint:
    def test_equality_by_coordinates(self):
        assert Point(3, 4) == Point(3, 4)
        assert Point(3, 4) != Point(4, 3)
        assert len({Point(1, 1), Point(1, 1)}) == 1

    def test_offset(self):
        assert Point(10, 10).offset(-1, 0) == Point(9, 10)

    def test_immutable(self):
        p = Point(1, 2)
        with pytest.raises(AttributeError):
            p.x = 5  # type: ignore[misc]


class TestArena:
    arena = Arena(Point(30, 30), Point(100, 60))

    def test_edges(self):
        assert (self.arena.left, self.arena.top) == (30, 30)
        assert (self.arena.right, self.arena.bottom) == (100, 60)
        assert (self.arena.width, self.arena.height) == (70, 30)

    @pytest.mark.parametrize(
        "point",
        [Point(30, 45), Point(100, 45), Point(50, 30), Point(50, 60), Point(29, 45), Point(50, 61)],
    )
    def test_border_and_beyond_are_outside(self, point):
        assert self.arena.on_or_outside(point)
        assert not self.arena.contains(point)

    def test_interior(self):
        assert self.arena.contains(Point(31, 31))
        assert self.arena.contains(Point(99, 59))

    def test_food_ranges(self):
        xs, ys = self.arena.food_ranges()
        assert (xs.start, xs.stop) == (31, 99)
        assert (ys.start, ys.stop) == (31, 59)


class TestTurn:
    @pytest.mark.parametrize(
        "current, requested",
        [
            (Direction.LEFT, Direction.UP),
            (Direction.LEFT, Direction.DOWN),
            (Direction.RIGHT, Direction.UP),
            (Direction.UP, Direction.LEFT),
            (Direction.DOWN, Direction.RIGHT),
        ],
    )
    def test_orthogonal_turn_taken(self, current, requested):
        assert turn(current, requested) is requested

    @pytest.mark.parametrize(
        "current, requested",
        [
            (Direction.LEFT, Direction.RIGHT),
            (Direction.LEFT, Direction.LEFT),
            (Direction.UP, Direction.DOWN),
            (Direction.DOWN, Direction.DOWN),
        ],
    )
    def test_parallel_or_opposite_ignored(self, current, requested):
        assert turn(current, requested) is current


class TestAdvance:
    def _snake(self, direction=Direction.LEFT):
        return Snake([Point(5, 5), Point(6, 5), Point(7, 5)], direction)

    @pytest.mark.parametrize(
        "direction, head",
        [
            (Direction.LEFT, Point(4, 5)),
            (Direction.UP, Point(5, 4)),
            (Direction.DOWN, Point(5, 6)),
        ],
    )
    def test_head_moves_one_cell(self, direction, head):
        snake = self._snake(direction)
        assert snake.advance() == head
        assert snake.head == head

    def test_length_unchanged_without_growth(self):
        snake = self._snake()
        for _ in range(5):
            before = snake.head
            snake.advance()
            assert len(snake) == 3
            assert abs(snake.head.x - before.x) + abs(snake.head.y - before.y) == 1
        assert snake.body == [Point(0, 5), Point(1, 5), Point(2, 5)]

    def test_growth_keeps_tail_once(self):
        snake = self._snake()
        snake.grow()
        assert len(snake) == 3
        snake.advance()
        assert len(snake) == 4
        assert snake.tail == Point(7, 5)
        assert snake.pending_growth is False
        snake.advance()
        assert len(snake) == 4

    def test_no_bounds_checking(self):
        snake = Snake([Point(0, 0)], Direction.LEFT)
        assert snake.advance() == Point(-1, 0)

    def test_steer(self):
        snake = self._snake()
        assert snake.steer(Direction.RIGHT) is Direction.LEFT
        assert snake.steer(Direction.UP) is Direction.UP
        assert snake.direction is Direction.UP

    def test_empty_body_rejected(self):
        with pytest.raises(ValueError):
            Snake([])

    def test_occupies(self):
        snake = self._snake()
        assert snake.occupies(Point(6, 5))
        assert not snake.occupies(Point(6, 6))
