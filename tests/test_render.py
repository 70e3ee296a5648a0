"""
Off-screen render tests (SDL dummy driver, see conftest).
"""

import pygame
import pytest

from snake.config import BG_DARK, BG_LIGHT, CELL_SIZE, FOOD_COLOR, HEIGHT, SNAKE_COLOR, WIDTH
from snake.config import Config
from snake.game import Game, Position
from snake.render import (
    HINT_CENTER, SCORE_ANCHOR, TITLE_CENTER,
    draw_background, draw_frame, draw_game_over, draw_score, draw_text_centered, load_fonts,
)


@pytest.fixture(scope="module")
def fonts():
    pygame.font.init()
    yield load_fonts()
    pygame.font.quit()


@pytest.fixture
def screen():
    return pygame.Surface((WIDTH, HEIGHT))


def pixel(surface, cell):
    x, y = cell
    return tuple(surface.get_at((x * CELL_SIZE + CELL_SIZE // 2, y * CELL_SIZE + CELL_SIZE // 2)))[:3]


def test_checkerboard(screen):
    draw_background(screen, 40, 30)
    assert pixel(screen, (0, 0)) == BG_DARK
    assert pixel(screen, (1, 0)) == BG_LIGHT
    assert pixel(screen, (0, 1)) == BG_LIGHT
    assert pixel(screen, (1, 1)) == BG_DARK


def test_frame_draws_snake_and_food(screen, fonts, rng):
    game = Game.new(0, Config(), rng)
    game.food.position = Position(20, 5)
    draw_frame(screen, fonts, game)
    for segment in game.snake.body:
        assert pixel(screen, (segment.x, segment.y)) == SNAKE_COLOR
    assert pixel(screen, (20, 5)) == FOOD_COLOR


def changed_pixels(before, after, rect):
    return sum(
        1
        for x in range(rect.left, rect.right)
        for y in range(rect.top, rect.bottom)
        if before.get_at((x, y)) != after.get_at((x, y))
    )


def test_score_bottom_right(screen, fonts):
    draw_background(screen, 40, 30)
    blank = screen.copy()
    rect = draw_score(screen, fonts.score, 12)
    assert rect.bottomright == SCORE_ANCHOR
    assert rect.right <= WIDTH and rect.bottom <= HEIGHT
    assert rect.left > WIDTH // 2 and rect.top > HEIGHT // 2
    assert changed_pixels(blank, screen, rect) > 0


def test_game_over_overlay_positions(screen, fonts):
    draw_background(screen, 40, 30)
    title, hint = draw_game_over(screen, fonts)
    assert title.center == TITLE_CENTER
    assert hint.center == HINT_CENTER
    assert title.centerx == hint.centerx == WIDTH // 2
    assert hint.top >= title.bottom - 4


def test_game_over_frame_draws_overlay(fonts, rng):
    game = Game.new(0, Config(), rng)
    game.food.position = Position(20, 5)
    running = pygame.Surface((WIDTH, HEIGHT))
    draw_frame(running, fonts, game)

    game.game_over = True
    over = pygame.Surface((WIDTH, HEIGHT))
    draw_frame(over, fonts, game)

    title, hint = draw_game_over(pygame.Surface((WIDTH, HEIGHT)), fonts)
    assert changed_pixels(running, over, title) > 0
    assert changed_pixels(running, over, hint) > 0
    # the rest of the board is untouched
    assert pixel(over, (20, 5)) == FOOD_COLOR


def test_centered_text(screen, fonts):
    rect = draw_text_centered(screen, fonts.title, "GAME OVER", (WIDTH // 2, HEIGHT // 2))
    assert rect.center == (WIDTH // 2, HEIGHT // 2)
