# render.py
from dataclasses import dataclass
from typing import Tuple
import pygame # type: ignore

from .config import (
    WIDTH, HEIGHT, CELL_SIZE,
    BG_LIGHT, BG_DARK, SNAKE_COLOR, FOOD_COLOR, TEXT,
    SCORE_SIZE, TITLE_SIZE, HINT_SIZE,
)
from .game import Game, Position

RESTART_HINT = "Press SPACE to restart"
SCORE_ANCHOR = (WIDTH - 20, HEIGHT - 20)
TITLE_CENTER = (WIDTH // 2, HEIGHT // 2 - 20)
HINT_CENTER = (WIDTH // 2, HEIGHT // 2 + 20)

@dataclass
class Fonts:
    score: pygame.font.Font
    title: pygame.font.Font
    hint: pygame.font.Font

def load_fonts() -> Fonts:
    """Default pygame font at the three sizes the HUD uses. Needs pygame.font.init()."""
    return Fonts(
        score=pygame.font.Font(None, SCORE_SIZE),
        title=pygame.font.Font(None, TITLE_SIZE),
        hint=pygame.font.Font(None, HINT_SIZE),
    )

# ---------- Primitives ----------
def draw_cell(screen: pygame.Surface, cell: Position, color: Tuple[int, int, int]) -> None:
    rect = pygame.Rect(cell.x * CELL_SIZE, cell.y * CELL_SIZE, CELL_SIZE, CELL_SIZE)
    pygame.draw.rect(screen, color, rect)

def draw_text_centered(screen: pygame.Surface, font: pygame.font.Font, text: str,
                       center: Tuple[int, int]) -> pygame.Rect:
    surf = font.render(text, True, TEXT)
    rect = surf.get_rect(center=center)
    screen.blit(surf, rect)
    return rect

# ---------- Layers ----------
def draw_background(screen: pygame.Surface, grid_w: int, grid_h: int) -> None:
    # checkerboard: dark tiles where (row + col) is even
    screen.fill(BG_LIGHT)
    for row in range(grid_h):
        for col in range(grid_w):
            if (row + col) % 2 == 0:
                draw_cell(screen, Position(col, row), BG_DARK)

def draw_score(screen: pygame.Surface, font: pygame.font.Font, score: int) -> pygame.Rect:
    txt = font.render(str(score), True, TEXT)
    rect = txt.get_rect(bottomright=SCORE_ANCHOR)
    screen.blit(txt, rect)
    return rect

def draw_game_over(screen: pygame.Surface, fonts: Fonts) -> Tuple[pygame.Rect, pygame.Rect]:
    title = draw_text_centered(screen, fonts.title, "GAME OVER", TITLE_CENTER)
    hint = draw_text_centered(screen, fonts.hint, RESTART_HINT, HINT_CENTER)
    return title, hint

def draw_frame(screen: pygame.Surface, fonts: Fonts, game: Game) -> None:
    draw_background(screen, game.width, game.height)
    draw_cell(screen, game.food.position, FOOD_COLOR)
    for segment in game.snake.body:
        draw_cell(screen, segment, SNAKE_COLOR)
    draw_score(screen, fonts.score, game.score)
    if game.game_over:
        draw_game_over(screen, fonts)
