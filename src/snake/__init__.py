"""Grid snake: fixed-tick game logic with a pygame front end."""

from .game import Direction, Position, Snake, Food, Game, FrameInput, step_game

__all__ = ["Direction", "Position", "Snake", "Food", "Game", "FrameInput", "step_game"]
