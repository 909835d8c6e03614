"""
The monochrome 64x32 display.

Sprites are XORed onto the screen.  The starting coordinate of a sprite wraps around the screen, but the pixels of a
sprite which then run past the right or bottom edge are clipped rather than wrapped.
"""
import numpy as np

from typing import Sequence

SCREEN_WIDTH = 64
SCREEN_HEIGHT = 32
SPRITE_WIDTH = 8


class Display:
    def __init__(self):
        # Indexed [x, y] so it can be handed straight to pygame.surfarray.
        self.pixels = np.zeros((SCREEN_WIDTH, SCREEN_HEIGHT), np.bool_)

    def clear(self) -> None:
        """
        Turn off every pixel.
        """
        self.pixels.fill(False)

    def draw_sprite(self, x: int, y: int, sprite_rows: Sequence[int]) -> bool:
        """
        XOR the sprite onto the screen.
        :param x: The x-coordinate of the top left of the sprite.
        :param y: The y-coordinate of the top left of the sprite.
        :param sprite_rows: One byte per row, most significant bit on the left.
        :return: True if any pixel which was on got turned off, False otherwise.
        """
        x_start = x % SCREEN_WIDTH
        y_start = y % SCREEN_HEIGHT
        pixel_unset = False
        for row, byte in enumerate(sprite_rows):
            y_coordinate = y_start + row
            if y_coordinate >= SCREEN_HEIGHT:
                break
            for column in range(SPRITE_WIDTH):
                x_coordinate = x_start + column
                if x_coordinate >= SCREEN_WIDTH:
                    break
                if not (byte >> (SPRITE_WIDTH - 1 - column)) & 1:
                    continue
                if self.pixels[x_coordinate, y_coordinate]:
                    pixel_unset = True
                self.pixels[x_coordinate, y_coordinate] ^= True
        return pixel_unset

    def is_set(self, x: int, y: int) -> bool:
        return bool(self.pixels[x, y])

    def lit_pixel_count(self) -> int:
        return int(np.count_nonzero(self.pixels))
