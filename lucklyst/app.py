"""Command entry point: runs the lucky draw window."""

from __future__ import annotations

import argparse

import pygame

from .graphics import BLACK, Graphics
from .logic import GameLogic

FRAME_DELAY_MS = 16


def main(argv=None):
    """Open the window and run the event loop until it is closed."""
    parser = argparse.ArgumentParser(
        prog="lucklyst",
        description="Enter customers, then shake the tree to draw a winner.",
    )
    parser.parse_args(argv)

    pygame.mixer.pre_init(44100, -16, 2, 2048)
    pygame.init()

    gfx = Graphics()
    gfx.init()

    game = GameLogic()
    game.init_input()

    running = True
    while running:
        game.toggle_cursor()

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            else:
                game.handle_input_event(event, gfx)

        gfx.screen.fill(BLACK)
        if game.in_game:
            game.update_fruits(gfx)
            game.render_game(gfx)
        else:
            game.render_input_ui(gfx)

        pygame.display.flip()
        pygame.time.delay(FRAME_DELAY_MS)

    gfx.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())