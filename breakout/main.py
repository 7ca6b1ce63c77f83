#!/usr/bin/env python3
"""Breakout - Standalone Entry Point.

Opens a fixed-size window, polls the keyboard, and drives a
BreakoutSession once per frame until it stops.

Usage:
    breakout
    breakout --width 1024 --height 768
    breakout --debug          # C clears every brick outside the first row
"""

import argparse
import sys

import pygame

from breakout.common.logging import configure_logging, get_logger
from breakout.config import DEBUG_KEYS, FPS, SCREEN_HEIGHT, SCREEN_WIDTH, WINDOW_TITLE
from breakout.game.skins import SKINS
from breakout.game_mode import BreakoutSession
from breakout.input.sources.keyboard import KeyboardInputSource

log = get_logger('main')


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line options."""
    parser = argparse.ArgumentParser(description="Breakout - Standalone")

    # Display options
    parser.add_argument('--width', type=int, default=SCREEN_WIDTH, help='Window width')
    parser.add_argument('--height', type=int, default=SCREEN_HEIGHT, help='Window height')
    parser.add_argument('--fps', type=int, default=FPS, help='Frame rate cap')
    parser.add_argument('--skin', type=str, default='geometric',
                        choices=sorted(SKINS), help='Visual skin')

    # Diagnostics
    parser.add_argument('--debug', action='store_true', default=DEBUG_KEYS,
                        help='Enable the brick-clearing debug key (C)')
    parser.add_argument('--log-level', type=str, default=None,
                        choices=['TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'OFF'],
                        help='Override BREAKOUT_LOG_LEVEL')

    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Run Breakout standalone."""
    args = parse_args(argv)
    if args.log_level:
        configure_logging(level=args.log_level)

    pygame.init()
    pygame.font.init()

    # Non-resizable window; the session reads the real surface size
    screen = pygame.display.set_mode((args.width, args.height))
    pygame.display.set_caption(WINDOW_TITLE)
    width, height = screen.get_size()

    session = BreakoutSession(width, height)
    skin = SKINS[args.skin]()
    source = KeyboardInputSource(debug_keys=args.debug)

    print("\n" + "=" * 50)
    print("BREAKOUT")
    print("=" * 50)
    print("Controls:")
    print("  - A / D or arrow keys to move the paddle")
    print("  - ESC to quit")
    if args.debug:
        print("  - C to clear all bricks except the first row")
    print("=" * 50 + "\n")

    clock = pygame.time.Clock()
    session.start()

    while session.is_running:
        dt = clock.tick(args.fps) / 1000.0

        source.update(dt)
        snapshot = session.tick(dt, source.poll_intents())

        skin.render(snapshot, screen)
        pygame.display.flip()

    log.info("Final score: %d", session.score)
    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
