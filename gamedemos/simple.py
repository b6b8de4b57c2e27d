"""The smallest demos: a moving circle, a drifting greeting and a hand-rolled loop."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

SCREEN_SIZE = (800, 600)
WRAP_WIDTH = 800.0
CIRCLE_Y = 380.0
CIRCLE_RADIUS = 100
FPS_REPORT_INTERVAL = 100
TEXT_SIZE = 48

BACKGROUND_COLOR = (25, 51, 76)
WHITE = (255, 255, 255)

DEMOS = ("super_simple", "hello_world", "eventloop")


@dataclass
class SuperSimple:
    """A circle sliding right across the screen and wrapping around."""

    pos_x: float = 0.0

    def update(self) -> float:
        """Move one pixel to the right, wrapping at the screen width; return the new x."""
        self.pos_x = self.pos_x % WRAP_WIDTH + 1.0
        return self.pos_x

    def _draw(self, surface: pygame.Surface) -> None:
        surface.fill(BACKGROUND_COLOR)
        pygame.draw.circle(surface, WHITE, (self.pos_x, CIRCLE_Y), CIRCLE_RADIUS)


@dataclass
class HelloWorld:
    """A greeting that drifts diagonally as frames go by."""

    frames: int = 0

    @property
    def offset(self) -> float:
        """Distance of the text from the top-left corner, on both axes."""
        return self.frames / 10.0

    def frame(self) -> bool:
        """Count a drawn frame; True when a frame-rate report is due."""
        self.frames += 1
        return self.frames % FPS_REPORT_INTERVAL == 0

    def _draw(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        surface.fill(BACKGROUND_COLOR)
        offset = self.offset
        surface.blit(font.render("Hello, world!", True, WHITE), (offset, offset))


def _run_super_simple(screen: pygame.Surface, clock: pygame.time.Clock) -> None:
    state = SuperSimple()
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
        state.update()
        state._draw(screen)
        pygame.display.flip()
        clock.tick(60)


def _run_hello_world(
    screen: pygame.Surface, clock: pygame.time.Clock, font_path: str | None
) -> None:
    font = pygame.font.Font(font_path, TEXT_SIZE)
    state = HelloWorld()
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
        state._draw(screen, font)
        pygame.display.flip()
        if state.frame():
            print(f"FPS: {clock.get_fps()}")
        clock.tick(60)


def _run_eventloop(screen: pygame.Surface, clock: pygame.time.Clock) -> None:
    position = 1.0
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            else:
                print(f"Other window event fired: {event}")
        if not running:
            break
        position += 1.0
        screen.fill(BACKGROUND_COLOR)
        pygame.draw.circle(screen, WHITE, (position, CIRCLE_Y), CIRCLE_RADIUS)
        pygame.display.flip()
        clock.tick(60)


def main(argv: list[str] | None = None) -> int:
    """Open a window running one of the simple demos."""
    parser = argparse.ArgumentParser(description="Minimal drawing demos.")
    parser.add_argument("demo", nargs="?", choices=DEMOS, default=DEMOS[0])
    parser.add_argument("--font", help="font file for the greeting", default=None)
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode(SCREEN_SIZE)
        pygame.display.set_caption(args.demo.replace("_", ""))
        clock = pygame.time.Clock()
        if args.demo == "hello_world":
            _run_hello_world(screen, clock, args.font)
        elif args.demo == "eventloop":
            _run_eventloop(screen, clock)
        else:
            _run_super_simple(screen, clock)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())