"""A sprite stress test: bouncing bunnies, batched or drawn one by one."""

from __future__ import annotations

import argparse
import os
import random
from dataclasses import dataclass, field

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402
from pygame.math import Vector2  # noqa: E402

INITIAL_BUNNIES = 1000
WIDTH = 800
HEIGHT = 600
GRAVITY = 0.5
BUNNY_SIZE = (26, 37)
CLICK_COOLDOWN = 10
RNG_SEED = 12345
BACKGROUND_COLOR = (100, 149, 237)


@dataclass
class Bunny:
    """One bouncing bunny."""

    position: Vector2 = field(default_factory=Vector2)
    velocity: Vector2 = field(default_factory=Vector2)

    @classmethod
    def spawn(cls, rng: random.Random) -> Bunny:
        """A bunny at the origin with a random initial velocity."""
        x_vel = rng.random() * 5.0
        y_vel = rng.random() * 5.0 - 2.5
        return cls(Vector2(0.0, 0.0), Vector2(x_vel, y_vel))


class BunnyMark:
    """The simulation: all bunnies, the click cooldown and the drawing mode."""

    def __init__(
        self,
        rng: random.Random | None = None,
        texture_size: tuple[int, int] = BUNNY_SIZE,
        width: int = WIDTH,
        height: int = HEIGHT,
    ) -> None:
        self.rng = rng if rng is not None else random.Random(RNG_SEED)
        self.max_x = float(width - texture_size[0])
        self.max_y = float(height - texture_size[1])
        self.bunnies = [Bunny.spawn(self.rng) for _ in range(INITIAL_BUNNIES)]
        self.click_timer = 0
        self.batched_drawing = True

    def update(self) -> None:
        """Advance every bunny by one frame."""
        if self.click_timer > 0:
            self.click_timer -= 1

        for bunny in self.bunnies:
            bunny.position += bunny.velocity
            bunny.velocity += Vector2(0.0, GRAVITY)

            if bunny.position.x > self.max_x:
                bunny.velocity = Vector2(-bunny.velocity.x, 0.0)
                bunny.position.x = self.max_x
            elif bunny.position.x < 0.0:
                bunny.velocity = Vector2(-bunny.velocity.x, 0.0)
                bunny.position.x = 0.0

            if bunny.position.y > self.max_y:
                bunny.velocity.y *= -0.8
                bunny.position.y = self.max_y
                if self.rng.random() < 0.5:
                    bunny.velocity.y -= 3.0 + self.rng.random() * 4.0
            elif bunny.position.y < 0.0:
                bunny.velocity.y = 0.0
                bunny.position.y = 0.0

    def click(self) -> bool:
        """Add another batch of bunnies unless the cooldown is running."""
        if self.click_timer != 0:
            return False
        self.bunnies.extend(Bunny.spawn(self.rng) for _ in range(INITIAL_BUNNIES))
        self.click_timer = CLICK_COOLDOWN
        return True

    def toggle_batched(self) -> bool:
        """Switch between batched and one-by-one drawing; return the new mode."""
        self.batched_drawing = not self.batched_drawing
        return self.batched_drawing

    def _draw(self, surface: pygame.Surface, texture: pygame.Surface) -> None:
        surface.fill(BACKGROUND_COLOR)
        if self.batched_drawing:
            surface.blits(
                [(texture, (b.position.x, b.position.y)) for b in self.bunnies],
                doreturn=False,
            )
        else:
            for bunny in self.bunnies:
                surface.blit(texture, (bunny.position.x, bunny.position.y))


def _default_texture() -> pygame.Surface:
    texture = pygame.Surface(BUNNY_SIZE, pygame.SRCALPHA)
    texture.fill((255, 255, 255, 255))
    pygame.draw.rect(texture, (255, 180, 200), texture.get_rect(), 2)
    return texture


def main(argv: list[str] | None = None) -> int:
    """Open a window and run the benchmark until it is closed."""
    parser = argparse.ArgumentParser(description="Bouncing sprite benchmark.")
    parser.add_argument("--texture", help="bunny image", default=None)
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        texture = (
            pygame.image.load(args.texture).convert_alpha()
            if args.texture
            else _default_texture()
        )
        state = BunnyMark(texture_size=texture.get_size())
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE:
                    state.toggle_batched()
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    state.click()
            state.update()
            state._draw(screen, texture)
            pygame.display.set_caption(
                f"BunnyMark - {len(state.bunnies)} bunnies - {clock.get_fps():.0f} FPS"
                f" - batched drawing: {str(state.batched_drawing).lower()}"
            )
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())