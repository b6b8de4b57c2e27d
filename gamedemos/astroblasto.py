"""An Asteroids-like game: steer a ship, shoot rocks, survive the levels."""

from __future__ import annotations

import math
import os
import random
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402
from pygame.math import Vector2  # noqa: E402

PLAYER_LIFE = 1.0
SHOT_LIFE = 2.0
ROCK_LIFE = 1.0

PLAYER_BBOX = 12.0
ROCK_BBOX = 12.0
SHOT_BBOX = 6.0

MAX_ROCK_VEL = 50.0

SHOT_SPEED = 200.0
SHOT_ANG_VEL = 0.1

PLAYER_THRUST = 100.0
PLAYER_TURN_RATE = 3.0
PLAYER_SHOT_TIME = 0.5

MAX_PHYSICS_VEL = 250.0

DESIRED_FPS = 60
SCREEN_SIZE = (640, 480)

INSTRUCTIONS = (
    "\n"
    "Welcome to ASTROBLASTO!\n"
    "\n"
    "How to play:\n"
    "L/R arrow keys rotate your ship, up thrusts, space bar fires\n"
)


def vec_from_angle(angle: float) -> Vector2:
    """Unit vector for ``angle`` radians, measured from +y towards +x."""
    return Vector2(math.sin(angle), math.cos(angle))


def random_vec(rng: random.Random, max_magnitude: float) -> Vector2:
    """A vector in a random direction with length below ``max_magnitude``."""
    angle = rng.random() * 2.0 * math.pi
    magnitude = rng.random() * max_magnitude
    return vec_from_angle(angle) * magnitude


class ActorType(Enum):
    """The kinds of thing in the game world."""

    PLAYER = "player"
    ROCK = "rock"
    SHOT = "shot"


@dataclass
class Actor:
    """Anything in the game world.

    ``life`` is time left to live for shots and hit points for everything else.
    """

    tag: ActorType
    bbox_size: float
    life: float
    pos: Vector2 = field(default_factory=Vector2)
    facing: float = 0.0
    velocity: Vector2 = field(default_factory=Vector2)
    ang_vel: float = 0.0


def create_player() -> Actor:
    """A fresh player ship at the origin."""
    return Actor(ActorType.PLAYER, PLAYER_BBOX, PLAYER_LIFE)


def create_rock() -> Actor:
    """A fresh, motionless rock at the origin."""
    return Actor(ActorType.ROCK, ROCK_BBOX, ROCK_LIFE)


def create_shot() -> Actor:
    """A fresh shot at the origin, already spinning."""
    return Actor(ActorType.SHOT, SHOT_BBOX, SHOT_LIFE, ang_vel=SHOT_ANG_VEL)


def create_rocks(
    rng: random.Random,
    num: int,
    exclusion: Vector2,
    min_radius: float,
    max_radius: float,
) -> list[Actor]:
    """Create ``num`` drifting rocks in a ring around ``exclusion``.

    Rocks may land outside the playing field; wrap them afterwards.
    """
    if not max_radius > min_radius:
        raise ValueError("max_radius must be greater than min_radius")
    rocks = []
    for _ in range(num):
        rock = create_rock()
        angle = rng.random() * 2.0 * math.pi
        distance = rng.random() * (max_radius - min_radius) + min_radius
        rock.pos = Vector2(exclusion) + vec_from_angle(angle) * distance
        rock.velocity = random_vec(rng, MAX_ROCK_VEL)
        rocks.append(rock)
    return rocks


@dataclass
class InputState:
    """Device-independent state of the player's controls."""

    xaxis: float = 0.0
    yaxis: float = 0.0
    fire: bool = False


def player_handle_input(actor: Actor, input_state: InputState, dt: float) -> None:
    """Turn and thrust the player according to the controls."""
    actor.facing += dt * PLAYER_TURN_RATE * input_state.xaxis
    if input_state.yaxis > 0.0:
        player_thrust(actor, dt)


def player_thrust(actor: Actor, dt: float) -> None:
    """Accelerate the actor along the direction it faces."""
    actor.velocity = actor.velocity + vec_from_angle(actor.facing) * PLAYER_THRUST * dt


def update_actor_position(actor: Actor, dt: float) -> None:
    """Move and spin the actor, capping its speed."""
    norm_sq = actor.velocity.length_squared()
    if norm_sq > MAX_PHYSICS_VEL**2:
        actor.velocity = actor.velocity / math.sqrt(norm_sq) * MAX_PHYSICS_VEL
    actor.pos = actor.pos + actor.velocity * dt
    actor.facing += actor.ang_vel


def wrap_actor_position(actor: Actor, sx: float, sy: float) -> None:
    """Bring an actor that left the screen back in at the opposite edge."""
    half_x = sx / 2.0
    half_y = sy / 2.0
    x, y = actor.pos.x, actor.pos.y
    if x > half_x:
        x -= sx
    elif x < -half_x:
        x += sx
    if y > half_y:
        y -= sy
    elif y < -half_y:
        y += sy
    actor.pos = Vector2(x, y)


def handle_timed_life(actor: Actor, dt: float) -> None:
    """Count down the actor's remaining life."""
    actor.life -= dt


def world_to_screen_coords(
    screen_width: float, screen_height: float, point: Vector2
) -> Vector2:
    """Map world coordinates (origin centred, y up) to screen coordinates."""
    x = point.x + screen_width / 2.0
    y = screen_height - (point.y + screen_height / 2.0)
    return Vector2(x, y)


class GameWorld:
    """Everything in play: the ship, its shots, the rocks and the score."""

    def __init__(
        self,
        screen_width: float = SCREEN_SIZE[0],
        screen_height: float = SCREEN_SIZE[1],
        rng: random.Random | None = None,
        on_shot: Callable[[], None] | None = None,
        on_hit: Callable[[], None] | None = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.player = create_player()
        self.shots: list[Actor] = []
        self.rocks = create_rocks(self.rng, 5, self.player.pos, 100.0, 250.0)
        self.level = 0
        self.score = 0
        self.input = InputState()
        self.player_shot_timeout = 0.0
        self.game_over = False
        self.on_shot = on_shot
        self.on_hit = on_hit

    def fire_player_shot(self) -> None:
        """Launch a shot from the ship and restart the refire delay."""
        self.player_shot_timeout = PLAYER_SHOT_TIME
        shot = create_shot()
        shot.pos = Vector2(self.player.pos)
        shot.facing = self.player.facing
        shot.velocity = vec_from_angle(shot.facing) * SHOT_SPEED
        self.shots.append(shot)
        if self.on_shot is not None:
            self.on_shot()

    def clear_dead_stuff(self) -> None:
        """Drop shots and rocks whose life has run out."""
        self.shots = [s for s in self.shots if s.life > 0.0]
        self.rocks = [r for r in self.rocks if r.life > 0.0]

    def handle_collisions(self) -> None:
        """Kill the ship on rock contact; destroy rock and shot on a hit."""
        for rock in self.rocks:
            if (rock.pos - self.player.pos).length() < self.player.bbox_size + rock.bbox_size:
                self.player.life = 0.0
            for shot in self.shots:
                if (shot.pos - rock.pos).length() < shot.bbox_size + rock.bbox_size:
                    shot.life = 0.0
                    rock.life = 0.0
                    self.score += 1
                    if self.on_hit is not None:
                        self.on_hit()

    def check_for_level_respawn(self) -> None:
        """Start the next level once every rock is gone."""
        if not self.rocks:
            self.level += 1
            self.rocks.extend(
                create_rocks(self.rng, self.level + 5, self.player.pos, 100.0, 250.0)
            )

    def step(self, dt: float) -> None:
        """Advance the world by ``dt`` seconds."""
        player_handle_input(self.player, self.input, dt)
        self.player_shot_timeout -= dt
        if self.input.fire and self.player_shot_timeout < 0.0:
            self.fire_player_shot()

        update_actor_position(self.player, dt)
        wrap_actor_position(self.player, self.screen_width, self.screen_height)

        for shot in self.shots:
            update_actor_position(shot, dt)
            wrap_actor_position(shot, self.screen_width, self.screen_height)
            handle_timed_life(shot, dt)

        for rock in self.rocks:
            update_actor_position(rock, dt)
            wrap_actor_position(rock, self.screen_width, self.screen_height)

        self.handle_collisions()
        self.clear_dead_stuff()
        self.check_for_level_respawn()

        if self.player.life <= 0.0:
            self.game_over = True

    def key_down(self, key: int) -> None:
        """Update the controls for a pressed key."""
        if key == pygame.K_UP:
            self.input.yaxis = 1.0
        elif key == pygame.K_LEFT:
            self.input.xaxis = -1.0
        elif key == pygame.K_RIGHT:
            self.input.xaxis = 1.0
        elif key == pygame.K_SPACE:
            self.input.fire = True

    def key_up(self, key: int) -> None:
        """Update the controls for a released key."""
        if key == pygame.K_UP:
            self.input.yaxis = 0.0
        elif key in (pygame.K_LEFT, pygame.K_RIGHT):
            self.input.xaxis = 0.0
        elif key == pygame.K_SPACE:
            self.input.fire = False

    def _draw(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        surface.fill((0, 0, 0))
        for actor in [self.player, *self.shots, *self.rocks]:
            _draw_actor(surface, actor, self.screen_width, self.screen_height)
        white = (255, 255, 255)
        surface.blit(font.render(f"Level: {self.level}", True, white), (10, 10))
        surface.blit(font.render(f"Score: {self.score}", True, white), (200, 10))


def _draw_actor(surface: pygame.Surface, actor: Actor, width: float, height: float) -> None:
    centre = world_to_screen_coords(width, height, actor.pos)
    if actor.tag is ActorType.PLAYER:
        local = [(0.0, -12.0), (8.0, 10.0), (-8.0, 10.0)]
        cos_a, sin_a = math.cos(actor.facing), math.sin(actor.facing)
        points = [
            (centre.x + x * cos_a - y * sin_a, centre.y + x * sin_a + y * cos_a)
            for x, y in local
        ]
        pygame.draw.polygon(surface, (200, 200, 255), points)
    elif actor.tag is ActorType.ROCK:
        pygame.draw.circle(surface, (160, 120, 80), centre, actor.bbox_size)
    else:
        pygame.draw.circle(surface, (255, 255, 0), centre, actor.bbox_size / 2)


def main(argv: list[str] | None = None) -> int:
    """Open a window and play until the ship is destroyed or the window closes."""
    pygame.init()
    try:
        screen = pygame.display.set_mode(SCREEN_SIZE)
        pygame.display.set_caption("Astroblasto!")
        font = pygame.font.Font(None, 24)
        clock = pygame.time.Clock()
        print(INSTRUCTIONS)
        width, height = screen.get_size()
        world = GameWorld(width, height)
        step = 1.0 / DESIRED_FPS
        residual = 0.0
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_p:
                        pygame.image.save(screen, "screenshot.png")
                    else:
                        world.key_down(event.key)
                elif event.type == pygame.KEYUP:
                    world.key_up(event.key)
            residual += clock.tick(DESIRED_FPS) / 1000.0
            while running and residual >= step:
                residual -= step
                world.step(step)
                if world.game_over:
                    print("Game over!")
                    running = False
            world._draw(screen, font)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())