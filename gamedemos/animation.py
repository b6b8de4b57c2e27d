"""Tweened and frame-by-frame animation driven by keyframes and easing curves."""

from __future__ import annotations

import argparse
import math
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, NamedTuple

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

FRAME_ROWS = 19
FRAME_COLUMNS = 14

BALL_START = (120.0, 120.0)
BALL_END = (120.0, 420.0)
BALL_RADIUS = 60

PLAYER_DEST = (470.0, 460.0)
PLAYER_SCALE = 3.0

DURATION_STEP = 0.2
MIN_DURATION = 0.1

BACKGROUND_COLOR = (25, 51, 76)
WHITE = (255, 255, 255)


class _Easing(ABC):
    """An easing curve mapping progress in [0, 1] to eased progress."""

    @abstractmethod
    def y(self, x: float) -> float:
        """Eased progress for raw progress ``x``."""


class _Linear(_Easing):
    def y(self, x: float) -> float:
        return x

    def __repr__(self) -> str:
        return "Linear"


@dataclass(frozen=True)
class _CubicBezier(_Easing):
    """A cubic Bézier from (0, 0) to (1, 1) with two control points."""

    x1: float
    y1: float
    x2: float
    y2: float

    @staticmethod
    def _coord(s: float, p1: float, p2: float) -> float:
        inv = 1.0 - s
        return 3.0 * inv * inv * s * p1 + 3.0 * inv * s * s * p2 + s * s * s

    def y(self, x: float) -> float:
        if x <= 0.0:
            return 0.0
        if x >= 1.0:
            return 1.0
        lo, hi = 0.0, 1.0
        for _ in range(60):
            mid = (lo + hi) / 2.0
            if self._coord(mid, self.x1, self.x2) < x:
                lo = mid
            else:
                hi = mid
        return self._coord((lo + hi) / 2.0, self.y1, self.y2)


class _EaseInCubic(_Easing):
    def y(self, x: float) -> float:
        return x**3


class _EaseOutCubic(_Easing):
    def y(self, x: float) -> float:
        return 1.0 - (1.0 - x) ** 3


class _EaseInOutCubic(_Easing):
    def y(self, x: float) -> float:
        if x < 0.5:
            return 4.0 * x**3
        return 1.0 - (-2.0 * x + 2.0) ** 3 / 2.0


LINEAR = _Linear()
EASE_IN = _CubicBezier(0.42, 0.0, 1.0, 1.0)
EASE_OUT = _CubicBezier(0.0, 0.0, 0.58, 1.0)
EASE_IN_OUT = _CubicBezier(0.42, 0.0, 0.58, 1.0)
EASE_IN_CUBIC = _EaseInCubic()
EASE_OUT_CUBIC = _EaseOutCubic()
EASE_IN_OUT_CUBIC = _EaseInOutCubic()


class EasingKind(IntEnum):
    """The easing choices the demo cycles through."""

    LINEAR = 0
    EASE_IN = 1
    EASE_IN_OUT = 2
    EASE_OUT = 3
    EASE_IN_CUBIC = 4
    EASE_OUT_CUBIC = 5
    EASE_IN_OUT_CUBIC = 6
    BEZIER = 7
    EASE_IN_OUT_3_POINT = 8


class AnimationType(IntEnum):
    """The rows of the player sprite sheet that can be animated."""

    IDLE = 0
    RUN = 1
    FRONT_FLIP = 2
    ROLL = 3
    CRAWL = 4


_EASINGS: dict[EasingKind, _Easing] = {
    EasingKind.LINEAR: LINEAR,
    EasingKind.EASE_IN: EASE_IN,
    EasingKind.EASE_IN_OUT: EASE_IN_OUT,
    EasingKind.EASE_OUT: EASE_OUT,
    EasingKind.EASE_IN_CUBIC: EASE_IN_CUBIC,
    EasingKind.EASE_OUT_CUBIC: EASE_OUT_CUBIC,
    EasingKind.EASE_IN_OUT_CUBIC: EASE_IN_OUT_CUBIC,
    EasingKind.BEZIER: _CubicBezier(0.6, 0.04, 0.98, 0.335),
}


def easing_function(kind: EasingKind) -> _Easing:
    """The single easing curve for ``kind``.

    The three-point kind is built from several keyframes and has no single curve.
    """
    try:
        return _EASINGS[kind]
    except KeyError:
        raise ValueError(f"{kind!r} has no single easing function") from None


def _tween(start: Any, end: Any, factor: float) -> Any:
    if isinstance(start, tuple):
        values = [_tween(a, b, factor) for a, b in zip(start, end)]
        if hasattr(start, "_fields"):
            return type(start)(*values)
        return tuple(values)
    return start + (end - start) * factor


def ease(function: Any, start: Any, end: Any, t: float) -> Any:
    """Interpolate between ``start`` and ``end`` at progress ``t`` along ``function``.

    Values may be numbers, tuples of numbers or named tuples of numbers.
    """
    t = min(max(t, 0.0), 1.0)
    return _tween(start, end, function.y(t))


@dataclass(frozen=True)
class Keyframe:
    """A value reached at a point in time, eased towards the next keyframe."""

    value: Any
    time: float
    easing: Any = LINEAR


class AnimationSequence:
    """A timeline of keyframes with a play head."""

    def __init__(self, keyframes: list[Keyframe]) -> None:
        frames = sorted(keyframes, key=lambda k: k.time)
        if not frames:
            raise ValueError("an animation sequence needs at least one keyframe")
        self.keyframes = frames
        self.time = 0.0

    @property
    def duration(self) -> float:
        """Time of the last keyframe."""
        return self.keyframes[-1].time

    def _reverse(self) -> None:
        duration = self.duration
        self.keyframes = [
            Keyframe(k.value, duration - k.time, k.easing)
            for k in reversed(self.keyframes)
        ]

    def advance_and_maybe_reverse(self, dt: float) -> bool:
        """Move the play head; on passing the end, play backwards. True if it turned."""
        self.time += dt
        duration = self.duration
        if self.time <= duration:
            return False
        if duration <= 0.0:
            self.time = duration
            return True
        while self.time > duration:
            self.time -= duration
            self._reverse()
        return True

    def advance_and_maybe_wrap(self, dt: float) -> bool:
        """Move the play head; on passing the end, start over. True if it wrapped."""
        self.time += dt
        duration = self.duration
        if self.time <= duration:
            return False
        self.time = self.time % duration if duration > 0.0 else 0.0
        return True

    def now(self) -> Any:
        """The value at the play head."""
        frames = self.keyframes
        if self.time <= frames[0].time:
            return frames[0].value
        for current, following in zip(frames, frames[1:]):
            if current.time <= self.time < following.time:
                progress = (self.time - current.time) / (following.time - current.time)
                return ease(current.easing, current.value, following.value, progress)
        return frames[-1].value


class TweenableRect(NamedTuple):
    """A rectangle whose fields can be interpolated."""

    x: float
    y: float
    w: float
    h: float


@dataclass(frozen=True)
class AnimationFloor:
    """Snaps an easing curve onto one of ``frames`` discrete steps."""

    pre_easing: Any
    frames: int

    def y(self, x: float) -> float:
        return math.floor(self.pre_easing.y(x) * self.frames) / (self.frames - 1)


def ball_sequence(kind: EasingKind, duration: float) -> AnimationSequence:
    """The ball's vertical path for the chosen easing."""
    if kind is EasingKind.EASE_IN_OUT_3_POINT:
        mid = ease(LINEAR, BALL_START, BALL_END, 0.33)
        return AnimationSequence(
            [
                Keyframe(BALL_START, 0.0, EASE_IN_OUT),
                Keyframe(mid, 0.66 * duration, EASE_IN_OUT),
                Keyframe(BALL_END, duration, EASE_IN_OUT),
            ]
        )
    # The end keyframe carries an easing too, since the sequence gets reversed.
    return AnimationSequence(
        [
            Keyframe(BALL_START, 0.0, easing_function(kind)),
            Keyframe(BALL_END, duration, easing_function(kind)),
        ]
    )


_ROWS = {
    AnimationType.IDLE: 1,
    AnimationType.RUN: 3,
    AnimationType.FRONT_FLIP: 8,
    AnimationType.ROLL: 11,
    AnimationType.CRAWL: 10,
}

_FRAME_COUNTS = {
    AnimationType.IDLE: 7,
    AnimationType.RUN: 8,
    AnimationType.FRONT_FLIP: 14,
    AnimationType.ROLL: 10,
    AnimationType.CRAWL: 8,
}


def src_y(anim_type: AnimationType) -> float:
    """Normalised top of the sprite-sheet row holding the animation."""
    return _ROWS[anim_type] / FRAME_ROWS


def src_x_end(anim_type: AnimationType) -> float:
    """Normalised left edge of the animation's last frame."""
    return (frame_count(anim_type) - 1) / FRAME_COLUMNS


def frame_count(anim_type: AnimationType) -> int:
    """Number of frames in the animation."""
    return _FRAME_COUNTS[anim_type]


def player_sequence(
    kind: EasingKind, anim_type: AnimationType, duration: float
) -> AnimationSequence:
    """The sprite-sheet source rectangles of the player animation over time."""
    y = src_y(anim_type)
    w = 1.0 / FRAME_COLUMNS
    h = 1.0 / FRAME_ROWS
    start = TweenableRect(0.0, y, w, h)
    end = TweenableRect(src_x_end(anim_type), y, w, h)
    frames = frame_count(anim_type)

    if kind is EasingKind.EASE_IN_OUT_3_POINT:
        mid = ease(AnimationFloor(LINEAR, frames), start, end, 0.33)
        mid_frames = math.floor(frames * 0.33)
        return AnimationSequence(
            [
                Keyframe(start, 0.0, AnimationFloor(EASE_IN_OUT, mid_frames + 1)),
                Keyframe(mid, 0.66 * duration, AnimationFloor(EASE_IN_OUT, frames - mid_frames)),
                Keyframe(end, duration),
            ]
        )
    return AnimationSequence(
        [
            Keyframe(start, 0.0, AnimationFloor(easing_function(kind), frames)),
            Keyframe(end, duration),
        ]
    )


def new_enum_after_key(old_enum: IntEnum, dec_key: int, inc_key: int, key: int) -> IntEnum:
    """Step an enum member back or forward on a key press, wrapping at both ends."""
    enum_type = type(old_enum)
    value = int(old_enum)
    if key == dec_key:
        value -= 1
    elif key == inc_key:
        value += 1
    max_value = max(int(member) for member in enum_type)
    if value < 0:
        value = max_value
    elif value > max_value:
        value = 0
    return enum_type(value)


def _label(member: IntEnum) -> str:
    return "".join(part.capitalize() for part in member.name.split("_"))


class _Demo:
    def __init__(self) -> None:
        self.easing = EasingKind.LINEAR
        self.animation = AnimationType.IDLE
        self.duration = 1.0
        self._rebuild()

    def _rebuild(self) -> None:
        self.ball = ball_sequence(self.easing, self.duration)
        self.player = player_sequence(self.easing, self.animation, self.duration)

    def update(self, dt: float) -> None:
        self.ball.advance_and_maybe_reverse(dt)
        self.player.advance_and_maybe_wrap(dt)

    def key_down(self, key: int) -> None:
        if key in (pygame.K_UP, pygame.K_DOWN):
            self.easing = new_enum_after_key(self.easing, pygame.K_DOWN, pygame.K_UP, key)
        elif key in (pygame.K_LEFT, pygame.K_RIGHT):
            self.animation = new_enum_after_key(
                self.animation, pygame.K_LEFT, pygame.K_RIGHT, key
            )
        elif key == pygame.K_w:
            self.duration += DURATION_STEP
        elif key == pygame.K_s:
            if self.duration - DURATION_STEP > MIN_DURATION:
                self.duration -= DURATION_STEP
        self._rebuild()

    def draw(
        self,
        surface: pygame.Surface,
        font: pygame.font.Font,
        sheet: pygame.Surface | None,
    ) -> None:
        surface.fill(BACKGROUND_COLOR)
        lines = [
            (f"Easing: {_label(self.easing)}", (300, 60)),
            (f"Animation: {_label(self.animation)}", (300, 110)),
            (f"Duration: {self.duration:.2f} s", (300, 160)),
        ]
        for text, pos in lines:
            surface.blit(font.render(text, True, WHITE), pos)

        bx, by = self.ball.now()
        pygame.draw.circle(surface, WHITE, (bx, by), BALL_RADIUS)

        frame = self.player.now()
        if sheet is not None:
            sw, sh = sheet.get_size()
            src = pygame.Rect(
                round(frame.x * sw), round(frame.y * sh), round(frame.w * sw), round(frame.h * sh)
            ).clip(sheet.get_rect())
            image = pygame.transform.scale(
                sheet.subsurface(src),
                (round(src.w * PLAYER_SCALE), round(src.h * PLAYER_SCALE)),
            )
        else:
            image = pygame.Surface((32 * PLAYER_SCALE, 32 * PLAYER_SCALE))
            image.fill((200, 120, 60))
            index = round(frame.x * FRAME_COLUMNS) + 1
            label = font.render(str(index), True, WHITE)
            image.blit(label, label.get_rect(center=image.get_rect().center))
        rect = image.get_rect(midbottom=PLAYER_DEST)
        surface.blit(image, rect)


def main(argv: list[str] | None = None) -> int:
    """Open a window showing the ball and player animations."""
    parser = argparse.ArgumentParser(description="Keyframe animation demo.")
    parser.add_argument("--sheet", help="player sprite sheet image", default=None)
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((800, 600))
        pygame.display.set_caption("animation example")
        font = pygame.font.Font(None, 40)
        sheet = pygame.image.load(args.sheet).convert_alpha() if args.sheet else None
        clock = pygame.time.Clock()
        demo = _Demo()

        print("CONTROLS:")
        print("Left/Right: change animation")
        print("Up/Down: change easing function")
        print("W/S: change duration")

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    demo.key_down(event.key)
            demo.update(clock.tick(60) / 1000.0)
            demo.draw(screen, font, sheet)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())