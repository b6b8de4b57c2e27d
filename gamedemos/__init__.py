"""Small playable game demos built on pygame: snake, a shooter, animation, a benchmark and more."""

__version__ = "0.1.0"

__all__ = ["animation", "astroblasto", "bunnymark", "logdemo", "simple", "snake"]