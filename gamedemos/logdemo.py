"""Console and file logging for a running game, fed through a message queue."""

from __future__ import annotations

import argparse
import logging
import os
import queue
import sys
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

LOG_FORMAT = "[%(asctime)s][%(levelname)-5s][%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
QUIET_LOGGERS = {"gfx_device_gl": logging.WARNING}
DESIRED_FPS = 60
BACKGROUND_COLOR = (25, 51, 76)

log = logging.getLogger("logdemo")


class _ChannelHandler(logging.Handler):
    """Puts each formatted log line, newline included, on a queue."""

    def __init__(self, channel: queue.Queue[str]) -> None:
        super().__init__()
        self.channel = channel

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.channel.put(self.format(record) + "\n")
        except Exception:
            self.handleError(record)


def setup_logging(channel: queue.Queue[str]) -> list[logging.Handler]:
    """Log everything to stdout and to ``channel``; return the handlers installed."""
    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    handlers: list[logging.Handler] = [
        logging.StreamHandler(sys.stdout),
        _ChannelHandler(channel),
    ]
    root = logging.getLogger()
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(logging.DEBUG)
    for name, level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(level)
    return handlers


class FileLogger:
    """Owns a log file and writes queued messages to it whenever updated."""

    def __init__(self, path: str | os.PathLike[str], receiver: queue.Queue[str]) -> None:
        self.path = Path(path)
        self.receiver = receiver
        self._file = self.path.open("w", encoding="utf-8")
        log.debug("Created log file %r in %r", self.path.name, str(self.path.parent))

    def update(self) -> int:
        """Write every pending message to the file; return how many were written."""
        written = 0
        while True:
            try:
                message = self.receiver.get_nowait()
            except queue.Empty:
                break
            self._file.write(message)
            written += 1
        self._file.flush()
        return written

    def close(self) -> None:
        """Close the file."""
        self._file.close()

    @property
    def closed(self) -> bool:
        """Whether the file has been closed."""
        return self._file.closed

    def __enter__(self) -> FileLogger:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _run(screen: pygame.Surface, file_logger: FileLogger) -> None:
    clock = pygame.time.Clock()
    held: set[int] = set()
    step = 1.0 / DESIRED_FPS
    residual = 0.0
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                repeated = event.key in held
                held.add(event.key)
                log.info(
                    "Key down event: %s, modifiers: %s, repeat: %s",
                    pygame.key.name(event.key),
                    event.mod,
                    str(repeated).lower(),
                )
                if event.key == pygame.K_ESCAPE:
                    running = False
            elif event.type == pygame.KEYUP:
                held.discard(event.key)
        residual += clock.tick(DESIRED_FPS) / 1000.0
        while residual >= step:
            residual -= step
            file_logger.update()
        screen.fill(BACKGROUND_COLOR)
        pygame.display.flip()


def main(argv: list[str] | None = None) -> int:
    """Open a window and log key presses to the console and a file."""
    parser = argparse.ArgumentParser(description="Logging demo.")
    parser.add_argument("--log-file", default="out.log", help="where to write the log")
    args = parser.parse_args(argv)

    channel: queue.Queue[str] = queue.Queue()
    log.debug("I will not be logged!")
    handlers = setup_logging(channel)
    log.debug("I am logged!")
    log.info("I am too!")
    log.debug("Creating game window.")

    pygame.init()
    try:
        screen = pygame.display.set_mode((640, 480), pygame.RESIZABLE)
        pygame.display.set_caption("Pretty console output!")
        log.debug("Window created, creating a file logger.")
        with FileLogger(args.log_file, channel) as file_logger:
            log.debug("File logger created, starting loop.")
            _run(screen, file_logger)
            file_logger.update()
    finally:
        pygame.quit()
        log.debug("File logger closed; later lines reach only the console.")
        root = logging.getLogger()
        for handler in handlers:
            root.removeHandler(handler)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())