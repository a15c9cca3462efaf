"""Interactive window that draws a fractal and reacts to keys and the scroll wheel."""

from __future__ import annotations

import os
import sys

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .printf import printf  # noqa: E402
from .view import Key, UsageError, View, parse_args  # noqa: E402

_KEYS = {
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_SPACE: Key.SPACE,
}


def _frame_bytes(view: View) -> bytes:
    """Render the view as tightly packed RGBA bytes, row by row."""
    return b"".join(
        color.to_bytes(4, "big") for row in view.render() for color in row
    )


def _draw(screen: pygame.Surface, view: View) -> None:
    image = pygame.image.frombuffer(
        _frame_bytes(view), (view.width, view.height), "RGBA"
    )
    screen.blit(image, (0, 0))
    pygame.display.flip()


def _run(view: View) -> None:
    pygame.init()
    try:
        screen = pygame.display.set_mode((view.width, view.height))
        pygame.display.set_caption("fract-ol")
        _draw(screen, view)
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return
            if event.type == pygame.KEYDOWN:
                key = _KEYS.get(event.key)
                if key is None:
                    _draw(screen, view)
                    continue
                if not view.handle_key(key):
                    return
                _draw(screen, view)
            elif event.type == pygame.MOUSEWHEEL:
                px, py = pygame.mouse.get_pos()
                view.scroll(px, py, event.y)
                _draw(screen, view)
    finally:
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Start the viewer; return the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        view = parse_args(args)
    except UsageError as error:
        printf("%s", str(error))
        return 1
    _run(view)
    return 0


if __name__ == "__main__":
    sys.exit(main())