"""Window setup, keyboard handling and the main loop."""

from __future__ import annotations

import argparse
import os

WIDTH = 800
HEIGHT = 800
TITLE = "meshview"

# Key symbol of the Escape key as pyglet reports it.
KEY_ESCAPE = 0xFF1B


def handle_key(window, symbol: int, modifiers: int) -> bool:
    """Ask the window to close when Escape is pressed."""
    if symbol == KEY_ESCAPE:
        window.has_exit = True
        return True
    return False


class Application:
    """Opens an OpenGL 3.3 core window and renders the mesh until it closes."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        import pyglet
        from pyglet import gl

        from meshview.renderer import Renderer

        config = gl.Config(
            major_version=3,
            minor_version=3,
            forward_compatible=True,
            double_buffer=True,
            depth_size=24,
        )
        self.window = pyglet.window.Window(width, height, TITLE, config=config)
        self.window.switch_to()
        gl.glViewport(0, 0, width, height)
        self.window.push_handlers(
            on_key_press=lambda symbol, modifiers: handle_key(self.window, symbol, modifiers)
        )
        self.renderer = Renderer(self.window)

    def run(self) -> None:
        """Render frames until the window is asked to close."""
        while not self.window.has_exit:
            self.renderer.render_cycle()

    def close(self) -> None:
        """Free the renderer and close the window."""
        self.renderer.close()
        self.window.close()

    def __enter__(self) -> Application:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {text}")
    return value


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="meshview", description="Show a spinning OBJ mesh.")
    parser.add_argument("--width", type=_positive_int, default=WIDTH)
    parser.add_argument("--height", type=_positive_int, default=HEIGHT)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Print the working directory, then open the viewer."""
    args = _parse_args(argv)
    print(os.getcwd())
    with Application(args.width, args.height) as application:
        application.run()
    return 0