import io
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "generator"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from pixie_generator import Canvas, Color, Seed
from pixie_renderer.terminal import ANSI_CODES, TerminalRenderer


FIXTURE = ROOT / "tests" / "testdata" / "terminal_render.ascii"


class TerminalRendererTests(unittest.TestCase):
    def test_hello_matches_fixture(self):
        canvas = Canvas.generate(5, Seed.from_word("hello"))
        buf = io.StringIO()
        TerminalRenderer().render(canvas, buf)
        self.assertEqual(buf.getvalue(), FIXTURE.read_text(encoding="utf-8"))

    def test_rendering_twice_is_identical(self):
        canvas = Canvas.from_word("pixie", 7)
        renderer = TerminalRenderer()
        self.assertEqual(renderer.render_text(canvas), renderer.render_text(canvas))

    def test_borders_and_rows(self):
        canvas = Canvas.from_word("pixie", 4)
        lines = TerminalRenderer().render_text(canvas).splitlines()
        code = ANSI_CODES[canvas.color]
        prefix = f"\x1b[38;5;{code};48;5;15m"

        self.assertEqual(len(lines), 6)
        self.assertEqual(lines[0], f"{prefix}┌─{'──' * 4}─┐\x1b[0m")
        self.assertEqual(lines[-1], f"{prefix}└─{'──' * 4}─┘\x1b[0m")
        for y, row in enumerate(canvas.rows(), start=1):
            body = "".join("██" if cell else "  " for cell in row)
            self.assertEqual(lines[y], f"{prefix}│ {body} │\x1b[0m")

    def test_empty_canvas(self):
        canvas = Canvas.from_word("hello", 0)
        prefix = "\x1b[38;5;160;48;5;15m"
        self.assertEqual(
            TerminalRenderer().render_text(canvas),
            f"{prefix}┌──┐\x1b[0m\n{prefix}│  │\x1b[0m\n{prefix}└──┘\x1b[0m\n",
        )

    def test_palette(self):
        self.assertEqual(
            dict(ANSI_CODES),
            {
                Color.RED: 160,
                Color.GREEN: 40,
                Color.BLUE: 33,
                Color.PURPLE: 140,
                Color.PINK: 199,
                Color.BROWN: 130,
                Color.YELLOW: 226,
                Color.BLACK: 232,
            },
        )


if __name__ == "__main__":
    unittest.main()
