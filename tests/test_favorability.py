import unittest

from PIL import Image, ImageFont

from galbubble.favorability import clamp_favorability, draw_bar, fill_span, format_delta
from galbubble.styles import DELTA_NEGATIVE_COLOR, DELTA_POSITIVE_COLOR, get_style

BAR_X, BAR_Y, BAR_W, BAR_H = 20, 20, 200, 24
MIDPOINT = BAR_X + BAR_W // 2
ROW = BAR_Y + BAR_H // 2


def _close(pixel, color, tolerance: int = 2) -> bool:
    return all(abs(a - b) <= tolerance for a, b in zip(pixel[:3], color[:3]))


class GaugeMathTests(unittest.TestCase):
    def test_clamp(self) -> None:
        self.assertEqual(clamp_favorability(150), 100)
        self.assertEqual(clamp_favorability(-200), -100)
        self.assertEqual(clamp_favorability(42), 42)

    def test_fill_width_is_proportional_to_half_track(self) -> None:
        self.assertEqual(fill_span(0, 200, 50), (100, 150))
        self.assertEqual(fill_span(0, 200, -30), (70, 100))
        self.assertEqual(fill_span(0, 200, 100), (100, 200))
        self.assertEqual(fill_span(0, 200, -100), (0, 100))

    def test_zero_has_no_fill(self) -> None:
        self.assertIsNone(fill_span(0, 200, 0))

    def test_fill_never_crosses_midpoint(self) -> None:
        for value in range(-100, 101):
            span = fill_span(BAR_X, BAR_W, value)
            if span is None:
                continue
            left, right = span
            if value > 0:
                self.assertEqual(left, MIDPOINT)
                self.assertLessEqual(right, BAR_X + BAR_W)
            else:
                self.assertEqual(right, MIDPOINT)
                self.assertGreaterEqual(left, BAR_X)

    def test_out_of_range_values_match_extremes(self) -> None:
        self.assertEqual(fill_span(0, 200, 150), fill_span(0, 200, 100))
        self.assertEqual(fill_span(0, 200, -200), fill_span(0, 200, -100))

    def test_format_delta(self) -> None:
        self.assertEqual(format_delta(5), ("+5", DELTA_POSITIVE_COLOR))
        self.assertEqual(format_delta(-2), ("-2", DELTA_NEGATIVE_COLOR))
        self.assertIsNone(format_delta(0))
        self.assertIsNone(format_delta(None))


class DrawBarTests(unittest.TestCase):
    def setUp(self) -> None:
        self.style = get_style("loli")
        self.label_font = ImageFont.load_default(size=16)
        self.delta_font = ImageFont.load_default(size=20)

    def _render(self, value: int, delta=None) -> Image.Image:
        canvas = Image.new("RGBA", (260, 60), (255, 255, 255, 255))
        draw_bar(
            canvas,
            BAR_X,
            BAR_Y,
            BAR_W,
            BAR_H,
            value,
            delta,
            self.style,
            label_font=self.label_font,
            delta_font=self.delta_font,
        )
        return canvas

    def test_positive_fill_grows_right_of_midpoint(self) -> None:
        canvas = self._render(50)
        filled = canvas.getpixel((MIDPOINT + 45, ROW))
        self.assertEqual(filled[0], 255)
        self.assertLess(filled[1], 120)
        # Past the fill only the translucent track shows.
        self.assertTrue(_close(canvas.getpixel((MIDPOINT + 60, ROW)), (127, 127, 127)))
        self.assertTrue(_close(canvas.getpixel((MIDPOINT - 60, ROW)), (127, 127, 127)))

    def test_negative_fill_grows_left_of_midpoint(self) -> None:
        canvas = self._render(-60)
        filled = canvas.getpixel((MIDPOINT - 50, ROW))
        self.assertGreater(filled[0], 130)
        self.assertLess(filled[1], 10)
        self.assertLess(filled[2], 10)
        self.assertTrue(_close(canvas.getpixel((MIDPOINT - 70, ROW)), (127, 127, 127)))
        self.assertTrue(_close(canvas.getpixel((MIDPOINT + 50, ROW)), (127, 127, 127)))

    def test_divider_sits_on_top_of_fill(self) -> None:
        canvas = self._render(50)
        for x in (MIDPOINT - 1, MIDPOINT):
            pixel = canvas.getpixel((x, BAR_Y))
            self.assertGreater(min(pixel[:3]), 200)

    def test_out_of_range_renders_like_extremes(self) -> None:
        self.assertEqual(self._render(150).tobytes(), self._render(100).tobytes())
        self.assertEqual(self._render(-200).tobytes(), self._render(-100).tobytes())

    def test_delta_is_drawn_above_right_in_its_colour(self) -> None:
        plain = self._render(10)
        annotated = self._render(10, delta=5)
        self.assertNotEqual(plain.tobytes(), annotated.tobytes())
        region = [
            annotated.getpixel((x, y))
            for x in range(BAR_X + BAR_W - 40, BAR_X + BAR_W + 6)
            for y in range(0, BAR_Y + 10)
        ]
        # Pink ink over white: red stays saturated while green drops.
        self.assertEqual(DELTA_POSITIVE_COLOR[:3], (255, 105, 180))
        self.assertTrue(any(p[0] > 240 and p[1] < 200 and p[2] > p[1] for p in region))

    def test_zero_delta_draws_nothing(self) -> None:
        self.assertEqual(self._render(10, delta=0).tobytes(), self._render(10).tobytes())


if __name__ == "__main__":
    unittest.main()
