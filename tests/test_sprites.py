import tempfile
import unittest
from pathlib import Path

from PIL import Image

from galbubble.sprites import (
    KEY_THRESHOLD,
    key_sprite,
    key_white_background,
    resolve_sprite_path,
    scale_factor,
)


class KeyWhiteBackgroundTests(unittest.TestCase):
    def test_only_pixels_above_threshold_on_every_channel_are_cleared(self) -> None:
        pixels = [
            ((250, 250, 250, 255), 0),
            ((246, 246, 246, 200), 0),
            ((255, 255, 255, 10), 0),
            ((245, 250, 250, 255), 255),
            ((250, 250, 245, 77), 77),
            ((250, 240, 250, 180), 180),
            ((10, 20, 30, 128), 128),
        ]
        source = Image.new("RGBA", (len(pixels), 1))
        for index, (color, _) in enumerate(pixels):
            source.putpixel((index, 0), color)

        keyed = key_white_background(source)

        self.assertEqual(keyed.mode, "RGBA")
        for index, (color, expected_alpha) in enumerate(pixels):
            self.assertEqual(keyed.getpixel((index, 0))[3], expected_alpha, color)

    def test_rgb_source_is_keyed_with_opaque_foreground(self) -> None:
        source = Image.new("RGB", (2, 1), (255, 255, 255))
        source.putpixel((1, 0), (200, 30, 30))
        keyed = key_white_background(source)
        self.assertEqual(keyed.getpixel((0, 0))[3], 0)
        self.assertEqual(keyed.getpixel((1, 0)), (200, 30, 30, 255))

    def test_threshold_constant(self) -> None:
        self.assertEqual(KEY_THRESHOLD, 245)


class KeySpriteTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _save(self, name: str, size, color=(255, 255, 255, 255)) -> Path:
        path = self.root / name
        Image.new("RGBA", size, color).save(path)
        return path

    def test_keeps_aspect_ratio(self) -> None:
        path = self._save("wide.png", (40, 20), (30, 30, 30, 255))
        sprite = key_sprite(path, 100, 300)
        self.assertIsNotNone(sprite)
        self.assertAlmostEqual(sprite.width / sprite.height, 2.0)
        self.assertEqual(sprite.width, 100)
        self.assertEqual(sprite.image.size, (100, 50))

    def test_small_sprites_are_upscaled(self) -> None:
        path = self._save("small.png", (10, 20), (30, 30, 30, 255))
        sprite = key_sprite(path, 100, 100)
        self.assertEqual((sprite.width, sprite.height), (50, 100))
        self.assertEqual(sprite.image.size, (50, 100))

    def test_sprite_fitting_bounds_is_not_resized(self) -> None:
        path = self._save("exact.png", (60, 30), (30, 30, 30, 255))
        sprite = key_sprite(path, 60, 60)
        self.assertEqual(sprite.image.size, (60, 30))

    def test_missing_file_returns_none_with_warning(self) -> None:
        with self.assertLogs("galbubble.sprites", level="WARNING"):
            self.assertIsNone(key_sprite(self.root / "nope.png", 100, 100))

    def test_corrupt_file_returns_none_with_warning(self) -> None:
        path = self.root / "broken.png"
        path.write_bytes(b"not really a png")
        with self.assertLogs("galbubble.sprites", level="WARNING"):
            self.assertIsNone(key_sprite(path, 100, 100))

    def test_scale_factor_uses_tighter_bound(self) -> None:
        self.assertAlmostEqual(scale_factor(100, 200, 600, 570), 2.85)
        self.assertAlmostEqual(scale_factor(1000, 100, 600, 570), 0.6)


class ResolveSpritePathTests(unittest.TestCase):
    def test_personality_maps_to_folder(self) -> None:
        base = Path("/assets")
        self.assertEqual(resolve_sprite_path(base, "loli", "happy"), base / "loli" / "happy.png")
        self.assertEqual(resolve_sprite_path(base, "ojou", "sad"), base / "gril" / "sad.png")
        self.assertEqual(resolve_sprite_path(base, "milf", "angry"), base / "woman" / "angry.png")
        self.assertEqual(resolve_sprite_path(base, "danshi", "think"), base / "mft" / "think.png")

    def test_accepts_string_base(self) -> None:
        self.assertEqual(resolve_sprite_path("chars", "loli", "sad"), Path("chars") / "loli" / "sad.png")

    def test_unknown_mapping_raises(self) -> None:
        with self.assertRaises(ValueError):
            resolve_sprite_path("chars", "robot", "happy")
        with self.assertRaises(ValueError):
            resolve_sprite_path("chars", "loli", "bored")


if __name__ == "__main__":
    unittest.main()
