import contextlib
import io
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from galbubble.bubble import BubbleRenderError
from galbubble.cli import build_parser, main, request_from_args
from galbubble.config import BubbleSettings


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        self.settings = BubbleSettings(character_image_base_path=self.root)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_writes_png(self) -> None:
        output = self.root / "out" / "bubble.png"
        code = main(
            ["你好", "--personality", "ojou", "--emotion", "sad", "--output", str(output)],
            settings=self.settings,
        )
        self.assertEqual(code, 0)
        self.assertTrue(output.read_bytes().startswith(b"\x89PNG"))

    def test_render_failure_returns_one(self) -> None:
        output = self.root / "bubble.png"
        with mock.patch(
            "galbubble.cli.ChatBubbleGenerator.generate_bubble_image",
            side_effect=BubbleRenderError("boom"),
        ):
            code = main(["hi", "-o", str(output)], settings=self.settings)
        self.assertEqual(code, 1)
        self.assertFalse(output.exists())

    def test_rejects_unknown_personality(self) -> None:
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                build_parser().parse_args(["hi", "--personality", "robot"])
        self.assertEqual(ctx.exception.code, 2)

    def test_flags_fall_back_to_settings(self) -> None:
        settings = BubbleSettings(show_favorability=True, show_inner_thought=False)
        args = build_parser().parse_args(["hi", "--favorability", "30", "--thought", "hmm"])
        request = request_from_args(args, settings)
        self.assertTrue(request.show_favorability)
        self.assertFalse(request.show_inner_thought)
        self.assertEqual(request.favorability, 30)
        self.assertEqual(request.inner_thought, "hmm")

    def test_flags_override_settings(self) -> None:
        settings = BubbleSettings(show_favorability=True, show_inner_thought=False)
        args = build_parser().parse_args(["hi", "--no-show-favorability", "--show-thought", "--delta", "-3"])
        request = request_from_args(args, settings)
        self.assertFalse(request.show_favorability)
        self.assertTrue(request.show_inner_thought)
        self.assertEqual(request.favorability_delta, -3)


if __name__ == "__main__":
    unittest.main()
