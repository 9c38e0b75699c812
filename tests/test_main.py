import contextlib
import io
import json
import tempfile
import unittest
from pathlib import Path

from main import main


class MainTests(unittest.TestCase):
    def test_json_output(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            output = Path(tmpdir) / "out.json"
            code = main(
                [
                    "--words", "box: Container", "robot: Machine",
                    "--type", "crossword",
                    "--seed", "3",
                    "--format", "json",
                    "--output", str(output),
                    "--state-dir", tmpdir,
                ]
            )
            self.assertEqual(code, 0)
            doc = json.loads(output.read_text(encoding="utf-8"))
        self.assertEqual(doc["seed"], 3)
        self.assertEqual(doc["puzzle_type"], "crossword")
        payload = doc["activities"][0]["payload"]
        self.assertEqual((payload["width"], payload["height"]), (7, 5))

    def test_saved_state_is_reused(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            first = Path(tmpdir) / "first.txt"
            second = Path(tmpdir) / "second.txt"
            main(
                [
                    "--words", "gear: Toothed wheel", "motor: Creates motion",
                    "--type", "wordsearch",
                    "--seed", "11",
                    "--output", str(first),
                    "--state-dir", tmpdir,
                    "--save-state",
                ]
            )
            code = main(["--load-state", "--state-dir", tmpdir, "--output", str(second)])
            self.assertEqual(code, 0)
            self.assertEqual(first.read_text(encoding="utf-8"), second.read_text(encoding="utf-8"))

    def test_words_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            words = Path(tmpdir) / "words.txt"
            words.write_text("robot: Machine\n", encoding="utf-8")
            output = Path(tmpdir) / "out.txt"
            code = main(["--words-file", str(words), "--type", "flashcards", "--output", str(output)])
            self.assertEqual(code, 0)
            self.assertIn("Machine", output.read_text(encoding="utf-8"))

    def test_requires_words_or_state(self) -> None:
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                main([])

    def test_corrupt_saved_settings_return_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            snapshot = Path(tmpdir) / "current.json"
            snapshot.write_text(
                json.dumps({"seed": 1, "vocab_list": [{"word": "gear"}], "settings": {"grid_size": "abc"}}),
                encoding="utf-8",
            )
            with contextlib.redirect_stderr(io.StringIO()):
                code = main(["--load-state", "--state-dir", tmpdir])
        self.assertEqual(code, 1)

    def test_unparseable_words_return_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with contextlib.redirect_stderr(io.StringIO()):
                code = main(["--words", "nothing useful", "--state-dir", tmpdir])
        self.assertEqual(code, 1)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
