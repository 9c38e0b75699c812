import unittest

from lexipuzzle.core.constants import Direction
from lexipuzzle.engine.crossword import CrosswordConfig, CrosswordGenerator, generate_crossword
from lexipuzzle.engine.grid import CanvasConfig, CrosswordCanvas


VOCAB = [
    {"word": "robot", "definition": "Programmable machine"},
    {"word": "sensor", "definition": "Detects changes"},
    {"word": "motor", "definition": "Creates motion"},
    {"word": "circuit", "definition": "Closed electrical path"},
    {"word": "battery", "definition": "Stores energy"},
    {"word": "gear", "definition": "Toothed wheel"},
    {"word": "code", "definition": "Instructions"},
    {"word": "arduino", "definition": "Microcontroller board"},
    {"word": "servo", "definition": "Precise motor"},
]


class CrosswordLayoutTests(unittest.TestCase):
    def test_single_word_centred_and_cropped(self) -> None:
        layout = generate_crossword([{"word": "ROBOT", "definition": "Machine"}], 7)
        self.assertEqual((layout.width, layout.height), (7, 3))
        self.assertEqual(len(layout.placed_words), 1)
        entry = layout.placed_words[0]
        self.assertEqual((entry.x, entry.y, entry.direction, entry.number), (1, 1, Direction.ACROSS, 1))
        self.assertEqual(entry.clue, "Machine")
        self.assertEqual("".join(cell.char for cell in layout.grid[1][1:6]), "ROBOT")
        self.assertTrue(all(cell.char is None for cell in layout.grid[0]))
        self.assertTrue(all(cell.char is None for cell in layout.grid[2]))
        self.assertEqual(layout.grid[1][1].number, 1)

    def test_intersection_and_numbering(self) -> None:
        layout = generate_crossword(
            [{"word": "box", "definition": "Container"}, {"word": "robot", "definition": "Machine"}],
            3,
        )
        self.assertEqual((layout.width, layout.height), (7, 5))
        by_word = {entry.word: entry for entry in layout.placed_words}
        robot, box = by_word["ROBOT"], by_word["BOX"]
        self.assertEqual((robot.x, robot.y, robot.direction), (1, 2, Direction.ACROSS))
        self.assertEqual((box.x, box.y, box.direction), (2, 1, Direction.DOWN))
        self.assertEqual(box.number, 1)
        self.assertEqual(robot.number, 2)
        self.assertEqual(layout.cell(2, 2).char, "O")
        self.assertEqual(layout.cell(2, 3).char, "X")

    def test_shared_start_cell_shares_number(self) -> None:
        layout = generate_crossword(["cat", "cow"], 1)
        self.assertEqual((layout.width, layout.height), (5, 5))
        numbers = {(entry.word, entry.direction): entry.number for entry in layout.placed_words}
        self.assertEqual(numbers, {("CAT", Direction.ACROSS): 1, ("COW", Direction.DOWN): 1})

    def test_word_without_shared_letters_is_dropped(self) -> None:
        layout = generate_crossword(["robot", "zzz"], 1)
        self.assertEqual([entry.word for entry in layout.placed_words], ["ROBOT"])
        self.assertEqual(layout.unplaced_words, ["zzz"])

    def test_empty_list_gives_degenerate_layout(self) -> None:
        layout = generate_crossword([], 12)
        self.assertEqual(layout.placed_words, [])
        self.assertEqual(layout.grid, [])
        self.assertEqual((layout.width, layout.height), (0, 0))

    def test_non_list_input_gives_degenerate_layout(self) -> None:
        layout = generate_crossword(None, 12)
        self.assertEqual(layout.placed_words, [])

    def test_blank_first_word_skipped(self) -> None:
        layout = generate_crossword(["!!!!!!!!", "robot"], 1)
        self.assertEqual([entry.word for entry in layout.placed_words], ["ROBOT"])
        self.assertEqual(layout.unplaced_words, ["!!!!!!!!"])

    def test_too_long_for_canvas_is_dropped(self) -> None:
        layout = generate_crossword(["a" * 41], 1)
        self.assertEqual(layout.placed_words, [])
        self.assertEqual(layout.unplaced_words, ["a" * 41])


class CrosswordPropertyTests(unittest.TestCase):
    def test_deterministic(self) -> None:
        first = generate_crossword(VOCAB, 99)
        second = generate_crossword(VOCAB, 99)
        self.assertEqual(first.placed_words, second.placed_words)
        self.assertEqual(first.grid, second.grid)

    def test_letters_match_and_padding(self) -> None:
        for seed in range(1, 40):
            layout = generate_crossword(VOCAB, seed)
            for entry in layout.placed_words:
                letters = "".join(layout.cell(x, y).char for x, y in entry.cells)
                self.assertEqual(letters, entry.word)
            self.assertTrue(all(cell.is_empty() for cell in layout.grid[0]))
            self.assertTrue(all(cell.is_empty() for cell in layout.grid[-1]))
            self.assertTrue(all(row[0].is_empty() and row[-1].is_empty() for row in layout.grid))
            for y, row in enumerate(layout.grid):
                for x, cell in enumerate(row):
                    self.assertEqual((cell.x, cell.y), (x, y))

    def test_numbers_follow_reading_order(self) -> None:
        for seed in range(1, 40):
            layout = generate_crossword(VOCAB, seed)
            starts = sorted({(entry.y, entry.x, entry.number) for entry in layout.placed_words})
            numbers = [number for _, _, number in starts]
            self.assertEqual(numbers, list(range(1, len(numbers) + 1)))

    def test_words_never_run_into_each_other(self) -> None:
        for seed in range(1, 40):
            layout = generate_crossword(VOCAB, seed)
            for entry in layout.placed_words:
                dx, dy = (1, 0) if entry.direction == Direction.ACROSS else (0, 1)
                before = layout.cell(entry.x - dx, entry.y - dy)
                end_x, end_y = entry.cells[-1]
                after = layout.cell(end_x + dx, end_y + dy)
                self.assertTrue(before.is_empty())
                self.assertTrue(after.is_empty())

    def test_every_word_accounted_for(self) -> None:
        layout = generate_crossword(VOCAB, 5)
        self.assertEqual(len(layout.placed_words) + len(layout.unplaced_words), len(VOCAB))

    def test_debug_log_dumps_working_canvas(self) -> None:
        with self.assertLogs("lexipuzzle.engine.crossword", level="DEBUG") as logs:
            generate_crossword(["robot"], 1)
        dump = next(line for line in logs.output if "Working canvas" in line)
        self.assertIn("ROBOT", dump)

    def test_smaller_canvas_config(self) -> None:
        generator = CrosswordGenerator(CrosswordConfig(seed=1, canvas_size=4))
        layout = generator.generate(["robot"])
        self.assertEqual(layout.placed_words, [])


class CanvasTests(unittest.TestCase):
    def test_reads_outside_canvas_are_empty(self) -> None:
        canvas = CrosswordCanvas(CanvasConfig(size=5))
        self.assertIsNone(canvas.letter(-1, 0))
        self.assertIsNone(canvas.letter(0, 5))

    def test_can_place_rejects_touching_words(self) -> None:
        canvas = CrosswordCanvas(CanvasConfig(size=10))
        canvas.place_word("CAT", 2, 2, Direction.ACROSS)
        # parallel word directly underneath
        self.assertFalse(canvas.can_place("DOG", 2, 3, Direction.ACROSS))
        # extending the end of CAT
        self.assertFalse(canvas.can_place("SUN", 5, 2, Direction.ACROSS))
        # conflicting letter
        self.assertFalse(canvas.can_place("BOX", 3, 1, Direction.DOWN))
        # crossing through the A
        self.assertTrue(canvas.can_place("BAG", 3, 1, Direction.DOWN))

    def test_to_text_marks_empty_cells(self) -> None:
        canvas = CrosswordCanvas(CanvasConfig(size=3))
        canvas.place_word("AB", 0, 1, Direction.ACROSS)
        self.assertEqual(canvas.to_text(), "...\nAB.\n...")

    def test_filled_cells_row_major(self) -> None:
        canvas = CrosswordCanvas(CanvasConfig(size=6))
        canvas.place_word("AB", 4, 0, Direction.DOWN)
        canvas.place_word("CD", 0, 1, Direction.ACROSS)
        self.assertEqual(canvas.filled_cells(), [(4, 0), (0, 1), (1, 1), (4, 1)])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
