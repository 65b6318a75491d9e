import unittest

from reportlab.lib.pagesizes import LETTER

from label_canvas import LabelCanvas
from label_errors import ConfigurationError
from label_templates import get_type


class LabelCanvasTests(unittest.TestCase):
    def setUp(self) -> None:
        self.canvas = LabelCanvas(
            LETTER,
            top_margin=36,
            left_margin=18,
            bottom_margin=36,
            right_margin=18,
            document={"title": "Test sheet", "author": "tests"},
        )

    def test_printable_area(self) -> None:
        self.assertEqual(self.canvas.printable_width, 612 - 36)
        self.assertEqual(self.canvas.printable_height, 792 - 72)
        self.assertEqual(self.canvas.bounds.top_left, (0.0, 720.0))

    def test_grid_survives_page_breaks(self) -> None:
        self.canvas.define_grid(columns=2, rows=5, column_gutter=12, row_gutter=0)
        first = self.canvas.grid_cell(4, 1)
        self.canvas.start_new_page()
        self.canvas.define_grid(columns=2, rows=5, column_gutter=12, row_gutter=0)
        second = self.canvas.grid_cell(4, 1)
        self.assertEqual(first, second)
        self.assertEqual(self.canvas.page_number, 2)
        self.assertAlmostEqual(first.width, (576 - 12) / 2)

    def test_grid_required(self) -> None:
        with self.assertRaises(RuntimeError):
            self.canvas.grid_cell(0, 0)

    def test_height_of_counts_lines(self) -> None:
        one = self.canvas.height_of("Fake", 10)
        self.assertGreater(one, 0)
        self.assertAlmostEqual(self.canvas.height_of("Fake\nFake\nFake\n", 10), 3 * one)
        self.assertEqual(self.canvas.height_of("", 10), 0)

    def test_width_scales_with_size(self) -> None:
        small = self.canvas.width_of("Label", 10)
        self.assertAlmostEqual(self.canvas.width_of("Label", 20), 2 * small)

    def test_bounding_box_restored_after_error(self) -> None:
        with self.assertRaises(ValueError):
            with self.canvas.rotate(270, origin=(10, 10)):
                with self.canvas.translate(0, 5):
                    with self.canvas.bounding_box((10, 10), 50, 20) as box:
                        self.assertEqual(self.canvas.bounds, box)
                        raise ValueError("callback failed")
        self.assertEqual(self.canvas.bounds.width, self.canvas.printable_width)

    def test_no_page_break_inside_box(self) -> None:
        with self.canvas.bounding_box((0, 100), 50, 50):
            with self.assertRaises(RuntimeError):
                self.canvas.start_new_page()

    def test_text_moves_down(self) -> None:
        with self.canvas.bounding_box((0, 100), 60, 100):
            bottom = self.canvas.text("a few words that wrap\nsecond", font_size=10)
        self.assertLess(bottom, 100 - 2 * self.canvas.line_height(10))

    def test_set_font(self) -> None:
        self.assertEqual(self.canvas.set_font("Courier"), "Courier")
        with self.assertRaises(ConfigurationError):
            self.canvas.set_font("NoSuchFontAnywhere")
        with self.assertRaises(ConfigurationError):
            self.canvas.set_font("/nonexistent/font.ttf")

    def test_render_once(self) -> None:
        self.canvas.stroke_bounds()
        pdf = self.canvas.render()
        self.assertTrue(pdf.startswith(b"%PDF"))
        self.assertEqual(self.canvas.render(), pdf)

    def test_for_label_type(self) -> None:
        label_type = get_type("Avery7160")
        canvas_obj = LabelCanvas.for_label_type(label_type)
        self.assertEqual(canvas_obj.page_size, label_type.page_size)
        self.assertAlmostEqual(canvas_obj.printable_width, label_type.printable_width)


if __name__ == "__main__":
    unittest.main()
