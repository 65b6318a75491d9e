import unittest
from dataclasses import replace
from pathlib import Path
from tempfile import TemporaryDirectory

from reportlab.lib.pagesizes import A4, LETTER

from label_errors import ConfigurationError
from label_templates import (
    BUILTIN_TYPES,
    TypeRegistry,
    default_registry,
    get_type,
    list_types,
    resolve_paper_size,
)


class PaperSizeTests(unittest.TestCase):
    def test_named_sizes(self) -> None:
        self.assertEqual(resolve_paper_size("LETTER"), LETTER)
        self.assertEqual(resolve_paper_size("a4"), A4)

    def test_explicit_pair(self) -> None:
        self.assertEqual(resolve_paper_size([100, 200]), (100.0, 200.0))

    def test_invalid(self) -> None:
        with self.assertRaises(ConfigurationError):
            resolve_paper_size("POSTCARD9000")
        with self.assertRaises(ConfigurationError):
            resolve_paper_size([0, 10])


class TypeRegistryTests(unittest.TestCase):
    def test_builtin_lookup(self) -> None:
        label_type = get_type("Avery5160")
        self.assertEqual(label_type.page_size, LETTER)
        self.assertEqual((label_type.rows, label_type.columns), (10, 3))
        self.assertIn("Avery5163", list_types())

    def test_avery5260_matches_5160(self) -> None:
        self.assertEqual(get_type("Avery5260"), replace(get_type("Avery5160"), name="Avery5260"))

    def test_builtin_types_are_valid(self) -> None:
        registry = default_registry()
        for name in BUILTIN_TYPES:
            label_type = registry[name]
            self.assertGreater(label_type.printable_width, 0, name)
            self.assertGreater(label_type.printable_height, 0, name)

    def test_defaults_applied(self) -> None:
        registry = TypeRegistry({"Bare": {"columns": 2, "rows": 4}})
        label_type = registry["Bare"]
        self.assertEqual(label_type.page_size, A4)
        self.assertEqual(label_type.top_margin, 36)
        self.assertEqual(label_type.left_margin, 36)
        self.assertFalse(label_type.vertical_text)

    def test_unknown_type(self) -> None:
        with self.assertRaises(ConfigurationError) as ctx:
            default_registry()["Nope"]
        self.assertIn("Nope", str(ctx.exception))

    def test_invalid_grid(self) -> None:
        registry = TypeRegistry({"Empty": {"columns": 0, "rows": 4}})
        with self.assertRaises(ConfigurationError):
            registry["Empty"]

    def test_unknown_keys(self) -> None:
        registry = TypeRegistry({"Odd": {"columns": 1, "rows": 1, "colour": "red"}})
        with self.assertRaises(ConfigurationError):
            registry["Odd"]

    def test_merge_returns_new_registry(self) -> None:
        base = default_registry()
        merged = base.merge({"Custom": {"columns": 1, "rows": 1}})
        self.assertIn("Custom", merged)
        self.assertNotIn("Custom", base)
        self.assertEqual(len(merged), len(base) + 1)

    def test_merge_overrides_existing(self) -> None:
        merged = default_registry().merge({"Avery5160": {"columns": 1, "rows": 1}})
        self.assertEqual(merged["Avery5160"].columns, 1)
        self.assertEqual(default_registry()["Avery5160"].columns, 3)

    def test_merge_rejects_non_mapping(self) -> None:
        with self.assertRaises(ConfigurationError):
            default_registry().merge({"Broken": ["columns", 1]})  # type: ignore[dict-item]

    def test_merge_file(self) -> None:
        with TemporaryDirectory() as tmp:
            path = Path(tmp) / "types.yaml"
            path.write_text(
                "Spine:\n"
                "  paper_size: LETTER\n"
                "  columns: 8\n"
                "  rows: 1\n"
                "  column_gutter: 4\n"
                "  vertical_text: true\n",
                encoding="utf-8",
            )
            registry = default_registry().merge_file(path)
        spine = registry["Spine"]
        self.assertTrue(spine.vertical_text)
        self.assertEqual(spine.column_gutter, 4)
        self.assertIn("Avery5160", registry)

    def test_merge_file_errors(self) -> None:
        with TemporaryDirectory() as tmp:
            missing = Path(tmp) / "missing.yaml"
            with self.assertRaises(ConfigurationError):
                default_registry().merge_file(missing)
            scalar = Path(tmp) / "scalar.yaml"
            scalar.write_text("just text\n", encoding="utf-8")
            with self.assertRaises(ConfigurationError):
                default_registry().merge_file(scalar)


if __name__ == "__main__":
    unittest.main()
