import tempfile
import unittest
from pathlib import Path
from unittest import mock

from yaml import safe_load

from roadmap import configuration
from roadmap.repository.item import (
    ItemRepository,
    ItemSourceError,
    load_items,
    parse_csv_items,
    parse_yaml_items,
)

CSV_EXPORT = """Squad,Initiatives,Start,Current Status,Estimated Delivery,SPI,Notes
Payments,Checkout revamp,2025-01-10,Delay,2025-03-20,0.8,keep an eye
Search,  Relevance tuning ,01/02/2025,Complete,2025/04/30,1.2,

,,,,,,
Platform,,2025-01-01,Early,2025-02-01,1,no name
"""


class ParseYamlItemsTests(unittest.TestCase):
    def test_list_of_items(self) -> None:
        items = parse_yaml_items(
            "- initiative: Checkout revamp\n  start: 2025-01-10\n  delivery: '2025-03-20'\n"
        )
        self.assertEqual(len(items), 1)
        self.assertEqual(items[0]["initiative"], "Checkout revamp")

    def test_mapping_with_items(self) -> None:
        items = parse_yaml_items("items:\n  - name: A\n  - name: B\n")
        self.assertEqual([item["name"] for item in items], ["A", "B"])

    def test_json_is_accepted(self) -> None:
        items = parse_yaml_items('[{"title": "A", "completion": 40}]')
        self.assertEqual(items, [{"title": "A", "completion": 40}])

    def test_non_mapping_entries_are_skipped(self) -> None:
        with self.assertLogs("roadmap.repository.item", level="WARNING"):
            items = parse_yaml_items("- name: A\n- just a string\n")
        self.assertEqual(items, [{"name": "A"}])

    def test_empty_document(self) -> None:
        self.assertEqual(parse_yaml_items(""), [])

    def test_unexpected_shape(self) -> None:
        with self.assertRaises(ItemSourceError):
            parse_yaml_items("name: not a list\n")

    def test_invalid_yaml(self) -> None:
        with self.assertRaises(ItemSourceError):
            parse_yaml_items("- name: [unclosed\n")


class ParseCsvItemsTests(unittest.TestCase):
    def test_headers_are_mapped(self) -> None:
        items = parse_csv_items(CSV_EXPORT)

        self.assertEqual(len(items), 2)
        self.assertEqual(
            items[0],
            {
                "squad": "Payments",
                "initiative": "Checkout revamp",
                "start": "2025-01-10",
                "status": "Delay",
                "delivery": "2025-03-20",
                "spi": "0.8",
                "Notes": "keep an eye",
            },
        )
        self.assertEqual(items[1]["initiative"], "Relevance tuning")

    def test_empty_csv(self) -> None:
        self.assertEqual(parse_csv_items("\n\n"), [])


class LoadItemsTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_format_is_picked_from_suffix(self) -> None:
        csv_path = self.dir / "export.CSV"
        csv_path.write_text(CSV_EXPORT, encoding="utf-8-sig")
        json_path = self.dir / "export.json"
        json_path.write_text('{"items": [{"name": "A"}]}', encoding="utf-8")

        self.assertEqual(load_items(csv_path)[0]["squad"], "Payments")
        self.assertEqual(load_items(json_path), [{"name": "A"}])

    def test_unsupported_suffix(self) -> None:
        path = self.dir / "export.xlsx"
        path.write_text("", encoding="utf-8")
        with self.assertRaises(ItemSourceError):
            load_items(path)

    def test_non_utf8_file(self) -> None:
        path = self.dir / "export.csv"
        path.write_bytes(b"Squad,Initiatives\nPayments,Caf\xe9 \xff\n")
        with self.assertRaises(ItemSourceError):
            load_items(path)

    def test_missing_file(self) -> None:
        with self.assertRaises(ItemSourceError):
            load_items(self.dir / "missing.yaml")


class ItemRepositoryTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self._tmp.name)
        self.items_path = self.dir / "items.yaml"
        self._patch = mock.patch.object(configuration, "DATA_ITEMS_PATH", self.items_path)
        self._patch.start()
        self.repo = ItemRepository()

    def tearDown(self) -> None:
        self._patch.stop()
        self._tmp.cleanup()

    def test_missing_store_is_empty(self) -> None:
        self.assertEqual(self.repo.get_all_items(), [])
        self.assertFalse(self.repo.flush())

    def test_import_and_flush(self) -> None:
        source = self.dir / "export.csv"
        source.write_text(CSV_EXPORT, encoding="utf-8")

        self.assertEqual(self.repo.import_items(source), 2)
        self.assertTrue(self.repo.flush())
        self.assertFalse(self.repo.is_dirty)

        stored = safe_load(self.items_path.read_text(encoding="utf-8"))
        self.assertEqual([item["initiative"] for item in stored["items"]],
                         ["Checkout revamp", "Relevance tuning"])

        self.repo.reset()
        self.assertEqual(len(self.repo.get_all_items()), 2)

    def test_source_overrides_store(self) -> None:
        self.repo.set_all_items([{"name": "Stored"}])
        source = self.dir / "other.yaml"
        source.write_text("- name: From file\n", encoding="utf-8")

        self.assertEqual(self.repo.get_all_items(source), [{"name": "From file"}])
        self.assertEqual(self.repo.get_all_items(), [{"name": "Stored"}])

    def test_returned_items_are_copies(self) -> None:
        self.repo.set_all_items([{"name": "Stored"}])
        self.repo.get_all_items()[0]["name"] = "Changed"
        self.assertEqual(self.repo.get_all_items(), [{"name": "Stored"}])


if __name__ == "__main__":
    unittest.main()
