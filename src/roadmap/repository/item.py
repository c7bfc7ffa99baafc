# SPDX-License-Identifier: MIT

import csv
import io
import logging
from copy import deepcopy
from pathlib import Path
from typing import Any, Optional

import yaml
from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CSafeLoader as SafeLoader
except ImportError:
    from yaml import Dumper, SafeLoader  # type: ignore[assignment]

from roadmap import configuration
from roadmap.service.normalize import NAME_FIELDS, resolve_field

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml", ".json"}
CSV_SUFFIXES = {".csv"}

# Spreadsheet export headers -> raw item keys
CSV_HEADER_FIELDS: dict[str, str] = {
    "Squad": "squad",
    "Initiatives": "initiative",
    "Initiative": "initiative",
    "Start": "start",
    "Current Status": "status",
    "Status": "status",
    "Estimated Delivery": "delivery",
    "SPI": "spi",
    "Team": "team",
    "Completion (%)": "completion",
    "Start Date": "startDate",
    "Expected Date": "expectedDate",
}


class ItemSourceError(ValueError):
    """Raised when an item source cannot be read or has an unexpected shape."""


def load_items(path: Path) -> list[dict[str, Any]]:
    """
    Load raw roadmap items from a YAML, JSON or CSV file.

    Args:
        path: The source file; the format is picked from its suffix

    Returns:
        The raw items, in file order

    Raises:
        ItemSourceError: If the file cannot be read or parsed
    """
    suffix = path.suffix.lower()
    if suffix not in YAML_SUFFIXES and suffix not in CSV_SUFFIXES:
        raise ItemSourceError(f"Unsupported item source format: '{path.suffix}'")

    try:
        text = path.read_text(encoding="utf-8-sig")
    except OSError as e:
        raise ItemSourceError(f"Cannot read item source '{path}': {e}") from e
    except UnicodeDecodeError as e:
        raise ItemSourceError(f"Item source '{path}' is not UTF-8 text: {e}") from e

    if suffix in CSV_SUFFIXES:
        return parse_csv_items(text)
    return parse_yaml_items(text)


def parse_yaml_items(text: str) -> list[dict[str, Any]]:
    try:
        data = load(text, Loader=SafeLoader)
    except yaml.YAMLError as e:
        raise ItemSourceError(f"Invalid YAML/JSON item source: {e}") from e

    if data is None:
        return []
    if isinstance(data, dict):
        data = data.get("items")
    if not isinstance(data, list):
        raise ItemSourceError(
            "Item source must be a list of items or a mapping with an 'items' list"
        )

    items: list[dict[str, Any]] = []
    for index, entry in enumerate(data):
        if not isinstance(entry, dict):
            logger.warning("Skipping item %d: expected a mapping", index)
            continue
        items.append(entry)
    return items


def parse_csv_items(text: str) -> list[dict[str, Any]]:
    """
    Parse a spreadsheet CSV export.

    The first non-empty row is the header. Known headers are mapped onto raw
    item keys, other headers are kept as-is. Rows without an initiative name
    are skipped.
    """
    try:
        rows = [
            row
            for row in csv.reader(io.StringIO(text))
            if any(cell.strip() for cell in row)
        ]
    except csv.Error as e:
        raise ItemSourceError(f"Invalid CSV item source: {e}") from e

    if not rows:
        logger.warning("No data found in CSV item source")
        return []

    headers = [header.strip() for header in rows[0]]
    logger.debug("CSV headers found: %s", headers)

    items: list[dict[str, Any]] = []
    for row in rows[1:]:
        entry: dict[str, Any] = {}
        for header, value in zip(headers, row):
            if not header:
                continue
            entry[CSV_HEADER_FIELDS.get(header, header)] = value.strip()
        if resolve_field(entry, NAME_FIELDS) is None:
            continue
        items.append(entry)
    return items


class ItemRepository:
    def __init__(self) -> None:
        self._items: Optional[list[dict[str, Any]]] = None
        self.is_dirty = False

    @property
    def items(self) -> list[dict[str, Any]]:
        if self._items is None:
            self.__load_data()
        if self._items is None:
            raise ValueError()
        return self._items

    def __load_data(self) -> None:
        if not configuration.DATA_ITEMS_PATH.is_file():
            self._items = []
            return
        self._items = load_items(configuration.DATA_ITEMS_PATH)

    def __save_data(self, items: list[dict[str, Any]]) -> None:
        configuration.DATA_ITEMS_PATH.write_text(
            dump({"items": items}, Dumper=Dumper, allow_unicode=True, sort_keys=False)
        )

    def flush(self) -> bool:
        if self._items is not None and self.is_dirty:
            self.__save_data(self._items)
            self.is_dirty = False
            return True
        return False

    def reset(self) -> None:
        self._items = None
        self.is_dirty = False

    def get_all_items(self, source: Optional[Path] = None) -> list[dict[str, Any]]:
        """Items from ``source`` if given, otherwise from the stored dataset."""
        if source is not None:
            return load_items(source)
        return deepcopy(self.items)

    def set_all_items(self, items: list[dict[str, Any]]) -> None:
        self.is_dirty = True
        self._items = deepcopy(items)

    def import_items(self, source: Path) -> int:
        items = load_items(source)
        self.set_all_items(items)
        return len(items)


ITEM_REPO = ItemRepository()
