#!/usr/bin/env python3
"""
Tests for the observation loader.
"""
import json
import os
import sys
import tempfile
import unittest
from pathlib import Path

# Add the parent directory to sys.path so we can import the project packages
sys.path.insert(0, os.path.abspath(os.path.dirname(os.path.dirname(__file__))))

from data.observation_loader import ObservationLoader, parse_point
from elasticity.engine import calculate_elasticity
from elasticity.exceptions import DataFormatError, DataValidationError
from elasticity.types import Classification


class TestObservationLoader(unittest.TestCase):
    """Tests for ObservationLoader."""

    def setUp(self):
        """Create a scratch directory for data files."""
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.tmp_path = Path(self.tmp_dir.name)

    def tearDown(self):
        self.tmp_dir.cleanup()

    def _write(self, name, content):
        path = self.tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    def test_load_csv_keeps_row_order(self):
        path = self._write("series.csv", "month,price,qty\nJan,10,100\nFeb,11,90\nMar,12,80\n")
        loader = ObservationLoader(path, quantity_col="qty", label_col="month")

        frame = loader.load()
        observations = loader.to_observations(frame)

        self.assertEqual(observations, [
            {"price": 10.0, "quantity": 100.0},
            {"price": 11.0, "quantity": 90.0},
            {"price": 12.0, "quantity": 80.0},
        ])
        self.assertEqual(loader.labels(frame), ["Jan", "Feb", "Mar"])

    def test_blank_and_text_cells_become_none(self):
        path = self._write("series.csv", "price,quantity\n 10 ,100\n,abc\n")
        observations = ObservationLoader(path).load_observations()

        self.assertEqual(observations[0], {"price": 10.0, "quantity": 100.0})
        self.assertEqual(observations[1], {"price": None, "quantity": None})

        result = calculate_elasticity(observations)
        self.assertEqual(result.classification, Classification.INVALID_INPUT)

    def test_load_json_records(self):
        records = [{"price": 10, "quantity": 100}, {"price": 12, "quantity": 80}]
        path = self._write("series.json", json.dumps(records))

        observations = ObservationLoader(path).load_observations()

        self.assertEqual(observations, records)
        self.assertEqual(calculate_elasticity(observations).classification, Classification.ELASTIC)

    def test_labels_without_label_column(self):
        path = self._write("series.csv", "price,quantity\n10,100\n12,80\n")
        loader = ObservationLoader(path)
        self.assertIsNone(loader.labels(loader.load()))

    def test_missing_file(self):
        with self.assertRaises(DataFormatError):
            ObservationLoader(self.tmp_path / "missing.csv").load()

    def test_unsupported_extension(self):
        path = self._write("series.txt", "price,quantity\n10,100\n")
        with self.assertRaises(DataFormatError):
            ObservationLoader(path).load()

    def test_missing_columns(self):
        path = self._write("series.csv", "cost,units\n10,100\n")
        with self.assertRaises(DataValidationError) as context:
            ObservationLoader(path).load()
        self.assertIn("price", str(context.exception))


class TestParsePoint(unittest.TestCase):
    """Tests for parse_point."""

    def test_parses_price_and_quantity(self):
        self.assertEqual(parse_point("10,100"), {"price": 10.0, "quantity": 100.0})
        self.assertEqual(parse_point(" 12.5 , 80 "), {"price": 12.5, "quantity": 80.0})

    def test_unparsable_parts_become_none(self):
        self.assertEqual(parse_point("ten,100"), {"price": None, "quantity": 100.0})

    def test_wrong_number_of_parts(self):
        with self.assertRaises(DataFormatError):
            parse_point("10")
        with self.assertRaises(DataFormatError):
            parse_point("10,100,5")


if __name__ == "__main__":
    unittest.main()
