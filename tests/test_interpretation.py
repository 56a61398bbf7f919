#!/usr/bin/env python3
"""
Tests for result interpretation and display helpers.
"""
import math
import unittest
import os
import sys

# Add the parent directory to sys.path so we can import the project packages
sys.path.insert(0, os.path.abspath(os.path.dirname(os.path.dirname(__file__))))

from elasticity.engine import calculate_elasticity
from elasticity.interpretation import (
    CLASSIFICATION_DESCRIPTIONS,
    NO_RESULT_DESCRIPTION,
    describe_basis,
    describe_classification,
    format_elasticity,
    format_percentage,
    summarize_result,
)
from elasticity.types import Classification


class TestInterpretation(unittest.TestCase):
    """Tests for the interpretation module."""

    def setUp(self):
        """Set up a valid and an invalid result."""
        self.valid = calculate_elasticity([(10, 100), (12, 80)])
        self.invalid = calculate_elasticity([(10, 100), (10, 100)])

    def test_format_elasticity(self):
        self.assertEqual(format_elasticity(-11 / 9), "-1.222")
        self.assertEqual(format_elasticity(0.5, precision=1), "0.5")
        self.assertEqual(format_elasticity(math.inf), "∞")
        self.assertEqual(format_elasticity(-math.inf), "-∞")
        self.assertEqual(format_elasticity(math.nan), "N/A")

    def test_format_percentage(self):
        self.assertEqual(format_percentage(0.2), "20.00%")
        self.assertEqual(format_percentage(math.inf), "∞")
        self.assertEqual(format_percentage(None), "N/A")

    def test_every_classification_has_a_description(self):
        for classification in Classification:
            self.assertIn(classification, CLASSIFICATION_DESCRIPTIONS)
            self.assertTrue(describe_classification(classification))
        self.assertEqual(describe_classification(None), NO_RESULT_DESCRIPTION)

    def test_describe_basis(self):
        self.assertEqual(
            describe_basis(2, self.valid),
            "Price Elasticity of Demand (PED) - using the two data points provided"
        )
        self.assertEqual(
            describe_basis(5, self.valid),
            "Price Elasticity of Demand (PED) - using the first and last data points provided"
        )
        self.assertEqual(describe_basis(2, self.invalid), "Price Elasticity of Demand (PED)")
        self.assertEqual(describe_basis(2), "Price Elasticity of Demand (PED)")

    def test_summarize_result(self):
        self.assertEqual(summarize_result(self.valid), "Price Elasticity: -1.222 (Elastic)")
        self.assertTrue(summarize_result(self.invalid).startswith("Calculation Error: Price and quantity"))

    def test_summarize_perfectly_elastic(self):
        result = calculate_elasticity([(10, 100), (10, 120)])
        self.assertEqual(summarize_result(result), "Price Elasticity: ∞ (Perfectly Elastic)")


if __name__ == "__main__":
    unittest.main()
