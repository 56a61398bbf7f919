#!/usr/bin/env python3
"""
Tests for the analysis pipeline and the command-line entry point.
"""
import contextlib
import io
import json
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

import matplotlib
matplotlib.use("Agg")

# Add the parent directory to sys.path so we can import the project packages
sys.path.insert(0, os.path.abspath(os.path.dirname(os.path.dirname(__file__))))

from analysis import load_observations, run_analysis
from config.config_manager import ConfigManager
from elasticity.exceptions import DataFormatError
from elasticity.types import Classification
from utils.logging_utils import LoggingManager
import main


class AnalysisTestCase(unittest.TestCase):
    """Shared setup: a scratch results directory and a clean environment."""

    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.tmp_path = Path(self.tmp_dir.name)
        env = {k: v for k, v in os.environ.items() if not k.startswith(ConfigManager.ENV_PREFIX)}
        env["PED_RESULTS_DIR"] = str(self.tmp_path / "results")
        self.env_patch = patch.dict(os.environ, env, clear=True)
        self.env_patch.start()

    def tearDown(self):
        self.env_patch.stop()
        self.tmp_dir.cleanup()


class TestRunAnalysis(AnalysisTestCase):
    """Tests for run_analysis and load_observations."""

    def test_valid_series(self):
        analysis = run_analysis([(10, 100), (11, 90), (12, 80)], config_manager=ConfigManager())

        self.assertEqual(analysis["result"].classification, Classification.ELASTIC)
        self.assertEqual(analysis["summary"], "Price Elasticity: -1.222 (Elastic)")
        self.assertTrue(analysis["basis"].endswith("using the first and last data points provided"))
        self.assertEqual(analysis["output_files"], {})

    def test_saves_result_and_chart(self):
        analysis = run_analysis(
            [(10, 100), (10, 120)],
            config_manager=ConfigManager(),
            plot=True,
            save=True
        )

        result_path = Path(analysis["output_files"]["result"])
        chart_path = Path(analysis["output_files"]["trend_chart"])
        self.assertTrue(chart_path.exists())

        saved = json.loads(result_path.read_text(encoding="utf-8"))
        self.assertEqual(saved["result"]["elasticity"], "Infinity")
        self.assertEqual(saved["result"]["classification"], "Perfectly Elastic")
        self.assertEqual(saved["result"]["percentageChangePrice"], 0.0)
        self.assertEqual(saved["observations"], [[10, 100], [10, 120]])

    def test_invalid_series_is_reported_not_raised(self):
        analysis = run_analysis([(10, 100)], config_manager=ConfigManager(), save=True)

        self.assertFalse(analysis["result"].is_valid)
        self.assertTrue(analysis["summary"].startswith("Calculation Error"))
        saved = json.loads(Path(analysis["output_files"]["result"]).read_text(encoding="utf-8"))
        self.assertEqual(saved["result"]["elasticity"], "NaN")
        self.assertNotIn("observationsUsed", saved["result"])

    def test_load_observations_from_config(self):
        data_path = self.tmp_path / "series.csv"
        data_path.write_text("price,quantity\n10,100\n12,80\n", encoding="utf-8")
        manager = ConfigManager()
        manager.app_config.data_path = str(data_path)

        observations, labels = load_observations(manager)

        self.assertEqual(len(observations), 2)
        self.assertIsNone(labels)

    def test_load_observations_missing_file(self):
        manager = ConfigManager()
        manager.app_config.data_path = str(self.tmp_path / "missing.csv")
        with self.assertRaises(DataFormatError):
            load_observations(manager)


class TestMain(AnalysisTestCase):
    """Tests for the ped-calc command."""

    def _run(self, argv):
        stdout = io.StringIO()
        with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(io.StringIO()):
            status = main.main(argv)
        return status, stdout.getvalue()

    def test_points_on_command_line(self):
        status, output = self._run(["--point", "10,100", "--point", "12,80", "--log-level", "ERROR"])

        self.assertEqual(status, 0)
        self.assertIn("Price Elasticity: -1.222 (Elastic)", output)

    def test_json_output(self):
        status, output = self._run(["--point", "10,100", "--point", "15,100", "--json"])

        self.assertEqual(status, 0)
        payload = json.loads(output)
        self.assertEqual(payload["result"]["classification"], "Perfectly Inelastic")
        self.assertEqual(payload["result"]["elasticity"], 0.0)

    def test_json_output_keeps_config_warnings_off_stdout(self):
        os.environ["PED_LOG_LEVEL"] = "bogus"
        stdout, stderr = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stderr):
            # Console logging starts on stdout, as it does at import time
            LoggingManager.setup_logging(stream=sys.stdout)
            status = main.main(["--point", "10,100", "--point", "12,80", "--json"])

        self.assertEqual(status, 0)
        payload = json.loads(stdout.getvalue())
        self.assertEqual(payload["result"]["classification"], "Elastic")
        self.assertIn("Unsupported log level: bogus", stderr.getvalue())

    def test_bad_config_value_exits_with_error(self):
        config_path = self.tmp_path / "config.json"
        config_path.write_text(json.dumps({"chart_dpi": "high"}), encoding="utf-8")

        status, output = self._run(["--point", "10,100", "--point", "12,80", "--config", str(config_path)])

        self.assertEqual(status, 1)
        self.assertNotIn("Price Elasticity", output)

    def test_invalid_points_exit_with_error(self):
        status, output = self._run(["--point", "-5,100", "--point", "10,80", "--json"])

        self.assertEqual(status, 1)
        payload = json.loads(output)
        self.assertEqual(payload["result"]["classification"], "Invalid Input")
        self.assertIn("Price must be positive", payload["result"]["error"])

    def test_data_file_with_outputs(self):
        data_path = self.tmp_path / "series.csv"
        data_path.write_text("price,quantity\n10,100\n11,95\n12,80\n", encoding="utf-8")

        status, output = self._run([
            "--data-path", str(data_path), "--plot", "--save", "--log-level", "ERROR"
        ])

        self.assertEqual(status, 0)
        self.assertTrue((self.tmp_path / "results" / "elasticity_result.json").exists())
        self.assertTrue((self.tmp_path / "results" / "price_quantity_trend.png").exists())
        self.assertIn("trend_chart:", output)

    def test_malformed_point(self):
        status, _ = self._run(["--point", "10", "--point", "12,80", "--log-level", "ERROR"])
        self.assertEqual(status, 1)

    def test_no_input(self):
        status, _ = self._run(["--log-level", "ERROR"])
        self.assertEqual(status, 1)


if __name__ == "__main__":
    unittest.main()
