"""
Unittest suite for settings loading and CSV export.
"""

from __future__ import annotations

import csv
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from resumerank.config import RankingSettings, load_settings
from resumerank.export.write_csv import (
    RANKING_HEADERS,
    rankings_to_csv,
    read_rankings_csv,
    write_rankings_csv,
)
from resumerank.rank.schema import RankedResult


class TestSettings(unittest.TestCase):
    """Test cases for layered configuration."""

    def setUp(self) -> None:
        self.temp_dir = tempfile.TemporaryDirectory()
        self.env = mock.patch.dict(os.environ, {}, clear=False)
        self.env.start()
        os.environ.pop("RESUMERANK_KEYWORD_COUNT", None)
        os.environ.pop("RESUMERANK_LOG_LEVEL", None)

    def tearDown(self) -> None:
        self.env.stop()
        self.temp_dir.cleanup()

    def _write(self, text: str) -> str:
        path = Path(self.temp_dir.name) / "config.yaml"
        path.write_text(text, encoding="utf-8")
        return str(path)

    def test_defaults(self) -> None:
        settings = load_settings()
        self.assertEqual(settings.keyword_count, 10)
        self.assertEqual(settings.accepted_extensions, [".pdf"])
        self.assertEqual(settings.export_filename, "resume-rankings.csv")

    def test_yaml_values_and_unknown_keys(self) -> None:
        path = self._write("keyword_count: 5\nextra_stopwords: [senior]\ncolour: blue\n")
        with self.assertLogs("resumerank.config", level="WARNING"):
            settings = load_settings(path)
        self.assertEqual(settings.keyword_count, 5)
        self.assertEqual(settings.extra_stopwords, ["senior"])

    def test_empty_yaml_uses_defaults(self) -> None:
        self.assertEqual(load_settings(self._write("")), RankingSettings())

    def test_environment_overrides_yaml(self) -> None:
        path = self._write("keyword_count: 5\nlog_level: info\n")
        os.environ["RESUMERANK_KEYWORD_COUNT"] = "3"
        os.environ["RESUMERANK_LOG_LEVEL"] = "debug"
        settings = load_settings(path)
        self.assertEqual(settings.keyword_count, 3)
        self.assertEqual(settings.log_level, "DEBUG")

    def test_invalid_values(self) -> None:
        with self.assertRaises(ValueError):
            load_settings(self._write("keyword_count: many\n"))
        with self.assertRaises(ValueError):
            load_settings(self._write("- not\n- a mapping\n"))
        with self.assertRaises(ValueError):
            RankingSettings(keyword_count=-1)
        os.environ["RESUMERANK_KEYWORD_COUNT"] = "ten"
        with self.assertRaises(ValueError):
            load_settings()

    def test_shipped_sample_config_loads(self) -> None:
        sample = Path(__file__).resolve().parents[1] / "resumerank" / "config.yaml"
        self.assertEqual(load_settings(str(sample)), RankingSettings())


class TestExport(unittest.TestCase):
    """Test cases for the rankings CSV."""

    def setUp(self) -> None:
        self.temp_dir = tempfile.TemporaryDirectory()
        self.results = [
            RankedResult(name="scientist.pdf", score=87.654, keywords=("python", "data")),
            RankedResult(name="chef.pdf", score=0.0, keywords=()),
        ]

    def tearDown(self) -> None:
        self.temp_dir.cleanup()

    def test_write_rankings_csv(self) -> None:
        csv_path = Path(self.temp_dir.name) / "rankings.csv"
        write_rankings_csv(self.results, str(csv_path))
        with open(csv_path, newline="", encoding="utf-8") as f:
            rows = list(csv.reader(f))
        self.assertEqual(rows[0], RANKING_HEADERS)
        self.assertEqual(rows[1], ["scientist.pdf", "87.65", "python, data"])
        self.assertEqual(rows[2], ["chef.pdf", "0.00", ""])
        self.assertEqual(read_rankings_csv(str(csv_path))[0]["Top Keywords"], "python, data")

    def test_rankings_to_csv_text(self) -> None:
        text = rankings_to_csv(self.results)
        self.assertTrue(text.startswith("Resume Name,Similarity Score (%),Top Keywords"))
        self.assertIn('scientist.pdf,87.65,"python, data"', text)

    def test_read_rejects_foreign_csv(self) -> None:
        csv_path = Path(self.temp_dir.name) / "other.csv"
        csv_path.write_text("a,b\n1,2\n", encoding="utf-8")
        with self.assertRaises(ValueError):
            read_rankings_csv(str(csv_path))


if __name__ == "__main__":
    unittest.main()
