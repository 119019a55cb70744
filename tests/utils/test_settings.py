"""Tests for the tool settings."""

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from resprover.utils.config import Config, expand_env, get_config, reset_config


class TestSettings(unittest.TestCase):

    def setUp(self):
        reset_config()
        self._tmp = tempfile.TemporaryDirectory()
        self.path = Path(self._tmp.name) / "settings.yaml"
        self.path.write_text(
            "paths:\n"
            "  weights: ${RP_TEST_WEIGHTS:}\n"
            "  logs: ${RP_TEST_HOME:/home}/logs\n"
            "search:\n"
            "  steps: 10\n"
        )

    def tearDown(self):
        reset_config()
        self._tmp.cleanup()

    def test_expand_env(self):
        with mock.patch.dict(os.environ, {"RP_TEST_A": "x"}):
            self.assertEqual(expand_env("${RP_TEST_A}/${RP_TEST_B:y}"), "x/y")
            self.assertEqual(expand_env({"k": ["${RP_TEST_A}", 3]}), {"k": ["x", 3]})

    def test_get(self):
        with mock.patch.dict(os.environ, {"RP_TEST_HOME": "/data"}):
            config = Config(str(self.path))
        self.assertEqual(config.get("paths.logs"), "/data/logs")
        self.assertEqual(config["search.steps"], 10)
        self.assertIsNone(config.get("search.missing"))
        self.assertEqual(config.get("search.steps.deeper", 1), 1)

    def test_get_path(self):
        config = Config(str(self.path))
        self.assertIsNone(config.get_path("paths.weights"))
        self.assertEqual(config.get_path("paths.logs"), Path("/home/logs"))

    def test_update(self):
        config = Config(str(self.path))
        config.update({"search": {"seed": 1}})
        self.assertEqual(config.get("search.steps"), 10)
        self.assertEqual(config.get("search.seed"), 1)

    def test_env_var_selects_file(self):
        with mock.patch.dict(os.environ, {"RESPROVER_CONFIG": str(self.path)}):
            config = get_config()
        self.assertEqual(config.config_path, self.path)
        self.assertIs(get_config(), config)


if __name__ == '__main__':
    unittest.main()
