# tests/test_config.py

import os
import tempfile
import unittest
from unittest import mock

from frontend.config import CONFIG_ENV_VAR, DEFAULTS, load_config, merge_config


class TestConfig(unittest.TestCase):

    def test_missing_file_gives_defaults(self):
        config = load_config("no/such/file.yaml")
        self.assertEqual(config, DEFAULTS)
        self.assertIsNot(config["game"], DEFAULTS["game"])

    def test_file_overrides_defaults(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "server.yaml")
            with open(path, "w") as f:
                f.write("game:\n  rows: 4\n  mines: 2\n  bogus: 1\nredirect:\n  github_user: octo\n")
            config = load_config(path)
        self.assertEqual(config["game"]["rows"], 4)
        self.assertEqual(config["game"]["cols"], 8)
        self.assertEqual(config["game"]["mines"], 2)
        self.assertNotIn("bogus", config["game"])
        self.assertEqual(config["redirect"]["github_user"], "octo")
        self.assertEqual(config["redirect"]["fallback_url"], "https://github.com")

    def test_env_var_path(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "other.yaml")
            with open(path, "w") as f:
                f.write("server:\n  port: 9000\n")
            with mock.patch.dict(os.environ, {CONFIG_ENV_VAR: path}):
                config = load_config()
        self.assertEqual(config["server"]["port"], 9000)

    def test_empty_sections(self):
        config = merge_config({"game": None})
        self.assertEqual(config["game"], DEFAULTS["game"])


if __name__ == "__main__":
    unittest.main()
