"""Tests for environment-driven settings."""

import unittest
from unittest.mock import MagicMock, patch

from storageengine import Settings
from storageengine.exceptions import StorageEngineConfigError

ENDPOINT = "https://storage-engine.example.com"


class SettingsTest(unittest.TestCase):
    def test_from_env(self):
        env = {"STORAGE_ENGINE_ENDPOINT": f'"{ENDPOINT}"', "STORAGE_ENGINE_TIMEOUT": "3"}
        with patch.dict("os.environ", env, clear=True):
            settings = Settings.from_env()
        self.assertEqual(settings, Settings(endpoint=ENDPOINT, timeout=3.0))

    def test_from_env_without_timeout(self):
        with patch.dict("os.environ", {"STORAGE_ENGINE_ENDPOINT": ENDPOINT}, clear=True):
            self.assertIsNone(Settings.from_env().timeout)

    def test_missing_endpoint(self):
        with patch.dict("os.environ", {}, clear=True):
            with self.assertRaises(StorageEngineConfigError):
                Settings.from_env()

    def test_bad_timeout(self):
        env = {"STORAGE_ENGINE_ENDPOINT": ENDPOINT, "STORAGE_ENGINE_TIMEOUT": "soon"}
        with patch.dict("os.environ", env, clear=True):
            with self.assertRaises(StorageEngineConfigError):
                Settings.from_env()

    def test_connect_with_given_client(self):
        http = MagicMock()
        http.request.return_value = MagicMock(status_code=200)
        config = Settings(endpoint=ENDPOINT, timeout=1.0).connect(http)
        http.request.assert_called_once_with("GET", ENDPOINT, timeout=1.0)
        self.assertEqual(config.endpoint, ENDPOINT)

    @patch("storageengine.config.requests.Session")
    def test_connect_defaults_to_requests_session(self, session_cls):
        session_cls.return_value.request.return_value = MagicMock(status_code=200)
        config = Settings(endpoint=ENDPOINT).connect()
        self.assertIs(config.http_client, session_cls.return_value)


if __name__ == "__main__":
    unittest.main()
