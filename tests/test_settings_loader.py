import logging
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from pydantic import ValidationError

from asset_loader.config import ConfigLoadRequest, LoaderSettings, YamlConfigLoader
from asset_loader.factory import load_asset_fetcher
from asset_loader.logging import init_logging
from asset_loader.transport import ScriptedTransport
from fakes import CONFIG_URL, RAW_URL, config_json

SETTINGS_YAML = """
config_url: https://assets.example.com/config.json
http:
  request_timeout_seconds: 10
logging:
  level: INFO
  file:
    path: ""
    rotation:
      backup_count: 3
"""


class YamlConfigLoaderTests(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        self.yaml_path = self.root / "config.yaml"
        self.yaml_path.write_text(SETTINGS_YAML, encoding="utf-8")

    async def asyncTearDown(self) -> None:
        self._tmp.cleanup()

    def _request(self, **kwargs) -> ConfigLoadRequest:
        kwargs.setdefault("dotenv_path", None)
        return ConfigLoadRequest(yaml_path=str(self.yaml_path), env_prefix="ASSETS_TEST__", **kwargs)

    async def test_loads_yaml(self) -> None:
        settings = await YamlConfigLoader().load(self._request())

        self.assertEqual(settings.config_url, "https://assets.example.com/config.json")
        self.assertEqual(settings.http.request_timeout_seconds, 10)
        self.assertEqual(settings.logging.file.rotation.backup_count, 3)

    async def test_env_override_is_coerced(self) -> None:
        with mock.patch.dict(os.environ, {"ASSETS_TEST__HTTP__REQUEST_TIMEOUT_SECONDS": "2.5"}):
            settings = await YamlConfigLoader().load(self._request())

        self.assertEqual(settings.http.request_timeout_seconds, 2.5)

    async def test_dotenv_does_not_override_environment(self) -> None:
        dotenv_path = self.root / ".env"
        dotenv_path.write_text(
            "ASSETS_TEST__CONFIG_URL=https://dotenv.example.com/c.json\n"
            "ASSETS_TEST__LOGGING__LEVEL=DEBUG\n",
            encoding="utf-8",
        )
        with mock.patch.dict(os.environ, {"ASSETS_TEST__LOGGING__LEVEL": "WARNING"}):
            settings = await YamlConfigLoader().load(self._request(dotenv_path=str(dotenv_path)))
            self.assertNotIn("ASSETS_TEST__CONFIG_URL", os.environ)

        self.assertEqual(settings.config_url, "https://dotenv.example.com/c.json")
        self.assertEqual(settings.logging.level, "WARNING")

    async def test_unknown_env_override_path_raises(self) -> None:
        with mock.patch.dict(os.environ, {"ASSETS_TEST__HTTP__RETRIES": "4"}):
            with self.assertRaises(KeyError):
                await YamlConfigLoader().load(self._request())

    async def test_missing_file_raises(self) -> None:
        with self.assertRaises(FileNotFoundError):
            await YamlConfigLoader().load(ConfigLoadRequest(yaml_path=str(self.root / "nope.yaml"), dotenv_path=None))

    async def test_non_mapping_yaml_raises(self) -> None:
        self.yaml_path.write_text("- a\n- b\n", encoding="utf-8")

        with self.assertRaises(ValueError):
            await YamlConfigLoader().load(self._request())

    async def test_unknown_key_fails_validation(self) -> None:
        self.yaml_path.write_text("cache_dir: /tmp\n", encoding="utf-8")

        with self.assertRaises(ValidationError):
            await YamlConfigLoader().load(self._request())

    async def test_empty_yaml_uses_defaults(self) -> None:
        self.yaml_path.write_text("", encoding="utf-8")

        settings = await YamlConfigLoader().load(self._request())

        self.assertEqual(settings, LoaderSettings())
        self.assertIsNone(settings.config_url)


class InitLoggingTests(unittest.TestCase):
    def setUp(self) -> None:
        root = logging.getLogger()
        self._saved = (root.level, list(root.handlers))

    def tearDown(self) -> None:
        root = logging.getLogger()
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()
        level, handlers = self._saved
        root.setLevel(level)
        for handler in handlers:
            root.addHandler(handler)

    def test_invalid_level_raises(self) -> None:
        settings = LoaderSettings.model_validate({"logging": {"level": "LOUD"}})

        with self.assertRaises(ValueError):
            init_logging(settings.logging)

    def test_stream_and_file_handlers(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            log_path = Path(tmp) / "logs" / "assets.log"
            settings = LoaderSettings.model_validate({"logging": {"level": "debug", "file": {"path": str(log_path)}}})

            level = init_logging(settings.logging)
            logging.getLogger("asset_loader.test").info("Asset cache cleared.")
            for handler in logging.getLogger().handlers:
                handler.flush()

            root = logging.getLogger()
            self.assertEqual(level, logging.DEBUG)
            self.assertEqual(root.level, logging.DEBUG)
            self.assertEqual(len(root.handlers), 2)
            self.assertIn("[INFO][asset_loader.test] Asset cache cleared.", log_path.read_text(encoding="utf-8"))

            for handler in list(root.handlers):
                root.removeHandler(handler)
                handler.close()


if __name__ == "__main__":
    unittest.main()


class LoadAssetFetcherTests(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self) -> None:
        root = logging.getLogger()
        self._saved = (root.level, list(root.handlers))
        self._tmp = tempfile.TemporaryDirectory()
        self.yaml_path = Path(self._tmp.name) / "config.yaml"
        self.yaml_path.write_text(SETTINGS_YAML.replace("level: INFO", "level: WARNING"), encoding="utf-8")
        self.request = ConfigLoadRequest(yaml_path=str(self.yaml_path), env_prefix="ASSETS_TEST__", dotenv_path=None)

    async def asyncTearDown(self) -> None:
        root = logging.getLogger()
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()
        level, handlers = self._saved
        root.setLevel(level)
        for handler in handlers:
            root.addHandler(handler)
        self._tmp.cleanup()

    async def test_bootstrap_configures_logging_and_resolves_config(self) -> None:
        transport = ScriptedTransport().script(CONFIG_URL, config_json(version="7.0.0"))
        transport.script(RAW_URL, "a{}")

        fetcher = await load_asset_fetcher(self.request, transport=transport)

        self.assertEqual(logging.getLogger().level, logging.WARNING)
        self.assertEqual(fetcher.provider.active.version, "7.0.0")
        self.assertEqual(await fetcher.load_css("popup"), "a{}")

    async def test_bootstrap_without_resolve_leaves_config_unset(self) -> None:
        transport = ScriptedTransport()

        fetcher = await load_asset_fetcher(self.request, transport=transport, resolve=False)

        self.assertIsNone(fetcher.provider.active)
        self.assertEqual(transport.calls, [])
