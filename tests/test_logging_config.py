import json
import shutil
import unittest
from pathlib import Path
from uuid import uuid4

from loguru import logger

from nextcloud_search.logging_config import setup_logging

PROJECT_ROOT = Path(__file__).resolve().parents[1]


class SetupLoggingTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp_dir = PROJECT_ROOT / ".test-artifacts" / f"logging-{uuid4().hex}"

    def tearDown(self) -> None:
        logger.remove()
        shutil.rmtree(self._tmp_dir, ignore_errors=True)

    def test_default_is_console_only(self) -> None:
        descriptions = setup_logging()
        self.assertEqual(["console (stderr, INFO)"], descriptions)

    def test_file_consumer_writes(self) -> None:
        path = self._tmp_dir / "client.log"
        descriptions = setup_logging(
            level="DEBUG",
            consumers=[{"type": "file", "path": str(path)}],
        )
        logger.debug("hello from test")
        logger.remove()

        self.assertEqual([f"file ({path}, text, DEBUG)"], descriptions)
        self.assertIn("hello from test", path.read_text())

    def test_per_sink_level(self) -> None:
        descriptions = setup_logging(
            level="INFO",
            consumers=[{"type": "console", "level": "WARNING"}],
        )
        self.assertEqual(["console (stderr, WARNING)"], descriptions)

    def test_unknown_consumer_skipped(self) -> None:
        descriptions = setup_logging(consumers=[{"type": "syslog"}, {"type": "console"}])
        self.assertEqual(["console (stderr, INFO)"], descriptions)

    def test_unknown_consumer_first_is_still_reported(self) -> None:
        path = self._tmp_dir / "client.log"
        descriptions = setup_logging(
            consumers=[{"type": "syslog"}, {"type": "file", "path": str(path)}],
        )
        logger.remove()

        self.assertEqual([f"file ({path}, text, INFO)"], descriptions)
        self.assertIn("Unknown log consumer type: 'syslog'", path.read_text())

    def test_file_consumer_serialize_writes_json(self) -> None:
        path = self._tmp_dir / "client.jsonl"
        descriptions = setup_logging(
            consumers=[{"type": "file", "path": str(path), "serialize": True}],
        )
        logger.info("structured line")
        logger.remove()

        self.assertEqual([f"file ({path}, json, INFO)"], descriptions)
        record = json.loads(path.read_text().splitlines()[0])
        self.assertEqual("structured line", record["record"]["message"])

    def test_console_colorize_option_accepted(self) -> None:
        descriptions = setup_logging(consumers=[{"type": "console", "colorize": False}])
        self.assertEqual(["console (stderr, INFO)"], descriptions)
