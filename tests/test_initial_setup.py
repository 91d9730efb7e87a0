import logging
import os
import tempfile
import unittest

from persian_datetime.config import Settings
from persian_datetime.logging_config import setup_logging


class TestInitialSetup(unittest.TestCase):

    def setUp(self):
        root = logging.getLogger()
        self._saved_handlers = list(root.handlers)
        self._saved_level = root.level

    def tearDown(self):
        root = logging.getLogger()
        for handler in root.handlers:
            if handler not in self._saved_handlers:
                handler.close()
        root.handlers = self._saved_handlers
        root.setLevel(self._saved_level)

    def test_config_loading(self):
        """Test if the default configuration can be loaded."""
        from persian_datetime.config import settings
        self.assertIn(settings.LOG_LEVEL, ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"))
        self.assertIsInstance(settings.USE_PERSIAN_DIGITS, bool)

    def test_config_reads_prefixed_environment(self):
        os.environ["PERSIAN_DATETIME_USE_PERSIAN_DIGITS"] = "false"
        os.environ["PERSIAN_DATETIME_LOG_LEVEL"] = "DEBUG"
        try:
            config = Settings()
        finally:
            del os.environ["PERSIAN_DATETIME_USE_PERSIAN_DIGITS"]
            del os.environ["PERSIAN_DATETIME_LOG_LEVEL"]
        self.assertFalse(config.USE_PERSIAN_DIGITS)
        self.assertEqual(config.LOG_LEVEL, "DEBUG")

    def test_logging_setup(self):
        """Test if logging can be set up with a rotating log file."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            log_path = os.path.join(tmp_dir, "logs", "persian_datetime.log")
            logger = setup_logging(Settings(LOG_LEVEL="DEBUG", LOG_FILE_PATH=log_path))
            self.assertEqual(logger.level, logging.DEBUG)
            logging.getLogger("persian_datetime.test").debug("hello")
            for handler in logger.handlers:
                handler.flush()
            self.assertTrue(os.path.exists(log_path))
            with open(log_path, encoding="utf-8") as log_file:
                self.assertIn("hello", log_file.read())

    def test_logging_setup_rejects_unknown_level(self):
        with self.assertRaises(ValueError):
            setup_logging(Settings.model_construct(LOG_LEVEL="VERBOSE"))


if __name__ == '__main__':
    unittest.main()
