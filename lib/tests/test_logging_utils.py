"""
Test suite for lib/logging_utils.py
"""

import logging
import os
import tempfile
import unittest
from logging.handlers import TimedRotatingFileHandler

from lib.logging_utils import configureLogger, getLogLevelByStr, initLogging


class TestLoggingUtils(unittest.TestCase):

    def setUp(self):
        self.logger = logging.getLogger("telegrapher.test")
        self.logger.handlers.clear()
        self.logger.setLevel(logging.NOTSET)

    def tearDown(self):
        for handler in self.logger.handlers[:]:
            handler.close()
            self.logger.removeHandler(handler)

    def test_get_log_level_by_str(self):
        """Test level names are case insensitive"""
        self.assertEqual(getLogLevelByStr("debug"), logging.DEBUG)
        self.assertEqual(getLogLevelByStr("WARNING"), logging.WARNING)
        self.assertIsNone(getLogLevelByStr("loud"))
        self.assertEqual(getLogLevelByStr("loud", logging.INFO), logging.INFO)

    def test_console_handler(self):
        """Test console handler uses own level when set"""
        configureLogger(self.logger, {"level": "DEBUG", "console": True, "console-level": "ERROR"})

        self.assertEqual(self.logger.level, logging.DEBUG)
        self.assertEqual(len(self.logger.handlers), 1)
        self.assertIsInstance(self.logger.handlers[0], logging.StreamHandler)
        self.assertEqual(self.logger.handlers[0].level, logging.ERROR)

    def test_file_handler(self):
        """Test file and rotating file handlers"""
        with tempfile.TemporaryDirectory() as tmpdir:
            logFile = os.path.join(tmpdir, "logs", "app.log")

            configureLogger(self.logger, {"level": "INFO", "file": logFile, "rotate": True})
            self.assertIsInstance(self.logger.handlers[0], TimedRotatingFileHandler)
            self.assertTrue(os.path.isdir(os.path.dirname(logFile)))

            configureLogger(self.logger, {"level": "INFO", "file": logFile})
            self.assertEqual(len(self.logger.handlers), 1)
            self.assertNotIsInstance(self.logger.handlers[0], TimedRotatingFileHandler)

            self.tearDown()

    def test_propagate(self):
        """Test propagate flag"""
        configureLogger(self.logger, {"propagate": False})
        self.assertFalse(self.logger.propagate)
        self.logger.propagate = True

    def test_init_logging_named_loggers(self):
        """Test per-logger sections and quieting of httpx"""
        rootLogger = logging.getLogger()
        savedLevel = rootLogger.level
        savedHandlers = rootLogger.handlers[:]
        try:
            initLogging({"level": "DEBUG", "logger": {"telegrapher.test": {"level": "ERROR"}}})

            self.assertEqual(rootLogger.level, logging.DEBUG)
            self.assertEqual(self.logger.level, logging.ERROR)
            self.assertEqual(logging.getLogger("httpx").level, logging.WARNING)
        finally:
            rootLogger.setLevel(savedLevel)
            for handler in savedHandlers:
                rootLogger.addHandler(handler)


if __name__ == "__main__":
    unittest.main()
