import logging
import os
import tempfile
import unittest

from twisty_sim.logging_config import setup_logging


class TestSetupLogging(unittest.TestCase):
    def tearDown(self):
        logger = logging.getLogger("twisty_sim")
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)

    def test_repeated_calls_replace_handlers(self):
        setup_logging(logging.INFO)
        logger = setup_logging(logging.WARNING)
        self.assertEqual(logger.name, "twisty_sim")
        self.assertEqual(logger.level, logging.WARNING)
        self.assertEqual(len(logger.handlers), 1)

    def test_log_file_receives_package_records(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "run.log")
            logger = setup_logging(logging.DEBUG, path)
            self.assertEqual(len(logger.handlers), 2)
            logging.getLogger("twisty_sim.engine").info("rotated %d blocks", 9)
            for handler in logger.handlers:
                handler.flush()
            with open(path, encoding="utf-8") as f:
                content = f.read()
            self.tearDown()
        self.assertIn("INFO    twisty_sim.engine: rotated 9 blocks", content)
        self.assertIn("Logging at DEBUG", content)


if __name__ == "__main__":
    unittest.main()
