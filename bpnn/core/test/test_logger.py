import logging
import os
import shutil
import tempfile
import unittest

from bpnn.core.logger import CoreLogger, DEFAULT_LOG_FILENAME


class TestCoreLogger(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp()
        self.cwd = os.getcwd()

    def tearDown(self):
        os.chdir(self.cwd)
        shutil.rmtree(self.tmp_dir)

    def test_writes_to_file(self):

        filename = os.path.join(self.tmp_dir, 'train.txt')
        logger = CoreLogger(filename=filename, stdout=False)

        try:
            logger.info("hello")
            logger.debug("details")
        finally:
            logger.close()

        with open(filename) as f:
            lines = f.read().splitlines()

        self.assertEqual(2, len(lines))
        self.assertIn("INFO     hello", lines[0])
        self.assertIn("DEBUG    details", lines[1])

    def test_progress(self):

        filename = os.path.join(self.tmp_dir, 'train.txt')
        logger = CoreLogger(filename=filename, stdout=False)

        try:
            logger.progress("Epoch done", 7, 100)
        finally:
            logger.close()

        with open(filename) as f:
            self.assertTrue(f.read().strip().endswith("(007 / 100) Epoch done"))

    def test_context_manager_and_level(self):

        filename = os.path.join(self.tmp_dir, 'train.txt')

        with CoreLogger(filename=filename, stdout=False,
                        level=logging.INFO) as logger:
            logger.debug("hidden")
            logger.info("shown")

        self.assertEqual(0, len(logger.handlers))

        with open(filename) as f:
            lines = f.read().splitlines()

        self.assertEqual(1, len(lines))
        self.assertIn("shown", lines[0])

    def test_default_filename_and_stdout(self):

        os.chdir(self.tmp_dir)
        logger = CoreLogger()

        try:
            self.assertEqual(2, len(logger.handlers))
            self.assertEqual(logging.DEBUG, logger.level)
        finally:
            logger.close()

        self.assertTrue(os.path.exists(DEFAULT_LOG_FILENAME))
        self.assertEqual(0, len(logger.handlers))


if __name__ == '__main__':
    unittest.main()
