import logging
import unittest

from wordsearch.utils.logger import ROOT_LOGGER_NAME, configure_logging, get_logger


class LoggerTests(unittest.TestCase):
    def setUp(self) -> None:
        root = logging.getLogger()
        self.saved_handlers = list(root.handlers)
        self.saved_level = root.level

    def tearDown(self) -> None:
        root = logging.getLogger()
        root.handlers[:] = self.saved_handlers
        root.setLevel(self.saved_level)

    def test_repeated_configuration_keeps_one_handler(self) -> None:
        configure_logging(logging.WARNING)
        configure_logging(logging.DEBUG)
        root = logging.getLogger()
        self.assertEqual(len(root.handlers), 1)
        self.assertEqual(root.level, logging.DEBUG)

    def test_default_logger_uses_package_namespace(self) -> None:
        self.assertEqual(get_logger().name, ROOT_LOGGER_NAME)
        self.assertEqual(get_logger("wordsearch.engine.grid").name, "wordsearch.engine.grid")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
