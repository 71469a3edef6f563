"""Shared logger setup."""

import logging
import sys

from moviedialogue.log import get_logger


def test_logger_has_single_handler_and_does_not_propagate():
    first = get_logger("moviedialogue.test_logger")
    again = get_logger("moviedialogue.test_logger")
    assert first is again
    assert len(first.handlers) == 1
    assert first.propagate is False


def test_records_not_duplicated_through_root(capsys):
    logger = get_logger("moviedialogue.test_logger_root")
    logger.handlers[0].setStream(sys.stderr)
    root_handler = logging.StreamHandler(sys.stderr)
    logging.getLogger().addHandler(root_handler)
    try:
        logger.warning("only once")
    finally:
        logging.getLogger().removeHandler(root_handler)
    assert capsys.readouterr().err.count("only once") == 1
