import io
import logging

import pytest
from purefn.logger import get_logger, logger, package_handler, set_level, setup_logger


def own_stream_handlers(target):
    # pytest's capture handlers are StreamHandler subclasses and may be attached too
    return [h for h in target.handlers if type(h) is logging.StreamHandler]


@pytest.fixture
def restore_level():
    original = logger.level
    yield
    logger.setLevel(original)


def test_package_logger_configured():
    assert logger.name == "purefn"
    assert logger.propagate is False
    handlers = own_stream_handlers(logger)
    assert len(handlers) == 1
    assert package_handler(logger) is handlers[0]


def test_setup_is_idempotent():
    again = setup_logger()
    assert again is logger
    assert len(own_stream_handlers(again)) == 1


def test_setup_ignores_foreign_handlers():
    target = logging.getLogger("purefn-test-foreign")
    foreign = logging.NullHandler()
    target.addHandler(foreign)
    try:
        configured = setup_logger("purefn-test-foreign", stream=io.StringIO())
        assert package_handler(configured) is not None
        assert foreign in configured.handlers
    finally:
        target.removeHandler(foreign)


def test_custom_stream_and_format():
    stream = io.StringIO()
    custom = setup_logger(
        "purefn-test-stream",
        level="info",
        format_string="%(levelname)s|%(message)s",
        stream=stream,
    )
    custom.info("hello")
    assert stream.getvalue() == "INFO|hello\n"


def test_custom_logger_level():
    custom = setup_logger("purefn-test-custom", level="error", stream=io.StringIO())
    assert custom.level == logging.ERROR


def test_get_logger_is_child():
    child = get_logger("purefn.functional.higher_order")
    assert child.name == "purefn.higher_order"
    assert child.parent is logger


def test_set_level_reaches_children(restore_level):
    child = get_logger("purefn.functional.purity")
    set_level("debug")
    assert child.getEffectiveLevel() == logging.DEBUG
    set_level(logging.WARNING)
    assert child.getEffectiveLevel() == logging.WARNING
