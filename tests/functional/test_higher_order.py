import logging
from unittest.mock import MagicMock, patch

import pytest
from purefn.core.models import InvocationRecord
from purefn.functional.higher_order import tap, with_log
from purefn.functional.pure import add


@pytest.fixture
def mock_logger():
    return MagicMock(spec=logging.Logger)


def test_with_log_returns_unwrapped_result(mock_logger):
    logged_add = with_log(add, logger=mock_logger)

    assert logged_add(3, 4) == 7 == add(3, 4)
    mock_logger.log.assert_called_once_with(logging.INFO, "Calling %s", "add(3, 4)")


def test_with_log_preserves_metadata(mock_logger):
    logged_add = with_log(add, logger=mock_logger)
    assert logged_add.__name__ == "add"
    assert logged_add.__wrapped__ is add


def test_with_log_records_last_call(mock_logger):
    logged_add = with_log(add, logger=mock_logger)
    assert logged_add.last_call is None

    logged_add(3, b=4)

    record = logged_add.last_call
    assert isinstance(record, InvocationRecord)
    assert record.args == (3,)
    assert record.kwargs == {"b": 4}
    assert record.result == 7
    assert record.succeeded


def test_with_log_as_decorator_with_level(mock_logger):
    @with_log(logger=mock_logger, level=logging.DEBUG)
    def double(x):
        return 2 * x

    assert double(21) == 42
    mock_logger.log.assert_called_once_with(
        logging.DEBUG, "Calling %s", f"{double.__qualname__}(21)"
    )
    assert double.__qualname__.endswith("<locals>.double")


def test_with_log_positional_logger(mock_logger):
    logged_add = with_log(add, mock_logger, logging.WARNING)

    assert logged_add(1, 1) == 2
    mock_logger.log.assert_called_once_with(logging.WARNING, "Calling %s", "add(1, 1)")


def test_with_log_bare_decorator():
    @with_log
    def negate(x):
        return -x

    assert negate(5) == -5
    assert negate.last_call.result == -5


def test_with_log_logs_result_at_debug(mock_logger):
    with patch("purefn.functional.higher_order.settings") as settings:
        settings.LOG_RESULTS = True
        with_log(add, logger=mock_logger)(1, 2)
        mock_logger.debug.assert_called_once_with("%s returned %r", "add", 3)

        mock_logger.reset_mock()
        settings.LOG_RESULTS = False
        with_log(add, logger=mock_logger)(1, 2)
        mock_logger.debug.assert_not_called()


def test_with_log_reraises(mock_logger):
    def boom():
        raise RuntimeError("nope")

    logged = with_log(boom, logger=mock_logger)
    with pytest.raises(RuntimeError, match="nope"):
        logged()

    mock_logger.exception.assert_called_once()
    assert logged.last_call.error == "RuntimeError('nope')"
    assert not logged.last_call.succeeded


def test_with_log_rejects_non_callable():
    with pytest.raises(TypeError):
        with_log(42)


def test_tap_passes_value_through():
    seen = []
    tapped = tap(seen.append)

    assert tapped("value") == "value"
    assert seen == ["value"]
