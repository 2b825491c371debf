import io
import logging

from permgen._logging import setup_logging, teardown_logging
from permgen.cli import main


def _permgen_logger():
    return logging.getLogger("permgen")


def test_setup_does_not_propagate():
    root = logging.getLogger()
    seen = io.StringIO()
    root_handler = logging.StreamHandler(seen)
    root.addHandler(root_handler)
    ours = io.StringIO()
    try:
        setup_logging("DEBUG", ours)
        logging.getLogger("permgen.heap").debug("once only")
    finally:
        teardown_logging()
        root.removeHandler(root_handler)
    assert ours.getvalue().count("once only") == 1
    assert "once only" not in seen.getvalue()


def test_setup_closes_replaced_handlers(monkeypatch):
    setup_logging("INFO", io.StringIO())
    first = _permgen_logger().handlers[0]
    closed = []
    monkeypatch.setattr(first, "close", lambda: closed.append(first))
    setup_logging("INFO", io.StringIO())
    try:
        assert closed == [first]
        assert _permgen_logger().handlers != [first]
        assert len(_permgen_logger().handlers) == 1
    finally:
        teardown_logging()


def test_teardown_restores_logger(monkeypatch):
    setup_logging("DEBUG", io.StringIO())
    handler = _permgen_logger().handlers[0]
    closed = []
    monkeypatch.setattr(handler, "close", lambda: closed.append(handler))
    teardown_logging()
    logger = _permgen_logger()
    assert closed == [handler]
    assert logger.handlers == []
    assert logger.level == logging.NOTSET
    assert logger.propagate is True


def test_main_leaves_no_logging_state():
    out, err = io.StringIO(), io.StringIO()
    assert main(["-v", "-c", "a", "b"], stdout=out, stderr=err) == 0
    assert "permuting 2 elements" in err.getvalue()
    logger = _permgen_logger()
    assert logger.handlers == []
    assert logger.level == logging.NOTSET
    assert logger.propagate is True


def test_main_restores_on_error():
    out, err = io.StringIO(), io.StringIO()
    assert main(["-a", "bogus", "a"], stdout=out, stderr=err) == 1
    assert _permgen_logger().handlers == []
    assert _permgen_logger().propagate is True
