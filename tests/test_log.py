"""
Тесты для lathe.log.
"""

import logging

from lathe import log


class TestLog:

    def test_callback_receives_messages(self):
        received = []
        log.set_callback(lambda level, msg: received.append((level, msg)))
        try:
            log.set_level("debug")
            log.info("hello")
            log.warn("careful")
        finally:
            log.set_callback(None)
            log.set_level(logging.WARNING)
        assert ("info", "hello") in received
        assert ("warning", "careful") in received

    def test_exception_with_context(self):
        received = []
        log.set_callback(lambda level, msg: received.append(msg))
        try:
            try:
                raise RuntimeError("broken")
            except RuntimeError as e:
                log.error(e, "While testing")
        finally:
            log.set_callback(None)
        assert len(received) == 1
        assert received[0].startswith("While testing: RuntimeError: broken")
        assert "Traceback" in received[0]

    def test_callback_removed(self):
        received = []
        log.set_callback(lambda level, msg: received.append(msg))
        log.set_callback(None)
        log.error("nobody listens")
        assert received == []
