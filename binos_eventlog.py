#!/usr/bin/env python3
"""
Event log for Binary OS
Appends timestamped lines to a plain text log file
"""

import logging
import sys

LOG_FORMAT = '[%(asctime)s] %(message)s'

logger = logging.getLogger(__name__)


class EventFileHandler(logging.FileHandler):
    """FileHandler that reports failed writes to a callback instead of stderr tracebacks"""

    def __init__(self, filename, on_error=None):
        super().__init__(filename, mode='a', encoding='utf-8')
        self.on_error = on_error

    def handleError(self, record):
        error = sys.exc_info()[1]
        if self.on_error is None:
            super().handleError(record)
        else:
            self.on_error(error)


class EventLog:
    def __init__(self, log_file, on_error=None):
        self.log_file = log_file
        self.failure = None
        self.handler = None
        self._on_error = on_error

        # Private logger, not registered with the logging manager
        self.logger = logging.Logger(f"binary_os.events.{log_file}", logging.INFO)
        self.logger.propagate = False

        try:
            self.handler = EventFileHandler(log_file, on_error)
        except OSError as e:
            self.failure = e
            logger.debug("Event log %s unavailable: %s", log_file, e)
            return

        self.handler.setFormatter(logging.Formatter(LOG_FORMAT))
        self.logger.addHandler(self.handler)

    @property
    def available(self):
        return self.handler is not None

    @property
    def on_error(self):
        return self._on_error

    @on_error.setter
    def on_error(self, callback):
        """Called with the exception whenever a log line cannot be written"""
        self._on_error = callback
        if self.handler is not None:
            self.handler.on_error = callback

    def operation(self, message):
        """Record a normal event"""
        if self.available:
            self.logger.info(message)

    def error(self, message, code='GEN001'):
        """Record a failure with its error code"""
        if self.available:
            self.logger.error('[ERROR] %s [Code: %s]', message, code)

    def close(self):
        if self.handler is not None:
            self.logger.removeHandler(self.handler)
            self.handler.close()
            self.handler = None
