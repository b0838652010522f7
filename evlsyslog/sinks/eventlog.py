"""
Writes one log line per classified message.
"""

import logging

EVENT_LOGGER = 'evlsyslog.events'


class EventLogSink(object):
    """
    Logs every message as ``<event>: <zone name> - <message>``.

    The line goes through the ``evlsyslog.events`` logger, so it ends up
    wherever logging is configured to write (the listener log file by
    default).
    """

    def __init__(self, logger=None):
        """
        Constructor

        :param logger: logger to write to
        :type logger: :py:class:`logging.Logger`
        """
        self._logger = logger or logging.getLogger(EVENT_LOGGER)

    def handle_message(self, sender, message=None, **kwargs):
        """
        Event handler for :py:attr:`~evlsyslog.listener.SyslogListener.on_message`.
        """
        self._logger.info(str(message))
