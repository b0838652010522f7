"""
Base class for outbound notification sinks.
"""

import logging
from concurrent.futures import ThreadPoolExecutor

logger = logging.getLogger(__name__)


class Notifier(object):
    """
    Base class for sinks that talk to the network.

    Deliveries run on a thread pool so a slow or unreachable service never
    holds up the receipt of the next datagram.  Failures are logged inside the
    worker and never reach the caller.
    """

    name = 'notifier'
    """Name used in log messages."""

    MAX_WORKERS = 4
    """Default size of the delivery pool."""

    def __init__(self, dry_run=False, executor=None):
        """
        Constructor

        :param dry_run: log what would be sent instead of sending it
        :type dry_run: bool
        :param executor: executor to run deliveries on, shared between
                         notifiers if given
        :type executor: :py:class:`concurrent.futures.Executor`
        """
        self.dry_run = dry_run
        self._owns_executor = executor is None
        self._executor = executor

    @property
    def enabled(self):
        """
        Whether the notifier has everything it needs to deliver.
        """
        return True

    def submit(self, description, func, *args, **kwargs):
        """
        Schedules a delivery.

        :param description: short text used in log messages
        :type description: string
        :param func: callable doing the delivery
        :type func: callable

        :returns: :py:class:`concurrent.futures.Future`, or None when nothing
                  was scheduled
        """
        if self.dry_run:
            logger.info('[DRY RUN] Would send %s: %s', self.name, description)
            return None

        if not self.enabled:
            return None

        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=self.MAX_WORKERS,
                                                thread_name_prefix='evlsyslog-{0}'.format(self.name))

        return self._executor.submit(self._deliver, description, func, *args, **kwargs)

    def _deliver(self, description, func, *args, **kwargs):
        """
        Runs a delivery, logging instead of raising on failure.
        """
        try:
            func(*args, **kwargs)

        except Exception as err:
            logger.error('Failed to send %s (%s): %s', self.name, description, err)
            return False

        logger.debug('Sent %s: %s', self.name, description)
        return True

    def close(self, wait=True):
        """
        Shuts down the delivery pool if this notifier created it.

        :param wait: wait for pending deliveries to finish
        :type wait: bool
        """
        if self._owns_executor and self._executor is not None:
            self._executor.shutdown(wait=wait)
            self._executor = None
