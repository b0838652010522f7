"""
This module contains the base device type for syslog sources.
"""

import logging
import threading

from ..util import CommError, TimeoutError
from ..event import event

logger = logging.getLogger(__name__)


class Device(object):
    """
    Base class for all syslog source types.
    """

    # Generic device events
    on_open = event.Event("This event is called when the device has been opened.\n\n**Callback definition:** *def callback(device)*")
    on_close = event.Event("This event is called when the device has been closed.\n\n**Callback definition:** *def callback(device)*")
    on_read = event.Event("This event is called when a datagram has been read from the device.\n\n**Callback definition:** *def callback(device, data, address)*")

    def __init__(self):
        """
        Constructor
        """
        self._id = ''
        self._device = None
        self._running = False
        self._read_thread = None

    def __enter__(self):
        """
        Support for context manager __enter__.
        """
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        """
        Support for context manager __exit__.
        """
        self.close()

        return False

    @property
    def id(self):
        """
        Retrieve the device ID.

        :returns: identification string for the device
        """
        return self._id

    @id.setter
    def id(self, value):
        """
        Sets the device ID.

        :param value: device identification string
        :type value: string
        """
        self._id = value

    def is_reader_alive(self):
        """
        Indicates whether or not the reader thread is alive.

        :returns: whether or not the reader thread is alive
        """
        return self._read_thread is not None and self._read_thread.is_alive()

    def stop_reader(self):
        """
        Stops the reader thread.
        """
        if self._read_thread is not None:
            self._read_thread.stop()

    def close(self):
        """
        Closes the device.
        """
        self._running = False
        self.stop_reader()

        if self._device is not None:
            try:
                self._device.close()
            except OSError as err:
                logger.debug('Error closing device %s: %s', self._id, err)

        self.on_close()

    class ReadThread(threading.Thread):
        """
        Reader thread which receives datagrams from the device.
        """

        READ_TIMEOUT = 1
        """Timeout for the reader thread."""

        def __init__(self, device):
            """
            Constructor

            :param device: device used by the reader thread
            :type device: :py:class:`~evlsyslog.devices.Device`
            """
            threading.Thread.__init__(self, name='evlsyslog-reader')
            self.daemon = True
            self._device = device
            self._running = False

        def stop(self):
            """
            Stops the running thread.
            """
            self._running = False

        def run(self):
            """
            The actual read process.
            """
            self._running = True

            while self._running:
                try:
                    self._device.read_datagram(timeout=self.READ_TIMEOUT)

                except TimeoutError:
                    pass

                except CommError as err:
                    if self._running:
                        logger.error('Receive failed, closing device: %s', err)
                        self._running = False
                        self._device.close()
