"""
This module contains :py:class:`UDPDevice`, which receives the syslog
datagrams an EnvisaLink sends once its Syslog Client is pointed at this host.

To enable it, set the Syslog Client server address in the EnvisaLink web
interface to this machine and pick a facility between 16 and 23 (00 turns it
off).  The listener does not use the TPI port, so it won't conflict with
other TPI clients.
"""

import errno
import logging
import select
import socket

from .base_device import Device
from ..util import CommError, TimeoutError, NoDeviceError

logger = logging.getLogger(__name__)

SYSLOG_PREAMBLE = '<166>ENVISALINK[001C2A02BB1F]:  '
"""Preamble of a real EVL4 syslog datagram, used for test messages."""


class UDPDevice(Device):
    """
    Device that receives syslog datagrams on a UDP port.
    """

    BUFFER_SIZE = 4096
    """Maximum datagram size."""

    @property
    def interface(self):
        """
        Retrieves the address the device listens on.

        :returns: tuple of host and port
        """
        return (self._host, self._port)

    @interface.setter
    def interface(self, value):
        """
        Sets the address to listen on.

        :param value: Tuple containing the host and port to use
        :type value: tuple
        """
        self._host, self._port = value

    def __init__(self, interface=("0.0.0.0", 514), buffer_size=BUFFER_SIZE):
        """
        Constructor

        :param interface: Tuple containing the address and port to bind
        :type interface: tuple
        :param buffer_size: maximum datagram size
        :type buffer_size: int
        """
        Device.__init__(self)

        self._host, self._port = interface
        self._buffer_size = buffer_size

    def open(self, no_reader_thread=False):
        """
        Opens the device.

        :param no_reader_thread: whether or not to automatically start the
                                 reader thread.
        :type no_reader_thread: bool

        :raises: :py:class:`~evlsyslog.util.NoDeviceError`
        """
        try:
            self._read_thread = Device.ReadThread(self)

            self._device = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
            self._device.bind((self._host, self._port))

            self._host, self._port = self._device.getsockname()
            self._id = '{0}:{1}'.format(self._host, self._port)

        except socket.error as err:
            if self._device is not None:
                self._device.close()
                self._device = None

            if err.errno == errno.EACCES:
                raise NoDeviceError('Permission denied binding UDP port {0}. Ports below 1024 need root; '
                                    'use a higher port and redirect with iptables.'.format(self._port), err)

            raise NoDeviceError('Error opening UDP socket at {0}:{1}'.format(self._host, self._port), err)

        else:
            self._running = True
            logger.debug('Listening for syslog datagrams on %s', self._id)
            self.on_open()

            if not no_reader_thread:
                self._read_thread.start()

        return self

    def fileno(self):
        """
        Returns the file number associated with the device

        :returns: int
        """
        return self._device.fileno()

    def read_datagram(self, timeout=0.0):
        """
        Receives a single datagram.

        :param timeout: read timeout in seconds, 0 waits forever
        :type timeout: float

        :returns: datagram text
        :raises: :py:class:`~evlsyslog.util.CommError`, :py:class:`~evlsyslog.util.TimeoutError`
        """
        try:
            read_ready, _, _ = select.select([self._device], [], [], timeout if timeout > 0 else None)

            if len(read_ready) == 0:
                raise TimeoutError('Timeout while waiting for a datagram.')

            data, address = self._device.recvfrom(self._buffer_size)

        except (socket.error, ValueError) as err:
            raise CommError('Error reading from device: {0}'.format(str(err)), err)

        self.on_read(data=data, address=address)

        return data.decode('utf-8', 'replace')


def send_datagram(message, interface=('127.0.0.1', 514), preamble=SYSLOG_PREAMBLE):
    """
    Sends a fake EnvisaLink syslog message, for testing a running listener.

    :param message: message content, e.g. ``Zone Closed: 4``
    :type message: string
    :param interface: Tuple containing the host and port to send to
    :type interface: tuple
    :param preamble: syslog framing put in front of the message
    :type preamble: string

    :returns: the full datagram text that was sent
    """
    datagram = '{0}{1}'.format(preamble, message)

    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        sock.sendto(datagram.encode('utf-8'), interface)
    finally:
        sock.close()

    return datagram
