"""
Provides utility classes for the EnvisaLink syslog listener.
"""

import datetime


class NoDeviceError(Exception):
    """
    The listening socket could not be opened.
    """
    pass


class CommError(Exception):
    """
    There was an error receiving from the socket.
    """
    pass


class TimeoutError(Exception):
    """
    There was a timeout while waiting for a datagram.
    """
    pass


class InvalidMessageError(Exception):
    """
    The message does not have the shape the message type expects.
    """
    pass


class ConfigError(Exception):
    """
    A zone or rule definition could not be understood.
    """
    pass


def format_local_time(value=None):
    """
    Formats a timestamp the way it is shown in log lines and notifications.

    :param value: timestamp to format, defaults to now
    :type value: :py:class:`datetime.datetime`

    :returns: string like ``Jan 01, 2024, 12:00:00 PM``
    """
    if value is None:
        value = datetime.datetime.now()

    return value.strftime('%b %d, %Y, %I:%M:%S %p')
