"""
Turns raw EnvisaLink syslog text into classified messages.

The classifier is a pure function: it keeps no state between calls, does no
I/O and never raises for text input.  Unrecognized input is reported as an
``Other`` message rather than an error.
"""

from .messages import ZoneMessage, AlarmMessage, ArmMessage, CIDMessage, OtherMessage, strip_header
from .util import InvalidMessageError
from .zones import resolve_zone_name


MESSAGE_TYPES = (ZoneMessage, AlarmMessage, ArmMessage, CIDMessage)
"""Message types tried in order.  AlarmMessage must precede ArmMessage."""


def classify(data, zones=None):
    """
    Classifies a single syslog message.

    :param data: raw datagram text
    :type data: string
    :param zones: zone directory mapping zone numbers to friendly names
    :type zones: dict

    :returns: one of :py:class:`~evlsyslog.messages.ZoneMessage`,
              :py:class:`~evlsyslog.messages.AlarmMessage`,
              :py:class:`~evlsyslog.messages.ArmMessage`,
              :py:class:`~evlsyslog.messages.CIDMessage` or
              :py:class:`~evlsyslog.messages.OtherMessage`
    """
    if data is None:
        data = ''

    if zones is None:
        zones = {}

    content = strip_header(data)

    for message_type in MESSAGE_TYPES:
        try:
            return message_type(data, content, zones)

        except InvalidMessageError:
            continue

    return OtherMessage(data, content, zones)


__all__ = ['classify', 'resolve_zone_name', 'strip_header', 'MESSAGE_TYPES']
