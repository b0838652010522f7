import datetime
import re

from reprlib import repr


VENDOR_MARKERS = ['ENVISALINK', 'envisalink', 'EVL4', 'evl4']
"""Product and model tags the EnvisaLink puts in front of its messages."""

SYSLOG_TAG_END = ']: '
"""End of a syslog ``TAG[PID]:`` field."""

_LEADING_SEPARATORS = re.compile(r'^[\[:\]\s]+')


def strip_header(data):
    """
    Isolates the message content from any syslog or vendor framing.

    Handles both the full syslog preamble
    (``<134>Jan  1 12:00:00 evl4 ENVISALINK[1234]: Zone Open: 003``) and the
    bare vendor prefix (``EVL4: Zone Open: 003``).  Input without a
    recognizable header is returned unchanged.

    :param data: raw message text
    :type data: string

    :returns: content string, not stripped of surrounding whitespace
    """
    if not data:
        return ''

    idx = data.find(SYSLOG_TAG_END)
    if idx >= 0:
        return data[idx + len(SYSLOG_TAG_END):]

    for marker in VENDOR_MARKERS:
        idx = data.find(marker)
        if idx >= 0:
            return _LEADING_SEPARATORS.sub('', data[idx + len(marker):])

    return data


class BaseMessage(object):
    """
    Base class for classified syslog messages.
    """

    raw = None
    """The trimmed message text, as received"""

    timestamp = None
    """The time the message was classified"""

    event = None
    """Event label, e.g. ``Zone Open`` or ``Armed Stay``"""

    zone = None
    """Zone number for zone events"""

    zone_name = None
    """Friendly zone name for zone events"""

    message = None
    """Message content with any syslog framing removed"""

    partition = None
    """Partition number for Contact ID events"""

    user = None
    """Zone or user number for Contact ID events"""

    def __init__(self, data=None, content=None):
        """
        Constructor

        :param data: raw message text
        :type data: string
        :param content: message content with the header already stripped
        :type content: string
        """
        if data is None:
            data = ''

        if content is None:
            content = strip_header(data)

        self.timestamp = datetime.datetime.now()
        self.raw = data.strip()
        self.message = content.strip()

    def __str__(self):
        """
        String conversion operator.
        """
        if self.zone is not None:
            return '{0}: {1} - {2}'.format(self.event, self.zone_name, self.message)

        return '{0}: {1}'.format(self.event, self.message)

    def dict(self, **kwargs):
        """
        Dictionary representation.
        """
        return dict(
            time=self.timestamp,
            event=self.event,
            zone=self.zone,
            zone_name=self.zone_name,
            partition=self.partition,
            user=self.user,
            message=self.message,
            raw=self.raw,
            **kwargs
        )

    def __repr__(self):
        """
        String representation.
        """
        return repr(self.dict())
