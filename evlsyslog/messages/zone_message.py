"""
Message representations received from the EnvisaLink syslog client.

:py:class:`ZoneMessage`: A zone changed state, e.g. ``Zone Open: 003``.
"""

import re

from .base_message import BaseMessage
from ..util import InvalidMessageError
from ..zones import resolve_zone_name


class ZoneMessage(BaseMessage):
    """
    Represents a zone event like ``Zone Open: 003`` or ``Zone Closed: 9``.
    """

    ZONE_REGEX = re.compile(
        r'Zone\s+(Opened|Open|Closed|Close|Alarm|Trouble|Tamper|Restored|Restore)\s*:\s*([0-9]+)',
        re.IGNORECASE)
    """Zone event pattern: keyword, action word and zone number."""

    ACTIONS = {
        'open': 'Open',
        'opened': 'Open',
        'close': 'Close',
        'closed': 'Close',
        'alarm': 'Alarm',
        'trouble': 'Trouble',
        'tamper': 'Tamper',
        'restore': 'Restore',
        'restored': 'Restore',
    }
    """Action words and the label each one is reported as."""

    OPEN = 'Zone Open'
    CLOSE = 'Zone Close'

    action = None
    """Normalized action word"""

    def __init__(self, data=None, content=None, zones=None):
        """
        Constructor

        :param data: raw message text
        :type data: string
        :param content: message content with the header already stripped
        :type content: string
        :param zones: zone directory used to name the zone
        :type zones: dict
        """
        BaseMessage.__init__(self, data, content)

        self._parse_message(self.message, zones)

    def _parse_message(self, content, zones):
        """
        Parses the zone action and number out of the message content.

        :param content: message content
        :type content: string
        :param zones: zone directory
        :type zones: dict

        :raises: :py:class:`~evlsyslog.util.InvalidMessageError`
        """
        match = self.ZONE_REGEX.search(content)
        if match is None:
            raise InvalidMessageError('Not a zone message: {0}'.format(content))

        self.action = self.ACTIONS[match.group(1).lower()]
        self.event = 'Zone {0}'.format(self.action)
        self.zone = int(match.group(2), 10)
        self.zone_name = resolve_zone_name(zones, self.zone)

    def dict(self, **kwargs):
        """
        Dictionary representation.
        """
        return BaseMessage.dict(self, action=self.action, **kwargs)
