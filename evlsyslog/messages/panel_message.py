"""
Message representations received from the EnvisaLink syslog client.

:py:class:`AlarmMessage`: Free-text alarm report.

:py:class:`ArmMessage`: Free-text arm or disarm report.
"""

import re

from .base_message import BaseMessage
from ..util import InvalidMessageError


class AlarmMessage(BaseMessage):
    """
    Represents any message mentioning an alarm, e.g. ``Alarm Activated``.
    """

    ALARM = 'Alarm'

    _alarm_regex = re.compile(r'alarm', re.IGNORECASE)

    def __init__(self, data=None, content=None, zones=None):
        """
        Constructor

        :param data: raw message text
        :type data: string
        :param content: message content with the header already stripped
        :type content: string
        :param zones: unused, accepted so all message types share a signature
        :type zones: dict
        """
        BaseMessage.__init__(self, data, content)

        if not self._alarm_regex.search(self.message):
            raise InvalidMessageError('Not an alarm message: {0}'.format(self.message))

        self.event = self.ALARM


class ArmMessage(BaseMessage):
    """
    Represents an arm or disarm report, e.g. ``Armed Away`` or ``Disarmed``.

    NOTE: "alarm" contains "arm", so this must only be tried after
          :py:class:`AlarmMessage` has been ruled out.
    """

    DISARMED = 'Disarmed'
    ARMED_STAY = 'Armed Stay'
    ARMED_AWAY = 'Armed Away'
    ARMED_NIGHT = 'Armed Night'
    ARMED = 'Armed'

    # Checked in order, first match wins.
    MODES = [
        (re.compile(r'disarm', re.IGNORECASE), DISARMED),
        (re.compile(r'stay', re.IGNORECASE), ARMED_STAY),
        (re.compile(r'away', re.IGNORECASE), ARMED_AWAY),
        (re.compile(r'night|instant', re.IGNORECASE), ARMED_NIGHT),
    ]

    _arm_regex = re.compile(r'arm', re.IGNORECASE)

    def __init__(self, data=None, content=None, zones=None):
        """
        Constructor

        :param data: raw message text
        :type data: string
        :param content: message content with the header already stripped
        :type content: string
        :param zones: unused, accepted so all message types share a signature
        :type zones: dict
        """
        BaseMessage.__init__(self, data, content)

        self._parse_message(self.message)

    def _parse_message(self, content):
        """
        Works out which arm mode the message describes.

        :param content: message content
        :type content: string

        :raises: :py:class:`~evlsyslog.util.InvalidMessageError`
        """
        if not self._arm_regex.search(content):
            raise InvalidMessageError('Not an arm message: {0}'.format(content))

        self.event = self.ARMED
        for regex, label in self.MODES:
            if regex.search(content):
                self.event = label
                break

