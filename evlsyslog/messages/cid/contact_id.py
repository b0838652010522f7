"""
Decoding of Ademco Contact ID codes embedded in syslog text.
"""

import re

from .events import get_event_description, get_event_label

_CODE_REGEX = re.compile(r'[0-9]{9}')


class ContactID(object):
    """
    A decoded Contact ID code.
    """

    qualifier = None
    """Qualifier digit. 1 is a new event/opening, 3 a restore/closing."""
    event_code = None
    """Three digit event code, zero padded."""
    partition = 0
    """Partition number."""
    zone_or_user = 0
    """Zone or user number, depending on the event."""
    event = None
    """Friendly event label."""
    description = None
    """Human-readable description of the event code."""

    def __init__(self, qualifier, event_code, partition, zone_or_user):
        """
        Constructor

        :param qualifier: qualifier digit
        :type qualifier: string
        :param event_code: three digit event code
        :type event_code: string
        :param partition: partition number
        :type partition: int
        :param zone_or_user: zone or user number
        :type zone_or_user: int
        """
        self.qualifier = qualifier
        self.event_code = event_code
        self.partition = partition
        self.zone_or_user = zone_or_user
        self.event = get_event_label(qualifier, event_code)
        self.description = get_event_description(event_code)

    @property
    def code(self):
        """
        The event code as an integer.
        """
        return int(self.event_code)

    def __repr__(self):
        return 'ContactID({0}, {1}, partition {2}, {3})'.format(
            self.qualifier, self.event_code, self.partition, self.zone_or_user)


def parse_contact_id(digits):
    """
    Parses a Contact ID code like ``3441010020``.

    :param digits: nine or ten digit Contact ID string
    :type digits: string

    :returns: :py:class:`ContactID`, or None if the code is too short or
              malformed
    """
    if not digits or not _CODE_REGEX.match(digits):
        return None

    return ContactID(
        qualifier=digits[0],
        event_code=digits[1:4],
        partition=int(digits[4:6], 10),
        zone_or_user=int(digits[6:9], 10)
    )
