"""
Message representations received from the EnvisaLink syslog client.

:py:class:`CIDMessage`: Contact ID report, e.g. ``CID Event: 3441010020``.
"""

import re

from .base_message import BaseMessage
from .cid import parse_contact_id
from ..util import InvalidMessageError


class CIDMessage(BaseMessage):
    """
    Represents a Contact ID report embedded in the message text.
    """

    CID_REGEX = re.compile(r'CID\s+Event:\s*([0-9]{9,10})', re.IGNORECASE)
    """Contact ID report pattern."""

    contact_id = None
    """The decoded :py:class:`~evlsyslog.messages.cid.ContactID`"""
    qualifier = None
    """Contact ID qualifier digit"""
    event_code = None
    """Three digit Contact ID event code"""
    description = None
    """Human-readable description of the event code"""

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
        Finds and decodes the Contact ID code in the message content.

        :param content: message content
        :type content: string

        :raises: :py:class:`~evlsyslog.util.InvalidMessageError`
        """
        match = self.CID_REGEX.search(content)
        if match is None:
            raise InvalidMessageError('Not a Contact ID message: {0}'.format(content))

        cid = parse_contact_id(match.group(1))
        if cid is None:
            raise InvalidMessageError('Invalid Contact ID code: {0}'.format(match.group(1)))

        self.contact_id = cid
        self.qualifier = cid.qualifier
        self.event_code = cid.event_code
        self.description = cid.description
        self.event = cid.event
        self.partition = cid.partition
        self.user = cid.zone_or_user

        # NOTE: partition or user 0 can't be told apart from "not reported"
        #       and is left out of the annotation.
        details = [cid.description]
        if cid.partition:
            details.append('partition {0}'.format(cid.partition))
        if cid.zone_or_user:
            details.append('user {0}'.format(cid.zone_or_user))

        self.message = '{0} ({1})'.format(content, ', '.join(details))

    def dict(self, **kwargs):
        """
        Dictionary representation.
        """
        return BaseMessage.dict(
            self,
            qualifier=self.qualifier,
            event_code=self.event_code,
            description=self.description,
            **kwargs
        )
