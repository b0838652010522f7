"""
Message representations received from the EnvisaLink syslog client.

:py:class:`OtherMessage`: Anything that isn't recognized.
"""

from .base_message import BaseMessage


class OtherMessage(BaseMessage):
    """
    Represents a message that no other message type recognized.  Still
    logged, and never fails to construct.
    """

    OTHER = 'Other'

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

        self.event = self.OTHER
