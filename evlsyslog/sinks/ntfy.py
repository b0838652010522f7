"""
Push notifications through ntfy (https://ntfy.sh).
"""

from urllib.parse import quote

import httpx

from .base import Notifier
from ..util import format_local_time


class NtfyNotifier(Notifier):
    """
    Publishes push notifications to an ntfy topic.
    """

    name = 'ntfy'

    SERVER = 'https://ntfy.sh'
    TIMEOUT = 10.0

    def __init__(self, topic=None, server=SERVER, dry_run=False, executor=None, client=None):
        """
        Constructor

        :param topic: ntfy topic, e.g. ``my-envisalink-alerts``
        :type topic: string
        :param server: ntfy server base URL
        :type server: string
        :param client: HTTP client to use, one is created if not given
        :type client: :py:class:`httpx.Client`
        """
        Notifier.__init__(self, dry_run=dry_run, executor=executor)

        self.topic = topic
        self.server = server.rstrip('/')
        self._client = client

    @property
    def enabled(self):
        return bool(self.topic)

    @property
    def url(self):
        """
        URL notifications are posted to.
        """
        return '{0}/{1}'.format(self.server, quote(self.topic, safe=''))

    def send(self, title, message, priority='default'):
        """
        Queues a push notification.

        :param title: notification title
        :type title: string
        :param message: notification body
        :type message: string
        :param priority: ntfy priority (``min``, ``low``, ``default``, ``high``, ``urgent``)
        :type priority: string
        """
        return self.submit(title, self._send, title, message, priority)

    def _send(self, title, message, priority):
        headers = {
            'Title': title.encode('utf-8'),
            'Priority': priority or 'default',
            'Tags': 'house',
        }

        if self._client is not None:
            response = self._client.post(self.url, content=message.encode('utf-8'), headers=headers)
        else:
            with httpx.Client(timeout=self.TIMEOUT) as client:
                response = client.post(self.url, content=message.encode('utf-8'), headers=headers)

        response.raise_for_status()

    def send_rule_alert(self, rule, zone, zone_name, opened_at):
        """
        Sends the push notification for an open duration rule.
        """
        return self.send(
            '{0} open {1}+ min'.format(zone_name, rule.minutes),
            'Open since {0}'.format(format_local_time(opened_at)),
            'high'
        )
