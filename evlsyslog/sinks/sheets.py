"""
Logs messages to a Google Sheet through an Apps Script web app.

The web app receives a JSON body and inserts a row with the timestamp,
event, zone, zone name and message columns.  Apps Script answers a
successful POST with a redirect, which is followed.
"""

import httpx

from .base import Notifier
from ..util import format_local_time


class SheetsWebhook(Notifier):
    """
    Posts every message to a Google Sheets web app.
    """

    name = 'google sheets'

    TIMEOUT = 15.0

    def __init__(self, url=None, dry_run=False, executor=None, client=None):
        """
        Constructor

        :param url: Apps Script web app URL
        :type url: string
        :param client: HTTP client to use, one is created if not given
        :type client: :py:class:`httpx.Client`
        """
        Notifier.__init__(self, dry_run=dry_run, executor=executor)

        self.url = url
        self._client = client

    @property
    def enabled(self):
        return bool(self.url)

    @staticmethod
    def payload(message):
        """
        Builds the JSON body for a message.

        :param message: classified message
        :type message: :py:class:`~evlsyslog.messages.BaseMessage`

        :returns: dict
        """
        return {
            'timestamp': format_local_time(message.timestamp),
            'event': message.event,
            'zone': message.zone,
            'zoneName': message.zone_name or '',
            'message': message.message,
            'raw': message.raw,
        }

    def handle_message(self, sender, message=None, **kwargs):
        """
        Event handler for :py:attr:`~evlsyslog.listener.SyslogListener.on_message`.
        """
        if not self.url:
            return None

        return self.submit(message.event, self._post, self.payload(message))

    def _post(self, payload):
        if self._client is not None:
            response = self._client.post(self.url, json=payload, follow_redirects=True)
        else:
            with httpx.Client(timeout=self.TIMEOUT, follow_redirects=True) as client:
                response = client.post(self.url, json=payload)

        response.raise_for_status()
