"""
E-mail alerts for alarm, zone open and rule events.
"""

import logging
import smtplib
from email.mime.text import MIMEText

from .base import Notifier
from ..messages import AlarmMessage, ZoneMessage
from ..util import format_local_time

logger = logging.getLogger(__name__)


class EmailNotifier(Notifier):
    """
    Sends alert e-mails over SMTP.
    """

    name = 'email'

    FROM_ADDRESS = 'EnvisaLink Syslog <root@localhost>'

    def __init__(self, smtp_server=None, to_address=None, from_address=FROM_ADDRESS, smtp_port=25,
                 smtp_username=None, smtp_password=None, email_on_alarm=True, email_on_open=False,
                 dry_run=False, executor=None):
        """
        Constructor

        :param smtp_server: SMTP server host name
        :type smtp_server: string
        :param to_address: alert recipient; comma separated for several
        :type to_address: string
        :param from_address: sender address
        :type from_address: string
        :param smtp_port: SMTP server port
        :type smtp_port: int
        :param smtp_username: user to authenticate as, if needed
        :type smtp_username: string
        :param smtp_password: password for ``smtp_username``
        :type smtp_password: string
        :param email_on_alarm: send an e-mail on alarm events
        :type email_on_alarm: bool
        :param email_on_open: send an e-mail when a zone opens
        :type email_on_open: bool
        """
        Notifier.__init__(self, dry_run=dry_run, executor=executor)

        self.smtp_server = smtp_server
        self.smtp_port = smtp_port
        self.smtp_username = smtp_username
        self.smtp_password = smtp_password
        self.from_address = from_address
        self.to_address = to_address
        self.email_on_alarm = email_on_alarm
        self.email_on_open = email_on_open

    @property
    def enabled(self):
        return bool(self.smtp_server and self.to_address)

    def send(self, subject, text):
        """
        Queues an e-mail for delivery.

        :param subject: subject line
        :type subject: string
        :param text: message body
        :type text: string
        """
        return self.submit(subject, self._send, subject, text)

    def _send(self, subject, text):
        msg = MIMEText(text)
        msg['Subject'] = subject
        msg['From'] = self.from_address
        msg['To'] = self.to_address

        recipients = [address.strip() for address in self.to_address.split(',') if address.strip()]

        s = smtplib.SMTP(self.smtp_server, self.smtp_port, timeout=30)
        try:
            # Authenticate if needed
            if self.smtp_username is not None:
                s.starttls()
                s.login(self.smtp_username, self.smtp_password)

            s.sendmail(self.from_address, recipients, msg.as_string())
        finally:
            s.quit()

        logger.info('Email sent: %s', subject)

    def handle_message(self, sender, message=None, **kwargs):
        """
        Event handler for :py:attr:`~evlsyslog.listener.SyslogListener.on_message`.
        """
        if self.email_on_alarm and message.event == AlarmMessage.ALARM:
            self.send(
                'EnvisaLink Alarm: {0}'.format(message.zone_name or 'System'),
                'An alarm event was detected.\n\nDetails:\n'
                '- Event: {0}\n- Zone: {1}\n- Raw message: {2}\n- Time: {3}'.format(
                    message.event, message.zone_name or 'N/A', message.message,
                    format_local_time(message.timestamp))
            )

        if self.email_on_open and message.event == ZoneMessage.OPEN:
            self.send(
                'Zone Opened: {0}'.format(message.zone_name),
                'A zone was opened.\n\nDetails:\n'
                '- Zone: {0}\n- Time: {1}\n- Raw message: {2}'.format(
                    message.zone_name, format_local_time(message.timestamp), message.message)
            )

    def send_rule_alert(self, rule, zone, zone_name, opened_at):
        """
        Sends the alert for an open duration rule.
        """
        return self.send(
            '{0} open for {1}+ minutes'.format(zone_name, rule.minutes),
            '{0} has been open since {1}.\n\nRule: {2}\nZone: {3}\nDuration: {4} minutes'.format(
                zone_name, format_local_time(opened_at), rule.description or 'Open duration alert',
                zone, rule.minutes)
        )
