"""
Routes triggered open duration rules to the notifier each rule asks for.
"""

import logging

from ..zonetracking import Rule

logger = logging.getLogger(__name__)


class RuleAlertDispatcher(object):
    """
    Sends rule alerts by e-mail, ntfy or both, per :py:attr:`Rule.action`.
    """

    def __init__(self, email=None, ntfy=None):
        """
        Constructor

        :param email: e-mail notifier
        :type email: :py:class:`~evlsyslog.sinks.EmailNotifier`
        :param ntfy: ntfy notifier
        :type ntfy: :py:class:`~evlsyslog.sinks.NtfyNotifier`
        """
        self._email = email
        self._ntfy = ntfy

    def handle_rule_triggered(self, sender, rule=None, zone=None, zone_name=None, opened_at=None, **kwargs):
        """
        Event handler for :py:attr:`~evlsyslog.listener.SyslogListener.on_rule_triggered`.
        """
        if rule.action in (Rule.NTFY, Rule.BOTH):
            if self._ntfy is not None:
                self._ntfy.send_rule_alert(rule, zone, zone_name, opened_at)
            else:
                logger.warning('Rule %s wants ntfy but ntfy is not configured', rule.id)

        if rule.action in (Rule.EMAIL, Rule.BOTH):
            if self._email is not None:
                self._email.send_rule_alert(rule, zone, zone_name, opened_at)
            else:
                logger.warning('Rule %s wants email but email is not configured', rule.id)
