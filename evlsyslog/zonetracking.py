"""
Provides open duration alert rules for zones.

A rule like ``{"zone": 3, "condition": "open_duration", "minutes": 20,
"action": "email"}`` raises an alert when zone 3 has been open for 20
minutes without a matching close.  Timers are keyed by (zone, rule id) and
cancelled as soon as the zone closes.
"""

import datetime
import logging
import threading

from .event import event
from .messages import ZoneMessage
from .util import ConfigError
from .zones import canonical_zone, resolve_zone_name

logger = logging.getLogger(__name__)


class Rule(object):
    """
    Representation of an alert rule.
    """

    # Constants
    OPEN_DURATION = 'open_duration'
    """Condition: zone stays open longer than the configured minutes."""

    CONDITIONS = [OPEN_DURATION]

    EMAIL = 'email'
    NTFY = 'ntfy'
    BOTH = 'both'

    ACTIONS = [EMAIL, NTFY, BOTH]

    DEFAULT_MINUTES = 20

    def __init__(self, zone, minutes=DEFAULT_MINUTES, action=EMAIL, description='',
                 condition=OPEN_DURATION, repeat_minutes=None, id=None):
        """
        Constructor

        :param zone: zone number the rule watches
        :type zone: int or string
        :param minutes: minutes the zone may stay open before alerting
        :type minutes: float
        :param action: ``email``, ``ntfy`` or ``both``
        :type action: string
        :param description: free text shown in the alert
        :type description: string
        :param condition: rule condition, only ``open_duration`` exists
        :type condition: string
        :param repeat_minutes: repeat the alert this often while still open
        :type repeat_minutes: float
        :param id: rule identifier, defaults to
                   ``<condition>:<zone>:<minutes>:<action>[:<repeat_minutes>]``
        :type id: string
        """
        self.zone = canonical_zone(zone)
        self.minutes = minutes
        self.action = action
        self.description = description
        self.condition = condition
        self.repeat_minutes = repeat_minutes
        self.id = id if id is not None else self._default_id()

    def _default_id(self):
        parts = [self.condition, self.zone, self.minutes, self.action]
        if self.repeat_minutes:
            parts.append(self.repeat_minutes)

        return ':'.join(str(part) for part in parts)

    @classmethod
    def from_dict(cls, data):
        """
        Builds a rule from its JSON representation.

        :param data: rule definition
        :type data: dict

        :returns: :py:class:`Rule`
        :raises: :py:class:`~evlsyslog.util.ConfigError`
        """
        try:
            zone = data['zone']
            minutes = float(data.get('minutes') or cls.DEFAULT_MINUTES)
            repeat_minutes = data.get('repeat_minutes')
            if repeat_minutes is not None:
                repeat_minutes = float(repeat_minutes)

        except (KeyError, TypeError, ValueError, AttributeError) as err:
            raise ConfigError('Invalid rule {0!r}: {1}'.format(data, err))

        condition = data.get('condition', cls.OPEN_DURATION)
        if condition not in cls.CONDITIONS:
            raise ConfigError('Unknown rule condition: {0}'.format(condition))

        action = data.get('action', cls.EMAIL)
        if action not in cls.ACTIONS:
            raise ConfigError('Unknown rule action: {0}'.format(action))

        if minutes == int(minutes):
            minutes = int(minutes)

        return cls(zone, minutes=minutes, action=action, description=data.get('description', ''),
                   condition=condition, repeat_minutes=repeat_minutes, id=data.get('id'))

    def __repr__(self):
        """
        Human readable representation operator.
        """
        return 'Rule({0}, zone {1}, {2} min, {3})'.format(self.condition, self.zone, self.minutes, self.action)


class RuleTracker(object):
    """
    Tracks open zones against their open duration rules.
    """

    on_trigger = event.Event("This event is called when a zone has been open longer than a rule allows.\n\n**Callback definition:** *def callback(tracker, rule, zone, zone_name, opened_at)*")

    @property
    def rules(self):
        """
        Returns the rules being tracked.

        :returns: list of :py:class:`Rule`
        """
        return self._rules

    @rules.setter
    def rules(self, value):
        """
        Replaces the rules being tracked.  Pending timers are kept.

        :param value: new rules
        :type value: list of :py:class:`Rule`
        """
        self._rules = list(value or [])

    def __init__(self, rules=None, timer_class=threading.Timer):
        """
        Constructor

        :param rules: rules to track
        :type rules: list of :py:class:`Rule`
        :param timer_class: timer factory, called like :py:class:`threading.Timer`
        :type timer_class: callable
        """
        self._rules = list(rules or [])
        self._timer_class = timer_class
        self._timers = {}
        self._opened_at = {}
        self._lock = threading.Lock()

    def update(self, message, zones=None):
        """
        Starts or cancels timers based on a zone message.

        :param message: classified message
        :type message: :py:class:`~evlsyslog.messages.BaseMessage`
        :param zones: zone directory used to name the zone in alerts
        :type zones: dict
        """
        if message.zone is None:
            return

        zone = canonical_zone(message.zone)

        if message.event == ZoneMessage.OPEN:
            for rule in self._rules:
                if rule.condition == Rule.OPEN_DURATION and rule.zone == zone:
                    self._start(rule, zone, resolve_zone_name(zones, zone), message.timestamp)

        elif message.event == ZoneMessage.CLOSE:
            self.cancel_zone(zone)

    def pending(self):
        """
        Lists the (zone, rule id) pairs that have a timer running.

        :returns: list of tuples
        """
        with self._lock:
            return sorted(self._timers.keys())

    def cancel_zone(self, zone):
        """
        Cancels every timer running for a zone.

        :param zone: zone number
        :type zone: int or string
        """
        zone = canonical_zone(zone)

        with self._lock:
            keys = [key for key in self._timers if key[0] == zone]
            for key in keys:
                self._timers.pop(key).cancel()
                self._opened_at.pop(key, None)

        if keys:
            logger.debug('Timer cleared: zone %s closed before alert', zone)

    def cancel_all(self):
        """
        Cancels all running timers.
        """
        with self._lock:
            for timer in self._timers.values():
                timer.cancel()

            self._timers.clear()
            self._opened_at.clear()

    def _start(self, rule, zone, zone_name, opened_at):
        """
        (Re)starts the timer for a rule.
        """
        key = (zone, rule.id)

        with self._lock:
            timer = self._timers.pop(key, None)
            if timer is not None:
                timer.cancel()

            self._opened_at[key] = opened_at or datetime.datetime.now()
            self._schedule(key, rule, zone_name, rule.minutes)

        logger.debug('Timer set: %s will alert in %s min if not closed', zone_name, rule.minutes)

    def _schedule(self, key, rule, zone_name, minutes):
        """
        Creates and starts a timer.  Caller holds the lock.
        """
        timer = self._timer_class(minutes * 60, self._expire, args=(key, rule, zone_name))
        timer.daemon = True
        self._timers[key] = timer
        timer.start()

    def _expire(self, key, rule, zone_name):
        """
        Handles a timer running out.
        """
        with self._lock:
            if key not in self._timers:
                return

            opened_at = self._opened_at[key]

            if rule.repeat_minutes:
                self._schedule(key, rule, zone_name, rule.repeat_minutes)
            else:
                del self._timers[key]
                del self._opened_at[key]

        logger.info('Alert rule triggered: %s has been open for %s minutes', zone_name, rule.minutes)
        self.on_trigger(rule=rule, zone=int(key[0]), zone_name=zone_name, opened_at=opened_at)
