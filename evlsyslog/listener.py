"""
Provides the main SyslogListener class.
"""

import logging

from .classifier import classify
from .event import event
from .messages import ZoneMessage, AlarmMessage, ArmMessage, CIDMessage
from .zonetracking import RuleTracker

logger = logging.getLogger(__name__)


class SyslogListener(object):
    """
    High-level wrapper around a syslog source that classifies every datagram
    and fires events for the results.
    """

    # High-level Events
    on_arm = event.Event("This event is called when the panel is armed.\n\n**Callback definition:** *def callback(listener, message, stay)*")
    on_disarm = event.Event("This event is called when the panel is disarmed.\n\n**Callback definition:** *def callback(listener, message)*")
    on_alarm = event.Event("This event is called when an alarm is reported.\n\n**Callback definition:** *def callback(listener, message)*")
    on_zone_open = event.Event("This event is called when a zone opens.\n\n**Callback definition:** *def callback(listener, message, zone)*")
    on_zone_close = event.Event("This event is called when a zone closes.\n\n**Callback definition:** *def callback(listener, message, zone)*")
    on_zone_event = event.Event("This event is called for every zone message, whatever the action.\n\n**Callback definition:** *def callback(listener, message, zone)*")
    on_rule_triggered = event.Event("This event is called when a zone has been open longer than a rule allows.\n\n**Callback definition:** *def callback(listener, rule, zone, zone_name, opened_at)*")

    # Mid-level Events
    on_message = event.Event("This event is called for every classified message.\n\n**Callback definition:** *def callback(listener, message)*")
    on_cid_message = event.Event("This event is called when a :py:class:`~evlsyslog.messages.CIDMessage` is received.\n\n**Callback definition:** *def callback(listener, message)*")

    # Low-level Events
    on_open = event.Event("This event is called when the device has been opened.\n\n**Callback definition:** *def callback(listener)*")
    on_close = event.Event("This event is called when the device has been closed.\n\n**Callback definition:** *def callback(listener)*")
    on_read = event.Event("This event is called when a datagram has been read from the device.\n\n**Callback definition:** *def callback(listener, data, address)*")

    ARMED_EVENTS = [ArmMessage.ARMED, ArmMessage.ARMED_STAY, ArmMessage.ARMED_AWAY, ArmMessage.ARMED_NIGHT]
    """Event labels that mean the panel was armed."""

    def __init__(self, device, zones=None, rules=None, rule_tracker=None):
        """
        Constructor

        :param device: The syslog source used by this listener.
        :type device: :py:class:`~evlsyslog.devices.Device`
        :param zones: zone directory mapping zone numbers to friendly names
        :type zones: dict
        :param rules: open duration rules
        :type rules: list of :py:class:`~evlsyslog.zonetracking.Rule`
        :param rule_tracker: tracker to use instead of a new one
        :type rule_tracker: :py:class:`~evlsyslog.zonetracking.RuleTracker`
        """
        self._device = device
        self._rule_tracker = rule_tracker or RuleTracker(rules)
        if rule_tracker is not None and rules is not None:
            self._rule_tracker.rules = rules

        self.zones = dict(zones or {})

    def __enter__(self):
        """
        Support for context manager __enter__.
        """
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        """
        Support for context manager __exit__.
        """
        self.close()

        return False

    @property
    def id(self):
        """
        The ID of the underlying device.

        :returns: identification string for the device
        """
        return self._device.id

    @property
    def rules(self):
        """
        The open duration rules being tracked.
        """
        return self._rule_tracker.rules

    @rules.setter
    def rules(self, value):
        self._rule_tracker.rules = value

    @property
    def rule_tracker(self):
        """
        The :py:class:`~evlsyslog.zonetracking.RuleTracker` in use.
        """
        return self._rule_tracker

    def open(self, no_reader_thread=False):
        """
        Opens the device.

        :param no_reader_thread: Specifies whether or not the automatic reader
                                 thread should be started.
        :type no_reader_thread: bool
        """
        self._wire_events()
        try:
            self._device.open(no_reader_thread=no_reader_thread)
        except Exception:
            self._unwire_events()
            raise

        return self

    def close(self):
        """
        Closes the device and cancels pending rule timers.
        """
        self._rule_tracker.cancel_all()

        if self._device:
            self._device.close()

        self._unwire_events()

    def _wire_events(self):
        """
        Wires up the internal device events.
        """
        self._device.on_open += self._on_open
        self._device.on_close += self._on_close
        self._device.on_read += self._on_read
        self._rule_tracker.on_trigger += self._on_rule_triggered

    def _unwire_events(self):
        """
        Unwires the internal device events.
        """
        for handler, func in ((self._device.on_open, self._on_open),
                              (self._device.on_close, self._on_close),
                              (self._device.on_read, self._on_read),
                              (self._rule_tracker.on_trigger, self._on_rule_triggered)):
            if func in list(handler):
                handler.remove(func)

    def _handle_message(self, data, address=None):
        """
        Classifies a datagram and fires the events that apply.

        :param data: datagram contents
        :type data: bytes or string
        :param address: sender address
        :type address: tuple

        :returns: :py:class:`~evlsyslog.messages.BaseMessage`
        """
        if isinstance(data, bytes):
            data = data.decode('utf-8', 'replace')

        if address is not None:
            logger.debug('[RAW] from %s:%s - %s', address[0], address[1], data.strip())
        else:
            logger.debug('[RAW] %s', data.strip())

        msg = classify(data, self.zones)

        self.on_message(message=msg)

        if isinstance(msg, ZoneMessage):
            self._rule_tracker.update(msg, self.zones)
            self._handle_zone_message(msg)

        elif isinstance(msg, CIDMessage):
            self.on_cid_message(message=msg)

        if msg.event == AlarmMessage.ALARM:
            self.on_alarm(message=msg)

        elif msg.event == ArmMessage.DISARMED:
            self.on_disarm(message=msg)

        elif msg.event in self.ARMED_EVENTS:
            self.on_arm(message=msg, stay=msg.event == ArmMessage.ARMED_STAY)

        return msg

    def _handle_zone_message(self, msg):
        """
        Fires the zone events for a zone message.

        :param msg: zone message
        :type msg: :py:class:`~evlsyslog.messages.ZoneMessage`
        """
        self.on_zone_event(message=msg, zone=msg.zone)

        if msg.event == ZoneMessage.OPEN:
            self.on_zone_open(message=msg, zone=msg.zone)

        elif msg.event == ZoneMessage.CLOSE:
            self.on_zone_close(message=msg, zone=msg.zone)

    def _on_open(self, sender, *args, **kwargs):
        """
        Internal handler for opening the device.
        """
        self.on_open()

    def _on_close(self, sender, *args, **kwargs):
        """
        Internal handler for closing the device.
        """
        self.on_close()

    def _on_read(self, sender, *args, **kwargs):
        """
        Internal handler for reading from the device.
        """
        data = kwargs.get('data', None)
        address = kwargs.get('address', None)

        self.on_read(data=data, address=address)

        self._handle_message(data, address)

    def _on_rule_triggered(self, sender, *args, **kwargs):
        """
        Internal handler for rule timers running out.
        """
        self.on_rule_triggered(**kwargs)
