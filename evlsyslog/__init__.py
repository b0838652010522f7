from .listener import SyslogListener
from .classifier import classify
from .zones import resolve_zone_name

import evlsyslog.listener
import evlsyslog.classifier
import evlsyslog.devices
import evlsyslog.util
import evlsyslog.messages
import evlsyslog.zonetracking

__all__ = ['SyslogListener', 'classify', 'resolve_zone_name', 'listener', 'classifier', 'devices', 'util',
           'messages', 'zonetracking']
