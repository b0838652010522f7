from .base_message import BaseMessage, strip_header
from .zone_message import ZoneMessage
from .panel_message import AlarmMessage, ArmMessage
from .cid_message import CIDMessage
from .other_message import OtherMessage


__all__ = ['BaseMessage', 'strip_header', 'ZoneMessage', 'AlarmMessage', 'ArmMessage', 'CIDMessage', 'OtherMessage']
