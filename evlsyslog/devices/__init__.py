from .base_device import Device
from .udp_device import UDPDevice, send_datagram

__all__ = ['Device', 'UDPDevice', 'send_datagram']
