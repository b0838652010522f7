import errno
import socket
from unittest import TestCase
from mock import Mock, patch

from evlsyslog.devices import Device, UDPDevice, send_datagram
from evlsyslog.devices.udp_device import SYSLOG_PREAMBLE
from evlsyslog.util import NoDeviceError, CommError, TimeoutError


class TestUDPDevice(TestCase):
    def setUp(self):
        self._device = UDPDevice(interface=('127.0.0.1', 5514))

        self._opened = False
        self._closed = False
        self._reads = []

        self._device.on_open += self.open_event
        self._device.on_close += self.close_event
        self._device.on_read += self.read_event

    def tearDown(self):
        self._device.close()

    ### Library events
    def open_event(self, sender, *args, **kwargs):
        self._opened = True

    def close_event(self, sender, *args, **kwargs):
        self._closed = True

    def read_event(self, sender, *args, **kwargs):
        self._reads.append(kwargs)

    ### Util
    def _open(self):
        with patch('socket.socket') as mock:
            mock.return_value.getsockname.return_value = ('127.0.0.1', 5514)
            self._device.open(no_reader_thread=True)

        return mock

    ### Tests
    def test_open(self):
        mock = self._open()

        mock.assert_called_with(socket.AF_INET, socket.SOCK_DGRAM)
        mock.return_value.bind.assert_called_with(('127.0.0.1', 5514))
        self.assertEqual(self._device.id, '127.0.0.1:5514')
        self.assertTrue(self._opened)
        self.assertFalse(self._device.is_reader_alive())

    def test_open_ephemeral_port(self):
        self._device.interface = ('127.0.0.1', 0)

        with patch('socket.socket') as mock:
            mock.return_value.getsockname.return_value = ('127.0.0.1', 40000)
            self._device.open(no_reader_thread=True)

        self.assertEqual(self._device.interface, ('127.0.0.1', 40000))

    def test_open_permission_denied(self):
        with patch('socket.socket') as mock:
            mock.return_value.bind.side_effect = socket.error(errno.EACCES, 'Permission denied')

            with self.assertRaises(NoDeviceError) as ctx:
                self._device.open(no_reader_thread=True)

        self.assertIn('root', str(ctx.exception.args[0]))
        mock.return_value.close.assert_called_with()
        self.assertFalse(self._opened)

    def test_open_address_in_use(self):
        with patch('socket.socket') as mock:
            mock.return_value.bind.side_effect = socket.error(errno.EADDRINUSE, 'Address already in use')

            with self.assertRaises(NoDeviceError):
                self._device.open(no_reader_thread=True)

    def test_read_datagram(self):
        self._open()

        self._device._device.recvfrom.return_value = (b'<166>ENVISALINK[1]:  Zone Open: 9', ('10.0.0.5', 514))

        with patch('select.select', return_value=([self._device._device], [], [])):
            data = self._device.read_datagram(timeout=1)

        self.assertEqual(data, '<166>ENVISALINK[1]:  Zone Open: 9')
        self.assertEqual(self._reads, [{'data': b'<166>ENVISALINK[1]:  Zone Open: 9', 'address': ('10.0.0.5', 514)}])

    def test_read_datagram_invalid_utf8(self):
        self._open()

        self._device._device.recvfrom.return_value = (b'Zone Open: 9 \xff', ('10.0.0.5', 514))

        with patch('select.select', return_value=([self._device._device], [], [])):
            data = self._device.read_datagram(timeout=1)

        self.assertTrue(data.startswith('Zone Open: 9'))

    def test_read_datagram_timeout(self):
        self._open()

        with patch('select.select', return_value=([], [], [])):
            with self.assertRaises(TimeoutError):
                self._device.read_datagram(timeout=1)

        self.assertEqual(self._reads, [])

    def test_read_datagram_error(self):
        self._open()

        self._device._device.recvfrom.side_effect = socket.error('Connection refused')

        with patch('select.select', return_value=([self._device._device], [], [])):
            with self.assertRaises(CommError):
                self._device.read_datagram(timeout=1)

    def test_read_datagram_closed_socket(self):
        self._open()

        with patch('select.select', side_effect=ValueError('file descriptor cannot be a negative integer')):
            with self.assertRaises(CommError):
                self._device.read_datagram(timeout=1)

    def test_close(self):
        self._open()
        sock = self._device._device

        self._device.close()

        sock.close.assert_called_with()
        self.assertTrue(self._closed)

    def test_close_error_ignored(self):
        self._open()
        self._device._device.close.side_effect = OSError('Bad file descriptor')

        self._device.close()

        self.assertTrue(self._closed)


class TestReadThread(TestCase):
    ### Tests
    def test_stops_on_comm_error(self):
        device = Mock(spec=UDPDevice)
        thread = Device.ReadThread(device)

        device.read_datagram.side_effect = [TimeoutError(), 'Zone Open: 1', CommError('gone')]

        thread.run()

        self.assertEqual(device.read_datagram.call_count, 3)
        device.read_datagram.assert_called_with(timeout=Device.ReadThread.READ_TIMEOUT)
        device.close.assert_called_with()

    def test_stop(self):
        device = Mock(spec=UDPDevice)
        thread = Device.ReadThread(device)

        def read_datagram(timeout):
            thread.stop()
            raise CommError('closed')

        device.read_datagram.side_effect = read_datagram

        thread.run()

        self.assertFalse(device.close.called)
        self.assertTrue(thread.daemon)


class TestSendDatagram(TestCase):
    ### Tests
    def test_send(self):
        with patch('socket.socket') as mock:
            datagram = send_datagram('Zone Closed: 4', interface=('127.0.0.1', 5514))

        self.assertEqual(datagram, SYSLOG_PREAMBLE + 'Zone Closed: 4')
        mock.return_value.sendto.assert_called_with(datagram.encode('utf-8'), ('127.0.0.1', 5514))
        mock.return_value.close.assert_called_with()

    def test_send_failure_closes_socket(self):
        with patch('socket.socket') as mock:
            mock.return_value.sendto.side_effect = OSError('Network is unreachable')

            with self.assertRaises(OSError):
                send_datagram('Zone Open: 99')

        mock.return_value.close.assert_called_with()
