import time
from evlsyslog import SyslogListener
from evlsyslog.devices import UDPDevice

# Configuration values
HOSTNAME = '0.0.0.0'
PORT = 5514

ZONES = {
    '1': 'Front Door',
    '3': 'Garage Door',
}

def main():
    """
    Example application that prints messages from the EnvisaLink to the terminal.
    """
    try:
        # Listen for syslog datagrams on a non-privileged port
        listener = SyslogListener(UDPDevice(interface=(HOSTNAME, PORT)), zones=ZONES)

        # Set up an event handler and open the device
        listener.on_message += handle_message
        with listener.open():
            while True:
                time.sleep(1)

    except Exception as ex:
        print('Exception:', ex)

def handle_message(sender, message=None, **kwargs):
    """
    Handles message events from the listener.
    """
    print(sender.id, message)

if __name__ == '__main__':
    main()
