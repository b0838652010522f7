import time
from evlsyslog import SyslogListener
from evlsyslog.devices import UDPDevice
from evlsyslog.sinks import NtfyNotifier
from evlsyslog.zonetracking import Rule

# Configuration values
NTFY_TOPIC = 'my-envisalink-alerts'

HOSTNAME = '0.0.0.0'
PORT = 5514

ZONES = {
    '3': 'Garage Door',
}

def main():
    """
    Example application that pushes a notification when the garage door
    has been left open for ten minutes, and every half hour after that.
    """
    ntfy = NtfyNotifier(topic=NTFY_TOPIC)

    try:
        rules = [Rule(3, minutes=10, action=Rule.NTFY, repeat_minutes=30)]
        listener = SyslogListener(UDPDevice(interface=(HOSTNAME, PORT)), zones=ZONES, rules=rules)

        # Set up event handlers and open the device
        listener.on_zone_open += handle_zone_open
        listener.on_rule_triggered += lambda sender, **kwargs: ntfy.send_rule_alert(**kwargs)
        with listener.open():
            while True:
                time.sleep(1)

    except Exception as ex:
        print('Exception:', ex)

    finally:
        ntfy.close()

def handle_zone_open(sender, message=None, zone=None, **kwargs):
    """
    Handles zone open events from the listener.
    """
    print('zone opened:', message.zone_name)

if __name__ == '__main__':
    main()
