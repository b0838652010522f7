import time
import smtplib
from email.mime.text import MIMEText
from evlsyslog import SyslogListener
from evlsyslog.devices import UDPDevice

# Configuration values
SUBJECT = "EnvisaLink - ALARM"
FROM_ADDRESS = "root@localhost"
TO_ADDRESS = "root@localhost"       # NOTE: Sending an SMS is as easy as looking
                                    # up the email address format for your provider.
SMTP_SERVER = "localhost"
SMTP_USERNAME = None
SMTP_PASSWORD = None

HOSTNAME = '0.0.0.0'
PORT = 5514

def main():
    """
    Example application that sends an email when an alarm event is
    detected.
    """
    try:
        listener = SyslogListener(UDPDevice(interface=(HOSTNAME, PORT)))

        # Set up an event handler and open the device
        listener.on_alarm += handle_alarm
        with listener.open():
            while True:
                time.sleep(1)

    except Exception as ex:
        print('Exception:', ex)

def handle_alarm(sender, message=None, **kwargs):
    """
    Handles alarm events from the listener.
    """
    text = "Alarm: {0}".format(message.message)

    # Build the email message
    msg = MIMEText(text)
    msg['Subject'] = SUBJECT
    msg['From'] = FROM_ADDRESS
    msg['To'] = TO_ADDRESS

    s = smtplib.SMTP(SMTP_SERVER)

    # Authenticate if needed
    if SMTP_USERNAME is not None:
        s.login(SMTP_USERNAME, SMTP_PASSWORD)

    # Send the email
    s.sendmail(FROM_ADDRESS, TO_ADDRESS, msg.as_string())
    s.quit()

    print('sent alarm email:', text)

if __name__ == '__main__':
    main()
