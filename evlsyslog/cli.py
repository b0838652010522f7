"""
Command line entry points.

``evl-syslog-listener`` runs the listener; ``evl-send-test-event`` sends a
fake EnvisaLink syslog message to a running listener.
"""

import argparse
import logging
import signal
import threading
from concurrent.futures import ThreadPoolExecutor

from .config import build_parser, configure_logging, load_rules, load_zones
from .devices import UDPDevice, send_datagram
from .listener import SyslogListener
from .sinks import EmailNotifier, EventLogSink, NtfyNotifier, RuleAlertDispatcher, SheetsWebhook
from .util import NoDeviceError

logger = logging.getLogger(__name__)


def build_listener(options, zones, rules, executor):
    """
    Creates the listener and wires the sinks the options ask for.

    :param options: parsed command line options
    :type options: :py:class:`argparse.Namespace`
    :param zones: zone directory
    :type zones: dict
    :param rules: alert rules
    :type rules: list of :py:class:`~evlsyslog.zonetracking.Rule`
    :param executor: pool shared by the notifiers
    :type executor: :py:class:`concurrent.futures.Executor`

    :returns: tuple of the listener and the notifiers
    """
    device = UDPDevice(interface=(options.host, options.port))
    listener = SyslogListener(device, zones=zones, rules=rules)

    email = EmailNotifier(smtp_server=options.smtp_server, smtp_port=options.smtp_port,
                          smtp_username=options.smtp_username, smtp_password=options.smtp_password,
                          from_address=options.email_from, to_address=options.email_to,
                          email_on_alarm=options.email_on_alarm, email_on_open=options.email_on_open,
                          dry_run=options.dry_run, executor=executor)
    ntfy = NtfyNotifier(topic=options.ntfy_topic, server=options.ntfy_server,
                        dry_run=options.dry_run, executor=executor)
    sheets = SheetsWebhook(url=options.sheets_webhook, dry_run=options.dry_run, executor=executor)

    listener.on_message += EventLogSink().handle_message
    listener.on_message += sheets.handle_message
    listener.on_message += email.handle_message
    listener.on_rule_triggered += RuleAlertDispatcher(email=email, ntfy=ntfy).handle_rule_triggered

    return listener, (email, ntfy, sheets)


def log_startup(options, listener, notifiers):
    """
    Logs what the listener is doing and which integrations are configured.
    """
    email, ntfy, sheets = notifiers

    logger.info('EnvisaLink syslog listener started on UDP port %s', options.port)
    logger.info('Logging to: %s', options.log_path)
    logger.info('Zones config: %s (%d zone(s) loaded)', options.zones_path, len(listener.zones))

    if options.dry_run:
        logger.info('Dry-run mode: notifications will be logged, not sent')

    if email.enabled:
        logger.info('Email: configured (%s via %s)', options.email_to, options.smtp_server)
    else:
        logger.info('Email: not configured (no SMTP server/recipient - email alerts disabled)')

    if sheets.enabled:
        logger.info('Google Sheets: configured')
    else:
        logger.info('Google Sheets: not configured (no webhook URL)')

    if ntfy.enabled:
        logger.info('ntfy: configured (topic: %s)', options.ntfy_topic)
    else:
        logger.info('ntfy: not configured (no topic)')

    if listener.rules:
        logger.info('Alert rules: %d rule(s) loaded from %s', len(listener.rules), options.rules_path)
    else:
        logger.info('Alert rules: none loaded')


def main(argv=None):
    """
    Runs the listener until interrupted.

    :param argv: command line arguments, defaults to ``sys.argv[1:]``
    :type argv: list

    :returns: process exit status
    """
    options = build_parser().parse_args(argv)

    configure_logging(options.log_path, debug=options.debug)

    zones = load_zones(options.zones_path)
    rules = load_rules(options.rules_path)

    shutdown = threading.Event()

    def signal_handler(signum, frame):
        logger.info('Received signal %d, shutting down', signum)
        shutdown.set()

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    executor = ThreadPoolExecutor(max_workers=4, thread_name_prefix='evlsyslog-notify')
    listener, notifiers = build_listener(options, zones, rules, executor)

    try:
        listener.open()

    except NoDeviceError as err:
        logger.error('Server error: %s', err)
        executor.shutdown(wait=False)
        return 1

    try:
        log_startup(options, listener, notifiers)

        while not shutdown.is_set():
            shutdown.wait(1)

    finally:
        listener.close()
        executor.shutdown(wait=True)

    return 0


def send_test_event(argv=None):
    """
    Sends a fake EnvisaLink syslog message, by default ``Zone Open: 99``.

    :param argv: command line arguments, defaults to ``sys.argv[1:]``
    :type argv: list

    :returns: process exit status
    """
    parser = argparse.ArgumentParser(prog='evl-send-test-event',
                                     description='Sends a fake EnvisaLink syslog message to the listener.')
    parser.add_argument('message', nargs='?', default='Zone Open: 99', help='message content (default: %(default)s)')
    parser.add_argument('--host', default='127.0.0.1', help='listener host (default: %(default)s)')
    parser.add_argument('--port', type=int, default=514, help='listener port (default: %(default)s)')
    options = parser.parse_args(argv)

    try:
        datagram = send_datagram(options.message, interface=(options.host, options.port))

    except OSError as err:
        print('Failed to send: {0}'.format(err))
        return 1

    print('Sent to {0}:{1} -> {2}'.format(options.host, options.port, datagram))

    return 0


if __name__ == '__main__':
    raise SystemExit(main())
