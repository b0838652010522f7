"""
Command line options and the zone and rule files.
"""

import argparse
import json
import logging
import os
import shutil

from .util import ConfigError
from .zones import canonical_zone
from .zonetracking import Rule

logger = logging.getLogger(__name__)

DEFAULT_PORT = 514
DEFAULT_LOG_PATH = 'envisalink-syslog-listener.log'
DEFAULT_ZONES_PATH = 'zones.json'
DEFAULT_RULES_PATH = 'rules.json'

LOG_FORMAT = '%(asctime)s - %(message)s'
LOG_DATE_FORMAT = '%b %d, %Y, %I:%M:%S %p'


def sample_path_for(path):
    """
    Returns the sample file shipped next to a config file,
    e.g. ``zones.sample.json`` for ``zones.json``.

    :param path: config file path
    :type path: string

    :returns: string
    """
    base, ext = os.path.splitext(path)
    return '{0}.sample{1}'.format(base, ext)


def _install_sample(path, sample_path):
    """
    Copies the sample file into place if the real one doesn't exist yet.
    """
    if sample_path is None:
        sample_path = sample_path_for(path)

    if not os.path.exists(path) and os.path.exists(sample_path):
        shutil.copyfile(sample_path, path)
        logger.info('Created %s from %s - edit it with your own settings', path, sample_path)


def _read_json(path):
    with open(path, 'r', encoding='utf-8') as config_file:
        return json.load(config_file)


def load_zones(path, sample_path=None):
    """
    Loads the zone directory.

    :param path: path to ``zones.json``, an object of zone number to name
    :type path: string
    :param sample_path: sample file copied into place when ``path`` is missing
    :type sample_path: string

    :returns: dict keyed by canonical zone number; empty if the file could not
              be loaded
    """
    try:
        _install_sample(path, sample_path)
        data = _read_json(path)
        if not isinstance(data, dict):
            raise ConfigError('expected an object of zone number to name')

    except (OSError, ValueError, ConfigError) as err:
        logger.warning('Could not load zones file (%s): %s. Zone numbers will be used as-is.', path, err)
        return {}

    zones = {canonical_zone(zone): str(name) for zone, name in data.items()}
    logger.info('Loaded %d zone(s) from %s', len(zones), path)

    return zones


def load_rules(path, sample_path=None):
    """
    Loads the alert rules.

    :param path: path to ``rules.json``, a list of rule objects
    :type path: string
    :param sample_path: sample file copied into place when ``path`` is missing
    :type sample_path: string

    :returns: list of :py:class:`~evlsyslog.zonetracking.Rule`; empty if the
              file could not be loaded
    """
    try:
        _install_sample(path, sample_path)
        data = _read_json(path)
        if not isinstance(data, list):
            raise ConfigError('expected a list of rules')

    except (OSError, ValueError, ConfigError) as err:
        logger.info('No alert rules loaded (%s): %s', path, err)
        return []

    rules = []
    ids = set()
    for index, entry in enumerate(data):
        try:
            rule = Rule.from_dict(entry)
        except ConfigError as err:
            logger.warning('Skipping rule: %s', err)
            continue

        # Each rule needs its own timer key.
        if rule.id in ids:
            rule.id = '{0}#{1}'.format(rule.id, index)

        ids.add(rule.id)
        rules.append(rule)

    logger.info('Loaded %d alert rule(s) from %s', len(rules), path)

    return rules


def build_parser():
    """
    Builds the command line parser for the listener.

    :returns: :py:class:`argparse.ArgumentParser`
    """
    parser = argparse.ArgumentParser(
        prog='evl-syslog-listener',
        description='Logs EnvisaLink syslog events (zone open/close, arm/disarm, alarms) '
                    'with friendly zone names and sends alerts.',
        epilog='Port 514 requires root. Alternatively use a higher port and redirect with iptables: '
               'iptables -t nat -A PREROUTING -p udp --dport 514 -j REDIRECT --to-port 5514')

    parser.add_argument('--host', default='0.0.0.0', help='address to listen on (default: %(default)s)')
    parser.add_argument('--port', type=int, default=DEFAULT_PORT, help='UDP port to listen on (default: %(default)s)')
    parser.add_argument('--log-path', default=DEFAULT_LOG_PATH, help='log file path (default: %(default)s)')
    parser.add_argument('--zones-path', default=DEFAULT_ZONES_PATH, help='path to zones.json (default: %(default)s)')
    parser.add_argument('--rules-path', default=DEFAULT_RULES_PATH, help='path to rules.json (default: %(default)s)')
    parser.add_argument('--debug', action='store_true', help='log debug output to the console')
    parser.add_argument('--dry-run', action='store_true', help='log notifications instead of sending them')

    email = parser.add_argument_group('email')
    email.add_argument('--smtp-server', default=os.environ.get('SMTP_SERVER'), help='SMTP server (env SMTP_SERVER)')
    email.add_argument('--smtp-port', type=int, default=os.environ.get('SMTP_PORT', '25'), help='SMTP port (env SMTP_PORT)')
    email.add_argument('--smtp-username', default=os.environ.get('SMTP_USERNAME'), help='SMTP user (env SMTP_USERNAME)')
    email.add_argument('--smtp-password', default=os.environ.get('SMTP_PASSWORD'), help='SMTP password (env SMTP_PASSWORD)')
    email.add_argument('--email-from', default=os.environ.get('EMAIL_FROM', 'EnvisaLink Syslog <root@localhost>'),
                       help='sender address (env EMAIL_FROM)')
    email.add_argument('--email-to', default=os.environ.get('EMAIL_TO'), help='alert recipient(s), comma separated (env EMAIL_TO)')
    email.add_argument('--email-on-open', action='store_true', help='send an email when a zone opens')
    email.add_argument('--no-email-on-alarm', dest='email_on_alarm', action='store_false',
                       help='do not send an email on alarm events')

    integrations = parser.add_argument_group('integrations')
    integrations.add_argument('--sheets-webhook', default=os.environ.get('GOOGLE_SHEETS_WEBHOOK'),
                              help='Google Apps Script web app URL (env GOOGLE_SHEETS_WEBHOOK)')
    integrations.add_argument('--ntfy-topic', default=os.environ.get('NTFY_TOPIC'),
                              help='ntfy topic for push notifications (env NTFY_TOPIC)')
    integrations.add_argument('--ntfy-server', default=os.environ.get('NTFY_SERVER', 'https://ntfy.sh'),
                              help='ntfy server (env NTFY_SERVER, default: %(default)s)')

    return parser


def configure_logging(log_path, debug=False):
    """
    Sends log output to the log file, and to the console when debugging.

    :param log_path: log file path
    :type log_path: string
    :param debug: also log to the console, at debug level
    :type debug: bool
    """
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG if debug else logging.INFO)

    file_handler = logging.FileHandler(log_path, encoding='utf-8')
    file_handler.setFormatter(formatter)
    root.addHandler(file_handler)

    if debug:
        console = logging.StreamHandler()
        console.setFormatter(formatter)
        root.addHandler(console)
