"""
Constants and utility functions used for Contact ID event handling.

Contact ID codes are reported as ``QEEEPPZZZ[C]``: a qualifier digit, a three
digit event code, a two digit partition and a three digit zone or user
number, optionally followed by a checksum digit.

Not every code below has been observed coming out of an EnvisaLink syslog
stream.  The open/close family (441/442/443) is confirmed; the rest are here
so that anything the panel does send gets a readable description.

Reference: SIA DC-05-1999.09 (Ademco Contact ID Protocol)
"""


def get_event_description(event_code):
    """
    Retrieves the human-readable description of a Contact ID event.

    :param event_code: three digit event code
    :type event_code: string

    :returns: the description, or ``Unknown (EEE)`` for codes not in the table
    """
    return CID_EVENT_CODES.get(event_code, 'Unknown ({0})'.format(event_code))


def get_event_label(qualifier, event_code):
    """
    Retrieves the event label used for a decoded Contact ID report.

    :param qualifier: event qualifier digit, see :py:class:`CID_QUALIFIER`
    :type qualifier: string
    :param event_code: three digit event code
    :type event_code: string

    :returns: string
    """
    fallback = CID_EVENT_CODES.get(event_code, 'CID {0}'.format(event_code))

    if event_code in CID_ARM_EVENTS:
        # NOTE: a "new" open/close event is an opening, i.e. a disarm.
        if qualifier == CID_QUALIFIER.NEW:
            return 'Disarmed'
        elif qualifier == CID_QUALIFIER.RESTORE:
            return CID_ARM_LABELS.get(event_code, 'Armed')

        return fallback

    if 100 <= int(event_code) < 200:
        return 'Alarm'

    return fallback


class CID_QUALIFIER:
    """
    Contact ID event qualifiers
    """
    NEW = '1'
    RESTORE = '3'


class CID_EVENT:
    """
    Contact ID event codes
    """
    MEDICAL = '100'
    FIRE = '110'
    FIRE_PULL_STATION = '115'
    PANIC = '120'
    PANIC_DURESS = '121'
    BURGLARY = '130'
    BURGLARY_PERIMETER = '131'
    BURGLARY_INTERIOR = '132'
    BURGLARY_ENTRYEXIT = '134'
    BURGLARY_TAMPER = '137'
    ALARM_GENERAL = '140'
    TROUBLE_AC_LOSS = '301'
    TROUBLE_LOW_BATTERY = '302'
    TROUBLE_SYSTEM_RESET = '305'
    TROUBLE_COMM_FAILURE = '350'
    TROUBLE_FIRE = '373'
    TROUBLE_SENSOR = '380'
    TROUBLE_LOSS_OF_SUPERVISION = '381'
    TROUBLE_SENSOR_TAMPER = '383'
    OPENCLOSE = '400'
    OPENCLOSE_BY_USER = '401'
    OPENCLOSE_AUTOMATIC = '403'
    OPENCLOSE_REMOTE_ARMDISARM = '407'
    OPENCLOSE_QUICK_ARM = '408'
    OPENCLOSE_KEYSWITCH = '409'
    OPENCLOSE_ARMED_STAY = '441'
    OPENCLOSE_ARMED_AWAY = '442'
    OPENCLOSE_ARMED_NIGHT = '443'
    TEST_MANUAL = '601'
    TEST_PERIODIC = '602'
    SERVICE_REQUEST = '616'


# Map of Contact ID event codes to human-readable text.
CID_EVENT_CODES = {
    # Alarms
    CID_EVENT.MEDICAL: 'Medical Alarm',
    CID_EVENT.FIRE: 'Fire Alarm',
    CID_EVENT.FIRE_PULL_STATION: 'Fire Alarm (pull station)',
    CID_EVENT.PANIC: 'Panic Alarm',
    CID_EVENT.PANIC_DURESS: 'Duress Alarm',
    CID_EVENT.BURGLARY: 'Burglary Alarm',
    CID_EVENT.BURGLARY_PERIMETER: 'Perimeter Alarm',
    CID_EVENT.BURGLARY_INTERIOR: 'Interior Alarm',
    CID_EVENT.BURGLARY_ENTRYEXIT: 'Entry/Exit Alarm',
    CID_EVENT.BURGLARY_TAMPER: 'Tamper Alarm',
    CID_EVENT.ALARM_GENERAL: 'General Alarm',

    # Supervisory / Trouble
    CID_EVENT.TROUBLE_AC_LOSS: 'AC Power Loss',
    CID_EVENT.TROUBLE_LOW_BATTERY: 'Low Battery',
    CID_EVENT.TROUBLE_SYSTEM_RESET: 'System Reset',
    CID_EVENT.TROUBLE_COMM_FAILURE: 'Communication Failure',
    CID_EVENT.TROUBLE_FIRE: 'Fire Trouble',
    CID_EVENT.TROUBLE_SENSOR: 'Sensor Trouble',
    CID_EVENT.TROUBLE_LOSS_OF_SUPERVISION: 'Loss of Supervision',
    CID_EVENT.TROUBLE_SENSOR_TAMPER: 'Sensor Tamper',

    # Open/Close
    CID_EVENT.OPENCLOSE: 'Open/Close',
    CID_EVENT.OPENCLOSE_BY_USER: 'Open/Close by User',
    CID_EVENT.OPENCLOSE_AUTOMATIC: 'Open/Close (auto)',
    CID_EVENT.OPENCLOSE_REMOTE_ARMDISARM: 'Remote Arm/Disarm',
    CID_EVENT.OPENCLOSE_QUICK_ARM: 'Quick Arm',
    CID_EVENT.OPENCLOSE_KEYSWITCH: 'Keyswitch Arm/Disarm',
    CID_EVENT.OPENCLOSE_ARMED_STAY: 'Armed Stay/Disarmed',
    CID_EVENT.OPENCLOSE_ARMED_AWAY: 'Armed Away/Disarmed',
    CID_EVENT.OPENCLOSE_ARMED_NIGHT: 'Armed Night/Disarmed',

    # Test
    CID_EVENT.TEST_MANUAL: 'Manual Test',
    CID_EVENT.TEST_PERIODIC: 'Periodic Test',
    CID_EVENT.SERVICE_REQUEST: 'Service Request',
}

# Contact ID events that should be considered Arm/Disarm events.
CID_ARM_EVENTS = [
    CID_EVENT.OPENCLOSE,
    CID_EVENT.OPENCLOSE_BY_USER,
    CID_EVENT.OPENCLOSE_AUTOMATIC,
    CID_EVENT.OPENCLOSE_REMOTE_ARMDISARM,
    CID_EVENT.OPENCLOSE_QUICK_ARM,
    CID_EVENT.OPENCLOSE_KEYSWITCH,
    CID_EVENT.OPENCLOSE_ARMED_STAY,
    CID_EVENT.OPENCLOSE_ARMED_AWAY,
    CID_EVENT.OPENCLOSE_ARMED_NIGHT,
]

# Arm mode labels for arm events restored (closed) with qualifier 3.
CID_ARM_LABELS = {
    CID_EVENT.OPENCLOSE_ARMED_STAY: 'Armed Stay',
    CID_EVENT.OPENCLOSE_ARMED_AWAY: 'Armed Away',
    CID_EVENT.OPENCLOSE_ARMED_NIGHT: 'Armed Night',
}
