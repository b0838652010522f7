"""
Zone number handling and friendly name lookup.

A zone directory is a plain mapping of zone number to friendly name, e.g.
``{"3": "Garage Door", "09": "Master Bedroom Window"}``.  Keys are compared by
their integer value so ``"09"`` and ``"9"`` name the same zone.
"""


def canonical_zone(value):
    """
    Converts a zone identifier to its canonical decimal text.

    :param value: zone number or numeric string
    :type value: int or string

    :returns: decimal string without leading zeros, or the stripped text if
              the value is not numeric
    """
    text = str(value).strip()

    try:
        return str(int(text, 10))
    except ValueError:
        return text


def resolve_zone_name(zones, zone):
    """
    Looks up the friendly name of a zone.

    :param zones: zone directory, may be empty or None
    :type zones: dict
    :param zone: zone number to look up
    :type zone: int or string

    :returns: the configured name, or ``Zone N`` when there is none
    """
    key = canonical_zone(zone)

    if zones:
        name = zones.get(key)
        if name:
            return name

        for candidate, name in zones.items():
            if name and canonical_zone(candidate) == key:
                return name

    return 'Zone {0}'.format(key)
