from .contact_id import ContactID, parse_contact_id
from .events import get_event_description, get_event_label, CID_QUALIFIER, CID_EVENT, CID_EVENT_CODES, \
                    CID_ARM_EVENTS, CID_ARM_LABELS

__all__ = ['ContactID', 'parse_contact_id', 'get_event_description', 'get_event_label', 'CID_QUALIFIER',
           'CID_EVENT', 'CID_EVENT_CODES', 'CID_ARM_EVENTS', 'CID_ARM_LABELS']
