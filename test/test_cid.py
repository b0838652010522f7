from unittest import TestCase

from evlsyslog.messages.cid import ContactID, parse_contact_id, get_event_description, get_event_label, \
                                   CID_EVENT, CID_EVENT_CODES, CID_ARM_EVENTS


class TestContactID(TestCase):
    ### Tests
    def test_parse_ten_digits(self):
        cid = parse_contact_id('3441010020')

        self.assertIsInstance(cid, ContactID)
        self.assertEqual(cid.qualifier, '3')
        self.assertEqual(cid.event_code, '441')
        self.assertEqual(cid.code, 441)
        self.assertEqual(cid.partition, 1)
        self.assertEqual(cid.zone_or_user, 2)
        self.assertEqual(cid.event, 'Armed Stay')
        self.assertEqual(cid.description, 'Armed Stay/Disarmed')

    def test_parse_nine_digits(self):
        cid = parse_contact_id('113012015')

        self.assertEqual(cid.event_code, '130')
        self.assertEqual(cid.partition, 12)
        self.assertEqual(cid.zone_or_user, 15)
        self.assertEqual(cid.event, 'Alarm')

    def test_parse_too_short(self):
        self.assertIsNone(parse_contact_id('12345678'))
        self.assertIsNone(parse_contact_id(''))
        self.assertIsNone(parse_contact_id(None))

    def test_parse_not_digits(self):
        self.assertIsNone(parse_contact_id('3441O1002'))


class TestEventLabels(TestCase):
    ### Tests
    def test_arm_family_disarm(self):
        for code in CID_ARM_EVENTS:
            self.assertEqual(get_event_label('1', code), 'Disarmed', code)

    def test_arm_family_arm(self):
        self.assertEqual(get_event_label('3', CID_EVENT.OPENCLOSE_ARMED_STAY), 'Armed Stay')
        self.assertEqual(get_event_label('3', CID_EVENT.OPENCLOSE_ARMED_AWAY), 'Armed Away')
        self.assertEqual(get_event_label('3', CID_EVENT.OPENCLOSE_ARMED_NIGHT), 'Armed Night')
        self.assertEqual(get_event_label('3', CID_EVENT.OPENCLOSE_BY_USER), 'Armed')
        self.assertEqual(get_event_label('3', CID_EVENT.OPENCLOSE_QUICK_ARM), 'Armed')

    def test_arm_family_other_qualifier(self):
        self.assertEqual(get_event_label('6', CID_EVENT.OPENCLOSE_ARMED_STAY), 'Armed Stay/Disarmed')

    def test_alarm_range(self):
        self.assertEqual(get_event_label('1', CID_EVENT.FIRE), 'Alarm')
        self.assertEqual(get_event_label('3', CID_EVENT.BURGLARY), 'Alarm')
        self.assertEqual(get_event_label('1', '199'), 'Alarm')

    def test_table_lookup(self):
        self.assertEqual(get_event_label('1', CID_EVENT.TROUBLE_LOW_BATTERY), 'Low Battery')
        self.assertEqual(get_event_label('1', CID_EVENT.TEST_PERIODIC), 'Periodic Test')

    def test_unknown_code(self):
        self.assertEqual(get_event_label('1', '999'), 'CID 999')
        self.assertEqual(get_event_label('1', '200'), 'CID 200')

    def test_description(self):
        self.assertEqual(get_event_description(CID_EVENT.TROUBLE_AC_LOSS), 'AC Power Loss')
        self.assertEqual(get_event_description('999'), 'Unknown (999)')

    def test_table_codes_are_three_digits(self):
        for code in CID_EVENT_CODES:
            self.assertEqual(len(code), 3)
            self.assertTrue(code.isdigit())

    def test_parse_non_ascii_digits(self):
        self.assertIsNone(parse_contact_id('\u0663\u0664\u0664\u0661\u0660\u0661\u0660\u0660\u0662'))
