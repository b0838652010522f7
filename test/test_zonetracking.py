import datetime
from unittest import TestCase

from evlsyslog.classifier import classify
from evlsyslog.util import ConfigError
from evlsyslog.zonetracking import Rule, RuleTracker


ZONES = {'2': 'Back Door', '3': 'Garage Door'}


class FakeTimer(object):
    instances = []

    def __init__(self, interval, function, args=None, kwargs=None):
        self.interval = interval
        self.function = function
        self.args = args or ()
        self.kwargs = kwargs or {}
        self.daemon = False
        self.started = False
        self.cancelled = False

        FakeTimer.instances.append(self)

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        self.function(*self.args, **self.kwargs)


class TestRule(TestCase):
    ### Tests
    def test_from_dict(self):
        rule = Rule.from_dict({'zone': 3, 'condition': 'open_duration', 'minutes': 20, 'action': 'both',
                               'description': 'Garage left open'})

        self.assertEqual(rule.zone, '3')
        self.assertEqual(rule.minutes, 20)
        self.assertIsInstance(rule.minutes, int)
        self.assertEqual(rule.action, Rule.BOTH)
        self.assertEqual(rule.description, 'Garage left open')
        self.assertIsNone(rule.repeat_minutes)
        self.assertEqual(rule.id, 'open_duration:3:20:both')

    def test_from_dict_defaults(self):
        rule = Rule.from_dict({'zone': '003'})

        self.assertEqual(rule.zone, '3')
        self.assertEqual(rule.minutes, 20)
        self.assertEqual(rule.action, Rule.EMAIL)
        self.assertEqual(rule.condition, Rule.OPEN_DURATION)

    def test_from_dict_fractional_minutes(self):
        rule = Rule.from_dict({'zone': 2, 'minutes': '0.5', 'repeat_minutes': 30, 'id': 'back'})

        self.assertEqual(rule.minutes, 0.5)
        self.assertEqual(rule.repeat_minutes, 30.0)
        self.assertEqual(rule.id, 'back')

    def test_from_dict_invalid(self):
        for data in [{}, {'zone': 1, 'minutes': 'soon'}, {'zone': 1, 'action': 'sms'},
                     {'zone': 1, 'condition': 'closed_duration'}, 'zone 1']:
            with self.assertRaises(ConfigError):
                Rule.from_dict(data)


class TestRuleTracker(TestCase):
    def setUp(self):
        FakeTimer.instances = []

        self._rule = Rule(3, minutes=20, action=Rule.EMAIL)
        self._tracker = RuleTracker([self._rule], timer_class=FakeTimer)
        self._tracker.on_trigger += self.trigger_event

        self._triggered = []

    def tearDown(self):
        self._tracker.cancel_all()

    ### Library events
    def trigger_event(self, sender, *args, **kwargs):
        self._triggered.append(kwargs)

    ### Tests
    def test_open_starts_timer(self):
        msg = classify('Zone Open: 003', ZONES)
        self._tracker.update(msg, ZONES)

        self.assertEqual(self._tracker.pending(), [('3', self._rule.id)])
        self.assertEqual(len(FakeTimer.instances), 1)

        timer = FakeTimer.instances[0]
        self.assertTrue(timer.started)
        self.assertTrue(timer.daemon)
        self.assertEqual(timer.interval, 20 * 60)

    def test_expire_fires_trigger(self):
        msg = classify('Zone Open: 3', ZONES)
        self._tracker.update(msg, ZONES)

        FakeTimer.instances[0].fire()

        self.assertEqual(len(self._triggered), 1)
        self.assertEqual(self._triggered[0]['rule'], self._rule)
        self.assertEqual(self._triggered[0]['zone'], 3)
        self.assertEqual(self._triggered[0]['zone_name'], 'Garage Door')
        self.assertEqual(self._triggered[0]['opened_at'], msg.timestamp)
        self.assertEqual(self._tracker.pending(), [])

    def test_close_cancels_timer(self):
        self._tracker.update(classify('Zone Open: 003', ZONES), ZONES)
        self._tracker.update(classify('Zone Closed: 3', ZONES), ZONES)

        timer = FakeTimer.instances[0]
        self.assertTrue(timer.cancelled)
        self.assertEqual(self._tracker.pending(), [])

        timer.fire()

        self.assertEqual(self._triggered, [])

    def test_reopen_restarts_timer(self):
        self._tracker.update(classify('Zone Open: 3', ZONES), ZONES)
        self._tracker.update(classify('Zone Open: 3', ZONES), ZONES)

        self.assertEqual(len(FakeTimer.instances), 2)
        self.assertTrue(FakeTimer.instances[0].cancelled)
        self.assertFalse(FakeTimer.instances[1].cancelled)
        self.assertEqual(len(self._tracker.pending()), 1)

    def test_other_zone_ignored(self):
        self._tracker.update(classify('Zone Open: 2', ZONES), ZONES)
        self._tracker.update(classify('Armed Away', ZONES), ZONES)

        self.assertEqual(FakeTimer.instances, [])

    def test_restore_does_not_cancel(self):
        self._tracker.update(classify('Zone Open: 3', ZONES), ZONES)
        self._tracker.update(classify('Zone Restore: 3', ZONES), ZONES)

        self.assertEqual(len(self._tracker.pending()), 1)

    def test_repeat(self):
        rule = Rule(2, minutes=10, action=Rule.NTFY, repeat_minutes=30)
        self._tracker.rules = [rule]

        self._tracker.update(classify('Zone Open: 2', ZONES), ZONES)
        FakeTimer.instances[0].fire()

        self.assertEqual(len(self._triggered), 1)
        self.assertEqual(len(FakeTimer.instances), 2)
        self.assertEqual(FakeTimer.instances[1].interval, 30 * 60)
        self.assertEqual(self._tracker.pending(), [('2', rule.id)])

        FakeTimer.instances[1].fire()

        self.assertEqual(len(self._triggered), 2)
        self.assertEqual(self._triggered[1]['zone_name'], 'Back Door')

    def test_several_rules_per_zone(self):
        early = Rule(3, minutes=5, action=Rule.NTFY)
        self._tracker.rules = [self._rule, early]

        self._tracker.update(classify('Zone Open: 3', ZONES), ZONES)

        self.assertEqual(len(self._tracker.pending()), 2)

        self._tracker.cancel_zone(3)

        self.assertEqual(self._tracker.pending(), [])

    def test_cancel_all(self):
        self._tracker.update(classify('Zone Open: 3', ZONES), ZONES)
        self._tracker.cancel_all()

        self.assertTrue(FakeTimer.instances[0].cancelled)
        self.assertEqual(self._tracker.pending(), [])

    def test_no_rules(self):
        tracker = RuleTracker(timer_class=FakeTimer)
        tracker.update(classify('Zone Open: 3', ZONES), ZONES)

        self.assertEqual(FakeTimer.instances, [])

    def test_opened_at_defaults_to_now(self):
        msg = classify('Zone Open: 3', ZONES)
        msg.timestamp = None

        before = datetime.datetime.now()
        self._tracker.update(msg, ZONES)
        FakeTimer.instances[0].fire()

        self.assertTrue(self._triggered[0]['opened_at'] >= before)

    def test_same_zone_and_minutes_different_actions(self):
        email = Rule.from_dict({'zone': 3, 'minutes': 20, 'action': 'email'})
        ntfy = Rule.from_dict({'zone': 3, 'minutes': 20, 'action': 'ntfy'})
        self._tracker.rules = [email, ntfy]

        self.assertNotEqual(email.id, ntfy.id)

        self._tracker.update(classify('Zone Open: 3', ZONES), ZONES)

        self.assertEqual(len(self._tracker.pending()), 2)

        for timer in FakeTimer.instances:
            if not timer.cancelled:
                timer.fire()

        self.assertEqual(sorted(kwargs['rule'].action for kwargs in self._triggered), ['email', 'ntfy'])

    def test_repeat_is_part_of_default_id(self):
        once = Rule(3, minutes=20, action=Rule.NTFY)
        repeating = Rule(3, minutes=20, action=Rule.NTFY, repeat_minutes=30)

        self.assertNotEqual(once.id, repeating.id)

    def test_close_cancels_after_rules_cleared(self):
        self._tracker.update(classify('Zone Open: 3', ZONES), ZONES)
        self._tracker.rules = []

        self._tracker.update(classify('Zone Closed: 3', ZONES), ZONES)

        self.assertEqual(self._tracker.pending(), [])
        self.assertTrue(FakeTimer.instances[0].cancelled)

        FakeTimer.instances[0].fire()

        self.assertEqual(self._triggered, [])
