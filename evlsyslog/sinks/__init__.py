from .base import Notifier
from .eventlog import EventLogSink
from .mail import EmailNotifier
from .ntfy import NtfyNotifier
from .sheets import SheetsWebhook
from .rules import RuleAlertDispatcher

__all__ = ['Notifier', 'EventLogSink', 'EmailNotifier', 'NtfyNotifier', 'SheetsWebhook', 'RuleAlertDispatcher']
