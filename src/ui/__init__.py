# Console UI Module
from .crt_effects import CRTOutput
from .command_parser import CommandParser
from .message_reporter import MessageReporter
from .settings import SettingsManager, Verbosity

__all__ = ['CRTOutput', 'CommandParser', 'MessageReporter', 'SettingsManager', 'Verbosity']
