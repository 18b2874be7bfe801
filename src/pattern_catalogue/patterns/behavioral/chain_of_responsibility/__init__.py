"""Chain of Responsibility pattern - requests passed along until someone takes them."""
from .accounts import Account, Bank, Bitcoin, PayPal
from .base import Handler
from .help import NO_HELP_TOPIC, Application, Button, Dialog, HelpHandler
from .log_chain import ConsoleLogger, EmailLogger, FileLogger, LogHandler, LogLevel, LogRequest
from .support import SupportHandler, SupportTicket

__all__ = [
    "Account",
    "Application",
    "Bank",
    "Bitcoin",
    "Button",
    "ConsoleLogger",
    "Dialog",
    "EmailLogger",
    "FileLogger",
    "Handler",
    "HelpHandler",
    "LogHandler",
    "LogLevel",
    "LogRequest",
    "NO_HELP_TOPIC",
    "PayPal",
    "SupportHandler",
    "SupportTicket",
]
