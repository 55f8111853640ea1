"""Reporters for check results.

PlainTextReporter: stdlib text output
JSONReporter: machine-readable output
ConsoleReporter: rich tables
"""

from memberorder.application.reporters._base import BaseReporter
from memberorder.application.reporters.console import ConsoleReporter
from memberorder.application.reporters.json_reporter import JSONReporter
from memberorder.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "ConsoleReporter",
    "JSONReporter",
    "PlainTextReporter",
]
