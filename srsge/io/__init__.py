"""Binary IO utilities for fixed-offset save header access."""

from srsge.io.reader import Reader
from srsge.io.writer import Writer

__all__ = ['Reader', 'Writer']
