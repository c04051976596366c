"""
Abstract clock interface.

All date arithmetic that depends on "today" receives the date from an
injected clock instead of reading the system time itself.
"""

from abc import ABC, abstractmethod
from datetime import date, datetime


class IClock(ABC):
    """Source of the current date and time."""

    @abstractmethod
    def today(self) -> date:
        """Current local calendar date."""
        pass

    @abstractmethod
    def now(self) -> datetime:
        """Current timestamp (timezone-aware)."""
        pass
