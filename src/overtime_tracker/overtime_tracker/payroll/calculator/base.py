from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from ...core.enums import PayCategory


class BucketCalculator(ABC):
    """Calculator interface (Strategy Pattern for minute bucketing).

    Receives a normalized, whole-minute aligned [start, end) span and returns
    the worked minutes per category. Break minutes are not counted anywhere.
    """

    @abstractmethod
    def bucket(self, start: datetime, end: datetime) -> dict[PayCategory, int]:
        raise NotImplementedError
