from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ...core.enums import AttendanceStatus
from ...shifts.model import ShiftDefinition
from ..model import ArrivalWindow


@dataclass(frozen=True)
class StatusDecision:
    status: AttendanceStatus
    note: Optional[str] = None


class ArrivalStrategy(ABC):
    """Strategy Pattern: decide the status an arrival earns."""

    @abstractmethod
    def decide(self, *, window: ArrivalWindow, shift: ShiftDefinition) -> StatusDecision:
        raise NotImplementedError


class DepartureStrategy(ABC):
    """Strategy Pattern: decide what a departure does to an existing status."""

    @abstractmethod
    def decide(self, *, current: AttendanceStatus) -> StatusDecision:
        raise NotImplementedError
