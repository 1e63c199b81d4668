from __future__ import annotations

from abc import ABC, abstractmethod


class OvertimeCalculator(ABC):
    """Calculator interface (Strategy Pattern for overtime pay).

    Callers guarantee base_salary > 0 and hours >= 0; implementations do not
    re-check them.
    """

    @abstractmethod
    def overtime_hours(self, end_time: str, *, is_holiday: bool) -> float:
        raise NotImplementedError

    @abstractmethod
    def hourly_rate(self, base_salary: float) -> float:
        raise NotImplementedError

    @abstractmethod
    def multiplier(self, *, is_holiday: bool) -> float:
        raise NotImplementedError

    def overtime_rate(self, base_salary: float, *, is_holiday: bool) -> float:
        return self.hourly_rate(base_salary) * self.multiplier(is_holiday=is_holiday)

    @abstractmethod
    def overtime_amount(self, base_salary: float, hours: float, *, is_holiday: bool) -> float:
        raise NotImplementedError
