"""Car parts: engines, brake systems and steering systems."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class EngineType(IntEnum):
    """Engine makes, numbered as offered in the menu."""

    GM = 1
    TOYOTA = 2
    WIA = 3
    BROKEN = 4


class BrakeType(IntEnum):
    """Brake system makes, numbered as offered in the menu."""

    MANDO = 1
    CONTINENTAL = 2
    BOSCH_B = 3


class SteeringType(IntEnum):
    """Steering system makes, numbered as offered in the menu."""

    BOSCH_S = 1
    MOBIS = 2


@dataclass(frozen=True)
class Engine:
    """An engine fitted to a car."""

    type: EngineType

    @property
    def name(self) -> str:
        return self.type.name

    @classmethod
    def from_name(cls, name: str) -> Engine:
        """Build an engine from its name, such as ``"GM"``."""
        try:
            return cls(EngineType[name])
        except KeyError:
            raise ValueError(f"unknown engine: {name!r}") from None


@dataclass(frozen=True)
class Brake:
    """A brake system fitted to a car."""

    type: BrakeType

    @property
    def name(self) -> str:
        return self.type.name

    @classmethod
    def from_name(cls, name: str) -> Brake:
        """Build a brake system from its name, such as ``"MANDO"``."""
        try:
            return cls(BrakeType[name])
        except KeyError:
            raise ValueError(f"unknown brake system: {name!r}") from None


@dataclass(frozen=True)
class SteeringSystem:
    """A steering system fitted to a car."""

    type: SteeringType

    @property
    def name(self) -> str:
        return self.type.name

    @classmethod
    def from_name(cls, name: str) -> SteeringSystem:
        """Build a steering system from its name, such as ``"MOBIS"``."""
        try:
            return cls(SteeringType[name])
        except KeyError:
            raise ValueError(f"unknown steering system: {name!r}") from None