"""An assembled car: compatibility rules, running and testing."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, TextIO

from carassembly.parts import (
    Brake,
    BrakeType,
    Engine,
    EngineType,
    SteeringSystem,
    SteeringType,
)

_RESULT_HEADER = "자동차 부품 조합 테스트 결과 : "
RESULT_OK = _RESULT_HEADER + "PASS\n"
RESULT_FAIL = _RESULT_HEADER + "FAIL\n"


class CarType(IntEnum):
    """Car body types, numbered as offered in the menu."""

    SEDAN = 1
    SUV = 2
    TRUCK = 3


class RunCode(IntEnum):
    """Outcome of running a produced car."""

    WORKING = 0
    NOT_WORKING = 1
    BROKEN_ENGINE = 2


_CAR_TYPE_LABELS = {
    CarType.SEDAN: "Sedan",
    CarType.SUV: "SUV",
    CarType.TRUCK: "Truck",
}


@dataclass
class Car:
    """A car under assembly; parts stay ``None`` until chosen."""

    car_type: Optional[CarType] = None
    engine: Optional[Engine] = None
    brake: Optional[Brake] = None
    steering: Optional[SteeringSystem] = None

    def _require_complete(self) -> None:
        missing = [
            label
            for label, part in (
                ("car type", self.car_type),
                ("engine", self.engine),
                ("brake system", self.brake),
                ("steering system", self.steering),
            )
            if part is None
        ]
        if missing:
            raise ValueError("car is missing: " + ", ".join(missing))

    def violation(self) -> Optional[str]:
        """Return the first broken combination rule, or ``None`` if all hold."""
        self._require_complete()
        engine = self.engine.type
        brake = self.brake.type
        steering = self.steering.type

        if self.car_type == CarType.SEDAN and brake == BrakeType.CONTINENTAL:
            return "Sedan에는 Continental제동장치 사용 불가\n"
        if self.car_type == CarType.SUV and engine == EngineType.TOYOTA:
            return "SUV에는 TOYOTA엔진 사용 불가\n"
        if self.car_type == CarType.TRUCK:
            if engine == EngineType.WIA:
                return "Truck에는 WIA엔진 사용 불가\n"
            if brake == BrakeType.MANDO:
                return "Truck에는 Mando제동장치 사용 불가\n"
        if brake == BrakeType.BOSCH_B and steering != SteeringType.BOSCH_S:
            return "Bosch제동장치에는 Bosch조향장치 이외 사용 불가\n"
        return None

    def is_valid(self) -> bool:
        return self.violation() is None

    def describe(self) -> str:
        """Return the parts list printed when the car runs."""
        self._require_complete()
        return (
            f"Car Type : {_CAR_TYPE_LABELS[self.car_type]}\n"
            f"Engine Type : {self.engine.name}\n"
            f"Brake System : {self.brake.name}\n"
            f"Steering System : {self.steering.name}\n"
        )

    def run(self, out: Optional[TextIO] = None) -> RunCode:
        """Start the car, reporting to ``out``, and return the outcome."""
        out = sys.stdout if out is None else out
        if not self.is_valid():
            out.write("자동차가 동작되지 않습니다\n")
            return RunCode.NOT_WORKING
        if self.engine.type == EngineType.BROKEN:
            out.write("엔진이 고장나있습니다.\n")
            out.write("자동차가 움직이지 않습니다.\n")
            return RunCode.BROKEN_ENGINE
        out.write(self.describe())
        out.write("자동차가 동작됩니다.\n")
        return RunCode.WORKING

    def test(self) -> str:
        """Return the report of the parts combination test."""
        problem = self.violation()
        if problem is None:
            return RESULT_OK
        return RESULT_FAIL + problem