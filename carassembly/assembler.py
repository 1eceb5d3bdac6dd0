"""Assembly line that turns menu answers into car parts."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from carassembly.car import Car, CarType, RunCode
from carassembly.parts import (
    Brake,
    BrakeType,
    Engine,
    EngineType,
    SteeringSystem,
    SteeringType,
)

_CAR_TYPE_MESSAGES = {
    CarType.SEDAN: "차량 타입으로 Sedan을 선택하셨습니다.\n",
    CarType.SUV: "차량 타입으로 SUV을 선택하셨습니다.\n",
    CarType.TRUCK: "차량 타입으로 Truck을 선택하셨습니다.\n",
}

_ENGINE_MESSAGES = {
    EngineType.GM: "GM 엔진을 선택하셨습니다.\n",
    EngineType.TOYOTA: "TOYOTA 엔진을 선택하셨습니다.\n",
    EngineType.WIA: "WIA 엔진을 선택하셨습니다.\n",
}

_BRAKE_MESSAGES = {
    BrakeType.MANDO: "MANDO 제동장치를 선택하셨습니다.\n",
    BrakeType.CONTINENTAL: "CONTINENTAL 제동장치를 선택하셨습니다.\n",
    BrakeType.BOSCH_B: "BOSCH 제동장치를 선택하셨습니다.\n",
}

_STEERING_MESSAGES = {
    SteeringType.BOSCH_S: "BOSCH 조향장치를 선택하셨습니다.\n",
    SteeringType.MOBIS: "MOBIS 조향장치를 선택하셨습니다.\n",
}


def _lookup(enum_cls, answer):
    try:
        return enum_cls(answer)
    except ValueError:
        return None


class Assembler:
    """Fits parts chosen by number onto a car and reports each choice."""

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self.out = sys.stdout if out is None else out
        self.car = Car()

    def select_car_type(self, answer: int) -> None:
        car_type = _lookup(CarType, answer)
        if car_type is not None:
            self.out.write(_CAR_TYPE_MESSAGES[car_type])
        self.car.car_type = car_type

    def select_engine(self, answer: int) -> None:
        engine_type = _lookup(EngineType, answer)
        if engine_type is None:
            return
        message = _ENGINE_MESSAGES.get(engine_type)
        if message:
            self.out.write(message)
        self.car.engine = Engine(engine_type)

    def select_brake(self, answer: int) -> None:
        brake_type = _lookup(BrakeType, answer)
        if brake_type is None:
            return
        self.out.write(_BRAKE_MESSAGES[brake_type])
        self.car.brake = Brake(brake_type)

    def select_steering(self, answer: int) -> None:
        steering_type = _lookup(SteeringType, answer)
        if steering_type is None:
            return
        self.out.write(_STEERING_MESSAGES[steering_type])
        self.car.steering = SteeringSystem(steering_type)

    def run(self) -> RunCode:
        """Run the assembled car and return the outcome."""
        return self.car.run(self.out)

    def test(self) -> str:
        """Write and return the parts combination test report."""
        result = self.car.test()
        self.out.write(result)
        return result