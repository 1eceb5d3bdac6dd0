import io

import pytest

from carassembly.car import Car, CarType, RunCode
from carassembly.parts import (
    Brake,
    BrakeType,
    Engine,
    EngineType,
    SteeringSystem,
    SteeringType,
)

PASS_MSG = "자동차 부품 조합 테스트 결과 : PASS\n"
FAIL_MSG = "자동차 부품 조합 테스트 결과 : FAIL\n"
SEDAN_CONTINENTAL = "Sedan에는 Continental제동장치 사용 불가\n"
SUV_TOYOTA = "SUV에는 TOYOTA엔진 사용 불가\n"
TRUCK_WIA = "Truck에는 WIA엔진 사용 불가\n"
TRUCK_MANDO = "Truck에는 Mando제동장치 사용 불가\n"
BOSCH_NOT_BOSCH = "Bosch제동장치에는 Bosch조향장치 이외 사용 불가\n"


def make_car(car_type, engine, brake, steering):
    return Car(
        car_type=car_type,
        engine=Engine(engine),
        brake=Brake(brake),
        steering=SteeringSystem(steering),
    )


@pytest.mark.parametrize(
    "parts, expected",
    [
        ((CarType.SEDAN, EngineType.GM, BrakeType.MANDO, SteeringType.BOSCH_S), RunCode.WORKING),
        ((CarType.SEDAN, EngineType.GM, BrakeType.BOSCH_B, SteeringType.BOSCH_S), RunCode.WORKING),
        ((CarType.TRUCK, EngineType.GM, BrakeType.BOSCH_B, SteeringType.BOSCH_S), RunCode.WORKING),
        ((CarType.SUV, EngineType.GM, BrakeType.BOSCH_B, SteeringType.BOSCH_S), RunCode.WORKING),
        ((CarType.SEDAN, EngineType.BROKEN, BrakeType.MANDO, SteeringType.BOSCH_S), RunCode.BROKEN_ENGINE),
        ((CarType.SEDAN, EngineType.GM, BrakeType.CONTINENTAL, SteeringType.BOSCH_S), RunCode.NOT_WORKING),
        ((CarType.SUV, EngineType.TOYOTA, BrakeType.CONTINENTAL, SteeringType.BOSCH_S), RunCode.NOT_WORKING),
        ((CarType.SUV, EngineType.TOYOTA, BrakeType.BOSCH_B, SteeringType.MOBIS), RunCode.NOT_WORKING),
        ((CarType.TRUCK, EngineType.WIA, BrakeType.BOSCH_B, SteeringType.BOSCH_S), RunCode.NOT_WORKING),
        ((CarType.TRUCK, EngineType.TOYOTA, BrakeType.MANDO, SteeringType.MOBIS), RunCode.NOT_WORKING),
        ((CarType.TRUCK, EngineType.TOYOTA, BrakeType.BOSCH_B, SteeringType.MOBIS), RunCode.NOT_WORKING),
    ],
)
def test_run_codes(parts, expected):
    car = make_car(*parts)
    assert car.run(io.StringIO()) == expected


@pytest.mark.parametrize(
    "parts, expected",
    [
        ((CarType.SUV, EngineType.GM, BrakeType.BOSCH_B, SteeringType.BOSCH_S), PASS_MSG),
        ((CarType.SEDAN, EngineType.TOYOTA, BrakeType.CONTINENTAL, SteeringType.MOBIS), FAIL_MSG + SEDAN_CONTINENTAL),
        ((CarType.SUV, EngineType.TOYOTA, BrakeType.CONTINENTAL, SteeringType.MOBIS), FAIL_MSG + SUV_TOYOTA),
        ((CarType.TRUCK, EngineType.WIA, BrakeType.CONTINENTAL, SteeringType.MOBIS), FAIL_MSG + TRUCK_WIA),
        ((CarType.TRUCK, EngineType.TOYOTA, BrakeType.MANDO, SteeringType.MOBIS), FAIL_MSG + TRUCK_MANDO),
        ((CarType.TRUCK, EngineType.TOYOTA, BrakeType.BOSCH_B, SteeringType.MOBIS), FAIL_MSG + BOSCH_NOT_BOSCH),
    ],
)
def test_combination_test_report(parts, expected):
    assert make_car(*parts).test() == expected


def test_violation_matches_validity():
    good = make_car(CarType.SUV, EngineType.GM, BrakeType.BOSCH_B, SteeringType.BOSCH_S)
    bad = make_car(CarType.SUV, EngineType.TOYOTA, BrakeType.MANDO, SteeringType.MOBIS)
    assert good.violation() is None and good.is_valid()
    assert bad.violation() == SUV_TOYOTA
    assert not bad.is_valid()


def test_run_working_output():
    car = make_car(CarType.SEDAN, EngineType.GM, BrakeType.MANDO, SteeringType.BOSCH_S)
    out = io.StringIO()
    car.run(out)
    assert out.getvalue() == (
        "Car Type : Sedan\n"
        "Engine Type : GM\n"
        "Brake System : MANDO\n"
        "Steering System : BOSCH_S\n"
        "자동차가 동작됩니다.\n"
    )


def test_run_broken_engine_output():
    car = make_car(CarType.SEDAN, EngineType.BROKEN, BrakeType.MANDO, SteeringType.BOSCH_S)
    out = io.StringIO()
    car.run(out)
    assert out.getvalue() == "엔진이 고장나있습니다.\n자동차가 움직이지 않습니다.\n"


def test_run_invalid_output():
    car = make_car(CarType.SEDAN, EngineType.GM, BrakeType.CONTINENTAL, SteeringType.BOSCH_S)
    out = io.StringIO()
    car.run(out)
    assert out.getvalue() == "자동차가 동작되지 않습니다\n"


def test_describe_lists_parts():
    car = make_car(CarType.TRUCK, EngineType.TOYOTA, BrakeType.BOSCH_B, SteeringType.BOSCH_S)
    lines = car.describe().splitlines()
    assert lines[0] == "Car Type : Truck"
    assert lines[1] == "Engine Type : TOYOTA"


def test_incomplete_car_raises():
    car = Car(car_type=CarType.SEDAN, engine=Engine(EngineType.GM))
    with pytest.raises(ValueError):
        car.test()