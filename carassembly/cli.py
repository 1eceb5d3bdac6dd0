"""Interactive menu for assembling, running and testing a car."""

from __future__ import annotations

import argparse
import re
import sys
import time
from enum import IntEnum
from typing import Callable, Optional, Sequence, TextIO

from carassembly.assembler import Assembler

CLEAR_SCREEN = "\033[H\033[2J"
_FOOTER = "===============================\nINPUT > "

_NUMBER = re.compile(r"\s*[+-]?\d+")


class Step(IntEnum):
    """Questions asked in order while building a car."""

    CAR_TYPE = 0
    ENGINE = 1
    BRAKE_SYSTEM = 2
    STEERING_SYSTEM = 3
    RUN_OR_TEST = 4


_PROMPTS = {
    Step.CAR_TYPE: (
        "        ______________\n"
        "       /|            | \n"
        "  ____/_|_____________|____\n"
        " |                      O  |\n"
        " '-(@)----------------(@)--'\n"
        "===============================\n"
        "어떤 차량 타입을 선택할까요?\n"
        "1. Sedan\n"
        "2. SUV\n"
        "3. Truck\n"
    ),
    Step.ENGINE: (
        "어떤 엔진을 탑재할까요?\n"
        "0. 뒤로가기\n"
        "1. GM\n"
        "2. TOYOTA\n"
        "3. WIA\n"
        "4. 고장난 엔진\n"
    ),
    Step.BRAKE_SYSTEM: (
        "어떤 제동장치를 선택할까요?\n"
        "0. 뒤로가기\n"
        "1. MANDO\n"
        "2. CONTINENTAL\n"
        "3. BOSCH\n"
    ),
    Step.STEERING_SYSTEM: (
        "어떤 조향장치를 선택할까요?\n"
        "0. 뒤로가기\n"
        "1. BOSCH\n"
        "2. MOBIS\n"
    ),
    Step.RUN_OR_TEST: (
        "멋진 차량이 완성되었습니다.\n"
        "어떤 동작을 할까요?\n"
        "0. 처음 화면으로 돌아가기\n"
        "1. RUN\n"
        "2. Test\n"
    ),
}

_LIMITS = {
    Step.CAR_TYPE: (1, 3, "ERROR :: 차량 타입은 1 ~ 3 범위만 선택 가능\n"),
    Step.ENGINE: (0, 4, "ERROR :: 엔진은 0 ~ 4 범위만 선택 가능\n"),
    Step.BRAKE_SYSTEM: (0, 3, "ERROR :: 제동장치는 0 ~ 3 범위만 선택 가능\n"),
    Step.STEERING_SYSTEM: (0, 2, "ERROR :: 조향장치는 0 ~ 2 범위만 선택 가능\n"),
    Step.RUN_OR_TEST: (0, 2, "ERROR :: Run 또는 Test 중 하나를 선택 필요\n"),
}

NOT_A_NUMBER = "ERROR :: 숫자만 입력 가능\n"
GOODBYE = "바이바이\n"


def prompt_text(step: Step) -> str:
    """Return the screen shown when asking the question for ``step``."""
    body = _PROMPTS.get(step)
    if body is None:
        return _FOOTER
    return CLEAR_SCREEN + body + _FOOTER


def validation_error(step: Step, answer: int) -> Optional[str]:
    """Return the error message if ``answer`` is out of range for ``step``."""
    limits = _LIMITS.get(step)
    if limits is None:
        return None
    low, high, message = limits
    if low <= answer <= high:
        return None
    return message


def is_exit_command(line: str) -> bool:
    return line == "exit"


def go_start_point(step: Step, answer: int) -> bool:
    """Tell whether the answer asks to start over from the first question."""
    return answer == 0 and step == Step.RUN_OR_TEST


def _strip_line_end(line: str) -> str:
    for end in ("\r", "\n"):
        line = line.split(end, 1)[0]
    return line


def parse_answer(line: str) -> int:
    """Parse a decimal answer; raise ``ValueError`` if the line is not one."""
    text = _strip_line_end(line)
    match = _NUMBER.match(text)
    if match is None or match.end() != len(text):
        raise ValueError(f"not a number: {text!r}")
    return int(match.group().strip())


def _sleep_ms(ms: int) -> None:
    time.sleep(ms / 1000)


def run(
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    delay: Optional[Callable[[int], object]] = None,
) -> None:
    """Run the menu until ``exit`` is typed or input ends.

    ``delay`` is called with a pause length in milliseconds.
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    delay = _sleep_ms if delay is None else delay

    assembler = Assembler(stdout)
    step = Step.CAR_TYPE

    while True:
        stdout.write(prompt_text(step))
        stdout.flush()
        line = stdin.readline()
        if not line:
            return
        line = _strip_line_end(line)

        if is_exit_command(line):
            stdout.write(GOODBYE)
            return

        try:
            answer = parse_answer(line)
        except ValueError:
            stdout.write(NOT_A_NUMBER)
            delay(800)
            continue

        error = validation_error(step, answer)
        if error is not None:
            stdout.write(error)
            delay(800)
            continue

        if go_start_point(step, answer):
            step = Step.CAR_TYPE
            continue

        if answer == 0 and step >= Step.ENGINE:
            step = Step(step - 1)
            continue

        if step == Step.RUN_OR_TEST:
            if answer == 1:
                assembler.run()
                delay(2000)
            else:
                stdout.write("Test...\n")
                delay(1500)
                assembler.test()
                delay(2000)
            continue

        if step == Step.CAR_TYPE:
            assembler.select_car_type(answer)
        elif step == Step.ENGINE:
            assembler.select_engine(answer)
        elif step == Step.BRAKE_SYSTEM:
            assembler.select_brake(answer)
        elif step == Step.STEERING_SYSTEM:
            assembler.select_steering(answer)

        delay(800)
        step = Step(step + 1)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="carassembly",
        description="Assemble a car from parts, then run or test it.",
    )
    parser.parse_args(argv)
    run()
    return 0


if __name__ == "__main__":
    sys.exit(main())