# carassembly

A small interactive console simulator for putting a car together from parts.
You choose a car type, an engine, a brake system and a steering system. Then
you either run the finished car or test whether its parts work together.
The menu text is in Korean.

## Installation

```
pip install .
```

## Usage

Start the interactive assembler:

```
carassembly
```

It takes no options other than `--help`. Each screen clears the terminal and
asks for a number:

1. Car type: 1 Sedan, 2 SUV, 3 Truck
2. Engine: 1 GM, 2 TOYOTA, 3 WIA, 4 a broken engine
3. Brake system: 1 MANDO, 2 CONTINENTAL, 3 BOSCH
4. Steering system: 1 BOSCH, 2 MOBIS
5. 1 runs the finished car, 2 tests its parts combination

On screens 2 to 4, `0` goes back one step. On the final screen, `0` goes back
to the first screen. Type `exit` on any screen, or end the input, to quit.
An answer that is not a whole number, or is out of range for the screen,
prints an error and asks again. After each choice, and after a run or a test,
the menu pauses briefly (0.8 to 2 seconds) before the next screen.

Some combinations do not work:

- A Sedan cannot use Continental brakes.
- An SUV cannot use a TOYOTA engine.
- A Truck cannot use a WIA engine or Mando brakes.
- Bosch brakes need Bosch steering.

A car with a broken engine passes the combination rules but does not move.

## Library use

```python
import io

from carassembly.assembler import Assembler
from carassembly.car import CarType, RunCode
from carassembly.parts import EngineType, BrakeType, SteeringType

out = io.StringIO()
assembler = Assembler(out)
assembler.select_car_type(CarType.SEDAN)
assembler.select_engine(EngineType.GM)
assembler.select_brake(BrakeType.MANDO)
assembler.select_steering(SteeringType.BOSCH_S)

assert assembler.run() is RunCode.WORKING
print(assembler.car.test())
```

- `carassembly.parts` holds `Engine`, `Brake` and `SteeringSystem`, each built
  from its type enum (`EngineType`, `BrakeType`, `SteeringType`) or by name
  with `from_name`, which raises `ValueError` for an unknown name.
- `carassembly.car.Car` holds the chosen parts. `Car.violation()` returns the
  reason a combination is rejected, or `None` if none applies;
  `Car.is_valid()` reports whether the parts fit together; `Car.test()`
  returns the combination test report as text; `Car.describe()` returns the
  parts list; `Car.run(out)` writes to `out` (standard output by default) and
  returns a `RunCode`: `WORKING`, `NOT_WORKING` or `BROKEN_ENGINE`. These
  raise `ValueError` if a part has not been chosen yet.
- `carassembly.assembler.Assembler` takes menu numbers, fits the matching
  parts onto `assembler.car` and writes each choice to its output. Numbers
  with no matching part are ignored.
- `carassembly.cli.run(stdin, stdout, delay)` drives the menu on any text
  streams; `delay` is called with each pause length in milliseconds, so
  passing a function that does nothing removes the pauses.

## Running the tests

```
pip install .[test]
pytest
```