# ahrsfusion

Sensor fusion for inertial measurement units, in pure Python with no
third-party dependencies.

The package provides:

- an AHRS (attitude and heading reference system) algorithm that combines
  gyroscope, accelerometer and magnetometer measurements into one orientation
  relative to the Earth (`ahrsfusion.ahrs.Ahrs`), configured with
  `ahrsfusion.settings.Settings` and reporting `Flags` and `InternalStates`;
- orientation helpers such as gravity direction, linear and Earth-frame
  acceleration and heading adjustment (`ahrsfusion.orientation`);
- a tilt-compensated compass (`ahrsfusion.compass.calculate_heading`);
- run-time gyroscope offset correction (`ahrsfusion.offset.Offset`);
- gyroscope, accelerometer and magnetometer calibration models
  (`ahrsfusion.calibration.calibrate_inertial`,
  `ahrsfusion.calibration.calibrate_magnetic`);
- Earth axes conventions and sensor axes alignment
  (`ahrsfusion.axes.Convention`, `ahrsfusion.axes.AxesAlignment`,
  `ahrsfusion.axes.axes_swap`);
- small immutable `Vector`, `Quaternion`, `Matrix` and `Euler` types
  (`ahrsfusion.vector_math`).

Measurements passed in as plain sequences are read as single-precision
numbers; vector and quaternion normalisation uses a fast approximate inverse
square root, so unit lengths are close to, but not exactly, one.

## Installation

```
pip install ahrsfusion
```

## Usage

```python
from ahrsfusion.ahrs import Ahrs
from ahrsfusion.axes import Convention
from ahrsfusion.offset import Offset
from ahrsfusion.settings import Settings
from ahrsfusion.vector_math import Vector

sample_rate = 100  # Hz
offset = Offset(sample_rate)
ahrs = Ahrs(Settings(
    convention=Convention.NWU,
    gain=0.5,
    gyroscope_range=2000.0,          # degrees per second
    acceleration_rejection=10.0,     # degrees
    magnetic_rejection=10.0,         # degrees
    recovery_trigger_period=5 * sample_rate,
))

gyroscope = Vector.of([0.0, 0.0, 0.0])       # degrees per second
accelerometer = Vector.of([0.0, 0.0, 1.0])   # g
magnetometer = Vector.of([1.0, 0.0, 0.0])    # any calibrated units

gyroscope = offset.update(gyroscope)
ahrs.update(gyroscope, accelerometer, magnetometer, 1 / sample_rate)

euler = ahrs.quaternion.to_euler()           # roll, pitch, yaw in degrees
print(euler)
print(ahrs.earth_acceleration)
print(ahrs.flags)
print(ahrs.internal_states)
```

`Ahrs()` with no argument uses the default `Settings()`. Settings can be
replaced at any time by assigning `ahrs.settings`; `ahrs.reset()` restarts the
algorithm with the current settings.

Without a magnetometer use `ahrs.update_no_magnetometer(...)`; with a heading
from another source use `ahrs.update_external_heading(...)`. Heading drift
can be reset with `ahrs.set_heading(degrees)`.

### Compass

```python
from ahrsfusion.axes import Convention
from ahrsfusion.compass import calculate_heading
from ahrsfusion.vector_math import Vector

heading = calculate_heading(
    Convention.NWU,
    Vector.of([0.0, 0.0, 1.0]),
    Vector.of([1.0, 0.0, 0.0]),
)
```

### Axes alignment

```python
from ahrsfusion.axes import AxesAlignment, axes_swap
from ahrsfusion.vector_math import Vector

body = axes_swap(Vector.of([1.0, 2.0, 3.0]), AxesAlignment.PYNXPZ)
```

### Calibration

```python
from ahrsfusion.calibration import calibrate_inertial, calibrate_magnetic
from ahrsfusion.vector_math import Matrix, Vector

gyroscope = calibrate_inertial(
    Vector(1.0, 2.0, 3.0), Matrix(), Vector(1.0, 1.0, 1.0), Vector(0.1, 0.1, 0.1)
)
magnetometer = calibrate_magnetic(Vector(30.0, 5.0, -20.0), Matrix(), Vector(2.0, 1.0, 0.0))
```

## What the package does not do

It is a library only: it has no command-line tool, does not read sensors or
data files, and does not log or store results. Values come back as the
package's own `Vector`, `Quaternion`, `Matrix` and `Euler` types rather than
arrays.

## Running the tests

```
pip install "ahrsfusion[test]"
pytest
```