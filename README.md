# kinkal

Building blocks for a kinematic Kalman track fit, written with numpy and scipy.

## Modules

- `kinkal.units`: a coherent system of units (mm, ns, MeV, positron charge as the base units) and physical constants such as `c_light`, `electron_mass_c2` and `fine_structure_const`.
- `kinkal.timerange`: `TimeRange` is a half-open `[begin, end)` time interval. It raises `ValueError` when `begin > end`. `TimeDir` is the direction of time (`forwards`, `backwards`, `end`), and `TimeDir.next()` raises `IndexError` past `end`.
- `kinkal.chisq`: `Chisq` is an immutable chi-squared with its degrees of freedom. It has `chisq_per_ndof()` and `probability()`, and both return -1 when undefined. Two values add with `+`.
- `kinkal.fitdata`: `FitData`, `Parameters` and `Weights` hold six-dimensional fit data. `Parameters` carries values with their covariance. `Weights` carries the weight vector and weight matrix, the inverse covariance. `Parameters.from_weights` and `Weights.from_parameters` convert between the two by inversion, and raise `numpy.linalg.LinAlgError` when the matrix cannot be inverted. `Parameters.delta` gives the chi-squared difference between two parameter sets.
- `kinkal.particlestate`: `ParticleState` holds position, momentum, time, mass and charge. It provides `momentum()`, `energy()`, `beta()`, `gamma()`, `speed()` and `velocity()`. `ParticleStateEstimate` adds a state covariance and `momentum_variance()`. The module also has the `MomDirection` and `PrintDetail` enums, and the `state_name`, `state_unit` and `state_title` lookups.
- `kinkal.bfield`: the abstract `BFieldMap` interface, with `field_vect`, `field_grad`, `field_deriv`, `in_range` and `describe`. It has three implementations:
  - `UniformBFieldMap`, built from a scalar Bz or a 3-vector.
  - `GradientBFieldMap`, a constant gradient along z.
  - `CompositeBFieldMap`, a superposition of other maps.

  The module also provides `cbar()`.
- `kinkal.axialfield`: `AxialBFieldMap` takes an evenly spaced on-axis Bz profile. It extends the profile off axis using the local gradient, averaged over a window of grid steps.
- `kinkal.interp`: `InterpBilinear` does bilinear interpolation on a regular grid, together with the gradient of the interpolating function. Points outside the grid are extrapolated from the edge cell.
- `kinkal.cylfield`: `CylBMap` is a grid of (Br, Bz) values read from a file. `CylBFieldMap` is the cylindrically symmetric field map that interpolates it.

## Installation

```
pip install .
```

## Usage

```python
import numpy as np
from kinkal.timerange import TimeRange
from kinkal.bfield import UniformBFieldMap, GradientBFieldMap, CompositeBFieldMap
from kinkal.fitdata import Parameters, Weights

trange = TimeRange(0.0, 10.0)
print(trange.mid(), trange.in_range(10.0))   # 5.0 False

field = CompositeBFieldMap([UniformBFieldMap(1.0), GradientBFieldMap(0.9, 1.1, -1500.0, 1500.0)])
print(field.field_vect(np.array([0.0, 0.0, 100.0])))

params = Parameters(np.ones(6), np.eye(6) * 4.0)
weights = Weights.from_parameters(params)
print(weights.weight_mat[0, 0])              # 0.25
```

Field maps built from data take a file path:

```python
from kinkal.axialfield import AxialBFieldMap
from kinkal.cylfield import CylBFieldMap

axial = AxialBFieldMap.from_file("axial_field.txt")
cyl = CylBFieldMap.from_file("cyl_field.txt")
print(axial.describe())
print(cyl.describe())
```

### File formats

**Axial field file.** Each line holds one `z bz` pair, and the pairs must be evenly spaced in z. Blank lines, lines starting with `#`, and lines that do not parse as two numbers are skipped. Spacing that is not uniform raises `ValueError`.

**Cylindrical field file.** The header must hold exactly one line starting with `grid`. That line gives `R0=`, `Z0=`, `nR=`, `nZ=`, `dR=` and `dZ=`. A line starting with `data` ends the header. After it comes one `r z Br Bz` line per grid point, with r as the outer loop. `ValueError` is raised in these cases:
- the grid line is missing or repeated;
- the number of data lines differs from `nR * nZ`;
- a point lies off the grid.

## What the package does not do

This package provides the pieces a track fit is built from, not the fit itself. It has no trajectory classes, no hit or material models, no fitting loop and no command-line program.

`BFieldMap.range_in_tolerance` and `BFieldMap.integrate` accept any trajectory object that supplies these members:
- `position3(t)`
- `velocity(t)`
- `momentum(t)`
- `bnom(t)`
- a `charge` attribute
- a `range` attribute holding a `TimeRange`

## Tests

```
pip install .[test]
pytest
```