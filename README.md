# bayesfilters

Building blocks for recursive Bayesian filters, backed by NumPy.

## Modules

- `bayesfilters.gaussian_mixture`
  - `GaussianMixture` keeps the means (one column per component), the covariances (placed side by side) and the weights of a mixture.
  - Its states can be linear, circular (angles) or quaternion. With quaternions the covariance lives in the 3-dimensional tangent space.
  - `component_mean(i)` and `component_covariance(i)` return writable views.
  - `resize` keeps the existing components when only their number changes. Any other change discards the content.
  - `augment_with_noise` appends a zero-mean noise block to every component.
  - `copy` returns a deep copy.
  - `Gaussian` is a one-component mixture. Its `mean` is a vector and its `weight` is a float.
- `bayesfilters.directional_statistics`
  - `directional_add` and `directional_sub` add or subtract an angle vector to or from each column and wrap the result to (-pi, pi].
  - `directional_mean` computes the weighted circular mean of the columns.
- `bayesfilters.history_buffer`
  - `HistoryBuffer` keeps the most recent state vectors, newest first.
  - Its window defaults to 5 and is clamped to the range 2 to 30.
  - `history()` returns the stored vectors as the columns of a matrix.
- `bayesfilters.estimates_extraction`
  - `EstimatesExtraction` turns particles (one per column) with log weights into a single estimate. The method is chosen with `ExtractionMethod`.
  - The base estimates are `MEAN`, `MODE` and `MAP`.
  - Prefixed variants smooth the estimate over a moving window: `S` for simple, `W` for linearly weighted and `E` for exponentially weighted averaging.
  - The default method is `EMODE`.
  - MAP methods need the previous weights, the likelihoods and the transition probabilities. Without them `extract` raises `ValueError`.
  - `info()` describes the window size and the methods, and marks the one in use.
- `bayesfilters.interfaces`
  - `Agent`: its base `set_property` returns `False`.
  - `Skippable` is an abstract base class.
  - `ExogenousModel` can skip only the `"exogenous"` step. Any other step name raises `ValueError`.
  - `StateProcess` is an abstract base class with `propagate`, `motion` and `set_property`.
- `bayesfilters.filtering_algorithm`
  - `FilteringAlgorithm` runs a filtering recursion on a background thread.
  - `boot()` starts the thread. It waits for `run()` (or `teardown()`), calls `initialization_step()` and then repeats `filtering_step()` while `run_condition()` holds.
  - `reset()` restarts the recursion from the initialization step.
  - `reboot()` also restarts it, but waits for `run()` before iterating again.
  - `wait()` joins the thread and re-raises any error raised in it.
- `bayesfilters.gaussian_filter`
  - `GaussianPrediction` and `GaussianCorrection` are abstract steps that return new beliefs. When skipped they return a copy of their input.
  - `GaussianFilter` combines one of each. Its `skip` accepts `"prediction"`, `"state"`, `"exogenous"`, `"correction"` or `"all"`.
- `bayesfilters.gaussian_likelihood`
  - `GaussianLikelihood` scores predicted states through a measurement model's innovations and noise covariance. The result is multiplied by `scale_factor`.
  - It returns `None` when the model has no data.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
import numpy as np
from bayesfilters.gaussian_mixture import Gaussian, GaussianMixture
from bayesfilters.directional_statistics import directional_mean
from bayesfilters.estimates_extraction import EstimatesExtraction, ExtractionMethod

g = Gaussian(3)
g.mean[:] = [1.0, 2.0, 3.0]
g.covariance[:] = np.eye(3)
g.augment_with_noise(np.eye(2))
print(g.mean)          # [1. 2. 3. 0. 0.]

mixture = GaussianMixture(5, 3)
mixture.component_mean(0)[:] = [1.0, 2.0, 3.0]

angles = np.array([[3.14, -3.14], [1.57, -1.57]])
print(directional_mean(angles, np.array([0.5, 0.5])))

extraction = EstimatesExtraction(2)
extraction.set_method(ExtractionMethod.MEAN)
particles = np.array([[0.0, 2.0], [1.0, 3.0]])
print(extraction.extract(particles, np.log([0.5, 0.5])))   # [1. 2.]
```

A concrete filter subclasses `FilteringAlgorithm` (or `GaussianFilter`) and implements `run_condition`, `initialization_step` and `filtering_step`. Start it with `boot()` and `run()`, then call `wait()` to join the filtering thread.

## What is not included

The package provides the data structures and abstract steps only. It has none of the following:

- concrete state models
- concrete measurement models
- Kalman, unscented or particle filter steps
- sigma-point utilities
- logging of filter output to files

You supply these by subclassing `StateProcess`, `GaussianPrediction`, `GaussianCorrection` and `FilteringAlgorithm`. A measurement model for `GaussianLikelihood` is any object with the methods it calls.

There is no command-line program.