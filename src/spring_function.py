import copy
import logging
import math

import numpy as np

from Const import CRITICAL_DAMPING_EPSILON, DEFAULT_DAMPING_RATIO, DEFAULT_RESPONSE

logger = logging.getLogger(__name__)

# Damping regimes
UNDERDAMPED = "underdamped"
CRITICAL = "critical"
OVERDAMPED = "overdamped"

TWO_PI = 2.0 * math.pi


def _require_positive(name, value):
    value = float(value)
    if not math.isfinite(value) or value <= 0.0:
        raise ValueError(f"{name} must be a positive finite number, got {value!r}")
    return value


def _require_non_negative(name, value):
    value = float(value)
    if not math.isfinite(value) or value < 0.0:
        raise ValueError(f"{name} must be a non-negative finite number, got {value!r}")
    return value


class SpringFunction:
    """
    Analytic solver for a unit-mass damped harmonic oscillator:

        x'' + 2 * zeta * w0 * x' + w0^2 * x = 0

    where x is the displacement from the target. Every component of the
    displacement vector is an independent oscillator sharing the same
    parameters, so solve() is plain element-wise numpy math.

    Two equivalent parameterizations:
    - stiffness (k) / damping (c): k = w0^2, c = 2 * zeta * w0
    - response / damping_ratio: response = 2π / w0, damping_ratio = zeta
      (0 = 永遠震盪, 1 = 臨界阻尼不會過衝, >1 = 過阻尼很黏)
    """

    def __init__(self, response=DEFAULT_RESPONSE, damping_ratio=DEFAULT_DAMPING_RATIO):
        self.configure(response=response, damping_ratio=damping_ratio)

    def configure(self, *, stiffness=None, damping=None, response=None, damping_ratio=None):
        """
        Reconfigure the spring in place. Pass exactly one pair:
        configure(stiffness=..., damping=...) or
        configure(response=..., damping_ratio=...)
        """
        by_constants = stiffness is not None or damping is not None
        by_response = response is not None or damping_ratio is not None
        if by_constants == by_response:
            raise TypeError(
                "configure() takes either stiffness/damping or response/damping_ratio"
            )

        if by_constants:
            if stiffness is None or damping is None:
                raise TypeError("configure() needs both stiffness and damping")
            stiffness = _require_positive("stiffness", stiffness)
            damping = _require_non_negative("damping", damping)
            w0 = math.sqrt(stiffness)
            response = TWO_PI / w0
            damping_ratio = damping / (2.0 * w0)
        else:
            if response is None or damping_ratio is None:
                raise TypeError("configure() needs both response and damping_ratio")
            response = _require_positive("response", response)
            damping_ratio = _require_non_negative("damping_ratio", damping_ratio)
            w0 = TWO_PI / response
            stiffness = w0 * w0
            damping = 2.0 * damping_ratio * w0

        self._stiffness = stiffness
        self._damping = damping
        self._response = response
        self._damping_ratio = damping_ratio
        self._update_constants()

        logger.debug(
            "spring configured: response=%.4f damping_ratio=%.4f (%s)",
            response,
            damping_ratio,
            self._regime,
        )

    def _update_constants(self):
        zeta = self._damping_ratio
        w0 = TWO_PI / self._response

        self._w0 = w0
        self._zeta_w0 = zeta * w0

        if abs(zeta - 1.0) <= CRITICAL_DAMPING_EPSILON:
            self._regime = CRITICAL
        elif zeta < 1.0:
            self._regime = UNDERDAMPED
            self._wd = w0 * math.sqrt(1.0 - zeta * zeta)
        else:
            self._regime = OVERDAMPED
            s = math.sqrt(zeta * zeta - 1.0)
            # w0 * (zeta - s) == w0 / (zeta + s), the latter without cancellation
            self._r1 = -w0 / (zeta + s)
            self._r2 = -w0 * (zeta + s)

    @property
    def stiffness(self):
        return self._stiffness

    @property
    def damping(self):
        return self._damping

    @property
    def response(self):
        return self._response

    @property
    def damping_ratio(self):
        return self._damping_ratio

    @property
    def regime(self):
        return self._regime

    def solve(self, dt, x0, velocity):
        """
        Advance the oscillator by dt seconds.

        :param dt: elapsed time, >= 0. Exact for any size.
        :param x0: current displacement (toValue - value), scalar or (N,)
        :param velocity: (N,) ndarray of dx/dt, overwritten with the new velocity
        :return: displacement after dt, same dtype as x0
        """
        x0 = np.asarray(x0)
        v0 = velocity
        w0 = self._w0

        if self._regime == UNDERDAMPED:
            zw = self._zeta_w0
            wd = self._wd
            envelope = math.exp(-zw * dt)
            cos_wd = math.cos(wd * dt)
            sin_wd_over_wd = math.sin(wd * dt) / wd

            x = envelope * (x0 * cos_wd + (v0 + zw * x0) * sin_wd_over_wd)
            v = envelope * (v0 * cos_wd - (zw * v0 + w0 * w0 * x0) * sin_wd_over_wd)

        elif self._regime == CRITICAL:
            envelope = math.exp(-w0 * dt)
            b = v0 + w0 * x0

            x = envelope * (x0 + b * dt)
            v = envelope * (v0 - (w0 * dt) * b)

        else:
            r1 = self._r1
            r2 = self._r2
            e1 = math.exp(r1 * dt)
            e2 = math.exp(r2 * dt)
            c2 = (r1 * x0 - v0) / (r1 - r2)
            c1 = x0 - c2

            x = c1 * e1 + c2 * e2
            v = (r1 * e1) * c1 + (r2 * e2) * c2

        velocity[...] = v
        dtype = x0.dtype if x0.dtype.kind == "f" else np.float64
        return np.asarray(x, dtype=dtype)

    def copy(self):
        return copy.copy(self)

    def __repr__(self):
        return (
            f"SpringFunction(response={self._response:.4g}, "
            f"damping_ratio={self._damping_ratio:.4g}, regime={self._regime!r})"
        )
