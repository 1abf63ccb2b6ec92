from __future__ import annotations

import logging
from typing import Callable, Optional

import numpy as np
from pubsub import pub

from Const import RESOLVE_EPSILON, SPRING_PRESETS, STATE_DTYPE
from spring_function import SpringFunction
from ValueUtils import approximately_equal, approximately_zero, clamp_vector, validate_range
from vector_types import VectorAdapter, adapter_for

logger = logging.getLogger(__name__)


class SpringAnimation:
    """
    Animates `value` towards `to_value` with a physically modeled spring,
    optionally seeded with `velocity`. Depending on how the spring is
    configured it may bounce around the end point (underdamped), settle
    without overshoot (critically damped) or creep in (overdamped).

    The animation does not schedule itself. Whoever owns the frame clock
    calls tick(dt) once per frame while `is_running`.

    Stopping via stop() keeps the spring parameters and callbacks, so the
    animation can be redirected right away by setting a new `to_value`
    and/or `velocity` and ticking again.

        anim = SpringAnimation(Point(0, 0), response=0.5, damping_ratio=0.7)
        anim.to_value = Point(100, 100)
        anim.on_value_changed(lambda p: print(p))
        anim.start()
    """

    def __init__(
        self,
        initial_value=0.0,
        *,
        response: Optional[float] = None,
        damping_ratio: Optional[float] = None,
        stiffness: Optional[float] = None,
        damping: Optional[float] = None,
        adapter: Optional[VectorAdapter] = None,
        topic: Optional[str] = None,
    ):
        """
        :param initial_value: starting value, also the initial target
        :param adapter: value <-> vector mapping, inferred from initial_value if None
        :param topic: pubsub topic that receives every value change as `value=`
        """
        self.adapter = adapter if adapter is not None else adapter_for(initial_value)
        self._value = self._to_state(initial_value)
        self._to_value = self._value.copy()
        # Stored negated: the solver works in displacement space (to_value - value)
        self._velocity = np.zeros(self.adapter.width, dtype=STATE_DTYPE)
        self._clamping_range = None

        self.spring = SpringFunction()
        if any(p is not None for p in (response, damping_ratio, stiffness, damping)):
            self.configure(
                response=response,
                damping_ratio=damping_ratio,
                stiffness=stiffness,
                damping=damping,
            )

        self._value_changed: Optional[Callable] = None
        self.completion: Optional[Callable[[], None]] = None
        self.topic = topic
        self._running = False

    @classmethod
    def from_preset(cls, name, initial_value=0.0, **kwargs) -> SpringAnimation:
        try:
            response, damping_ratio = SPRING_PRESETS[name]
        except KeyError:
            raise KeyError(
                f"unknown spring preset {name!r}, available: {sorted(SPRING_PRESETS)}"
            ) from None
        return cls(initial_value, response=response, damping_ratio=damping_ratio, **kwargs)

    # --- Values ---

    def _to_state(self, value):
        # State is always float64, the adapter dtype only applies on the way out
        return self.adapter.to_vector(value).astype(STATE_DTYPE)

    @property
    def value(self):
        return self.adapter.from_vector(self._value)

    @value.setter
    def value(self, new_value):
        self._value = self._to_state(new_value)

    @property
    def to_value(self):
        return self.adapter.from_vector(self._to_value)

    @to_value.setter
    def to_value(self, new_value):
        self._to_value = self._to_state(new_value)

    @property
    def velocity(self):
        # Public velocity is d(value)/dt, which is what touch/gesture velocities are
        return self.adapter.from_vector(-self._velocity)

    @velocity.setter
    def velocity(self, new_value):
        self._velocity = -self._to_state(new_value)

    @property
    def clamping_range(self):
        if self._clamping_range is None:
            return None
        lower, upper = self._clamping_range
        return self.adapter.from_vector(lower), self.adapter.from_vector(upper)

    @clamping_range.setter
    def clamping_range(self, new_range):
        if new_range is None:
            self._clamping_range = None
            return
        lower, upper = new_range
        self._clamping_range = validate_range(
            self._to_state(lower), self._to_state(upper)
        )

    # --- Spring ---

    def configure(self, *, stiffness=None, damping=None, response=None, damping_ratio=None):
        """Takes effect on the next tick, starting from the current state."""
        self.spring.configure(
            stiffness=stiffness,
            damping=damping,
            response=response,
            damping_ratio=damping_ratio,
        )

    @property
    def damping(self):
        return self.spring.damping

    @property
    def stiffness(self):
        return self.spring.stiffness

    @property
    def response(self):
        return self.spring.response

    @property
    def damping_ratio(self):
        return self.spring.damping_ratio

    # --- Callbacks ---

    def on_value_changed(self, callback: Optional[Callable]):
        self._value_changed = callback

    def _post_value_changed(self):
        if self._value_changed is None and self.topic is None:
            return
        value = self.value
        if self._value_changed is not None:
            self._value_changed(value)
        if self.topic is not None:
            pub.sendMessage(self.topic, value=value)

    # --- Lifecycle ---

    @property
    def is_running(self):
        return self._running

    def start(self):
        self._running = True

    def stop(self, resolve_immediately=False, post_value_changed=False):
        """
        Stop ticking. Completion is never fired from here.

        :param resolve_immediately: jump straight to `to_value`
        :param post_value_changed: notify the value-changed callback
        """
        self._running = False
        if resolve_immediately:
            self._value[...] = self._to_value
        if post_value_changed:
            self._post_value_changed()

        # A redirect after stop starts from rest unless a new velocity is set
        self._velocity[...] = 0

    def has_resolved(self):
        return approximately_zero(self._velocity, RESOLVE_EPSILON) and approximately_equal(
            self._value, self._to_value, RESOLVE_EPSILON
        )

    def tick(self, dt):
        x0 = self._to_value - self._value
        x = self.spring.solve(dt, x0, self._velocity)
        np.subtract(self._to_value, x, out=self._value)

        if self._clamping_range is not None:
            lower, upper = self._clamping_range
            clamp_vector(self._value, lower, upper)

        self._post_value_changed()

        if self.has_resolved():
            self.stop()

            self._value[...] = self._to_value
            self._post_value_changed()

            logger.debug("spring resolved at %s", self._to_value)
            if self.completion is not None:
                self.completion()

    def __repr__(self):
        state = "running" if self._running else "stopped"
        return f"SpringAnimation(value={self.value!r}, to_value={self.to_value!r}, {state}, {self.spring!r})"
