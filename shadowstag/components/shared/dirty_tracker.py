"""Cache validity tracking for the shadow raster.

Two states: ``DIRTY`` (the cached raster must be recomputed before the next
paint) and ``CLEAN`` (it matches the current parameters and bounds). All
transitions live in :data:`TRANSITIONS`; there is no partially dirty state.
"""

from __future__ import annotations

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class ShadowState(Enum):
    """Validity of the cached shadow raster."""
    CLEAN = "clean"
    DIRTY = "dirty"


class DirtyTrigger(Enum):
    """Events that drive the state machine."""
    CREATED = "created"
    ENABLED = "enabled"
    RADIUS = "radius"
    OFFSET_X = "offset_x"
    OFFSET_Y = "offset_y"
    SPREAD = "spread"
    COLOR = "color"
    BOUNDS = "bounds"
    LAYOUT = "layout"
    PIPELINE_COMPLETED = "pipeline_completed"


INVALIDATING_TRIGGERS = frozenset(t for t in DirtyTrigger if t is not DirtyTrigger.PIPELINE_COMPLETED)

# (state, trigger) -> next state
TRANSITIONS: dict[tuple[ShadowState, DirtyTrigger], ShadowState] = {
    **{(state, trigger): ShadowState.DIRTY for state in ShadowState for trigger in INVALIDATING_TRIGGERS},
    (ShadowState.DIRTY, DirtyTrigger.PIPELINE_COMPLETED): ShadowState.CLEAN,
    (ShadowState.CLEAN, DirtyTrigger.PIPELINE_COMPLETED): ShadowState.CLEAN,
}

# Parameter field -> trigger fired when its value changes
PARAMETER_TRIGGERS: dict[str, DirtyTrigger] = {
    'enabled': DirtyTrigger.ENABLED,
    'radius': DirtyTrigger.RADIUS,
    'offset_x': DirtyTrigger.OFFSET_X,
    'offset_y': DirtyTrigger.OFFSET_Y,
    'spread': DirtyTrigger.SPREAD,
    'color': DirtyTrigger.COLOR,
}


class DirtyTracker:
    """Tiny state machine gating shadow recomputation.

    Starts ``DIRTY`` (as if fired by ``CREATED``). Reading state never
    changes it.
    """

    def __init__(self) -> None:
        self._state = ShadowState.DIRTY
        self._last_trigger = DirtyTrigger.CREATED
        self.invalidation_count = 0

    @property
    def state(self) -> ShadowState:
        return self._state

    @property
    def is_dirty(self) -> bool:
        return self._state is ShadowState.DIRTY

    @property
    def last_trigger(self) -> DirtyTrigger:
        return self._last_trigger

    def fire(self, trigger: DirtyTrigger) -> ShadowState:
        """Apply a trigger and return the new state."""
        previous = self._state
        self._state = TRANSITIONS[(previous, trigger)]
        self._last_trigger = trigger
        if trigger in INVALIDATING_TRIGGERS:
            self.invalidation_count += 1
        if previous is not self._state:
            logger.debug(f"Shadow {previous.value} -> {self._state.value} ({trigger.value})")
        return self._state

    def invalidate(self, trigger: DirtyTrigger = DirtyTrigger.LAYOUT) -> None:
        """Force ``DIRTY``."""
        if trigger not in INVALIDATING_TRIGGERS:
            raise ValueError(f"{trigger} does not invalidate the shadow")
        self.fire(trigger)

    def invalidate_fields(self, names: list[str]) -> None:
        """Force ``DIRTY`` for each changed parameter field."""
        for name in names:
            self.fire(PARAMETER_TRIGGERS[name])

    def mark_clean(self) -> None:
        """Record a successful full pipeline run."""
        self.fire(DirtyTrigger.PIPELINE_COMPLETED)

    def __repr__(self) -> str:
        return f"DirtyTracker(state={self._state.value}, last_trigger={self._last_trigger.value})"
