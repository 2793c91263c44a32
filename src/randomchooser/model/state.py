"""
Chooser State (Data Model)
==========================
This module defines the data structures owned by the selection controller.

Why is this file needed?
------------------------
1. State Management: It holds the current index, lap count, phase and the
   displayed candidate in one place.
2. Configuration: SpinSettings bundles the timing and animation constants
   and knows how to read user overrides from QSettings.
3. Decoupling: Views read snapshots of this state; only the controller
   writes to it.

Classes:
    Phase: Idle / Spinning / Revealing state machine phases.
    ScaleEasing: Which animation curve a scale change should use.
    SpinSettings: Tick cadence, lap threshold and bounce parameters.
    ControllerState: The mutable state container.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace, fields
from enum import Enum, IntEnum
from typing import Any, Optional, TYPE_CHECKING

from randomchooser import config

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings
    from randomchooser.model.candidates import Candidate

logger = logging.getLogger(__name__)


class Phase(Enum):
    IDLE = "idle"
    SPINNING = "spinning"
    REVEALING = "revealing"


class ScaleEasing(IntEnum):
    """Animation curve hint passed along with every scale change."""
    PULSE = 0   # quick in/out while spinning
    SPRING = 1  # damped overshoot for the reveal


@dataclass(frozen=True)
class SpinSettings:
    tick_interval_ms: int = config.TICK_INTERVAL_MS
    lap_threshold: int = config.LAP_THRESHOLD
    pulse_scale: float = config.PULSE_SCALE
    reveal_scale: float = config.REVEAL_SCALE
    reveal_settle_ms: int = config.REVEAL_SETTLE_MS

    def __post_init__(self) -> None:
        if self.tick_interval_ms <= 0:
            raise ValueError(f"tick_interval_ms must be positive, got {self.tick_interval_ms}")
        if self.lap_threshold < 1:
            raise ValueError(f"lap_threshold must be at least 1, got {self.lap_threshold}")
        if self.reveal_settle_ms < 0:
            raise ValueError(f"reveal_settle_ms must not be negative, got {self.reveal_settle_ms}")
        if not 0.0 < self.pulse_scale <= 1.0:
            raise ValueError(f"pulse_scale must be in (0, 1], got {self.pulse_scale}")
        if self.reveal_scale < 1.0:
            raise ValueError(f"reveal_scale must be >= 1.0, got {self.reveal_scale}")

    @classmethod
    def from_qsettings(cls, settings: QSettings, group: str = "spin") -> SpinSettings:
        """
        Builds settings from the 'spin/' group of a QSettings store.

        Missing keys keep their defaults. Keys that cannot be converted, or
        that would produce an invalid combination, are logged and ignored.
        """
        result = cls()
        for f in fields(cls):
            raw: Any = settings.value(f"{group}/{f.name}")
            if raw is None or raw == "":
                continue

            caster = int if isinstance(getattr(result, f.name), int) else float
            try:
                value = caster(raw)
                result = replace(result, **{f.name: value})
            except (TypeError, ValueError) as e:
                logger.warning(f"Ignoring setting '{group}/{f.name}'={raw!r}: {e}")

        return result


@dataclass
class ControllerState:
    """
    Everything the selection controller mutates.
    Only the controller writes here; everyone else gets a snapshot().
    """
    current_index: int = 0
    phase: Phase = Phase.IDLE
    laps_completed: int = 0
    displayed: Optional[Candidate] = None
    visual_scale: float = 1.0

    @property
    def is_running(self) -> bool:
        return self.phase is Phase.SPINNING

    def snapshot(self) -> ControllerState:
        return replace(self)
