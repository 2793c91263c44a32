"""
Selection Controller
====================
The spin state machine: cycles through the candidates on every tick, stops
after a fixed number of laps and reveals a random winner.

Why is this file needed?
------------------------
1. Logic: It is the only place that decides what is shown and who wins.
2. Signals: Views subscribe to Qt signals instead of polling the state.
3. Decoupling: Timers and sounds are injected (Scheduler, LoopingAudio,
   OneShotAudio), so the whole cycle runs in tests without a clock or a
   sound card.

State machine:
    IDLE --start()--> SPINNING --lap threshold--> REVEALING --settle--> IDLE
    start() is also accepted while REVEALING; the pending settle is then
    discarded via the spin token.

Classes:
    SelectionController: Owns ControllerState and drives the spin.
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np
from PySide6.QtCore import QObject, Signal

from randomchooser import config
from randomchooser.controller.audio import LoopingAudio, OneShotAudio
from randomchooser.controller.scheduling import Scheduler
from randomchooser.model.candidates import Candidate
from randomchooser.model.state import ControllerState, Phase, ScaleEasing, SpinSettings

logger = logging.getLogger(__name__)


class SelectionController(QObject):
    candidate_changed = Signal(object)     # Candidate
    scale_changed = Signal(float, object)  # (scale, ScaleEasing)
    running_changed = Signal(object)       # bool
    phase_changed = Signal(object)         # Phase
    selection_made = Signal(object)        # final Candidate

    def __init__(
        self,
        candidates: Sequence[Candidate],
        scheduler: Scheduler,
        loop_audio: LoopingAudio,
        oneshot_audio: OneShotAudio,
        settings: Optional[SpinSettings] = None,
        rng: Optional[np.random.Generator] = None,
        parent: Optional[QObject] = None
    ) -> None:
        super().__init__(parent)
        # Reject-and-resample needs at least one alternative to the shown candidate
        distinct_ids = {c.id for c in candidates}
        if len(distinct_ids) < 2:
            raise ValueError(
                f"SelectionController needs at least 2 candidates, got {len(distinct_ids)} distinct."
            )
        # A repeated entry would also skew the draw towards it
        if len(distinct_ids) != len(candidates):
            raise ValueError("SelectionController candidates must not repeat.")

        self.candidates: tuple[Candidate, ...] = tuple(candidates)
        self.scheduler = scheduler
        self.loop_audio = loop_audio
        self.oneshot_audio = oneshot_audio
        self.settings = settings or SpinSettings()
        self.rng = rng if rng is not None else np.random.default_rng()

        self._state = ControllerState()
        self._spin_token = 0

    # --- PROPERTIES ---

    @property
    def state(self) -> ControllerState:
        """A copy of the current state; mutating it has no effect."""
        return self._state.snapshot()

    @property
    def is_running(self) -> bool:
        return self._state.is_running

    @property
    def phase(self) -> Phase:
        return self._state.phase

    @property
    def displayed(self) -> Optional[Candidate]:
        return self._state.displayed

    @property
    def current_index(self) -> int:
        return self._state.current_index

    @property
    def laps_completed(self) -> int:
        return self._state.laps_completed

    @property
    def visual_scale(self) -> float:
        return self._state.visual_scale

    # --- OPERATIONS ---

    def start(self) -> None:
        if self._state.is_running:
            logger.debug("start() ignored: spin already in progress.")
            return

        # Invalidates any settle callback left over from the previous reveal
        self._spin_token += 1

        self._state.laps_completed = 0
        self._set_phase(Phase.SPINNING)
        self._set_scale(1.0, ScaleEasing.PULSE)
        logger.info(f"Spin started at index {self._state.current_index}.")

        self.loop_audio.play_loop(config.SPINNING_SOUND)
        self.scheduler.start_repeating(self.settings.tick_interval_ms, self.tick)

    def tick(self) -> None:
        if not self._state.is_running:
            return

        n = len(self.candidates)
        state = self._state
        state.current_index = (state.current_index + 1) % n
        self._set_displayed(self.candidates[state.current_index])

        # Depress / release on alternate ticks
        pulse = self.settings.pulse_scale
        self._set_scale(pulse if state.visual_scale != pulse else 1.0, ScaleEasing.PULSE)

        if state.current_index == n - 1:
            state.laps_completed += 1
            logger.debug(f"Lap {state.laps_completed}/{self.settings.lap_threshold} completed.")

        if state.laps_completed >= self.settings.lap_threshold:
            self.stop()

    def stop(self) -> None:
        if not self._state.is_running:
            return

        # 1-2. No more ticks, leave the spinning phase
        self.scheduler.stop_repeating()
        self._set_phase(Phase.REVEALING)

        # 3. Silence and rewind the loop
        self.loop_audio.stop(config.SPINNING_SOUND)

        # 4-5. Pick a winner different from whoever is on screen
        winner = self._pick_different(self._state.displayed)
        self._set_displayed(winner)
        logger.info(f"Selected: {winner.name}")
        self.selection_made.emit(winner)

        # 6. Chime
        self.oneshot_audio.play_once(config.WIN_SOUND)

        # 7. Overshoot now, settle back later
        self._set_scale(self.settings.reveal_scale, ScaleEasing.SPRING)
        token = self._spin_token
        self.scheduler.call_later(self.settings.reveal_settle_ms, lambda: self._settle(token))

    # --- HELPERS ---

    def _pick_different(self, current: Optional[Candidate]) -> Candidate:
        """Uniform draw over all candidates, resampled until it differs from `current`."""
        while True:
            choice = self.candidates[int(self.rng.integers(len(self.candidates)))]
            if current is None or choice.id != current.id:
                return choice

    def _settle(self, token: int) -> None:
        if token != self._spin_token:
            logger.debug("Discarding stale reveal settle from a previous spin.")
            return
        self._set_scale(1.0, ScaleEasing.SPRING)
        self._set_phase(Phase.IDLE)

    def _set_phase(self, phase: Phase) -> None:
        was_running = self._state.is_running
        self._state.phase = phase
        self.phase_changed.emit(phase)
        if was_running != self._state.is_running:
            self.running_changed.emit(self._state.is_running)

    def _set_displayed(self, candidate: Candidate) -> None:
        self._state.displayed = candidate
        self.candidate_changed.emit(candidate)

    def _set_scale(self, scale: float, easing: ScaleEasing) -> None:
        self._state.visual_scale = scale
        self.scale_changed.emit(scale, easing)
