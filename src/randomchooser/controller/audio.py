"""
Sound Service
=============
Plays the looping "spinning" sound and the one-shot "win" chime.

Why is this file needed?
------------------------
1. Injection: The controller receives audio capabilities explicitly instead
   of reaching for a global sound singleton.
2. Resilience: A missing or undecodable sound file must never interrupt a
   spin. Failed assets are remembered and every later call becomes a no-op.

Classes:
    LoopingAudio: Protocol for sounds that repeat until stopped.
    OneShotAudio: Protocol for sounds that play once.
    QtSoundService: QSoundEffect-backed implementation of both.
    NullSoundService: Silent implementation (muted runs, tests).
"""
from __future__ import annotations

import logging
import os
from typing import Dict, Optional, Protocol, Set

from PySide6.QtCore import QObject, QUrl
from PySide6.QtMultimedia import QSoundEffect

from randomchooser import config

logger = logging.getLogger(__name__)


class LoopingAudio(Protocol):
    def play_loop(self, asset_id: str) -> None: ...
    def stop(self, asset_id: str) -> None: ...


class OneShotAudio(Protocol):
    def play_once(self, asset_id: str) -> None: ...


class NullSoundService:
    def play_loop(self, asset_id: str) -> None:
        pass

    def stop(self, asset_id: str) -> None:
        pass

    def play_once(self, asset_id: str) -> None:
        pass


class QtSoundService(QObject):
    def __init__(
        self,
        sounds_dir: str = config.SOUNDS_PATH,
        volume: float = 1.0,
        parent: Optional[QObject] = None
    ) -> None:
        super().__init__(parent)
        self.sounds_dir = sounds_dir
        self.volume = volume
        self._effects: Dict[str, QSoundEffect] = {}
        self._unavailable: Set[str] = set()

    # --- PUBLIC API ---

    def play_loop(self, asset_id: str) -> None:
        effect = self._effect(asset_id)
        if effect is None:
            return
        effect.setLoopCount(QSoundEffect.Loop.Infinite.value)
        effect.play()

    def stop(self, asset_id: str) -> None:
        # Only stop what has been loaded; stopping must not trigger a load
        effect = self._effects.get(asset_id)
        if effect is None:
            return
        # QSoundEffect restarts from the beginning on the next play()
        effect.stop()

    def play_once(self, asset_id: str) -> None:
        effect = self._effect(asset_id)
        if effect is None:
            return
        effect.setLoopCount(1)
        effect.play()

    def is_available(self, asset_id: str) -> bool:
        return self._effect(asset_id) is not None

    def asset_path(self, asset_id: str) -> str:
        return os.path.join(self.sounds_dir, f"{asset_id}{config.SOUND_EXTENSION}")

    # --- LOADING ---

    def _effect(self, asset_id: str) -> Optional[QSoundEffect]:
        """Returns the loaded effect, loading it lazily on first use."""
        if asset_id in self._unavailable:
            return None
        if asset_id in self._effects:
            return self._effects[asset_id]

        path = self.asset_path(asset_id)
        if not os.path.isfile(path):
            self._mark_unavailable(asset_id, f"file not found: {path}")
            return None

        effect = QSoundEffect(self)
        effect.setVolume(self.volume)
        effect.statusChanged.connect(lambda: self._on_status_changed(asset_id, effect.status()))
        effect.setSource(QUrl.fromLocalFile(path))
        self._effects[asset_id] = effect
        logger.debug(f"Loading sound '{asset_id}' from {path}")
        return effect

    def _on_status_changed(self, asset_id: str, status: QSoundEffect.Status) -> None:
        if status != QSoundEffect.Status.Error:
            return
        effect = self._effects.pop(asset_id, None)
        if effect is None:
            return
        # Decoding is asynchronous, so a corrupt file only shows up here
        effect.deleteLater()
        self._mark_unavailable(asset_id, "could not be decoded")

    def _mark_unavailable(self, asset_id: str, reason: str) -> None:
        self._unavailable.add(asset_id)
        logger.warning(f"Sound '{asset_id}' unavailable ({reason}); playback disabled.")
