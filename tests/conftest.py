"""
Shared pytest fixtures.

Qt widgets are created under the 'offscreen' platform plugin so the suite
runs without a display. A single QApplication is shared by the session.
"""
import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import numpy as np
import pytest
from PySide6.QtWidgets import QApplication

from randomchooser.controller.selection import SelectionController
from randomchooser.model.candidates import make_candidates
from randomchooser.model.state import SpinSettings

from tests.doubles import ManualScheduler, RecordingAudio


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def candidates():
    """The four people from the app, as fresh instances per test."""
    return make_candidates(["Max", "Jameson", "Gabe", "Chaden"])


@pytest.fixture
def event_log():
    return []


@pytest.fixture
def scheduler(event_log):
    return ManualScheduler(event_log)


@pytest.fixture
def audio(event_log):
    return RecordingAudio(event_log)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def make_controller(qapp, scheduler, audio, rng):
    """Factory so tests can vary the candidates or the settings."""
    def _make(candidates, settings=None):
        return SelectionController(
            candidates=candidates,
            scheduler=scheduler,
            loop_audio=audio,
            oneshot_audio=audio,
            settings=settings or SpinSettings(),
            rng=rng,
        )
    return _make


@pytest.fixture
def controller(make_controller, candidates):
    return make_controller(candidates)
