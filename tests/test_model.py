"""
Tests for candidates and spin settings.
"""
import dataclasses
import logging

import pytest
from PySide6.QtCore import QSettings

from randomchooser.model.candidates import Candidate, DEFAULT_CANDIDATES, make_candidates
from randomchooser.model.state import ControllerState, Phase, SpinSettings


class TestCandidates:
    def test_default_list(self):
        assert [c.name for c in DEFAULT_CANDIDATES] == ["Max", "Jameson", "Gabe", "Chaden"]
        assert all(c.image_ref == c.name for c in DEFAULT_CANDIDATES)

    def test_ids_are_unique_even_for_duplicate_names(self):
        a, b = make_candidates(["Sam", "Sam"])

        assert a.id != b.id
        assert a != b

    def test_candidate_is_immutable(self):
        candidate = Candidate(name="Max", image_ref="Max")

        with pytest.raises(dataclasses.FrozenInstanceError):
            candidate.name = "Gabe"

    def test_initial(self):
        assert Candidate(name="jameson", image_ref="x").initial == "J"
        assert Candidate(name="", image_ref="x").initial == "?"


class TestControllerState:
    def test_is_running_only_while_spinning(self):
        state = ControllerState()
        assert not state.is_running

        state.phase = Phase.SPINNING
        assert state.is_running

        state.phase = Phase.REVEALING
        assert not state.is_running


class TestSpinSettings:
    def test_defaults(self):
        settings = SpinSettings()

        assert settings.tick_interval_ms == 100
        assert settings.lap_threshold == 3
        assert settings.pulse_scale == 0.95
        assert settings.reveal_scale == 1.2
        assert settings.reveal_settle_ms == 300

    @pytest.mark.parametrize("kwargs", [
        {"tick_interval_ms": 0},
        {"lap_threshold": 0},
        {"reveal_settle_ms": -1},
        {"pulse_scale": 1.5},
        {"reveal_scale": 0.5},
    ])
    def test_invalid_values_rejected(self, kwargs):
        with pytest.raises(ValueError):
            SpinSettings(**kwargs)

    def test_from_qsettings_reads_overrides(self, qapp, tmp_path):
        store = QSettings(str(tmp_path / "chooser.ini"), QSettings.IniFormat)
        store.setValue("spin/lap_threshold", "5")
        store.setValue("spin/reveal_scale", "1.3")
        store.sync()

        settings = SpinSettings.from_qsettings(store)

        assert settings.lap_threshold == 5
        assert settings.reveal_scale == pytest.approx(1.3)
        assert settings.tick_interval_ms == 100

    def test_from_qsettings_ignores_bad_values(self, qapp, tmp_path, caplog):
        store = QSettings(str(tmp_path / "chooser.ini"), QSettings.IniFormat)
        store.setValue("spin/tick_interval_ms", "fast")
        store.setValue("spin/pulse_scale", "3.0")
        store.sync()

        with caplog.at_level(logging.WARNING, logger="randomchooser"):
            settings = SpinSettings.from_qsettings(store)

        assert settings == SpinSettings()
        messages = [r.getMessage() for r in caplog.records]
        assert any("spin/tick_interval_ms" in m for m in messages)
        assert any("spin/pulse_scale" in m for m in messages)

    def test_from_qsettings_empty_store_gives_defaults(self, qapp, tmp_path):
        store = QSettings(str(tmp_path / "empty.ini"), QSettings.IniFormat)

        assert SpinSettings.from_qsettings(store) == SpinSettings()
