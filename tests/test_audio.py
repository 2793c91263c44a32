"""
Tests for the sound service fallbacks. No real audio is played.
"""
import logging

from PySide6.QtMultimedia import QSoundEffect
from PySide6.QtTest import QTest

from randomchooser.controller.audio import NullSoundService, QtSoundService


def test_missing_sound_is_a_silent_noop(qapp, tmp_path):
    sounds = QtSoundService(sounds_dir=str(tmp_path))

    sounds.play_loop("spinning")
    sounds.stop("spinning")
    sounds.play_once("win")

    assert not sounds.is_available("spinning")
    assert not sounds.is_available("win")


def test_missing_sound_warns_once(qapp, tmp_path, caplog):
    sounds = QtSoundService(sounds_dir=str(tmp_path))

    with caplog.at_level(logging.WARNING, logger="randomchooser"):
        for _ in range(5):
            sounds.play_once("win")

    warnings = [r for r in caplog.records if "win" in r.getMessage()]
    assert len(warnings) == 1


def test_stop_does_not_load_the_asset(qapp, tmp_path, caplog):
    sounds = QtSoundService(sounds_dir=str(tmp_path))

    with caplog.at_level(logging.WARNING, logger="randomchooser"):
        sounds.stop("spinning")

    assert caplog.records == []


def test_asset_path_uses_wav(tmp_path):
    sounds = QtSoundService(sounds_dir=str(tmp_path))

    assert sounds.asset_path("win") == str(tmp_path / "win.wav")


def test_null_service_accepts_all_calls():
    sounds = NullSoundService()

    sounds.play_loop("spinning")
    sounds.stop("spinning")
    sounds.play_once("win")


def _write_garbage_wav(directory, asset_id):
    (directory / f"{asset_id}.wav").write_bytes(b"this is not a RIFF file" * 64)


def wait_until(predicate, timeout_ms=3000, step_ms=20):
    waited = 0
    while not predicate() and waited < timeout_ms:
        QTest.qWait(step_ms)
        waited += step_ms
    return predicate()


def test_undecodable_sound_disabled_after_status_error(qapp, tmp_path, caplog):
    _write_garbage_wav(tmp_path, "win")
    sounds = QtSoundService(sounds_dir=str(tmp_path))

    with caplog.at_level(logging.WARNING, logger="randomchooser"):
        sounds.play_once("win")
        assert wait_until(lambda: not sounds.is_available("win"))
        sounds.play_once("win")
        sounds.play_loop("win")

    warnings = [r for r in caplog.records if "win" in r.getMessage()]
    assert len(warnings) == 1
    assert "could not be decoded" in warnings[0].getMessage()


def test_error_status_marks_loaded_sound_unavailable(qapp, tmp_path, caplog):
    _write_garbage_wav(tmp_path, "spinning")
    sounds = QtSoundService(sounds_dir=str(tmp_path))

    with caplog.at_level(logging.WARNING, logger="randomchooser"):
        sounds.play_loop("spinning")
        sounds._on_status_changed("spinning", QSoundEffect.Status.Error)
        sounds._on_status_changed("spinning", QSoundEffect.Status.Error)
        sounds.stop("spinning")
        sounds.play_loop("spinning")

    assert not sounds.is_available("spinning")
    assert len([r for r in caplog.records if "spinning" in r.getMessage()]) == 1


def test_non_error_status_leaves_sound_state_alone(qapp, tmp_path):
    _write_garbage_wav(tmp_path, "win")
    sounds = QtSoundService(sounds_dir=str(tmp_path))
    sounds.play_once("win")
    available = sounds.is_available("win")

    sounds._on_status_changed("win", QSoundEffect.Status.Loading)
    sounds._on_status_changed("win", QSoundEffect.Status.Ready)

    assert sounds.is_available("win") == available
