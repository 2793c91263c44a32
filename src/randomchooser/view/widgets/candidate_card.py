"""
Candidate Card Widget
=====================
Shows the current candidate's photo and name, and animates the photo scale.

Why is this file needed?
------------------------
1. Rendering: Draws the photo with rounded corners and a blue outline,
   scaled around its centre so the layout never jumps while pulsing.
2. Animation: Turns the controller's discrete scale targets into smooth
   QPropertyAnimations (short pulse while spinning, springy reveal).
3. Fallback: A missing photo is replaced by a placeholder with the initial.
"""
from __future__ import annotations

import logging
import os
from typing import Dict, Optional

from PySide6.QtCore import Qt, QRectF, QPropertyAnimation, QEasingCurve, Property
from PySide6.QtGui import QColor, QFont, QPainter, QPainterPath, QPen, QPixmap
from PySide6.QtWidgets import QWidget, QLabel, QVBoxLayout

from randomchooser import config
from randomchooser.model.candidates import Candidate
from randomchooser.model.state import ScaleEasing

logger = logging.getLogger(__name__)

IMAGE_SIZE = 200
CORNER_RADIUS = 10
BORDER_COLOR = QColor("#1e88e5")
BORDER_WIDTH = 2

# Room for the reveal overshoot without resizing the window
CANVAS_SIZE = 250

PULSE_DURATION_MS = 100
SPRING_DURATION_MS = 500


class ImageCache:
    """Loads candidate photos once; missing files become generated placeholders."""

    def __init__(self, images_dir: str = config.IMAGES_PATH) -> None:
        self.images_dir = images_dir
        self._pixmaps: Dict[str, QPixmap] = {}

    def pixmap_for(self, candidate: Candidate) -> QPixmap:
        key = candidate.image_ref
        if key not in self._pixmaps:
            self._pixmaps[key] = self._load(candidate)
        return self._pixmaps[key]

    def _load(self, candidate: Candidate) -> QPixmap:
        path = os.path.join(self.images_dir, f"{candidate.image_ref}{config.IMAGE_EXTENSION}")
        pixmap = QPixmap(path) if os.path.isfile(path) else QPixmap()
        if pixmap.isNull():
            logger.warning(f"Image for '{candidate.name}' unavailable at {path}; using placeholder.")
            return self._placeholder(candidate)
        return pixmap

    @staticmethod
    def _placeholder(candidate: Candidate) -> QPixmap:
        pixmap = QPixmap(IMAGE_SIZE, IMAGE_SIZE)
        pixmap.fill(QColor("#cfd8dc"))

        painter = QPainter(pixmap)
        painter.setRenderHint(QPainter.Antialiasing)
        font = QFont()
        font.setPointSize(72)
        font.setBold(True)
        painter.setFont(font)
        painter.setPen(QColor("#455a64"))
        painter.drawText(pixmap.rect(), Qt.AlignCenter, candidate.initial)
        painter.end()
        return pixmap


class ImageCanvas(QWidget):
    """Paints a single pixmap, rounded and outlined, at an adjustable scale."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._pixmap: Optional[QPixmap] = None
        self._scale: float = 1.0
        self.setFixedSize(CANVAS_SIZE, CANVAS_SIZE)

    def set_pixmap(self, pixmap: QPixmap) -> None:
        self._pixmap = pixmap
        self.update()

    def get_scale(self) -> float:
        return self._scale

    def set_scale(self, value: float) -> None:
        self._scale = float(value)
        self.update()

    # Animatable through QPropertyAnimation(canvas, b"scale")
    scale = Property(float, get_scale, set_scale)

    def paintEvent(self, event) -> None:
        if self._pixmap is None:
            return

        side = IMAGE_SIZE * self._scale
        target = QRectF(
            (self.width() - side) / 2.0,
            (self.height() - side) / 2.0,
            side,
            side
        )
        radius = CORNER_RADIUS * self._scale

        painter = QPainter(self)
        painter.setRenderHints(QPainter.Antialiasing | QPainter.SmoothPixmapTransform)

        clip = QPainterPath()
        clip.addRoundedRect(target, radius, radius)
        painter.setClipPath(clip)
        painter.drawPixmap(target, self._pixmap, QRectF(self._pixmap.rect()))
        painter.setClipping(False)

        painter.setPen(QPen(BORDER_COLOR, BORDER_WIDTH))
        painter.setBrush(Qt.NoBrush)
        painter.drawRoundedRect(target, radius, radius)
        painter.end()


class CandidateCard(QWidget):
    def __init__(self, image_cache: Optional[ImageCache] = None, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.images = image_cache or ImageCache()
        self.candidate: Optional[Candidate] = None

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(10)

        self.canvas = ImageCanvas()
        layout.addWidget(self.canvas, alignment=Qt.AlignHCenter)

        self.lbl_name = QLabel("")
        self.lbl_name.setAlignment(Qt.AlignCenter)
        name_font = self.lbl_name.font()
        name_font.setPointSize(22)
        name_font.setBold(True)
        self.lbl_name.setFont(name_font)
        layout.addWidget(self.lbl_name)

        self._animation = QPropertyAnimation(self.canvas, b"scale", self)

    # --- PROPERTIES ---

    @property
    def name_text(self) -> str:
        return self.lbl_name.text()

    @property
    def scale(self) -> float:
        return self.canvas.get_scale()

    @property
    def target_scale(self) -> float:
        """Where the running animation ends up (the current scale when idle)."""
        if self._animation.state() == QPropertyAnimation.Running:
            return float(self._animation.endValue())
        return self.scale

    # --- SLOTS ---

    def set_candidate(self, candidate: Candidate) -> None:
        self.candidate = candidate
        self.canvas.set_pixmap(self.images.pixmap_for(candidate))
        self.lbl_name.setText(candidate.name)

    def animate_scale(self, value: float, easing: ScaleEasing = ScaleEasing.PULSE) -> None:
        self._animation.stop()
        self._animation.setStartValue(self.canvas.get_scale())
        self._animation.setEndValue(float(value))

        if ScaleEasing(easing) is ScaleEasing.SPRING:
            curve = QEasingCurve(QEasingCurve.OutElastic)
            curve.setAmplitude(1.0)
            curve.setPeriod(0.6)
            self._animation.setDuration(SPRING_DURATION_MS)
        else:
            curve = QEasingCurve(QEasingCurve.InOutSine)
            self._animation.setDuration(PULSE_DURATION_MS)

        self._animation.setEasingCurve(curve)
        self._animation.start()
