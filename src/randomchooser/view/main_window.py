"""
Main Application Window
=======================
The single screen: the candidate card and the "Choose" button.

Why is this file needed?
------------------------
1. Layout: It stacks the card above the button.
2. Routing: It connects the button to SelectionController.start() and the
   controller's signals back to the card and the button state.
"""
from typing import Optional, Sequence

from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QPushButton
from PySide6.QtCore import Qt

from randomchooser.controller.selection import SelectionController
from randomchooser.model.candidates import Candidate
from randomchooser.view.widgets.candidate_card import CandidateCard, ImageCache

VISIBLE_APP_NAME = "Random Chooser"

BUTTON_TEXT_IDLE = "Choose"
BUTTON_TEXT_SPINNING = "Thinking..."

BUTTON_STYLE = """
    QPushButton {
        background-color: #1e88e5;
        color: white;
        border: none;
        border-radius: 25px;
        font-size: 18px;
        font-weight: bold;
    }
    QPushButton:disabled { background-color: gray; }
"""


class MainWindow(QMainWindow):
    def __init__(
        self,
        controller: SelectionController,
        image_cache: Optional[ImageCache] = None
    ) -> None:
        super().__init__()
        self.controller = controller
        self.setWindowTitle(VISIBLE_APP_NAME)

        main_widget = QWidget()
        self.setCentralWidget(main_widget)

        layout = QVBoxLayout(main_widget)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(20)

        # --- 1. DISPLAY AREA ---
        self.card = CandidateCard(image_cache)
        layout.addWidget(self.card, alignment=Qt.AlignHCenter)

        # --- 2. CHOOSE BUTTON ---
        self.btn_choose = QPushButton(BUTTON_TEXT_IDLE)
        self.btn_choose.setFixedSize(200, 50)
        self.btn_choose.setStyleSheet(BUTTON_STYLE)
        self.btn_choose.clicked.connect(self.controller.start)
        layout.addWidget(self.btn_choose, alignment=Qt.AlignHCenter)

        # --- SIGNAL CONNECTIONS ---
        self.controller.candidate_changed.connect(self.card.set_candidate)
        self.controller.scale_changed.connect(self.card.animate_scale)
        self.controller.running_changed.connect(self.on_running_changed)

        # Before the first spin, show whoever is first in line
        self._show_initial(self.controller.candidates)

    def _show_initial(self, candidates: Sequence[Candidate]) -> None:
        initial = self.controller.displayed or candidates[0]
        self.card.set_candidate(initial)

    def on_running_changed(self, running: bool) -> None:
        """Slot called when a spin starts or stops."""
        self.btn_choose.setEnabled(not running)
        self.btn_choose.setText(BUTTON_TEXT_SPINNING if running else BUTTON_TEXT_IDLE)
