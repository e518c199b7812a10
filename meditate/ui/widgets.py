from PyQt6.QtCore import Qt, QPointF, QSize
from PyQt6.QtGui import QColor, QPainter, QPen
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QSizePolicy, QWidget


class PulsingCircles(QWidget):
    """Filled inner circle (200px) inside a stroked ring (220px), each scaled independently."""

    INNER_DIAMETER = 200
    OUTER_DIAMETER = 220

    def __init__(self, parent=None):
        super().__init__(parent)
        self._inner_scale = 0.9
        self._outer_scale = 0.8
        self.setMinimumSize(int(self.OUTER_DIAMETER * 1.25), int(self.OUTER_DIAMETER * 1.25))
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground, True)

    def scales(self) -> tuple[float, float]:
        return self._inner_scale, self._outer_scale

    def set_scales(self, inner: float, outer: float):
        self._inner_scale = float(inner)
        self._outer_scale = float(outer)
        self.update()

    def sizeHint(self):
        side = int(self.OUTER_DIAMETER * 1.25)
        return QSize(side, side)

    def paintEvent(self, _):
        p = QPainter(self); p.setRenderHints(QPainter.RenderHint.Antialiasing, True)
        center = QPointF(self.width() / 2.0, self.height() / 2.0)
        # Inner disc
        r_in = self.INNER_DIAMETER * self._inner_scale / 2.0
        p.setPen(Qt.PenStyle.NoPen)
        p.setBrush(QColor(255, 255, 255, 51))
        p.drawEllipse(center, r_in, r_in)
        # Outer ring
        r_out = self.OUTER_DIAMETER * self._outer_scale / 2.0
        p.setBrush(Qt.BrushStyle.NoBrush)
        p.setPen(QPen(QColor(255, 255, 255, 102), 4))
        p.drawEllipse(center, r_out, r_out)
        p.end()


class TrackCard(QPushButton):
    """Rounded translucent card with the track title on the left and a play glyph on the right."""

    def __init__(self, title: str, parent=None):
        super().__init__(parent)
        self.title = title
        self.setObjectName("TrackCard")
        self.setAccessibleName(title)
        self.setFixedHeight(60)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)

        row = QHBoxLayout(self)
        row.setContentsMargins(18, 0, 18, 0)
        self.title_label = QLabel(title)
        self.title_label.setStyleSheet("font-weight: 600; background: transparent;")
        glyph = QLabel("▶")
        glyph.setStyleSheet("font-size: 16pt; background: transparent;")
        for lbl in (self.title_label, glyph):
            # Clicks go to the button underneath
            lbl.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents, True)
        row.addWidget(self.title_label)
        row.addStretch(1)
        row.addWidget(glyph)
