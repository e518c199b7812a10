# meditate/qss.py
# Soft glass theme: blue to purple wash, white text, translucent cards

QSS = r"""
/* -------- Base -------- */
* {
  font-family: "Segoe UI", "Inter", system-ui, sans-serif;
  font-size: 11pt;
  color: #FFFFFF;
}
QMainWindow, QStackedWidget#NavigationStack {
  background: qlineargradient(x1:0, y1:0, x2:1, y2:1,
    stop:0 rgba(0, 122, 255, 20%), stop:1 rgba(175, 82, 222, 30%));
}
QWidget#Page { background: transparent; }

/* -------- Headings -------- */
QLabel#Heading   { font-size: 20pt; font-weight: 600; }
QLabel#Title     { font-size: 16pt; }
QLabel#Subtitle  { color: rgba(255, 255, 255, 80%); }
QLabel#TimeLeft  { font-size: 14pt; }
QLabel#Error     { color: #FFB4A9; }

/* -------- Track cards -------- */
QPushButton#TrackCard {
  background: rgba(255, 255, 255, 20%);
  border: 1px solid rgba(255, 255, 255, 10%);
  border-radius: 25px;
  padding: 0 18px;
  text-align: left;
  font-weight: 600;
}
QPushButton#TrackCard:hover   { background: rgba(255, 255, 255, 28%); }
QPushButton#TrackCard:pressed { background: rgba(255, 255, 255, 14%); }

/* -------- Segmented duration picker -------- */
QPushButton#Segment {
  background: rgba(255, 255, 255, 12%);
  border: 1px solid rgba(255, 255, 255, 25%);
  padding: 6px 14px;
}
QPushButton#Segment:checked { background: rgba(255, 255, 255, 45%); color: #1B1F3B; }

/* -------- Actions -------- */
QPushButton#PlayButton {
  background: rgba(0, 122, 255, 60%);
  border: none; border-radius: 10px; padding: 12px; font-weight: 600;
}
QPushButton#StopButton {
  background: rgba(255, 59, 48, 60%);
  border: none; border-radius: 10px; padding: 12px 28px; font-weight: 600;
}
QPushButton#BackButton {
  background: transparent; border: none; padding: 4px 8px; text-align: left;
}
"""
