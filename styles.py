"""
styles.py

Application stylesheets.
"""

LIGHT_STYLE = """
/* === Light Theme === */

QMainWindow {
    background-color: #f8fafc;
}

QWidget {
    background-color: #f8fafc;
    color: #1e293b;
    font-family: "Inter", "Segoe UI", sans-serif;
    font-size: 13px;
}

/* === Menu Bar === */
QMenuBar {
    background-color: #ffffff;
    color: #475569;
    border-bottom: 1px solid #e2e8f0;
    padding: 2px;
}

QMenuBar::item:selected {
    background-color: #f1f5f9;
    color: #6366f1;
}

QMenu {
    background-color: #ffffff;
    border: 1px solid #e2e8f0;
    padding: 4px;
}

QMenu::item:selected {
    background-color: #f1f5f9;
    color: #6366f1;
}

QMenu::item:disabled {
    color: #cbd5e1;
}

/* === Side panel === */
QGroupBox {
    border: 1px solid #e2e8f0;
    border-radius: 6px;
    margin-top: 14px;
    padding: 6px;
}

QGroupBox::title {
    subcontrol-origin: margin;
    left: 8px;
    color: #64748b;
}

QPushButton {
    background-color: #ffffff;
    border: 1px solid #e2e8f0;
    border-radius: 4px;
    padding: 6px 10px;
}

QPushButton:hover {
    border-color: #cbd5e1;
    color: #6366f1;
}

QPushButton:checked {
    background-color: #e0e7ff;
    border-color: #6366f1;
    color: #4338ca;
}

QPushButton:disabled {
    color: #cbd5e1;
    background-color: #f8fafc;
}

QGraphicsView {
    background-color: #ffffff;
    border: 1px solid #e2e8f0;
}
"""

DARK_STYLE = """
/* === Dark Theme === */

QMainWindow {
    background-color: #1e1e1e;
}

QWidget {
    background-color: #1e1e1e;
    color: #e0e0e0;
    font-size: 13px;
}

QMenuBar {
    background-color: #252526;
    color: #cccccc;
}

QMenuBar::item:selected, QMenu::item:selected {
    background-color: #094771;
}

QMenu {
    background-color: #252526;
    border: 1px solid #454545;
}

QMenu::item:disabled {
    color: #5a5a5a;
}

QGroupBox {
    border: 1px solid #3c3c3c;
    border-radius: 6px;
    margin-top: 14px;
    padding: 6px;
}

QGroupBox::title {
    subcontrol-origin: margin;
    left: 8px;
    color: #9d9d9d;
}

QPushButton {
    background-color: #2d2d2d;
    border: 1px solid #3c3c3c;
    border-radius: 4px;
    padding: 6px 10px;
}

QPushButton:checked {
    background-color: #094771;
    border-color: #0078d4;
}

QPushButton:disabled {
    color: #5a5a5a;
}

QGraphicsView {
    border: 1px solid #3c3c3c;
}
"""

# Style registry for easy access
STYLES = {
    "Light": LIGHT_STYLE,
    "Dark": DARK_STYLE,
}

DEFAULT_STYLE = "Light"

# Canvas background per theme; curves default to black so the canvas stays light
CANVAS_BACKGROUNDS = {
    "Light": "#FFFFFF",
    "Dark": "#F0F0F0",
}
