import logging

# Storage
EVENTS_FILE = 'calendar_events.json'
JSON_INDENT = None

# Editor modes
MODE_CATEGORY = 'category'
MODE_NOTES = 'notes'
MODE_INLINE = 'inline'

# Key used for the event text in the JSON file, per editor mode
TEXT_KEYS = {
    MODE_CATEGORY: 'eventName',
    MODE_NOTES: 'description',
    MODE_INLINE: 'description',
}

# Categories
CATEGORIES = ['Personal', 'Work', 'Other']
DEFAULT_CATEGORY = 'Personal'
CATEGORY_STYLES = {
    'Personal': 'personal',
    'Work': 'work',
    'Other': 'other',
}

# Color Theme
PRIMARY_COLOR = "#023047"
ACCENT_COLOR = "#219EBC"
WARNING_COLOR = "#FB8500"
BACKGROUND_COLOR = "#FFFFFF"
HEADER_TEXT_COLOR = "#FFFFFF"
SELECTED_COLOR = "#A6D8E4"
STYLE_COLORS = {
    'personal': "#FFE9B3",
    'work': "#BCE2EB",
    'other': "#FEDAB3",
}
UNSTYLED_EVENT_COLOR = "#E6EAED"

# Fonts
FONT_HEADER = "Segoe UI Semibold"
FONT_HEADER_SIZE = 18
FONT_LABEL = "Segoe UI"
FONT_LABEL_SIZE = 12
FONT_DATE = "Segoe UI Semibold"
FONT_DATE_SIZE = 20
PADDING = 20

# UI Constants
DEFAULT_WINDOW_SIZE = (600, 600)
DEFAULT_DIALOG_WIDTH = 500
DEFAULT_DIALOG_HEIGHT = 250
NOTES_DIALOG_HEIGHT = 380
INLINE_EDITOR_HEIGHT = 140
WINDOW_TITLE = "Calendar App"

# Logging
LOG_LEVEL = logging.INFO
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# StyleSheets
MAIN_STYLE = f"""
QMainWindow, QDialog {{
    background-color: {BACKGROUND_COLOR};
}}
QLabel {{
    color: {PRIMARY_COLOR};
}}
QFrame#header {{
    background-color: {PRIMARY_COLOR};
}}
QFrame#header QLabel {{
    color: {HEADER_TEXT_COLOR};
}}
QPushButton {{
    background-color: {ACCENT_COLOR};
    color: white;
    border: none;
    border-radius: 4px;
    padding: 10px 16px;
    font-weight: bold;
}}
QPushButton#clearButton {{
    background-color: {WARNING_COLOR};
}}
QLineEdit, QTextEdit, QComboBox {{
    color: {PRIMARY_COLOR};
    border: 1px solid #B0BEC5;
    border-radius: 4px;
    padding: 6px;
}}
QLineEdit:focus, QTextEdit:focus {{
    border-color: {ACCENT_COLOR};
}}
QCalendarWidget QWidget {{
    alternate-background-color: {BACKGROUND_COLOR};
}}
QCalendarWidget QAbstractItemView {{
    color: {PRIMARY_COLOR};
    selection-background-color: {SELECTED_COLOR};
    selection-color: {PRIMARY_COLOR};
}}
"""
