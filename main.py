import sys
import logging
from PyQt6.QtWidgets import QApplication
from calendar_app.core.config import (
    EVENTS_FILE, TEXT_KEYS, LOG_LEVEL, LOG_FORMAT, MODE_CATEGORY, MODE_NOTES, MODE_INLINE
)
from calendar_app.core.store import EventStore
from calendar_app.core.controller import CalendarController
from calendar_app.ui.calendar_window import CalendarWindow

def main(mode=MODE_CATEGORY):
    """Main entry point for the application."""
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

    # Load events before any window is shown
    store = EventStore(EVENTS_FILE, text_key=TEXT_KEYS[mode])
    store.load()
    controller = CalendarController(store)

    # Create and start the application
    app = QApplication(sys.argv)

    # Set style to fusion for better appearance
    app.setStyle("Fusion")

    # Create and show main window
    main_window = CalendarWindow(controller, mode=mode)
    main_window.show()

    # Start the event loop
    sys.exit(app.exec())

def main_notes():
    main(MODE_NOTES)

def main_inline():
    main(MODE_INLINE)

if __name__ == "__main__":
    main()
