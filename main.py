"""Entry point — glues pystray (daemon thread) with tkinter (main thread)."""

import logging
import threading

from calendar_store import CalendarStore
from calendar_window import CalendarWindow
from icon_gen import create_icon_image
from logger import setup_logger
from settings import firstweekday_from_settings, load_settings
from tray_icon import create_tray


def main() -> None:
    settings = load_settings()
    logger = setup_logger(
        level=getattr(logging, settings["log_level"]),
        log_file=settings["log_file"],
    )

    store = CalendarStore(firstweekday=firstweekday_from_settings(settings))
    cal_win = CalendarWindow(store)

    # Callbacks marshalled onto the tkinter main thread; the store is only
    # ever touched from there
    def on_show() -> None:
        cal_win.root.after(0, cal_win.toggle)

    def on_add_event() -> None:
        cal_win.root.after(0, cal_win.open_add_event)

    def on_exit() -> None:
        def _quit() -> None:
            tray.stop()
            cal_win.root.destroy()
        cal_win.root.after(0, _quit)

    icon_image = create_icon_image()
    tray = create_tray(icon_image, on_show, on_exit, on_add_event=on_add_event)

    # Run pystray in a daemon thread so it doesn't block tkinter
    tray_thread = threading.Thread(target=tray.run, daemon=True)
    tray_thread.start()
    logger.info("Mini Event Calendar started")

    cal_win.show()
    # tkinter main loop on the main thread
    cal_win.root.mainloop()


if __name__ == "__main__":
    main()
