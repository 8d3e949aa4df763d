"""System-tray icon setup via pystray."""

from datetime import date
from typing import Callable

import pystray
from PIL import Image
from pystray import MenuItem, Menu


def create_tray(
    icon_image: Image.Image,
    on_show: Callable[[], None],
    on_exit: Callable[[], None],
    on_add_event: Callable[[], None] | None = None,
) -> pystray.Icon:
    """Build and return a pystray Icon (not yet started).

    Callbacks run on pystray's thread; callers must hand them over to the
    tkinter main thread themselves.
    """
    items: list[MenuItem | Menu] = [
        MenuItem("Show Calendar", lambda _icon, _item: on_show(), default=True),
    ]
    if on_add_event is not None:
        items.append(MenuItem("Add Event", lambda _icon, _item: on_add_event()))
    items.append(Menu.SEPARATOR)
    items.append(MenuItem("Exit", lambda _icon, _item: on_exit()))
    menu = Menu(*items)
    title = f"Mini Event Calendar – {date.today().strftime('%d.%m.%Y')}"
    return pystray.Icon("mini-event-calendar", icon_image, title, menu)
