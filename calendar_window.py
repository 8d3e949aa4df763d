"""Month-view event calendar window (tkinter) positioned bottom-right."""

import logging
from tkinter import font as tkfont
from tkinter import messagebox
import tkinter as tk

from calendar_store import CalendarError, CalendarStore, Direction
from date_keys import DATE_FIELD_MAX, DATE_FIELD_MIN, InvalidKeyError, clamp_to_field
from settings import load_settings, save_settings

logger = logging.getLogger(__name__)

# Colours
WINDOW_BG = "#222222"
CELL_BG = "#404040"
TODAY_BG = "#1E3A8A"
SEL_BG = "#D4D4D4"
TEXT_FG = "white"
SEL_FG = "#0A0A0A"
ACCENT = "#3B82F6"

_CELLS = 6 * 7


class _DayCell:
    """Pre-allocated widgets for one grid slot: day number + event titles."""

    __slots__ = ("frame", "day_label", "events_label")

    def __init__(self, parent: tk.Frame, fonts: dict, on_click) -> None:
        self.frame = tk.Frame(parent, bg=WINDOW_BG, width=112, height=72)
        self.frame.grid_propagate(False)
        self.frame.pack_propagate(False)

        self.day_label = tk.Label(
            self.frame, font=fonts["bold"], bg=WINDOW_BG, fg=TEXT_FG, anchor="nw",
        )
        self.day_label.pack(fill="x", padx=6, pady=(4, 0))

        self.events_label = tk.Label(
            self.frame, font=fonts["small"], bg=WINDOW_BG, fg=TEXT_FG,
            anchor="nw", justify="left", wraplength=100,
        )
        self.events_label.pack(fill="both", expand=True, padx=6, pady=(0, 4))

        for w in (self.frame, self.day_label, self.events_label):
            w.bind("<Button-1>", on_click)

    def blank(self) -> None:
        for w in (self.frame, self.day_label, self.events_label):
            w.configure(bg=WINDOW_BG, cursor="")
        self.day_label.configure(text="")
        self.events_label.configure(text="")

    def fill(self, day: int, titles: list[str], bg: str, fg: str) -> None:
        for w in (self.frame, self.day_label, self.events_label):
            w.configure(bg=bg, cursor="hand2")
        self.day_label.configure(text=str(day), fg=fg)
        self.events_label.configure(text="\n".join(titles), fg=fg)


class CalendarWindow:
    """Single-month calendar with up to three events per day."""

    def __init__(self, store: CalendarStore) -> None:
        self.store = store

        self.root = tk.Tk()
        self.root.title("Mini Event Calendar")
        self.root.resizable(False, False)
        self.root.configure(bg=WINDOW_BG)
        self.root.attributes("-topmost", True)

        self._setup_fonts()

        settings = load_settings()
        self._saved_width: int | None = settings["window_width"]
        self._saved_height: int | None = settings["window_height"]

        # Widget-to-day mapping (filled during _refresh)
        self._widget_days: dict[int, int] = {}
        self._cells: list[_DayCell] = []
        self._dialog: tk.Toplevel | None = None

        self._build_shell()
        self._refresh()

        self.root.bind("<Escape>", self._on_escape)
        self.root.protocol("WM_DELETE_WINDOW", self.hide)
        self.root.withdraw()

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------
    def _setup_fonts(self) -> None:
        families = tkfont.families(self.root)
        base = "Segoe UI" if "Segoe UI" in families else "TkDefaultFont"
        self.font_normal = tkfont.Font(family=base, size=10)
        self.font_bold = tkfont.Font(family=base, size=10, weight="bold")
        self.font_header = tkfont.Font(family=base, size=14, weight="bold")
        self.font_nav = tkfont.Font(family=base, size=12, weight="bold")
        self.font_small = tkfont.Font(family=base, size=8)

    # ------------------------------------------------------------------
    # Build shell (once) — header + weekday row + cell pool + add button
    # ------------------------------------------------------------------
    def _build_shell(self) -> None:
        outer = tk.Frame(self.root, bg=WINDOW_BG)
        outer.pack(padx=18, pady=14)

        header = tk.Frame(outer, bg=WINDOW_BG)
        header.pack(fill="x", pady=(0, 10))

        self._month_label = tk.Label(
            header, font=self.font_header, bg=WINDOW_BG, fg=TEXT_FG,
        )
        self._month_label.pack(side="left")

        tk.Button(
            header, text=">", font=self.font_nav, width=4,
            command=lambda: self._navigate(Direction.NEXT),
        ).pack(side="right", padx=(4, 0))
        tk.Button(
            header, text="<", font=self.font_nav, width=4,
            command=lambda: self._navigate(Direction.PREVIOUS),
        ).pack(side="right", padx=(4, 0))

        btn_today = tk.Label(
            header, text="Today", font=self.font_bold, bg=WINDOW_BG, fg=ACCENT,
            cursor="hand2",
        )
        btn_today.pack(side="right", padx=8)
        btn_today.bind("<Button-1>", lambda _e: self._go_today())

        grid = tk.Frame(outer, bg=WINDOW_BG)
        grid.pack()

        self._weekday_labels: list[tk.Label] = []
        for col in range(7):
            lbl = tk.Label(grid, font=self.font_bold, bg=WINDOW_BG, fg=TEXT_FG)
            lbl.grid(row=0, column=col, pady=(0, 4))
            self._weekday_labels.append(lbl)

        fonts = {"bold": self.font_bold, "small": self.font_small}
        for i in range(_CELLS):
            cell = _DayCell(grid, fonts, self._on_cell_click)
            cell.frame.grid(row=1 + i // 7, column=i % 7, padx=3, pady=3)
            self._cells.append(cell)

        tk.Button(
            outer, text="Add Event", font=self.font_normal,
            bg=TODAY_BG, fg=TEXT_FG, activebackground=ACCENT,
            command=self.open_add_event,
        ).pack(anchor="w", pady=(12, 0))

    # ------------------------------------------------------------------
    # Redraw the displayed month from the store
    # ------------------------------------------------------------------
    def _refresh(self) -> None:
        layout = self.store.layout()
        self._month_label.configure(text=layout.label)
        for lbl, text in zip(self._weekday_labels, layout.weekday_labels):
            lbl.configure(text=text)

        self._widget_days.clear()
        days = [d for row in self.store.grid() for d in row]
        for cell, day in zip(self._cells, days):
            if day is None:
                cell.blank()
                continue
            bg, fg = self._day_colors(
                self.store.is_today(day), self.store.is_selected(day))
            titles = [e.title for e in self.store.events_for(day)]
            cell.fill(day, titles, bg, fg)
            for w in (cell.frame, cell.day_label, cell.events_label):
                self._widget_days[id(w)] = day

    @staticmethod
    def _day_colors(is_today: bool, is_selected: bool) -> tuple[str, str]:
        # Selection wins over today
        if is_selected:
            return SEL_BG, SEL_FG
        if is_today:
            return TODAY_BG, TEXT_FG
        return CELL_BG, TEXT_FG

    # ------------------------------------------------------------------
    # User actions
    # ------------------------------------------------------------------
    def _on_cell_click(self, event: tk.Event) -> None:
        day = self._widget_days.get(id(event.widget))
        if day is not None:
            self.store.select_day(day)
            self._refresh()

    def _navigate(self, direction: Direction) -> None:
        result = self.store.navigate(direction)
        if not result.ok:
            self._notify(result.error)
            return
        self._refresh()

    def _go_today(self) -> None:
        self.store.go_today()
        self._refresh()

    def _notify(self, error: CalendarError) -> None:
        if error.notify:
            messagebox.showinfo("Mini Event Calendar", error.message,
                                parent=self._dialog or self.root)

    # ------------------------------------------------------------------
    # Add-event dialog
    # ------------------------------------------------------------------
    def open_add_event(self) -> None:
        if self._dialog is not None:
            self._dialog.lift()
            return
        if self.root.state() == "withdrawn":
            self.show()

        dlg = tk.Toplevel(self.root, bg=WINDOW_BG)
        dlg.title("Add Event")
        dlg.resizable(False, False)
        dlg.attributes("-topmost", True)
        dlg.transient(self.root)
        dlg.grab_set()
        self._dialog = dlg

        frame = tk.Frame(dlg, bg=WINDOW_BG, padx=16, pady=12)
        frame.pack()

        tk.Label(frame, text="Title", font=self.font_bold,
                 bg=WINDOW_BG, fg=TEXT_FG).grid(row=0, column=0, sticky="w")
        title_entry = tk.Entry(frame, width=40, font=self.font_normal)
        title_entry.grid(row=1, column=0, columnspan=2, sticky="we", pady=(2, 8))

        tk.Label(frame, text=f"Date ({DATE_FIELD_MIN} – {DATE_FIELD_MAX})",
                 font=self.font_bold, bg=WINDOW_BG, fg=TEXT_FG,
                 ).grid(row=2, column=0, sticky="w")
        date_var = tk.StringVar(value=self.store.selected_key)
        tk.Entry(frame, textvariable=date_var, width=40, font=self.font_normal,
                 ).grid(row=3, column=0, columnspan=2, sticky="we", pady=(2, 8))

        def on_date_change(*_args) -> None:
            # Half-typed dates are ignored until they form a full key
            try:
                key = clamp_to_field(date_var.get())
            except InvalidKeyError:
                return
            self.store.set_selection_key(key)
            self._refresh()

        date_var.trace_add("write", on_date_change)

        def close() -> None:
            self._dialog = None
            dlg.destroy()

        def on_add() -> None:
            try:
                key = clamp_to_field(date_var.get())
            except InvalidKeyError:
                self._notify(CalendarError.INVALID_KEY)
                return
            if key != date_var.get():
                date_var.set(key)
            self.store.set_selection_key(key)

            result = self.store.add_event(title_entry.get())
            if not result.ok:
                self._notify(result.error)
                return
            logger.info("Added %r on %s", result.value.title, result.value.day_key)
            close()
            self._refresh()

        btn_frame = tk.Frame(frame, bg=WINDOW_BG)
        btn_frame.grid(row=4, column=0, columnspan=2, sticky="e", pady=(8, 0))
        tk.Button(btn_frame, text="Cancel", width=10, command=close).pack(
            side="left", padx=4,
        )
        tk.Button(btn_frame, text="Add Event", width=10, command=on_add).pack(
            side="left", padx=4,
        )

        dlg.protocol("WM_DELETE_WINDOW", close)
        dlg.bind("<Return>", lambda _e: on_add())
        dlg.bind("<Escape>", lambda _e: close())
        title_entry.focus_set()

    # ------------------------------------------------------------------
    # ESC hides the window
    # ------------------------------------------------------------------
    def _on_escape(self, _event: tk.Event) -> None:
        if self._dialog is None:
            self.hide()

    # ------------------------------------------------------------------
    # Persist window size
    # ------------------------------------------------------------------
    def _persist_size(self) -> None:
        settings = load_settings()
        settings["window_width"] = self._saved_width
        settings["window_height"] = self._saved_height
        try:
            save_settings(settings)
        except OSError as exc:
            logger.warning("Could not save window size: %s", exc)

    # ------------------------------------------------------------------
    # Show / Hide / Toggle
    # ------------------------------------------------------------------
    def toggle(self) -> None:
        if self.root.state() == "withdrawn" or not self.root.winfo_viewable():
            self.show()
        else:
            self.hide()

    def show(self) -> None:
        self._refresh()
        self.root.deiconify()
        self.root.update_idletasks()
        self._position_window()
        self.root.lift()
        self.root.focus_force()

    def hide(self) -> None:
        if self.root.winfo_viewable():
            self._saved_width = self.root.winfo_width()
            self._saved_height = self.root.winfo_height()
            self._persist_size()
        self.root.withdraw()

    # ------------------------------------------------------------------
    # Position bottom-right of the screen
    # ------------------------------------------------------------------
    def _position_window(self) -> None:
        self.root.update_idletasks()
        win_w = self._saved_width or self.root.winfo_reqwidth()
        win_h = self._saved_height or self.root.winfo_reqheight()
        x = self.root.winfo_screenwidth() - win_w - 12
        y = self.root.winfo_screenheight() - win_h - 60
        self.root.geometry(f"{win_w}x{win_h}+{max(0, x)}+{max(0, y)}")
