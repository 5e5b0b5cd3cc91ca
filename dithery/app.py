"""Desktop window for opening, zooming and dithering images."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from os import PathLike
from typing import Protocol

from PIL import Image

from dithery.dither import DitherType
from dithery.viewer import ViewerState, algorithm_choices

_FILE_TYPES = (("Images", "*.png *.jpg *.gif"), ("All Files", "*"))


class WindowView(Protocol):
    """What a window needs from whatever draws it."""

    def refresh(self, window: DitherWindow) -> None:
        """Redraw labels and the displayed image."""

    def ask_open_path(self) -> str:
        """Ask the user for an image file; an empty string means cancelled."""


class DitherWindow:
    """Window logic: what is shown and how the buttons change it."""

    def __init__(self, state: ViewerState | None = None, view: WindowView | None = None) -> None:
        self.state = state if state is not None else ViewerState()
        self.view = view
        self.file_text = ""
        self.scaling_text = self.state.scaling_text()
        self.displayed: Image.Image | None = None
        self.display_size: tuple[int, int] | None = None

    def _refresh(self) -> None:
        if self.view is not None:
            self.view.refresh(self)

    def _show_scaled(self) -> None:
        self.scaling_text = self.state.scaling_text()
        self.displayed = self.state.scaled_image()
        self.display_size = self.state.scaled_size()
        self._refresh()

    def open_file(self, path: str | PathLike[str] | None = None) -> bool:
        """Load an image and show it at the present zoom.

        Without ``path`` the view is asked for one. Returns whether an image
        was loaded; a missing or unreadable file raises ``OSError``.
        """
        if path is None:
            if self.view is None:
                return False
            path = self.view.ask_open_path()
        if not path:
            return False
        self.state.load(path)
        self.file_text = self.state.file_text
        self.displayed = self.state.scaled_image()
        self.display_size = self.displayed.size if self.displayed is not None else (0, 0)
        self._refresh()
        return True

    def zoom_in(self) -> bool:
        """Enlarge the displayed image by one step; return whether it changed."""
        if not self.state.zoom_in():
            return False
        self._show_scaled()
        return True

    def zoom_out(self) -> bool:
        """Shrink the displayed image by one step; return whether it changed."""
        if not self.state.zoom_out():
            return False
        self._show_scaled()
        return True

    def dither(self) -> Image.Image | None:
        """Dither the original image with the selected algorithm and show it unscaled."""
        image = self.state.apply_dither()
        if image is None:
            return None
        self.displayed = image
        self._refresh()
        return image

    def select_algorithm(self, index: int) -> DitherType:
        """Select the algorithm at ``index`` of the offered choices."""
        return self.state.select_algorithm(index)


class _TkView:
    """Tk widgets showing a DitherWindow."""

    def __init__(self, root, window: DitherWindow) -> None:
        import tkinter as tk
        from tkinter import ttk

        self._root = root
        self._window = window
        self._photo = None
        window.view = self

        controls = ttk.Frame(root, padding=4)
        controls.pack(side="top", fill="x")
        ttk.Button(controls, text="Open...", command=self._open).pack(side="left")
        self._combo = ttk.Combobox(
            controls,
            state="readonly",
            values=[label for label, _ in algorithm_choices()],
        )
        self._combo.current(0)
        self._combo.bind("<<ComboboxSelected>>", self._on_select)
        self._combo.pack(side="left", padx=4)
        ttk.Button(controls, text="Dither", command=window.dither).pack(side="left")
        ttk.Button(controls, text="-", width=3, command=window.zoom_out).pack(side="left", padx=(8, 0))
        ttk.Button(controls, text="+", width=3, command=window.zoom_in).pack(side="left")
        self._scaling_label = ttk.Label(controls, text=window.scaling_text)
        self._scaling_label.pack(side="left", padx=4)

        self._file_label = ttk.Label(root, text=window.file_text, padding=(4, 0))
        self._file_label.pack(side="top", fill="x")

        area = ttk.Frame(root)
        area.pack(side="top", fill="both", expand=True)
        self._canvas = tk.Canvas(area, highlightthickness=0)
        xbar = ttk.Scrollbar(area, orient="horizontal", command=self._canvas.xview)
        ybar = ttk.Scrollbar(area, orient="vertical", command=self._canvas.yview)
        self._canvas.configure(xscrollcommand=xbar.set, yscrollcommand=ybar.set)
        xbar.pack(side="bottom", fill="x")
        ybar.pack(side="right", fill="y")
        self._canvas.pack(side="left", fill="both", expand=True)

    def _on_select(self, _event) -> None:
        self._window.select_algorithm(self._combo.current())

    def _open(self) -> None:
        from tkinter import messagebox

        try:
            self._window.open_file()
        except OSError as exc:
            messagebox.showerror("Open File", str(exc), parent=self._root)

    def ask_open_path(self) -> str:
        from tkinter import filedialog

        return filedialog.askopenfilename(
            parent=self._root, title="Open File", filetypes=_FILE_TYPES
        )

    def refresh(self, window: DitherWindow) -> None:
        from PIL import ImageTk

        self._file_label.configure(text=window.file_text)
        self._scaling_label.configure(text=window.scaling_text)
        self._canvas.delete("all")
        if window.displayed is None:
            self._photo = None
            return
        self._photo = ImageTk.PhotoImage(window.displayed)
        self._canvas.create_image(0, 0, anchor="nw", image=self._photo)
        width, height = window.display_size or window.displayed.size
        self._canvas.configure(scrollregion=(0, 0, width, height))


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    """Parse the command line."""
    parser = argparse.ArgumentParser(
        prog="dithery", description="Open an image and dither it to black and white."
    )
    parser.add_argument("image", nargs="?", help="image file to open at start")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Start the window and run until it is closed."""
    import tkinter as tk

    args = parse_args(argv)
    root = tk.Tk()
    root.title("dithery")
    root.geometry("800x600")
    window = DitherWindow()
    view = _TkView(root, window)
    if args.image:
        try:
            window.open_file(args.image)
        except OSError as exc:
            from tkinter import messagebox

            messagebox.showerror("Open File", str(exc), parent=root)
    view.refresh(window)
    root.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())