"""Tkinter front end: a display label over the shared button grid.

The window holds no calculator logic. Each button or key press is forwarded
to ``Calculator.handle_key`` and the display string is re-rendered.
"""

from __future__ import annotations

import tkinter as tk

from loguru import logger

from calcpad.config import Settings, settings as default_settings
from calcpad.engine import Calculator
from calcpad.keys import BUTTON_ROWS, Key, KeyKind


BACKGROUND = "#000000"

# (background, foreground) per key kind
COLORS = {
	KeyKind.DIGIT: ("#333333", "#FFFFFF"),
	KeyKind.FUNCTION: ("#A5A5A5", "#000000"),
	KeyKind.OPERATOR: ("#FF9800", "#FFFFFF"),
}
PRESSED_COLORS = {
	KeyKind.DIGIT: "#737373",
	KeyKind.FUNCTION: "#D9D9D9",
	KeyKind.OPERATOR: "#FFC978",
}

_KEYSYMS = {
	"Return": Key.EQUALS,
	"KP_Enter": Key.EQUALS,
	"Escape": Key.CLEAR,
	"Delete": Key.CLEAR,
	"BackSpace": Key.BACKSPACE,
}
_CHARS = {
	"+": Key.ADD,
	"-": Key.SUBTRACT,
	"*": Key.MULTIPLY,
	"/": Key.DIVIDE,
	"=": Key.EQUALS,
	"%": Key.PERCENT,
	".": Key.DECIMAL,
}


def key_for_event(char: str, keysym: str) -> Key | None:
	"""Map a Tk key event to a calculator key, or None to ignore it."""
	if keysym in _KEYSYMS:
		return _KEYSYMS[keysym]
	if len(char) == 1 and char in "0123456789":
		return Key(char)
	return _CHARS.get(char)


class RoundedButton(tk.Canvas):
	"""Canvas drawn as a circle, or a pill when wider than tall."""

	def __init__(
		self,
		master,
		*,
		key: Key,
		command,
		width: int,
		height: int,
		font: tuple[str, int],
	) -> None:
		super().__init__(
			master,
			width=width,
			height=height,
			bg=BACKGROUND,
			highlightthickness=0,
			bd=0,
		)
		self.key = key
		self._command = command
		self._width = width
		self._height = height
		self._font = font
		self._bg, self._fg = COLORS[key.kind]
		self._pressed_bg = PRESSED_COLORS[key.kind]
		self._pressed = False

		self.configure(cursor="hand2")
		self._draw()

		self.bind("<ButtonPress-1>", self._on_press)
		self.bind("<ButtonRelease-1>", self._on_release)
		self.bind("<Leave>", self._on_leave)

	def _draw(self) -> None:
		self.delete("all")
		pad = 2
		x0, y0 = pad, pad
		x1, y1 = self._width - pad, self._height - pad
		fill = self._pressed_bg if self._pressed else self._bg

		if (x1 - x0) <= (y1 - y0) + 2:
			self.create_oval(x0, y0, x1, y1, fill=fill, outline=fill)
		else:
			r = (y1 - y0) / 2
			self.create_oval(x0, y0, x0 + 2 * r, y1, fill=fill, outline=fill)
			self.create_oval(x1 - 2 * r, y0, x1, y1, fill=fill, outline=fill)
			self.create_rectangle(x0 + r, y0, x1 - r, y1, fill=fill, outline=fill)

		self.create_text(
			self._width / 2,
			self._height / 2,
			text=self.key.title,
			fill=self._fg,
			font=self._font,
		)

	def _on_press(self, _event: tk.Event) -> None:
		self._pressed = True
		self._draw()

	def _on_release(self, event: tk.Event) -> None:
		was_pressed = self._pressed
		self._pressed = False
		self._draw()
		if was_pressed and 0 <= event.x <= self._width and 0 <= event.y <= self._height:
			self._command()

	def _on_leave(self, _event: tk.Event) -> None:
		if self._pressed:
			self._pressed = False
			self._draw()


class CalculatorWindow:
	def __init__(
		self,
		root: tk.Tk,
		calculator: Calculator | None = None,
		settings: Settings | None = None,
	) -> None:
		self.root = root
		self.calculator = calculator if calculator is not None else Calculator()
		self.settings = settings if settings is not None else default_settings

		self.root.title(self.settings.WINDOW_TITLE)
		self.root.configure(bg=BACKGROUND)
		self.root.resizable(False, False)

		self.display_var = tk.StringVar(value=self.calculator.display)
		self.buttons: dict[Key, RoundedButton] = {}
		self._build_ui()
		self.root.bind("<Key>", self._on_key)

	def _build_ui(self) -> None:
		family = self.settings.FONT_FAMILY
		size = self.settings.BUTTON_SIZE
		gap = 12

		display = tk.Label(
			self.root,
			textvariable=self.display_var,
			bg=BACKGROUND,
			fg="#FFFFFF",
			anchor="e",
			padx=18,
			pady=18,
			font=(family, 36),
		)
		display.grid(row=0, column=0, columnspan=4, sticky="nsew")

		for r, row in enumerate(BUTTON_ROWS, start=1):
			col = 0
			for key in row:
				span = 2 if key is Key.ZERO else 1
				btn = RoundedButton(
					self.root,
					key=key,
					command=lambda k=key: self.press(k),
					width=size * span + gap * (span - 1),
					height=size,
					font=(family, 20),
				)
				btn.grid(row=r, column=col, columnspan=span, sticky="nsew", padx=6, pady=6)
				self.buttons[key] = btn
				col += span

	def _on_key(self, event: tk.Event) -> None:
		key = key_for_event(event.char, event.keysym)
		if key is not None:
			self.press(key)

	def press(self, key: Key) -> None:
		self.calculator.handle_key(key)
		self.display_var.set(self.calculator.display)


def run(settings: Settings | None = None) -> None:
	root = tk.Tk()
	window = CalculatorWindow(root, settings=settings)
	logger.info("starting Tk front end ({})", window.settings.WINDOW_TITLE)
	root.mainloop()
