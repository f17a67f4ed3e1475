# renderer.py - Playfield Rendering
"""
Render sink: draws a Snapshot on a tkinter canvas.

Banknote images are optional (Pillow + files under assets/); anything that
cannot be loaded is drawn as a coloured placeholder box.
"""

import logging
import os
import tkinter as tk

from config import ITEM_IMAGES, PLAYFIELD_HEIGHT, PLAYFIELD_WIDTH, asset_path
from entities import ObjectKind
from session import Snapshot

logger = logging.getLogger(__name__)

SYMBOLS = {
    "cactus": "🌵",
    "coin": "🪙",
    "scammer": "😈",
    "runner": "🐰",
}

ITEM_COLORS = {
    "1k": "#87CEEB",  # Sky Blue
    "5k": "#FFA07A",  # Light Salmon
    "10k": "#90EE90",  # Light Green
    "50k": "#FFD700",  # Gold
}


def item_color(key: str) -> str:
    """Placeholder colour of a banknote without an image."""
    return ITEM_COLORS.get(key, "gray")


def value_label(value: int) -> str:
    return f"{value // 1000}k"


def hud_lines(snap: Snapshot) -> list[str]:
    """Text of the heads-up display, top to bottom."""
    if snap.variant == "runner":
        lines = [f"SCORE: {snap.score}",
                 f"WARNINGS: {snap.warnings} / {snap.warning_cap}",
                 f"DIST: {int(snap.progress)}m"]
        if snap.danger:
            lines.append("DANGER!!")
        return lines
    lines = [f"SCORE: {snap.score:,}", f"LEVEL: {snap.level}"]
    if snap.time_remaining is not None:
        lines.append(f"TIME: {snap.time_remaining}s")
    return lines


def load_item_images(size: tuple[int, int]) -> dict:
    """Load banknote images; missing files or a missing Pillow give an empty entry."""
    images = {}
    try:
        from PIL import Image, ImageTk  # Optional dependency
    except ImportError:
        logger.info("Pillow not installed, using placeholder items")
        return images

    for key, filename in ITEM_IMAGES.items():
        path = asset_path(filename)
        if not os.path.exists(path):
            continue
        try:
            img = Image.open(path).resize(size, Image.LANCZOS)
            images[key] = ImageTk.PhotoImage(img)
        except Exception:
            logger.warning("could not load %s, using placeholder", path)
    return images


class PlayfieldCanvas(tk.Canvas):
    """Canvas that redraws itself from each snapshot."""

    def __init__(self, master, width: int = PLAYFIELD_WIDTH, height: int = PLAYFIELD_HEIGHT, **kwargs) -> None:
        super().__init__(master, width=width, height=height, bg="#f0f8ff",
                         highlightthickness=0, **kwargs)
        self.field_width = width
        self.field_height = height
        self.images: dict | None = None  # Loaded lazily, needs a Tk root

    def draw(self, snap: Snapshot) -> None:
        self.delete("all")
        if snap.variant == "runner":
            self._draw_runner(snap)
        else:
            self._draw_catcher(snap)
        self._draw_hud(snap)

    def show_message(self, text: str) -> None:
        self.create_text(self.field_width / 2, self.field_height / 2, text=text,
                         fill="#333333", font=("Arial", 16, "bold"), justify="center")

    # ------------------------------------------------------------------ #
    # RUNNER
    # ------------------------------------------------------------------ #
    def _draw_runner(self, snap: Snapshot) -> None:
        ground_y = snap.player.y + snap.player.height

        self.create_rectangle(0, 0, self.field_width, self.field_height, fill="#87CEEB", outline="")
        self.create_rectangle(0, ground_y, self.field_width, self.field_height, fill="#F4A460", outline="")
        self.create_line(0, ground_y, self.field_width, ground_y, fill="#8B4513", width=2)

        for obj in snap.objects:
            r = obj.rect
            self.create_text(r.x + r.width / 2, r.y + r.height / 2,
                             text=SYMBOLS.get(obj.key, "?"), font=("Arial", 24))

        p = snap.player
        cx = p.x + p.width / 2
        top = p.y - snap.lift  # Lift raises the sprite, the shadow stays
        self.create_oval(cx - 20, ground_y - 5, cx + 20, ground_y + 5, fill="#999999", outline="")
        self.create_text(cx, top + p.height / 2, text=SYMBOLS["runner"], font=("Arial", 30))
        if snap.lift > 0:
            self.create_text(cx, top - 6, text="JUMP!", fill="blue", font=("Arial", 10, "bold"))

    # ------------------------------------------------------------------ #
    # CATCHER
    # ------------------------------------------------------------------ #
    def _draw_catcher(self, snap: Snapshot) -> None:
        third = self.field_width / 3
        for x in (third, third * 2):  # Lane separators
            self.create_line(x, 0, x, self.field_height, fill="#dddddd", width=2)

        if self.images is None:
            self.images = load_item_images((30, 15))

        for obj in snap.objects:
            r = obj.rect
            if obj.kind is ObjectKind.HAZARD:
                self.create_text(r.x + r.width / 2, r.y + r.height / 2,
                                 text=SYMBOLS["scammer"], font=("Arial", 18))
                continue
            img = self.images.get(obj.key)
            if img is not None:
                self.create_image(r.x, r.y, image=img, anchor="nw")
            else:
                self.create_rectangle(r.x, r.y, r.x + r.width, r.y + r.height,
                                      fill=item_color(obj.key), outline="")
                self.create_text(r.x + 2, r.y + r.height / 2, text=value_label(obj.value),
                                 anchor="w", font=("Arial", 8))

        # Basket: handle arc + striped body
        p = snap.player
        self.create_arc(p.x + 5, p.y - p.width / 2 + 5, p.x + p.width - 5, p.y + p.width / 2 - 5,
                        start=0, extent=180, style="arc", outline="#8B4513", width=4)
        self.create_rectangle(p.x, p.y, p.x + p.width, p.y + p.height, fill="#D2B48C", outline="")
        for dx in (10, 30, 50):
            self.create_rectangle(p.x + dx, p.y, p.x + dx + 10, p.y + p.height, fill="#A0522D", outline="")
        self.create_rectangle(p.x, p.y + 10, p.x + p.width, p.y + 15, fill="#CD853F", outline="")

    def _draw_hud(self, snap: Snapshot) -> None:
        for i, line in enumerate(hud_lines(snap)):
            danger = line.startswith(("WARNINGS", "DANGER"))
            self.create_text(10, 20 + i * 22, text=line, anchor="w",
                             fill="red" if danger else "black", font=("Arial", 12, "bold"))
