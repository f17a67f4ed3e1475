# main.py - Application Entry Point
"""
Main entry point for Gesture Arcade.
Builds the window, owns one instance of each mini-game and routes input
(classifier labels, keyboard fallback) to whichever game is selected.
"""

import logging
import tkinter as tk  # GUI framework

from audio_manager import AudioManager  # Feedback sink
from catcher import CatcherGame
from config import DIFFICULTIES, WINDOW_HEIGHT, WINDOW_WIDTH, CatcherTuning, RunnerTuning
from lifecycle import EndReason, GameSummary
from renderer import PlayfieldCanvas
from runner import RunnerGame
from session import Snapshot

logger = logging.getLogger(__name__)

GAMES = {
    "catcher": ("💰 Catch the Money", CatcherGame, CatcherTuning),
    "runner": ("🌵 Cactus Run", RunnerGame, RunnerTuning),
}

END_TITLES = {
    EndReason.MANUAL: "STOPPED",
    EndReason.HAZARD: "CAUGHT THE SCAMMER!",
    EndReason.WARNINGS: "TOO MANY HITS!",
    EndReason.TIMEOUT: "TIME'S UP!",
}

# Keyboard stand-in for the pose classifier (catcher)
KEY_LABELS = {"Left": "Left", "Down": "Center", "Up": "Center", "Right": "Right"}


def format_summary(summary: GameSummary) -> str:
    """Game-over text shown on the playfield."""
    lines = [f"GAME OVER - {END_TITLES[summary.reason]}"]
    if summary.variant == "runner":
        lines.append(f"Distance: {int(summary.progress)}m")
        lines.append(f"Score: {summary.score}")
        lines.append(f"Warnings: {summary.warnings} / {summary.warning_cap}")
    else:
        lines.append(f"Final score: {summary.score:,}")
        lines.append(f"Level: {summary.level}")
    return "\n".join(lines)


class ArcadeApp:
    """Menu, playfield and input routing for both games."""

    def __init__(self, root: tk.Tk) -> None:
        self.root = root
        self.audio = AudioManager()
        self.games: dict[str, object] = {}  # Built on first selection
        self.active_key: str | None = None
        self.difficulty = "Normal"

        self._build_menu()
        self._build_game_view()

        # Input binding - keyboard
        root.bind("<KeyPress-space>", lambda e: self._set_ascend(True))
        root.bind("<KeyRelease-space>", lambda e: self._set_ascend(False))
        for keysym in KEY_LABELS:
            root.bind(f"<KeyPress-{keysym}>", self._on_arrow)

        self.show_menu()

    # ------------------------------------------------------------------ #
    # MENU
    # ------------------------------------------------------------------ #
    def _build_menu(self) -> None:
        self.menu_frame = tk.Frame(self.root, bg="#000000")

        tk.Label(self.menu_frame, text="G E S T U R E   A R C A D E", fg="#00ffff",
                 bg="#000000", font=("Arial", 24, "bold")).pack(pady=(0, 20))

        for key, (title, _, _) in GAMES.items():
            tk.Button(self.menu_frame, text=title, font=("Arial", 14, "bold"), fg="#000000",
                      bg="#00ffff", activebackground="#33ffff", relief="flat", padx=20, pady=5,
                      width=18, command=lambda k=key: self.select_game(k)).pack(pady=5)

        # Difficulty selection (radio buttons)
        diff_frame = tk.Frame(self.menu_frame, bg="#000000")
        diff_frame.pack(pady=(15, 10))
        tk.Label(diff_frame, text="Difficulty:", fg="#00ffff", bg="#000000",
                 font=("Arial", 12, "bold")).pack(side="left", padx=5)
        self.diff_var = tk.StringVar(value=self.difficulty)
        for name in DIFFICULTIES:
            tk.Radiobutton(diff_frame, text=name, variable=self.diff_var, value=name,
                           indicatoron=False, width=7, fg="#000000", bg="#555555",
                           selectcolor="#00ffff", font=("Arial", 10, "bold"),
                           command=self._on_difficulty_changed).pack(side="left", padx=3)

        self.sound_button = tk.Button(self.menu_frame, text="Sound: ON", font=("Arial", 10, "bold"),
                                      fg="#000000", bg="#00ffff", relief="flat", padx=10, pady=3,
                                      command=self._on_toggle_sound_clicked)
        self.sound_button.pack(pady=(5, 5))
        if not self.audio.sound_enabled:
            self.sound_button.configure(text="Sound: N/A", state="disabled")

        tk.Label(self.menu_frame, text="Catcher: lean Left / Center / Right (or arrow keys)\n"
                                       "Runner: hold SPACE to jump",
                 fg="#888888", bg="#000000", font=("Arial", 10, "italic")).pack(pady=(5, 0))

    def _build_game_view(self) -> None:
        self.game_frame = tk.Frame(self.root, bg="#000000")
        self.title_label = tk.Label(self.game_frame, text="", fg="#00ffff", bg="#000000",
                                    font=("Arial", 16, "bold"))
        self.title_label.pack(pady=(10, 5))

        self.canvas = PlayfieldCanvas(self.game_frame)
        self.canvas.pack()

        buttons = tk.Frame(self.game_frame, bg="#000000")
        buttons.pack(pady=10)
        self.start_button = tk.Button(buttons, text="START", width=8, command=self.start_game)
        self.stop_button = tk.Button(buttons, text="STOP", width=8, command=self.stop_game)
        self.menu_button = tk.Button(buttons, text="MENU", width=8, command=self.go_to_menu)
        for b in (self.start_button, self.stop_button, self.menu_button):
            b.pack(side="left", padx=5)

    def show_menu(self) -> None:
        self.game_frame.place_forget()
        self.menu_frame.place(relx=0.5, rely=0.5, anchor="center")

    def _on_difficulty_changed(self) -> None:
        """New difficulty applies to games built from now on."""
        name = self.diff_var.get()
        if name == self.difficulty:
            return
        self.difficulty = name
        for key in list(self.games):
            if not self.games[key].is_active:
                del self.games[key]

    def _on_toggle_sound_clicked(self) -> None:
        enabled = self.audio.toggle_sound()
        self.sound_button.configure(text=f"Sound: {'ON' if enabled else 'OFF'}")

    # ------------------------------------------------------------------ #
    # GAME SELECTION / START / STOP
    # ------------------------------------------------------------------ #
    @property
    def active_game(self):
        if self.active_key is None:
            return None
        return self.games.get(self.active_key)

    def select_game(self, key: str) -> None:
        title, game_cls, tuning_cls = GAMES[key]
        if key not in self.games:
            self.games[key] = game_cls(self.root, tuning_cls.for_difficulty(self.difficulty),
                                       on_render=self._on_render,
                                       on_event=self.audio.handle_event,
                                       on_summary=self._on_summary)
        self.active_key = key

        self.menu_frame.place_forget()
        self.game_frame.place(relx=0.5, rely=0.5, anchor="center")
        self.title_label.configure(text=title)
        self.canvas.draw(self.active_game.snapshot())
        self.canvas.show_message("Press START")
        self._set_buttons(running=False)

    def start_game(self) -> None:
        game = self.active_game
        if game is None:
            return
        game.start()
        self._set_buttons(running=True)

    def stop_game(self) -> None:
        game = self.active_game
        if game is not None:
            game.stop()  # Summary arrives through _on_summary
        self._set_buttons(running=False)

    def go_to_menu(self) -> None:
        self.stop_game()
        self.active_key = None
        self.show_menu()

    def _set_buttons(self, running: bool) -> None:
        self.start_button.configure(state="disabled" if running else "normal")
        self.stop_button.configure(state="normal" if running else "disabled")

    # ------------------------------------------------------------------ #
    # SINKS / INPUT
    # ------------------------------------------------------------------ #
    def _on_render(self, snap: Snapshot) -> None:
        if snap.variant != self.active_key:
            return
        self.canvas.draw(snap)
        summary = self.active_game.last_summary
        if not snap.active and summary is not None:
            self.canvas.show_message(format_summary(summary))

    def _on_summary(self, summary: GameSummary) -> None:
        self._set_buttons(running=False)
        if summary.variant == self.active_key:
            self.canvas.draw(self.active_game.snapshot())
            self.canvas.show_message(format_summary(summary))

    def feed_label(self, label: str) -> None:
        """Entry point for the (external) stabilized pose classifier."""
        game = self.active_game
        if game is not None:
            game.on_label(label)

    def _on_arrow(self, event) -> None:
        self.feed_label(KEY_LABELS[event.keysym])

    def _set_ascend(self, held: bool) -> None:
        game = self.active_game
        if isinstance(game, RunnerGame):
            game.set_ascend(held)

    def shutdown(self) -> None:
        for game in self.games.values():
            game.stop()
        self.audio.shutdown()


def main() -> None:
    """Create window, build the app, and start the event loop."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    root = tk.Tk()
    root.title("Gesture Arcade")
    root.geometry(f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}")
    root.resizable(False, False)  # Fixed window size
    root.configure(bg="black")

    app = ArcadeApp(root)

    def on_close():
        """Stop running games and release audio before closing."""
        app.shutdown()
        root.destroy()

    root.protocol("WM_DELETE_WINDOW", on_close)
    root.mainloop()


if __name__ == "__main__":
    main()  # Run application
