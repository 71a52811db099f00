"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- Mode selection (Player vs Player / Player vs Computer)
- Difficulty selection for computer games
- The board, status line and scores
- Restart / Reset Score / Change Mode controls

Keyboard: r = restart, m = change mode, s = reset score,
b = back from difficulty selection.
"""

import tkinter as tk
from tkinter import ttk
from typing import Optional

from logic.ai_player import Difficulty
from logic.controller import GameController, Phase, Snapshot
from logic.session import Mode


class TicTacToeUI:
    """
    Main UI class for TicTacToe.

    All game changes go through the controller; the UI only draws
    the snapshots it gets back and schedules the computer's reply.
    """

    def __init__(self, controller: GameController):
        """Initialize the UI."""
        self.controller = controller
        self.config = controller.config

        # Pending root.after() job for the computer's move
        self._computer_job: Optional[str] = None

        # Create UI
        self._create_ui()

    def _create_ui(self):
        """Create the Tkinter UI."""
        config = self.config

        self.root = tk.Tk()
        self.root.title(config.WINDOW_TITLE)
        self.root.configure(bg=config.BG_COLOR)
        self.root.minsize(420, 560)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=config.BG_COLOR)
        style.configure('TLabel', background=config.BG_COLOR, foreground='white', font=(config.FONT, 11))
        style.configure('Title.TLabel', font=(config.FONT, 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=(config.FONT, 12), foreground='#ffd700')

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        ttk.Label(main_frame, text="🎮 TicTacToe", style='Title.TLabel').pack(pady=(0, 5))

        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        # Mode selection screen
        self.mode_frame = ttk.Frame(main_frame)
        for text, mode in [("👥 Player vs Player", Mode.PLAYER_VS_PLAYER),
                           ("🤖 Player vs Computer", Mode.PLAYER_VS_COMPUTER)]:
            tk.Button(
                self.mode_frame,
                text=text,
                font=(config.FONT, 12, 'bold'),
                bg='#6366f1',
                fg='white',
                width=22,
                command=lambda m=mode: self._render(self.controller.on_mode_selected(m))
            ).pack(pady=8)

        # Difficulty selection screen
        self.difficulty_frame = ttk.Frame(main_frame)
        for difficulty in Difficulty:
            color = config.DIFFICULTY_COLORS[difficulty.value]
            tk.Button(
                self.difficulty_frame,
                text=difficulty.value.capitalize(),
                font=(config.FONT, 12, 'bold'),
                bg=color,
                fg='black',
                activebackground=color,
                width=22,
                command=lambda d=difficulty: self._render(self.controller.on_difficulty_selected(d))
            ).pack(pady=6)
        tk.Button(
            self.difficulty_frame,
            text="← Back",
            font=(config.FONT, 10),
            bg='#2d3748',
            fg='white',
            width=22,
            command=self._change_mode
        ).pack(pady=(16, 0))

        # Game screen
        self.game_frame = ttk.Frame(main_frame)

        board_frame = ttk.Frame(self.game_frame)
        board_frame.pack(pady=10)

        self.board_cells = []
        for index in range(config.CELL_COUNT):
            cell = tk.Button(
                board_frame,
                text="",
                font=(config.FONT, 24, 'bold'),
                width=4,
                height=2,
                bg=config.CELL_COLOR,
                fg='white',
                activebackground='#1f2b4d',
                relief='ridge',
                borderwidth=2,
                command=lambda i=index: self._cell_clicked(i)
            )
            cell.grid(row=index // config.BOARD_SIZE, column=index % config.BOARD_SIZE, padx=2, pady=2)
            self.board_cells.append(cell)

        self.score_label = ttk.Label(self.game_frame, text="")
        self.score_label.pack(pady=5)

        control_frame = ttk.Frame(self.game_frame)
        control_frame.pack(pady=10)

        for text, color, command in [
            ("🔄 Restart", '#10b981', self._restart),
            ("🧹 Reset Score", '#6366f1', self._reset_score),
            ("↩ Change Mode", '#2d3748', self._change_mode),
        ]:
            tk.Button(
                control_frame,
                text=text,
                font=(config.FONT, 10, 'bold'),
                bg=color,
                fg='white',
                width=12,
                command=command
            ).pack(side=tk.LEFT, padx=4)

        # Quit button
        tk.Button(
            main_frame,
            text="✕ Quit",
            font=(config.FONT, 10),
            bg='#ef4444',
            fg='white',
            width=26,
            command=self._quit
        ).pack(side=tk.BOTTOM, pady=10)

        # Keyboard shortcuts
        self.root.bind('<Key>', self._on_key)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    # ==================== ACTIONS ====================

    def _cell_clicked(self, index: int):
        self._render(self.controller.on_human_move(index))

    def _restart(self):
        self._cancel_computer_move()
        self._render(self.controller.on_restart())

    def _reset_score(self):
        self._cancel_computer_move()
        self._render(self.controller.on_reset_score())

    def _change_mode(self):
        self._cancel_computer_move()
        self._render(self.controller.on_change_mode())

    def _on_key(self, event):
        key = event.char.lower()
        if key == 'r':
            self._restart()
        elif key == 'm':
            self._change_mode()
        elif key == 's':
            self._reset_score()
        elif key == 'b' and self.controller.phase == Phase.DIFFICULTY_SELECT:
            self._change_mode()

    def _computer_turn(self):
        """Play the computer's move (scheduled after the pacing delay)."""
        self._computer_job = None
        self._render(self.controller.on_computer_move())

    def _cancel_computer_move(self):
        if self._computer_job is not None:
            self.root.after_cancel(self._computer_job)
            self._computer_job = None

    # ==================== DRAWING ====================

    def _render(self, snapshot: Snapshot):
        """Show the screen for the snapshot's phase and redraw it."""
        for frame in (self.mode_frame, self.difficulty_frame, self.game_frame):
            frame.pack_forget()

        if snapshot.phase == Phase.MODE_SELECT:
            self.mode_frame.pack(pady=20)
        elif snapshot.phase == Phase.DIFFICULTY_SELECT:
            self.difficulty_frame.pack(pady=20)
        else:
            self.game_frame.pack(pady=10)
            self._update_board_display(snapshot)

        self.status_label.configure(text=snapshot.status)
        self.score_label.configure(
            text=f"X: {snapshot.scores['X']}    O: {snapshot.scores['O']}    Draws: {snapshot.draws}"
        )

        if snapshot.computer_pending and self._computer_job is None:
            self._computer_job = self.root.after(self.config.COMPUTER_DELAY_MS, self._computer_turn)

    def _update_board_display(self, snapshot: Snapshot):
        """Update the board grid display."""
        config = self.config
        winning = set(snapshot.winning_line or ())

        for index, cell in enumerate(self.board_cells):
            mark = snapshot.board[index]

            if index in winning:
                bg_color = config.WIN_COLOR
            else:
                bg_color = config.CELL_COLOR

            if mark == "X":
                fg_color = config.X_COLOR
            elif mark == "O":
                fg_color = config.O_COLOR
            else:
                fg_color = 'white'

            cell.configure(text=mark, bg=bg_color, fg=fg_color)

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self._cancel_computer_move()
        self.root.quit()
        self.root.destroy()

    def run(self, mode: Optional[Mode] = None, difficulty: Optional[Difficulty] = None):
        """Run the UI main loop."""
        snapshot = self.controller.snapshot()
        if mode is not None:
            snapshot = self.controller.on_mode_selected(mode)
        if difficulty is not None and snapshot.phase == Phase.DIFFICULTY_SELECT:
            snapshot = self.controller.on_difficulty_selected(difficulty)

        self._render(snapshot)
        self.root.mainloop()
