"""
Main entry point for TicTacToe.

Launches the Tkinter UI by default, or a console game with --no-ui.
Both only talk to the game through logic.controller.GameController.
"""

import random
from typing import Optional, NamedTuple

from logic.ai_player import Difficulty
from logic.config import GameConfig
from logic.controller import GameController, Phase, Snapshot
from logic.game_state import Board
from logic.session import GameSession, Mode


class Command(NamedTuple):
    """One parsed line of console input."""
    action: str                 # number, restart, mode, score, back, quit, invalid
    value: Optional[int] = None


KEY_COMMANDS = {
    "r": "restart",
    "m": "mode",
    "s": "score",
    "b": "back",
    "q": "quit",
}

MODE_CHOICES = {1: Mode.PLAYER_VS_PLAYER, 2: Mode.PLAYER_VS_COMPUTER}
DIFFICULTY_CHOICES = {1: Difficulty.EASY, 2: Difficulty.MEDIUM, 3: Difficulty.HARD}


def parse_command(text: str) -> Command:
    """
    Parse a line typed at the console prompt.

    Numbers 1-9 pick a cell (or a menu entry); single letters are the
    same shortcuts the UI binds: r, m, s, b, q.
    """
    text = (text or "").strip().lower()

    if text.isdigit():
        number = int(text)
        if 1 <= number <= 9:
            return Command("number", number)
        return Command("invalid")

    if text in KEY_COMMANDS:
        return Command(KEY_COMMANDS[text])

    return Command("invalid")


class ConsoleGame:
    """
    Text-mode game loop.

    Cells are typed as 1-9 (top-left to bottom-right).
    """

    def __init__(self, controller: GameController):
        self.controller = controller

    def run(self, mode: Optional[Mode] = None, difficulty: Optional[Difficulty] = None):
        """Play until the user quits."""
        snapshot = self.controller.snapshot()
        if mode is not None:
            snapshot = self.controller.on_mode_selected(mode)
        if difficulty is not None and snapshot.phase == Phase.DIFFICULTY_SELECT:
            snapshot = self.controller.on_difficulty_selected(difficulty)

        while True:
            self.render(snapshot)

            try:
                text = input(self.prompt(snapshot))
            except EOFError:
                break

            command = parse_command(text)
            if command.action == "quit":
                break

            snapshot = self.handle(command, snapshot)

    def handle(self, command: Command, snapshot: Snapshot) -> Snapshot:
        """Turn a console command into a controller call."""
        controller = self.controller

        if command.action == "restart":
            return controller.on_restart()
        if command.action == "mode":
            return controller.on_change_mode()
        if command.action == "score":
            return controller.on_reset_score()
        if command.action == "back":
            if snapshot.phase == Phase.DIFFICULTY_SELECT:
                return controller.on_change_mode()
            return snapshot

        if command.action == "number":
            if snapshot.phase == Phase.MODE_SELECT:
                mode = MODE_CHOICES.get(command.value)
                return controller.on_mode_selected(mode) if mode else snapshot
            if snapshot.phase == Phase.DIFFICULTY_SELECT:
                difficulty = DIFFICULTY_CHOICES.get(command.value)
                return controller.on_difficulty_selected(difficulty) if difficulty else snapshot
            return controller.on_human_move(command.value - 1)

        print("Unknown command.")
        return snapshot

    def prompt(self, snapshot: Snapshot) -> str:
        if snapshot.phase == Phase.MODE_SELECT:
            return "1 = Player vs Player, 2 = Player vs Computer (q quits): "
        if snapshot.phase == Phase.DIFFICULTY_SELECT:
            return "1 = Easy, 2 = Medium, 3 = Hard (b goes back): "
        if snapshot.phase == Phase.ROUND_OVER:
            return "r = play again, m = change mode, s = reset score, q = quit: "
        return "Cell 1-9 (r/m/s/q): "

    def render(self, snapshot: Snapshot):
        print()
        if snapshot.phase in (Phase.PLAYING, Phase.ROUND_OVER):
            print(Board.from_list(snapshot.board))
            print(f"X: {snapshot.scores['X']}  O: {snapshot.scores['O']}  Draws: {snapshot.draws}")
        print(snapshot.status)


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in Mode],
        help="Skip the mode screen"
    )
    parser.add_argument(
        "--difficulty",
        choices=[difficulty.value for difficulty in Difficulty],
        help="Skip the difficulty screen (computer games)"
    )
    parser.add_argument(
        "--computer-first",
        action="store_true",
        help="Let the computer play first (as X)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed the computer's random choices"
    )
    parser.add_argument(
        "--delay",
        type=int,
        default=GameConfig.COMPUTER_DELAY_MS,
        help="Pause before the computer moves, in ms (UI only)"
    )

    args = parser.parse_args()

    config = GameConfig()
    config.COMPUTER_DELAY_MS = max(0, args.delay)
    rng = random.Random(args.seed)
    session = GameSession(computer_first=args.computer_first, config=config)
    mode = Mode.parse(args.mode) if args.mode else None
    difficulty = Difficulty.parse(args.difficulty) if args.difficulty else None

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        print("\n" + "="*60)
        print("   TicTacToe UI")
        print("="*60 + "\n")
        controller = GameController(session=session, rng=rng, autoplay=False, config=config)
        ui = TicTacToeUI(controller)
        ui.run(mode=mode, difficulty=difficulty)
        return

    # Console mode (--no-ui)
    controller = GameController(session=session, rng=rng, autoplay=True, config=config)
    try:
        ConsoleGame(controller).run(mode=mode, difficulty=difficulty)
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
