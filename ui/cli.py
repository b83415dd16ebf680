# Command-line interface (text-based play)

from game.board import Board
from game.errors import IllegalStateError, MastermindError, StateFileError
from game.ruleset import DEFAULT_RULES


def _symbol(color):
    colors = DEFAULT_RULES["display"]["emoji_map"]
    return colors.get(str(color), str(color))


def peg_row(feedback, code_length):
    """Exact matches first, then color-only matches, then empty slots."""
    display = DEFAULT_RULES["display"]
    black, white = feedback
    empty = max(0, code_length - black - white)
    return [display["exact_peg"]] * black + [display["color_peg"]] * white + [" "] * empty


def render(state) -> str:
    """Render a text-based representation of a GameState (for CLI)."""

    width = state.config.code_length
    line = "+----" * (2 * width) + "+"
    title = "| Mastermind".ljust(len(line) - 1) + "|"

    rows = [line, title, line]
    for attempt in state.attempts:
        attempt_line = ""
        for c in attempt.guess:
            attempt_line += "| " + _symbol(c) + " "
        for peg in peg_row(attempt.feedback, width):
            attempt_line += "| " + peg + "  "
        rows.append(attempt_line + "|")
        rows.append(line)
    return "\n".join(rows)


def gameloop(board=None, input_fn=None):
    """Play one game interactively until it is won, lost or abandoned."""
    print("=== Mastermind CLI ===")
    print(
        "Type colors as letters (e.g. RGBY). Type 'exit' to quit, "
        "'save [file]' to store, 'load <file>' to resume.\n"
    )

    b = board or Board()
    input_fn = input_fn or input

    while not b.is_over:
        print(f"\nAttempts left: {b.remaining_attempts()}")
        print(f"Available colors: {', '.join(str(c) for c in b.get_available_colors())}")
        try:
            user_input = input_fn("Enter your guess: ").strip()
        except EOFError:
            user_input = "EXIT"
        command = user_input.split(" ")

        # handle special commands
        if command[0].upper() == "EXIT":
            print("Exiting game.")
            break
        elif command[0].upper() == "SAVE":
            filename = command[1] if len(command) > 1 else "game_state.json"
            try:
                b.save(filename)
            except OSError as e:
                print(f"Error saving game: {e}")
                continue
            print(f"Game saved to {filename}.")
            continue
        elif command[0].upper() == "LOAD":
            if len(command) < 2:
                print("Usage: load <file>")
                continue
            try:
                b = Board.from_file(command[1])
            except (OSError, StateFileError) as e:
                print(f"Error loading save: {e}")
                continue
            print("Game loaded.")
            print(render(b.get_game_state()))
            continue

        # Make the guess
        try:
            b.make_guess(user_input.upper())
        except IllegalStateError as e:
            print(f"Game over: {e}")
            break
        except MastermindError as e:
            print(f"Invalid input: {e}")
            continue

        # Render current board
        print(render(b.get_game_state()))

    # Check win/loss
    if b.is_won:
        print("\nCongratulations, you cracked the code!")
        print(f"The secret code was: {b.reveal_code()}")
    elif b.is_over:
        print("\nNo more attempts left.")
        print(f"The secret code was: {b.reveal_code()}")

    print("\n=== Game Over ===")
    return b
