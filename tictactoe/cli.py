import argparse
import logging

from .state import Session, Theme
from .view import TITLE, render_text, status_text


logger = logging.getLogger(__name__)

# Names accepted by both logging.basicConfig and uvicorn.
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

USAGE = "Commands: '<cell>' (0-8), 'reset', 'theme', 'quit'"


def print_state(session, write=print):
    write(f"{status_text(session.game)[1]}    [theme: {session.theme.value}]")
    write(render_text(session.game))
    write("")


def handle_command(session, command):
    """
    Apply one typed command to the session.

    Returns False when the player asked to leave, True otherwise, and None
    when the input was not a command at all.
    """
    if command in ("quit", "exit", "q"):
        return False
    if command == "reset":
        session.reset()
        return True
    if command == "theme":
        session.toggle_theme()
        return True
    if command.isascii() and command.isdecimal():
        # Occupied cells, finished games and indices past 8 are ignored.
        try:
            index = int(command)
        except ValueError:
            # Too many digits to convert; certainly past 8.
            return True
        session.move(index)
        return True
    return None


def play(session, read=None, write=print):
    read = read or input
    write(f"{TITLE} (CLI)")
    write(USAGE)
    write("Cells are numbered:")
    write(render_text(session.game, show_indices=True))
    write("")
    print_state(session, write)

    while True:
        try:
            user_input = read("> ").strip().lower()
        except EOFError:
            write("")
            break

        result = handle_command(session, user_input)
        if result is False:
            break
        if result is None:
            write(f"Invalid input. {USAGE}")
            continue
        print_state(session, write)

    write("Bye.")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Play tic-tac-toe in the terminal.")
    parser.add_argument("--theme", choices=[theme.value for theme in Theme], default=Theme.LIGHT.value)
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level)
    logger.debug("Starting terminal game with %s theme.", args.theme)

    play(Session(theme=Theme(args.theme)))


if __name__ == "__main__":
    main()
