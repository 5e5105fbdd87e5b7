"""
Main entry point for the virtual pet.
Creates the pet from terminal input and runs the action loop until the player
quits or the pet's health gives out.
"""

from __future__ import annotations
import random
import sys
from datetime import datetime
from typing import Optional

from dotenv import load_dotenv
from rich.console import Console

from config import Config
from loggers import LogManager, SystemLogger
from event_dispatcher import global_event_dispatcher, EventDispatcher
from display.console import ConsoleView
from internal.internal import Internal
from internal.modules.actions.action import ActionType
from pet.state import InvalidPetTypeError, normalize_pet_type, resolve_name

QUIT = "quit"

CHOICES = {
    "1": ActionType.FEED,
    "2": ActionType.PLAY,
    "3": ActionType.REST,
    "4": ActionType.STATUS,
    "5": QUIT,
}
for _action in ActionType:
    CHOICES[_action.value] = _action
CHOICES[QUIT] = QUIT


def parse_choice(raw: str) -> ActionType | str | None:
    """Map "1".."5" or an action word (any case) to an action, QUIT, or None."""
    return CHOICES.get((raw or "").strip().lower())


def ask(console: Console, prompt: str) -> Optional[str]:
    """Read one line; None when input is closed or interrupted."""
    console.print(prompt, end="", markup=False, highlight=False)
    try:
        return console.input()
    except (EOFError, KeyboardInterrupt):
        console.print()
        return None


def choose_pet_type(console: Console) -> Optional[str]:
    while True:
        raw = ask(console, f"Choose pet type ({'/'.join(Config.PET_TYPES)}): ")
        if raw is None:
            return None
        try:
            return normalize_pet_type(raw)
        except InvalidPetTypeError as e:
            SystemLogger.debug(str(e))
            console.print("Invalid type. Please enter cat, dog, or rabbit.")


def run_session(session: Internal, console: Console) -> str:
    """
    Runs the action loop.

    Returns:
        str: "quit" or "died"
    """
    console.print("How to interact:")
    console.print("1 - Feed\t2 - Play\t3 - Rest\t4 - Status\t5 - Quit\n")

    while session.is_alive():
        raw = ask(console, "Choose an action (1-5): ")
        choice = QUIT if raw is None else parse_choice(raw)

        if choice == QUIT:
            console.print("Thanks for playing. Goodbye!")
            return QUIT
        elif choice is None:
            console.print("Unrecognized option. Try again.")
        else:
            session.perform(choice)
            if choice is not ActionType.STATUS:
                console.print()

        if not session.is_alive():
            session.announce_death()
            return "died"

    session.announce_death()
    return "died"


def play(console: Console, rng: Optional[random.Random], dispatcher: EventDispatcher) -> str:
    """
    Creates the pet and runs the loop. Closed input at either creation
    prompt quits before any pet exists.

    Returns:
        str: "quit" or "died"
    """
    pet_type = choose_pet_type(console)
    if pet_type is None:
        console.print("Thanks for playing. Goodbye!")
        return QUIT

    raw_name = ask(console, "Enter your pet's name: ")
    if raw_name is None:
        console.print("Thanks for playing. Goodbye!")
        return QUIT

    session = Internal.create(pet_type, resolve_name(raw_name), rng=rng, dispatcher=dispatcher)
    session.start()
    return run_session(session, console)


def main(console: Optional[Console] = None, rng: Optional[random.Random] = None,
         dispatcher: Optional[EventDispatcher] = None) -> int:
    """Initialize logging, create the pet and play until done."""
    load_dotenv()
    LogManager.setup_logging()

    console = console if console is not None else Console(highlight=False)
    dispatcher = dispatcher if dispatcher is not None else global_event_dispatcher
    view = ConsoleView(console)
    view.attach(dispatcher)
    SystemLogger.info(f"Session started at {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")

    try:
        console.print("=== Virtual Pet (Console) ===")
        console.print(
            "Stat scale: Hunger 1(full) -> 10(starving), Happiness 1 -> 10, Health 1 -> 10\n",
            markup=False
        )

        outcome = play(console, rng, dispatcher)
        SystemLogger.info(f"Session ended: {outcome}")

        console.print("\n(Program finished.)")
        return 0
    finally:
        view.detach(dispatcher)


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
