"""Interactive prompt that runs each line against one persistent tape."""

import sys
from typing import Optional, TextIO

from .engine import Engine
from .errors import BFIError
from .loader import load_program
from .state import TapeState

HELP = """Brainfuck REPL help
   :q => quit
   :? => help
   :r => reset state"""


def run_repl(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None,
             state: Optional[TapeState] = None) -> TapeState:
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    state = TapeState() if state is None else state

    def say(text: str = "") -> None:
        stdout.write(text + "\n")

    say("Brainfuck REPL")
    say("Enter Brainfuck programs and they will be executed immediately.")
    say("State is kept.")
    say(state.render())

    while True:
        stdout.write(">> ")
        stdout.flush()
        line = stdin.readline()
        if not line:
            say()
            break
        line = line.rstrip("\n")

        if line == ":q":
            break
        if line in (":?", "help", "?"):
            say(HELP)
            continue
        if line == ":r":
            state.reset()
            say(state.render())
            continue

        try:
            output = Engine(load_program(line), state).run()
        except BFIError as e:
            say(str(e))
            continue
        say(f"Output: {output}")
        say(state.render())

    return state


def main() -> int:
    run_repl()
    return 0


if __name__ == "__main__":
    sys.exit(main())
