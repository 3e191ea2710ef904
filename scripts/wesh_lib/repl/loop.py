"""
REPL driver for WeSh.

The loop reads one line with the current branch's prompt, resolves it and
applies the outcome, forever. It ends only when an action terminates the
process or the input stream fails.
"""

import sys

from prompt_toolkit import PromptSession
from prompt_toolkit.styles import Style

from .branch import Branch, print_prompt, prompt_text
from .state import ShellState, step


WESH_STYLE = Style.from_dict({
    'prompt': '#00aa00 bold',
})


class InputStreamError(Exception):
    """Raised when no further input line can be read."""
    pass


class PromptReader:
    """Reads lines from the terminal with prompt_toolkit."""

    def __init__(self):
        self.session = PromptSession(style=WESH_STYLE)

    def read_line(self, branch: Branch) -> str:
        return self.session.prompt([('class:prompt', prompt_text(branch))])


class StreamReader:
    """Reads lines from a plain stream, e.g. when input is piped."""

    def __init__(self, stream=None, output=None):
        self.stream = stream if stream is not None else sys.stdin
        self.output = output if output is not None else sys.stdout

    def read_line(self, branch: Branch) -> str:
        print_prompt(branch, self.output)
        line = self.stream.readline()
        if line == "":
            raise EOFError("end of input")
        return line


def run_loop(state: ShellState, reader) -> None:
    """
    Run the shell until an action exits.

    Args:
        state: Shell state, mutated in place
        reader: Object with read_line(branch) -> str, showing that branch's prompt

    Raises:
        InputStreamError: input ended or failed
    """
    while True:
        try:
            line = reader.read_line(state.current)
        except KeyboardInterrupt:
            print()
            continue
        except EOFError as e:
            raise InputStreamError("End of input") from e
        except (OSError, UnicodeDecodeError) as e:
            raise InputStreamError(f"Failed to read input: {e}") from e

        step(state, line)
