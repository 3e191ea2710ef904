"""
Directive registry for the WeSh REPL.

The registry is one ordered list of branches and actions. Resolving an
input line scans it in registration order and returns the outcome of the
first directive whose command string equals the line exactly.
"""

from typing import Iterator, List

from .action import Directive
from .outcome import Outcome, Unresolved


class RegistrySealedError(Exception):
    """Raised when adding a directive after startup registration ended."""
    pass


class Registry:
    """Ordered collection of directives. Earlier registrations win."""

    def __init__(self):
        self._directives: List[Directive] = []
        self._sealed = False

    def add(self, directive: Directive) -> None:
        """Append a directive. Duplicates are kept and shadowed by the first."""
        if self._sealed:
            raise RegistrySealedError(
                f"Cannot register '{directive.command_str}': registry is sealed"
            )
        self._directives.append(directive)

    def seal(self) -> None:
        """End the registration phase. The registry is read-only afterwards."""
        self._sealed = True

    @property
    def sealed(self) -> bool:
        return self._sealed

    def resolve_input(self, line: str) -> Outcome:
        """
        Classify one input line.

        The comparison is exact: case-sensitive and without trimming.
        Callers strip the line terminator before calling.
        """
        for directive in self._directives:
            if directive.command_str == line:
                return directive.resolve()
        return Unresolved(line)

    def command_strings(self) -> List[str]:
        """Command strings in registration order."""
        return [d.command_str for d in self._directives]

    def __iter__(self) -> Iterator[Directive]:
        return iter(self._directives)

    def __len__(self) -> int:
        return len(self._directives)
