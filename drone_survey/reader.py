# region Imports
from abc import ABC, abstractmethod
from typing import Iterator, List, Optional, TextIO, Tuple
from drone_survey.validation import InvalidInputError
# endregion

Triple = Tuple[int, int, int]

# region Provider Interface
class TripleProvider(ABC):
    """Supplies three integers on demand."""

    @abstractmethod
    def read_triple(self) -> Triple:
        ...
# endregion

# region Stream Provider
class StreamTripleProvider(TripleProvider):
    """
    Reads whitespace-separated integers from a text stream. A triple may be
    split across lines; tokens are only consumed as they are asked for.
    """

    def __init__(self, stream: TextIO):
        self.stream = stream
        self._tokens: Optional[Iterator[str]] = None

    def _iter_tokens(self) -> Iterator[str]:
        for line in self.stream:
            yield from line.split()

    def _next_int(self) -> int:
        if self._tokens is None:
            self._tokens = self._iter_tokens()
        try:
            tok = next(self._tokens)
        except StopIteration:
            raise InvalidInputError("unexpected end of input") from None
        try:
            return int(tok)
        except ValueError:
            raise InvalidInputError(f"not an integer: {tok!r}") from None

    def read_triple(self) -> Triple:
        return self._next_int(), self._next_int(), self._next_int()
# endregion

# region In-memory Provider
class ListTripleProvider(TripleProvider):
    """Serves triples already held in memory."""

    def __init__(self, triples: List[Triple]):
        self._triples = list(triples)
        self.reads = 0

    def read_triple(self) -> Triple:
        if self.reads >= len(self._triples):
            raise InvalidInputError("unexpected end of input")
        t = self._triples[self.reads]
        self.reads += 1
        return t
# endregion
