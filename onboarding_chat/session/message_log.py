"""Append-only conversation transcript."""

from collections.abc import Callable

from onboarding_chat.models.schemas import Turn, WireTurn


class MessageLogError(Exception):
    """Raised on a mutation the transcript does not allow."""

    pass


class MessageLog:
    """Ordered list of turns, seeded with the assistant greeting.

    Turns are only ever appended. The single exception is a placeholder at
    the end of the log, which may be swapped for its final turn once an
    upload settles.
    """

    def __init__(self, greeting: Turn, on_change: Callable[[], None] | None = None) -> None:
        self._turns: list[Turn] = [greeting]
        self._on_change = on_change

    def __len__(self) -> int:
        return len(self._turns)

    @property
    def turns(self) -> list[Turn]:
        """Return a copy of every turn, oldest first."""
        return list(self._turns)

    @property
    def last(self) -> Turn:
        return self._turns[-1]

    def append(self, turn: Turn) -> None:
        self._turns.append(turn)
        self._changed()

    def replace_last(self, turn: Turn) -> None:
        """Swap the trailing placeholder for its final turn.

        Raises:
            MessageLogError: If the last turn is not a placeholder.
        """
        if not self.last.placeholder:
            raise MessageLogError("Only a placeholder turn can be replaced")
        self._turns[-1] = turn
        self._changed()

    def payload(self) -> list[WireTurn]:
        """Serialize the whole transcript for the chat endpoint."""
        return [turn.to_wire() for turn in self._turns]

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change()
