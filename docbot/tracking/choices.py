"""
Choices — Numbered choice state for disambiguation replies

When the bot answers with "Which one do you mean? (type the number)",
the listed choices are remembered so that a later bare number can be
mapped back to a query.

Semantics:
- One slot. Offering a new list replaces the previous one, whichever
  conversation it came from (last writer wins).
- A number is honored only while the list is fresh: no more than
  `timeout` seconds since the list was offered or last selected from.
- Selecting (valid or not) refreshes the timer.
- Stale or absent lists are ignored silently; the bot stays quiet.
"""

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List, Callable, Iterable


logger = logging.getLogger(__name__)

# Stop responding to numbers this many seconds after the last interaction
DEFAULT_CHOICE_TIMEOUT = 30.0


class ChoiceStatus(Enum):
    """Outcome of a numeric reply."""
    SELECTED = "selected"
    INVALID = "invalid"
    IGNORED_NONE_OFFERED = "ignored_none_offered"
    IGNORED_EXPIRED = "ignored_expired"


@dataclass
class ChoiceOutcome:
    """Result of ChoiceTracker.select()."""
    status: ChoiceStatus
    text: Optional[str] = None

    @property
    def ignored(self) -> bool:
        return self.status in (ChoiceStatus.IGNORED_NONE_OFFERED, ChoiceStatus.IGNORED_EXPIRED)


@dataclass
class PendingChoices:
    """The most recently offered list."""
    choices: List[str] = field(default_factory=list)
    offered_at: float = 0.0


class ChoiceTracker:
    """
    Single-slot store for the last offered choice list.

    The clock is injectable so tests can move time forward.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_CHOICE_TIMEOUT,
        clock: Callable[[], float] = time.monotonic
    ):
        self.timeout = timeout
        self.clock = clock
        self._pending: Optional[PendingChoices] = None

    @property
    def pending(self) -> Optional[PendingChoices]:
        return self._pending

    def offer(self, choices: Iterable[str]):
        """Remember a new choice list, replacing any previous one."""
        self._pending = PendingChoices(choices=list(choices), offered_at=self.clock())
        logger.debug("Offered %d choice(s)", len(self._pending.choices))

    def select(self, number: int) -> ChoiceOutcome:
        """
        Map a 1-based number to the offered choice.

        Args:
            number: The number the user typed

        Returns:
            ChoiceOutcome; text is set only when status is SELECTED
        """
        if self._pending is None:
            return ChoiceOutcome(ChoiceStatus.IGNORED_NONE_OFFERED)

        now = self.clock()
        if now - self._pending.offered_at > self.timeout:
            logger.debug("Choice %d ignored: list expired", number)
            return ChoiceOutcome(ChoiceStatus.IGNORED_EXPIRED)

        self._pending.offered_at = now

        index = number - 1
        if index < 0 or index >= len(self._pending.choices):
            return ChoiceOutcome(ChoiceStatus.INVALID)

        return ChoiceOutcome(ChoiceStatus.SELECTED, self._pending.choices[index])

    def clear(self):
        self._pending = None
