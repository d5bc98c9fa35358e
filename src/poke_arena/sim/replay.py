"""Timed playback of an already-resolved turn.

The engine resolves a whole exchange synchronously.  A front-end that
wants the narrative to appear line by line (move name, pause, damage,
pause, faint) replays the ``TurnOutcome`` events through
``BattlePlayback`` instead of interleaving timers with game logic.
Stopping a playback only stops the reveal; the battle state it describes
is already final.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Iterator

from poke_arena.sim.core.game_state import BattleEvent, Side, TurnOutcome

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RevealTiming:
    """Pauses, in seconds, inserted *after* each kind of event."""

    move_delay: float = 1.0
    damage_delay: float = 0.8
    opponent_delay: float = 1.0
    """Extra pause before the opponent's first event in an exchange."""

    result_delay: float = 2.0
    """Pause after the final event of a finished battle."""

    def delay_after(self, event: BattleEvent) -> float:
        if event.kind in ("move_used", "struggle"):
            return self.move_delay
        if event.kind == "damage":
            return self.damage_delay
        return 0.0


def iter_frames(
    outcome: TurnOutcome,
    timing: RevealTiming | None = None,
) -> Iterator[tuple[float, BattleEvent]]:
    """Yield ``(delay_before, event)`` pairs for *outcome* without sleeping."""
    timing = timing or RevealTiming()
    pending = 0.0
    previous_actor: Side | None = None
    for event in outcome.events:
        if previous_actor is Side.PLAYER and event.actor is Side.OPPONENT:
            pending += timing.opponent_delay
        yield pending, event
        pending = timing.delay_after(event)
        previous_actor = event.actor


class BattlePlayback:
    """Replays turn outcomes with the original front-end pacing.

    Parameters
    ----------
    timing:
        Delays to use.  Defaults to :class:`RevealTiming`.
    sleep:
        Blocking sleep function; injectable so tests run instantly.
    """

    def __init__(
        self,
        timing: RevealTiming | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.timing = timing or RevealTiming()
        self._sleep = sleep
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        """Stop before the next event is revealed."""
        self._cancelled = True

    def play(
        self,
        outcome: TurnOutcome,
        on_event: Callable[[BattleEvent], None],
    ) -> int:
        """Reveal *outcome*'s events in order.

        Returns the number of events delivered to *on_event*.
        """
        delivered = 0
        for delay, event in iter_frames(outcome, self.timing):
            if self._cancelled:
                break
            if delay > 0:
                self._sleep(delay)
            if self._cancelled:
                break
            on_event(event)
            delivered += 1

        if outcome.is_terminal and not self._cancelled and delivered:
            self._sleep(self.timing.result_delay)

        if self._cancelled:
            logger.debug("Playback cancelled after %d of %d events", delivered, len(outcome.events))
        return delivered
