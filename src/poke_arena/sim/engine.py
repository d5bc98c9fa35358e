"""Battle engine -- owns turn resolution for single battles.

The engine is a small state machine over a ``BattleSession``::

    AWAITING_PLAYER_CHOICE -> RESOLVING_PLAYER_MOVE
        -> AWAITING_OPPONENT_CHOICE -> RESOLVING_OPPONENT_MOVE
        -> AWAITING_PLAYER_CHOICE ...

Either resolving state jumps straight to ``TERMINAL`` when the defender
faints.  One call to :meth:`BattleEngine.select_move` resolves the
player's move and, if the battle is still going, the opponent's reply.
Everything runs synchronously; the returned ``TurnOutcome`` carries the
events a front-end needs to replay the exchange at its own pace.

Usage::

    engine = BattleEngine(rng=BattleRNG(7))
    session = engine.start_battle(quick_start_team(), default_opponent_team())
    outcome = engine.select_move(session, 0)
    for line in outcome.log_lines:
        print(line)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from poke_arena.ir.setup import BattleSetupConfig
from poke_arena.sim.core.game_state import (
    BattleEvent,
    BattleResult,
    BattleSession,
    EnginePhase,
    Side,
    TurnOutcome,
)
from poke_arena.sim.core.rng import BattleRNG
from poke_arena.sim.mechanics.effects import apply_delta, standard_effect
from poke_arena.sim.mechanics.pp import consume_pp, make_struggle, resolve_autonomous_choice
from poke_arena.sim.play_agents.base import MovePolicy
from poke_arena.sim.play_agents.random_agent import RandomPolicy

if TYPE_CHECKING:
    from poke_arena.sim.core.entities import BattleMove, BattlePokemon
    from poke_arena.sim.mechanics.effects import MoveEffect

logger = logging.getLogger(__name__)

VICTORY_EXPERIENCE = 100


# =====================================================================
# Errors
# =====================================================================

class InvalidAction(ValueError):
    """A move selection the engine refuses.  Session state is unchanged."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class NoUsableMove(InvalidAction):
    """The player has no PP left on any move and must struggle."""


# =====================================================================
# BattleEngine
# =====================================================================

class BattleEngine:
    """Resolves turns for any number of independent battle sessions.

    Parameters
    ----------
    rng:
        Master RNG.  Each session gets its own fork, so two engines built
        with the same seed replay the same battles.
    policy:
        Move-selection policy for the opponent side.  Defaults to
        :class:`RandomPolicy`.
    effect:
        The move effect stage.  Defaults to
        :func:`~poke_arena.sim.mechanics.effects.standard_effect`.
    """

    def __init__(
        self,
        rng: BattleRNG | None = None,
        policy: MovePolicy | None = None,
        effect: MoveEffect | None = None,
    ) -> None:
        self._rng = rng or BattleRNG(seed=0)
        self.policy = policy or RandomPolicy()
        self.effect = effect or standard_effect
        self._sessions_started = 0

    @property
    def seed(self) -> int:
        """Seed of the master RNG."""
        return self._rng.seed

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def start_battle(
        self,
        player_team: Sequence[BattlePokemon],
        opponent_team: Sequence[BattlePokemon],
        config: BattleSetupConfig | None = None,
    ) -> BattleSession:
        """Create a new session from already-built teams.

        The teams are deep-copied, so the caller's objects are never
        mutated by the battle.
        """
        if not player_team:
            raise ValueError("player_team must contain at least one combatant")
        if not opponent_team:
            raise ValueError("opponent_team must contain at least one combatant")

        config = config or BattleSetupConfig()
        for option in config.unimplemented_options():
            logger.warning("Setup option %s is not implemented; running a single battle", option)
        logger.debug(
            "Difficulty %r and rules %s are accepted but not enforced",
            config.difficulty, config.rules.model_dump(),
        )

        session = BattleSession(
            player_team=[p.model_copy(deep=True) for p in player_team],
            opponent_team=[p.model_copy(deep=True) for p in opponent_team],
            config=config,
            rng=self._rng.fork(f"battle-{self._sessions_started}"),
        )
        self._sessions_started += 1

        for side in Side:
            if session.active(side).is_fainted:
                raise ValueError(f"{side.value} lead {session.active(side).name!r} is already fainted")

        logger.debug(
            "Battle started: %s vs %s",
            session.player_pokemon.name, session.opponent_pokemon.name,
        )
        return session

    def select_move(self, session: BattleSession, move_index: int) -> TurnOutcome:
        """Resolve the player's move at *move_index*, then the opponent's reply.

        Raises
        ------
        NoUsableMove
            Every player move is out of PP; call :meth:`struggle` instead.
        InvalidAction
            The battle is over, abandoned or busy, it is not the player's
            turn, the index is out of range, or the move has no PP.

        An exception raised by the opponent policy or the effect stage
        abandons the session before it propagates.
        """
        self._check_accepting(session)
        player = session.player_pokemon

        if not player.has_usable_moves:
            raise NoUsableMove(f"{player.name} has no PP left on any move")
        if not 0 <= move_index < len(player.moves):
            raise InvalidAction(
                f"move index {move_index} out of range for {player.name} "
                f"({len(player.moves)} moves)"
            )
        move = player.moves[move_index]
        if not move.has_pp:
            raise InvalidAction(f"{move.name} has no PP left")

        return self._run_exchange(session, move, pays_pp=True)

    def struggle(self, session: BattleSession) -> TurnOutcome:
        """Resolve Struggle for a player whose moves are all out of PP."""
        self._check_accepting(session)
        if session.player_pokemon.has_usable_moves:
            raise InvalidAction(
                f"{session.player_pokemon.name} still has moves with PP; struggle is not allowed"
            )
        return self._run_exchange(session, make_struggle(), pays_pp=False)

    def abandon(self, session: BattleSession) -> None:
        """Discard the session.  Nothing already resolved is rolled back."""
        session.abandoned = True
        logger.debug("Battle abandoned after %d resolved moves", session.turn)

    def available_moves(self, session: BattleSession) -> list[int]:
        """Player move slots that can be selected right now."""
        if session.is_over or session.abandoned:
            return []
        return session.player_pokemon.usable_move_indices()

    def snapshot(self, session: BattleSession) -> TurnOutcome:
        """Current state as an outcome with no new events."""
        return self._build_outcome(session, [])

    # ------------------------------------------------------------------
    # Turn resolution
    # ------------------------------------------------------------------

    def _check_accepting(self, session: BattleSession) -> None:
        if session.abandoned:
            raise InvalidAction("battle was abandoned")
        if session.is_over:
            raise InvalidAction("battle is already over")
        if session.is_busy:
            raise InvalidAction("a move is still being resolved")
        if session.phase is not EnginePhase.AWAITING_PLAYER_CHOICE:
            raise InvalidAction(f"not the player's turn (phase={session.phase.value})")

    def _run_exchange(
        self,
        session: BattleSession,
        move: BattleMove,
        pays_pp: bool,
    ) -> TurnOutcome:
        """Player move, then the opponent's reply if nobody fainted."""
        events: list[BattleEvent] = []
        session.is_busy = True
        try:
            self._resolve_move(session, Side.PLAYER, move, pays_pp, events)

            if not session.is_over:
                session.turn_owner = Side.OPPONENT
                session.phase = EnginePhase.AWAITING_OPPONENT_CHOICE
                self._take_opponent_turn(session, events)

            if not session.is_over:
                session.turn_owner = Side.PLAYER
                session.phase = EnginePhase.AWAITING_PLAYER_CHOICE
        except Exception:
            # Resolution stopped part-way; the session cannot be resumed.
            logger.exception(
                "Move resolution failed in phase %s; abandoning battle", session.phase.value,
            )
            session.abandoned = True
            raise
        finally:
            session.is_busy = False

        return self._build_outcome(session, events)

    def _take_opponent_turn(self, session: BattleSession, events: list[BattleEvent]) -> None:
        opponent = session.opponent_pokemon
        choice = self.policy.choose(opponent, session.player_pokemon, session.rng)
        slot, move = resolve_autonomous_choice(opponent, choice)
        self._resolve_move(session, Side.OPPONENT, move, slot is not None, events)

    def _resolve_move(
        self,
        session: BattleSession,
        side: Side,
        move: BattleMove,
        pays_pp: bool,
        events: list[BattleEvent],
    ) -> None:
        session.phase = (
            EnginePhase.RESOLVING_PLAYER_MOVE
            if side is Side.PLAYER
            else EnginePhase.RESOLVING_OPPONENT_MOVE
        )
        attacker = session.active(side)
        defender = session.active(side.other)

        if pays_pp:
            consume_pp(move)
        session.turn += 1

        self._emit(
            session, events,
            kind="move_used" if pays_pp else "struggle",
            actor=side,
            target=side.other,
            move_name=move.name,
            message=f"{attacker.name} used {move.name}!",
        )

        for delta in self.effect(move, attacker, defender, session.rng):
            hp_lost = apply_delta(delta, attacker, defender)
            if delta.kind == "no_effect":
                self._emit(
                    session, events, kind="no_effect", actor=side,
                    move_name=move.name, message="It had no effect!",
                )
                continue
            target_side = side.other if delta.target == "defender" else side
            self._emit(
                session, events,
                kind="damage",
                actor=side,
                target=target_side,
                move_name=move.name,
                amount=delta.amount,
                message=f"It dealt {delta.amount} damage!",
            )
            logger.debug(
                "%s %s -> %s: %d damage (%d HP lost)",
                attacker.name, move.name, session.active(target_side).name, delta.amount, hp_lost,
            )

        if defender.is_fainted:
            self._faint(session, side.other, events)
            self._finish(session, winner=side)
        elif attacker.is_fainted:
            self._faint(session, side, events)
            self._finish(session, winner=side.other)

    def _faint(self, session: BattleSession, side: Side, events: list[BattleEvent]) -> None:
        name = session.active(side).name
        self._emit(session, events, kind="fainted", actor=side, message=f"{name} fainted!")

    def _finish(self, session: BattleSession, winner: Side) -> None:
        player_won = winner is Side.PLAYER
        session.phase = EnginePhase.TERMINAL
        session.result = BattleResult(
            winner=winner.value,
            turns=session.turn,
            player_pokemon_remaining=1 if player_won else 0,
            opponent_pokemon_remaining=0 if player_won else 1,
            experience_gained=VICTORY_EXPERIENCE if player_won else 0,
            battle_log=session.battle_log,
        )
        logger.info("Battle over after %d moves: %s wins", session.turn, winner.value)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _emit(
        session: BattleSession,
        events: list[BattleEvent],
        *,
        kind: str,
        actor: Side,
        message: str,
        target: Side | None = None,
        move_name: str | None = None,
        amount: int = 0,
    ) -> None:
        session.record(message)
        player_hp, opponent_hp = session.hp_snapshots()
        events.append(BattleEvent(
            kind=kind,
            actor=actor,
            target=target,
            move_name=move_name,
            amount=amount,
            message=message,
            player_hp=player_hp,
            opponent_hp=opponent_hp,
        ))

    @staticmethod
    def _build_outcome(session: BattleSession, events: list[BattleEvent]) -> TurnOutcome:
        player_hp, opponent_hp = session.hp_snapshots()
        over = session.is_over
        return TurnOutcome(
            events=tuple(events),
            player_hp=player_hp,
            opponent_hp=opponent_hp,
            turn_owner=None if over else session.turn_owner,
            phase=session.phase,
            result=session.result,
            player_must_struggle=(
                not over
                and not session.abandoned
                and not session.player_pokemon.has_usable_moves
            ),
        )
