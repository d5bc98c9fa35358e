"""Battle simulation runner -- plays whole battles without a human.

Provides two key classes:

- **AutoBattler**: Drives the player side of one battle with a policy,
  through the same public engine API a front-end uses.
- **BatchRunner**: Runs many seeded battles (optionally in parallel) and
  collects telemetry for policy and roster comparisons.
"""

from __future__ import annotations

import logging
import multiprocessing
from typing import TYPE_CHECKING, Sequence

from poke_arena.sim.core.rng import BattleRNG
from poke_arena.sim.engine import BattleEngine
from poke_arena.sim.mechanics.pp import resolve_autonomous_choice
from poke_arena.sim.play_agents.base import MovePolicy
from poke_arena.sim.play_agents.random_agent import RandomPolicy
from poke_arena.sim.telemetry import BattleTelemetry

if TYPE_CHECKING:
    from poke_arena.ir.setup import BattleSetupConfig
    from poke_arena.sim.core.entities import BattlePokemon
    from poke_arena.sim.core.game_state import TurnOutcome

logger = logging.getLogger(__name__)

_MAX_TURNS = 500


# =====================================================================
# AutoBattler
# =====================================================================

class AutoBattler:
    """Plays the player side of a battle with a ``MovePolicy``.

    Unusable choices from the policy are re-mapped to the first usable
    slot, the same way the engine treats the opponent.  Battles that reach
    ``_MAX_TURNS`` resolved moves are abandoned and scored as a draw.
    """

    def __init__(self, engine: BattleEngine, player_policy: MovePolicy) -> None:
        self.engine = engine
        self.player_policy = player_policy

    def run(
        self,
        player_team: Sequence[BattlePokemon],
        opponent_team: Sequence[BattlePokemon],
        config: BattleSetupConfig | None = None,
    ) -> BattleTelemetry:
        """Run one battle to completion, returning telemetry."""
        session = self.engine.start_battle(player_team, opponent_team, config)
        telemetry = BattleTelemetry(
            seed=self.engine.seed,
            winner="draw",
            turns=0,
            player_hp_start=session.player_pokemon.current_hp,
            player_hp_end=session.player_pokemon.current_hp,
            opponent_hp_start=session.opponent_pokemon.current_hp,
            opponent_hp_end=session.opponent_pokemon.current_hp,
        )

        while not session.is_over and session.turn < _MAX_TURNS:
            player = session.player_pokemon
            if player.has_usable_moves:
                choice = self.player_policy.choose(player, session.opponent_pokemon, session.rng)
                slot, _ = resolve_autonomous_choice(player, choice)
                outcome = self.engine.select_move(session, slot)
            else:
                outcome = self.engine.struggle(session)
            self._record(telemetry, outcome)

        if session.result is not None:
            telemetry.winner = session.result.winner
        else:
            logger.warning("Battle hit the %d-move cap; scoring as a draw", _MAX_TURNS)
            self.engine.abandon(session)

        telemetry.turns = session.turn
        telemetry.player_hp_end = session.player_pokemon.current_hp
        telemetry.opponent_hp_end = session.opponent_pokemon.current_hp
        telemetry.battle_log = list(session.battle_log)
        return telemetry

    @staticmethod
    def _record(telemetry: BattleTelemetry, outcome: TurnOutcome) -> None:
        for event in outcome.events:
            side = event.actor.value
            if event.kind == "move_used" and event.move_name is not None:
                used = telemetry.moves_used[side]
                used[event.move_name] = used.get(event.move_name, 0) + 1
            elif event.kind == "struggle":
                telemetry.struggles[side] += 1
            elif event.kind == "damage":
                telemetry.damage_dealt[side] += event.amount


# =====================================================================
# BatchRunner
# =====================================================================

def _run_single_battle(
    player_team: Sequence[BattlePokemon],
    opponent_team: Sequence[BattlePokemon],
    player_policy: MovePolicy,
    opponent_policy: MovePolicy,
    seed: int,
    config: BattleSetupConfig | None = None,
) -> BattleTelemetry:
    engine = BattleEngine(rng=BattleRNG(seed), policy=opponent_policy)
    return AutoBattler(engine, player_policy).run(player_team, opponent_team, config)


def _worker_run_single(args: tuple) -> BattleTelemetry:
    """Top-level worker function for multiprocessing (must be picklable)."""
    player_team, opponent_team, player_cls, opponent_cls, seed, config = args
    return _run_single_battle(
        player_team, opponent_team, player_cls(), opponent_cls(), seed, config,
    )


class BatchRunner:
    """Runs the same matchup many times with consecutive seeds."""

    def __init__(
        self,
        player_team: Sequence[BattlePokemon],
        opponent_team: Sequence[BattlePokemon],
        player_policy_class: type[MovePolicy] = RandomPolicy,
        opponent_policy_class: type[MovePolicy] = RandomPolicy,
        config: BattleSetupConfig | None = None,
    ) -> None:
        self.player_team = list(player_team)
        self.opponent_team = list(opponent_team)
        self.player_policy_class = player_policy_class
        self.opponent_policy_class = opponent_policy_class
        self.config = config

    def run_batch(
        self,
        n_runs: int,
        base_seed: int = 42,
        parallel: bool = False,
    ) -> list[BattleTelemetry]:
        """Run *n_runs* battles seeded ``base_seed, base_seed + 1, ...``."""
        seeds = [base_seed + i for i in range(n_runs)]

        if parallel and n_runs > 1:
            return self._run_parallel(seeds)
        return self._run_sequential(seeds)

    def _run_sequential(self, seeds: list[int]) -> list[BattleTelemetry]:
        return [
            _run_single_battle(
                self.player_team,
                self.opponent_team,
                self.player_policy_class(),
                self.opponent_policy_class(),
                seed,
                self.config,
            )
            for seed in seeds
        ]

    def _run_parallel(self, seeds: list[int]) -> list[BattleTelemetry]:
        """Run battles in a process pool.  Results keep seed order."""
        work_items = [
            (
                self.player_team,
                self.opponent_team,
                self.player_policy_class,
                self.opponent_policy_class,
                seed,
                self.config,
            )
            for seed in seeds
        ]

        n_workers = min(len(seeds), multiprocessing.cpu_count() or 1)

        with multiprocessing.Pool(processes=n_workers) as pool:
            results = pool.map(_worker_run_single, work_items)

        return results
