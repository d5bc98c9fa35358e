"""Play one battle between the quick-start team and the default opponent.

The player side is driven by a policy so the whole battle runs unattended;
use --replay to reveal it with the front-end's pacing.

Usage:
    uv run python scripts/run_battle.py [--seed 7] [--player-policy greedy] [--replay]
"""

from __future__ import annotations

import argparse
import logging

from poke_arena.sim.core.rng import BattleRNG
from poke_arena.sim.engine import BattleEngine
from poke_arena.sim.mechanics.pp import resolve_autonomous_choice
from poke_arena.sim.play_agents import GreedyPolicy, RandomPolicy
from poke_arena.sim.replay import BattlePlayback
from poke_arena.sim.teams import default_opponent_team, quick_start_team

_POLICIES = {"random": RandomPolicy, "greedy": GreedyPolicy}


def main() -> None:
    parser = argparse.ArgumentParser(description="Run a single simulated battle")
    parser.add_argument("--seed", type=int, default=7, help="Engine seed")
    parser.add_argument("--player-policy", choices=sorted(_POLICIES), default="greedy")
    parser.add_argument("--opponent-policy", choices=sorted(_POLICIES), default="random")
    parser.add_argument("--replay", action="store_true", help="Reveal events with timed pauses")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    engine = BattleEngine(rng=BattleRNG(args.seed), policy=_POLICIES[args.opponent_policy]())
    player_policy = _POLICIES[args.player_policy]()
    session = engine.start_battle(quick_start_team(), default_opponent_team())
    playback = BattlePlayback() if args.replay else None

    print(session.battle_log[0])
    while not session.is_over:
        player = session.player_pokemon
        if player.has_usable_moves:
            choice = player_policy.choose(player, session.opponent_pokemon, session.rng)
            slot, _ = resolve_autonomous_choice(player, choice)
            outcome = engine.select_move(session, slot)
        else:
            outcome = engine.struggle(session)

        if playback is not None:
            playback.play(outcome, lambda event: print(event.message))
        else:
            for line in outcome.log_lines:
                print(line)
        print(
            f"  [{outcome.player_hp.name} {outcome.player_hp.current_hp}/{outcome.player_hp.max_hp}"
            f" | {outcome.opponent_hp.name} {outcome.opponent_hp.current_hp}/{outcome.opponent_hp.max_hp}]"
        )

    result = session.result
    print()
    print(f"Winner: {result.winner}  Moves: {result.turns}  EXP: {result.experience_gained}")


if __name__ == "__main__":
    main()
