#!/usr/bin/env python3
"""
Space Invaders Engine - Headless Simulation Script

Run episodes through the game wrapper with a simple policy and report
statistics. Useful for checking balance and benchmarking the engine.

Usage:
    python scripts/simulate.py                             # 10 episodes, random policy
    python scripts/simulate.py --episodes 100 --seed 42    # Reproducible run
    python scripts/simulate.py --policy idle --json        # Machine-readable output
"""
import sys
import json
import random
import argparse
import statistics
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from invaders.game import SpaceInvadersGame, Action
from invaders.utils.config_loader import load_game_config
from invaders.utils.logging_setup import setup_logging


POLICIES = ("random", "idle", "sweep")


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Space Invaders Engine - Run headless simulations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/simulate.py
  python scripts/simulate.py --episodes 100 --seed 42
  python scripts/simulate.py --policy sweep --json
"""
    )

    parser.add_argument(
        "--episodes",
        type=int,
        default=10,
        help="Number of episodes to simulate (default: 10)"
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=10000,
        help="Step limit per episode (default: 10000)"
    )
    parser.add_argument(
        "--policy",
        choices=POLICIES,
        default="random",
        help="Action policy (default: random)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed (overrides config)"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output results in JSON format"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Minimal output"
    )

    return parser.parse_args(argv)


def choose_action(policy: str, step: int, rng: random.Random) -> int:
    """Pick an action for the given policy."""
    if policy == "idle":
        return Action.STAY_NO_FIRE
    if policy == "sweep":
        # March across the field and back, firing every few ticks
        moving_right = (step // 200) % 2 == 0
        fire = step % 8 == 0
        if moving_right:
            return Action.RIGHT_FIRE if fire else Action.RIGHT_NO_FIRE
        return Action.LEFT_FIRE if fire else Action.LEFT_NO_FIRE
    return rng.randrange(len(Action))


def run_episode(game: SpaceInvadersGame, policy: str, max_steps: int,
                rng: random.Random) -> dict:
    """Play one episode and return its summary."""
    game.reset()
    total_reward = 0.0
    steps = 0
    done = False
    info = {}

    while not done and steps < max_steps:
        _, reward, done, info = game.step(choose_action(policy, steps, rng))
        total_reward += reward
        steps += 1

    return {
        "score": game.score,
        "reward": total_reward,
        "steps": steps,
        "lives": game.play_field.lives,
        "aliens_left": game.play_field.aliens.alive_count,
        "cleared": info.get("cleared", False),
    }


def simulate(episodes: int, policy: str, max_steps: int, seed=None, quiet: bool = False) -> dict:
    """Run several episodes and aggregate the results."""
    config = load_game_config("space_invaders")
    setup_logging(config.logging)

    game_config = config.to_game_config()
    if seed is not None:
        game_config.seed = seed

    game = SpaceInvadersGame(
        reward_config=game_config.get_reward_config(),
        config=game_config.to_dict(),
    )
    policy_rng = random.Random(game_config.seed)

    results = []
    for episode in range(1, episodes + 1):
        result = run_episode(game, policy, max_steps, policy_rng)
        results.append(result)
        if not quiet:
            print(f"[Simulate] Episode {episode}: score={result['score']} "
                  f"steps={result['steps']} aliens_left={result['aliens_left']}")

    scores = [r["score"] for r in results]
    return {
        "episodes": episodes,
        "policy": policy,
        "seed": game_config.seed,
        "mean_score": statistics.mean(scores),
        "max_score": max(scores),
        "min_score": min(scores),
        "std_score": statistics.stdev(scores) if len(scores) > 1 else 0.0,
        "mean_steps": statistics.mean(r["steps"] for r in results),
        "clear_rate": sum(1 for r in results if r["cleared"]) / episodes,
        "results": results,
    }


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    if args.episodes < 1:
        print("[Simulate] --episodes must be at least 1")
        return 1

    summary = simulate(args.episodes, args.policy, args.max_steps, args.seed,
                       quiet=args.quiet or args.json)

    if args.json:
        print(json.dumps(summary, indent=2))
    else:
        print("\n" + "=" * 50)
        print(f"Policy: {summary['policy']} | Episodes: {summary['episodes']}")
        print(f"Score: mean {summary['mean_score']:.1f} | "
              f"max {summary['max_score']} | min {summary['min_score']}")
        print(f"Mean steps: {summary['mean_steps']:.1f} | "
              f"Clear rate: {summary['clear_rate']:.0%}")
        print("=" * 50)

    return 0


if __name__ == "__main__":
    sys.exit(main())
