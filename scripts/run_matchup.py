#!/usr/bin/env python
"""Run many battles between two Pokemon and report win rates."""
import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv
from tqdm import tqdm

from pokesim.agents import BASELINE_AGENTS, make_agent
from pokesim.config import Config
from pokesim.data.provider import PokeAPIProvider, StaticProfileProvider
from pokesim.errors import PokesimError
from pokesim.evaluation.runner import MatchupRunner
from pokesim.utils import format_profile

def main():
    parser = argparse.ArgumentParser(description="Evaluate a matchup over many battles")
    parser.add_argument("pokemon_a")
    parser.add_argument("pokemon_b")
    parser.add_argument("--battles", type=int, default=100, help="Number of battles")
    parser.add_argument("--seed", type=int, help="Master seed")
    parser.add_argument("--agent", choices=sorted(BASELINE_AGENTS), default="maxdamage")
    parser.add_argument("--profiles", help="JSON file of profiles to use instead of PokeAPI")
    parser.add_argument("--output", help="Write the matchup summary to this JSON file")
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args()

    load_dotenv()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    config = Config()
    if args.profiles:
        provider = StaticProfileProvider.from_json_file(args.profiles)
    else:
        provider = PokeAPIProvider(config.provider)

    try:
        profile_a = provider.resolve(args.pokemon_a)
        profile_b = provider.resolve(args.pokemon_b)
    except PokesimError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(format_profile(profile_a))
    print(format_profile(profile_b))

    runner = MatchupRunner(agent=make_agent(args.agent, args.seed), config=config.engine)
    with tqdm(total=args.battles, desc="Battles") as bar:
        result = runner.run_matchup(
            profile_a,
            profile_b,
            n_battles=args.battles,
            seed=args.seed,
            progress=lambda _: bar.update(1),
        )

    print("\n=== Matchup Results ===\n")
    for metrics in result.metrics():
        print(f"{metrics.name}:")
        print(f"  Winrate: {metrics.winrate:.1%} ({metrics.winrate_ci_low:.1%}-{metrics.winrate_ci_high:.1%})")
        print(f"  Record: {metrics.wins}W-{metrics.losses}L-{metrics.draws}D")
        print()
    print(f"Average turns: {result.average_turns:.1f}")

    if args.output:
        Path(args.output).write_text(json.dumps(result.to_dict(), indent=2))
        print(f"Summary saved to {args.output}")

if __name__ == "__main__":
    main()
