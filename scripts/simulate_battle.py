#!/usr/bin/env python
"""Simulate a single battle between two Pokemon."""
import argparse
import json
import logging
import sys

from dotenv import load_dotenv

from pokesim.agents import BASELINE_AGENTS, make_agent
from pokesim.config import Config
from pokesim.data.provider import PokeAPIProvider, StaticProfileProvider
from pokesim.errors import PokesimError
from pokesim.service import BattleService

def main():
    parser = argparse.ArgumentParser(description="Simulate a Pokemon battle")
    parser.add_argument("pokemon_a", help="First Pokemon (name or dex number)")
    parser.add_argument("pokemon_b", help="Second Pokemon (name or dex number)")
    parser.add_argument("--seed", type=int, help="Random seed for a reproducible log")
    parser.add_argument("--agent", choices=sorted(BASELINE_AGENTS), default="maxdamage")
    parser.add_argument("--profiles", help="JSON file of profiles to use instead of PokeAPI")
    parser.add_argument("--timeout", type=float, help="Abort the battle after this many seconds")
    parser.add_argument("--json", action="store_true", help="Print the raw result payload")
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args()

    load_dotenv()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    config = Config()
    if args.profiles:
        provider = StaticProfileProvider.from_json_file(args.profiles)
    else:
        provider = PokeAPIProvider(config.provider)

    service = BattleService(
        provider=provider,
        agent=make_agent(args.agent, args.seed if args.seed is not None else config.seed),
        config=config,
    )

    try:
        result = service.simulate_battle(
            args.pokemon_a, args.pokemon_b, seed=args.seed, timeout=args.timeout
        )
    except PokesimError as e:
        logging.getLogger(__name__).error(str(e))
        sys.exit(1)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
        return

    a, b = result.participants
    print(f"\n{a.name} [{'/'.join(a.types)}] vs {b.name} [{'/'.join(b.types)}]\n")
    for line in result.log:
        print(line)
    print(f"\nResult: {result.result}")

if __name__ == "__main__":
    main()
