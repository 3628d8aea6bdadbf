#!/usr/bin/env python
"""Look up Pokedex data for a Pokemon, or list known names."""
import argparse
import json
import logging
import sys

from dotenv import load_dotenv

from pokesim.config import Config
from pokesim.data.pokedex import PokedexLookup
from pokesim.data.provider import PokeAPIProvider
from pokesim.errors import PokesimError

def main():
    parser = argparse.ArgumentParser(description="Query Pokedex data from PokeAPI")
    parser.add_argument("identifier", nargs="?", help="Name or dex number; omit to list names")
    parser.add_argument("--sprites", action="store_true", help="Include sprite URLs")
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args()

    load_dotenv()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    pokedex = PokedexLookup(PokeAPIProvider(Config().provider))

    try:
        if not args.identifier:
            names = pokedex.list_names()
            print(json.dumps({
                "results": names,
                "hint": "Pass a name (e.g. pikachu) or dex number (e.g. 25).",
            }, indent=2))
            return
        data = pokedex.lookup(args.identifier)
    except PokesimError as e:
        logging.getLogger(__name__).error(str(e))
        sys.exit(1)

    exclude = None if args.sprites else {"sprites"}
    print(data.model_dump_json(indent=2, exclude=exclude))

if __name__ == "__main__":
    main()
