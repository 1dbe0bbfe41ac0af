"""
Main entry point for scoring a lettergrid game.

Usage:
    python -m src.main config.yaml
    python -m src.main config.yaml --output results/game1.json --verbose
    python -m src.main config.yaml --resume results/game1.json
"""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import yaml

from .game import Game, RunConfig
from .scoring import Dictionary, TileSet, STANDARD_LAYOUT, STANDARD_TILE_SET, parse_turn


def load_config(config_path: str) -> RunConfig:
    """Load run configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return RunConfig(**data)


def load_dictionary(config: RunConfig) -> Optional[Dictionary]:
    """Load the configured word list, if any."""
    if not config.dictionary:
        return None
    return Dictionary.from_file(config.dictionary)


def create_game(config: RunConfig, dictionary: Optional[Dictionary]) -> Game:
    """Create a fresh game from the run configuration."""
    tile_set = TileSet(tile_scores=config.tile_scores) if config.tile_scores else STANDARD_TILE_SET
    return Game.create(
        players=config.players,
        use_dictionary=config.use_dictionary,
        check_placement=config.check_placement,
        layout=config.layout or STANDARD_LAYOUT,
        tile_set=tile_set,
        dictionary=dictionary,
    )


def play_turns(game: Game, turns: List[str], verbose: bool = False) -> Game:
    """
    Apply each turn in order.

    Malformed or rejected turns are reported and skipped; the game is left
    as it was before them.
    """
    for number, text in enumerate(turns, start=1):
        entry, errors = parse_turn(text)
        if errors:
            for err in errors:
                print(f"Turn {number}: {err.message}", file=sys.stderr)
            continue

        if entry.action == "UNDO":
            game = game.undo()
            if verbose:
                print(f"Turn {number}: undo")
            continue

        player = game.player_name_for_move(len(game.moves))
        result = game.make_move(entry.placements)
        if not result.valid:
            print(f"Turn {number} ({player}): {result.message}", file=sys.stderr)
            continue

        game = result.game
        if verbose:
            print(f"Turn {number}: {game.describe_move(len(game.moves) - 1)}")

    return game


def main():
    parser = argparse.ArgumentParser(
        description="Score a lettergrid game",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  players: [Ann, Bob]
  use_dictionary: true
  dictionary: words.txt
  turns:
    - "7,7=c 7,8=a 7,9=t"
    - "6,8=b 8,8=T"
    - pass
    - undo

Placements are ROW,COL=LETTER; an uppercase letter is a blank tile.
        """
    )
    parser.add_argument(
        "config",
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--resume",
        help="Continue a game saved as JSON instead of starting a new one"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save the game JSON (default: results/game_<timestamp>.json)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print every turn and enable debug logging"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
        dictionary = load_dictionary(config)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    if args.resume:
        try:
            game = Game.load(args.resume, dictionary=dictionary)
        except Exception as e:
            print(f"Error resuming from {args.resume}: {e}", file=sys.stderr)
            return 1
        if game.config.use_dictionary and game.dictionary is None:
            print(
                f"Error resuming from {args.resume}: the saved game checks words "
                f"but no dictionary is configured",
                file=sys.stderr,
            )
            return 1
        if args.verbose:
            print(f"Resuming from: {args.resume} ({len(game.moves)} moves)")
    else:
        try:
            game = create_game(config, dictionary)
        except ValueError as e:
            print(f"Error creating game: {e}", file=sys.stderr)
            return 1

    game = play_turns(game, config.turns, verbose=args.verbose)

    # Determine output path
    if args.output:
        output_path = Path(args.output)
    else:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = Path("results") / f"game_{timestamp}.json"
    game.save(output_path)

    # Print summary
    print()
    print("=== Board ===")
    print(game.render())
    print()
    print("=== Moves ===")
    for i in range(len(game.moves)):
        print(f"{i + 1}. {game.describe_move(i)}")
    print()
    print("=== Scoreboard ===")
    for rank, (name, score) in enumerate(game.scoreboard(), start=1):
        print(f"{rank}. {name}: {score}")
    print()
    print(f"Saved to: {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
