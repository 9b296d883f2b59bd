"""Command-line interface for League Night.

Reads event snapshots (JSON) and prints court layouts, rankings, next-round
courts and final standings.
"""

# League Night
# Copyright (C) 2025  League Night developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import argparse
import json
import logging
import sys
from typing import List, Optional

from leaguenight import __version__
from leaguenight.calculator import (
    calculate_court_details,
    calculate_event_rankings,
    calculate_next_round_courts,
    calculate_night_result,
    calculate_season_standings,
)
from leaguenight.constants import EMPTY_PLAYER_NAME, PLAYERS_PER_COURT, VALID_ROUNDS
from leaguenight.exceptions import LeagueNightException
from leaguenight.models.court import Court
from leaguenight.models.event_config import EventConfig, load_event, save_event
from leaguenight.models.season import Season
from leaguenight.testing.reg import RandomEventGenerator, REGConfig, ScorePattern
from leaguenight.utils import ordinal, set_log_level, setup_logger

logger = setup_logger(__name__)


def positive_int(value: str) -> int:
    """argparse type for a court count."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid number '{value}'")
    if number < 1:
        raise argparse.ArgumentTypeError(f"Must be at least 1, got {number}")
    return number


def _load(args: argparse.Namespace) -> EventConfig:
    config = load_event(args.file)
    if getattr(args, "round", None) is not None:
        config.round = args.round
    return config


def run_layout_command(args: argparse.Namespace) -> int:
    """Print seeds and tiers for every court of a round."""
    placeholder = [EMPTY_PLAYER_NAME] * PLAYERS_PER_COURT
    courts = [
        Court(player_names=list(placeholder), court_number=n)
        for n in range(1, args.courts + 1)
    ]
    details = calculate_court_details(courts, args.round, player_count=args.players)

    if args.json:
        print(json.dumps([d.to_dict() for d in details], indent=2, ensure_ascii=False))
        return 0

    print(f"Round {args.round} - {args.courts} courts")
    for detail in details:
        seeds = ", ".join(f"{s:>2}" for s in detail.seeds)
        print(f"  Court {detail.court_number:>2}  [{seeds}]  tier {detail.tier}")
    return 0


def run_rank_command(args: argparse.Namespace) -> int:
    """Print the ranking of an event's current round."""
    config = _load(args)
    players = calculate_event_rankings(config)

    if args.json:
        print(json.dumps([p.to_dict() for p in players], indent=2, ensure_ascii=False))
        return 0

    print(f"{config.name} - round {config.round}")
    header = f"{'Player':<20} {'Seed':>4} {'Ct':>3} {'Place':>5} {'W-L':>5} {'Diff':>5} {'Rank':>5}  Next"
    print(header)
    print("-" * len(header))
    for p in players:
        record = f"{p.wins}-{p.losses}"
        following = f"court {p.next_court} ({p.next_tier})" if p.next_court else "-"
        print(
            f"{p.name:<20} {p.seed:>4} {p.court_number:>3} {ordinal(p.court_place):>5} "
            f"{record:>5} {p.point_differential:>+5} {ordinal(p.round_place):>5}  {following}"
        )
    return 0


def run_next_command(args: argparse.Namespace) -> int:
    """Print (or save) the courts of the following round."""
    config = _load(args)
    courts = calculate_next_round_courts(
        config.courts,
        config.round,
        player_count=config.total_players,
        use_legacy_layouts=config.use_legacy_layouts,
    )

    if args.output:
        next_config = EventConfig(
            name=config.name,
            round=config.round + 1,
            courts=courts,
            points_table=config.points_table,
            use_legacy_layouts=config.use_legacy_layouts,
            player_count=config.player_count,
        )
        save_event(next_config, args.output)
        print(f"Round {config.round + 1} written to {args.output}")
        return 0

    print(f"{config.name} - round {config.round + 1} courts")
    for court in courts:
        print(f"  Court {court.court_number:>2}: {', '.join(court.player_names)}")
    return 0


def run_final_command(args: argparse.Namespace) -> int:
    """Print final standings and league points."""
    config = _load(args)
    positions = calculate_night_result(config).positions

    print(f"{config.name} - final standings")
    for fp in positions:
        print(
            f"  {ordinal(fp.rank):>5}  {fp.name:<20} court {fp.court} "
            f"{ordinal(fp.position):>4}  {fp.points:>5} pts"
        )
    return 0


def run_season_command(args: argparse.Namespace) -> int:
    """Print season standings from a set of event snapshots."""
    nights = [calculate_night_result(load_event(path)) for path in args.files]
    skipped = [n.name for n in nights if not n.is_completed]
    if skipped:
        logger.warning("Skipping unfinished nights: %s", ", ".join(skipped))
    standings = calculate_season_standings(Season(name=args.name, nights=nights))

    if args.json:
        print(json.dumps([s.to_dict() for s in standings], indent=2, ensure_ascii=False))
        return 0

    print(f"{args.name} - {len(nights) - len(skipped)} nights")
    for s in standings:
        ranks = " ".join(str(r) for r in s.weekly_ranks)
        print(
            f"  {ordinal(s.rank):>5}  {s.name:<20} {s.points:>6} pts  "
            f"{s.appearances} nights  court 1 x{s.champ_court}  ranks {ranks}"
        )
    return 0


def run_generate_command(args: argparse.Namespace) -> int:
    """Generate a random event snapshot."""
    generator = RandomEventGenerator(
        REGConfig(
            num_courts=args.courts,
            seed=args.seed,
            score_pattern=ScorePattern[args.pattern.upper()],
            rounds_to_play=args.round,
            name=args.name,
        )
    )
    snapshot = generator.generate_snapshot()

    if args.output:
        save_event(snapshot, args.output)
        print(f"Event written to {args.output}")
    else:
        print(json.dumps(snapshot.to_dict(), indent=2, ensure_ascii=False))
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="leaguenight",
        description="Seeding, tiers and rankings for doubles league nights",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Seeds and tiers for round 2 with 5 courts
  leaguenight layout --courts 5 --round 2

  # Rank the current round of a saved event
  leaguenight rank tuesday.json

  # Write the next round's courts
  leaguenight next tuesday.json --output tuesday-r2.json

  # Season standings from finished nights
  leaguenight season week1.json week2.json
        """,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    subparsers.required = True

    layout_parser = subparsers.add_parser("layout", help="Show seeds and tiers per court")
    layout_parser.add_argument("--courts", type=positive_int, required=True)
    layout_parser.add_argument("--round", type=int, choices=VALID_ROUNDS, default=1)
    layout_parser.add_argument(
        "--players", type=positive_int, help="Players signed up, if not four per court"
    )
    layout_parser.add_argument("--json", action="store_true")
    layout_parser.set_defaults(func=run_layout_command)

    rank_parser = subparsers.add_parser("rank", help="Rank the current round")
    rank_parser.add_argument("file", help="Event snapshot (JSON)")
    rank_parser.add_argument("--round", type=int, choices=VALID_ROUNDS)
    rank_parser.add_argument("--json", action="store_true")
    rank_parser.set_defaults(func=run_rank_command)

    next_parser = subparsers.add_parser("next", help="Build the next round's courts")
    next_parser.add_argument("file", help="Event snapshot (JSON)")
    next_parser.add_argument("--round", type=int, choices=VALID_ROUNDS)
    next_parser.add_argument("--output", help="Write the next round as a snapshot")
    next_parser.set_defaults(func=run_next_command)

    final_parser = subparsers.add_parser("final", help="Final standings and points")
    final_parser.add_argument("file", help="Event snapshot (JSON)")
    final_parser.add_argument("--round", type=int, choices=VALID_ROUNDS)
    final_parser.set_defaults(func=run_final_command)

    season_parser = subparsers.add_parser("season", help="Season standings from finished nights")
    season_parser.add_argument("files", nargs="+", help="Event snapshots (JSON), one per night")
    season_parser.add_argument("--name", default="Season")
    season_parser.add_argument("--json", action="store_true")
    season_parser.set_defaults(func=run_season_command)

    gen_parser = subparsers.add_parser("generate", help="Generate a random event")
    gen_parser.add_argument("--courts", type=positive_int, default=4)
    gen_parser.add_argument("--round", type=int, choices=VALID_ROUNDS, default=1)
    gen_parser.add_argument("--seed", type=int)
    gen_parser.add_argument(
        "--pattern",
        choices=[p.value for p in ScorePattern],
        default=ScorePattern.REALISTIC.value,
    )
    gen_parser.add_argument("--name", default="Generated Event")
    gen_parser.add_argument("--output")
    gen_parser.set_defaults(func=run_generate_command)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        set_log_level(logging.DEBUG)

    try:
        return args.func(args)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except LeagueNightException as e:
        logger.error("%s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
