"""
Command-line interface for the TBA data client.

This module provides a unified CLI for listing events and teams, pulling
event statistics, and managing the configuration record.
"""

import argparse
import sys
from typing import List, Optional, Sequence

import pandas as pd

from .api_client import TBAClient, get_status
from .config import TBAConfig, configure_logging, load_config_record, save_config_record
from .events import list_events
from .exceptions import TBADataError
from .matches import get_match_summaries
from .rankings import get_rankings
from .ratings import get_coprs, get_oprs
from .teams import get_team_info, list_teams
from .validators import validate_event_key, validate_team_key, validate_year


def setup_parser() -> argparse.ArgumentParser:
    """Set up the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="tba-data",
        description="The Blue Alliance data client - FRC events, teams and statistics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  tba-data config init
  tba-data events --year 2024 --week0 --offseason
  tba-data teams --year 2024 --format csv --output teams_2024.csv
  tba-data team --team-key frc4611
  tba-data opr --event-key 2024ohcl
  tba-data rankings --event-key 2024ohcl
  tba-data matches --team-key 4611 --event-key 2024ohcl
  tba-data status
        """
    )
    parser.add_argument('--config-file', type=str, help='Path to the configuration record')
    parser.add_argument('--log-level', type=str, help='Logging level (default: INFO)')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    output_parser = argparse.ArgumentParser(add_help=False)
    output_parser.add_argument('--format', choices=['table', 'csv', 'json'], default='table',
                               help='Output format (default: table)')
    output_parser.add_argument('--output', type=str, help='Write output to a file instead of stdout')

    events_parser = subparsers.add_parser('events', parents=[output_parser], help='List events for a season')
    events_parser.add_argument('--year', type=str, required=True, help='Season year')
    events_parser.add_argument('--week0', action='store_true', help='Include preseason events as week 0')
    events_parser.add_argument('--offseason', action='store_true', help='Include offseason events')

    teams_parser = subparsers.add_parser('teams', parents=[output_parser], help='List teams for a season')
    teams_parser.add_argument('--year', type=str, required=True, help='Season year')

    team_parser = subparsers.add_parser('team', parents=[output_parser], help='Show a team')
    team_parser.add_argument('--team-key', type=str, help='Team key (default: from config)')

    for name, help_text in (('opr', 'OPR/DPR/CCWM for an event'),
                            ('copr', 'Component OPRs for an event'),
                            ('rankings', 'Rankings for an event')):
        event_parser = subparsers.add_parser(name, parents=[output_parser], help=help_text)
        event_parser.add_argument('--event-key', type=str, help='Event key (default: from config)')

    matches_parser = subparsers.add_parser('matches', parents=[output_parser], help="A team's matches at an event")
    matches_parser.add_argument('--team-key', type=str, help='Team key (default: from config)')
    matches_parser.add_argument('--event-key', type=str, help='Event key (default: from config)')

    subparsers.add_parser('status', help='Show API status')

    config_parser = subparsers.add_parser('config', help='Configuration record operations')
    config_subparsers = config_parser.add_subparsers(dest='config_action', help='Config action')
    config_subparsers.add_parser('init', help='Create or update the configuration record')
    config_subparsers.add_parser('show', help='Show the effective configuration')

    return parser


def _emit(rows: List[dict], args) -> None:
    """Render rows as a table, CSV or JSON."""
    df = pd.DataFrame(rows)
    if args.format == 'csv':
        text = df.to_csv(index=False)
    elif args.format == 'json':
        text = df.to_json(orient='records', indent=2)
    elif df.empty:
        text = "No results"
    else:
        text = df.to_string(index=False)

    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(text)
        print(f"📁 Output saved to: {args.output}")
    else:
        print(text)


def _optional(validator, value):
    return validator(value) if value else None


def run_events(client: TBAClient, args) -> None:
    year = validate_year(args.year)
    events = list_events(client, year, include_week0=args.week0, include_offseason=args.offseason)
    _emit([event.to_dict() for event in events], args)


def run_teams(client: TBAClient, args) -> None:
    year = validate_year(args.year)
    _emit([team.to_dict() for team in list_teams(client, year)], args)


def run_team(client: TBAClient, args) -> None:
    team = get_team_info(client, _optional(validate_team_key, args.team_key))
    _emit([team.to_dict()], args)


def run_opr(client: TBAClient, args) -> None:
    ratings = get_oprs(client, _optional(validate_event_key, args.event_key))
    _emit([rating.to_dict() for rating in ratings], args)


def run_copr(client: TBAClient, args) -> None:
    ratings = get_coprs(client, _optional(validate_event_key, args.event_key))
    _emit([rating.to_dict() for rating in ratings], args)


def run_rankings(client: TBAClient, args) -> None:
    rankings = get_rankings(client, _optional(validate_event_key, args.event_key))
    _emit([ranking.to_dict() for ranking in rankings], args)


def run_matches(client: TBAClient, args) -> None:
    summaries = get_match_summaries(client,
                                    _optional(validate_team_key, args.team_key),
                                    _optional(validate_event_key, args.event_key))
    _emit([summary.to_dict() for summary in summaries], args)


def show_status(client: TBAClient) -> None:
    """Show API status."""
    status = get_status(client)
    print("\n=== TBA API Status ===")
    print(f"Current season: {status.get('current_season')}")
    print(f"Max season: {status.get('max_season')}")
    if status.get('is_datafeed_down'):
        print("❌ Datafeed is down")
    else:
        print("✅ Datafeed is up")
    down_events = status.get('down_events') or []
    if down_events:
        print(f"Events with data issues: {', '.join(down_events)}")


def _prompt(label: str, current: Optional[str]) -> str:
    suffix = f" [{current}]" if current else ""
    value = input(f"{label}{suffix}: ").strip()
    return value or (current or "")


def run_config_init(config: TBAConfig) -> None:
    """Prompt for the configuration fields and save them."""
    print(f"\n=== Configure TBA data client ({config.config_file}) ===")
    record = load_config_record(config.config_file)

    api_key = _prompt("TBA API key", record.get('api_key'))
    if not api_key:
        raise TBADataError("An API key is required")
    team_key = validate_team_key(_prompt("Default team key", record.get('team_key')))
    event_key = validate_event_key(_prompt("Default event key", record.get('event_key')))

    path = save_config_record(config.config_file, {
        'api_key': api_key,
        'team_key': team_key,
        'event_key': event_key,
    })
    print(f"\n✅ Configuration saved to: {path}")


def run_config_show(config: TBAConfig) -> None:
    print("\n=== TBA Configuration ===")
    for key, value in config.to_dict().items():
        print(f"  {key}: {value}")


COMMANDS = {
    'events': run_events,
    'teams': run_teams,
    'team': run_team,
    'opr': run_opr,
    'copr': run_copr,
    'rankings': run_rankings,
    'matches': run_matches,
}


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main CLI entry point."""
    parser = setup_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    try:
        config = TBAConfig.from_env(args.config_file)
        configure_logging(args.log_level or config.log_level, config.log_file)

        if args.command == 'config':
            if args.config_action == 'init':
                run_config_init(config)
            elif args.config_action == 'show':
                run_config_show(config)
            else:
                print("Please specify a config action: init or show")
            return

        config.validate()
        client = TBAClient(config)
        if args.command == 'status':
            show_status(client)
        else:
            COMMANDS[args.command](client, args)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        sys.exit(1)
    except TBADataError as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
