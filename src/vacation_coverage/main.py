"""
Main entry point for the vacation coverage command line tool.
"""

import sys
import argparse
import logging

from .analyzer import CoverageAnalyzer
from .config import ConfigLoader
from .errors import (
    ConfigurationError,
    EmptyRosterError,
    InvalidDateFormatError,
    NotFoundError,
)
from .exporters import DailyCoverageCSVExporter, JSONExporter, SuggestionsCSVExporter
from .reporter import CoverageReporter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vacation-coverage",
        description="Analyze vacation conflicts and team coverage for an organization",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Daily coverage for a month
  vacation-coverage snapshot.yaml team --start 2026-07-01 --end 2026-07-31

  # Conflicts of a single request
  vacation-coverage snapshot.yaml conflict req-42

  # Who can cover python work during a week
  vacation-coverage snapshot.yaml suggest --start 2026-07-06 --end 2026-07-10 --skills python

  # Vacation balance of an employee
  vacation-coverage snapshot.yaml balance emp-7
        """,
    )

    parser.add_argument("config", type=str, help="Path to YAML snapshot file")
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress detailed output (only show summary)",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument("--export-json", type=str, help="Export the result to a JSON file")

    commands = parser.add_subparsers(dest="command", required=True)

    team = commands.add_parser("team", help="Daily team coverage over a period")
    team.add_argument("--start", required=True, help="First day (YYYY-MM-DD)")
    team.add_argument("--end", required=True, help="Last day (YYYY-MM-DD)")
    team.add_argument("--export-csv", type=str, help="Export daily coverage to CSV file")

    conflict = commands.add_parser("conflict", help="Conflict analysis of one request")
    conflict.add_argument("request_id", help="Vacation request id")
    conflict.add_argument("--export-csv", type=str, help="Export suggestions to CSV file")

    suggest = commands.add_parser("suggest", help="Rank coverage candidates for a period")
    suggest.add_argument("--start", required=True, help="First day (YYYY-MM-DD)")
    suggest.add_argument("--end", required=True, help="Last day (YYYY-MM-DD)")
    suggest.add_argument(
        "--skills", nargs="*", default=[], help="Skills needed for coverage"
    )

    balance = commands.add_parser("balance", help="Vacation balance of an employee")
    balance.add_argument("employee_id", help="Employee id")

    return parser


def run(args: argparse.Namespace) -> int:
    """Execute one command and return the process exit code."""
    loader = ConfigLoader(args.config)
    config = loader.load()

    if not args.quiet:
        print("✓ Configuration loaded successfully")
        print(loader.get_summary())
        print()

    analyzer = CoverageAnalyzer(config.snapshot, config.settings)
    reporter = CoverageReporter()
    org_id = config.organization.id

    if args.command == "team":
        result = analyzer.team_coverage_analysis(org_id, args.start, args.end)
        reporter.print_team_coverage(result, args.quiet)
        if args.export_csv:
            DailyCoverageCSVExporter(result).export(args.export_csv)

    elif args.command == "conflict":
        result = analyzer.conflict_analysis_for_request(args.request_id)
        reporter.print_conflict(result)
        if args.export_csv:
            SuggestionsCSVExporter(result).export(args.export_csv)

    elif args.command == "suggest":
        result = analyzer.coverage_suggestions(org_id, args.start, args.end, args.skills)
        reporter.print_suggestions(result)

    else:
        result = analyzer.vacation_balance(args.employee_id)
        employee = config.snapshot.get_employee(args.employee_id)
        reporter.print_balance(employee.display_name, result)

    if args.export_json:
        JSONExporter(result).export(args.export_json)

    return 0


def main():
    """Main entry point for the CLI."""
    args = build_parser().parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        sys.exit(run(args))

    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    except InvalidDateFormatError as e:
        print(f"Date Format Error: {e}", file=sys.stderr)
        print(
            "\n Tip: Use ISO 8601 format (YYYY-MM-DD) for all dates.", file=sys.stderr
        )
        print("   Example: 2026-01-15", file=sys.stderr)
        sys.exit(1)

    except ConfigurationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        sys.exit(1)

    except NotFoundError as e:
        print(f"Not Found: {e}", file=sys.stderr)
        sys.exit(1)

    except EmptyRosterError as e:
        print(f"Empty Roster: {e}", file=sys.stderr)
        sys.exit(1)

    except ValueError as e:
        print(f"Validation Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
