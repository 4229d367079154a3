#!/usr/bin/env python3
"""Search properties, fetch reports and unlock them from the command line.

Examples
--------
    python scripts/property_report.py search "gold coast"
    python scripts/property_report.py details VC-9552-CQ
    python scripts/property_report.py unlock VC-9552-CQ --name "Jane Doe" --email jane@example.com
    python scripts/property_report.py status VC-9552-CQ
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from property_insights.aggregator import PropertyDetailAggregator
from property_insights.catalog import PropertyCatalog
from property_insights.config import PropertyInsightsConfig
from property_insights.email import get_dispatcher
from property_insights.exceptions import NotFoundError, PropertyInsightsError, ValidationError
from property_insights.gate import JsonFileStore, UnlockGate, render_sections
from property_insights.leads import LeadPipeline
from property_insights.logging import get_logger, setup_logging
from property_insights.models import LeadSubmission
from property_insights.search import PropertyMatcher
from property_insights.serialization import to_camel_dict

logger = get_logger(__name__)

DEFAULT_STATE_FILE = Path("local") / "state.json"


def emit(data: Any) -> None:
    """Print ``data`` as indented JSON."""
    print(json.dumps(to_camel_dict(data), indent=2, ensure_ascii=False))


def build_gate(config: PropertyInsightsConfig, state_file: Path | None) -> UnlockGate:
    path = state_file or config.gate.state_file or DEFAULT_STATE_FILE
    return UnlockGate(JsonFileStore(path), prompt_delay_seconds=config.gate.prompt_delay_seconds)


def cmd_search(args: argparse.Namespace, config: PropertyInsightsConfig) -> int:
    matcher = PropertyMatcher(PropertyCatalog.default(), limit=args.limit)
    emit(matcher.search(args.query))
    return 0


def cmd_details(args: argparse.Namespace, config: PropertyInsightsConfig) -> int:
    aggregator = PropertyDetailAggregator.from_config(PropertyCatalog.default(), config.aggregator)
    gate = build_gate(config, args.state_file)
    detail = asyncio.run(aggregator.get_property_details(args.property_id))
    unlocked = gate.is_unlocked(detail.id)

    if args.full:
        emit(detail)
    else:
        emit(
            {
                "unlocked": unlocked,
                "sections": [
                    {"name": s.name, "obscured": s.obscured, "content": None if s.obscured else s.content}
                    for s in render_sections(detail, unlocked)
                ],
            }
        )
    return 0


def cmd_unlock(args: argparse.Namespace, config: PropertyInsightsConfig) -> int:
    aggregator = PropertyDetailAggregator.from_config(PropertyCatalog.default(), config.aggregator)
    gate = build_gate(config, args.state_file)
    pipeline = LeadPipeline(get_dispatcher(config), gate, send_report=not args.no_report)
    form = LeadSubmission(
        email=args.email,
        name=args.name,
        phone=args.phone,
        property_id=args.property_id,
    )

    async def run() -> Any:
        detail = await aggregator.get_property_details(args.property_id)
        return await pipeline.submit(form, detail)

    try:
        result = asyncio.run(run())
    except ValidationError as exc:
        emit({"success": False, "errors": exc.errors})
        return 2
    emit(result)
    return 0


def cmd_status(args: argparse.Namespace, config: PropertyInsightsConfig) -> int:
    gate = build_gate(config, args.state_file)
    record = gate.record(args.property_id)
    emit({"propertyId": record.property_id, "state": gate.state(args.property_id), "email": record.email})
    return 0


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Property insights reports")
    parser.add_argument(
        "--state-file",
        type=Path,
        default=None,
        help=f"Unlock state file (default: $STATE_FILE or {DEFAULT_STATE_FILE})",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Override LOG_LEVEL",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    search = subparsers.add_parser("search", help="Search by address, suburb or postcode")
    search.add_argument("query", help="Free-text query")
    search.add_argument("--limit", type=int, default=None, help="Maximum number of results")
    search.set_defaults(handler=cmd_search)

    details = subparsers.add_parser("details", help="Show a property report")
    details.add_argument("property_id", help="Property id")
    details.add_argument("--full", action="store_true", help="Print the full report regardless of lock state")
    details.set_defaults(handler=cmd_details)

    unlock = subparsers.add_parser("unlock", help="Submit a lead and unlock a report")
    unlock.add_argument("property_id", help="Property id")
    unlock.add_argument("--name", required=True, help="Full name")
    unlock.add_argument("--email", required=True, help="Email address")
    unlock.add_argument("--phone", default="", help="Mobile number (optional)")
    unlock.add_argument("--no-report", action="store_true", help="Send only the lead notification, not the report")
    unlock.set_defaults(handler=cmd_unlock)

    status = subparsers.add_parser("status", help="Show the unlock state of a property")
    status.add_argument("property_id", help="Property id")
    status.set_defaults(handler=cmd_status)

    args = parser.parse_args()

    config = PropertyInsightsConfig.from_env()
    setup_logging(args.log_level or config.log_level, config.log_format)
    logger.debug("Configuration: %s", config.to_dict())

    try:
        code = args.handler(args, config)
    except NotFoundError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    except PropertyInsightsError as exc:
        logger.error("Command failed: %s", exc)
        sys.exit(1)
    sys.exit(code)


if __name__ == "__main__":
    main()
