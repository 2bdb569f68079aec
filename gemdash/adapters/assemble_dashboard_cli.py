"""CLI adapter to assemble a dashboard and print it as JSON.

Usage:
    python -m gemdash.adapters.assemble_dashboard_cli outstanding_dashboard
    python -m gemdash.adapters.assemble_dashboard_cli --tab kenya KDashboard
"""

import argparse
from decimal import Decimal
from enum import Enum
import json

from gemdash.domain.models.finance import DashboardResult
from gemdash.infrastructure.container import build_dashboard_assembler
from gemdash.infrastructure.logging.logger import get_usage_logger


def _json_default(value):
    """Render Decimals as strings so amounts keep their precision."""
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    raise TypeError(f"Unsupported type: {type(value).__name__}")


def render_result(result: DashboardResult) -> str:
    """Serialize a dashboard result with stable key order."""
    payload = {"metrics": result.metrics, "breakdowns": result.breakdowns}
    return json.dumps(
        payload,
        default=_json_default,
        indent=2,
        sort_keys=True,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Assemble a gem dashboard from the record store."
    )
    parser.add_argument(
        "config_id",
        nargs="?",
        help="Dashboard data key, e.g. outstanding_dashboard.",
    )
    parser.add_argument("--module", help="Module to aggregate.")
    parser.add_argument(
        "--tab",
        nargs=2,
        metavar=("MODULE", "TAB"),
        help="Resolve the dashboard hosted on a module tab.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Run the dashboard assembler and print its JSON output."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.tab is None and not args.config_id:
        parser.error("either config_id or --tab is required")

    usage_logger = get_usage_logger()
    assembler = build_dashboard_assembler()
    if args.tab is not None:
        module_id, tab_name = args.tab
        usage_logger.info(f"Dashboard requested: tab={module_id}/{tab_name}")
        result = assembler.execute_for_tab(module_id, tab_name)
    else:
        usage_logger.info(
            f"Dashboard requested: config={args.config_id}, "
            f"module={args.module}"
        )
        result = assembler.execute(args.config_id, args.module)

    print(render_result(result))


if __name__ == "__main__":  # pragma: no cover
    main()
