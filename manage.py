#!/usr/bin/env python3
"""
Fristen-Engine management CLI.

Usage:
    python manage.py serve                       Start the API server
    python manage.py compute 2025-03-10 widerspruch [--by-hand]
    python manage.py list [--sort-by priority]   Show stored reminders
    python manage.py dispatch [--today YYYY-MM-DD]
"""

import argparse
import asyncio
import sys
from datetime import date
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent


def cmd_serve(args: argparse.Namespace) -> None:
    """Start uvicorn in the foreground."""
    import uvicorn

    print(f"Starting server on {args.host}:{args.port}...")
    uvicorn.run(
        "src.api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        app_dir=str(ROOT_DIR),
    )


def cmd_compute(args: argparse.Namespace) -> None:
    """Compute one deadline and print it."""
    from src.application.services import get_deadline_calculator
    from src.core.services.date_math import format_date_de

    result = get_deadline_calculator().compute(
        args.reference_date, args.category, delivered_by_mail=not args.by_hand
    )
    if result is None:
        print(f"Cannot compute a deadline for {args.reference_date!r}.")
        sys.exit(1)

    print(f"{result.category.value}: {result.legal_basis_label} ({result.duration_label})")
    print(f"  Zugang:    {format_date_de(result.deemed_received_date)}")
    if result.deadline_date is None:
        print("  Fristende: keine starre Frist")
    else:
        print(f"  Fristende: {format_date_de(result.deadline_date)} ({result.days_remaining} Tage)")
    for note in result.guidance_notes:
        print(f"  - {note}")


async def _list(sort_by: str) -> None:
    from src.application.services import get_clock, get_reminder_store
    from src.core.services import countdown

    store = get_reminder_store()
    await store.load()
    today = get_clock().today()
    reminders = await store.list_reminders(sort_by=sort_by)
    if not reminders:
        print("No reminders.")
        return
    for r in reminders:
        badge = countdown(r.deadline_date, today)
        print(
            f"{r.deadline_date.isoformat()}  {r.status.value:<15} {r.priority.value:<8} "
            f"{r.title}  [{badge.text}]"
        )


def cmd_list(args: argparse.Namespace) -> None:
    """Print the reminder collection."""
    asyncio.run(_list(args.sort_by))


async def _dispatch(today: date | None) -> None:
    from src.application.services import get_reminder_store
    from src.application.use_cases import DispatchDueNotificationsUseCase

    store = get_reminder_store()
    await store.load()
    report = await DispatchDueNotificationsUseCase(reminder_store=store).execute(today)
    print(
        f"permission={report.permission.value} attempted={report.attempted} "
        f"delivered={len(report.delivered)} failed={len(report.failed)} "
        f"skipped={len(report.skipped)}"
    )


def cmd_dispatch(args: argparse.Namespace) -> None:
    """Run one notification pass."""
    today = date.fromisoformat(args.today) if args.today else None
    asyncio.run(_dispatch(today))


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Fristen-Engine management CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # serve
    p_serve = sub.add_parser("serve", help="Start the API server")
    p_serve.add_argument("--host", default="0.0.0.0", help="Bind host (default: 0.0.0.0)")
    p_serve.add_argument("--port", type=int, default=8000, help="Bind port (default: 8000)")
    p_serve.add_argument("--reload", action="store_true", help="Reload on code changes")
    p_serve.set_defaults(func=cmd_serve)

    # compute
    p_compute = sub.add_parser("compute", help="Compute a statutory deadline")
    p_compute.add_argument("reference_date", help="Date on the notice (YYYY-MM-DD)")
    p_compute.add_argument("category", help="widerspruch, klage, berufung, ...")
    p_compute.add_argument("--by-hand", action="store_true", help="Notice was handed over, not mailed")
    p_compute.set_defaults(func=cmd_compute)

    # list
    p_list = sub.add_parser("list", help="Show stored reminders")
    p_list.add_argument(
        "--sort-by",
        choices=["deadline", "priority", "status"],
        default="deadline",
        help="Sort key (default: deadline)",
    )
    p_list.set_defaults(func=cmd_list)

    # dispatch
    p_dispatch = sub.add_parser("dispatch", help="Notify due reminders once")
    p_dispatch.add_argument("--today", help="Evaluate as of this date (YYYY-MM-DD)")
    p_dispatch.set_defaults(func=cmd_dispatch)

    args = parser.parse_args()
    if args.command != "serve":
        from src.config import configure_logging

        configure_logging()
    args.func(args)


if __name__ == "__main__":
    main()
