from __future__ import annotations

import argparse
import asyncio
import importlib
import logging
from types import ModuleType
from typing import Callable, Optional, Sequence

from dotenv import load_dotenv

from config import get_settings_module

from .container import Container, build_container
from .core.exceptions import AuthorizationError
from .dashboard.controller import DASHBOARDS, DashboardController
from .notifications.notifier import Notifier
from .users.session_store import load_current_user

logger = logging.getLogger(__name__)


def load_settings() -> ModuleType:
    load_dotenv(override=False)
    return importlib.import_module(get_settings_module())


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def container_from_settings(settings: ModuleType) -> Container:
    return build_container(
        api_config=getattr(settings, "API_CONFIG"),
        geolocation_config=getattr(settings, "GEOLOCATION_CONFIG", {}),
        tick_seconds=float(getattr(settings, "TICK_SECONDS", 1.0)),
    )


def create_dashboard(
    role: str = "manager",
    *,
    settings: Optional[ModuleType] = None,
    container: Optional[Container] = None,
    notifier: Optional[Notifier] = None,
    on_elapsed: Optional[Callable[[str], None]] = None,
) -> DashboardController:
    settings = settings or load_settings()
    container = container or container_from_settings(settings)

    if getattr(settings, "DEBUG", False):
        logger.debug("settings=%s api=%s", settings.__name__, container.conn.config.base_url)

    controller_cls = DASHBOARDS[role]
    return controller_cls(
        attendance=container.attendance_repo,
        regularizations=container.regularizations_repo,
        geolocation=container.geolocation,
        notifier=notifier or container.notifier,
        current_user=load_current_user(getattr(settings, "SESSION_FILE", None)),
        tick_period=container.tick_seconds,
        geolocation_timeout=container.geolocation_timeout,
        on_elapsed=on_elapsed,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="attendance-dashboard", description="Attendance self-service dashboard")
    parser.add_argument("--role", choices=sorted(DASHBOARDS), default="manager")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("status", help="show today's session")

    clock_in = sub.add_parser("clock-in", help="start today's session")
    clock_in.add_argument("--work-from", required=True)
    clock_in.add_argument("--mode", required=True)

    sub.add_parser("clock-out", help="end today's session")

    regularize = sub.add_parser("regularize", help="request a correction for a day of this month")
    regularize.add_argument("--date", required=True, help="YYYY-MM-DD")
    regularize.add_argument("--reason", required=True)
    return parser


async def run_command(controller: DashboardController, args: argparse.Namespace) -> bool:
    async with controller:
        if args.command == "clock-in":
            ok = await controller.clock_in(args.work_from, args.mode)
        elif args.command == "clock-out":
            ok = await controller.clock_out()
        elif args.command == "regularize":
            ok = await controller.submit_regularization(controller.restrict_year(args.date), args.reason)
        else:
            ok = True

        print(f"[{controller.title}] {controller.username or '-'}: {controller.state.value} {controller.elapsed_display}")
        return ok


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings()
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    container = container_from_settings(settings)
    controller = create_dashboard(args.role, settings=settings, container=container)
    try:
        ok = asyncio.run(run_command(controller, args))
    except AuthorizationError as e:
        logger.error("%s", e)
        return 1
    finally:
        container.conn.close()
    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
