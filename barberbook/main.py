"""
Interactive console booking session.

Usage:
  barberbook --user-id 7 --token <access token>

Commands: services, service <name>, date <YYYY-MM-DD>, times, time <HH:MM>,
book, cancel, status, help, quit
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from datetime import date

from barberbook.application.use_cases.booking_workflow import BookingWorkflow
from barberbook.core.config import settings
from barberbook.domain.entities.service_type import ServiceType
from barberbook.infrastructure.console.console_confirmation import ConsoleConfirmation
from barberbook.infrastructure.console.console_navigator import ConsoleNavigator
from barberbook.infrastructure.console.console_notifier import ConsoleNotifier
from barberbook.wiring.dependencies import (
    get_barbershop_api,
    get_booking_workflow,
    get_identity,
    get_service_catalog,
)


class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("service", "date", "time", "generation", "slots", "status", "reason", "error", "user_id"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


def configure_logging(level: str) -> None:
    handler = logging.StreamHandler()
    handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()
    root.addHandler(handler)


def _print_header() -> None:
    print(f"\n{settings.BUSINESS_NAME} - Book")
    print("-" * 60)
    print("Commands: services, service <name>, date <YYYY-MM-DD>, times,")
    print("          time <HH:MM>, book, cancel, status, help, quit")
    print("-" * 60)


def _print_services() -> None:
    for entry in get_service_catalog().list_services():
        print(f"  {entry.service.name.lower():<18} {entry.label}")


def _print_times(workflow: BookingWorkflow) -> None:
    selection = workflow.selection
    if selection.date is None:
        print("Pick a date first.")
        return
    if workflow.state.fetching:
        print("Loading free hours...")
        return
    if not workflow.available_times:
        print("No available times.")
        return
    print("Free hours: " + "  ".join(workflow.available_times))


def _print_status(workflow: BookingWorkflow) -> None:
    selection = workflow.selection
    print(f"phase:   {workflow.phase.value}")
    print(f"service: {selection.service.name if selection.service else '-'}")
    print(f"date:    {selection.date.isoformat() if selection.date else '-'}")
    print(f"time:    {selection.time or '-'}")
    print(f"book:    {'enabled' if workflow.can_submit else 'disabled'}")
    if workflow.state.last_error:
        print(f"last error: {workflow.state.last_error}")


async def _handle_command(workflow: BookingWorkflow, command: str, argument: str) -> None:
    if command == "services":
        _print_services()
    elif command == "service":
        service = ServiceType.from_text(argument)
        if service is None:
            print(f"Unknown service: {argument!r}. Try 'services'.")
            return
        workflow.select_service(service)
    elif command == "date":
        try:
            candidate = date.fromisoformat(argument)
        except ValueError:
            print("Dates look like 2024-05-20.")
            return
        workflow.select_date(candidate)
    elif command == "times":
        await workflow.wait_for_availability()
        _print_times(workflow)
    elif command == "time":
        if not workflow.select_time(argument):
            print("Pick one of the free hours (see 'times').")
    elif command == "book":
        await workflow.wait_for_availability()
        if not workflow.can_submit:
            print("Choose a service, a date and a time first.")
            return
        await workflow.submit()
    elif command == "cancel":
        workflow.cancel()
    elif command == "status":
        _print_status(workflow)
    else:
        print(__doc__)


async def run(user_id: int | None, access_token: str | None) -> None:
    navigator = ConsoleNavigator()
    api = get_barbershop_api()
    workflow = get_booking_workflow(
        api=api,
        confirmation=ConsoleConfirmation(),
        notifier=ConsoleNotifier(),
        navigator=navigator,
        identity=get_identity(user_id, access_token),
    )
    try:
        if not workflow.ensure_identity():
            return

        _print_header()
        min_date = workflow.min_date
        if min_date is not None:
            print(f"Earliest bookable date: {min_date.isoformat()}")

        while navigator.destination is None:
            try:
                line = (await asyncio.to_thread(input, "\n> ")).strip()
            except (EOFError, KeyboardInterrupt):
                print("\nBye!")
                return
            if not line:
                continue

            command, _, argument = line.partition(" ")
            command = command.lower()
            if command in ("quit", "exit"):
                print("Bye!")
                return
            await _handle_command(workflow, command, argument.strip())
    finally:
        await workflow.wait_for_availability()
        await api.aclose()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Book a barbershop appointment from the console.")
    parser.add_argument("--user-id", type=int, default=None, help="defaults to BOOKING_USER_ID")
    parser.add_argument("--token", default=None, help="bearer token, defaults to BOOKING_ACCESS_TOKEN")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL)
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    asyncio.run(run(args.user_id, args.token))


if __name__ == "__main__":
    main()
