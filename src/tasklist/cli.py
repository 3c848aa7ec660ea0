#!/usr/bin/env python3
"""
TASKLIST - CLI Interface
========================
Command-line front end for a persistent to-do list.

Usage:
    tasklist add "Buy milk"
    tasklist list --filter active --search milk
    tasklist toggle 1a2b3c4d
    tasklist edit 1a2b3c4d "Buy oat milk"
    tasklist delete 1a2b3c4d
    tasklist clear-completed
    tasklist complete-all
    tasklist stats
"""

import argparse
import json
import logging
import sys
from typing import Callable, List, Optional

from . import notices
from .config import Settings
from .errors import TaskListError
from .manager import TaskManager
from .notices import Notice
from .schema import FilterStatus, Task, TaskStats
from .storage import FileSlot

logger = logging.getLogger("tasklist")

Confirm = Callable[[str], bool]


def ask_confirm(prompt: str) -> bool:
    try:
        answer = input(f"{prompt} [y/N] ")
    except EOFError:
        return False
    return answer.strip().lower() in {"y", "yes"}


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tasklist",
        description="Persistent to-do list",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  tasklist add "Buy milk"                 Add a task to the top of the list
  tasklist list -f active -s milk         Active tasks containing "milk"
  tasklist toggle 1a2b3c4d                Mark done / not done
  tasklist edit 1a2b3c4d "Buy oat milk"   Change a task's text
  tasklist delete 1a2b3c4d --yes          Delete without asking
  tasklist clear-completed                Remove all completed tasks
  tasklist complete-all                   Mark every task as done
  tasklist stats --json                   Counts as JSON
        """
    )
    parser.add_argument("--dir", default=settings.data_dir, help="Data directory")
    parser.add_argument("--key", default=settings.storage_key, help="Storage key")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    add_parser = subparsers.add_parser("add", help="Add a task")
    add_parser.add_argument("text", help="Task text")

    list_parser = subparsers.add_parser("list", help="List tasks")
    list_parser.add_argument(
        "-f", "--filter", default=FilterStatus.ALL.value,
        choices=[s.value for s in FilterStatus], help="Status filter"
    )
    list_parser.add_argument("-s", "--search", default="", help="Search text")
    list_parser.add_argument("--json", action="store_true", help="Output as JSON")

    toggle_parser = subparsers.add_parser("toggle", help="Toggle a task's completion")
    toggle_parser.add_argument("task_id", help="Task ID")

    edit_parser = subparsers.add_parser("edit", help="Change a task's text")
    edit_parser.add_argument("task_id", help="Task ID")
    edit_parser.add_argument("text", help="New text")

    delete_parser = subparsers.add_parser("delete", help="Delete a task")
    delete_parser.add_argument("task_id", help="Task ID")
    delete_parser.add_argument("-y", "--yes", action="store_true", help="Don't ask for confirmation")

    clear_parser = subparsers.add_parser("clear-completed", help="Delete all completed tasks")
    clear_parser.add_argument("-y", "--yes", action="store_true", help="Don't ask for confirmation")

    subparsers.add_parser("complete-all", help="Mark all tasks as complete")

    stats_parser = subparsers.add_parser("stats", help="Show task counts")
    stats_parser.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


def format_report(tasks: List[Task], stats: TaskStats) -> str:
    """Human-readable task list"""
    if not tasks:
        return "No tasks found"

    lines = []
    for task in tasks:
        icon = "✅" if task.completed else "⬜"
        lines.append(f"  {icon} [{task.id}] {task.text}")

    lines.extend([
        "",
        f"Total: {stats.total} | Active: {stats.active} | Completed: {stats.completed}",
    ])
    return "\n".join(lines)


def format_stats(stats: TaskStats) -> str:
    pct = stats.progress_pct
    return "\n".join([
        f"Progress: {'█' * (pct // 10)}{'░' * (10 - pct // 10)} {pct}%",
        f"Total: {stats.total}",
        f"Active: {stats.active}",
        f"Completed: {stats.completed}",
    ])


def run_command(
    manager: TaskManager,
    args: argparse.Namespace,
    confirm: Confirm = ask_confirm
) -> Optional[Notice]:
    """Execute one parsed command; returns the notice to show, if any"""
    if args.command == "add":
        manager.create(args.text)
        return notices.added()

    elif args.command == "list":
        tasks = manager.list(args.filter, args.search)
        if args.json:
            print(json.dumps([t.model_dump(mode="json", by_alias=True) for t in tasks], indent=2))
        else:
            print(format_report(tasks, manager.statistics()))
        return None

    elif args.command == "toggle":
        task = manager.toggle(args.task_id)
        return notices.toggled(task)

    elif args.command == "edit":
        manager.edit(args.task_id, args.text)
        return notices.edited()

    elif args.command == "delete":
        task = manager.get(args.task_id)
        if not args.yes and not confirm(f"Are you sure you want to delete '{task.text}'?"):
            return None
        manager.delete(args.task_id)
        return notices.deleted()

    elif args.command == "clear-completed":
        count = manager.statistics().completed
        if count and not args.yes and not confirm(
            f"Are you sure you want to delete {count} completed task(s)?"
        ):
            return None
        return notices.cleared(manager.clear_completed())

    elif args.command == "complete-all":
        return notices.completed_all(manager.mark_all_complete())

    elif args.command == "stats":
        stats = manager.statistics()
        if args.json:
            print(json.dumps(stats.model_dump(), indent=2))
        else:
            print(format_stats(stats))
        return None

    raise ValueError(f"unknown command: {args.command}")


def main(argv: Optional[List[str]] = None, confirm: Confirm = ask_confirm) -> int:
    settings = Settings.from_env()
    parser = build_parser(settings)
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    try:
        manager = TaskManager(
            FileSlot(args.dir),
            key=args.key,
            seed_samples=settings.seed_samples
        )
        notice = run_command(manager, args, confirm=confirm)
        if notice is None and manager.pending_error is not None:
            notice = notices.from_error(manager.pending_error)
    except TaskListError as exc:
        notice = notices.from_error(exc)

    if notice is None:
        return 0

    print(notices.render(notice))
    return 1 if notice.is_failure else 0


if __name__ == "__main__":
    sys.exit(main())
