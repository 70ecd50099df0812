#!/usr/bin/env python3
"""
TO-DO LIST - CLI Interface
==========================
Command-line front end for the task store.

Usage:
    todo add Buy milk
    todo list
    todo list --json
    todo remove 1 3
    todo shell
"""

import argparse
import json
import logging
import sys
from typing import Callable, List, Optional, Set

from .storage import DEFAULT_KEY, DEFAULT_STORAGE_DIR, FileStorage
from .store import TaskStore

SHELL_HELP = """\
Type a task and press Enter to add it.
  :d N [N...]   delete the tasks at rows N
  :h            show this help
  :q            quit"""


def parse_positions(values: List[str], count: int) -> Optional[Set[int]]:
    """Convert 1-based row numbers to 0-based offsets; None if any is invalid"""
    offsets = set()
    for value in values:
        try:
            row = int(value)
        except ValueError:
            return None
        if row < 1 or row > count:
            return None
        offsets.add(row - 1)
    return offsets


def run_shell(store: TaskStore, input_fn: Callable[[str], str] = input) -> int:
    """Single-screen loop: render the list, read a line, apply it"""
    try:
        while True:
            print()
            print(store.get_list_report())
            line = input_fn("\nNew task: ")
            if not line:
                continue

            command = line.strip()
            if command == ":q":
                break
            if command == ":h":
                print(SHELL_HELP)
                continue
            if command.startswith(":d"):
                values = command[2:].split()
                positions = parse_positions(values, len(store)) if values else None
                if positions is None:
                    print(f"❌ Invalid row(s): {' '.join(values) or '(none)'}")
                    continue
                store.remove(positions)
                continue
            if command.startswith(":"):
                print(f"❌ Unknown command: {command} (:h for help)")
                continue

            store.add(line)
    except (KeyboardInterrupt, EOFError):
        print()

    print("Goodbye.")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="todo",
        description="To-Do List - tasks persisted to a local key-value slot",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  todo add Buy milk        Add a task
  todo list                Show all tasks with row numbers
  todo list --json         Dump the stored sequence as JSON
  todo remove 1 3          Delete rows 1 and 3
  todo shell               Interactive single-screen mode
        """
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # ADD command
    add_parser = subparsers.add_parser("add", help="Add a task")
    add_parser.add_argument("title", nargs="*", help="Task title")

    # LIST command
    list_parser = subparsers.add_parser("list", help="List tasks")
    list_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # REMOVE command
    remove_parser = subparsers.add_parser("remove", help="Delete tasks by row number")
    remove_parser.add_argument("rows", nargs="+", help="Row numbers as shown by 'list'")

    # SHELL command
    shell_parser = subparsers.add_parser("shell", help="Interactive single-screen mode")

    for sub in (add_parser, list_parser, remove_parser, shell_parser):
        sub.add_argument("--dir", default=DEFAULT_STORAGE_DIR, help="Storage directory")
        sub.add_argument("--key", default=DEFAULT_KEY, help="Storage slot key")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 1

    # Initialize store
    try:
        store = TaskStore(FileStorage(args.dir), key=args.key)
    except ValueError as e:
        print(f"❌ {e}")
        return 1

    # Execute command
    if args.command == "add":
        title = " ".join(args.title)
        task = store.add(title)
        if task is None:
            print("❌ Task title is empty")
            return 1
        print(f"✅ Added [{len(store)}] {task.title}")

    elif args.command == "list":
        if args.json:
            print(json.dumps([t.model_dump(mode="json") for t in store], indent=2))
        else:
            print(store.get_list_report())

    elif args.command == "remove":
        positions = parse_positions(args.rows, len(store))
        if positions is None:
            print(f"❌ Invalid row(s) for a list of {len(store)}: {' '.join(args.rows)}")
            return 1
        for task in store.remove(positions):
            print(f"🗑️ Removed: {task.title}")

    elif args.command == "shell":
        return run_shell(store)

    return 0


if __name__ == "__main__":
    sys.exit(main())
