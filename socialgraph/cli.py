"""Interactive menu for editing a stored friendship network."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable
from typing import TextIO

from .network import Network, UnknownUserError
from .user import User

MENU = (
    "\nMenu:\n"
    " 1 <First Last> <Year> <Zip>      : Add user\n"
    " 2 <First Last> <First Last>      : Add friend connection\n"
    " 3 <First Last> <First Last>      : Delete friend connection\n"
    " 4 <filename>                     : Write to file\n"
    " Any other number                 : Exit\n"
    "Enter option and arguments on one line:\n"
)

_OPTION = re.compile(r"\s*([+-]?\d+)")


def _missing_users(name1: str, name2: str) -> str:
    return f'Error: one or both users do not exist ("{name1}", "{name2}").'


def _two_names(words: list[str]) -> tuple[str, str] | None:
    if len(words) < 4:
        return None
    return f"{words[0]} {words[1]}", f"{words[2]} {words[3]}"


def _add_user(network: Network, words: list[str], out: TextIO, err: TextIO) -> None:
    try:
        first, last, year, zip_code = words[0], words[1], int(words[2]), int(words[3])
    except (IndexError, ValueError):
        print("Invalid input for option 1. Example: 1 Jason Chen 2001 95053", file=err)
        return
    name = f"{first} {last}"
    new_id = len(network)
    network.add_user(User(new_id, name, year, zip_code))
    print(f"Added user: {name} with id {new_id}", file=out)


def _connect(network: Network, words: list[str], out: TextIO, err: TextIO) -> None:
    names = _two_names(words)
    if names is None:
        print("Invalid input for option 2. Example: 2 Aled Montes Sandhya Krish", file=err)
        return
    name1, name2 = names
    try:
        network.add_connection(name1, name2)
    except UnknownUserError:
        print(_missing_users(name1, name2), file=err)
        return
    print(f"Connected: {name1} <-> {name2}", file=out)


def _disconnect(network: Network, words: list[str], out: TextIO, err: TextIO) -> None:
    names = _two_names(words)
    if names is None:
        print("Invalid input for option 3. Example: 3 Aled Montes Leo Griffin", file=err)
        return
    name1, name2 = names
    try:
        id1, id2 = network.get_id(name1), network.get_id(name2)
    except UnknownUserError:
        print(_missing_users(name1, name2), file=err)
        return
    first = network.get_user(id1)
    if first is None or network.get_user(id2) is None:
        print("Error: internal lookup failed.", file=err)
        return
    if id2 not in first.friends:
        print("Error: users are not friends; nothing to delete.", file=err)
        return
    network.delete_connection(name1, name2)
    print(f"Deleted connection: {name1} X {name2}", file=out)


def _write(network: Network, words: list[str], out: TextIO, err: TextIO) -> None:
    if not words:
        print("Invalid input for option 4. Example: 4 users_new.txt", file=err)
        return
    target = words[0]
    try:
        network.write_users(target)
    except OSError:
        print(f'Error: cannot open "{target}" for writing.', file=err)
        return
    print(f'Wrote {len(network)} users to "{target}"', file=out)


_HANDLERS = {1: _add_user, 2: _connect, 3: _disconnect, 4: _write}


def run_menu(network: Network, lines: Iterable[str], out: TextIO, err: TextIO) -> None:
    """Show the menu and carry out commands from ``lines`` until told to stop."""
    commands = iter(lines)
    while True:
        out.write(MENU)
        line = next(commands, None)
        if line is None:
            return
        line = line.rstrip("\r\n")
        if not line:
            continue
        match = _OPTION.match(line)
        if match is None:
            return
        handler = _HANDLERS.get(int(match.group(1)))
        if handler is None:
            return
        handler(network, line[match.end():].split(), out, err)


def main(argv: list[str] | None = None) -> int:
    """Load the network named on the command line and run the menu on stdin."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("Usage: socialgraph <users.txt>", file=sys.stderr)
        return 1
    network = Network()
    network.read_users(args[0])
    run_menu(network, sys.stdin, sys.stdout, sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())