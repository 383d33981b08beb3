"""Interactive command-line front end

This module is the composition root of the application: it loads the bounds,
builds the user registry and the link engine, and runs a read-eval-print loop
over text commands.

The shell follows this procedure for every input line:
- Step 1: Split the line into a command and its arguments (shell quoting rules)
- Step 2: Dispatch to the command handler, checking login and argument count
- Step 3: Print the result, or `Error: <message>` for any application error
- Step 4: Print and clear the notifications the engine produced

Commands:
    register <name>                      Register a new user and log in
    login <uuid>                         Log in as an existing user
    whoami                               Show the current user
    shorten <url> [ttl_hours] [limit]    Create a short link
    list                                 List your links
    goto <id>                            Follow a short link
    edit-limit <id> <limit>              Change a link's redirect limit
    edit-ttl <id> <hours>                Change a link's expiry (from now)
    delete <id>                          Delete a link
    clean                                Remove your expired or exhausted links
    notifications                        Show pending notifications
    help                                 Show this help
    exit | quit                          Leave

Example:
    $ linkshortener --log-level INFO
    > register alice
    Registered alice. Your ID: 5f0c8a52-0b7e-4c8e-9f0e-1d2c3b4a5f6e
    > shorten https://example.com 24 2
    Short link created: aB3dE6gH
"""

import argparse
import logging
import shlex
import sys
import webbrowser
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import TextIO

from linkshortener.constants import CLIDefaults
from linkshortener.exceptions import LinkShortenerError
from linkshortener.models import UserModel
from linkshortener.services import LinkEngine, UserRegistry
from linkshortener.utils.config import load_bounds
from linkshortener.utils.helpers import format_timedelta, remaining_time, utcnow
from linkshortener.utils.logging import initialize_logging


logger = logging.getLogger(__name__)

PROMPT = '> '


class UsageError(Exception):
    """Raised by command handlers when an argument cannot be parsed."""


def _to_int(value: str) -> int:
    try:
        return int(value)
    except ValueError as e:
        raise UsageError(f'Expected an integer, got {value!r}.') from e


# command -> (usage, minimum args, maximum args, requires login)
COMMANDS: dict[str, tuple[str, int, int, bool]] = {
    'register': ('register <name>', 1, 1, False),
    'login': ('login <uuid>', 1, 1, False),
    'whoami': ('whoami', 0, 0, False),
    'shorten': ('shorten <url> [ttl_hours] [limit]', 1, 3, True),
    'list': ('list', 0, 0, True),
    'goto': ('goto <id>', 1, 1, False),
    'edit-limit': ('edit-limit <id> <limit>', 2, 2, True),
    'edit-ttl': ('edit-ttl <id> <hours>', 2, 2, True),
    'delete': ('delete <id>', 1, 1, True),
    'clean': ('clean', 0, 0, True),
    'notifications': ('notifications', 0, 0, False),
    'help': ('help', 0, 0, False),
    'exit': ('exit', 0, 0, False),
    'quit': ('quit', 0, 0, False),
}


class ShortenerShell:
    """Text command interpreter over a LinkEngine and a UserRegistry

    Attributes:
        engine (LinkEngine):
            Link lifecycle engine.
        registry (UserRegistry):
            Registered users.
        current_user (UserModel | None):
            Logged-in user, or None.

    Example:
        >>> shell = ShortenerShell(LinkEngine(), UserRegistry())
        >>> shell.execute('register alice')
        Registered alice. Your ID: ...
        True
        >>> shell.execute('exit')
        False
    """

    def __init__(
        self,
        engine: LinkEngine,
        registry: UserRegistry,
        out: TextIO | None = None,
        open_browser: bool = False,
        browser: Callable[[str], object] = webbrowser.open,
    ):
        self.engine = engine
        self.registry = registry
        self.current_user: UserModel | None = None
        self._out = out if out is not None else sys.stdout
        self._open_browser = open_browser
        self._browser = browser

    def _print(self, message: str = '') -> None:
        print(message, file=self._out)

    def execute(self, line: str) -> bool:
        """Run one command line

        Args:
            line (str):
                Raw input line.

        Returns:
            bool: False when the shell should stop, True otherwise.
        """
        try:
            tokens = shlex.split(line)
        except ValueError as e:
            self._print(f'Error: {e}')
            return True
        if not tokens:
            return True

        command, args = tokens[0].lower(), tokens[1:]
        if command not in COMMANDS:
            self._print("Unknown command. Type 'help' for the list of commands.")
            return True
        if command in ('exit', 'quit'):
            self._print('Goodbye!')
            return False

        usage, min_args, max_args, requires_login = COMMANDS[command]
        if not min_args <= len(args) <= max_args:
            self._print(f'Usage: {usage}')
            return True
        if requires_login and self.current_user is None:
            self._print('Not logged in.')
            return True

        handler = getattr(self, f'_cmd_{command.replace("-", "_")}')
        try:
            handler(*args)
        except UsageError:
            self._print(f'Usage: {usage}')
        except LinkShortenerError as e:
            logger.debug('Command failed.', extra={'command': command, 'errorCode': e.error_code})
            self._print(f'Error: {e}')

        if command != 'notifications':
            self._flush_notifications()
        return True

    def run(self, lines: Iterable[str]) -> None:
        for line in lines:
            if not self.execute(line):
                break

    def _flush_notifications(self) -> None:
        for message in self.engine.notifications():
            self._print(f'* {message}')
        self.engine.clear_notifications()

    # -------------------------------
    # User commands
    # -------------------------------

    def _cmd_register(self, name: str) -> None:
        self.current_user = self.registry.register(name)
        self._print(f'Registered {self.current_user.name}. Your ID: {self.current_user.user_id}')

    def _cmd_login(self, user_id: str) -> None:
        self.current_user = self.registry.get(user_id)
        self._print(f'Welcome back, {self.current_user.name}!')

    def _cmd_whoami(self) -> None:
        if self.current_user is None:
            self._print('Not logged in.')
        else:
            self._print(f'{self.current_user.name} (ID: {self.current_user.user_id})')

    # -------------------------------
    # Link commands
    # -------------------------------

    def _cmd_shorten(self, url: str, ttl_hours: str = str(CLIDefaults.TTL_HOURS), limit: str = str(CLIDefaults.LIMIT)) -> None:
        link_id = self.engine.create_link(url, self.current_user.user_id, _to_int(ttl_hours), _to_int(limit))
        link = self.engine.get_link(link_id)
        self._print(f'Short link created: {link_id}')
        self._print(f'  expires in {format_timedelta(remaining_time(link.expires_at, utcnow()))}, limit {link.limit} redirects')

    def _cmd_list(self) -> None:
        links = self.engine.list_links_for_owner(self.current_user.user_id)
        if not links:
            self._print('You have no links.')
            return

        now = utcnow()
        for link in links:
            status = 'active' if link.is_available(now) else ('expired' if link.is_expired(now) else 'limit reached')
            self._print(
                f'{link.link_id}  {link.original_url}  '
                f'[{link.count}/{link.limit} used, expires in {format_timedelta(remaining_time(link.expires_at, now))}, {status}]'
            )

    def _cmd_goto(self, link_id: str) -> None:
        url = self.engine.resolve_link(link_id)
        self._print(url)
        if self._open_browser:
            self._browser(url)

    def _cmd_edit_limit(self, link_id: str, limit: str) -> None:
        self.engine.edit_limit(link_id, _to_int(limit), self.current_user.user_id)

    def _cmd_edit_ttl(self, link_id: str, hours: str) -> None:
        self.engine.edit_expiry(link_id, _to_int(hours), self.current_user.user_id)

    def _cmd_delete(self, link_id: str) -> None:
        self.engine.delete_link(link_id, self.current_user.user_id)

    def _cmd_clean(self) -> None:
        removed = self.engine.collect_expired(self.current_user.user_id)
        self._print(f'Cleanup finished. Removed {removed} link(s).')

    # -------------------------------
    # Misc commands
    # -------------------------------

    def _cmd_notifications(self) -> None:
        if not self.engine.notifications():
            self._print('No notifications.')
        self._flush_notifications()

    def _cmd_help(self) -> None:
        self._print('Available commands:')
        for usage, *_ in COMMANDS.values():
            self._print(f'  {usage}')


def _input_lines(prompt: str = PROMPT) -> Iterable[str]:
    while True:
        try:
            yield input(prompt)
        except EOFError:
            return


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='linkshortener',
        description='Shorten URLs with per-link expiry and redirect limits.',
    )
    parser.add_argument(
        '--config',
        type=Path,
        default=None,
        help='YAML file with ttl/limit bounds (default: $LINKSHORTENER_CONFIG or config/<APP_ENV>.yml)',
    )
    parser.add_argument(
        '--log-level',
        default=None,
        help='Log level for JSON logs on stderr (default: $LOG_LEVEL or WARNING)',
    )
    parser.add_argument(
        '--open-browser',
        action='store_true',
        help='Open resolved URLs in the default web browser',
    )
    return parser


def main(argv: list[str] | None = None, lines: Iterable[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    initialize_logging(args.log_level)

    try:
        bounds = load_bounds(args.config)
    except LinkShortenerError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 2

    shell = ShortenerShell(LinkEngine(bounds), UserRegistry(), open_browser=args.open_browser)
    print("Welcome to linkshortener! Type 'help' for the list of commands.")
    shell.run(lines if lines is not None else _input_lines())
    return 0


if __name__ == '__main__':  # pragma: no cover
    sys.exit(main())
