"""Unit tests for the interactive shell

Test coverage includes:

1. ShortenerShell.execute()
   - Validates user commands (register, login, whoami).
   - Validates link commands and the notifications printed after them.
   - Ensures login, argument count and integer parsing are enforced.
   - Ensures `exit` stops the loop.

2. main()
   - Ensures the shell runs over given input lines with default bounds.
   - Ensures configuration errors exit with status 2.
"""

import io
import logging

import pytest

from linkshortener.cli.app import ShortenerShell, main
from linkshortener.constants import ENV, DefaultBounds
from linkshortener.exceptions import LinkNotFoundError
from linkshortener.models import Bounds
from linkshortener.services import LinkEngine, UserRegistry


URL = 'https://example.com'


# -------------------------------
# Fixtures
# -------------------------------


@pytest.fixture
def opened():
    return []


@pytest.fixture
def shell(opened):
    return ShortenerShell(LinkEngine(), UserRegistry(), out=io.StringIO(), open_browser=True, browser=opened.append)


@pytest.fixture
def output(shell):
    """Return the lines printed since the last call."""

    def _read() -> list[str]:
        lines = shell._out.getvalue().splitlines()
        shell._out.seek(0)
        shell._out.truncate()
        return lines

    return _read


@pytest.fixture
def logged_in(shell, output):
    shell.execute('register alice')
    output()
    return shell.current_user


def _shorten(shell, output, args: str = URL) -> str:
    shell.execute(f'shorten {args}')
    first_line = output()[0]
    assert first_line.startswith('Short link created: ')
    return first_line.removeprefix('Short link created: ')


# -------------------------------
# 1. ShortenerShell.execute()
# -------------------------------


def test_register_logs_in(shell, output):
    assert shell.execute('register alice') is True

    user = shell.current_user
    assert output() == [f'Registered alice. Your ID: {user.user_id}']

    shell.execute('whoami')
    assert output() == [f'alice (ID: {user.user_id})']


def test_login_existing_user(shell, output):
    user = shell.registry.register('bob')

    shell.execute(f'login {user.user_id}')

    assert output() == ['Welcome back, bob!']
    assert shell.current_user == user


def test_login_unknown_user(shell, output):
    shell.execute('login nobody')
    assert output() == ["Error: User 'nobody' not found."]
    assert shell.current_user is None


def test_whoami_when_logged_out(shell, output):
    shell.execute('whoami')
    assert output() == ['Not logged in.']


def test_shorten_requires_login(shell, output):
    shell.execute(f'shorten {URL}')
    assert output() == ['Not logged in.']


def test_shorten_with_defaults(shell, output, logged_in):
    link_id = _shorten(shell, output)

    link = shell.engine.get_link(link_id)
    assert link.limit == 10
    assert link.owner_id == logged_in.user_id
    assert (link.expires_at - link.created_at).total_seconds() == 24 * 3600


def test_shorten_with_explicit_ttl_and_limit(shell, output, logged_in):
    shell.execute(f'shorten {URL} 2 3')
    lines = output()

    assert lines[0].startswith('Short link created: ')
    assert lines[1].endswith('limit 3 redirects')


def test_shorten_with_huge_ttl_is_clamped():
    shell = ShortenerShell(LinkEngine(Bounds(ttl_max=DefaultBounds.TTL_CEILING)), UserRegistry(), out=io.StringIO())
    shell.execute('register alice')

    shell.execute(f'shorten {URL} 100000000 1')

    lines = shell._out.getvalue().splitlines()
    assert lines[1].startswith('Short link created: ')
    assert lines[2].endswith('limit 1 redirects')


def test_shorten_rejects_non_integer(shell, output, logged_in):
    shell.execute(f'shorten {URL} soon')
    assert output() == ['Usage: shorten <url> [ttl_hours] [limit]']


def test_goto_prints_url_and_opens_browser(shell, output, opened, logged_in):
    link_id = _shorten(shell, output)

    shell.execute(f'goto {link_id}')

    assert output() == [URL, f"* Link '{link_id}' redirected to {URL} (1/10)."]
    assert opened == [URL]


def test_goto_reports_exceeded_limit(shell, output, logged_in):
    link_id = _shorten(shell, output, f'{URL} 24 1')
    shell.execute(f'goto {link_id}')
    output()

    shell.execute(f'goto {link_id}')

    message = f"Link '{link_id}' exceeded its limit of 1 redirects."
    assert output() == [f'Error: {message}', f'* {message}']


def test_goto_does_not_require_login(shell, output, logged_in):
    link_id = _shorten(shell, output)
    shell.current_user = None

    shell.execute(f'goto {link_id}')

    assert output()[0] == URL


def test_list_links(shell, output, logged_in):
    shell.execute('list')
    assert output() == ['You have no links.']

    link_id = _shorten(shell, output)
    shell.execute('list')

    lines = output()
    assert len(lines) == 1
    assert lines[0].startswith(f'{link_id}  {URL}  [0/10 used, expires in ')
    assert lines[0].endswith(', active]')


def test_edit_limit_by_owner(shell, output, logged_in):
    link_id = _shorten(shell, output)

    shell.execute(f'edit-limit {link_id} 500')

    assert output() == [
        '* Requested limit 500 adjusted to 100 (allowed range 1-100).',
        f"* Limit for link '{link_id}' changed to 100.",
    ]


def test_edit_ttl_by_other_user(shell, output, logged_in):
    link_id = _shorten(shell, output)
    shell.execute('register mallory')
    mallory = shell.current_user
    output()

    shell.execute(f'edit-ttl {link_id} 5')

    message = f"User '{mallory.user_id}' is not allowed to modify link '{link_id}'."
    assert output() == [f'Error: {message}', f'* {message}']


def test_delete_link(shell, output, logged_in):
    link_id = _shorten(shell, output)

    shell.execute(f'delete {link_id}')
    assert output() == [f"* Link '{link_id}' deleted."]

    shell.execute(f'goto {link_id}')
    assert output()[0] == f"Error: Link '{link_id}' not found."


def test_clean_removes_own_exhausted_links(shell, output, logged_in):
    link_id = _shorten(shell, output, f'{URL} 24 1')
    shell.execute(f'goto {link_id}')
    output()

    shell.execute('clean')

    assert output() == ['Cleanup finished. Removed 1 link(s).', f"* Link '{link_id}' removed: limit reached."]


def test_notifications_command(shell, output):
    shell.execute('notifications')
    assert output() == ['No notifications.']

    with pytest.raises(LinkNotFoundError):
        shell.engine.resolve_link('unknown1')
    shell.execute('notifications')
    assert output() == ["* Link 'unknown1' not found."]
    assert shell.engine.notifications() == ()


@pytest.mark.parametrize(
    'line, expected',
    [
        ('frobnicate', "Unknown command. Type 'help' for the list of commands."),
        ('register', 'Usage: register <name>'),
        ('goto a b', 'Usage: goto <id>'),
        ('register "alice', 'Error: No closing quotation'),
    ],
)
def test_invalid_lines(shell, output, line, expected):
    assert shell.execute(line) is True
    assert output() == [expected]


def test_blank_line_is_ignored(shell, output):
    assert shell.execute('   ') is True
    assert output() == []


def test_help_lists_commands(shell, output):
    shell.execute('help')
    lines = output()
    assert lines[0] == 'Available commands:'
    assert '  shorten <url> [ttl_hours] [limit]' in lines


@pytest.mark.parametrize('command', ['exit', 'quit', 'EXIT'])
def test_exit_stops_shell(shell, output, command):
    assert shell.execute(command) is False
    assert output() == ['Goodbye!']


def test_run_stops_at_exit(shell, output):
    shell.run(['register alice', 'exit', 'register bob'])
    assert shell.current_user.name == 'alice'
    assert output()[-1] == 'Goodbye!'


# -------------------------------
# 2. main()
# -------------------------------


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in (*ENV.Bounds, ENV.App.CONFIG_PATH, ENV.App.APP_ENV, ENV.App.LOG_LEVEL):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv(ENV.App.PROJECT_ROOT, str(tmp_path))

    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    yield tmp_path
    root.setLevel(level)
    root.handlers[:] = handlers


def test_main_runs_shell(clean_env, capsys):
    assert main([], lines=['register alice', 'whoami', 'exit']) == 0

    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Welcome to linkshortener! Type 'help' for the list of commands."
    assert out[1].startswith('Registered alice. Your ID: ')
    assert out[-1] == 'Goodbye!'


def test_main_uses_configured_bounds(clean_env, capsys):
    config = clean_env / 'bounds.yml'
    config.write_text('limit:\n  min: 1\n  max: 5\n', encoding='utf-8')

    main(['--config', str(config)], lines=['register alice', 'shorten https://example.com 24 50', 'list'])

    out = capsys.readouterr().out
    assert '[0/5 used' in out


def test_main_reports_bad_configuration(clean_env, capsys):
    assert main(['--config', str(clean_env / 'missing.yml')], lines=[]) == 2
    assert capsys.readouterr().err.startswith('Error: Configuration file not found')
