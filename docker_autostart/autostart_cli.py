import argparse
import sys
from docker_autostart.utils.constants import DEFAULT_TIMEOUT

HELP_TEXT = '''docker-autostart - Docker client that starts Docker Desktop on demand

Checks whether Docker Desktop is running, starts it if it is not, waits
until the engine answers and then runs the docker command unchanged.

Examples:
  # List containers, starting Docker Desktop first if needed
  docker-autostart ps

  # Show what is happening while Docker Desktop starts
  docker-autostart -v ps -a

  # Wait up to five minutes for a slow machine
  docker-autostart -q -timeout 300 run --rm hello-world
'''

USAGE_TEXT = '''Usage: docker-autostart [options] <docker-command> [args...]
Example: docker-autostart ps
Options:
  -v            Verbose output
  -q            Quiet mode
  -timeout N    Timeout in seconds for Docker to start (default %d)
''' % DEFAULT_TIMEOUT

def parse_args(args=None):
    """Parse command line arguments.

    Options are only recognised before the docker command; everything from the
    first positional argument on is passed to docker untouched.

    Args:
        args: Optional list of arguments. If None, uses sys.argv[1:].
    """
    parser = argparse.ArgumentParser(
        prog='docker-autostart',
        usage='%(prog)s [options] <docker-command> [args...]',
        description=HELP_TEXT,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False
    )
    parser.add_argument('-v', '--v', dest='verbose', action='store_true',
                        help='Verbose output')
    parser.add_argument('-q', '--q', dest='quiet', action='store_true',
                        help='Quiet mode')
    parser.add_argument('-timeout', '--timeout', dest='timeout', type=int,
                        default=DEFAULT_TIMEOUT, metavar='N',
                        help='Timeout in seconds for Docker to start')
    parser.add_argument('command', nargs=argparse.REMAINDER,
                        help='docker command and its arguments')

    parsed = parser.parse_args(args)
    # A leading -- only ends the wrapper's own options
    if parsed.command[:1] == ['--']:
        parsed.command = parsed.command[1:]
    return parsed

def print_usage(stream=None):
    """Write the short usage text, to stderr by default."""
    (stream or sys.stderr).write(USAGE_TEXT)
