import argparse
from commands import init, open as open_command, open_or_init
from utils.log import configure_logging
from utils.repository import DEFAULT_BRANCH

def add_init_options(parser): # Options shared by the commands that may create a repository
    parser.add_argument("path", nargs="?", default=".", help="Where the repository lives (default: current directory).")
    parser.add_argument("--bare", action="store_true", help="Place the metadata directly in <path> instead of <path>/.git.")
    parser.add_argument("-b", "--initial-branch", default=DEFAULT_BRANCH, help="Branch HEAD points to in a new repository.")

# The main entry point for the nest repository tool
def main(argv=None):
    # The main parser
    parser = argparse.ArgumentParser(description="Nest: create and open repository metadata directories.")
    parser.add_argument("--log-level", default=None, help="Logging level (default: $NEST_LOG_LEVEL or WARNING).")
    subparsers = parser.add_subparsers(dest="command", help="Available commands", required=True)

    # Command: init
    init_parser = subparsers.add_parser("init", help="Create a new, empty repository.")
    add_init_options(init_parser)
    init_parser.set_defaults(func=init.run)

    # Command: open
    open_parser = subparsers.add_parser("open", help="Show the mode and metadata directory of a repository.")
    open_parser.add_argument("path", nargs="?", default=".", help="Where the repository lives (default: current directory).")
    open_parser.set_defaults(func=open_command.run)

    # Command: open-or-init
    open_or_init_parser = subparsers.add_parser("open-or-init", help="Open a repository, creating it if the path does not exist.")
    add_init_options(open_or_init_parser)
    open_or_init_parser.set_defaults(func=open_or_init.run)

    # Parse the arguments
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    args.func(args)

if __name__ == "__main__":
    main()
