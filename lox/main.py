"""Runs a .lox script, or starts the interactive shell when no script is given. Also wraps everything in the error
handling context manager. Called from the lox console script.
"""

import argparse
import sys

from lox.lang.error import ErrorHandler
from lox.lang.session import Session
from lox.lang.shell import Shell


def main(argv=None):
    """Runs lox interpreter. Returns the process exit status."""
    parser = argparse.ArgumentParser(prog="lox")
    parser.add_argument("file", help="script to interpret and run (if empty, goes to command-line mode)", nargs="?")
    parser.add_argument("--tokens", action="store_true", help="print the scanned tokens instead of running")
    parser.add_argument("--ast", action="store_true", help="print the parsed syntax tree instead of running")
    args = parser.parse_args(argv)

    with ErrorHandler(fatal=True) as error_handler:
        sess = Session(error_handler)

        if args.file is None:
            error_handler.fatal = False
            Shell(sess).cmdloop()
            return 0

        if args.tokens or args.ast:
            tokens = sess.tokens(Session.read(args.file))
            if args.tokens:
                for token in tokens:
                    print(token)
            if args.ast:
                print(sess.ast(tokens))
        else:
            sess.run_file(args.file)

        return sess.exit_status()


if __name__ == "__main__":
    sys.exit(main())
