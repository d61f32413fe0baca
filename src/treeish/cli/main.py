"""Command-line interface for treeish.

This module provides the ``treeish`` command, which prints a single-level view of a
path in a git tree. It handles argument parsing, output formatting and error reporting.

Exit Codes:
    0: Successful completion
    1: Runtime error (git failure, unknown path, malformed listing)
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (output closed early, e.g. piped into `head`)

Example:
    # List the top level of HEAD
    $ treeish

    # List a directory at a tag as JSON
    $ treeish -r v1.0 -f json src
"""

import os
import sys
from contextlib import nullcontext
from typing import ContextManager, Optional, TextIO

from treeish.cli.argparser import create_parser, validate_args
from treeish.exceptions import NoHistoryError
from treeish.exclusion_rules.git_rules import GitIgnoreExclusionRules
from treeish.output_strategies.base_strategy import OutputStrategy
from treeish.output_strategies.json_strategy import JSONOutputStrategy
from treeish.output_strategies.text_strategy import TextOutputStrategy
from treeish.repository.commit_info import CommitInfo
from treeish.repository.git_repository import GitRepository
from treeish.tree_view.tree_view import TreeView
from treeish.types import PathType


def create_strategy(output_format: str) -> OutputStrategy:
    """Get the output strategy for a --format value.

    Raises:
        ValueError: If the format is not supported.
    """
    strategies = {"text": TextOutputStrategy, "json": JSONOutputStrategy}
    if output_format not in strategies:
        raise ValueError(f"Unsupported output format: {output_format}")
    return strategies[output_format]()


def open_output(output: Optional[PathType]) -> ContextManager[TextIO]:
    if output is None:
        return nullcontext(sys.stdout)
    return open(output, "w", encoding="utf-8")


def main() -> None:
    """Main entry point for the treeish command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe
    """
    try:
        exclusion_rules = GitIgnoreExclusionRules()
        parser = create_parser(exclusion_rules)
        args = parser.parse_args()
        validate_args(args)

        repository = GitRepository(args.repository)
        subject = repository.resolve_subject(args.ref, args.path)
        view = TreeView.from_repository(repository, args.ref, subject).exclude(exclusion_rules)

        last_commit: Optional[CommitInfo] = None
        if args.last_commit:
            try:
                last_commit = view.get_last_commit(repository)
            except NoHistoryError as e:
                print(f"Warning: {str(e)}", file=sys.stderr)

        strategy = create_strategy(args.format)
        with open_output(args.output) as out:
            for chunk in strategy.stream_view(view, args.sizes, args.breadcrumb, last_commit):
                out.write(chunk)
            out.flush()

    except BrokenPipeError:
        # Keep the interpreter from failing again while flushing stdout at exit
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(141)
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
