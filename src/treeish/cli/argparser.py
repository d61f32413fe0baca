"""Command-line argument parsing for treeish.

This module defines the command-line interface for treeish,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from treeish import __version__
from treeish.exclusion_rules.base_rules import BaseExclusionRules


def create_exclusion_action(exclusion_rules: BaseExclusionRules) -> Type[argparse.Action]:
    """Create an action class that feeds -e/-i options into an exclusion rules object.

    Rules are added as the options are parsed, so files and patterns keep the order in
    which they appear on the command line.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return
            if option_string in ("-e", "--exclude"):
                exclusion_rules.load_rules(Path(str(values)))
            else:  # -i/--ignore
                exclusion_rules.add_rule(str(values))

            collected = getattr(namespace, self.dest, None) or []
            collected.append(values)
            setattr(namespace, self.dest, collected)

    return ExclusionRulesAction


def create_parser(exclusion_rules: BaseExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        An ArgumentParser instance configured with treeish's options.
    """
    description = """
    treeish: list one directory (or file) of a git tree at any ref.

    The listing shows the direct children of PATH as recorded in REF, directories
    first, without touching the working copy. When PATH names a file, the file itself
    is shown instead.
    """

    epilog = """
    Examples:
      # Top level of the current branch
      treeish

      # A directory at a tag, with file sizes
      treeish -r v1.2.0 -s src/

      # A single file, with its breadcrumb and last commit
      treeish -b -l docs/guide/install.md

      # Another repository, as JSON written to a file
      treeish -C ~/code/project -f json -o listing.json lib

      # Hide entries using gitignore-style patterns or files
      treeish -i "*.lock" -i "!poetry.lock" -e .treeishignore

      # Display version information and exit
      treeish -V
    """

    parser = argparse.ArgumentParser(
        prog="treeish",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"treeish {__version__}", help="Show the version and exit"
    )

    ExclusionAction = create_exclusion_action(exclusion_rules)

    parser.add_argument(
        "path",
        nargs="?",
        default="",
        help="Path inside the tree to list, relative to its root (default: the root).",
    )
    parser.add_argument(
        "-C",
        "--repository",
        type=Path,
        default=Path("."),
        metavar="DIR",
        help="Path inside the repository to inspect (default: current directory).",
    )
    parser.add_argument(
        "-r",
        "--ref",
        default="HEAD",
        help="Branch, tag, commit or other tree-ish to inspect (default: HEAD).",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text).",
    )
    parser.add_argument(
        "-b",
        "--breadcrumb",
        action="store_true",
        help="Include the breadcrumb trail from the root to PATH.",
    )
    parser.add_argument(
        "-s",
        "--sizes",
        action="store_true",
        help="Include file sizes.",
    )
    parser.add_argument(
        "-l",
        "--last-commit",
        action="store_true",
        help="Include the most recent commit that modified PATH.",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        type=Path,
        metavar="FILE",
        action=ExclusionAction,
        help="File of gitignore-style patterns for entries to hide (can be specified multiple times).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action=ExclusionAction,
        help=(
            "Gitignore-style pattern for entries to hide, matched against full paths "
            "(can be specified multiple times, mixed with -e/--exclude in order)."
        ),
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if not args.ref.strip():
        raise ValueError("--ref must not be empty")
    # git would read it as an option
    if args.ref.startswith("-"):
        raise ValueError(f"Invalid ref: {args.ref!r}")
