from abc import ABC, abstractmethod
from typing import Sequence, Union

from treeish.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for tree entry exclusion rules.

    Rules decide which entries of a TreeView are hidden from the caller (see
    TreeView.exclude()). Paths handed to exclude() are full paths from the root of the
    tree, using forward slashes; directories carry a trailing slash. Loading rules from
    files and adding individual rules are optional capabilities.

    Example:
        >>> from treeish.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule('vendor/')
        >>> rules.exclude('vendor/')
        True
        >>> rules.exclude('vendor.go')
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if an entry should be hidden.

        Args:
            path (str): Full path of the entry, with a trailing slash for directories.

        Returns:
            bool: True if the entry should be excluded, False if it should be listed.
        """
        pass

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load exclusion rules from one or more files.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
            FileNotFoundError: If any rules file does not exist (for file-supporting rule types).
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
