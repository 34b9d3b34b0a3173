"""Public surface for change discovery."""

from .domain.extensions import MATCH_ALL, ExtensionSet
from .usecases.change_set import ChangeSetLister
from .usecases.filtering import filter_paths
from .usecases.repository import RepositoryLocator

__all__ = [
    "MATCH_ALL",
    "ChangeSetLister",
    "ExtensionSet",
    "RepositoryLocator",
    "filter_paths",
]
