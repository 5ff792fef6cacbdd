"""Remote repository fetching."""

from leaquor.git.adapter import RepositoryFetchError, clone_repository, cloned_repository

__all__ = ["RepositoryFetchError", "clone_repository", "cloned_repository"]
