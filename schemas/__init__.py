from .common import Commit, CommitDetail, GitAuthor, Repository, User

__all__ = [
    "Commit",
    "CommitDetail",
    "GitAuthor",
    "Repository",
    "User",
]
