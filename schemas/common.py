from pydantic import BaseModel
from typing import Optional


class User(BaseModel):
    login: Optional[str] = None


class GitAuthor(BaseModel):
    name: Optional[str] = None


class CommitDetail(BaseModel):
    message: str
    author: Optional[GitAuthor] = None


class Commit(BaseModel):
    author: Optional[User] = None
    commit: CommitDetail

    @property
    def author_login(self) -> str:
        if self.author is not None and self.author.login:
            return self.author.login
        if self.commit.author is not None and self.commit.author.name:
            return self.commit.author.name
        return "unknown"


class Repository(BaseModel):
    name: str
