from __future__ import annotations

import subprocess as sp
import typing as t
from pathlib import Path


class GitError(Exception):
    pass


class NoCurrentBranchError(GitError):
    pass


class Branch(t.NamedTuple):
    name: str
    current: bool


class Git:
    """
    Utility class to interface with the Git commandline.
    """

    def __init__(self, path: Path | str | None = None):
        self.path = Path(path) if path else Path.cwd()

    def check_output(self, command: list[str], stderr: t.Optional[int] = None) -> bytes:
        return sp.check_output(command, cwd=self.path, stderr=stderr)

    def get_branches(self) -> list[Branch]:
        """
        Get the branches of the repository. Returns a list of #Branch objects.
        """

        results = []
        for line in self.check_output(["git", "branch"]).decode().splitlines():
            current = False
            if line.startswith("*"):
                line = line[1:]
                current = True
            line = line.strip()
            if line.startswith("(HEAD"):
                continue
            results.append(Branch(line, current))

        return results

    def get_current_branch_name(self) -> str:
        """
        Return the name of the current branch. Raises a #NoCurrentBranchError if the HEAD is detached.
        """

        for branch in self.get_branches():
            if branch.current:
                return branch.name

        raise NoCurrentBranchError(self.path)

