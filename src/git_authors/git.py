from __future__ import annotations

import subprocess
from pathlib import Path

from .models import HistoryRecord


class GitError(Exception):
    pass


class ExcludeFileError(Exception):
    pass


def run_git(args: list[str], cwd: Path, timeout_s: int | None = 300) -> tuple[int, str, str]:
    proc = subprocess.run(
        ["git", *args],
        cwd=str(cwd),
        capture_output=True,
        text=True,
        encoding="utf-8",
        errors="replace",
        timeout=timeout_s,
    )
    return proc.returncode, proc.stdout, proc.stderr


def _git_output(args: list[str], cwd: Path) -> str:
    try:
        code, out, err = run_git(args, cwd=cwd, timeout_s=None)
    except (OSError, subprocess.TimeoutExpired) as e:
        raise GitError(f"git {args[0]}: {e}") from e
    if code != 0:
        msg = err.strip() or f"exit status {code}"
        raise GitError(f"git {args[0]}: {msg}")
    return out


def parse_history(out: str, exclude: set[str] | None = None) -> list[HistoryRecord]:
    records: list[HistoryRecord] = []
    for line in out.splitlines():
        fields = line.split(" ", 2)
        if len(fields) != 3:
            continue
        sha, email, name = fields
        if exclude and sha in exclude:
            continue
        records.append(HistoryRecord(sha=sha, email=email, name=name))
    return records


def read_history(repo: Path, exclude: set[str] | None = None) -> list[HistoryRecord]:
    """Every commit reachable from HEAD, oldest first, as (sha, author email, author name)."""
    out = _git_output(["log", "--reverse", "--format=%H %ae %an"], cwd=repo)
    return parse_history(out, exclude)


def discover_identities(records: list[HistoryRecord]) -> dict[str, str]:
    """
    Map each author email to the first author name seen for it, in encounter
    order. An empty name is replaced by the next non-empty one.
    """
    names: dict[str, str] = {}
    for r in records:
        if not names.get(r.email):
            names[r.email] = r.name
    return names


def parse_author_emails(out: str, exclude: set[str] | None = None) -> list[str]:
    emails: list[str] = []
    for line in out.splitlines():
        sha, sep, email = line.partition(" ")
        if not sep:
            continue
        if exclude and sha in exclude:
            continue
        emails.append(email)
    return emails


def read_author_emails(repo: Path, exclude: set[str] | None = None) -> list[str]:
    """One author email per commit, excluded commits dropped."""
    out = _git_output(["log", "--reverse", "--format=%H %ae"], cwd=repo)
    return parse_author_emails(out, exclude)


def read_exclude_commits(path: Path) -> set[str]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ExcludeFileError(f"cannot read exclude file {path}: {e}") from e
    shas: set[str] = set()
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        shas.add(line)
    return shas
