from __future__ import annotations

import re
from pathlib import Path

from .models import Contributor

_NICKNAME_RE = re.compile(r"\((\S*)\)")
_EMAIL_RE = re.compile(r"<(\S*)>")


class RosterError(Exception):
    pass


def parse_roster_line(line: str) -> Contributor:
    contributor = Contributor()
    name_parts: list[str] = []
    for field in line.split():
        m = _NICKNAME_RE.search(field)
        if m:
            contributor.nickname = m.group(1)
            continue
        m = _EMAIL_RE.search(field)
        if m:
            contributor.emails.append(m.group(1))
            continue
        name_parts.append(field)
    contributor.name = " ".join(name_parts)
    return contributor


def parse_roster(text: str) -> list[Contributor]:
    """
    Parse AUTHORS-style text, one contributor per line:

        Jane Doe (jdoe) <jane@example.com> <jdoe@users.noreply.github.com>

    Blank lines and lines starting with '#' are skipped.
    """
    contributors: list[Contributor] = []
    for line in text.splitlines():
        if not line.strip() or line.startswith("#"):
            continue
        contributors.append(parse_roster_line(line))
    return contributors


def read_roster(path: Path) -> list[Contributor]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise RosterError(f"cannot read authors file {path}: {e}") from e
    return parse_roster(text)


def format_roster_line(contributor: Contributor) -> str:
    parts = [contributor.display_name]
    parts.extend(f"<{email}>" for email in contributor.emails)
    return " ".join(parts)
