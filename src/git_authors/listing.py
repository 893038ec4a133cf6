from __future__ import annotations

from .models import Contributor
from .roster import format_roster_line

DEFAULT_EXCLUDE_PATTERN = "[bot]"


def keep_contributor(c: Contributor, *, min_commits: int, exclude_pattern: str) -> bool:
    if exclude_pattern in c.name:
        return False
    return c.commits >= min_commits


def filter_contributors(
    contributors: list[Contributor],
    *,
    min_commits: int = 1,
    exclude_pattern: str = DEFAULT_EXCLUDE_PATTERN,
) -> list[Contributor]:
    return [c for c in contributors if keep_contributor(c, min_commits=min_commits, exclude_pattern=exclude_pattern)]


def sort_contributors(contributors: list[Contributor], *, by_geekrank: bool = False) -> list[Contributor]:
    if by_geekrank:
        return sorted(contributors, key=lambda c: (-c.geekrank, c.name.lower()))
    return sorted(contributors, key=lambda c: c.name.lower())


def render_names(contributors: list[Contributor]) -> str:
    return ", ".join(c.display_name for c in contributors) + "\n"


def render_stats(contributors: list[Contributor]) -> str:
    return "".join(f"{c.commits:5d} {c.geekrank:2d} {c.display_name}\n" for c in contributors)


def render_authors(contributors: list[Contributor]) -> str:
    return "".join(format_roster_line(c) + "\n" for c in contributors)


def render_views(contributors: list[Contributor], *, names: bool, stats: bool, authors: bool) -> str:
    out: list[str] = []
    if names:
        out.append(render_names(contributors))
    if stats:
        out.append(render_stats(contributors))
    if authors:
        out.append(render_authors(contributors))
    return "".join(out)
