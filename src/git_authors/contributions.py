from __future__ import annotations

import math
from collections import Counter

from .models import Contributor


def geekrank(commits: int) -> int:
    # log2(0) has no finite value; rank zero-commit contributors as 0.
    if commits <= 0:
        return 0
    return int(math.floor(math.log2(commits)))


def count_contributions(contributors: list[Contributor], emails: list[str]) -> None:
    """Set `commits` and `geekrank` on each contributor from a per-commit email stream."""
    index: dict[str, Contributor] = {}
    for c in contributors:
        for e in c.emails:
            index[e] = c

    for c in contributors:
        c.commits = 0
    for email, n in Counter(emails).items():
        c = index.get(email)
        if c is not None:
            c.commits += n

    for c in contributors:
        c.geekrank = geekrank(c.commits)
