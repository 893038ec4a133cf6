from __future__ import annotations

import dataclasses

from .models import Contributor


def _copy(c: Contributor) -> Contributor:
    return dataclasses.replace(c, emails=list(c.emails))


def reconcile(roster: list[Contributor], identities: dict[str, str]) -> list[Contributor]:
    """
    Merge (email -> author name) pairs seen in history into the roster.

    Email is the primary key: an email already listed anywhere is skipped. An
    unknown email whose author name exactly matches a roster name is added to
    that contributor; anything else becomes a new contributor at the end.
    Returns a new list and leaves `roster` untouched.
    """
    contributors = [_copy(c) for c in roster]
    listed: set[str] = set()
    names: dict[str, int] = {}
    for i, c in enumerate(contributors):
        names[c.name] = i
        listed.update(c.emails)

    for email, name in identities.items():
        if email in listed:
            continue
        if name and name in names:
            contributors[names[name]].emails.append(email)
            listed.add(email)
            continue
        contributors.append(Contributor(name=name, emails=[email]))
        names[name] = len(contributors) - 1
        listed.add(email)
    return contributors
