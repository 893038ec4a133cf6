from __future__ import annotations

import dataclasses


@dataclasses.dataclass
class Contributor:
    name: str = ""
    nickname: str = ""
    emails: list[str] = dataclasses.field(default_factory=list)
    commits: int = 0
    geekrank: int = 0

    @property
    def has_nickname(self) -> bool:
        """
        True when there is a nickname and it is not just the name with the
        spaces squeezed out (compared case-insensitively).
        """
        if not self.nickname:
            return False
        return self.name.replace(" ", "").casefold() != self.nickname.casefold()

    @property
    def display_name(self) -> str:
        if self.has_nickname:
            return f"{self.name} ({self.nickname})"
        return self.name


@dataclasses.dataclass(frozen=True)
class HistoryRecord:
    sha: str
    email: str
    name: str
