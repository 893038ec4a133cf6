from __future__ import annotations

from git_authors.identity import reconcile
from git_authors.models import Contributor
from git_authors.roster import parse_roster


def test_same_name_two_emails_becomes_one_contributor() -> None:
    out = reconcile([], {"a@x.com": "Alice", "b@x.com": "Alice"})
    assert len(out) == 1
    assert out[0].name == "Alice"
    assert out[0].emails == ["a@x.com", "b@x.com"]


def test_unknown_email_merges_into_roster_entry_by_name() -> None:
    roster = parse_roster("Bob (Bobby) <bob@x.com>\n")
    out = reconcile(roster, {"bob@x.com": "Robert", "other@x.com": "Bob"})
    assert len(out) == 1
    assert out[0].emails == ["bob@x.com", "other@x.com"]
    assert out[0].nickname == "Bobby"


def test_listed_email_is_never_reassigned() -> None:
    roster = [Contributor(name="Carol", emails=["c@x.com"])]
    out = reconcile(roster, {"c@x.com": "Somebody Else"})
    assert [(c.name, c.emails) for c in out] == [("Carol", ["c@x.com"])]


def test_name_matching_is_exact() -> None:
    roster = [Contributor(name="Dave Smith", emails=["d@x.com"])]
    out = reconcile(roster, {"d2@x.com": "dave smith"})
    assert [c.name for c in out] == ["Dave Smith", "dave smith"]
    assert out[1].emails == ["d2@x.com"]


def test_new_contributors_are_appended_in_discovery_order() -> None:
    roster = [Contributor(name="Zed", emails=["z@x.com"])]
    out = reconcile(roster, {"b@x.com": "Bea", "a@x.com": "Abe", "b2@x.com": "Bea"})
    assert [c.name for c in out] == ["Zed", "Bea", "Abe"]
    assert out[1].emails == ["b@x.com", "b2@x.com"]


def test_empty_names_do_not_merge() -> None:
    out = reconcile([], {"x@x.com": "", "y@x.com": ""})
    assert [c.emails for c in out] == [["x@x.com"], ["y@x.com"]]


def test_reconcile_leaves_roster_untouched() -> None:
    roster = [Contributor(name="Bob", emails=["bob@x.com"])]
    reconcile(roster, {"other@x.com": "Bob"})
    assert roster[0].emails == ["bob@x.com"]


def test_reconcile_is_idempotent() -> None:
    identities = {"a@x.com": "Alice", "b@x.com": "Bob", "a2@x.com": "Alice", "n@x.com": ""}
    once = reconcile(parse_roster("Bob <b0@x.com>\n"), identities)
    twice = reconcile(once, identities)
    assert [(c.name, c.emails) for c in twice] == [(c.name, c.emails) for c in once]


def test_every_email_belongs_to_one_contributor() -> None:
    roster = parse_roster("Ann <a@x.com>\nBen <b@x.com> <b2@x.com>\n")
    identities = {"a@x.com": "Ben", "b2@x.com": "Ann", "c@x.com": "Ann", "d@x.com": "Dee", "e@x.com": "Ben"}
    out = reconcile(roster, identities)
    all_emails = [e for c in out for e in c.emails]
    assert sorted(all_emails) == sorted(set(all_emails))
    assert set(all_emails) == {"a@x.com", "b@x.com", "b2@x.com", "c@x.com", "d@x.com", "e@x.com"}
