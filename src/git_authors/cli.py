from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import AuthorsConfig, ConfigError, build_config, load_config
from .contributions import count_contributions
from .git import ExcludeFileError, GitError, discover_identities, read_author_emails, read_exclude_commits, read_history
from .identity import reconcile
from .listing import filter_contributors, render_views, sort_contributors
from .models import Contributor
from .roster import RosterError, read_roster


def _build_parser() -> argparse.ArgumentParser:
    # Defaults are None so that a JSON config file can fill in what the command line leaves out.
    parser = argparse.ArgumentParser(
        prog="git-authors",
        description="Reconcile git commit authors against a curated AUTHORS file.",
    )
    parser.add_argument("--read-authors", type=str, default=None, help="Canonical AUTHORS file to start from.")
    parser.add_argument("--authors", action="store_true", default=None, help="Print the AUTHORS list.")
    parser.add_argument("--names", action="store_true", default=None, help="Print the comma-separated name list.")
    parser.add_argument("--stats", action="store_true", default=None, help="Print commit count, geekrank and name per contributor.")
    parser.add_argument("--min", type=int, default=None, help="Minimum number of commits to show up in lists (default 1).")
    parser.add_argument("--geekrank", action="store_true", default=None, help="Sort contributors by geekrank instead of name.")
    parser.add_argument("--exclude-commits", type=str, default=None, help="File of commit hashes to ignore, one per line.")
    parser.add_argument("--exclude-pattern", type=str, default=None, help="Skip names containing this string (default '[bot]').")
    parser.add_argument("--repo", type=str, default=None, help="Git repository to read history from (default: current directory).")
    parser.add_argument("--config", type=Path, default=None, help="Optional JSON file with defaults for the options above.")
    parser.add_argument("--verbose", action="store_true", default=None, help="Print a run summary on stderr.")
    return parser


def _note(msg: str) -> None:
    print(f"Note: {msg}", file=sys.stderr)


def collect_contributors(config: AuthorsConfig) -> list[Contributor]:
    repo = Path(config.repo)
    exclude: set[str] = set()
    if config.exclude_commits:
        exclude = read_exclude_commits(Path(config.exclude_commits))

    roster: list[Contributor] = []
    if config.read_authors:
        roster = read_roster(Path(config.read_authors))

    identities = discover_identities(read_history(repo, exclude))
    contributors = reconcile(roster, identities)
    count_contributions(contributors, read_author_emails(repo, exclude))

    if config.verbose:
        _note(f"{len(roster)} roster entries, {len(exclude)} excluded commits")
        _note(f"{len(identities)} author emails in history, {len(contributors) - len(roster)} new contributors")
    return contributors


def run(config: AuthorsConfig) -> str:
    contributors = collect_contributors(config)
    shown = filter_contributors(contributors, min_commits=config.min, exclude_pattern=config.exclude_pattern)
    shown = sort_contributors(shown, by_geekrank=config.geekrank)
    if config.verbose:
        _note(f"{len(shown)} of {len(contributors)} contributors listed")
    if not (config.names or config.stats or config.authors):
        print("Warning: nothing to print; pass --names, --stats or --authors.", file=sys.stderr)
    return render_views(shown, names=config.names, stats=config.stats, authors=config.authors)


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    args = _build_parser().parse_args(argv)
    try:
        config = build_config(args, load_config(args.config))
        out = run(config)
    except (ConfigError, RosterError, ExcludeFileError, GitError) as e:
        raise SystemExit(f"git-authors: {e}") from e
    sys.stdout.write(out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
