"""Changelogger entry point.

Prints the changelog of a GitHub milestone. Usage:
changelogger OWNER/REPO [MILESTONE].
"""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

from changelogger.adapters import GitHubAdapter, IssueTrackerClient
from changelogger.classifier import classify_milestone
from changelogger.config import AppConfig, load_config
from changelogger.errors import ChangelogError, MissingArgumentError
from changelogger.logging import ChangeloggerLogging
from changelogger.renderer import render
from changelogger.selector import select_milestone

logger = logging.getLogger("changelogger")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI: repository, optional milestone title and options."""
    parser = argparse.ArgumentParser(
        prog="changelogger",
        description="Print the changelog of a GitHub milestone",
    )
    parser.add_argument(
        "repository",
        nargs="?",
        help="Target repository as owner/repo",
    )
    parser.add_argument(
        "milestone",
        nargs="?",
        help="Milestone title (default: most recently due milestone)",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("config.yaml"),
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override logging.level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser.parse_args(argv if argv is not None else sys.argv[1:])


def split_repository(repository: str | None) -> tuple[str, str]:
    """Split ``owner/repo`` into its two parts."""
    if not repository:
        raise MissingArgumentError("Repository name must be supplied as owner/repo")
    parts = repository.split("/")
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise MissingArgumentError(f"Repository must be given as owner/repo, got {repository!r}")
    return parts[0], parts[1]


def build_client(config: AppConfig) -> IssueTrackerClient:
    """Create the GitHub client once for this run."""
    return GitHubAdapter(
        token=config.require_github_token(),
        api_url=config.github.api_url,
        user_agent=config.github.user_agent,
        timeout=config.github.timeout,
    )


def generate_changelog(
    client: IssueTrackerClient,
    owner: str,
    repo_name: str,
    milestone_name: str | None = None,
    now: datetime | None = None,
) -> str:
    """Fetch, select, classify and render; returns the full changelog text."""
    milestones = client.fetch_milestones(owner, repo_name)
    milestone = select_milestone(milestones, milestone_name, now)
    logger.info("Rendering changelog for milestone %r", milestone.title)
    return render(milestone.title, classify_milestone(milestone))


def main(argv: list[str] | None = None) -> int:
    """Entry point: print the changelog, or log the error and return 1."""
    args = parse_args(argv)
    try:
        config = load_config(args.config)
        ChangeloggerLogging(config.logging, level=args.log_level).setup()
        owner, repo_name = split_repository(args.repository)
        client = build_client(config)
        try:
            text = generate_changelog(client, owner, repo_name, args.milestone)
        finally:
            client.close()
    except ChangelogError as e:
        if not logging.root.handlers:
            logging.basicConfig(level=logging.WARNING)
        logger.error("%s", e)
        return 1
    sys.stdout.write(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
