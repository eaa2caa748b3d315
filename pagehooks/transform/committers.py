"""Derives the committer list of a resource from its commit history."""

from collections.abc import Iterable
from typing import Any

from pagehooks.models import Committer, Resource
from pagehooks.vcs.models import as_commit_records

from .pipeline import Transform


def extract_committers(commits: Iterable[Any] | None) -> list[Committer]:
    """Deduplicate commit authors by avatar URL, keeping first-seen order.

    Records without a platform account or without a git author are skipped.
    The display string of a committer comes from its first (newest) commit.
    """
    committers: list[Committer] = []
    seen: set[str | None] = set()
    for record in as_commit_records(commits):
        if record.author is None or record.commit is None or record.commit.author is None:
            continue
        avatar_url = record.author.avatar_url
        if avatar_url in seen:
            continue
        seen.add(avatar_url)
        signature = record.commit.author
        committers.append(
            Committer(
                avatar_url=avatar_url,
                display=f"{signature.name} | {signature.email}",
            )
        )
    return committers


class CommitterExtractor(Transform):
    def apply(self, resource: Resource) -> Resource:
        resource.committers = extract_committers(resource.metadata)
        return resource
