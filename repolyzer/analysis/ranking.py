"""Contributor ranking."""

from repolyzer.config import OTHERS_LABEL, TOP_CONTRIBUTORS


def top_contributors(
    contributors: dict[str, int], limit: int = TOP_CONTRIBUTORS
) -> list[tuple[str, int]]:
    """Rank contributors and fold the tail into an "Others" entry.

    Sorting is stable, so contributors with equal counts keep their
    insertion order.

    Args:
        contributors: Commit count per contributor
        limit: Number of contributors listed by name

    Returns:
        ``(name, commits)`` pairs, descending, followed by
        ``("Others", rest)`` when the excluded contributors have commits
    """
    ranked = sorted(contributors.items(), key=lambda item: item[1], reverse=True)
    top = ranked[:limit]

    others = sum(count for _, count in ranked[limit:])
    if others > 0:
        top.append((OTHERS_LABEL, others))

    return top
