"""Upstream-authority multiplier for search scores."""


def dependency_boost(dependency_rank: int | None) -> float:
    """Return the score multiplier for a dependency rank.

    Rank 1 gets 1.1, larger ranks approach 1.0, no rank gets exactly 1.0.
    """
    if dependency_rank is None:
        return 1.0
    return 1.0 + 0.1 * (1.0 / dependency_rank)
