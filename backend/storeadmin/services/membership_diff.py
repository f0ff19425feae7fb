"""
Membership diff for the product -> collections relationship.

Pure functions only; no storage access.
"""

from dataclasses import dataclass, field
from typing import Hashable, Iterable, List


@dataclass(frozen=True)
class MembershipDiff:
    """Collections to link and unlink. The two lists never overlap."""

    to_add: List[Hashable] = field(default_factory=list)
    to_remove: List[Hashable] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.to_add and not self.to_remove


def _ordered_difference(left: Iterable[Hashable], right: Iterable[Hashable]) -> List[Hashable]:
    """Items of ``left`` not in ``right``, in ``left`` order, without repeats."""
    exclude = set(right)
    result = []
    for item in left:
        if item in exclude:
            continue
        exclude.add(item)
        result.append(item)
    return result


def diff_memberships(current: Iterable[Hashable], desired: Iterable[Hashable]) -> MembershipDiff:
    """Compute ``desired - current`` and ``current - desired``.

    Output order follows the input order so repeated calls produce the same
    write sequence.
    """
    current = list(current)
    desired = list(desired)
    return MembershipDiff(
        to_add=_ordered_difference(desired, current),
        to_remove=_ordered_difference(current, desired),
    )
