"""Shared driver for the edit distance engines.

Each concrete engine supplies two kernels that operate on a trimmed region
and a list of workspace rows: an unbounded rolling-row kernel and a banded
kernel used when a bound smaller than the trimmed length is in effect. The
driver in :class:`EditDistanceEngine` resolves null inputs, the identity
shortcut, length-difference pruning and affix trimming before dispatching
to one of them.
"""

from __future__ import annotations

from typing import Any, Callable, ClassVar, List, Optional, Sequence

from .similarity import (
    apply_threshold,
    to_distance_bound,
    to_similarity,
    validate_min_similarity,
)
from .trimming import (
    SENTINEL,
    normalize_bound,
    null_distance,
    null_similarity,
    prefix_suffix_prep,
    sequences_equal,
)
from .workspace import Workspace


UnboundedKernel = Callable[..., int]
BandedKernel = Callable[..., int]


class EditDistanceEngine:
    """Reusable engine that owns a growable :class:`Workspace`.

    Instances amortise buffer allocation across calls and are therefore not
    safe for concurrent use; use one instance per thread or the stateless
    module-level functions instead.
    """

    name: ClassVar[str] = ""
    workspace_rows: ClassVar[int] = 1
    unbounded_kernel: ClassVar[UnboundedKernel]
    banded_kernel: ClassVar[BandedKernel]

    def __init__(self, expected_max_length: int = 0) -> None:
        self.workspace = Workspace(self.workspace_rows, expected_max_length)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.workspace!r})"

    def distance(
        self,
        a: Optional[Sequence[Any]],
        b: Optional[Sequence[Any]],
        max_distance: Optional[float] = None,
    ) -> int:
        """Edit distance between ``a`` and ``b``, or ``-1`` if it exceeds ``max_distance``."""

        return self.compute_distance(a, b, max_distance, self.workspace)

    def similarity(
        self,
        a: Optional[Sequence[Any]],
        b: Optional[Sequence[Any]],
        min_similarity: Optional[float] = None,
    ) -> float:
        """Similarity in ``[0, 1]``, or ``-1`` if it is below ``min_similarity``."""

        return self.compute_similarity(a, b, min_similarity, self.workspace)

    @classmethod
    def new_workspace(cls) -> Workspace:
        return Workspace(cls.workspace_rows)

    @classmethod
    def compute_distance(
        cls,
        a: Optional[Sequence[Any]],
        b: Optional[Sequence[Any]],
        max_distance: Optional[float],
        workspace: Workspace,
    ) -> int:
        bound = normalize_bound(max_distance)
        if a is None or b is None:
            return null_distance(a, b, bound)
        if bound is not None and bound <= 0:
            return 0 if sequences_equal(a, b) else SENTINEL

        # keep the shorter sequence first so the inner loop runs the long way
        if len(a) > len(b):
            a, b = b, a
        if bound is not None and len(b) - len(a) > bound:
            return SENTINEL

        len1, len2, start = prefix_suffix_prep(a, b)
        if len1 == 0:
            return len2 if bound is None or len2 <= bound else SENTINEL

        rows: List[List[int]] = workspace.reserve(len2)
        if bound is not None and bound < len2:
            return cls.banded_kernel(a, b, len1, len2, start, bound, *rows)
        return cls.unbounded_kernel(a, b, len1, len2, start, *rows)

    @classmethod
    def compute_similarity(
        cls,
        a: Optional[Sequence[Any]],
        b: Optional[Sequence[Any]],
        min_similarity: Optional[float],
        workspace: Workspace,
    ) -> float:
        if min_similarity is not None:
            min_similarity = validate_min_similarity(min_similarity)
        if a is None or b is None:
            return null_similarity(a, b, min_similarity)

        length = max(len(a), len(b))
        if length == 0:
            return 1.0
        if min_similarity is None:
            return to_similarity(cls.compute_distance(a, b, None, workspace), length)

        bound = to_distance_bound(min_similarity, length)
        distance = cls.compute_distance(a, b, bound, workspace)
        return apply_threshold(to_similarity(distance, length), min_similarity)


__all__ = ["EditDistanceEngine"]
