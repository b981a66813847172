from collections import Counter
from dataclasses import dataclass
from datetime import datetime
from typing import Iterator

from .results.model import ResolvedStatus, ResultNode, resolve_status

def _leaves(node: ResultNode) -> Iterator[ResultNode]:
    if node.has_children:
        for child in node.children:
            yield from _leaves(child)
    elif not node.is_suite:
        yield node

@dataclass(frozen=True)
class ResultSummary:
    """Counts and timing for a whole run. Only test cases are counted, never suites."""
    test_count: int
    pass_count: int
    failure_count: int
    error_count: int
    inconclusive_count: int
    skip_count: int
    ignore_count: int
    invalid_count: int
    other_count: int
    start_time: datetime
    end_time: datetime
    duration: float

    @property
    def run_count(self) -> int:
        return self.pass_count + self.failure_count + self.error_count + self.inconclusive_count

    @property
    def not_run_count(self) -> int:
        return self.skip_count + self.ignore_count + self.invalid_count

    @classmethod
    def from_result(cls, root: ResultNode) -> "ResultSummary":
        counts = Counter(resolve_status(leaf) for leaf in _leaves(root))
        return cls(
            test_count=sum(counts.values()),
            pass_count=counts[ResolvedStatus.PASSED],
            failure_count=counts[ResolvedStatus.FAILED],
            error_count=counts[ResolvedStatus.ERROR],
            inconclusive_count=counts[ResolvedStatus.INCONCLUSIVE],
            skip_count=counts[ResolvedStatus.SKIPPED],
            ignore_count=counts[ResolvedStatus.IGNORED],
            invalid_count=counts[ResolvedStatus.INVALID],
            other_count=counts[ResolvedStatus.OTHER],
            start_time=root.start_time,
            end_time=root.end_time,
            duration=root.duration,
        )
