from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Tuple, Union

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

class TestStatus(str, Enum):
    __test__ = False

    PASSED = "Passed"
    FAILED = "Failed"
    SKIPPED = "Skipped"
    INCONCLUSIVE = "Inconclusive"

class FailureSite(str, Enum):
    TEST = "Test"
    SETUP = "SetUp"
    TEARDOWN = "TearDown"
    PARENT = "Parent"

class ResolvedStatus(str, Enum):
    """Counting bucket for a single result, finer grained than TestStatus."""
    PASSED = "Passed"
    FAILED = "Failed"
    ERROR = "Error"
    INCONCLUSIVE = "Inconclusive"
    SKIPPED = "Skipped"
    IGNORED = "Ignored"
    INVALID = "Invalid"
    OTHER = "Other"

# Result files may carry statuses we don't know about; those stay plain strings.
Status = Union[TestStatus, str]

@dataclass(frozen=True)
class ResultNode:
    """One node of a finished test run: a suite or a single test case."""
    name: str
    full_name: str
    status: Status
    is_suite: bool = False
    label: Optional[str] = None
    site: FailureSite = FailureSite.TEST
    message: Optional[str] = None
    stack_trace: Optional[str] = None
    start_time: datetime = EPOCH
    end_time: datetime = EPOCH
    duration: float = 0.0
    children: Tuple["ResultNode", ...] = field(default_factory=tuple)
    test_type: Optional[str] = None

    @property
    def has_children(self) -> bool:
        return len(self.children) > 0

def status_name(status: Status) -> str:
    return status.value if isinstance(status, TestStatus) else str(status)

def resolve_status(node: ResultNode) -> ResolvedStatus:
    status, label = node.status, node.label
    if status == TestStatus.PASSED:
        return ResolvedStatus.PASSED
    if status == TestStatus.FAILED:
        if label == "Invalid":
            return ResolvedStatus.INVALID
        if label == "Error" or node.site != FailureSite.TEST:
            return ResolvedStatus.ERROR
        return ResolvedStatus.FAILED
    if status == TestStatus.INCONCLUSIVE:
        return ResolvedStatus.INCONCLUSIVE
    if status == TestStatus.SKIPPED:
        if label == "Ignored":
            return ResolvedStatus.IGNORED
        if label == "Invalid":
            return ResolvedStatus.INVALID
        return ResolvedStatus.SKIPPED
    return ResolvedStatus.OTHER
