"""Shorthand constructors for result trees.

``full_name`` is derived from ``parent`` (a dotted path) unless given, and a
suite without explicit timing spans its children. Naive times are taken as UTC.
"""
from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional

from .model import EPOCH, FailureSite, ResultNode, Status, TestStatus

def _join(parent: Optional[str], name: str) -> str:
    return f"{parent}.{name}" if parent else name

def _utc(value: datetime) -> datetime:
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value

def case(
    name: str,
    status: Status = TestStatus.PASSED,
    *,
    parent: Optional[str] = None,
    full_name: Optional[str] = None,
    label: Optional[str] = None,
    site: FailureSite = FailureSite.TEST,
    message: Optional[str] = None,
    stack_trace: Optional[str] = None,
    start_time: datetime = EPOCH,
    duration: float = 0.0,
) -> ResultNode:
    start_time = _utc(start_time)
    return ResultNode(
        name=name,
        full_name=full_name or _join(parent, name),
        status=status,
        label=label,
        site=site,
        message=message,
        stack_trace=stack_trace,
        start_time=start_time,
        end_time=start_time + timedelta(seconds=duration),
        duration=duration,
    )

def suite(
    name: str,
    children: Iterable[ResultNode] = (),
    status: Status = TestStatus.PASSED,
    *,
    parent: Optional[str] = None,
    full_name: Optional[str] = None,
    label: Optional[str] = None,
    site: FailureSite = FailureSite.TEST,
    message: Optional[str] = None,
    stack_trace: Optional[str] = None,
    test_type: str = "TestSuite",
    start_time: Optional[datetime] = None,
    end_time: Optional[datetime] = None,
    duration: Optional[float] = None,
) -> ResultNode:
    kids = tuple(children)
    start_time = _utc(start_time) if start_time is not None else min((_utc(c.start_time) for c in kids), default=EPOCH)
    end_time = _utc(end_time) if end_time is not None else max((_utc(c.end_time) for c in kids), default=start_time)
    if duration is None:
        duration = (end_time - start_time).total_seconds()
    return ResultNode(
        name=name,
        full_name=full_name or _join(parent, name),
        status=status,
        is_suite=True,
        label=label,
        site=site,
        message=message,
        stack_trace=stack_trace,
        start_time=start_time,
        end_time=end_time,
        duration=duration,
        children=kids,
        test_type=test_type,
    )
