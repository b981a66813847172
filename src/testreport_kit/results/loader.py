"""Read a finished result tree from a JSON or YAML document.

Each node is a mapping::

    name: Fixture
    status: Failed          # Passed | Failed | Skipped | Inconclusive
    label: Error            # optional
    site: SetUp             # Test | SetUp | TearDown | Parent
    message: ...
    stack_trace: ...
    start_time: 2024-05-01T10:00:00Z
    end_time: 2024-05-01T10:00:02Z
    duration: 2.0
    test_type: TestFixture  # suites only
    children: [...]

``is_suite`` defaults to true when ``children`` is non-empty or a ``test_type``
is given, so an empty fixture still loads as a suite.
"""
from __future__ import annotations

import json
import logging
import pathlib
from datetime import datetime
from typing import Any, List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .model import EPOCH, FailureSite, ResultNode, Status, TestStatus

log = logging.getLogger(__name__)

class ResultFileError(ValueError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason

class ResultDocument(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    full_name: Optional[str] = None
    is_suite: Optional[bool] = None
    status: str = Field(TestStatus.PASSED.value)
    label: Optional[str] = None
    site: FailureSite = FailureSite.TEST
    message: Optional[str] = None
    stack_trace: Optional[str] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    duration: float = 0.0
    test_type: Optional[str] = None
    children: List["ResultDocument"] = Field(default_factory=list)

    def to_node(self, parent: Optional[str] = None) -> ResultNode:
        full_name = self.full_name or (f"{parent}.{self.name}" if parent else self.name)
        is_suite = self.is_suite if self.is_suite is not None else bool(self.children) or self.test_type is not None
        start = self.start_time or EPOCH
        return ResultNode(
            name=self.name,
            full_name=full_name,
            status=_coerce_status(self.status, full_name),
            is_suite=is_suite,
            label=self.label,
            site=self.site,
            message=self.message,
            stack_trace=self.stack_trace,
            start_time=start,
            end_time=self.end_time or start,
            duration=self.duration,
            children=tuple(c.to_node(full_name) for c in self.children),
            test_type=self.test_type,
        )

def _coerce_status(value: str, full_name: str) -> Status:
    try:
        return TestStatus(value)
    except ValueError:
        log.warning("Unrecognized status %r on %s", value, full_name)
        return value

def parse_result_tree(data: Any, source: str = "<data>") -> ResultNode:
    if not isinstance(data, dict):
        raise ResultFileError(source, "expected a mapping at the top level")
    try:
        doc = ResultDocument.model_validate(data)
    except ValidationError as e:
        raise ResultFileError(source, str(e)) from e
    return doc.to_node()

def load_result_tree(path: str) -> ResultNode:
    p = pathlib.Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        raise ResultFileError(path, e.strerror or str(e)) from e
    try:
        data = json.loads(text) if p.suffix.lower() == ".json" else yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ResultFileError(path, f"cannot parse: {e}") from e
    root = parse_result_tree(data, path)
    log.debug("Loaded result tree %s from %s", root.full_name, path)
    return root
