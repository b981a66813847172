from .model import FailureSite, ResolvedStatus, ResultNode, TestStatus, resolve_status, status_name

__all__ = ["FailureSite", "ResolvedStatus", "ResultNode", "TestStatus", "resolve_status", "status_name"]
