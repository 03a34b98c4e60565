"""Audit logging subsystem for crimelink.

Main Components
---------------
- AuditLogger: JSONL event logger
- logged_compare / logged_search / logged_detect: logging wrappers
  around the engine operations
"""

from crimelink.audit.helpers import generate_run_id, get_package_version
from crimelink.audit.logger import AuditLogger
from crimelink.audit.middleware import logged_compare, logged_detect, logged_search
from crimelink.audit.models import LogEvent

__all__ = [
    "AuditLogger",
    "LogEvent",
    "generate_run_id",
    "get_package_version",
    "logged_compare",
    "logged_search",
    "logged_detect",
]
