"""
Logs component - login history queries.
"""

from .component import run_list_logs
from .models import ListLogsInput, LogListOutput
from .ports import LogStorePort

__all__ = [
    "run_list_logs",
    "ListLogsInput",
    "LogListOutput",
    "LogStorePort",
]
