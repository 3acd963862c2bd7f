"""
Models module for the orchestrator submitter.

This module contains the connection settings and work order data structures.
"""

from .connection import BodyFormat, Connection, HttpMethod, LoggingPolicy
from .work_order import WorkOrder

__all__ = ["BodyFormat", "Connection", "HttpMethod", "LoggingPolicy", "WorkOrder"]
