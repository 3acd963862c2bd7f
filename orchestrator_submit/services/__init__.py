"""Service layer for the orchestrator submitter."""

from .orchestrator_service import WORK_ORDER_INITIATE_PATH, OrchestratorService

__all__ = ["OrchestratorService", "WORK_ORDER_INITIATE_PATH"]
