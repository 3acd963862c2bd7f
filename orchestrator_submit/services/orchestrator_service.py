from typing import Any, Dict, Optional
import logging

import requests

from orchestrator_submit.adapters.http_client import RequestClient
from orchestrator_submit.configs import Config
from orchestrator_submit.models import LoggingPolicy, WorkOrder
from orchestrator_submit.models.work_order import DEFAULT_LOGIN, DEFAULT_PASSWORD

logger = logging.getLogger(__name__)

WORK_ORDER_INITIATE_PATH = "aspera/orchestrator/work_orders/initiate/xml"


class OrchestratorService:
    """High level operations against the orchestrator's work order API."""

    def __init__(self, client: RequestClient) -> None:
        self.client = client
        logger.debug("Connection Set: %s", client)

    @classmethod
    def from_config(cls, config: Config) -> "OrchestratorService":
        """Build a service with a fresh :class:`RequestClient` from ``config``."""
        client = RequestClient(
            host=config.host_address,
            port=config.host_port,
            use_tls=config.use_tls,
            timeout=config.timeout,
            logging_policy=LoggingPolicy(
                log_request_body=config.log_request_body,
                log_response_body=config.log_response_body,
                pretty_print_body=config.log_pretty_print_body,
            ),
        )
        return cls(client)

    def work_order_initiate(
        self,
        workflow_id: Any,
        external_parameters: Optional[Dict[str, Any]] = None,
        *,
        username: Optional[str] = None,
        password: Optional[str] = None,
        query: Optional[Dict[str, Any]] = None,
    ) -> requests.Response:
        """Start a run of ``workflow_id`` and return the server's raw response."""
        work_order = WorkOrder(
            workflow_id=workflow_id,
            external_parameters=external_parameters or {},
            login=DEFAULT_LOGIN if username is None else username,
            password=DEFAULT_PASSWORD if password is None else password,
            query=query or {},
        )
        logger.info(
            "Initiating work order for workflow %s with %d external parameter(s)",
            work_order.workflow_id,
            len(work_order.external_parameters),
        )
        return self.client.post(WORK_ORDER_INITIATE_PATH, work_order.to_form())

    def submit_file_path(
        self,
        file_path: str,
        workflow_id: Any,
        parameter_name: str,
        external_parameters: Optional[Dict[str, Any]] = None,
        **kwargs: Any,
    ) -> requests.Response:
        """Start a work order passing ``file_path`` as the ``parameter_name`` parameter."""
        params = dict(external_parameters or {})
        params[parameter_name] = file_path
        logger.debug("Submitting %s to workflow %s as %s", file_path, workflow_id, parameter_name)
        return self.work_order_initiate(workflow_id, params, **kwargs)


__all__ = ["OrchestratorService", "WORK_ORDER_INITIATE_PATH"]
