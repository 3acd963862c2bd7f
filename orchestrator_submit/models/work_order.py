import json
from typing import Dict

from pydantic import BaseModel, Field, field_validator

DEFAULT_LOGIN = "admin"
DEFAULT_PASSWORD = "password"


class WorkOrder(BaseModel):
    """A single request to run a workflow with external parameters."""

    workflow_id: str
    external_parameters: Dict[str, str] = Field(default_factory=dict)
    login: str = DEFAULT_LOGIN
    password: str = DEFAULT_PASSWORD
    query: Dict[str, str] = Field(default_factory=dict)

    @field_validator("workflow_id", mode="before")
    @classmethod
    def _coerce_workflow_id(cls, value):
        return str(value)

    @field_validator("external_parameters", "query", mode="before")
    @classmethod
    def _stringify_values(cls, value):
        if value is None:
            return {}
        return {str(k): v if isinstance(v, str) else _to_text(v) for k, v in dict(value).items()}

    def to_form(self) -> Dict[str, str]:
        """Return the form fields posted to the work order endpoint.

        Values already present in ``query`` take precedence over the login
        and password defaults.
        """
        form: Dict[str, str] = dict(self.query)
        form.setdefault("login", self.login)
        form.setdefault("password", self.password)
        form["work_order[workflow_id]"] = self.workflow_id
        for key, value in self.external_parameters.items():
            form[f"external_parameters[{key}]"] = value
        return form


def _to_text(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        return json.dumps(value)
    return str(value)
