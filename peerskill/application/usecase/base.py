"""Base models shared by use cases."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Request/response model exposed over HTTP.

    Fields are camelCase on the wire and snake_case in Python; input is
    accepted in either form.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StatusResponse(ApiModel):
    """Acknowledgement for commands with nothing else to return."""

    status: str = "ok"


def strip_required(value: str, message: str) -> str:
    """Strip surrounding whitespace; blank values fail validation."""
    value = value.strip()
    if not value:
        raise ValueError(message)
    return value
