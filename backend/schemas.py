from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Optional


class Delivery(BaseModel):
    """
    Delivery as carried on the wire.

    Only ``id`` is declared; any other field the client sends is accepted and
    returned as-is.
    """
    id: Optional[str] = None

    model_config = ConfigDict(extra="allow")

    def attributes(self) -> Dict[str, Any]:
        """Every field except the identifier."""
        return dict(self.model_extra or {})

    @classmethod
    def from_attributes_dict(cls, id: str, attributes: Dict[str, Any]) -> "Delivery":
        data = dict(attributes)
        data.pop('id', None)
        return cls(id=id, **data)


class BadRequestProblem(BaseModel):
    """Problem body returned with a 400 bad-request alert"""
    type: str
    title: str
    status: int
    message: str
    entity_name: str = Field(alias="entityName")
    error_key: str = Field(alias="errorKey")
    params: str

    model_config = ConfigDict(populate_by_name=True)


class HealthStatus(BaseModel):
    status: str
    service: str
    version: str
