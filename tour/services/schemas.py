"""Request and response models of the route service.

Missing request fields default to empty names and a zero cost, so
the service answers them with an error envelope. Responses use
camelCase aliases on the wire and drop unset fields, so serialize them
with ``to_wire()``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

STATUS_OK = "ok"
STATUS_ERROR = "error"


class AddRouteRequest(BaseModel):
    origin: str = ""
    destiny: str = ""
    cost: int = 0


class ShortestRouteRequest(BaseModel):
    origin: str = ""
    destiny: str = ""


class AddRouteOutput(BaseModel):
    pass


class ShortestRouteOutput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    shortest_route: List[str] = Field(alias="shortestRoute")
    cost: int


class _Response(BaseModel):
    status: str
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == STATUS_OK

    def to_wire(self) -> Dict[str, Any]:
        """Return the JSON-ready body of this response."""
        return self.model_dump(by_alias=True, exclude_none=True)


class AddRouteResponse(_Response):
    response: Optional[AddRouteOutput] = None


class ShortestRouteResponse(_Response):
    response: Optional[ShortestRouteOutput] = None
