from typing import Any

from httpx import Response
from pydantic import BaseModel, ConfigDict


class ResponseEnvelope(BaseModel):
    """Decoded response together with the raw ``httpx.Response``.

    ``body`` is the parsed JSON value when the response declared JSON and
    parsed cleanly, otherwise the response text.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    body: Any = None
    headers: dict[str, str]
    response: Response

    @property
    def status_code(self) -> int:
        return self.response.status_code
