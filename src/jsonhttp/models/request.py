from typing import Optional, Union

from pydantic import BaseModel, ConfigDict


class ResolvedRequest(BaseModel):
    """Transport-ready view of a request.

    ``path`` carries the pathname together with the merged, encoded query
    string. ``port`` is None when the URL uses the scheme's default port.
    """

    model_config = ConfigDict(frozen=True)

    method: str
    url: str
    protocol: str
    hostname: str
    port: Optional[int] = None
    path: str
    headers: dict[str, str]
    body: Optional[Union[str, bytes]] = None
