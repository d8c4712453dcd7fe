"""HTTP wrapper around the blank network router.

The endpoints expose request building so that other services can inspect the
configured endpoints without linking against this package.  Endpoints are
loaded from ``config/network.yaml`` when the file exists.
"""

from typing import Dict, Optional

from fastapi import FastAPI, HTTPException, Response
from pydantic import BaseModel

from apps.network import ConfigStore, Router, YamlConfigBehavior
from lib.contracts.endpoint import EndpointDescriptor
from lib.contracts.errors import NetworkError, NotFound
from lib.telemetry.logger import configure_logging


configure_logging()
store = ConfigStore(YamlConfigBehavior())
router = Router(config=store)
app = FastAPI()


class BuildRequest(BaseModel):
    """Incoming payload for the request builder."""

    url: Optional[str] = None
    key: Optional[str] = None


class BuiltRequest(BaseModel):
    url: str
    headers: Dict[str, str]


def _raise(error: NetworkError) -> None:
    status = 404 if isinstance(error, NotFound) else 400
    raise HTTPException(status_code=status, detail={"code": error.code, "reason": error.reason})


@app.post("/requests", response_model=BuiltRequest)
async def build_request(req: BuildRequest):
    """Return the URL and headers the router would send.

    Without ``url`` the URL is composed from the stored endpoint.
    """

    if req.url is None:
        result = router.url_request(req.key)
    else:
        result = router.build_request(req.url, req.key)
    if not result.ok:
        _raise(result.error)
    return BuiltRequest(url=result.value.url, headers=dict(result.value.headers))


@app.get("/endpoints/{key}", response_model=EndpointDescriptor)
async def get_endpoint(key: str):
    result = store.lookup(key)
    if not result.ok:
        _raise(result.error)
    return result.value


@app.put("/endpoints/{key}", status_code=204)
async def put_endpoint(key: str, descriptor: EndpointDescriptor):
    """Register or replace the endpoint stored under ``key``."""

    result = store.set_endpoint(descriptor, key)
    if not result.ok:
        _raise(result.error)
    return Response(status_code=204)
