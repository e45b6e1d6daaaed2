"""HTTP API exposing duration parsing and formatting."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .duration import DurationString, construct, parse
from .errors import DurationError
from .units import UNITS


class NormalizeRequest(BaseModel):
    duration: DurationString


def _error_detail(exc: DurationError) -> Dict[str, str]:
    return {"kind": exc.kind, "message": str(exc)}


def _unit_table() -> List[Dict[str, Any]]:
    return [{"suffix": suffix, "nanoseconds": nanos} for suffix, nanos, _ in UNITS]


def create_app(logger: Optional[logging.Logger] = None) -> FastAPI:
    log = logger or logging.getLogger("durationstring")

    app = FastAPI(title="durationstring API")
    app.state.logger = log

    @app.get("/api/parse")
    async def api_parse(text: str = Query(...)) -> JSONResponse:
        try:
            value = parse(text)
        except DurationError as exc:
            log.warning(f"[parse] rejected {text!r}: {exc}")
            raise HTTPException(status_code=400, detail=_error_detail(exc))
        log.info(f"[parse] {text!r} -> {value}")
        return JSONResponse(
            {
                "input": text,
                "nanoseconds": value.nanoseconds,
                "seconds": value.total_seconds(),
                "canonical": str(value),
            }
        )

    @app.get("/api/format")
    async def api_format(nanoseconds: int = Query(...)) -> JSONResponse:
        try:
            value = construct(nanoseconds)
        except DurationError as exc:
            log.warning(f"[format] rejected {nanoseconds}: {exc}")
            raise HTTPException(status_code=400, detail=_error_detail(exc))
        except ValueError as exc:
            log.warning(f"[format] rejected {nanoseconds}: {exc}")
            raise HTTPException(
                status_code=400, detail={"kind": "value", "message": str(exc)}
            )
        log.info(f"[format] {nanoseconds} -> {value}")
        return JSONResponse({"nanoseconds": nanoseconds, "text": str(value)})

    @app.get("/api/units")
    async def api_units() -> JSONResponse:
        return JSONResponse(_unit_table())

    @app.post("/api/normalize")
    async def api_normalize(request: NormalizeRequest) -> JSONResponse:
        log.info(f"[normalize] {request.duration}")
        return JSONResponse(request.model_dump(mode="json"))

    return app
