"""Dashboard group endpoint."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Header, HTTPException, Query, Request

from statusboard.dashboard.pipeline import DashboardPipeline
from statusboard.dashboard.records import coerce_records


async def _check_api_key(request: Request, x_api_key: str = Header("")) -> None:
    # Open when auth.api_key is empty
    expected = request.app.state.config.auth.api_key
    if expected and x_api_key != expected:
        raise HTTPException(status_code=401, detail="Invalid or missing API key")


router = APIRouter(tags=["groups"], dependencies=[Depends(_check_api_key)])


@router.post("/groups")
async def build_groups(
    request: Request,
    payload: Any = Body(...),
    subdomain: Optional[str] = Query(None, description="PagerDuty subdomain for service links"),
) -> List[Dict[str, Any]]:
    """Group raw service records (a list, or a ``{"services": [...]}`` envelope)."""
    try:
        records = coerce_records(payload)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    try:
        pipeline = DashboardPipeline(request.app.state.config, subdomain=subdomain)
        groups = pipeline.run(records)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return [group.to_dict() for group in groups]
