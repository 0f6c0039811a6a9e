"""Rotas GHL de agenda: calendários e eventos."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Response

from api.connectors.ghl import build_appointment, path_segment
from api.routes.dependencies import get_services, read_json_object, reply_response
from app.bootstrap import RelayServices

router = APIRouter()


@router.get("/calendars")
async def list_calendars(services: RelayServices = Depends(get_services)) -> Response:
    ghl = services.ghl
    return reply_response(
        await ghl.request("GET", "/calendars/", params={"locationId": ghl.location_id})
    )


@router.get("/calendars/events")
async def list_events(
    calendarId: str | None = None,  # noqa: N803
    startTime: str | None = None,  # noqa: N803
    endTime: str | None = None,  # noqa: N803
    services: RelayServices = Depends(get_services),
) -> Response:
    """Eventos da location, filtrados pelos parâmetros informados."""
    ghl = services.ghl
    params = {
        "locationId": ghl.location_id,
        "calendarId": calendarId or None,
        "startTime": startTime or None,
        "endTime": endTime or None,
    }
    return reply_response(await ghl.request("GET", "/calendars/events", params=params))


@router.post("/calendars/events")
async def create_event(
    body: dict[str, Any] = Depends(read_json_object),
    services: RelayServices = Depends(get_services),
) -> Response:
    ghl = services.ghl
    payload = build_appointment(body, ghl.location_id)
    return reply_response(await ghl.request("POST", "/calendars/events", payload))


@router.delete("/calendars/events/{event_id}")
async def delete_event(
    event_id: str,
    services: RelayServices = Depends(get_services),
) -> Response:
    return reply_response(
        await services.ghl.request("DELETE", f"/calendars/events/{path_segment(event_id)}")
    )
