"""Construção de payloads GHL a partir do corpo enviado pelo browser."""

from __future__ import annotations

import re
from typing import Any

DEFAULT_MESSAGE_TYPE = "SMS"
DEFAULT_APPOINTMENT_TITLE = "Insurance Appointment"
DEFAULT_APPOINTMENT_STATUS = "new"

_OPTIONAL_MESSAGE_FIELDS = ("subject", "html", "emailFrom", "attachments")
_NON_DIAL_CHARS = re.compile(r"[^+\d]")


def search_field(query: str) -> str:
    """Campo de busca de duplicados: email quando há '@', senão telefone."""
    return "email" if "@" in query else "phone"


def build_note(body: dict[str, Any]) -> dict[str, Any]:
    return {"body": body.get("body") or body.get("note"), "userId": body.get("userId")}


def build_message(body: dict[str, Any]) -> dict[str, Any]:
    """Mensagem SMS/Email/WhatsApp; campos opcionais só quando preenchidos."""
    payload: dict[str, Any] = {
        "type": body.get("type") or DEFAULT_MESSAGE_TYPE,
        "contactId": body.get("contactId"),
        "message": body.get("message"),
    }
    for name in _OPTIONAL_MESSAGE_FIELDS:
        if body.get(name):
            payload[name] = body[name]
    return payload


def build_appointment(body: dict[str, Any], location_id: str) -> dict[str, Any]:
    return {
        "locationId": location_id,
        "calendarId": body.get("calendarId"),
        "contactId": body.get("contactId"),
        "startTime": body.get("startTime"),
        "endTime": body.get("endTime"),
        "title": body.get("title") or DEFAULT_APPOINTMENT_TITLE,
        "appointmentStatus": body.get("appointmentStatus") or DEFAULT_APPOINTMENT_STATUS,
        "assignedUserId": body.get("assignedUserId") or body.get("closerId"),
        "notes": body.get("notes") or "",
    }


def build_call_log(contact_id: str, phone: str) -> dict[str, Any]:
    return {
        "type": "Call",
        "contactId": contact_id,
        "message": f"Outbound call initiated to {phone}",
    }


def tel_uri(phone: str) -> str:
    """URI tel: só com dígitos e '+'."""
    return f"tel:{_NON_DIAL_CHARS.sub('', phone)}"
