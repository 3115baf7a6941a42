"""Action-dispatched JSON endpoints for reading and writing applications.

Served at both ``/`` and ``/exec``. Every response is JSON with status 200;
failures are reported in an ``error`` field.
"""

import json
import logging

from fastapi import APIRouter, Depends, Query, Request
from pydantic import ValidationError

from apptrack.models import ApplicationInput, StatusUpdate
from apptrack.store import ApplicationStore
from apptrack.web.deps import get_store

logger = logging.getLogger(__name__)

router = APIRouter()

UNKNOWN_ACTION = {"error": "Unknown action"}


def _applications(store: ApplicationStore, candidate: str | None = None) -> dict:
    records = store.list_applications(candidate)
    return {"applications": [r.model_dump(by_alias=True) for r in records]}


READ_ACTIONS = {
    "getCandidates": lambda store, candidate: {"candidates": store.list_candidates()},
    "getCompanies": lambda store, candidate: {"companies": store.list_companies()},
    "getJobTitles": lambda store, candidate: {"jobTitles": store.list_job_titles()},
    "getApplications": lambda store, candidate: _applications(store, candidate or None),
    "getAllApplications": lambda store, candidate: _applications(store),
}

SAVE_ACTIONS = {None, "", "saveApplication"}


@router.get("/")
@router.get("/exec")
async def exec_get(
    action: str | None = Query(None),
    candidate: str | None = Query(None),
    store: ApplicationStore = Depends(get_store),
):
    """Dispatch a read by its action name."""
    handler = READ_ACTIONS.get(action or "")
    if handler is None:
        logger.debug("Unknown read action: %r", action)
        return UNKNOWN_ACTION
    return handler(store, candidate)


@router.post("/")
@router.post("/exec")
async def exec_post(
    request: Request,
    action: str | None = Query(None),
    store: ApplicationStore = Depends(get_store),
):
    """Save a new application, or update a status with action=updateStatus."""
    if action not in SAVE_ACTIONS and action != "updateStatus":
        return UNKNOWN_ACTION

    try:
        payload = json.loads(await request.body())
        if not isinstance(payload, dict):
            raise ValueError("Payload must be a JSON object")

        if action == "updateStatus":
            update = StatusUpdate.model_validate(payload)
            result = store.update_status(update.candidate, update.company, update.job_title, update.status)
            return result.model_dump(exclude_none=True)

        data = ApplicationInput.model_validate(payload)
    except (ValueError, ValidationError) as e:
        logger.warning("Rejected %s payload: %s", action or "saveApplication", e)
        return {"error": str(e)}

    return store.save_application(data).model_dump()
