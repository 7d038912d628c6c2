from fastapi import APIRouter, Body, Depends
from pymongo.database import Database
from typing import Any, Dict

from foodsupply.core.responses import Envelope, envelope
from foodsupply.database.mongo_client import get_database
from foodsupply.modules.volunteers.service import VolunteerService

router = APIRouter(prefix="/volunteers", tags=["volunteers"])


def get_volunteer_service(db: Database = Depends(get_database)) -> VolunteerService:
    return VolunteerService(db)


@router.post("", status_code=201, response_model=Envelope)
def create_volunteer(
    volunteer_data: Dict[str, Any] = Body(...),
    service: VolunteerService = Depends(get_volunteer_service)
):
    """Register a volunteer"""
    inserted_id = service.create_volunteer(volunteer_data)
    return envelope("Volunteer inserted successfully", {"insertedId": inserted_id})


@router.get("", response_model=Envelope)
def list_volunteers(service: VolunteerService = Depends(get_volunteer_service)):
    return envelope("Volunteers retrieved successfully", service.list_volunteers())
