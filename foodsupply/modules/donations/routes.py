from fastapi import APIRouter, Body, Depends
from pymongo.database import Database
from typing import Any, Dict

from foodsupply.core.responses import Envelope, envelope
from foodsupply.database.mongo_client import get_database
from foodsupply.modules.donations.service import DonationService

router = APIRouter(prefix="/donations", tags=["donations"])


def get_donation_service(db: Database = Depends(get_database)) -> DonationService:
    return DonationService(db)


@router.post("", status_code=201, response_model=Envelope)
def create_donation(
    donation_data: Dict[str, Any] = Body(...),
    service: DonationService = Depends(get_donation_service)
):
    """Record a supply donation"""
    inserted_id = service.create_donation(donation_data)
    return envelope("Supply donation inserted successfully", {"insertedId": inserted_id})


@router.get("", response_model=Envelope)
def list_donations(service: DonationService = Depends(get_donation_service)):
    return envelope("Supplies donation retrieved successfully", service.list_donations())
