from fastapi import APIRouter, Body, Depends
from pymongo.database import Database
from typing import Any, Dict

from foodsupply.core.responses import Envelope, envelope
from foodsupply.database.mongo_client import get_database
from foodsupply.modules.supplies.schemas import SupplyUpdate
from foodsupply.modules.supplies.service import SupplyService

router = APIRouter(prefix="/supplies", tags=["supplies"])


def get_supply_service(db: Database = Depends(get_database)) -> SupplyService:
    return SupplyService(db)


@router.post("", status_code=201, response_model=Envelope)
def create_supply(
    supply_data: Dict[str, Any] = Body(...),
    service: SupplyService = Depends(get_supply_service)
):
    """Create a supply from the submitted object"""
    inserted_id = service.create_supply(supply_data)
    return envelope("Supply inserted successfully", {"insertedId": inserted_id})


@router.get("", response_model=Envelope)
def list_supplies(service: SupplyService = Depends(get_supply_service)):
    return envelope("Supplies retrieved successfully", service.list_supplies())


@router.get("/{supply_id}", response_model=Envelope)
def get_supply(supply_id: str, service: SupplyService = Depends(get_supply_service)):
    """Get supply by ID; data is null when nothing matches"""
    return envelope("Supply retrieved successfully", service.get_supply_by_id(supply_id))


@router.patch("/{supply_id}", response_model=Envelope)
def update_supply(
    supply_id: str,
    supply_data: SupplyUpdate,
    service: SupplyService = Depends(get_supply_service)
):
    """Update the editable fields of a supply"""
    return envelope("Supply updated successfully", service.update_supply(supply_id, supply_data))


@router.delete("/{supply_id}", response_model=Envelope)
def delete_supply(supply_id: str, service: SupplyService = Depends(get_supply_service)):
    return envelope("Supply deleted successfully", service.delete_supply(supply_id))
