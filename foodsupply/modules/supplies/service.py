import logging
from typing import Any, Dict, List, Optional

from pymongo.database import Database

from foodsupply.database.documents import object_id, serialize_document, serialize_documents
from foodsupply.modules.supplies.models import SUPPLIES_COLLECTION
from foodsupply.modules.supplies.schemas import SupplyUpdate

logger = logging.getLogger(__name__)


class SupplyService:
    def __init__(self, db: Database):
        self.collection = db[SUPPLIES_COLLECTION]

    def create_supply(self, supply_data: Dict[str, Any]) -> str:
        """Insert the submitted supply verbatim and return its id"""
        result = self.collection.insert_one(dict(supply_data))
        logger.debug("Inserted supply %s", result.inserted_id)
        return str(result.inserted_id)

    def list_supplies(self) -> List[Dict[str, Any]]:
        return serialize_documents(self.collection.find())

    def get_supply_by_id(self, supply_id: str) -> Optional[Dict[str, Any]]:
        """Get supply by ID, None when it does not exist"""
        return serialize_document(self.collection.find_one({"_id": object_id(supply_id)}))

    def update_supply(self, supply_id: str, supply_data: SupplyUpdate) -> Dict[str, int]:
        """Replace the five editable fields; other fields are left alone"""
        result = self.collection.update_one(
            {"_id": object_id(supply_id)},
            {"$set": supply_data.to_set_document()},
        )
        return {"matchedCount": result.matched_count, "modifiedCount": result.modified_count}

    def delete_supply(self, supply_id: str) -> Dict[str, Any]:
        result = self.collection.delete_one({"_id": object_id(supply_id)})
        return {"acknowledged": result.acknowledged, "deletedCount": result.deleted_count}
