import logging
from typing import Any, Dict, List

from pymongo.database import Database

from foodsupply.database.documents import serialize_documents
from foodsupply.modules.volunteers.models import VOLUNTEERS_COLLECTION

logger = logging.getLogger(__name__)


class VolunteerService:
    def __init__(self, db: Database):
        self.collection = db[VOLUNTEERS_COLLECTION]

    def create_volunteer(self, volunteer_data: Dict[str, Any]) -> str:
        result = self.collection.insert_one(dict(volunteer_data))
        logger.info("New volunteer %s", result.inserted_id)
        return str(result.inserted_id)

    def list_volunteers(self) -> List[Dict[str, Any]]:
        return serialize_documents(self.collection.find())
