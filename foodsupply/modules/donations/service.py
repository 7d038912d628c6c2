from typing import Any, Dict, List

from pymongo.database import Database

from foodsupply.database.documents import serialize_documents
from foodsupply.modules.donations.models import DONATIONS_COLLECTION


class DonationService:
    def __init__(self, db: Database):
        self.collection = db[DONATIONS_COLLECTION]

    def create_donation(self, donation_data: Dict[str, Any]) -> str:
        result = self.collection.insert_one(dict(donation_data))
        return str(result.inserted_id)

    def list_donations(self) -> List[Dict[str, Any]]:
        return serialize_documents(self.collection.find())
