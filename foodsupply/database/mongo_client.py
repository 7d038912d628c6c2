from pymongo import MongoClient
from pymongo.database import Database
from foodsupply.config.settings import settings


class MongoConnection:
    _client: MongoClient = None

    @classmethod
    def get_client(cls) -> MongoClient:
        # pymongo connects lazily and pools sockets; one client serves every request
        if cls._client is None:
            cls._client = MongoClient(settings.mongodb_uri)
        return cls._client

    @classmethod
    def get_database(cls) -> Database:
        return cls.get_client()[settings.mongodb_database]

    @classmethod
    def close(cls):
        if cls._client is not None:
            cls._client.close()
        cls._client = None


def get_database() -> Database:
    return MongoConnection.get_database()
