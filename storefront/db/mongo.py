#db file
from pymongo import MongoClient
import certifi
from storefront.config import MONGODB_URI, DB_NAME, STATE_COLL

_client = None

def get_state_collection():
    global _client
    if _client is None:
        if not MONGODB_URI:
            raise RuntimeError("MONGODB_URI is not set")
        _client = MongoClient(
            MONGODB_URI,
            tls=True,
            tlsCAFile=certifi.where(),
            serverSelectionTimeoutMS=30000,
        )
    return _client[DB_NAME][STATE_COLL]
