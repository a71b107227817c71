import os

from dotenv import load_dotenv

load_dotenv()

SHOP_API_URL: str = os.getenv("SHOP_API_URL", "http://localhost:5000")
SHOP_API_TIMEOUT: float = float(os.getenv("SHOP_API_TIMEOUT", "10"))

# "memory" keeps state in-process, "mongo" persists it in MONGODB_URI
STORE_BACKEND = os.getenv("STORE_BACKEND", "memory")
MONGODB_URI = os.getenv(
    "MONGODB_URI"
)
DB_NAME      = os.getenv("DB_NAME", "storefront")
STATE_COLL   = os.getenv("STATE_COLLECTION", "client_state")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

CURRENCY = os.getenv("CURRENCY", "INR")
