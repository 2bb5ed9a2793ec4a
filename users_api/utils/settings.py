# users_api/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./mydb.sqlite")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8080))
REQUEST_TIMEOUT_SECONDS = float(os.getenv("REQUEST_TIMEOUT_SECONDS", 5))
TRANSPORT_TIMEOUT_SECONDS = float(os.getenv("TRANSPORT_TIMEOUT_SECONDS", 10))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
