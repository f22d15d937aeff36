import os
from dotenv import load_dotenv


DEFAULT_API_URLS = {
    "development": "http://localhost:3000/api/v1",
    "preview": "https://rkroots-backend.railway.app/api/v1",
    "production": "https://rkroots-backend.railway.app/api/v1",
}


class Config:
    load_dotenv()

    DEBUG = os.getenv("DEBUG", "true").lower() == "true"

    # development | preview | production
    ENVIRONMENT = os.getenv("RKROOTS_ENV", "development").lower()
    API_URL = os.getenv("RKROOTS_API_URL") or DEFAULT_API_URLS.get(ENVIRONMENT, DEFAULT_API_URLS["production"])
    REQUEST_TIMEOUT = float(os.getenv("RKROOTS_REQUEST_TIMEOUT", "30"))

    # Almacen seguro de credenciales: "keyring" (sistema operativo) o "memory"
    CREDENTIAL_BACKEND = os.getenv("RKROOTS_CREDENTIAL_BACKEND", "keyring").lower()
    ACCESS_TOKEN_KEY = os.getenv("RKROOTS_ACCESS_TOKEN_KEY", "rkroots_auth")
    REFRESH_TOKEN_KEY = os.getenv("RKROOTS_REFRESH_TOKEN_KEY", "rkroots_refresh")
    KEYRING_USERNAME = os.getenv("RKROOTS_KEYRING_USERNAME", "rkroots")
