# backend/order_lookup_service/order_lookup/config.py

import os

APP_NAME = "order_lookup_service"  # Unique identifier for this service in metrics
SERVICE_NAME = os.getenv("SERVICE_NAME", "order-lookup-service")

# Levels understood by both logging and uvicorn
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
DEFAULT_LOG_LEVEL = "INFO"


def resolve_log_level(value):
    level = (value or "").strip().upper()
    return level if level in LOG_LEVELS else DEFAULT_LOG_LEVEL


LOG_LEVEL = resolve_log_level(os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL))

CORS_ALLOW_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
    if origin.strip()
]

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
