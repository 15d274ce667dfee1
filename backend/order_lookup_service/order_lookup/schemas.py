# backend/order_lookup_service/order_lookup/schemas.py

from typing import Optional

from pydantic import BaseModel, Field


class OrderRequest(BaseModel):
    id: str = Field(..., min_length=1, description="Opaque order identifier.")
    page: Optional[int] = Field(None, description="Page number; no bound applies when absent.")


class HealthResponse(BaseModel):
    status: str
    service: str


class MessageResponse(BaseModel):
    message: str
