from typing import Optional

from pydantic import BaseModel, Field


class ItemCreate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = Field(default=None, strict=True, allow_inf_nan=False)


class Item(BaseModel):
    id: int
    name: str
    description: str
    price: float


class ErrorResponse(BaseModel):
    error: str
    fields: Optional[dict[str, str]] = None


class HealthResponse(BaseModel):
    status: str
    version: str
    items: int
