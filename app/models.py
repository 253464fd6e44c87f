# app/models.py
from pydantic import BaseModel, ConfigDict
from typing import Any, Optional

# Stored values are echoed back untouched, whatever their type.

class Product(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int
    name: Optional[Any] = None
    category: Optional[Any] = None
    description: Optional[Any] = None
    price: Optional[Any] = None
    stock: Optional[Any] = None
    image: Optional[Any] = None

class DeleteConfirmation(BaseModel):
    message: str
