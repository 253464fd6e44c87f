from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Dict, Any, List, Mapping

# Request bodies are open: values are stored exactly as sent, unknown keys
# included. The named fields are typed only for the docs. Only keys the
# client actually sent are merged.

class ProductIn(BaseModel):
    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={
            "example": {
                "name": "Smartphone X",
                "category": "Phones",
                "description": "Powerful smartphone with a great camera",
                "price": 50000,
                "stock": 10,
                "image": "/images/phone.jpg",
            }
        },
    )

    name: Optional[Any] = Field(None, json_schema_extra={"type": "string"})
    category: Optional[Any] = Field(None, json_schema_extra={"type": "string"})
    description: Optional[Any] = Field(None, json_schema_extra={"type": "string"})
    price: Optional[Any] = Field(None, json_schema_extra={"type": "number"})
    stock: Optional[Any] = Field(None, json_schema_extra={"type": "integer"})
    image: Optional[Any] = Field(None, json_schema_extra={"type": "string"}, examples=["/images/phone.jpg"])

class ProductPatch(ProductIn):
    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={"example": {"price": 45000, "stock": 7}},
    )

def supplied_fields(payload: Optional[BaseModel]) -> Dict[str, Any]:
    """Keys present in the request body, extras included. No body means no keys."""
    if payload is None:
        return {}
    return payload.model_dump(exclude_unset=True)

def shallow_merge(record: Dict[str, Any], fields: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Overwrite the keys of `record` present in `fields`, in place.
    The `id` key is never touched.
    """
    for key, value in fields.items():
        if key == "id":
            continue
        record[key] = value
    return record

SEED_PRODUCTS: List[Dict[str, Any]] = [
    {
        "id": 1,
        "name": "Smartphone X",
        "category": "Phones",
        "description": "Powerful smartphone with a great camera",
        "price": 50000,
        "stock": 10,
        "image": "/images/phone.jpg",
    },
    {
        "id": 2,
        "name": "Laptop Pro",
        "category": "Computers",
        "description": "For work and gaming",
        "price": 120000,
        "stock": 5,
        "image": "/images/laptop.jpg",
    },
    {
        "id": 3,
        "name": "Headphones Air",
        "category": "Audio",
        "description": "Wireless headphones",
        "price": 15000,
        "stock": 20,
        "image": "/images/headphones.jpg",
    },
    {
        "id": 4,
        "name": "Smart Watch",
        "category": "Wearables",
        "description": "Fitness tracker",
        "price": 10000,
        "stock": 15,
        "image": "/images/watch.jpg",
    },
    {
        "id": 5,
        "name": "Camera 4K",
        "category": "Photo",
        "description": "Professional camera",
        "price": 80000,
        "stock": 3,
        "image": "/images/camera.jpg",
    },
    {
        "id": 6,
        "name": "Tablet Mini",
        "category": "Tablets",
        "description": "Compact tablet",
        "price": 30000,
        "stock": 8,
        "image": "/images/tablet.jpg",
    },
    {
        "id": 7,
        "name": "Monitor 27\"",
        "category": "Computers",
        "description": "IPS panel",
        "price": 25000,
        "stock": 12,
        "image": "/images/monitor.jpg",
    },
    {
        "id": 8,
        "name": "Keyboard Mech",
        "category": "Accessories",
        "description": "RGB backlight",
        "price": 8000,
        "stock": 25,
        "image": "/images/keyboard.jpg",
    },
    {
        "id": 9,
        "name": "Gaming Mouse",
        "category": "Accessories",
        "description": "High DPI",
        "price": 5000,
        "stock": 30,
        "image": "/images/mouse.jpg",
    },
    {
        "id": 10,
        "name": "Bass Speaker",
        "category": "Audio",
        "description": "Powerful sound",
        "price": 12000,
        "stock": 18,
        "image": "/images/speaker.jpg",
    },
]
