from datetime import date
from pydantic import BaseModel, Field
from typing import Optional

class PropertyCreate(BaseModel):
    owner_id: int
    title: str
    description: Optional[str] = None
    thumbnail_photo_url: str
    cover_photo_url: str
    cost_per_night: float = Field(..., ge=0, description="Nightly price in major currency units; stored in cents.")
    parking_spaces: int = Field(0, ge=0)
    number_of_bathrooms: int = Field(0, ge=0)
    number_of_bedrooms: int = Field(0, ge=0)
    country: str
    street: str
    city: str
    province: str
    post_code: str

class PropertyRecord(BaseModel):
    id: int
    owner_id: int
    title: str
    description: Optional[str] = None
    thumbnail_photo_url: Optional[str] = None
    cover_photo_url: Optional[str] = None
    cost_per_night: int # cents
    parking_spaces: int = 0
    number_of_bathrooms: int = 0
    number_of_bedrooms: int = 0
    country: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    post_code: Optional[str] = None
    active: bool = True
    average_rating: Optional[float] = None # None until the property has a review

class ReservedProperty(PropertyRecord):
    reservation_id: int
    start_date: date
    end_date: date
