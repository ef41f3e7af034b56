from pydantic import BaseModel, Field, model_validator
from typing import Optional

class PropertySearchCriteria(BaseModel):
    """
    Optional filters for a property search. A filter is active when its value is not None,
    so a minimum price of 0 still filters.
    """
    owner_id: Optional[int] = None
    city: Optional[str] = Field(None, description="Case-sensitive substring of the property's city.")
    minimum_price_per_night: Optional[float] = Field(None, ge=0, description="Lower price bound in major currency units.")
    maximum_price_per_night: Optional[float] = Field(None, ge=0, description="Upper price bound in major currency units.")
    minimum_rating: Optional[float] = Field(None, ge=0, le=5, description="Lower bound on the average review rating.")

    @model_validator(mode="after")
    def check_price_range(self):
        low, high = self.minimum_price_per_night, self.maximum_price_per_night
        if low is not None and high is not None and low > high:
            raise ValueError("minimum_price_per_night cannot be greater than maximum_price_per_night")
        return self

    class Config:
        extra = "forbid"
        json_schema_extra = {
            "example": {
                "owner_id": 850,
                "city": "Vancouver",
                "minimum_price_per_night": 50,
                "maximum_price_per_night": 250,
                "minimum_rating": 4
            }
        }
