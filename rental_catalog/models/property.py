from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Text, true
from rental_catalog.models import Base

class Property(Base):
    __tablename__ = "properties"
    id = Column(Integer, primary_key=True)
    owner_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    title = Column(String(255), nullable=False)
    description = Column(Text)
    thumbnail_photo_url = Column(String(255), nullable=False)
    cover_photo_url = Column(String(255), nullable=False)
    cost_per_night = Column(Integer, nullable=False, server_default="0") # cents
    parking_spaces = Column(Integer, nullable=False, server_default="0")
    number_of_bathrooms = Column(Integer, nullable=False, server_default="0")
    number_of_bedrooms = Column(Integer, nullable=False, server_default="0")
    country = Column(String(255), nullable=False)
    street = Column(String(255), nullable=False)
    city = Column(String(255), nullable=False)
    province = Column(String(255), nullable=False)
    post_code = Column(String(255), nullable=False)
    active = Column(Boolean, nullable=False, server_default=true())
