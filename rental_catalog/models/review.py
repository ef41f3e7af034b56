from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, Text
from rental_catalog.models import Base

class PropertyReview(Base):
    __tablename__ = "property_reviews"
    __table_args__ = (CheckConstraint("rating BETWEEN 1 AND 5", name="rating_range"),)
    id = Column(Integer, primary_key=True)
    guest_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    property_id = Column(Integer, ForeignKey("properties.id", ondelete="CASCADE"), nullable=False)
    reservation_id = Column(Integer, ForeignKey("reservations.id", ondelete="CASCADE"), nullable=False)
    rating = Column(Integer, nullable=False)
    message = Column(Text)
