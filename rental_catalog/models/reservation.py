from sqlalchemy import Column, Date, ForeignKey, Integer
from rental_catalog.models import Base

class Reservation(Base):
    __tablename__ = "reservations"
    id = Column(Integer, primary_key=True)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    property_id = Column(Integer, ForeignKey("properties.id", ondelete="CASCADE"), nullable=False)
    guest_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
