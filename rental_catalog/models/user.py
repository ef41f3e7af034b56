from sqlalchemy import Column, Integer, String
from rental_catalog.models import Base

class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True) # stored lower-cased
    password = Column(String(255), nullable=False) # credential hash
