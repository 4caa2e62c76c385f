from sqlalchemy import Boolean, Column, Float, Integer, String
from shared.config.database import Base

class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=True)
    brand = Column(String, nullable=True)
    price = Column(Float, nullable=False)
    category = Column(String, nullable=True)
    stock_quantity = Column(Integer, nullable=False, default=0)
    product_available = Column(Boolean, nullable=False, default=True)
