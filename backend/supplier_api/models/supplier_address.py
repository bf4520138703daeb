from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Text, false
from sqlalchemy.orm import relationship
from ..core.db import Base

class SupplierAddress(Base):
    __tablename__ = "supplier_addresses"

    AddressID  = Column("id", Integer, primary_key=True, autoincrement=True)
    SupplierID = Column("supplier_id", Integer, ForeignKey("suppliers.id"), nullable=False, index=True)
    Name       = Column("name", String(255), nullable=False)
    Address    = Column("address", Text, nullable=False)
    IsMain     = Column("is_main", Boolean, nullable=False, server_default=false())  # tekil olması zorunlu değil

    supplier = relationship("Supplier", back_populates="addresses")
