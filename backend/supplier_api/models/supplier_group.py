from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, false
from sqlalchemy.orm import relationship
from ..core.db import Base

class SupplierGroup(Base):
    __tablename__ = "supplier_groups"

    GroupID    = Column("id", Integer, primary_key=True, autoincrement=True)
    SupplierID = Column("supplier_id", Integer, ForeignKey("suppliers.id"), nullable=False, index=True)
    GroupName  = Column("group_name", String(255), nullable=False)
    Value      = Column("value", String(255), nullable=False)
    IsActive   = Column("is_active", Boolean, nullable=False, server_default=false())

    supplier = relationship("Supplier", back_populates="groups")
