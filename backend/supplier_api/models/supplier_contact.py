from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, false
from sqlalchemy.orm import relationship
from ..core.db import Base

class SupplierContact(Base):
    __tablename__ = "supplier_contacts"

    ContactID   = Column("id", Integer, primary_key=True, autoincrement=True)
    SupplierID  = Column("supplier_id", Integer, ForeignKey("suppliers.id"), nullable=False, index=True)
    Name        = Column("name", String(255), nullable=False)
    JobPosition = Column("job_position", String(255), nullable=False)
    Email       = Column("email", String(255), nullable=False)
    Phone       = Column("phone", String(50), nullable=False)
    Mobile      = Column("mobile", String(50), nullable=False)
    IsMain      = Column("is_main", Boolean, nullable=False, server_default=false())

    supplier = relationship("Supplier", back_populates="contacts")
