from sqlalchemy import Column, DateTime, Integer, String, func
from sqlalchemy.orm import relationship
from ..core.db import Base

class Supplier(Base):
    __tablename__ = "suppliers"

    SupplierID   = Column("id", Integer, primary_key=True, autoincrement=True)
    # DB’de kolon adı "name", biz attr olarak SupplierName kullanıyoruz
    SupplierName = Column("name", String(255), nullable=False)
    NickName     = Column("nick_name", String(255), nullable=False, server_default="")
    Status       = Column("status", String(50), nullable=False)
    CreatedAt    = Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now())

    # Alt kayıtlar sadece tedarikçiyle birlikte oluşturulur
    addresses = relationship("SupplierAddress", back_populates="supplier", order_by="SupplierAddress.AddressID")
    contacts  = relationship("SupplierContact", back_populates="supplier", order_by="SupplierContact.ContactID")
    groups    = relationship("SupplierGroup",   back_populates="supplier", order_by="SupplierGroup.GroupID")
