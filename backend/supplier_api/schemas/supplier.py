# supplier_api/schemas/supplier.py
from datetime import datetime
from typing import List

from pydantic import BaseModel, Field, StrictBool, StrictStr, model_validator

# Eksik ya da null alanlar sıfır değerle gelir ("" / False / []); tip uyuşmazlığı 400 döner.

class _ZeroDefaults(BaseModel):
    @model_validator(mode="before")
    @classmethod
    def _null_as_zero(cls, data):
        # null gövde / null eleman -> boş nesne; null alan -> varsayılan
        if data is None:
            return {}
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

class AddressIn(_ZeroDefaults):
    name: StrictStr = ""
    address: StrictStr = ""
    is_main: StrictBool = False

class ContactIn(_ZeroDefaults):
    name: StrictStr = ""
    job_position: StrictStr = ""
    email: StrictStr = ""
    phone: StrictStr = ""
    mobile: StrictStr = ""
    is_main: StrictBool = False

class GroupIn(_ZeroDefaults):
    group_name: StrictStr = ""
    value: StrictStr = ""
    is_active: StrictBool = False

class SupplierCreate(_ZeroDefaults):
    supplier_name: StrictStr = ""
    nick_name: StrictStr = ""
    addresses: List[AddressIn] = Field(default_factory=list)
    contacts: List[ContactIn] = Field(default_factory=list)
    groups: List[GroupIn] = Field(default_factory=list)

class SupplierCreated(BaseModel):
    supplier_id: int

class SupplierSummary(BaseModel):
    id: int
    name: str
    nick_name: str
    status: str
    created_at: datetime
