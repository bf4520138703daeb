# supplier_api/routers/suppliers.py
import logging

from fastapi import APIRouter, Depends, Request, status
from pydantic import ValidationError
from sqlalchemy.orm import Session

from supplier_api.core.api import ok
from supplier_api.core.db import get_db
from supplier_api.core.errors import InputError
from supplier_api.domain.constants import MSG_INVALID_BODY, MSG_SUPPLIER_CREATED, MSG_SUPPLIERS_RETRIEVED
from supplier_api.schemas.supplier import SupplierCreate, SupplierCreated
from supplier_api.services.supplier_service import create_supplier, list_suppliers

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/suppliers", tags=["suppliers"])


async def decode_supplier_create(request: Request) -> SupplierCreate:
    """Ham gövdeyi Content-Type'a bakmadan JSON olarak çözer."""
    body = await request.body()
    try:
        return SupplierCreate.model_validate_json(body)
    except ValidationError as e:
        logger.warning("invalid request body on %s %s: %s", request.method, request.url.path, e.errors(include_url=False))
        raise InputError(MSG_INVALID_BODY) from e


# --- LIST ---
@router.get("")
def list_suppliers_ep(db: Session = Depends(get_db)):
    return ok(list_suppliers(db), MSG_SUPPLIERS_RETRIEVED)


@router.get("/", include_in_schema=False)
def list_suppliers_slash(db: Session = Depends(get_db)):
    return list_suppliers_ep(db)


# --- CREATE ---
@router.post("", status_code=status.HTTP_201_CREATED)
def create_supplier_ep(payload: SupplierCreate = Depends(decode_supplier_create), db: Session = Depends(get_db)):
    supplier_id = create_supplier(db, payload)
    return ok(SupplierCreated(supplier_id=supplier_id), MSG_SUPPLIER_CREATED, status_code=status.HTTP_201_CREATED)


@router.post("/", include_in_schema=False, status_code=status.HTTP_201_CREATED)
def create_supplier_slash(payload: SupplierCreate = Depends(decode_supplier_create), db: Session = Depends(get_db)):
    return create_supplier_ep(payload, db)
