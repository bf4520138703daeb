from __future__ import annotations
from typing import List
import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from supplier_api.core.db import transaction_scope
from supplier_api.core.errors import PersistenceError
from supplier_api.models import Supplier, SupplierAddress, SupplierContact, SupplierGroup
from supplier_api.schemas.supplier import SupplierCreate, SupplierSummary
from supplier_api.domain.constants import (
    STATUS_IN_PROGRESS,
    MSG_SUPPLIER_CREATE_FAILED,
    MSG_ADDRESS_SAVE_FAILED,
    MSG_CONTACT_SAVE_FAILED,
    MSG_GROUP_SAVE_FAILED,
    MSG_RETRIEVE_FAILED,
    MSG_PROCESS_FAILED,
)

logger = logging.getLogger(__name__)


def _insert(db: Session, row, message: str) -> None:
    """Satırı ekle ve hemen flush et; hata olursa sabit mesajla PersistenceError."""
    try:
        db.add(row)
        db.flush()
    except SQLAlchemyError as e:
        logger.exception("%s (%s)", message, type(row).__name__)
        raise PersistenceError(message) from e


def create_supplier(db: Session, payload: SupplierCreate) -> int:
    """
    Tedarikçi başlığını ve tüm adres/kişi/grup satırlarını tek transaction'da yazar.
    - Önce başlık (ID almak için flush)
    - Sonra girdi sırasıyla adresler, kişiler, gruplar
    - Herhangi bir adım patlarsa hiçbir satır kalmaz
    """
    with transaction_scope(db):
        supplier = Supplier(
            SupplierName=payload.supplier_name,
            NickName=payload.nick_name,
            Status=STATUS_IN_PROGRESS,
        )
        _insert(db, supplier, MSG_SUPPLIER_CREATE_FAILED)
        supplier_id = supplier.SupplierID

        for addr in payload.addresses:
            _insert(db, SupplierAddress(
                SupplierID=supplier_id,
                Name=addr.name,
                Address=addr.address,
                IsMain=addr.is_main,
            ), MSG_ADDRESS_SAVE_FAILED)

        for contact in payload.contacts:
            _insert(db, SupplierContact(
                SupplierID=supplier_id,
                Name=contact.name,
                JobPosition=contact.job_position,
                Email=contact.email,
                Phone=contact.phone,
                Mobile=contact.mobile,
                IsMain=contact.is_main,
            ), MSG_CONTACT_SAVE_FAILED)

        for group in payload.groups:
            _insert(db, SupplierGroup(
                SupplierID=supplier_id,
                GroupName=group.group_name,
                Value=group.value,
                IsActive=group.is_active,
            ), MSG_GROUP_SAVE_FAILED)

    logger.info(
        "supplier created (SupplierID=%s, addresses=%d, contacts=%d, groups=%d)",
        supplier_id, len(payload.addresses), len(payload.contacts), len(payload.groups),
    )
    return supplier_id


# ---- Listeleme servisi ----
def list_suppliers(db: Session) -> List[SupplierSummary]:
    try:
        rows = db.execute(
            select(Supplier).order_by(Supplier.SupplierID.asc())
        ).scalars().all()
    except SQLAlchemyError as e:
        logger.exception("list_suppliers query error")
        raise PersistenceError(MSG_RETRIEVE_FAILED) from e
    except (ValueError, TypeError) as e:
        # Sürücü/tip işlemcisi saklı değeri çeviremedi
        logger.exception("list_suppliers row decode error")
        raise PersistenceError(MSG_PROCESS_FAILED) from e

    try:
        return [
            SupplierSummary(
                id=s.SupplierID,
                name=s.SupplierName,
                nick_name=s.NickName,
                status=s.Status,
                created_at=s.CreatedAt,
            )
            for s in rows
        ]
    except (ValueError, TypeError) as e:
        logger.exception("list_suppliers row decode error")
        raise PersistenceError(MSG_PROCESS_FAILED) from e
