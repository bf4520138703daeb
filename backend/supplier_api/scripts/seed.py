from contextlib import contextmanager

from sqlalchemy import select

from supplier_api.core.config import Settings
from supplier_api.core.db import Storage
from supplier_api.core.migrations import run_migrations
from supplier_api.main import configure_logging
from supplier_api.models import Supplier
from supplier_api.schemas.supplier import SupplierCreate
from supplier_api.services.supplier_service import create_supplier

# ---------- küçük yardımcılar ----------

@contextmanager
def session_scope(storage: Storage):
    """Tek seferlik session aç/kapat; commit'i servis yapar."""
    db = storage.session()
    try:
        yield db
    finally:
        db.close()

def get_one(db, model, **by):
    """Tekil alanlara göre satır getir (yoksa None)."""
    return db.execute(select(model).filter_by(**by)).scalars().first()

# ---------- tohum veriler (idempotent) ----------

SUPPLIERS = [
    {
        "supplier_name": "Tedarik AŞ",
        "nick_name": "tedarik",
        "addresses": [
            {"name": "Merkez", "address": "Levent Mah. No:1 İstanbul", "is_main": True},
            {"name": "Depo", "address": "Tuzla OSB 4. Cad. İstanbul", "is_main": False},
        ],
        "contacts": [
            {"name": "Ayşe Yılmaz", "job_position": "Satış Müdürü", "email": "satis@tedarik.com",
             "phone": "0212 000 00 00", "mobile": "0532 000 00 00", "is_main": True},
        ],
        "groups": [
            {"group_name": "category", "value": "bearings", "is_active": True},
        ],
    },
    {
        "supplier_name": "Kayış Ltd",
        "nick_name": "kayis",
        "addresses": [],
        "contacts": [],
        "groups": [
            {"group_name": "category", "value": "belts", "is_active": True},
            {"group_name": "region", "value": "marmara", "is_active": False},
        ],
    },
]

def run(storage: Storage) -> list:
    """Eksik tedarikçileri oluşturur; oluşturulan ID'leri döner."""
    created = []
    for data in SUPPLIERS:
        with session_scope(storage) as db:
            exists = get_one(db, Supplier, SupplierName=data["supplier_name"]) is not None
        if exists:
            print(f">> skip: {data['supplier_name']}")
            continue
        # create_supplier kendi transaction'ını açar, temiz session gerekir
        with session_scope(storage) as db:
            supplier_id = create_supplier(db, SupplierCreate.model_validate(data))
            print(f">> created: {data['supplier_name']} (id={supplier_id})")
            created.append(supplier_id)
    return created

def main():
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    storage = Storage(settings.database_url, statement_timeout_ms=settings.statement_timeout_ms)
    try:
        if settings.run_migrations:
            run_migrations(storage)
        run(storage)
    finally:
        storage.dispose()
    print("Seed tamam.")

if __name__ == "__main__":
    main()
