"""
Test fixtures - geçici SQLite dosyası + migration'ı çalışmış uygulama
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import func, select

from supplier_api.core.config import Settings
from supplier_api.main import create_app


@pytest.fixture()
def settings(tmp_path):
    return Settings(database_url=f"sqlite:///{tmp_path / 'suppliers.db'}", log_level="DEBUG")


@pytest.fixture()
def app(settings):
    return create_app(settings)


@pytest.fixture()
def client(app):
    # with bloğu lifespan'i (migration + ping) çalıştırır
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def storage(client):
    return client.app.state.storage


@pytest.fixture()
def count_rows(storage):
    """Doğrudan veritabanından satır sayar (okuma ucu alt kayıtları döndürmez)."""

    def _count(model, supplier_id=None):
        q = select(func.count()).select_from(model)
        if supplier_id is not None:
            q = q.where(model.SupplierID == supplier_id)
        with storage.session() as db:
            return db.execute(q).scalar_one()

    return _count


@pytest.fixture()
def make_payload():
    def _make(**overrides):
        data = {
            "supplier_name": "Tedarik AŞ",
            "nick_name": "tedarik",
            "addresses": [],
            "contacts": [],
            "groups": [],
        }
        data.update(overrides)
        return data

    return _make
