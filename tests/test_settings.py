import pytest
from sqlalchemy.exc import IntegrityError

from app.features.settings.service import get_site_settings
from app.models.audit import AuditLog
from app.models.setting import SiteSettings


def test_defaults_created_on_first_read(db):
    row = get_site_settings(db)
    assert row.id == 1
    assert row.site_name == "Limpias Technologies"
    assert get_site_settings(db).id == 1
    assert db.query(SiteSettings).count() == 1


def test_single_row_is_enforced(db):
    get_site_settings(db)
    db.add(SiteSettings(id=2))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()


def test_super_admin_reads_and_updates(client, db, make_user, login):
    login(make_user("super_admin"))
    assert client.get("/api/settings").json()["maintenanceMode"] is False

    response = client.put("/api/settings", json={"siteName": "Limpias Solar", "maintenanceMode": True})
    assert response.status_code == 200
    body = response.json()
    assert body["siteName"] == "Limpias Solar"
    assert body["maintenanceMode"] is True
    assert body["enableShop"] is True
    assert db.query(AuditLog).filter(AuditLog.action == "UPDATE_SETTINGS").count() == 1


def test_settings_are_super_admin_only(client, make_user, login):
    assert client.get("/api/settings").status_code == 401
    login(make_user("sales_manager"))
    assert client.get("/api/settings").status_code == 403
    assert client.put("/api/settings", json={"siteName": "Hacked"}).status_code == 403


def test_public_settings_subset(client):
    body = client.get("/api/public-settings").json()
    assert body["siteName"] == "Limpias Technologies"
    assert "maintenanceMode" not in body
    assert "updatedAt" not in body
