"""Tests for alert issuing."""

import logging

import pytest

from resilink.core.exceptions import PersistenceError


class TestIssue:
    @pytest.mark.asyncio
    async def test_issue_persists_and_audits(self, alert_service, store, caplog):
        with caplog.at_level(logging.INFO, logger="resilink.services.alerts"):
            alert = await alert_service.issue(
                "Risco de inundação na Zona Leste", "Perigo", "Zona Leste, SP", "APIKey_DEFES"
            )

        assert alert.id is not None
        assert alert.issued_at is not None
        assert alert.issuer_id == "APIKey_DEFES"
        assert "SIMULATED ALERT" in caplog.text

        latest = (await store.audit_logs.page(0, 1))[0]
        assert latest.event_type == "Alert Created"
        assert latest.details == f"ID: {alert.id}, Severity: Perigo"

    @pytest.mark.asyncio
    async def test_round_trip(self, alert_service):
        alert = await alert_service.issue("Onda de calor prevista", "Atenção", "Centro", "APIKey_DEFES")

        fetched = await alert_service.get_by_id(alert.id)
        assert fetched.message == "Onda de calor prevista"
        assert fetched.severity == "Atenção"
        assert fetched.area == "Centro"
        assert fetched.issued_at == alert.issued_at

    @pytest.mark.asyncio
    async def test_missing_alert(self, alert_service):
        assert await alert_service.get_by_id(5) is None

    @pytest.mark.asyncio
    async def test_list_newest_first(self, alert_service):
        first = await alert_service.issue("Primeiro alerta emitido", "Informativo", "Norte", "APIKey_DEFES")
        second = await alert_service.issue("Segundo alerta emitido", "Informativo", "Sul", "APIKey_DEFES")

        alerts = await alert_service.list()
        assert [a.id for a in alerts] == [second.id, first.id]


class TestReadFailures:
    @pytest.mark.asyncio
    async def test_failed_get_is_audited(self, alert_service, store, monkeypatch):
        async def failing_get(record_id):
            raise PersistenceError("connection reset", "alerts.get")

        monkeypatch.setattr(store.alerts, "get", failing_get)

        with pytest.raises(PersistenceError):
            await alert_service.get_by_id(3)

        latest = (await store.audit_logs.page(0, 1))[0]
        assert latest.event_type == "Database Error"
        assert "alert ID 3" in latest.details

    @pytest.mark.asyncio
    async def test_failed_list_is_audited(self, alert_service, store, monkeypatch):
        async def failing_list():
            raise PersistenceError("connection reset", "alerts.list")

        monkeypatch.setattr(store.alerts, "list", failing_list)

        with pytest.raises(PersistenceError):
            await alert_service.list()

        latest = (await store.audit_logs.page(0, 1))[0]
        assert latest.event_type == "Database Error"
        assert latest.actor_id == "System"
