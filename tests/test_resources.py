"""
Tests for community resource moderation.

Tests cover:
- Offers start pending and hidden
- Closed two-value moderation
- Availability follows moderation
"""

import pytest

from resilink.core.exceptions import InvalidArgumentError, PersistenceError


async def _offer(service, resource_type="Ponto de Recarga Celular"):
    return await service.offer(
        resource_type,
        "Tomadas livres na padaria",
        "Rua das Flores, 120",
        "(11) 99999-0000",
        actor_id="APIKey_CIDAD",
    )


class TestOffer:
    @pytest.mark.asyncio
    async def test_new_resource_is_pending_and_available(self, resource_service):
        resource = await _offer(resource_service)

        assert resource.id is not None
        assert resource.moderation_status == "Pendente"
        assert resource.available is True
        assert resource.created_at is not None
        assert resource.provider_id == "APIKey_CIDAD"

    @pytest.mark.asyncio
    async def test_offer_is_audited(self, resource_service, store):
        resource = await _offer(resource_service)

        latest = (await store.audit_logs.page(0, 1))[0]
        assert latest.event_type == "Resource Offered"
        assert latest.details == f"ID: {resource.id}, Type: Ponto de Recarga Celular"

    @pytest.mark.asyncio
    async def test_pending_resource_is_not_listed(self, resource_service):
        await _offer(resource_service)

        assert await resource_service.list_available() == []


class TestModerate:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("new_status", ["Pendente", "aprovado", "APROVADO", "", "Approved"])
    async def test_only_two_values_are_accepted(self, resource_service, new_status):
        resource = await _offer(resource_service)

        with pytest.raises(InvalidArgumentError):
            await resource_service.moderate(resource.id, new_status, "APIKey_ADMIN")

        fetched = await resource_service.get_by_id(resource.id)
        assert fetched.moderation_status == "Pendente"
        assert fetched.available is True

    @pytest.mark.asyncio
    async def test_approval_lists_the_resource(self, resource_service):
        resource = await _offer(resource_service)

        assert await resource_service.moderate(resource.id, "Aprovado", "APIKey_ADMIN") is True

        available = await resource_service.list_available()
        assert [r.id for r in available] == [resource.id]

    @pytest.mark.asyncio
    async def test_rejection_makes_unavailable(self, resource_service):
        resource = await _offer(resource_service)

        await resource_service.moderate(resource.id, "Rejeitado", "APIKey_ADMIN")

        fetched = await resource_service.get_by_id(resource.id)
        assert fetched.moderation_status == "Rejeitado"
        assert fetched.available is False
        assert await resource_service.list_available() == []

    @pytest.mark.asyncio
    async def test_approval_after_rejection_restores_availability(self, resource_service):
        resource = await _offer(resource_service)
        await resource_service.moderate(resource.id, "Rejeitado", "APIKey_ADMIN")

        await resource_service.moderate(resource.id, "Aprovado", "APIKey_ADMIN")

        fetched = await resource_service.get_by_id(resource.id)
        assert fetched.available is True

    @pytest.mark.asyncio
    async def test_listing_excludes_unapproved(self, resource_service):
        approved = await _offer(resource_service, "Abrigo Temporário")
        rejected = await _offer(resource_service, "Água Potável")
        await _offer(resource_service, "Gerador")
        await resource_service.moderate(approved.id, "Aprovado", "APIKey_ADMIN")
        await resource_service.moderate(rejected.id, "Rejeitado", "APIKey_ADMIN")

        available = await resource_service.list_available()
        assert [r.id for r in available] == [approved.id]
        assert all(r.moderation_status == "Aprovado" and r.available for r in available)

    @pytest.mark.asyncio
    async def test_listing_is_newest_first(self, resource_service):
        older = await _offer(resource_service)
        newer = await _offer(resource_service)
        for resource in (older, newer):
            await resource_service.moderate(resource.id, "Aprovado", "APIKey_ADMIN")

        available = await resource_service.list_available()
        assert [r.id for r in available] == [newer.id, older.id]

    @pytest.mark.asyncio
    async def test_moderation_is_audited(self, resource_service, store):
        resource = await _offer(resource_service)

        await resource_service.moderate(resource.id, "Aprovado", "APIKey_ADMIN")

        latest = (await store.audit_logs.page(0, 1))[0]
        assert latest.event_type == "Resource Moderated"
        assert latest.details == f"ID: {resource.id}, From: Pendente, To: Aprovado"
        assert latest.actor_id == "APIKey_ADMIN"

    @pytest.mark.asyncio
    async def test_missing_resource_returns_false(self, resource_service, store):
        assert await resource_service.moderate(77, "Aprovado", "APIKey_ADMIN") is False

        latest = (await store.audit_logs.page(0, 1))[0]
        assert latest.event_type == "Moderation Failed"
        assert latest.details == "Resource ID 77 not found."


class TestReadFailures:
    @pytest.mark.asyncio
    async def test_failed_get_is_audited(self, resource_service, store, monkeypatch):
        async def failing_get(record_id):
            raise PersistenceError("connection reset", "community_resources.get")

        monkeypatch.setattr(store.resources, "get", failing_get)

        with pytest.raises(PersistenceError):
            await resource_service.get_by_id(12)

        latest = (await store.audit_logs.page(0, 1))[0]
        assert latest.event_type == "Database Error"
        assert "resource ID 12" in latest.details

    @pytest.mark.asyncio
    async def test_failed_listing_is_audited(self, resource_service, store, monkeypatch):
        async def failing_list_available():
            raise PersistenceError("connection reset", "community_resources.list_available")

        monkeypatch.setattr(store.resources, "list_available", failing_list_available)

        with pytest.raises(PersistenceError):
            await resource_service.list_available()

        latest = (await store.audit_logs.page(0, 1))[0]
        assert latest.event_type == "Database Error"
        assert latest.actor_id == "System"
