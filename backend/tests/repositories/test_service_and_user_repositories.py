# backend/tests/repositories/test_service_and_user_repositories.py
from decimal import Decimal

from carwash.models.service import Service
from carwash.repositories.factory import RepositoryFactory


def test_service_repository_lists_active_by_price(db, test_service, inactive_service):
    cheap = Service(name="Express", slug="express", category="wash", price=Decimal("19.99"))
    db.add(cheap)
    db.commit()
    repo = RepositoryFactory.create_service_repository(db)

    assert [s.slug for s in repo.list_active()] == ["express", "premium-wash"]
    assert repo.get_by_slug("retired-detail").id == inactive_service.id
    assert repo.list_by_category("detailing") == []
    assert [s.id for s in repo.list_by_category("detailing", active_only=False)] == [
        inactive_service.id
    ]


def test_service_repository_get_by_id_includes_inactive(db, inactive_service):
    repo = RepositoryFactory.create_service_repository(db)

    assert repo.get_by_id(inactive_service.id).is_active is False
    assert repo.get_by_id("missing") is None
    assert repo.get_by_id(None) is None


def test_user_repository_lookups(db, test_customer):
    repo = RepositoryFactory.create_user_repository(db)

    assert repo.get_by_id(test_customer.id).email == "jane.customer@example.com"
    assert repo.get_by_email("  Jane.Customer@Example.com ").id == test_customer.id
    assert repo.get_by_id("missing") is None
    assert repo.exists(email="jane.customer@example.com") is True
    assert repo.count() == 1
    assert [u.id for u in repo.get_all()] == [test_customer.id]
