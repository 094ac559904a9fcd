import pytest

from exceptions import EntityNotFoundError, InvalidArgumentError
from models import Address, User
from services.user_service import UserService


@pytest.fixture
def service(db_session):
    return UserService(db_session)


class TestShowRelatedEntities:
    def test_returns_profile_with_user(self, service, users):
        profile = service.show_related_entities(1)

        assert profile.id == 1
        assert profile.user.email == "alice@example.com"

    def test_logs_user_email(self, service, users, caplog):
        with caplog.at_level("INFO", logger="services.user_service"):
            service.show_related_entities(2)

        assert "User email: bob@example.com" in caplog.text

    def test_missing_profile_carries_id(self, service, users):
        with pytest.raises(EntityNotFoundError) as exc_info:
            service.show_related_entities(99)

        assert exc_info.value.entity == "Profile"
        assert exc_info.value.entity_id == 99
        assert "99" in exc_info.value.message

    @pytest.mark.parametrize("profile_id", [None, 0, -1, "1"])
    def test_invalid_id_rejected(self, service, profile_id):
        with pytest.raises(InvalidArgumentError):
            service.show_related_entities(profile_id)


class TestFetchAddress:
    def test_returns_address(self, service, users):
        address = service.fetch_address(11)

        assert address.city == "Shelbyville"
        assert address.user_id == 1

    def test_missing_address(self, service, users):
        with pytest.raises(EntityNotFoundError) as exc_info:
            service.fetch_address(12345)

        assert exc_info.value.entity == "Address"
        assert exc_info.value.entity_id == 12345


class TestDeleteRelated:
    def test_removes_first_address_and_persists(self, service, db_session, users):
        removed = service.delete_related(1)

        assert removed.id == 10
        db_session.expire_all()
        assert db_session.get(Address, 10) is None
        assert [a.id for a in db_session.get(User, 1).addresses] == [11]

    def test_user_without_addresses(self, service, users):
        assert service.delete_related(2) is None

    def test_missing_user(self, service, users):
        with pytest.raises(EntityNotFoundError) as exc_info:
            service.delete_related(7)

        assert exc_info.value.entity == "User"


class TestFetchUsers:
    def test_users_with_tags_and_addresses(self, service, users):
        result = service.fetch_users()

        assert [u.email for u in result] == ["alice@example.com", "bob@example.com"]
        assert sorted(t.name for t in result[0].tags) == ["early", "vip"]
        assert [a.id for a in result[0].addresses] == [10, 11]
        assert result[1].tags == []

    def test_empty(self, service):
        assert service.fetch_users() == []
