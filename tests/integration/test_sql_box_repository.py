"""Integration tests for SqlBoxRepository.

Runs against an in-memory SQLite database created per test.

Tests cover:
- add/find round trip with items in order
- Existence checks
- Primary key enforcement (IdentifierAlreadyRegistered), including a
  collision past the pre-check that must not discard other pending writes
- save: rename, add and remove items, reorder
- remove cascades to items
- Transaction boundaries through Database.get_session
"""

from unittest.mock import patch

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from boxkeeper.domain.entities.box import Box
from boxkeeper.domain.errors import IdentifierAlreadyRegistered
from boxkeeper.domain.value_objects.identifiers import MAX_IDENTIFIER, MIN_IDENTIFIER, BoxId, ItemId
from boxkeeper.infrastructure.persistence.database import Database
from boxkeeper.infrastructure.persistence.models import ItemModel
from boxkeeper.infrastructure.persistence.repositories import SqlBoxRepository


@pytest.fixture
def database():
    db = Database("sqlite:///:memory:")
    db.create_all()
    yield db
    db.close()


@pytest.fixture
def session(database):
    session = database.session_factory()
    yield session
    session.close()


@pytest.fixture
def repository(session) -> SqlBoxRepository:
    return SqlBoxRepository(session)


def make_box(box_id: int, *item_ids: int, title: str = "Box") -> Box:
    box = Box.provision(BoxId(box_id), title)
    for item_id in item_ids:
        box.add_item(ItemId(item_id), f"Item {item_id}")
    box.collect_events()
    return box


@pytest.mark.integration
class TestSqlBoxRepositoryAdd:
    """Test add() and reads."""

    def test_add_and_find_round_trip(self, repository):
        # Arrange
        box = make_box(1, 30, 10, 20, title="Inbox")

        # Act
        repository.add(box)
        found = repository.find_by_id(BoxId(1))

        # Assert
        assert found is not None
        assert found.title == "Inbox"
        assert [i.item_id for i in found.items] == [ItemId(30), ItemId(10), ItemId(20)]
        assert found.collect_events() == []

    def test_full_64_bit_range(self, repository):
        repository.add(make_box(MIN_IDENTIFIER, MAX_IDENTIFIER))

        assert repository.box_id_taken(BoxId(MIN_IDENTIFIER))
        assert repository.item_id_taken(ItemId(MAX_IDENTIFIER))

    def test_find_missing_returns_none(self, repository):
        assert repository.find_by_id(BoxId(404)) is None

    def test_taken_checks(self, repository):
        repository.add(make_box(1, 10))

        assert repository.box_id_taken(BoxId(1))
        assert not repository.box_id_taken(BoxId(10))
        assert repository.item_id_taken(ItemId(10))
        assert not repository.item_id_taken(ItemId(1))

    def test_duplicate_box_id_rejected(self, repository):
        repository.add(make_box(1))

        with pytest.raises(IdentifierAlreadyRegistered):
            repository.add(make_box(1))

    def test_duplicate_item_id_rejected(self, repository):
        repository.add(make_box(1, 10))

        with pytest.raises(IdentifierAlreadyRegistered):
            repository.add(make_box(2, 10))

    def test_key_violation_keeps_earlier_uncommitted_writes(self, repository, session):
        # Arrange
        repository.add(make_box(1))
        session.commit()
        session.expunge_all()
        repository.add(make_box(2, 20))

        # Act (another writer registered box 1 after our check)
        with patch.object(repository, "box_id_taken", return_value=False):
            with pytest.raises(IdentifierAlreadyRegistered) as exc_info:
                repository.add(make_box(1))

        # Assert
        assert isinstance(exc_info.value.__cause__, IntegrityError)
        assert repository.find_by_id(BoxId(2)) is not None
        session.commit()
        session.expunge_all()
        found = repository.find_by_id(BoxId(2))
        assert [i.item_id for i in found.items] == [ItemId(20)]

    def test_list_all(self, repository):
        repository.add(make_box(2))
        repository.add(make_box(1))

        assert {b.box_id for b in repository.list_all()} == {BoxId(1), BoxId(2)}


@pytest.mark.integration
class TestSqlBoxRepositorySave:
    """Test save()."""

    def test_save_syncs_title_and_items(self, repository):
        # Arrange
        repository.add(make_box(1, 10, 11))
        box = repository.find_by_id(BoxId(1))

        # Act
        box.change_title("Renamed")
        box.remove_item(ItemId(10))
        box.add_item(ItemId(12), "New")
        box.change_item_title(ItemId(11), "Kept")
        repository.save(box)
        found = repository.find_by_id(BoxId(1))

        # Assert
        assert found.title == "Renamed"
        assert [(i.item_id, i.title) for i in found.items] == [
            (ItemId(11), "Kept"),
            (ItemId(12), "New"),
        ]
        assert not repository.item_id_taken(ItemId(10))

    def test_save_unknown_box(self, repository):
        with pytest.raises(KeyError):
            repository.save(make_box(1))

    def test_save_new_item_with_taken_id(self, repository):
        repository.add(make_box(1, 10))
        repository.add(make_box(2))
        box = repository.find_by_id(BoxId(2))
        box.add_item(ItemId(10))

        with pytest.raises(IdentifierAlreadyRegistered):
            repository.save(box)

    def test_save_key_violation_rolls_back_only_that_write(self, repository, session):
        # Arrange
        repository.add(make_box(1, 10))
        session.commit()
        session.expunge_all()
        repository.add(make_box(2, title="Pending"))
        box = repository.find_by_id(BoxId(2))
        box.change_title("Renamed")
        box.add_item(ItemId(10))

        # Act
        with patch.object(repository, "item_id_taken", return_value=False):
            with pytest.raises(IdentifierAlreadyRegistered) as exc_info:
                repository.save(box)

        # Assert
        assert isinstance(exc_info.value.__cause__, IntegrityError)
        found = repository.find_by_id(BoxId(2))
        assert found.title == "Pending"
        assert found.items == []
        assert [i.item_id for i in repository.find_by_id(BoxId(1)).items] == [ItemId(10)]


@pytest.mark.integration
class TestSqlBoxRepositoryRemove:
    """Test remove()."""

    def test_remove_cascades_to_items(self, repository, session):
        repository.add(make_box(1, 10, 11))

        repository.remove(BoxId(1))

        assert repository.find_by_id(BoxId(1)) is None
        item_count = session.execute(select(func.count()).select_from(ItemModel)).scalar_one()
        assert item_count == 0

    def test_remove_missing(self, repository):
        with pytest.raises(KeyError):
            repository.remove(BoxId(1))


@pytest.mark.integration
class TestDatabaseSessions:
    """Test transaction boundaries."""

    def test_commit_visible_in_new_session(self, database):
        with database.get_session() as session:
            SqlBoxRepository(session).add(make_box(1, 10))

        with database.get_session() as session:
            assert SqlBoxRepository(session).box_id_taken(BoxId(1))

    def test_rollback_on_error(self, database):
        with pytest.raises(RuntimeError):
            with database.get_session() as session:
                SqlBoxRepository(session).add(make_box(1))
                raise RuntimeError("abort")

        with database.get_session() as session:
            assert not SqlBoxRepository(session).box_id_taken(BoxId(1))

    def test_check_connection(self, database):
        assert database.check_connection()
