# =============================================================================
# tests/test_record_service.py - Record Service Tests
# =============================================================================
# Uses a mocked Supabase query builder; no database calls.
# =============================================================================

import pytest

from app.exceptions import DatabaseError, RecordNotFoundError
from core.services import RecordService
from tests.conftest import make_query_mock


@pytest.fixture
def service():
    return RecordService("employees", "employee")


class TestListRecords:

    def test_pagination(self, service, mock_supabase, sample_employee):
        query = make_query_mock([sample_employee])
        mock_supabase.table.return_value = query

        records = service.list_records(limit=10, offset=20)

        assert records == [sample_employee]
        mock_supabase.table.assert_called_with("employees")
        query.order.assert_called_once_with("created_at", desc=True)
        query.range.assert_called_once_with(20, 29)

    def test_filters_skip_none(self, service, mock_supabase):
        query = make_query_mock([])
        mock_supabase.table.return_value = query

        service.list_records(filters={"department": "Sales", "position": None})

        query.eq.assert_called_once_with("department", "Sales")

    def test_backend_failure(self, service, mock_supabase):
        mock_supabase.table.return_value.execute.side_effect = RuntimeError("timeout")

        with pytest.raises(DatabaseError, match="timeout"):
            service.list_records()


class TestGetRecord:

    def test_found(self, service, mock_supabase, sample_employee):
        mock_supabase.table.return_value = make_query_mock([sample_employee])
        assert service.get_record(sample_employee["id"]) == sample_employee

    def test_not_found(self, service, mock_supabase):
        with pytest.raises(RecordNotFoundError) as exc_info:
            service.get_record("missing-id")

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "Employee not found: missing-id"


class TestWrites:

    def test_create(self, service, mock_supabase, sample_employee):
        query = make_query_mock([sample_employee])
        mock_supabase.table.return_value = query

        record = service.create_record({"full_name": "Nguyen Van An"})

        assert record == sample_employee
        query.insert.assert_called_once_with({"full_name": "Nguyen Van An"})

    def test_create_without_returned_row(self, service, mock_supabase):
        with pytest.raises(DatabaseError, match="returned no data"):
            service.create_record({"full_name": "Nguyen Van An"})

    def test_update(self, service, mock_supabase, sample_employee):
        query = make_query_mock([sample_employee])
        mock_supabase.table.return_value = query

        service.update_record("abc", {"position": "Lead"})

        query.update.assert_called_once_with({"position": "Lead"})
        query.eq.assert_called_once_with("id", "abc")

    def test_empty_update_returns_current(self, service, mock_supabase, sample_employee):
        query = make_query_mock([sample_employee])
        mock_supabase.table.return_value = query

        assert service.update_record("abc", {}) == sample_employee
        query.update.assert_not_called()

    def test_update_missing(self, service, mock_supabase):
        with pytest.raises(RecordNotFoundError):
            service.update_record("abc", {"position": "Lead"})

    def test_delete(self, service, mock_supabase, sample_employee):
        query = make_query_mock([sample_employee])
        mock_supabase.table.return_value = query

        service.delete_record("abc")

        query.delete.assert_called_once_with()

    def test_delete_missing(self, service, mock_supabase):
        with pytest.raises(RecordNotFoundError):
            service.delete_record("abc")
