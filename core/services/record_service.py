# =============================================================================
# core/services/record_service.py - Table-backed Record Operations
# =============================================================================
# One RecordService per table. Routers stay thin: they validate input and
# call these methods, which talk to Supabase and raise API errors.
# =============================================================================

import logging
from typing import Any
from uuid import UUID

from app.exceptions import ApiError, DatabaseError, RecordNotFoundError
from lib.supabase_client import SupabaseClient

logger = logging.getLogger(__name__)


class RecordService:
    """
    CRUD operations over a single Supabase table.

    Args:
        table: Table name
        resource: Singular name used in error messages ("employee")
    """

    def __init__(self, table: str, resource: str):
        self.table = table
        self.resource = resource

    def _query(self):
        return SupabaseClient.get_client().table(self.table)

    def list_records(
        self,
        limit: int = 50,
        offset: int = 0,
        filters: dict[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        """
        List records, newest first.

        Args:
            limit: Maximum number of rows
            offset: Rows to skip
            filters: Column equality filters (None values are ignored)
        """
        try:
            query = self._query().select("*")
            for column, value in (filters or {}).items():
                if value is not None:
                    query = query.eq(column, str(value))
            response = (
                query.order("created_at", desc=True)
                .range(offset, offset + limit - 1)
                .execute()
            )
            return response.data or []
        except ApiError:
            raise
        except Exception as e:
            logger.error(f"Failed to list {self.table}: {e}")
            raise DatabaseError(f"Failed to list {self.table}: {e}") from e

    def get_record(self, record_id: str | UUID) -> dict[str, Any]:
        """
        Fetch one record.

        Raises:
            RecordNotFoundError: If no row has this ID
        """
        try:
            response = (
                self._query()
                .select("*")
                .eq("id", str(record_id))
                .limit(1)
                .execute()
            )
        except ApiError:
            raise
        except Exception as e:
            logger.error(f"Failed to fetch {self.resource} {record_id}: {e}")
            raise DatabaseError(f"Failed to fetch {self.resource}: {e}") from e

        if not response.data:
            raise RecordNotFoundError(self.resource, str(record_id))
        return response.data[0]

    def create_record(self, data: dict[str, Any]) -> dict[str, Any]:
        """Insert a record and return the stored row."""
        try:
            response = self._query().insert(data).execute()
        except ApiError:
            raise
        except Exception as e:
            logger.error(f"Failed to create {self.resource}: {e}")
            raise DatabaseError(f"Failed to create {self.resource}: {e}") from e

        if not response.data:
            raise DatabaseError(f"Insert into {self.table} returned no data")

        record = response.data[0]
        logger.info(f"Created {self.resource}: {record.get('id')}")
        return record

    def update_record(self, record_id: str | UUID, data: dict[str, Any]) -> dict[str, Any]:
        """
        Update the given fields of a record.

        An empty update returns the current record unchanged.

        Raises:
            RecordNotFoundError: If no row has this ID
        """
        if not data:
            return self.get_record(record_id)

        try:
            response = (
                self._query()
                .update(data)
                .eq("id", str(record_id))
                .execute()
            )
        except ApiError:
            raise
        except Exception as e:
            logger.error(f"Failed to update {self.resource} {record_id}: {e}")
            raise DatabaseError(f"Failed to update {self.resource}: {e}") from e

        if not response.data:
            raise RecordNotFoundError(self.resource, str(record_id))
        return response.data[0]

    def delete_record(self, record_id: str | UUID) -> None:
        """
        Delete a record.

        Raises:
            RecordNotFoundError: If no row has this ID
        """
        try:
            response = (
                self._query()
                .delete()
                .eq("id", str(record_id))
                .execute()
            )
        except ApiError:
            raise
        except Exception as e:
            logger.error(f"Failed to delete {self.resource} {record_id}: {e}")
            raise DatabaseError(f"Failed to delete {self.resource}: {e}") from e

        if not response.data:
            raise RecordNotFoundError(self.resource, str(record_id))
        logger.info(f"Deleted {self.resource}: {record_id}")


employee_service = RecordService("employees", "employee")
assessment_service = RecordService("assessments", "assessment")
criterion_service = RecordService("criteria", "criterion")
