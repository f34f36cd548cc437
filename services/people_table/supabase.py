"""
Supabase client for the people table.

Talks to the table through Supabase's PostgREST API.
PostgREST Documentation: https://postgrest.org/en/stable/references/api.html

Authentication: the project key is sent both as the ``apikey`` header and
as a Bearer token.

Endpoints used:
- GET    /rest/v1/{table}?select=*&order=created_at.desc - List rows
- POST   /rest/v1/{table}                                - Insert a row
- DELETE /rest/v1/{table}?id=eq.{id}                     - Delete by id
"""

import logging
from typing import Any, Optional

import httpx

from config.settings import get_settings
from services.people_table.base import PeopleTable, QueryResult

logger = logging.getLogger(__name__)


class SupabaseRestTable(PeopleTable):
    """PostgREST client for the people table."""

    def __init__(
        self,
        url: Optional[str] = None,
        key: Optional[str] = None,
        table: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.settings = get_settings()
        self.url = (url if url is not None else self.settings.supabase_url).rstrip("/")
        self.key = key if key is not None else self.settings.supabase_key
        self.table = table or self.settings.people_table
        self._transport = transport

    @property
    def backend_name(self) -> str:
        return "supabase"

    @property
    def table_url(self) -> str:
        return f"{self.url}/rest/v1/{self.table}"

    def is_configured(self) -> bool:
        """Check if the Supabase URL and key are configured."""
        return bool(self.url and self.key)

    def _headers(self, prefer: Optional[str] = None) -> dict[str, str]:
        headers = {
            "apikey": self.key,
            "Authorization": f"Bearer {self.key}",
            "Accept": "application/json",
        }
        if prefer:
            headers["Prefer"] = prefer
        return headers

    def _request(
        self,
        operation: str,
        method: str,
        params: Optional[dict[str, Any]] = None,
        json: Any = None,
        prefer: Optional[str] = None,
    ) -> QueryResult:
        """
        Send one request and convert the outcome into a QueryResult.

        Remote failures never raise; they come back as an unsuccessful
        result carrying the PostgREST message and details.
        """
        if not self.is_configured():
            error = "Supabase credentials not configured"
            logger.debug(f"{operation} skipped: {error}")
            return QueryResult(success=False, error=error)

        try:
            with httpx.Client(transport=self._transport) as client:
                response = client.request(
                    method,
                    self.table_url,
                    headers=self._headers(prefer),
                    params=params,
                    json=json,
                )
                response.raise_for_status()

            rows = response.json() if response.content else []
            return QueryResult(success=True, rows=rows, count=len(rows))

        except httpx.HTTPStatusError as e:
            error, details = _parse_error(e.response)
            logger.debug(f"Supabase {operation} failed: {e.response.status_code} - {error} {details or ''}")
            return QueryResult(success=False, error=error, details=details)
        except httpx.ConnectError:
            error = "Could not connect to Supabase. Check your network connection."
            logger.debug(f"Supabase {operation} failed: {error}")
            return QueryResult(success=False, error=error)
        except httpx.TimeoutException:
            error = "Supabase request timed out. Please try again."
            logger.debug(f"Supabase {operation} failed: {error}")
            return QueryResult(success=False, error=error)
        except httpx.HTTPError as e:
            error = f"Supabase request error: {e}"
            logger.debug(f"Supabase {operation} failed: {error}")
            return QueryResult(success=False, error=error)
        except ValueError as e:
            error = f"Invalid response from Supabase: {e}"
            logger.debug(f"Supabase {operation} failed: {error}")
            return QueryResult(success=False, error=error)

    def select_all(self) -> QueryResult:
        return self._request(
            "select",
            "GET",
            params={"select": "*", "order": "created_at.desc,id.desc"},
        )

    def insert(self, name: str, favorite_color: str) -> QueryResult:
        return self._request(
            "insert",
            "POST",
            json=[{"name": name, "favorite_color": favorite_color}],
            prefer="return=representation",
        )

    def delete_by_id(self, person_id: int) -> QueryResult:
        return self._request(
            "delete",
            "DELETE",
            params={"id": f"eq.{person_id}"},
            prefer="return=representation",
        )


def _parse_error(response: httpx.Response) -> tuple[str, Optional[str]]:
    """Extract (message, details) from a PostgREST error body."""
    try:
        body = response.json()
    except ValueError:
        body = None

    if not isinstance(body, dict):
        return f"Supabase API error (HTTP {response.status_code})", response.text or None

    message = body.get("message") or f"Supabase API error (HTTP {response.status_code})"
    parts = []
    if body.get("details"):
        parts.append(str(body["details"]))
    if body.get("hint"):
        parts.append(f"hint: {body['hint']}")
    if body.get("code"):
        parts.append(f"code: {body['code']}")
    return message, "; ".join(parts) or None
