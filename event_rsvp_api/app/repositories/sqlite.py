"""
SQLite-backed repositories.

Every method opens its own connection through ``core.db.get_cursor``,
which commits on success and always closes the connection.  Dates and
timestamps are stored as ISO-8601 text so that lexical order equals
chronological order.
"""

from __future__ import annotations

import sqlite3
from datetime import date, datetime

from ..core.db import get_cursor
from ..core.exceptions import ConflictError
from ..schemas.admin import AdminAccount, SessionInfo
from ..schemas.event import Event
from ..schemas.participation import Participation
from .base import AdminRepository, EventRepository, ParticipationRepository


def _month_bounds(year: int, month: int) -> tuple[str, str]:
    start = date(year, month, 1)
    end = date(year + 1, 1, 1) if month == 12 else date(year, month + 1, 1)
    return start.isoformat(), end.isoformat()


class SQLiteAdminRepository(AdminRepository):

    def __init__(self, database_url: str) -> None:
        self.database_url = database_url

    @staticmethod
    def _from_row(row: sqlite3.Row) -> AdminAccount:
        session = None
        if row["session_refresh_token"] is not None:
            session = SessionInfo(
                refresh_token=row["session_refresh_token"],
                expires_at=datetime.fromisoformat(row["session_expires_at"]),
            )
        return AdminAccount(
            id=row["id"],
            password_hash=row["password_hash"],
            name=row["name"],
            member_since=datetime.fromisoformat(row["member_since"]),
            session=session,
        )

    def create(self, account: AdminAccount) -> AdminAccount:
        try:
            with get_cursor(self.database_url) as cursor:
                cursor.execute(
                    "INSERT INTO admin (id, password_hash, name, member_since, "
                    "session_refresh_token, session_expires_at) VALUES (?, ?, ?, ?, ?, ?)",
                    (
                        account.id,
                        account.password_hash,
                        account.name,
                        account.member_since.isoformat(),
                        account.session.refresh_token if account.session else None,
                        account.session.expires_at.isoformat() if account.session else None,
                    ),
                )
        except sqlite3.IntegrityError as e:
            raise ConflictError() from e
        return account

    def get(self, admin_id: str) -> AdminAccount | None:
        with get_cursor(self.database_url) as cursor:
            row = cursor.execute("SELECT * FROM admin WHERE id = ?", (admin_id,)).fetchone()
        return self._from_row(row) if row else None

    def set_session(self, admin_id: str, session: SessionInfo | None) -> None:
        with get_cursor(self.database_url) as cursor:
            cursor.execute(
                "UPDATE admin SET session_refresh_token = ?, session_expires_at = ? WHERE id = ?",
                (
                    session.refresh_token if session else None,
                    session.expires_at.isoformat() if session else None,
                    admin_id,
                ),
            )


class SQLiteEventRepository(EventRepository):

    def __init__(self, database_url: str) -> None:
        self.database_url = database_url

    @staticmethod
    def _from_row(row: sqlite3.Row) -> Event:
        return Event(
            id=row["id"],
            date=date.fromisoformat(row["date"]),
            created_at=datetime.fromisoformat(row["created_at"]),
            name=row["name"],
            editor=row["editor"],
            detail=row["detail"],
            category=row["category"],
        )

    def create(self, event: Event) -> Event:
        with get_cursor(self.database_url) as cursor:
            cursor.execute(
                "INSERT INTO event (id, date, created_at, name, editor, detail, category) "
                "VALUES (?, ?, ?, ?, ?, ?, ?)",
                (
                    event.id,
                    event.date.isoformat(),
                    event.created_at.isoformat(),
                    event.name,
                    event.editor,
                    event.detail,
                    event.category,
                ),
            )
        return event

    def get(self, event_id: str) -> Event | None:
        with get_cursor(self.database_url) as cursor:
            row = cursor.execute("SELECT * FROM event WHERE id = ?", (event_id,)).fetchone()
        return self._from_row(row) if row else None

    def replace(self, event: Event) -> Event:
        with get_cursor(self.database_url) as cursor:
            cursor.execute(
                "UPDATE event SET date = ?, created_at = ?, name = ?, editor = ?, detail = ?, category = ? "
                "WHERE id = ?",
                (
                    event.date.isoformat(),
                    event.created_at.isoformat(),
                    event.name,
                    event.editor,
                    event.detail,
                    event.category,
                    event.id,
                ),
            )
        return event

    def delete(self, event_id: str) -> bool:
        with get_cursor(self.database_url) as cursor:
            # ON DELETE CASCADE removes the participations.
            cursor.execute("DELETE FROM event WHERE id = ?", (event_id,))
            return cursor.rowcount > 0

    def list_by_month(self, year: int, month: int) -> list[Event]:
        start, end = _month_bounds(year, month)
        with get_cursor(self.database_url) as cursor:
            rows = cursor.execute(
                "SELECT * FROM event WHERE date >= ? AND date < ? ORDER BY date, created_at",
                (start, end),
            ).fetchall()
        return [self._from_row(row) for row in rows]


class SQLiteParticipationRepository(ParticipationRepository):

    def __init__(self, database_url: str) -> None:
        self.database_url = database_url

    @staticmethod
    def _from_row(row: sqlite3.Row) -> Participation:
        return Participation(
            id=row["id"],
            event_id=row["event_id"],
            participant_name=row["participant_name"],
            email=row["email"],
            phone_number=row["phone_number"],
            comment=row["comment"],
            created_at=datetime.fromisoformat(row["created_at"]),
        )

    def create(self, participation: Participation) -> Participation:
        try:
            with get_cursor(self.database_url) as cursor:
                cursor.execute(
                    "INSERT INTO participation (id, event_id, participant_name, email, "
                    "phone_number, comment, created_at) VALUES (?, ?, ?, ?, ?, ?, ?)",
                    (
                        participation.id,
                        participation.event_id,
                        participation.participant_name,
                        participation.email,
                        participation.phone_number,
                        participation.comment,
                        participation.created_at.isoformat(),
                    ),
                )
        except sqlite3.IntegrityError as e:
            raise ConflictError() from e
        return participation

    def get(self, event_id: str, participation_id: str) -> Participation | None:
        with get_cursor(self.database_url) as cursor:
            row = cursor.execute(
                "SELECT * FROM participation WHERE id = ? AND event_id = ?",
                (participation_id, event_id),
            ).fetchone()
        return self._from_row(row) if row else None

    def list_by_event(self, event_id: str) -> list[Participation]:
        with get_cursor(self.database_url) as cursor:
            rows = cursor.execute(
                "SELECT * FROM participation WHERE event_id = ? ORDER BY created_at",
                (event_id,),
            ).fetchall()
        return [self._from_row(row) for row in rows]

    def delete(self, event_id: str, participation_id: str) -> bool:
        with get_cursor(self.database_url) as cursor:
            cursor.execute(
                "DELETE FROM participation WHERE id = ? AND event_id = ?",
                (participation_id, event_id),
            )
            return cursor.rowcount > 0
