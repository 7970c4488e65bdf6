"""
Google Calendar client for interview events.

Talks to the Calendar v3 REST API with an OAuth refresh token, asking Google
to attach a Meet conference to each event.
"""
import logging
from datetime import datetime
from typing import List, Optional
import requests
from app.core.config import settings

logger = logging.getLogger(__name__)

TOKEN_URL = "https://oauth2.googleapis.com/token"
EVENTS_URL = "https://www.googleapis.com/calendar/v3/calendars/{calendar_id}/events"


class CalendarError(Exception):
    """Raised when a calendar event cannot be created."""


class GoogleCalendarService:
    def __init__(self, client_id: Optional[str] = None, client_secret: Optional[str] = None,
                 refresh_token: Optional[str] = None, calendar_id: Optional[str] = None,
                 timeout: Optional[float] = None):
        self.client_id = client_id or settings.GOOGLE_CALENDAR_CLIENT_ID
        self.client_secret = client_secret or settings.GOOGLE_CALENDAR_CLIENT_SECRET
        self.refresh_token = refresh_token or settings.GOOGLE_REFRESH_TOKEN
        self.calendar_id = calendar_id or settings.GOOGLE_CALENDAR_ID
        self.timeout = timeout or settings.HTTP_TIMEOUT_SECONDS

    def is_configured(self) -> bool:
        return bool(self.client_id and self.client_secret and self.refresh_token)

    def _access_token(self) -> str:
        try:
            response = requests.post(TOKEN_URL, data={
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "refresh_token": self.refresh_token,
                "grant_type": "refresh_token",
            }, timeout=self.timeout)
            response.raise_for_status()
            return response.json()["access_token"]
        except (requests.RequestException, KeyError, ValueError) as e:
            raise CalendarError(f"Could not obtain Google access token: {e}") from e

    def create_meeting(self, summary: str, description: str, start: datetime, end: datetime,
                       attendees: List[str], request_id: str) -> str:
        """Create an event with a Meet conference and return its join link ('' if none)."""
        if not self.is_configured():
            raise CalendarError("Google Calendar credentials are not configured")

        time_zone = settings.ORGANIZATION_TIMEZONE
        body = {
            "summary": summary,
            "description": description,
            "start": {"dateTime": start.isoformat(), "timeZone": time_zone},
            "end": {"dateTime": end.isoformat(), "timeZone": time_zone},
            "attendees": [{"email": email} for email in attendees if email],
            "conferenceData": {"createRequest": {"requestId": request_id}},
        }
        try:
            response = requests.post(
                EVENTS_URL.format(calendar_id=self.calendar_id),
                params={"conferenceDataVersion": 1},
                headers={"Authorization": f"Bearer {self._access_token()}"},
                json=body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            event = response.json()
        except requests.RequestException as e:
            raise CalendarError(f"Google Calendar API error: {e}") from e
        except ValueError as e:
            raise CalendarError(f"Unreadable Google Calendar response: {e}") from e

        meet_link = event.get("hangoutLink") or ""
        logger.info(f"Google Meet event created: {meet_link or '(no link)'}")
        return meet_link


_calendar_service_instance = None

def get_calendar_service() -> GoogleCalendarService:
    global _calendar_service_instance
    if _calendar_service_instance is None:
        _calendar_service_instance = GoogleCalendarService()
    return _calendar_service_instance
