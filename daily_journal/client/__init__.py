"""Journal API client and the Thoughts view state."""

from daily_journal.client.api_client import JournalApiClient, JournalApiError
from daily_journal.client.thoughts_view import Competency, Thought, ThoughtsView

__all__ = ["Competency", "JournalApiClient", "JournalApiError", "Thought", "ThoughtsView"]
