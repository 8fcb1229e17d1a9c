from daily_journal.domains.journal.services.entry_service import EntryService

__all__ = ["EntryService"]
