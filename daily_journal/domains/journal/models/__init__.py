from daily_journal.domains.journal.models.entry import MAX_ROW_ID, Entry, EntryCompetency

__all__ = ["Entry", "EntryCompetency", "MAX_ROW_ID"]
