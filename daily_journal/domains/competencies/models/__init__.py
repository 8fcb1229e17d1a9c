from daily_journal.domains.competencies.models.competency import Competency

__all__ = ["Competency"]
