import os
import sys
import tempfile
from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config as AlembicConfig

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Must be set before the config module is imported: config classes read env at import.
_TMP_DIR = Path(tempfile.mkdtemp(prefix="daily-journal-tests-"))
os.environ.setdefault("TEST_DATABASE_URL", f"sqlite:///{_TMP_DIR / 'test.db'}")

from daily_journal import create_app  # noqa: E402
from daily_journal.core.auth.session import issue_access_token  # noqa: E402
from daily_journal.domains.competencies.models import Competency  # noqa: E402
from daily_journal.extensions import db  # noqa: E402


def _alembic_config() -> AlembicConfig:
    cfg = AlembicConfig(str(ROOT / "alembic.ini"))
    cfg.set_main_option("script_location", str(ROOT / "daily_journal" / "migrations"))
    cfg.set_main_option("app_env", "testing")
    cfg.set_main_option("sqlalchemy.url", os.environ["TEST_DATABASE_URL"])
    return cfg


@pytest.fixture(scope="session", autouse=True)
def migrated_db():
    """Apply migrations once per session to mirror production schema."""
    cfg = _alembic_config()
    command.upgrade(cfg, "head")
    yield
    command.downgrade(cfg, "base")


@pytest.fixture()
def app(migrated_db):
    """Per-test app; every table is emptied afterwards so tests do not leak rows."""
    app = create_app("testing")
    ctx = app.app_context()
    ctx.push()
    try:
        yield app
    finally:
        db.session.rollback()
        for table in reversed(db.metadata.sorted_tables):
            db.session.execute(table.delete())
        db.session.commit()
        db.session.remove()
        ctx.pop()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def auth_headers(app):
    """Factory: bearer headers for the given email."""

    def _headers(email: str = "writer@example.com") -> dict[str, str]:
        return {"Authorization": f"Bearer {issue_access_token(email)}"}

    return _headers


@pytest.fixture()
def competencies(app):
    """Seed a small catalog with fixed ids 1-4."""
    rows = [
        Competency(id=1, skill="Communication", description="Talk and write clearly"),
        Competency(id=2, skill="Teamwork", description="Work with others"),
        Competency(id=3, skill="Problem Solving", description="Find solutions"),
        Competency(id=4, skill="Leadership", description="Guide people"),
    ]
    db.session.add_all(rows)
    db.session.commit()
    return {c.id: c.skill for c in rows}
