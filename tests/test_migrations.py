"""마이그레이션 스크립트 테스트 (DB 연결 없이).

Migration script tests — the revision graph is read without a database.
"""

from pathlib import Path

from alembic.config import Config
from alembic.script import ScriptDirectory

ROOT = Path(__file__).resolve().parent.parent


def _scripts() -> ScriptDirectory:
    config = Config(str(ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(ROOT / "alembic"))
    return ScriptDirectory.from_config(config)


def test_single_head_creates_clinic_tables():
    scripts = _scripts()
    assert scripts.get_heads() == ["5d8e2f7a9c41"]

    revision = scripts.get_revision("5d8e2f7a9c41")
    assert revision.down_revision is None
    assert "create_clinic_tables" in revision.doc
