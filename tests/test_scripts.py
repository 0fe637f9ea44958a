from __future__ import annotations

import importlib.util
from pathlib import Path

from sqlalchemy import create_engine, inspect

from careerhub.database import Base


def _load_script(name: str):
    path = Path(__file__).resolve().parents[1] / "scripts" / f"{name}.py"
    spec = importlib.util.spec_from_file_location(name, path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _table_names(url: str) -> set[str]:
    engine = create_engine(url)
    try:
        return set(inspect(engine).get_table_names())
    finally:
        engine.dispose()


def test_create_orm_tables_reports_and_creates_missing_tables(tmp_path, capsys) -> None:
    script = _load_script("create_orm_tables")
    url = f"sqlite:///{tmp_path / 'fresh.db'}"
    expected = set(Base.metadata.tables)

    assert script.main(["--db-url", url]) == 2
    assert _table_names(url) == set()

    assert script.main(["--db-url", url, "--dry-run"]) == 0
    assert f"{len(expected)} table(s) to create (dry run)" in capsys.readouterr().out
    assert _table_names(url) == set()

    assert script.main(["--db-url", url, "--i-understand"]) == 0
    out = capsys.readouterr().out
    assert "created:" in out
    assert "live_sessions" in out
    assert _table_names(url) == expected

    assert script.main(["--db-url", url, "--i-understand"]) == 0
    out = capsys.readouterr().out
    assert "0 table(s) to create" in out
    assert "exists  recommendations" in out
