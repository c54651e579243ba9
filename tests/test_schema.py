"""
Schema and seed infrastructure.

1. projects table exists and starts empty
2. ORM row round-trips JSON columns
3. seed script loads sample projects and is idempotent, padded names included
"""

import json
import os
import subprocess
import sys
from pathlib import Path

from sqlalchemy import create_engine, inspect

from buildcost import models

PROJECT_ROOT = Path(__file__).parent.parent
SEED_SCRIPT = PROJECT_ROOT / "data" / "seed_sample_projects.py"


def test_projects_table_exists(db):
    assert db.query(models.Project).count() == 0


def test_json_columns_round_trip(db):
    row = models.Project(
        project_id="abc123",
        project_name="Row",
        location="Somewhere",
        floor_area=100.0,
        number_of_floors=1,
        material_type="Standard",
        additional_features=["Garden", "Garden"],
        estimated_cost=520000.0,
        cost_breakdown={"baseCost": 120000, "materialMultiplier": 1200,
                        "additionalFeaturesCost": 400000, "totalCost": 520000},
    )
    db.add(row)
    db.commit()

    fetched = db.query(models.Project).filter(models.Project.project_id == "abc123").first()
    assert fetched.additional_features == ["Garden", "Garden"]
    assert fetched.cost_breakdown["totalCost"] == 520000
    assert fetched.created_at is not None


def _run_seed(db_path, *args):
    env = dict(os.environ, DATABASE_URL=f"sqlite:///{db_path}")
    return subprocess.run(
        [sys.executable, str(SEED_SCRIPT), *args],
        capture_output=True, text=True, timeout=60, env=env, cwd=str(PROJECT_ROOT),
    )


def test_seed_script_runs_clean(tmp_path):
    db_path = tmp_path / "seed.db"

    result = _run_seed(db_path)
    assert result.returncode == 0, result.stderr
    assert "3 projects created" in result.stdout

    engine = create_engine(f"sqlite:///{db_path}")
    assert "projects" in inspect(engine).get_table_names()

    # Second run skips everything
    result = _run_seed(db_path)
    assert result.returncode == 0, result.stderr
    assert "0 projects created" in result.stdout


def test_seed_script_skips_names_with_surrounding_whitespace(tmp_path):
    db_path = tmp_path / "seed.db"
    samples = tmp_path / "padded.json"
    samples.write_text(json.dumps([{
        "projectName": "  Harbour Heights  ",
        "location": "Kochi, Kerala",
        "floorArea": 1200,
        "numberOfFloors": 3,
        "materialType": "Premium",
        "additionalFeatures": ["Garden"],
    }]), encoding="utf-8")

    result = _run_seed(db_path, str(samples))
    assert result.returncode == 0, result.stderr
    assert "1 projects created" in result.stdout

    result = _run_seed(db_path, str(samples))
    assert result.returncode == 0, result.stderr
    assert "0 projects created" in result.stdout
    assert "already exists" in result.stdout
