#!/usr/bin/env python3
"""
Seed the project store with sample estimates.

Usage:
    python data/seed_sample_projects.py [path/to/projects.json]

Defaults to data/sample_projects.json. Projects whose name already exists
are skipped, so the script is safe to run more than once.
"""

import json
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


def load_samples(path: Path) -> list:
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a JSON list of projects")
    return data


def seed(samples: list) -> int:
    """Create each sample through the SQL store. Returns the number created."""
    from buildcost.database import Base, SessionLocal, engine
    from buildcost.exceptions import ValidationError
    from buildcost.store import SqlProjectStore

    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    created = 0
    try:
        store = SqlProjectStore(db)
        existing = {p.project_name for p in store.list()}
        for sample in samples:
            name = str(sample.get("projectName") or "").strip()
            if name in existing:
                print(f"  Skipping {name!r} (already exists)")
                continue
            try:
                project = store.create(sample)
            except ValidationError as e:
                print(f"  Skipping {name!r}: {e.message}")
                continue
            existing.add(project.project_name)
            created += 1
            print(f"  {project.project_name}: {project.estimated_cost:,}")
    finally:
        db.close()
    return created


def main():
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else Path(__file__).parent / "sample_projects.json"
    print(f"Loading sample projects from {path}...\n")

    if not path.exists():
        print(f"File {path} does not exist, nothing to load")
        return

    created = seed(load_samples(path))
    print(f"\n{created} projects created.")
    print("Done.")


if __name__ == "__main__":
    main()
