"""
Project store tests: run against both the in-memory and the SQL backend.

create() validates, prices and saves; list() is newest first; get() raises
ProjectNotFound for unknown ids. Saved estimates are frozen snapshots.
"""

import threading
import uuid
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock, patch

import pydantic
import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker

from buildcost import schemas
from buildcost.calculators import CostCalculator, RateTable, calculate_cost
from buildcost.exceptions import EstimateOutOfRange, ProjectNotFound, StorageFailure, ValidationError
from buildcost.store import InMemoryProjectStore, SqlProjectStore, validate_project_input


# --- create ---

def test_create_prices_the_project(store, project_payload):
    project = store.create(project_payload())

    expected = calculate_cost(2000, 2, "Standard", [])
    assert project.estimated_cost == expected.total_cost == 4_800_000
    assert project.cost_breakdown.base_cost == expected.base_cost
    assert project.cost_breakdown.material_multiplier == 1200
    assert project.cost_breakdown.additional_features_cost == 0
    assert project.cost_breakdown.total_cost == 4_800_000


def test_create_with_features(store, project_payload):
    project = store.create(project_payload(
        floorArea=1000, numberOfFloors=1, materialType="Luxury",
        additionalFeatures=["Parking", "Elevator"],
    ))
    assert project.estimated_cost == 3_450_000
    assert project.additional_features == ["Parking", "Elevator"]


def test_create_assigns_id_and_timestamp(store, project_payload):
    before = datetime.now(timezone.utc) - timedelta(seconds=1)
    project = store.create(project_payload())
    after = datetime.now(timezone.utc) + timedelta(seconds=1)

    assert project.id
    assert before <= project.created_at <= after
    assert project.created_at.tzinfo is not None


def test_create_gives_distinct_ids(store, project_payload):
    ids = {store.create(project_payload(projectName=f"P{i}")).id for i in range(5)}
    assert len(ids) == 5


def test_create_trims_names(store, project_payload):
    project = store.create(project_payload(projectName="  Tower A  ", location=" Mumbai "))
    assert project.project_name == "Tower A"
    assert project.location == "Mumbai"


def test_create_accepts_schema_instance(store, project_payload):
    project = store.create(schemas.ProjectCreate(**project_payload()))
    assert project.project_name == "Green Valley Residency"


def test_missing_features_default_to_empty(store, project_payload):
    payload = project_payload()
    del payload["additionalFeatures"]
    project = store.create(payload)
    assert project.additional_features == []


# --- validation ---

def test_missing_project_name_rejected(store, project_payload):
    payload = project_payload()
    del payload["projectName"]
    with pytest.raises(ValidationError) as exc_info:
        store.create(payload)
    assert exc_info.value.fields == ["projectName"]


@pytest.mark.parametrize("field,value", [
    ("projectName", ""),
    ("projectName", "   "),
    ("location", ""),
    ("location", None),
    ("floorArea", 0),
    ("floorArea", 0.5),
    ("floorArea", -10),
    ("floorArea", None),
    ("floorArea", float("nan")),
    ("floorArea", float("inf")),
    ("numberOfFloors", 0),
    ("numberOfFloors", None),
    ("materialType", "Gold"),
    ("materialType", None),
    ("additionalFeatures", ["Parking", "Helipad"]),
])
def test_invalid_field_rejected(store, project_payload, field, value):
    with pytest.raises(ValidationError) as exc_info:
        store.create(project_payload(**{field: value}))
    assert exc_info.value.fields == [field]


def test_all_offending_fields_reported(store):
    with pytest.raises(ValidationError) as exc_info:
        store.create({})
    assert exc_info.value.fields == [
        "projectName", "location", "floorArea", "numberOfFloors", "materialType",
    ]
    assert "projectName" in exc_info.value.message


def test_wrong_types_rejected(store, project_payload):
    with pytest.raises(ValidationError) as exc_info:
        store.create(project_payload(floorArea="lots", numberOfFloors=2.5))
    assert set(exc_info.value.fields) == {"floorArea", "numberOfFloors"}


def test_overflowing_estimate_rejected(store, project_payload):
    with pytest.raises(EstimateOutOfRange) as exc_info:
        store.create(project_payload(floorArea=1e306, numberOfFloors=1000, materialType="Luxury"))
    assert exc_info.value.fields == ["floorArea", "numberOfFloors"]
    assert store.list() == []


def test_rejected_project_not_saved(store, project_payload):
    with pytest.raises(ValidationError):
        store.create(project_payload(projectName=""))
    assert store.list() == []


def test_validate_project_input_returns_clean_copy(project_payload):
    cleaned = validate_project_input(project_payload(projectName=" X ", additionalFeatures=None))
    assert cleaned.project_name == "X"
    assert cleaned.additional_features == []


# --- list ---

def test_empty_store_lists_nothing(store):
    assert store.list() == []


def test_list_newest_first(store, project_payload):
    p1 = store.create(project_payload(projectName="First"))
    p2 = store.create(project_payload(projectName="Second"))
    p3 = store.create(project_payload(projectName="Third"))

    assert [p.id for p in store.list()] == [p3.id, p2.id, p1.id]


def test_list_same_timestamp_uses_insertion_order(store, project_payload):
    frozen = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)
    with patch("buildcost.store.base.datetime") as mock_dt:
        mock_dt.now.return_value = frozen
        p1 = store.create(project_payload(projectName="First"))
        p2 = store.create(project_payload(projectName="Second"))

    assert [p.id for p in store.list()] == [p2.id, p1.id]


# --- get ---

def test_get_returns_created_record(store, project_payload):
    created = store.create(project_payload(additionalFeatures=["Garden"]))
    fetched = store.get(created.id)
    assert fetched == created
    assert fetched.model_dump(by_alias=True) == created.model_dump(by_alias=True)


def test_get_unknown_id_raises(store, project_payload):
    store.create(project_payload())
    missing = uuid.uuid4().hex
    with pytest.raises(ProjectNotFound) as exc_info:
        store.get(missing)
    assert exc_info.value.project_id == missing


@pytest.mark.parametrize("bad_id", ["", "not-a-uuid", "1"])
def test_get_malformed_id_raises(store, bad_id):
    with pytest.raises(ProjectNotFound):
        store.get(bad_id)


# --- snapshots ---

def test_saved_estimate_not_repriced(store, project_payload):
    created = store.create(project_payload())

    store.calculator = CostCalculator(RateTable(
        material_rates={"Standard": 9999}, feature_costs={},
    ))
    fetched = store.get(created.id)

    assert fetched.estimated_cost == 4_800_000
    assert fetched.cost_breakdown.material_multiplier == 1200


def test_stored_snapshot_cannot_be_modified(store, project_payload):
    created = store.create(project_payload(additionalFeatures=["Garden"]))
    fetched = store.get(created.id)

    with pytest.raises(pydantic.ValidationError):
        fetched.estimated_cost = 1
    with pytest.raises(pydantic.ValidationError):
        fetched.cost_breakdown.base_cost = 1
    fetched.additional_features.append("Parking")
    created.additional_features.clear()

    again = store.get(created.id)
    assert again.estimated_cost == 5_000_000
    assert again.cost_breakdown.base_cost == 4_800_000
    assert again.additional_features == ["Garden"]
    assert store.list()[0].additional_features == ["Garden"]


def test_store_uses_injected_calculator(project_payload):
    calc = CostCalculator(RateTable(
        material_rates={"Standard": 10, "Premium": 20, "Luxury": 30},
        feature_costs={"Parking": 5},
    ))
    store = InMemoryProjectStore(calculator=calc)
    project = store.create(project_payload(floorArea=100, numberOfFloors=1, additionalFeatures=["Parking"]))
    assert project.estimated_cost == 1005


# --- concurrency (memory store) ---

def test_concurrent_creates_are_isolated(memory_store, project_payload):
    results = []
    errors = []

    def worker(n):
        try:
            for i in range(20):
                results.append(memory_store.create(project_payload(projectName=f"T{n}-{i}")))
        except Exception as e:  # surfaced below
            errors.append(e)

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    listed = memory_store.list()
    assert len(listed) == 160
    assert len({p.id for p in listed}) == 160


# --- storage failures (SQL store) ---

def test_commit_failure_raises_storage_failure(project_payload):
    db = MagicMock()
    db.commit.side_effect = OperationalError("INSERT", {}, Exception("disk full"))
    store = SqlProjectStore(db)

    with pytest.raises(StorageFailure):
        store.create(project_payload())
    db.rollback.assert_called_once()


def test_query_failure_raises_storage_failure():
    db = MagicMock()
    db.query.side_effect = OperationalError("SELECT", {}, Exception("locked"))
    store = SqlProjectStore(db)

    with pytest.raises(StorageFailure):
        store.list()
    with pytest.raises(StorageFailure):
        store.get("abc")


def test_sql_store_persists_across_sessions(db, project_payload):
    created = SqlProjectStore(db).create(project_payload())

    other = sessionmaker(bind=db.get_bind())()
    try:
        fetched = SqlProjectStore(other).get(created.id)
    finally:
        other.close()
    assert fetched == created
