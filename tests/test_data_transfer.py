import json

import pytest
from fastapi import status

from leave_tracker.core.exceptions import ImportFormatError
from leave_tracker.schemas.transfer import EXPORT_VERSION
from leave_tracker.services.transfer import parse_envelope

LEGACY_BACKUP = {
    "leaves": [
        {
            "id": "l1",
            "type": "cp",
            "startDate": "2025-03-03",
            "endDate": "2025-03-07",
            "workingDays": 5,
            "isForecast": False,
            "createdAt": "2025-02-01T10:00:00.000Z",
            "updatedAt": "2025-02-01T10:00:00.000Z",
        },
        {
            "id": "l2",
            "type": "rtt",
            "startDate": "2025-04-18",
            "endDate": "2025-04-18",
            "workingDays": 0.5,
            "isHalfDay": True,
            "halfDayType": "afternoon",
        },
    ],
    "settings": None,
    "carryovers": [{"id": "c1", "type": "cp", "year": 2024, "days": 3}],
    "exportDate": "2025-05-01T08:00:00.000Z",
    "version": "1.0.0",
}


def test_export_envelope_shape(client):
    client.post("/api/leaves", json={"type": "cp", "startDate": "2025-07-14", "endDate": "2025-07-18"})
    data = client.get("/api/data/export").json()

    assert set(data) == {"leaves", "settings", "holidays", "carryovers", "payrollData", "exportDate", "version"}
    assert data["version"] == EXPORT_VERSION
    assert len(data["leaves"]) == 1
    assert [q["type"] for q in data["settings"]["quotas"]] == ["cp", "rtt", "cet"]


def test_legacy_backup_imports(client):
    response = client.post("/api/data/import", json=LEGACY_BACKUP)
    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["success"] is True
    assert body["data"]["leaves"] == 2
    assert body["data"]["carryovers"] == 1

    carryovers = client.get("/api/carryovers").json()
    assert carryovers[0]["originYear"] == 2024
    balances = {b["type"]: b for b in client.get("/api/balances", params={"year": 2025}).json()}
    assert balances["cp"]["total"] == 28
    assert balances["cp"]["used"] == 5


def test_import_replaces_existing_data(client):
    client.post("/api/leaves", json={"type": "cp", "startDate": "2025-07-14", "endDate": "2025-07-18"})
    client.post("/api/data/import", json=LEGACY_BACKUP)
    assert sorted(leave["id"] for leave in client.get("/api/leaves").json()) == ["l1", "l2"]


def test_export_then_import_keeps_quotas(client):
    client.put("/api/quotas", json=[{"type": "cp", "yearlyQuota": 30}])
    backup = client.get("/api/data/export").json()
    client.delete("/api/data")
    assert client.get("/api/quotas").json()[0]["yearlyQuota"] == 25

    client.post("/api/data/import", json=backup)
    assert client.get("/api/quotas").json() == [{"type": "cp", "yearlyQuota": 30.0, "carryover": None}]


def test_missing_leaves_rejected(client):
    response = client.post("/api/data/import", json={"carryovers": []})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["errors"][0]["code"] == "INVALID_IMPORT"


def test_clear_all(client):
    client.post("/api/data/import", json=LEGACY_BACKUP)
    response = client.delete("/api/data")
    assert response.json()["data"] == {"cleared": True}
    assert client.get("/api/leaves").json() == []
    assert client.get("/api/carryovers").json() == []


def test_parse_envelope_accepts_raw_json():
    envelope = parse_envelope(json.dumps(LEGACY_BACKUP))
    assert envelope.leaves[1].half_day_type.value == "afternoon"
    assert envelope.carryovers[0].origin_year == 2024


@pytest.mark.parametrize("raw", ["{not json", "[]", json.dumps({"leaves": {}})])
def test_parse_envelope_rejects_bad_input(raw):
    with pytest.raises(ImportFormatError):
        parse_envelope(raw)


def test_parse_envelope_rejects_invalid_leave():
    broken = {**LEGACY_BACKUP, "leaves": [{"id": "x", "type": "holiday", "startDate": "2025-01-01", "endDate": "2025-01-01"}]}
    with pytest.raises(ImportFormatError):
        parse_envelope(broken)


def test_repeated_quota_type_rejected(client):
    backup = {"leaves": [], "settings": {"quotas": [{"type": "cp", "yearlyQuota": 25}, {"type": "cp", "yearlyQuota": 20}]}}
    response = client.post("/api/data/import", json=backup)
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["errors"][0]["code"] == "INVALID_IMPORT"
    assert client.get("/api/quotas").json()[0]["yearlyQuota"] == 25


@pytest.mark.parametrize(
    "override",
    [
        {"leaves": LEGACY_BACKUP["leaves"] + [LEGACY_BACKUP["leaves"][0]]},
        {"carryovers": LEGACY_BACKUP["carryovers"] * 2},
        {"payrollData": [{"id": "p1", "month": 8, "year": 2025}, {"id": "p2", "month": 8, "year": 2025}]},
    ],
)
def test_repeated_keys_rejected(override):
    with pytest.raises(ImportFormatError):
        parse_envelope({**LEGACY_BACKUP, **override})
