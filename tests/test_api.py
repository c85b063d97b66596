import json

import pytest
from httpx import ASGITransport, AsyncClient

from fighterstats.api import create_app


@pytest.fixture
async def client():
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client


def _sample_fighters() -> str:
    return """name,nickname,wins,losses,draws,height_cm,weight_in_kg,reach_in_cm,stance,date_of_birth,significant_strikes_landed_per_minute,significant_striking_accuracy,significant_strikes_absorbed_per_minute,significant_strike_defence,average_takedowns_landed_per_15_minutes,takedown_accuracy,takedown_defense,average_submissions_attempted_per_15_minutes
A,,10,2,1,180.0,90.0,190.0,Orthodox,1990-01-01,5.0,0.5,3.0,0.6,3.0,0.4,0.7,1.5
B,,8,3,1,175.0,70.0,180.0,Southpaw,1992-06-01,4.0,0.4,2.0,0.5,2.0,0.3,0.6,1.0
C,Kid,4,4,0,170.0,60.0,172.0,Switch,1995-03-12,3.5,0.45,4.0,0.55,0.0,0.0,0.5,0.0
D,,15,1,0,190.0,110.0,200.0,Orthodox,1988-11-30,6.0,0.55,2.5,0.65,1.0,0.5,0.8,0.5
E,,3,3,3,185.0,,190.0,Orthodox,1991-05-05,,,,,,,,
F,,1,2,0,180.0,80.0,185.0,Orthodox,05/05/1991,,,,,,,,
"""


def _files(text: str) -> dict[str, tuple[str, bytes, str]]:
    return {"fighters": ("fighters.csv", text.encode("utf-8"), "text/csv")}


async def test_health(client):
    resp = await client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


async def test_preview_reports_rejections(client):
    resp = await client.post("/preview", files=_files(_sample_fighters()))

    assert resp.status_code == 200
    payload = resp.json()
    assert payload["total_rows"] == 6
    assert payload["accepted_rows"] == 5
    assert payload["rejected_rows"] == 1
    assert payload["rejections"][0]["line"] == 7
    assert "date_of_birth" in payload["rejections"][0]["reason"]


async def test_analyze_returns_ranked_importances(client):
    resp = await client.post("/analyze", files=_files(_sample_fighters()))

    assert resp.status_code == 200
    payload = resp.json()
    assert payload["clean_records"] == 4
    assert payload["report"]["accepted_rows"] == 5
    importances = payload["importances"]
    assert len(importances) == 19
    assert [item["rank"] for item in importances] == list(range(1, 20))
    magnitudes = [abs(item["coefficient"]) for item in importances]
    assert magnitudes == sorted(magnitudes, reverse=True)


async def test_analyze_with_column_mapping(client):
    text = _sample_fighters().replace("weight_in_kg", "Weight", 1)
    mapping = json.dumps({"weight_in_kg": "Weight"})

    resp = await client.post("/analyze", files=_files(text), data={"mapping": mapping})

    assert resp.status_code == 200
    assert resp.json()["clean_records"] == 4


async def test_empty_upload_is_rejected(client):
    resp = await client.post("/preview", files=_files(""))

    assert resp.status_code == 400


async def test_invalid_mapping_is_rejected(client):
    resp = await client.post(
        "/preview", files=_files(_sample_fighters()), data={"mapping": "{not json"}
    )

    assert resp.status_code == 400


async def test_analyze_without_clean_records(client):
    header = _sample_fighters().splitlines()[0]
    resp = await client.post("/analyze", files=_files(header + "\n"))

    assert resp.status_code == 422
