from httpx import ASGITransport, AsyncClient
import pytest
from google.api_core import exceptions as google_exceptions

from app.dependencies import get_pokedex_store
from app.main import app
from app.services.pokedex_store import PokedexStore


@pytest.fixture
def api(store):
    app.dependency_overrides[get_pokedex_store] = lambda: store
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def broken_api(client_factory):
    broken = PokedexStore(
        firestore_client=client_factory(
            {}, error=google_exceptions.ServiceUnavailable("backend down")
        )
    )
    app.dependency_overrides[get_pokedex_store] = lambda: broken
    yield app
    app.dependency_overrides.clear()


async def _get(application, path, **kwargs):
    transport = ASGITransport(app=application)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        return await client.get(path, **kwargs)


async def _post(application, path, payload):
    transport = ASGITransport(app=application)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        return await client.post(path, json=payload)


@pytest.mark.asyncio
async def test_root():
    response = await _get(app, "/")
    assert response.status_code == 200
    assert response.json()["docs"] == "/docs"


@pytest.mark.asyncio
async def test_health(api):
    response = await _get(api, "/health")
    assert response.status_code == 200
    assert response.json()["pokemon_count"] == 3


@pytest.mark.asyncio
async def test_health_unavailable(broken_api):
    response = await _get(broken_api, "/health")
    assert response.status_code == 503
    assert response.json()["status"] == "unhealthy"


@pytest.mark.asyncio
async def test_list_pokemon_defaults_to_name_order(api):
    response = await _get(api, "/api/pokedex/pokemon")
    assert response.status_code == 200
    assert [p["nom"] for p in response.json()] == ["Flamby", "Herbizarre", "Mewtwo"]


@pytest.mark.asyncio
async def test_list_pokemon_rejects_unknown_order(api):
    response = await _get(api, "/api/pokedex/pokemon", params={"order_by": "points_de_vie"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_get_pokemon_not_found(api):
    response = await _get(api, "/api/pokedex/pokemon/999")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_overview(api):
    response = await _get(api, "/api/pokedex/overview", params={"sample_size": 2})
    assert response.status_code == 200
    data = response.json()

    assert data["summary"]["pokemon_count"] == 3
    assert data["summary"]["legendary_count"] == 1
    assert data["summary"]["combat_count"] == 2
    assert [p["numero"] for p in data["pokemon_sample"]] == [1, 2]
    assert len(data["combat_sample"]) == 2
    assert [s["name"] for s in data["average_stats"]] == ["HP", "Attack", "Defense", "Speed"]
    assert data["type_win_rates"][0]["type"] == "6"


@pytest.mark.asyncio
async def test_overview_store_unavailable(broken_api):
    response = await _get(broken_api, "/api/pokedex/overview")
    assert response.status_code == 503


@pytest.mark.asyncio
async def test_model_evaluation(api):
    response = await _get(api, "/api/models/evaluation")
    assert response.status_code == 200
    data = response.json()

    assert len(data["regression_models"]) == 2
    assert len(data["classification_models"]) == 2
    assert data["best_regression"]["model_name"] == "Random Forest Regressor"
    assert data["best_classification"]["model_name"] == "SVM"


@pytest.mark.asyncio
async def test_predict(api):
    response = await _post(api, "/api/predictor/predict", {"first_pokemon": 2, "second_pokemon": 1})
    assert response.status_code == 200
    data = response.json()

    assert data["winner"]["nom"] == "Flamby"
    assert data["win_probability"] == pytest.approx(56.63, abs=0.01)
    assert data["win_probability"] + data["loser_probability"] == pytest.approx(100)
    assert data["is_tie"] is False
    assert data["winner_breakdown"]["final_score"] == pytest.approx(555)


@pytest.mark.asyncio
async def test_predict_missing_pokemon(api):
    response = await _post(api, "/api/predictor/predict", {"first_pokemon": 2, "second_pokemon": 404})
    assert response.status_code == 404
    assert "#404" in response.json()["detail"]


@pytest.mark.asyncio
async def test_predict_requires_both(api):
    response = await _post(api, "/api/predictor/predict", {"first_pokemon": 2})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_predict_passes_unvalidated_stats_through(client_factory):
    glitched = PokedexStore(firestore_client=client_factory({
        "pokemon": [
            {"numero": 1, "nom": "Glitch", "type_1": "18", "points_de_vie": -1000},
            {"numero": 2, "nom": "Normal", "type_1": "18", "points_attaque": 100},
        ],
    }))
    app.dependency_overrides[get_pokedex_store] = lambda: glitched
    try:
        response = await _post(app, "/api/predictor/predict", {"first_pokemon": 1, "second_pokemon": 2})
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 200
    data = response.json()
    assert data["winner"]["nom"] == "Normal"
    # 90 / (90 - 700)
    assert data["win_probability"] == pytest.approx(90 / -610 * 100)
    assert data["win_probability"] + data["loser_probability"] == pytest.approx(100)
