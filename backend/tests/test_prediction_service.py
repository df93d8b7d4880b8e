import pytest

from app.services.pokedex_store import PokemonNotFoundError
from app.services.prediction_service import PredictionService


@pytest.mark.asyncio
async def test_predict_loads_both_and_returns_verdict(store):
    result = await PredictionService(store).predict(2, 1)

    assert result.winner.nom == "Flamby"
    assert result.loser.nom == "Herbizarre"
    assert result.win_probability == pytest.approx(555 / 980 * 100)
    assert result.winner_breakdown.type_multiplier == 1.5
    assert result.loser_breakdown.type_multiplier == 1.0
    assert "Type advantage gives Flamby a significant edge." in result.explanation


@pytest.mark.asyncio
async def test_predict_is_order_independent(store):
    service = PredictionService(store)
    forward = await service.predict(2, 1)
    backward = await service.predict(1, 2)

    assert forward.winner.numero == backward.winner.numero == 2
    assert forward.win_probability == pytest.approx(backward.win_probability)


@pytest.mark.asyncio
async def test_same_pokemon_twice_is_a_tie(store):
    result = await PredictionService(store).predict(3, 3)
    assert result.is_tie is True
    assert result.win_probability == 50.0
    assert result.winner.numero == 3


@pytest.mark.asyncio
async def test_missing_pokemon(store):
    with pytest.raises(PokemonNotFoundError):
        await PredictionService(store).predict(2, 404)


@pytest.mark.asyncio
async def test_lookup_stops_at_first_missing_pokemon(fake_client, store):
    with pytest.raises(PokemonNotFoundError, match="#404"):
        await PredictionService(store).predict(404, 2)
    assert fake_client.requested == ["pokemon"]
