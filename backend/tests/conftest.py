"""Shared fakes: an in-memory stand-in for the Firestore query surface used by PokedexStore."""
from __future__ import annotations

from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import pytest

from app.services.pokedex_store import PokedexStore


class _FakeSnapshot:
    def __init__(self, doc_id: str, payload: Dict[str, Any]):
        self.id = doc_id
        self._payload = payload
        self.exists = True

    def to_dict(self):
        return dict(self._payload)


class _FakeQuery:
    def __init__(self, docs: List[_FakeSnapshot], error: Optional[Exception] = None):
        self._docs = docs
        self._error = error

    def order_by(self, field: str):
        docs = sorted(self._docs, key=lambda d: (d.to_dict().get(field) is None, d.to_dict().get(field)))
        return _FakeQuery(docs, self._error)

    def limit(self, count: int):
        return _FakeQuery(self._docs[:count], self._error)

    def where(self, *, filter):
        assert filter.op_string == "=="
        docs = [d for d in self._docs if d.to_dict().get(filter.field_path) == filter.value]
        return _FakeQuery(docs, self._error)

    def stream(self):
        if self._error is not None:
            raise self._error
        return iter(self._docs)

    def count(self, alias: Optional[str] = None):
        docs, error = self._docs, self._error

        class _Aggregation:
            def get(self_inner):
                if error is not None:
                    raise error
                return [[SimpleNamespace(alias=alias, value=len(docs))]]

        return _Aggregation()


class FakeFirestoreClient:
    """Collections are plain lists of dict rows keyed by collection name."""

    def __init__(self, collections: Dict[str, List[Dict[str, Any]]], error: Optional[Exception] = None):
        self._collections = collections
        self._error = error
        self.requested: List[str] = []

    def collection(self, name: str) -> _FakeQuery:
        self.requested.append(name)
        rows = self._collections.get(name, [])
        docs = [
            _FakeSnapshot(str(row.get("id", row.get("numero", index))), row)
            for index, row in enumerate(rows)
        ]
        return _FakeQuery(docs, self._error)


def make_pokemon_row(numero: int, nom: str, type_1: str, type_2: Optional[str] = None, **overrides):
    row = {
        "numero": numero,
        "nom": nom,
        "type_1": type_1,
        "type_2": type_2,
        "points_de_vie": 50,
        "points_attaque": 50,
        "points_deffence": 50,
        "points_attaque_speciale": 50,
        "point_defense_speciale": 50,
        "points_vitesse": 50,
        "nombre_generations": 1,
        "legendaire": False,
        "combats": 0,
        "victoires": 0,
        "taux_de_victoire": 0.0,
    }
    row.update(overrides)
    return row


@pytest.fixture
def pokemon_rows():
    return [
        make_pokemon_row(
            2, "Flamby", "6",
            points_de_vie=50, points_attaque=100, points_deffence=50,
            points_attaque_speciale=50, point_defense_speciale=50, points_vitesse=100,
            combats=120, victoires=90, taux_de_victoire=0.75,
        ),
        make_pokemon_row(
            1, "Herbizarre", "9", "13",
            points_de_vie=100, points_attaque=50, points_deffence=100,
            points_attaque_speciale=100, point_defense_speciale=100, points_vitesse=50,
            combats=100, victoires=40, taux_de_victoire=0.4,
        ),
        make_pokemon_row(
            3, "Mewtwo", "14",
            legendaire=True, combats=0, victoires=0,
        ),
    ]


@pytest.fixture
def combat_rows():
    return [
        {"id": "c1", "first_pokemon": 1, "second_pokemon": 2, "winner": 2},
        {"id": "c2", "first_pokemon": 2, "second_pokemon": 3, "winner": 3},
    ]


@pytest.fixture
def model_rows():
    return [
        {"id": "m1", "model_name": "Linear Regression", "model_type": "regression",
         "r2_score": 0.91, "mse": 0.004, "mae": 0.05, "created_at": "2025-01-01T00:00:00"},
        {"id": "m2", "model_name": "Random Forest Regressor", "model_type": "regression",
         "r2_score": 0.9891, "mse": 0.0008, "mae": 0.02, "created_at": "2025-01-02T00:00:00"},
        {"id": "m3", "model_name": "SVM", "model_type": "classification",
         "accuracy": 0.9375, "precision": 0.9, "recall": 0.8, "f1_score": 0.85,
         "created_at": "2025-01-03T00:00:00"},
        {"id": "m4", "model_name": "KNN", "model_type": "classification",
         "accuracy": 0.9125, "created_at": "2025-01-04T00:00:00"},
    ]


@pytest.fixture
def fake_client(pokemon_rows, combat_rows, model_rows):
    return FakeFirestoreClient({
        "pokemon": pokemon_rows,
        "combats": combat_rows,
        "model_results": model_rows,
    })


@pytest.fixture
def store(fake_client):
    return PokedexStore(firestore_client=fake_client)


@pytest.fixture
def client_factory():
    return FakeFirestoreClient
