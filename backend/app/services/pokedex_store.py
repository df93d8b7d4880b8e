"""
Firestore 数据访问（宝可梦图鉴 / 对战记录 / 模型评估结果）

Read-only pass-through: rows are fetched as stored and validated into
pydantic models, no aggregation happens here.
"""
import logging
from typing import Any, Dict, List, Optional

from google.api_core import exceptions as google_exceptions
from google.cloud import firestore

from app.config import settings
from app.models import CombatRecord, ModelResult, Pokemon

logger = logging.getLogger(__name__)


class PokemonNotFoundError(LookupError):
    """Raised when a requested Pokémon is not in the pokedex collection."""

    def __init__(self, numero: int) -> None:
        self.numero = numero
        super().__init__(f"pokemon #{numero} not found")


class DataStoreUnavailableError(RuntimeError):
    """Raised when the hosted database cannot serve a query."""

    def __init__(self, collection: str, detail: str) -> None:
        self.collection = collection
        self.detail = detail
        super().__init__(f"data store unavailable ({collection}): {detail}")


def _doc_payload(doc: Any) -> Dict[str, Any]:
    payload = doc.to_dict() or {}
    payload.setdefault("id", doc.id)
    return payload


class PokedexStore:
    """Firestore-backed dataset reader."""

    def __init__(self, firestore_client: Optional[firestore.Client] = None) -> None:
        self._db = firestore_client
        self.pokemon_collection = settings.pokemon_collection
        self.combats_collection = settings.combats_collection
        self.model_results_collection = settings.model_results_collection

    @property
    def db(self) -> firestore.Client:
        # 首次查询时才创建客户端（凭证缺失不影响应用启动）
        if self._db is None:
            self._db = firestore.Client(database=settings.firestore_database)
        return self._db

    def _stream(self, collection: str, query: Any) -> List[Any]:
        try:
            return list(query.stream())
        except google_exceptions.GoogleAPICallError as exc:
            logger.error("[PokedexStore] query on %s failed: %s", collection, exc)
            raise DataStoreUnavailableError(collection, str(exc)) from exc

    # ==================== Pokemon ====================

    async def list_pokemon(self, order_by: str = "numero", limit: Optional[int] = None) -> List[Pokemon]:
        """获取宝可梦列表（选择器按 nom 排序，总览按 numero 排序）"""
        query = self.db.collection(self.pokemon_collection).order_by(order_by)
        if limit:
            query = query.limit(limit)
        docs = self._stream(self.pokemon_collection, query)
        return [Pokemon(**doc.to_dict()) for doc in docs]

    async def get_pokemon(self, numero: int) -> Optional[Pokemon]:
        """按图鉴编号获取宝可梦"""
        query = (
            self.db.collection(self.pokemon_collection)
            .where(filter=firestore.FieldFilter("numero", "==", numero))
            .limit(1)
        )
        docs = self._stream(self.pokemon_collection, query)
        if not docs:
            return None
        return Pokemon(**docs[0].to_dict())

    async def require_pokemon(self, numero: int) -> Pokemon:
        pokemon = await self.get_pokemon(numero)
        if pokemon is None:
            raise PokemonNotFoundError(numero)
        return pokemon

    async def count_legendary(self) -> int:
        query = self.db.collection(self.pokemon_collection).where(
            filter=firestore.FieldFilter("legendaire", "==", True)
        )
        return self._count(self.pokemon_collection, query)

    # ==================== Combats ====================

    async def list_combats(self, limit: Optional[int] = None) -> List[CombatRecord]:
        """获取历史对战记录"""
        query = self.db.collection(self.combats_collection)
        if limit:
            query = query.limit(limit)
        docs = self._stream(self.combats_collection, query)
        return [CombatRecord(**_doc_payload(doc)) for doc in docs]

    # ==================== Model results ====================

    async def list_model_results(self) -> List[ModelResult]:
        """获取模型评估结果（按创建时间正序）"""
        query = self.db.collection(self.model_results_collection).order_by("created_at")
        docs = self._stream(self.model_results_collection, query)
        return [ModelResult(**_doc_payload(doc)) for doc in docs]

    # ==================== 统计 ====================

    async def count(self, collection: str) -> int:
        """集合文档总数（聚合查询，不拉取文档）"""
        return self._count(collection, self.db.collection(collection))

    def _count(self, collection: str, query: Any) -> int:
        try:
            results = query.count(alias="total").get()
        except google_exceptions.GoogleAPICallError as exc:
            logger.error("[PokedexStore] count on %s failed: %s", collection, exc)
            raise DataStoreUnavailableError(collection, str(exc)) from exc
        for row in results:
            for aggregation in row:
                return int(aggregation.value)
        return 0
