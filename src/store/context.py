"""Context — транзакционный контекст выполнения.

Каждая операция keeper'а получает Context явно; глобального состояния нет.
Context.cache() создаёт дочерний контекст над кэшем и функцию commit:
если commit не вызван, все записи дочернего контекста теряются.
"""

from dataclasses import dataclass
from typing import Callable, Tuple

from src.store.kvstore import KVStore, MultiStore, StoreKey


@dataclass(frozen=True)
class Context:
    """Транзакционно-ограниченный доступ к разделам хранилища."""

    multi_store: MultiStore
    height: int = 0
    chain_id: str = ""

    def kv_store(self, key: StoreKey) -> KVStore:
        return self.multi_store.get_store(key)

    def cache(self) -> Tuple["Context", Callable[[], None]]:
        """Дочерний контекст и функция фиксации его изменений."""
        cms = self.multi_store.cache()
        child = Context(
            multi_store=cms,
            height=self.height,
            chain_id=self.chain_id,
        )
        return child, cms.write
