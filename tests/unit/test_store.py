"""Тесты для KV store и Context.

Coverage:
- MemKVStore get/set/has/delete/iterate
- CacheKVStore read-your-writes, commit, rollback
- MultiStore mount / cache / write
- Context.cache атомарность
"""

import pytest

from src.store import CacheKVStore, Context, MemKVStore, MultiStore, StoreKey


@pytest.fixture
def store():
    s = MemKVStore()
    s.set(b"\x00a", b"1")
    s.set(b"\x00b", b"2")
    s.set(b"\x01a", b"owner")
    return s


class TestMemKVStore:
    """Тесты MemKVStore."""

    def test_get_missing_returns_none(self):
        assert MemKVStore().get(b"missing") is None

    def test_set_get_has(self, store):
        assert store.get(b"\x00a") == b"1"
        assert store.has(b"\x01a")
        assert not store.has(b"\x01b")

    def test_delete(self, store):
        store.delete(b"\x00a")
        assert not store.has(b"\x00a")
        store.delete(b"never-existed")

    def test_iterate_by_prefix(self, store):
        assert list(store.iterate(b"\x00")) == [(b"\x00a", b"1"), (b"\x00b", b"2")]

    def test_empty_key_rejected(self):
        with pytest.raises(ValueError):
            MemKVStore().set(b"", b"x")

    def test_non_bytes_value_rejected(self):
        with pytest.raises(ValueError):
            MemKVStore().set(b"k", "text")


class TestCacheKVStore:
    """Тесты CacheKVStore."""

    def test_read_your_writes(self, store):
        cache = CacheKVStore(store)
        cache.set(b"\x00a", b"changed")
        assert cache.get(b"\x00a") == b"changed"
        assert store.get(b"\x00a") == b"1"

    def test_write_commits_to_parent(self, store):
        cache = CacheKVStore(store)
        cache.set(b"\x00c", b"3")
        cache.delete(b"\x00a")
        cache.write()
        assert store.get(b"\x00c") == b"3"
        assert not store.has(b"\x00a")
        assert not cache.is_dirty

    def test_discard_leaves_parent_untouched(self, store):
        cache = CacheKVStore(store)
        cache.set(b"\x00a", b"changed")
        del cache
        assert store.get(b"\x00a") == b"1"

    def test_deleted_key_not_visible(self, store):
        cache = CacheKVStore(store)
        cache.delete(b"\x00a")
        assert cache.get(b"\x00a") is None
        assert not cache.has(b"\x00a")

    def test_iterate_merges_parent_and_dirty(self, store):
        cache = CacheKVStore(store)
        cache.set(b"\x00c", b"3")
        cache.delete(b"\x00a")
        assert list(cache.iterate(b"\x00")) == [(b"\x00b", b"2"), (b"\x00c", b"3")]


class TestMultiStoreContext:
    """Тесты MultiStore и Context."""

    def test_mount_twice_rejected(self):
        ms = MultiStore()
        ms.mount(StoreKey("ns"))
        with pytest.raises(ValueError):
            ms.mount(StoreKey("ns"))

    def test_unmounted_store(self):
        with pytest.raises(KeyError):
            MultiStore().get_store(StoreKey("ns"))

    def test_empty_store_key_name(self):
        with pytest.raises(ValueError):
            StoreKey("")

    def test_context_cache_commit(self):
        ms = MultiStore()
        ns, acc = StoreKey("ns"), StoreKey("acc")
        ms.mount(ns)
        ms.mount(acc)
        ctx = Context(multi_store=ms)

        child, commit = ctx.cache()
        child.kv_store(ns).set(b"k", b"v")
        child.kv_store(acc).set(b"a", b"b")
        assert ctx.kv_store(ns).get(b"k") is None

        commit()
        assert ctx.kv_store(ns).get(b"k") == b"v"
        assert ctx.kv_store(acc).get(b"a") == b"b"

    def test_context_cache_without_commit_is_rollback(self):
        ms = MultiStore()
        ns = StoreKey("ns")
        ms.mount(ns)
        ctx = Context(multi_store=ms, chain_id="test")

        child, _ = ctx.cache()
        child.kv_store(ns).set(b"k", b"v")
        assert child.chain_id == "test"
        assert not ctx.kv_store(ns).has(b"k")
