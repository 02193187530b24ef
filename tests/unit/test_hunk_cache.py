"""Tests for the per-comparison hunk cache."""

import threading
import time

import pytest

from webrev.errors import MalformedPatchError
from webrev.hunks import Hunk, HunkCache
import webrev.hunks.cache as cache_module


PATCH = "@@ -1,3 +1,3 @@\n a\n-b\n+B\n c\n"
BASE = ["a", "b", "c"]
HEAD = ["a", "B", "c"]


class TestHunkCache:
    """Tests for HunkCache."""

    def test_minimal(self):
        cache = HunkCache([PATCH])

        assert cache.minimal(0) == (Hunk(2, ("-b",), 2, ("+B",)),)
        assert len(cache) == 1

    def test_minimal_parsed_once(self, monkeypatch: pytest.MonkeyPatch):
        calls = []
        real_parse = cache_module.parse_patch

        def counting_parse(text):
            calls.append(text)
            return real_parse(text)

        monkeypatch.setattr(cache_module, "parse_patch", counting_parse)
        cache = HunkCache([PATCH])

        first = cache.minimal(0)
        second = cache.minimal(0)

        assert first is second
        assert len(calls) == 1

    def test_file_without_patch(self):
        cache = HunkCache([None, ""])

        assert cache.minimal(0) == ()
        assert cache.minimal(1) == ()
        assert cache.expanded(0, 3, [], []) == ()

    def test_unknown_index(self):
        with pytest.raises(IndexError):
            HunkCache([PATCH]).minimal(5)

    def test_expanded_is_memoized(self):
        cache = HunkCache([PATCH])

        first = cache.expanded(0, 1, BASE, HEAD)
        second = cache.expanded(0, 1, BASE, HEAD)

        assert first is second
        assert first == (Hunk(1, (" a", "-b", " c"), 1, (" a", "+B", " c")),)

    def test_expanded_per_context_size(self):
        cache = HunkCache([PATCH])

        assert cache.expanded(0, 1, BASE, HEAD) is not cache.expanded(0, 2, BASE, HEAD)

    def test_zero_context_returns_minimal(self):
        cache = HunkCache([PATCH])

        assert cache.expanded(0, 0, BASE, HEAD) is cache.minimal(0)

    def test_malformed_patch_is_not_cached(self):
        cache = HunkCache(["@@ -1 +1 @@\nbroken\n"])

        with pytest.raises(MalformedPatchError):
            cache.minimal(0)
        with pytest.raises(MalformedPatchError):
            cache.minimal(0)

    def test_clear(self):
        cache = HunkCache([PATCH])
        first = cache.expanded(0, 1, BASE, HEAD)

        cache.clear()

        assert cache.expanded(0, 1, BASE, HEAD) is not first

    def test_concurrent_callers_expand_once(self, monkeypatch: pytest.MonkeyPatch):
        calls = []
        real_expand = cache_module.expand_context

        def slow_expand(*args):
            calls.append(args[1])
            time.sleep(0.05)
            return real_expand(*args)

        monkeypatch.setattr(cache_module, "expand_context", slow_expand)
        cache = HunkCache([PATCH])
        results = []

        def worker():
            results.append(cache.expanded(0, 2, BASE, HEAD))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert calls == [2]
        assert all(result is results[0] for result in results)

    def test_clear_during_expansion_keeps_key_locked(self, monkeypatch: pytest.MonkeyPatch):
        """A caller arriving after clear() waits for the expansion already running."""
        calls = []
        started = threading.Event()
        real_expand = cache_module.expand_context

        def slow_expand(*args):
            calls.append(args[1])
            started.set()
            time.sleep(0.1)
            return real_expand(*args)

        monkeypatch.setattr(cache_module, "expand_context", slow_expand)
        cache = HunkCache([PATCH])
        results = []

        def worker():
            results.append(cache.expanded(0, 2, BASE, HEAD))

        first = threading.Thread(target=worker)
        first.start()
        assert started.wait(timeout=5)
        cache.clear()
        second = threading.Thread(target=worker)
        second.start()
        first.join()
        second.join()

        assert calls == [2]
        assert results[0] is results[1]
