"""Tests for the directory resolution cache."""

from __future__ import annotations

import os
import threading
from pathlib import Path

import pytest

from accessorgen.errors import LoadError
from accessorgen.golang.loader import DirectoryResolution, load_directory
from accessorgen.stores import ResolutionCache


class CountingLoader:
    """Loader double that counts invocations and can block or fail."""

    def __init__(self, gate: threading.Event | None = None, fail: bool = False) -> None:
        self.calls: list[Path] = []
        self._gate = gate
        self._fail = fail
        self._lock = threading.Lock()

    def __call__(self, path: Path) -> DirectoryResolution:
        with self._lock:
            self.calls.append(path)
        if self._gate is not None:
            self._gate.wait(timeout=5)
        if self._fail:
            raise LoadError(path, "boom")
        return load_directory(path)


def test_resolve_returns_identical_instance_and_loads_once(go_package) -> None:
    directory = go_package.write({"a.go": "package a\n\ntype A struct{ N *int }\n"})
    loader = CountingLoader()
    cache = ResolutionCache(loader=loader)

    first = cache.resolve(directory)
    second = cache.resolve(directory)

    assert first is second
    assert len(loader.calls) == 1
    assert cache.loads == 1
    assert directory in cache
    assert len(cache) == 1


def test_resolve_normalises_relative_paths(go_package, monkeypatch) -> None:
    directory = go_package.write({"a.go": "package a\n"})
    loader = CountingLoader()
    cache = ResolutionCache(loader=loader)
    monkeypatch.chdir(directory.parent)

    relative = cache.resolve(directory.name)
    absolute = cache.resolve(directory)

    assert relative is absolute
    assert len(loader.calls) == 1
    assert loader.calls[0].is_absolute()
    assert cache.paths() == [os.path.abspath(directory)]


def test_distinct_directories_get_distinct_entries(go_package) -> None:
    one = go_package.write({"a.go": "package one\n"}, package="one")
    two = go_package.write({"b.go": "package two\n"}, package="two")
    cache = ResolutionCache()

    assert cache.resolve(one) is not cache.resolve(two)
    assert cache.loads == 2


def test_concurrent_requests_for_same_path_load_once(go_package) -> None:
    directory = go_package.write({"a.go": "package a\n"})
    gate = threading.Event()
    loader = CountingLoader(gate=gate)
    cache = ResolutionCache(loader=loader)
    results: list[DirectoryResolution] = []

    def worker() -> None:
        results.append(cache.resolve(directory))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    gate.set()
    for thread in threads:
        thread.join(timeout=5)

    assert len(results) == 8
    assert all(result is results[0] for result in results)
    assert len(loader.calls) == 1


def test_failed_loads_propagate_and_are_not_cached(go_package) -> None:
    directory = go_package.write({"a.go": "package a\n"})
    loader = CountingLoader(fail=True)
    cache = ResolutionCache(loader=loader)

    with pytest.raises(LoadError):
        cache.resolve(directory)
    with pytest.raises(LoadError):
        cache.resolve(directory)

    assert len(loader.calls) == 2
    assert directory not in cache
    assert cache.loads == 0


def test_contains_rejects_non_paths() -> None:
    assert 42 not in ResolutionCache()
