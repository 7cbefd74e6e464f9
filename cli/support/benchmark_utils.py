from __future__ import annotations

import json
import time
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Tuple

import numpy as np
from numpy.random import Generator, default_rng

from treelist import TreeList
from treelist import config as tl_config
from treelist.logging import get_logger

LOGGER = get_logger("cli.benchmark")

BENCHMARK_SCHEMA_ID = "treelist.benchmark.v1"


@dataclass(frozen=True)
class BenchmarkResult:
    inserted: int
    removed: int
    insert_seconds: float
    remove_seconds: float
    final_size: int
    height: int
    height_bound: float

    @property
    def inserts_per_second(self) -> float:
        return self.inserted / self.insert_seconds if self.insert_seconds > 0 else 0.0

    @property
    def removes_per_second(self) -> float:
        return self.removed / self.remove_seconds if self.remove_seconds > 0 else 0.0


def generate_values(rng: Generator, count: int, *, high: int | None = None) -> np.ndarray:
    """Draw ``count`` integers; a narrow ``high`` forces many duplicates."""

    upper = high if high is not None else max(count * 4, 1)
    return rng.integers(0, upper, size=count, dtype=np.int64)


def run_benchmark(
    *,
    count: int,
    remove_fraction: float,
    seed: int | None = None,
) -> Tuple[TreeList[int], BenchmarkResult]:
    if count < 0:
        raise ValueError("count must be non-negative")
    if not 0.0 <= remove_fraction <= 1.0:
        raise ValueError("remove_fraction must lie in [0, 1]")
    resolved_seed = tl_config.runtime_config().effective_seed if seed is None else seed
    rng = default_rng(resolved_seed)
    values = [int(v) for v in generate_values(rng, count)]

    tree: TreeList[int] = TreeList()
    start = time.perf_counter()
    for value in values:
        tree.add(value)
    insert_seconds = time.perf_counter() - start

    removals = int(count * remove_fraction)
    victims = rng.permutation(count)[:removals]
    start = time.perf_counter()
    for idx in victims:
        tree.remove(values[int(idx)])
    remove_seconds = time.perf_counter() - start

    stats = tree.stats()
    result = BenchmarkResult(
        inserted=count,
        removed=removals,
        insert_seconds=insert_seconds,
        remove_seconds=remove_seconds,
        final_size=stats.size,
        height=stats.height,
        height_bound=stats.height_bound,
    )
    LOGGER.debug("Benchmark finished: %s", result)
    return tree, result


def write_result_artifact(path: Path, *, seed: int | None, result: BenchmarkResult) -> None:
    payload: dict[str, Any] = {
        "schema_id": BENCHMARK_SCHEMA_ID,
        "timestamp": time.time(),
        "seed": seed,
        **asdict(result),
        "inserts_per_second": result.inserts_per_second,
        "removes_per_second": result.removes_per_second,
    }
    path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")


@dataclass(frozen=True)
class SelfCheckResult:
    operations: int
    adds: int
    removes: int
    lookups: int
    final_size: int


def run_self_check(*, operations: int, seed: int | None = None) -> SelfCheckResult:
    """Apply random operations and validate against a plain sorted list after each.

    Raises ``InvariantError`` or ``AssertionError`` on the first divergence.
    """

    resolved_seed = tl_config.runtime_config().effective_seed if seed is None else seed
    rng = default_rng(resolved_seed)
    tree: TreeList[int] = TreeList()
    mirror: list[int] = []
    counts = {"add": 0, "remove": 0, "get": 0}
    for _ in range(operations):
        action = rng.choice(["add", "remove", "get"])
        if action == "add" or not mirror:
            value = int(rng.integers(0, 64))
            tree.add(value)
            mirror.append(value)
            mirror.sort()
            counts["add"] += 1
        elif action == "remove":
            value = int(rng.integers(0, 64))
            expected = value in mirror
            if expected:
                mirror.remove(value)
            if tree.remove(value) != expected:
                raise AssertionError(f"remove({value}) disagreed with reference list")
            counts["remove"] += 1
        else:
            pos = int(rng.integers(0, len(mirror)))
            if tree.get(pos) != mirror[pos]:
                raise AssertionError(f"get({pos}) returned {tree.get(pos)}, expected {mirror[pos]}")
            counts["get"] += 1
        tree.validate()
    if tree.to_list() != mirror:
        raise AssertionError("final in-order sequence diverged from reference list")
    return SelfCheckResult(
        operations=operations,
        adds=counts["add"],
        removes=counts["remove"],
        lookups=counts["get"],
        final_size=len(tree),
    )


__all__ = [
    "BENCHMARK_SCHEMA_ID",
    "BenchmarkResult",
    "SelfCheckResult",
    "generate_values",
    "run_benchmark",
    "run_self_check",
    "write_result_artifact",
]
