"""
Per-operation cost of HashMap compared with Python's built-in dict.

HashMap is keyed by records through injected hash/equality functions; the
dict baseline keys on equivalent tuples.  Each operation is reported as
nanoseconds per key, so sizes can be compared directly, together with the
HashMap/dict ratio.  A second table shows how lookups degrade as the hash
function collapses keys into fewer buckets.
"""

import statistics
import time
from typing import Callable, Dict, List

from pyhashkey import HashMap, hash_tuple


class Record:
    __slots__ = ('name', 'index')

    def __init__(self, name: str, index: int):
        self.name = name
        self.index = index


def hash_record(r: Record) -> int:
    return hash_tuple(r.name, r.index)


def equal_records(a: Record, b: Record) -> bool:
    return a.index == b.index and a.name == b.name


def ns_per_op(func: Callable[[], object], ops: int, runs: int = 5) -> float:
    """Median nanoseconds per operation over ``runs`` timed calls, after one warmup."""
    func()
    samples = []
    for _ in range(runs):
        start = time.perf_counter_ns()
        func()
        samples.append((time.perf_counter_ns() - start) / ops)
    return statistics.median(samples)


def build_map(records: List[Record], hash_key=hash_record) -> HashMap:
    m = HashMap(hash_key, equal_records)
    for r in records:
        m.set(r, r.index)
    return m


def measure_operations(n: int) -> Dict[str, tuple]:
    """Return {operation: (dict ns/op, HashMap ns/op)} for ``n`` keys."""
    records = [Record(f'key{i}', i) for i in range(n)]
    probes = [Record(f'key{i}', i) for i in range(n)]
    d = {(r.name, r.index): r.index for r in records}
    m = build_map(records)
    doomed = probes[::10]

    def dict_delete():
        d_copy = d.copy()
        for r in doomed:
            del d_copy[(r.name, r.index)]

    def hmap_delete():
        m_copy = m.clone()
        for r in doomed:
            m_copy.delete(r)

    return {
        'set': (ns_per_op(lambda: {(r.name, r.index): r.index for r in records}, n),
                ns_per_op(lambda: build_map(records), n)),
        'get': (ns_per_op(lambda: [d.get((r.name, r.index)) for r in probes], n),
                ns_per_op(lambda: [m.get(r) for r in probes], n)),
        'iterate': (ns_per_op(lambda: list(d.values()), n),
                    ns_per_op(lambda: list(m.values()), n)),
        'copy+delete': (ns_per_op(dict_delete, n),
                        ns_per_op(hmap_delete, n)),
    }


def measure_collisions(n: int, bucket_counts: List[int]) -> Dict[int, float]:
    """HashMap lookup ns/op when keys are spread over ``buckets`` hash codes."""
    records = [Record(f'key{i}', i) for i in range(n)]
    probes = [Record(f'key{i}', i) for i in range(n)]
    result = {}
    for buckets in bucket_counts:
        m = build_map(records, hash_key=lambda r, b=buckets: r.index % b)
        result[buckets] = ns_per_op(lambda: [m.get(r) for r in probes], n)
    return result


def run_benchmark_suite(sizes: List[int]) -> None:
    print(f"{'n':>9}  {'operation':<12} {'dict ns/op':>11} {'HashMap ns/op':>14} {'ratio':>7}")
    print('-' * 58)
    for n in sizes:
        for op, (dict_ns, hmap_ns) in measure_operations(n).items():
            print(f"{n:>9,}  {op:<12} {dict_ns:>11.1f} {hmap_ns:>14.1f} {hmap_ns / dict_ns:>6.1f}x")

    n = 2000
    print(f"\nLookup cost by number of distinct hash codes (n={n:,})")
    print('-' * 40)
    for buckets, hmap_ns in measure_collisions(n, [n, 100, 10, 1]).items():
        print(f"{buckets:>9,} codes  {hmap_ns:>12.1f} ns/op")


if __name__ == '__main__':
    run_benchmark_suite([100, 1000, 100000])
