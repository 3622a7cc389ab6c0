# opsyskit

A small toolkit of containers and process tools:

- `LListQueue`, `LListStack` and `LListPrioQueue`: FIFO queue, LIFO stack
  and a priority queue ordered by a comparison function.
- `HashSet` and `LListSet`: sets driven by a user-supplied comparison
  function (and, for `HashSet`, a hash function returning a bucket in
  `[0, N)`).
- `MString`: a mutable string with append, insert, replace, translate by
  character class, split and friends; `charclass` holds the character-class
  tests and splitting rules it uses.
- `sort`: a stable in-place sort driven by a three-way comparison function.
- `p1fxns`: helpers for reading lines (`read_line`), splitting quoted words
  (`get_word`), converting numbers (`atoi`, `itoa`) and packing fields
  (`pack`).
- Process launchers and a round-robin scheduler that run commands read from
  a file, one command per line.

## Installing

    pip install .

Tests:

    pip install .[test]
    pytest

## Using the containers

    from opsyskit.llist_queue import LListQueue
    from opsyskit.llist_prio_queue import LListPrioQueue
    from opsyskit.hashset import HashSet

    def cmp(a, b):
        return (a > b) - (a < b)

    q = LListQueue(None)
    q.enqueue("a")
    q.enqueue("b")
    assert q.dequeue() == "a"

    pq = LListPrioQueue(cmp, None, None)
    pq.insert(5, "five")
    pq.insert(1, "one")
    assert pq.remove_min() == (1, "one")

    s = HashSet(None, cmp, 0, 0.0, lambda x, n: x % n)
    s.add(42)
    assert 42 in s

Removing from an empty queue, stack or priority queue raises `IndexError`
rather than returning a status flag. `HashSet.add`, `remove` and the same
methods of `LListSet` return `True` or `False`.

## Commands

Run commands from a file (or standard input), one per line. The quantum in
milliseconds comes from `-q` or from the `USPS_QUANTUM_MSEC` environment
variable:

    opsyskit-uspsv1 -q 100 commands.txt
    opsyskit-uspsv2 -q 100 commands.txt
    opsyskit-uspsv3 -q 100 commands.txt
    opsyskit-uspsv4 -q 100 commands.txt

`opsyskit-uspsv1` starts every command and waits for them; `opsyskit-uspsv2`
holds every command until all are started, then releases, stops and
continues them together; `opsyskit-uspsv3` schedules them round robin;
`opsyskit-uspsv4` also prints a status table built from `/proc/<pid>/stat`
before each time slice.

Sample workloads to schedule, running for `-m` minutes:

    opsyskit-cpubound -m 1 -n worker
    opsyskit-iobound -m 1 -n writer

## What is not included

There is no command-line driver for exercising the sets; use `HashSet` and
`LListSet` from Python directly.