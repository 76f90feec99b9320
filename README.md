# probebench

probebench measures how a fixed-size string hash table behaves as it fills up. It compares three collision strategies:

- **Linear probing.** Open addressing with a fixed step of 3.
- **Double hashing.** Open addressing where a second hash function sets the step.
- **Separate chaining.** Each bucket is a red-black tree.

Each strategy is run with two hash functions. `mod_hash` is a 64-bit FNV-1a hash reduced modulo the table size. `poly_hash` is a polynomial rolling hash. The load factors tested are 0.4, 0.5, 0.6, 0.7, 0.8 and 0.9.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
probebench [--size N] [--words N] [--repeats N] [--seed N] [--log FILE]
```

The options are:

- `--size` sets the table size before it is rounded up to the next prime. The default is 10000.
- `--words` sets how many random lowercase words of 5 to 10 letters are generated. The default is 10000.
- `--repeats` sets how many times each search set is searched. The default is 1000.
- `--seed` seeds the random generator, so that runs can be repeated.
- `--log` writes the report to FILE as well as to standard output.

For every load factor, six configurations are run:

- linear probing with `mod_hash`;
- linear probing with `poly_hash`;
- double hashing with `mod_hash` and `poly_hash`;
- double hashing with `poly_hash` and `mod_hash`;
- chaining with `mod_hash`;
- chaining with `poly_hash`.

The first `floor(load_factor * size)` words are inserted into the table. Each report block gives the table size and the number of words inserted.

Next come the insert collision figures, all under the label `Insert Total Collisions`. For open addressing, the first such line is the total number of collisions met on the way to each slot. The second is the number of inserts that met at least one collision. For chaining there is only one line: the number of inserts that landed in a bucket that was not empty.

A random tenth of the inserted words is then searched. Half of that tenth is removed, and a mix of removed and still-present words is searched. For both searches the report gives two figures:

- the average time, in microseconds, per key over all repeats;
- the average number of probes per search.

A chaining search always counts as one probe.

If a load factor needs more words than were generated, the command prints an error and exits with status 1.

## Library use

```python
import random

from probebench.hashing import next_prime, poly_hash, mod_hash, generate_words
from probebench.hashtable import CollisionStrategy, HashTable
from probebench.benchmark import benchmark, format_result

size = next_prime(1000)
table = HashTable(
    size,
    CollisionStrategy.DOUBLE_HASHING,
    lambda s: poly_hash(s, size),
    lambda s: mod_hash(s, size),
)
collisions = table.insert("hello")
probes = table.search("hello")
assert "hello" in table

rng = random.Random(1)
words = generate_words(1000, rng)
result = benchmark(
    size, 0.5, CollisionStrategy.LINEAR_PROBING, words,
    lambda s: poly_hash(s, size), None, 100, rng,
)
print(format_result(result))
```

The modules are:

- `probebench.hashing` provides prime helpers: `is_prime` and `next_prime`. It also provides word generation with `random_string` and `generate_words`, and the hash functions `mod_hash`, `poly_hash` and `second_hash`.
- `probebench.hashtable` provides `HashTable` and `CollisionStrategy`.
  - `insert` returns the number of collisions. With chaining it returns 0 for a new key and 1 for a key that is already present.
  - `search` returns the number of probes.
  - `remove` leaves a tombstone in open tables.
  - `in` tests whether a key is present.
  - `chain_length` and `is_bucket_empty` report on chaining buckets.
- `probebench.rbtree.RedBlackTree` is the ordered set used for chaining buckets. It supports `insert`, `delete`, `search`, `is_empty`, `len()`, `in` and in-order iteration.
- `probebench.dualstream.DualStream` writes the same text to a console stream and a file stream. Its colour methods `color_red`, `color_white` and `reset_color` write only to the console.
- `probebench.benchmark` provides `benchmark`, which returns a `BenchmarkResult`. It also provides `format_result` and the command's `main`.

## Limits

Tables never grow. An open table that is full reports a number of collisions equal to its capacity and does not store the key. Nothing is persisted between runs: the report is the only output.