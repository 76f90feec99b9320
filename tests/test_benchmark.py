import math
import random
from functools import partial

import pytest

from probebench.benchmark import BenchmarkResult, benchmark, format_result, main
from probebench.hashing import mod_hash, poly_hash
from probebench.hashtable import CollisionStrategy


def _words(count):
    return [f"w{i:04d}" for i in range(count)]


def _zero(_key):
    return 0


def test_insert_count_follows_load_factor():
    words = _words(200)
    result = benchmark(101, 0.5, CollisionStrategy.LINEAR_PROBING, words,
                       partial(mod_hash, table_size=101), repeats=1,
                       rng=random.Random(1))
    assert result.unique_inserts == math.floor(0.5 * 101)
    assert result.table_size == 101
    assert result.load_factor == 0.5


def test_duplicates_are_counted_in_inserts():
    words = ["same"] * 40
    result = benchmark(53, 0.5, CollisionStrategy.LINEAR_PROBING, words,
                       partial(mod_hash, table_size=53), repeats=1,
                       rng=random.Random(2))
    assert result.unique_inserts == 26
    assert result.insert_collisions == 0
    assert result.insert_probes == 0


def test_constant_hash_linear_every_later_insert_collides():
    words = _words(30)
    result = benchmark(31, 0.5, CollisionStrategy.LINEAR_PROBING, words, _zero,
                       repeats=1, rng=random.Random(3))
    assert result.insert_collisions == result.unique_inserts - 1
    assert result.insert_probes >= result.insert_collisions


def test_constant_hash_chaining_counts_nonempty_bucket():
    words = _words(30)
    result = benchmark(31, 0.9, CollisionStrategy.SEPARATE_CHAINING_RBT, words,
                       _zero, repeats=1, rng=random.Random(4))
    assert result.insert_collisions == result.unique_inserts - 1
    assert result.insert_probes == 0


def test_chaining_search_always_one_probe():
    words = _words(500)
    result = benchmark(211, 0.8, CollisionStrategy.SEPARATE_CHAINING_RBT, words,
                       partial(poly_hash, table_size=211), repeats=3,
                       rng=random.Random(5))
    assert result.avg_search_probes == 1.0
    assert result.avg_mixed_probes == 1.0


def test_open_addressing_search_takes_at_least_one_probe():
    words = _words(500)
    h1 = partial(mod_hash, table_size=211)
    h2 = partial(poly_hash, table_size=211)
    result = benchmark(211, 0.7, CollisionStrategy.DOUBLE_HASHING, words, h1, h2,
                       repeats=2, rng=random.Random(6))
    assert result.avg_search_probes >= 1.0
    assert result.avg_mixed_probes >= 1.0
    assert result.avg_search_time_us >= 0.0


def test_seeded_runs_agree_on_probes():
    words = _words(400)
    h1 = partial(poly_hash, table_size=199)
    runs = [
        benchmark(199, 0.6, CollisionStrategy.LINEAR_PROBING, words, h1,
                  repeats=1, rng=random.Random(7))
        for _ in range(2)
    ]
    assert runs[0].insert_probes == runs[1].insert_probes
    assert runs[0].avg_search_probes == runs[1].avg_search_probes
    assert runs[0].avg_mixed_probes == runs[1].avg_mixed_probes


def test_too_few_searches_gives_nan():
    words = _words(5)
    result = benchmark(11, 0.4, CollisionStrategy.LINEAR_PROBING, words, _zero,
                       repeats=1, rng=random.Random(8))
    assert result.unique_inserts == 4
    assert result.insert_collisions == 3
    assert math.isnan(result.avg_search_probes) is True
    assert math.isnan(result.avg_mixed_probes) is True


def test_not_enough_words_raises():
    with pytest.raises(ValueError):
        benchmark(101, 0.9, CollisionStrategy.LINEAR_PROBING, _words(10), _zero,
                  repeats=1)


def test_non_positive_repeats_raises():
    with pytest.raises(ValueError):
        benchmark(11, 0.4, CollisionStrategy.LINEAR_PROBING, _words(10), _zero,
                  repeats=0)


def _result(strategy):
    return BenchmarkResult(
        strategy=strategy, table_size=10007, load_factor=0.4,
        unique_inserts=4002, insert_probes=17, insert_collisions=9,
        avg_search_time_us=0.5, avg_search_probes=1.25,
        avg_mixed_time_us=0.75, avg_mixed_probes=1.5,
    )


def test_format_open_addressing_block():
    text = format_result(_result(CollisionStrategy.LINEAR_PROBING))
    assert text.startswith("\n[Mode=Linear] Table Size: 10007, Total Unique Inserts: 4002\n")
    assert "Insert Total Collisions: 17\n" in text
    assert "Insert Total Collisions: 9\n" in text
    assert "Search Before Deletion: Avg Time (us): 0.5, Avg Probes: 1.25\n" in text
    assert text.endswith("Search After Deletion: Avg Time (us): 0.75, Avg Probes: 1.5\n")


def test_format_chaining_has_single_collision_line():
    text = format_result(_result(CollisionStrategy.SEPARATE_CHAINING_RBT))
    assert "[Mode=Chaining]" in text
    assert text.count("Insert Total Collisions") == 1
    assert "Insert Total Collisions: 9\n" in text


def test_format_double_mode_name():
    text = format_result(_result(CollisionStrategy.DOUBLE_HASHING))
    assert "[Mode=Double]" in text


def test_main_runs_every_configuration(capsys):
    code = main(["--size", "50", "--words", "60", "--seed", "1", "--repeats", "1"])
    out = capsys.readouterr().out
    assert code == 0
    assert out.count("[Mode=") == 36
    assert "=== Load Factor: 0.4 ===" in out
    assert "=== Load Factor: 0.9 ===" in out
    assert "--- DOUBLE with polyHash + modHash ---" in out
    assert "--- CHAINING with modHash ---" in out


def test_main_log_matches_console(tmp_path, capsys):
    log = tmp_path / "report.txt"
    code = main(["--size", "30", "--words", "40", "--seed", "2", "--repeats", "1",
                 "--log", str(log)])
    out = capsys.readouterr().out
    assert code == 0
    assert log.read_text(encoding="utf-8") == out


def test_main_reports_too_few_words(capsys):
    code = main(["--size", "100", "--words", "10", "--seed", "3", "--repeats", "1"])
    err = capsys.readouterr().err
    assert code == 1
    assert "needs" in err