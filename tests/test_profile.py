# tests/test_profile.py
from catalog_autocompleter.core.trie import Trie
from catalog_autocompleter.profiling.profile import bench, main, summarize, synthetic_catalog


def test_synthetic_catalog_is_reproducible():
    a = synthetic_catalog(50, seed=1)
    assert a == synthetic_catalog(50, seed=1)
    assert all(3 <= len(w) <= 12 for w in a)


def test_bench_and_summarize():
    t = Trie()
    t.load_many(synthetic_catalog(200))
    times = bench(t, ["a", "b", "zz"], runs=20)
    s = summarize(times)
    assert s["count"] == 20
    assert s["max_ms"] >= s["median_ms"] >= 0


def test_summarize_empty():
    assert summarize([]) == {"count": 0}


def test_main_skips_words_with_terminator(tmp_path, capsys):
    words = tmp_path / "catalog.txt"
    words.write_text("ann\nca$h\nbob\n", encoding="utf8")
    s = main(["--words", str(words), "--iters", "5"])
    assert s["count"] == 5
    out = capsys.readouterr().out
    assert "loaded 2 words" in out
    assert "1 skipped" in out
