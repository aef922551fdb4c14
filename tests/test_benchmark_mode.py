import logging
from pathlib import Path

from typewords._bench import run_benchmark, write_synthetic_wordlist
from typewords._checkutil import check_wordlist_file
from typewords.cli import main


def test_benchmark_runs_quickly(capsys):
    # Tiny corpus and draw count to keep runtime low in CI
    rc = main(["--benchmark", "--bench-draws", "200", "--bench-corpus", "500"])
    assert rc == 0
    out = capsys.readouterr().out
    assert out.startswith("mode,draws,")
    for mode in ("random", "sequential", "book"):
        assert f"\n{mode}," in out


def test_synthetic_wordlist_is_sorted(tmp_path: Path):
    path = write_synthetic_wordlist(tmp_path / "w.txt", 300, seed=5)
    assert len(path.read_text(encoding="ascii").splitlines()) == 300
    assert check_wordlist_file(path) == []


def test_benchmark_caps_sequential_draws(tmp_path: Path):
    results, best = run_benchmark(1000, logging.getLogger("test"), corpus_words=100)
    by_mode = {r.mode: r for r in results}
    assert by_mode["random"].draws == 1000
    assert by_mode["sequential"].draws == 100
    assert best in results


def test_benchmark_on_short_wordlist_file(tmp_path: Path, capsys):
    words = tmp_path / "words.txt"
    words.write_text("ant\nbee\ncat\ndog\n", encoding="ascii")
    rc = main(["--benchmark", "-f", str(words), "--bench-draws", "100"])
    assert rc == 0
    captured = capsys.readouterr()
    assert "temporary word list" not in captured.err
    rows = {line.split(",")[0]: line.split(",") for line in captured.out.splitlines() if "," in line}
    assert rows["random"][1] == "100"
    assert rows["sequential"][1] == "4"
    assert rows["book"][1] == "4"


def test_benchmark_records_words_served(tmp_path: Path):
    words = tmp_path / "words.txt"
    words.write_text("ant\nbee\ncat\ndog\n", encoding="ascii")
    results, _ = run_benchmark(50, logging.getLogger("test"), wordlist_file=words)
    by_mode = {r.mode: r for r in results}
    assert by_mode["random"].draws == 50
    assert by_mode["sequential"].draws == 4
    assert by_mode["book"].draws == 4
