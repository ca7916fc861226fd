"""
test_benchmark_density.py ─ density benchmark smoke test
$ python test_benchmark_density.py      (or: pytest)
"""

import benchmark_density as bd


def test_benchmark_rows():
    densities = [0.25, 1.0]
    results = bd.benchmark(8, densities, repeats=2, seed=1)

    assert [r["density"] for r in results] == densities
    assert [r["M"] for r in results] == [14, 56]
    for r in results:
        assert r["draws_per_edge"] >= 1.0, r
        assert 0.0 <= r["rejection_rate"] < 1.0, r
        assert r["time_s"] >= 0.0, r
    # saturating the graph costs more draws per accepted edge
    assert results[1]["draws_per_edge"] > results[0]["draws_per_edge"]


def test_main_without_plot(capsys):
    results = bd.main(["--nodes", "6", "--repeats", "1", "--no-plot"])
    assert len(results) == 8
    assert "density, M, time_s" in capsys.readouterr().out


if __name__ == "__main__":
    test_benchmark_rows()
    print("✅ Density benchmark test passed.")
