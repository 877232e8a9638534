import importlib.util
import os

import pandas as pd

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


def _load_main():
    path = os.path.join(ROOT, "main.py")
    spec = importlib.util.spec_from_file_location("demo_main", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_demo_creates_expected_output_files(tmp_path, capsys):
    outdir = tmp_path / "demo"
    demo = _load_main()

    status = demo.main(
        ["--n", "40", "--seed", "3", "--distribution", "skewed"]
        + ["--outdir", str(outdir)]
    )

    assert status == 0
    assert (outdir / "histogram.png").exists()
    table = pd.read_csv(outdir / "results_summary.csv")
    assert {
        "descriptive",
        "confidence_interval",
        "one_sample_ttest",
        "two_sample_ttest",
    } == set(table["Analysis"])

    printed = capsys.readouterr().out
    assert "Descriptive Statistics" in printed
    assert "95% Confidence Interval for the Mean" in printed
    assert "Two-sample t-test" in printed


def test_demo_stops_on_single_observation(tmp_path):
    demo = _load_main()
    assert demo.main(["--n", "1", "--outdir", str(tmp_path / "single")]) == 1
