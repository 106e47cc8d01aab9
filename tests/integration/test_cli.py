"""Integration tests for CLI."""

import json

import pytest
from click.testing import CliRunner

from libcbench.cli import LibcBenchCLI, cli


@pytest.fixture
def runner():
    """Create Click CLI runner."""
    return CliRunner()


@pytest.fixture
def studies(write_study):
    """Two baseline files sharing a study name and one experiment file."""
    return [
        write_study(
            "base1.json",
            study_name="baseline",
            function="libc::memcpy",
            size_distribution_name="memcpy Google A",
            measurements=[0.5, 0.25],
        ),
        write_study(
            "exp.json",
            study_name="experiment",
            function="libc::memcpy",
            size_distribution_name="memcpy Google A",
            measurements=[0.25],
        ),
        write_study(
            "base2.json",
            study_name="baseline",
            function="libc::memcpy",
            is_sweep_mode=True,
            num_trials=1,
            measurements=[2.0],
        ),
    ]


class TestClickCLI:
    """Test Click CLI interface."""

    def test_cli_help(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Compare LLVM libc benchmark results" in result.output
        assert "--benchstat" in result.output
        assert "--export-dir" in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_no_arguments(self, runner):
        result = runner.invoke(cli, [])
        assert result.exit_code == 2
        assert "no study files given" in result.output

    def test_export_dir_needs_files(self, runner, tmp_path):
        result = runner.invoke(cli, ["--export-dir", str(tmp_path / "out"), "-alpha=0.01"])
        assert result.exit_code == 2
        assert "--export-dir needs at least one study file" in result.output
        assert not (tmp_path / "out").exists()

    def test_mutually_exclusive_verbose_quiet(self, runner, studies):
        result = runner.invoke(cli, ["--verbose", "--quiet", str(studies[0])])
        assert result.exit_code == 2
        assert "mutually exclusive" in result.output

    def test_mutually_exclusive_quiet_log_level(self, runner, studies):
        result = runner.invoke(cli, ["--quiet", "--log-level", "DEBUG", str(studies[0])])
        assert result.exit_code == 2
        assert "mutually exclusive" in result.output


class TestCompare:
    """Test running benchstat through the CLI."""

    def test_merges_and_forwards_flags(self, runner, studies, fake_benchstat, tmp_path):
        report = tmp_path / "report.txt"
        args = ["--benchstat", str(fake_benchstat), f"-o={report}", "-alpha=0.01"]
        args += [str(p) for p in studies]

        result = runner.invoke(cli, args)

        assert result.exit_code == 0, result.output
        assert report.read_text().splitlines() == [
            "flag -alpha=0.01",
            "baseline: Benchmarkmemcpy/Google_A 1 500000000 ns/op",
            "baseline: Benchmarkmemcpy/Google_A 1 250000000 ns/op",
            "baseline: Benchmarkmemcpy/1 1 2000000000 ns/op",
            "experiment: Benchmarkmemcpy/Google_A 1 250000000 ns/op",
        ]

    def test_flags_may_follow_files(self, runner, studies, fake_benchstat, tmp_path):
        report = tmp_path / "report.txt"
        args = ["--benchstat", str(fake_benchstat), str(studies[1]), f"-o={report}", "--delta-test=none"]

        result = runner.invoke(cli, args)

        assert result.exit_code == 0, result.output
        assert report.read_text().splitlines()[0] == "flag --delta-test=none"

    def test_flags_only_reach_benchstat(self, runner, fake_benchstat, tmp_path):
        report = tmp_path / "report.txt"
        result = runner.invoke(cli, ["--benchstat", str(fake_benchstat), f"-o={report}", "-h"])

        assert result.exit_code == 0, result.output
        assert report.read_text().splitlines() == ["flag -h"]

    def test_unencodable_function_name(self, runner, write_study, fake_benchstat, tmp_path):
        report = tmp_path / "report.txt"
        # json.dumps escapes the lone surrogate as \ud800
        path = write_study(function="libc::mem\ud800cpy", size_distribution_name="uniform", measurements=[1.0])

        result = runner.invoke(cli, ["--benchstat", str(fake_benchstat), f"-o={report}", str(path)])

        assert result.exit_code == 0, result.output
        assert report.read_text().splitlines() == ["baseline: Benchmarkmem?cpy/uniform 1 1000000000 ns/op"]

    def test_non_finite_measurement(self, runner, tmp_path, fake_benchstat):
        path = tmp_path / "nan.json"
        path.write_text('{"StudyName": "s", "Measurements": [1e-9, NaN]}')

        result = runner.invoke(cli, ["--benchstat", str(fake_benchstat), str(path)])

        assert result.exit_code == 1
        assert "nan.json" in result.output
        assert "NaN" in result.output

    def test_benchstat_failure(self, runner, studies, fake_benchstat):
        result = runner.invoke(cli, ["--benchstat", str(fake_benchstat), "-exit=2", str(studies[0])])
        assert result.exit_code == 1
        assert "exited with status 2" in result.output

    def test_benchstat_missing(self, runner, studies):
        result = runner.invoke(cli, ["--benchstat", "benchstat-does-not-exist", str(studies[0])])
        assert result.exit_code == 1
        assert "not found in PATH" in result.output

    def test_bad_file_aborts_before_benchstat(self, runner, studies, fake_benchstat, tmp_path):
        report = tmp_path / "report.txt"
        bad = tmp_path / "bad.json"
        bad.write_text("{")

        result = runner.invoke(
            cli, ["--benchstat", str(fake_benchstat), f"-o={report}", str(studies[0]), str(bad)]
        )

        assert result.exit_code == 1
        assert "failed to parse" in result.output
        assert "bad.json" in result.output
        assert not report.exists()

    def test_zero_trials_in_sweep_mode(self, runner, write_study, fake_benchstat):
        path = write_study(is_sweep_mode=True, num_trials=0, measurements=[1e-9])
        result = runner.invoke(cli, ["--benchstat", str(fake_benchstat), str(path)])
        assert result.exit_code == 1
        assert "NumTrials" in result.output

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(cli, [str(tmp_path / "missing.json")])
        assert result.exit_code == 1
        assert "missing.json" in result.output


class TestExport:
    """Test --export-dir."""

    def test_writes_one_file_per_study(self, runner, studies, tmp_path):
        out = tmp_path / "out"
        result = runner.invoke(cli, ["--export-dir", str(out), *[str(p) for p in studies]])

        assert result.exit_code == 0, result.output
        assert sorted(p.name for p in out.iterdir()) == ["baseline.txt", "experiment.txt"]
        assert (out / "baseline.txt").read_text().splitlines() == [
            "Benchmarkmemcpy/Google_A 1 500000000 ns/op",
            "Benchmarkmemcpy/Google_A 1 250000000 ns/op",
            "Benchmarkmemcpy/1 1 2000000000 ns/op",
        ]

    def test_export_does_not_need_benchstat(self, runner, studies, tmp_path):
        out = tmp_path / "out"
        result = runner.invoke(
            cli,
            ["--benchstat", "benchstat-does-not-exist", "--export-dir", str(out), str(studies[1])],
        )
        assert result.exit_code == 0, result.output
        assert (out / "experiment.txt").exists()

    def test_colliding_file_names(self, runner, write_study, tmp_path):
        out = tmp_path / "out"
        first = write_study(study_name="x/y")
        second = write_study(study_name="x_y")

        result = runner.invoke(cli, ["--export-dir", str(out), str(first), str(second)])

        assert result.exit_code == 1
        assert "'x/y' and 'x_y'" in result.output
        assert not out.exists()


class TestLibcBenchCLI:
    """Test the orchestrator without Click."""

    def test_execute_returns_one_on_decode_error(self, tmp_path, capsys):
        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps([1, 2]))

        exit_code = LibcBenchCLI().execute([str(bad)])

        assert exit_code == 1
        assert "expected JSON object" in capsys.readouterr().err

    def test_execute_export(self, write_study, tmp_path):
        path = write_study(study_name="run")
        assert LibcBenchCLI().execute([str(path)], export_dir=tmp_path / "out") == 0
        assert (tmp_path / "out" / "run.txt").exists()
