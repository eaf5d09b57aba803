from typer.testing import CliRunner

from pymaps.__main__ import app

runner = CliRunner()


def parse_counts(output):
    lines = output.splitlines()
    assert lines[0] == "Bucket load distribution (bucket : count):"
    return [int(line.split(":")[1]) for line in lines[1:]]


def test_distribution():
    result = runner.invoke(app, ["distribution", "--buckets", "5", "--keys", "100", "--seed", "1"])
    assert result.exit_code == 0
    counts = parse_counts(result.stdout)
    assert len(counts) == 5
    assert sum(counts) == 100


def test_distribution_is_reproducible():
    arguments = ["distribution", "--buckets", "11", "--keys", "300", "--seed", "42"]
    assert runner.invoke(app, arguments).stdout == runner.invoke(app, arguments).stdout


def test_distribution_with_config_overrides():
    result = runner.invoke(
        app, ["distribution", "-c", "distribution-buckets=3", "-c", "distribution-keys=20", "-c", "distribution-seed=7"]
    )
    assert result.exit_code == 0
    counts = parse_counts(result.stdout)
    assert len(counts) == 3
    assert sum(counts) == 20


def test_distribution_rejects_non_positive_buckets():
    result = runner.invoke(app, ["distribution", "--buckets", "0", "--keys", "10"])
    assert result.exit_code == 2


def test_distribution_rejects_malformed_override():
    result = runner.invoke(app, ["distribution", "-c", "distribution-keys"])
    assert result.exit_code == 2


def test_config_listing():
    result = runner.invoke(app, ["config", "distribution-*", "-c", "distribution-keys=5"])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "distribution-buckets (integer) 37",
        "distribution-keys (integer) 5",
        "distribution-seed (string) ",
    ]


def test_distribution_buckets_alias_controls_table_size():
    result = runner.invoke(app, ["distribution", "-c", "buckets=3", "--keys", "10", "--seed", "1"])
    assert result.exit_code == 0
    counts = parse_counts(result.stdout)
    assert len(counts) == 3
    assert sum(counts) == 10


def test_distribution_rejects_unknown_configuration():
    result = runner.invoke(app, ["distribution", "-c", "bucket-count=3", "--keys", "10"])
    assert result.exit_code == 2
