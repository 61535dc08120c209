import re
from unittest import mock

from slbar.cpu import CpuUsage, cpu_freq, entropy, format_uptime, load_avg, uptime


def test_cpu_usage_needs_two_samples(tmp_path):
    stat = tmp_path / "stat"
    stat.write_text("cpu 100 0 100 700 100 0 0 0 0 0\n")
    usage = CpuUsage(str(stat))
    assert usage() is None


def test_cpu_usage_computes_percentage(tmp_path):
    stat = tmp_path / "stat"
    stat.write_text("cpu 100 0 100 700 100 0 0 0 0 0\n")
    usage = CpuUsage(str(stat))
    usage()
    stat.write_text("cpu 200 0 200 1300 100 0 0 0 0 0\n")
    assert usage() == "25"


def test_cpu_usage_unchanged_counters(tmp_path):
    stat = tmp_path / "stat"
    stat.write_text("cpu 100 0 100 700 100 0 0\n")
    usage = CpuUsage(str(stat))
    usage()
    assert usage() is None


def test_cpu_usage_fully_busy_stays_in_range(tmp_path):
    stat = tmp_path / "stat"
    stat.write_text("cpu 10 10 10 10 10 10 10\n")
    usage = CpuUsage(str(stat))
    usage()
    stat.write_text("cpu 50 30 20 10 10 40 60\n")
    assert 0 <= int(usage()) <= 100


def test_cpu_usage_malformed(tmp_path):
    stat = tmp_path / "stat"
    stat.write_text("cpu 1 2 3\n")
    assert CpuUsage(str(stat))() is None


def test_cpu_usage_missing_file(tmp_path):
    assert CpuUsage(str(tmp_path / "absent"))() is None


def test_cpu_freq_scales_khz(tmp_path):
    freq = tmp_path / "freq"
    freq.write_text("2400000\n")
    assert cpu_freq(None, str(freq)) == "2.4 G"


def test_cpu_freq_missing(tmp_path):
    assert cpu_freq(None, str(tmp_path / "absent")) is None


def test_entropy_reads_value(tmp_path):
    avail = tmp_path / "entropy_avail"
    avail.write_text("256\n")
    assert entropy(None, str(avail)) == "256"


def test_entropy_missing(tmp_path):
    assert entropy(None, str(tmp_path / "absent")) is None


def test_load_avg_formats_three_values():
    with mock.patch("os.getloadavg", return_value=(0.5, 1.25, 2.0)):
        result = load_avg()
    assert [float(part) for part in result.split()] == [0.5, 1.25, 2.0]
    assert all(len(part.split(".")[1]) == 2 for part in result.split())


def test_load_avg_failure():
    with mock.patch("os.getloadavg", side_effect=OSError):
        assert load_avg() is None


def test_format_uptime_hours_and_minutes():
    assert format_uptime(5 * 3600 + 7 * 60 + 30) == "5h 7m"


def test_format_uptime_zero():
    assert format_uptime(0) == "0h 0m"


def test_uptime_shape():
    result = uptime()
    match = re.fullmatch(r"(\d+)h (\d+)m", result)
    assert match is not None
    assert int(match.group(2)) < 60