import socket
from collections import namedtuple
from unittest.mock import patch

import pytest

from slbar.network import (
    NetSpeed,
    ipv4,
    ipv6,
    netspeed_rx,
    netspeed_tx,
    rssi_to_perc,
    wifi_essid,
    wifi_perc,
)
from slbar.util import fmt_human

Addr = namedtuple("Addr", "family address")

FAKE_ADDRS = {
    "eth0": [
        Addr(socket.AF_INET6, "2001:db8::1"),
        Addr(socket.AF_INET, "192.0.2.10"),
        Addr(socket.AF_INET, "192.0.2.11"),
    ],
    "lo": [Addr(socket.AF_INET, "127.0.0.1")],
}

WIRELESS_HEADER = (
    "Inter-| sta-|   Quality        |   Discarded packets               | Missed | WE\n"
    " face | tus | link level noise |  nwid  crypt   frag  retry   misc | beacon | 22\n"
)


def _wireless(tmp_path, link, state="up\n", interface="wlan0"):
    root = tmp_path / "net"
    (root / interface).mkdir(parents=True)
    (root / interface / "operstate").write_text(state)
    wireless = tmp_path / "wireless"
    wireless.write_text(
        WIRELESS_HEADER
        + f"{interface}: 0000   {link}.  -40.  -256        0      0      0      0      0        0\n"
    )
    return str(root), str(wireless)


def _stats(tmp_path, direction, value, interface="eth0"):
    stats = tmp_path / interface / "statistics"
    stats.mkdir(parents=True, exist_ok=True)
    (stats / f"{direction}_bytes").write_text(f"{value}\n")


@patch("slbar.network.psutil.net_if_addrs", return_value=FAKE_ADDRS)
def test_ipv4_picks_first_matching_address(mock_addrs):
    assert ipv4("eth0") == "192.0.2.10"
    assert ipv4("lo") == "127.0.0.1"


@patch("slbar.network.psutil.net_if_addrs", return_value=FAKE_ADDRS)
def test_ipv6_and_missing(mock_addrs):
    assert ipv6("eth0") == "2001:db8::1"
    assert ipv6("lo") is None
    assert ipv4("wlan9") is None


@patch("slbar.network.psutil.net_if_addrs", side_effect=OSError("boom"))
def test_ip_lookup_failure(mock_addrs, capsys):
    assert ipv4("eth0") is None
    assert "getifaddrs:" in capsys.readouterr().err


def test_netspeed_first_reading_is_none(tmp_path):
    _stats(tmp_path, "rx", 1000)
    speed = NetSpeed("rx", 1000, str(tmp_path))
    assert speed("eth0") is None


def test_netspeed_reports_rate(tmp_path):
    _stats(tmp_path, "rx", 1000)
    speed = NetSpeed("rx", 1000, str(tmp_path))
    speed("eth0")
    _stats(tmp_path, "rx", 1000 + 2048)
    assert speed("eth0") == fmt_human(2048, 1024)


def test_netspeed_scales_with_interval(tmp_path):
    _stats(tmp_path, "tx", 5000)
    speed = NetSpeed("tx", 2000, str(tmp_path))
    speed("eth0")
    _stats(tmp_path, "tx", 5000 + 4096)
    assert speed("eth0") == fmt_human(2048, 1024)


def test_netspeed_missing_file(tmp_path):
    speed = NetSpeed("rx", 1000, str(tmp_path))
    assert speed("nosuch0") is None


@pytest.mark.parametrize("direction", ["up", "", "RX"])
def test_netspeed_rejects_direction(direction):
    with pytest.raises(ValueError):
        NetSpeed(direction)


def test_netspeed_rejects_interval():
    with pytest.raises(ValueError):
        NetSpeed("rx", 0)


def test_module_netspeeds_missing_interface():
    assert netspeed_rx("slbar-no-such-if") is None
    assert netspeed_tx("slbar-no-such-if") is None


@pytest.mark.parametrize("rssi", [-50, -40, 0])
def test_rssi_strong_signal(rssi):
    assert rssi_to_perc(rssi) == 100


@pytest.mark.parametrize("rssi", [-100, -120])
def test_rssi_weak_signal(rssi):
    assert rssi_to_perc(rssi) == 0


def test_rssi_is_monotonic_and_bounded():
    values = [rssi_to_perc(r) for r in range(-110, -40)]
    assert values == sorted(values)
    assert all(0 <= v <= 100 for v in values)


def test_wifi_perc_full_link(tmp_path):
    root, wireless = _wireless(tmp_path, 70)
    assert wifi_perc("wlan0", root, wireless) == "100"


def test_wifi_perc_half_link(tmp_path):
    root, wireless = _wireless(tmp_path, 35)
    assert wifi_perc("wlan0", root, wireless) == "50"


def test_wifi_perc_interface_down(tmp_path):
    root, wireless = _wireless(tmp_path, 70, state="down\n")
    assert wifi_perc("wlan0", root, wireless) is None


def test_wifi_perc_interface_not_listed(tmp_path):
    root, wireless = _wireless(tmp_path, 70)
    (tmp_path / "net" / "wlan1").mkdir()
    (tmp_path / "net" / "wlan1" / "operstate").write_text("up\n")
    assert wifi_perc("wlan1", root, wireless) is None


def test_wifi_perc_too_few_lines(tmp_path):
    root, wireless = _wireless(tmp_path, 70)
    (tmp_path / "wireless").write_text(WIRELESS_HEADER)
    assert wifi_perc("wlan0", root, wireless) is None


def test_wifi_perc_missing_operstate(tmp_path, capsys):
    assert wifi_perc("wlan0", str(tmp_path), str(tmp_path / "wireless")) is None
    assert "fopen '" in capsys.readouterr().err


def test_wifi_essid_name_too_long(capsys):
    assert wifi_essid("x" * 16) is None
    assert "vsnprintf: Output truncated" in capsys.readouterr().err


def test_wifi_essid_unknown_interface():
    assert wifi_essid("slbarnoif0") is None