import pytest

from router_lib.common import Diagnostics, DEBUG
from router_lib.config import Interface, Route, parse_address
from router_lib.forwarding import ForwardingEngine


def ip(text):
    return parse_address(text)


@pytest.fixture
def diagnostics():
    return Diagnostics(level=DEBUG, echo=False)


@pytest.fixture
def interfaces():
    return [
        Interface("eth0", ip("192.168.1.1"), 24),
        Interface("eth1", ip("10.0.0.1"), 30),
        Interface("eth2", ip("172.16.0.1"), 16),
    ]


@pytest.fixture
def routes():
    return [
        Route(ip("10.0.0.0"), 8, ip("10.0.0.2")),
        Route(ip("10.1.0.0"), 16, ip("172.16.5.5")),
        Route(ip("0.0.0.0"), 0, ip("192.168.1.254")),
    ]


@pytest.fixture
def engine(interfaces, routes, diagnostics):
    return ForwardingEngine(interfaces, routes, diagnostics=diagnostics)


@pytest.fixture
def table_files(tmp_path):
    config = tmp_path / "interfaces.conf"
    config.write_text(
        "# local interfaces\n"
        "eth0 192.168.1.1/24\n"
        "\n"
        "eth1   10.0.0.1/30\n"
        "garbage data here\n"
        "eth2 172.16.0.1/16\n"
    )
    route_file = tmp_path / "routes.conf"
    route_file.write_text(
        "# static routes\n"
        "10.0.0.0/8 10.0.0.2\n"
        "garbage data here\n"
        "10.1.0.0/16 172.16.5.5\n"
        "   # indented comment\n"
        "8.8.0.0/16 203.0.113.1\n"
    )
    return config, route_file
