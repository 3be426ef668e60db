import io
import json

import pytest

from router_lib.cli import build_parser, main, resolve_options


DESTINATIONS = (
    "192.168.1.50\n"
    "10.1.2.3\n"
    "# comment\n"
    "\n"
    "10.200.0.1\n"
    "8.8.8.8\n"
    "1.2.3.4\n"
    "300.1.1.1\n"
)

EXPECTED = [
    "Packet now being sent to destination 192.168.1.50, leaving router from interface eth0",
    "Packet destination is 10.1.2.3, leaving router from interface eth2 to next hop 172.16.5.5",
    "Packet destination is 10.200.0.1, leaving router from interface eth1 to next hop 10.0.0.2",
    "Destination 8.8.8.8 is unreachable.",
    "1.2.3.4: unreachable",
    "300.1.1.1: malformed destination address",
]


@pytest.fixture
def run_files(tmp_path, table_files):
    config, route_file = table_files
    infile = tmp_path / "input.txt"
    infile.write_text(DESTINATIONS)
    outfile = tmp_path / "output.txt"
    return ["-c", str(config), "-r", str(route_file), "-i", str(infile), "-o", str(outfile)], outfile


def test_batch_run_writes_one_line_per_destination(run_files, capsys):
    argv, outfile = run_files
    assert main(argv) == 0
    assert outfile.read_text().splitlines() == EXPECTED

    err = capsys.readouterr().err
    assert "Bad entry in configuration file" in err
    assert "Bad entry in routing table file" in err
    assert "Bad interface, can't find next hop." in err


def test_parallel_run_preserves_order(run_files):
    argv, outfile = run_files
    assert main(argv + ["--workers", "4"]) == 0
    assert outfile.read_text().splitlines() == EXPECTED


def test_no_direct_check_routes_local_destinations(run_files):
    argv, outfile = run_files
    assert main(argv + ["--no-direct-check"]) == 0
    # 192.168.1.50 has no route once local delivery is off
    assert outfile.read_text().splitlines()[0] == "192.168.1.50: unreachable"


def test_stdin_to_stdout(table_files, monkeypatch, capsys):
    config, route_file = table_files
    monkeypatch.setattr("sys.stdin", io.StringIO("10.1.2.3\n"))
    assert main(["-c", str(config), "-r", str(route_file), "-d", "0"]) == 0
    captured = capsys.readouterr()
    assert captured.out.splitlines() == [EXPECTED[1]]
    assert captured.err == ""


def test_info_level_reports_streams(table_files, monkeypatch, capsys):
    config, route_file = table_files
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["-c", str(config), "-r", str(route_file), "-d", "3"]) == 0
    err = capsys.readouterr().err
    assert "No input file specified. Ready to use stdin." in err
    assert "Packets done processing! Program will now exit." in err


def test_missing_table_file_is_fatal(tmp_path, table_files, capsys):
    _, route_file = table_files
    assert main(["-c", str(tmp_path / "nope.conf"), "-r", str(route_file)]) == 1
    assert "Could not open interface config file." in capsys.readouterr().err


def test_missing_input_file_is_fatal(tmp_path, table_files, capsys):
    config, route_file = table_files
    argv = ["-c", str(config), "-r", str(route_file), "-i", str(tmp_path / "nope.txt")]
    assert main(argv) == 1
    assert "Could not open input file" in capsys.readouterr().err


def test_required_flags():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["-c", "interfaces.conf"])


def test_options_file_and_overrides(tmp_path, run_files):
    argv, outfile = run_files
    options = tmp_path / "router.yaml"
    options.write_text("workers: 2\nmessages:\n  no_route: 'drop {{ destination }}'\n")

    assert main(argv + ["--options", str(options)]) == 0
    assert outfile.read_text().splitlines()[4] == "drop 1.2.3.4"

    args = build_parser().parse_args(argv + ["--options", str(options), "--workers", "5", "-d", "4"])
    resolved = resolve_options(args)
    assert resolved.workers == 5
    assert resolved.debug_level == 4


def test_invalid_options_file(tmp_path, run_files, capsys):
    argv, _ = run_files
    options = tmp_path / "router.yaml"
    options.write_text("workers: 0\n")
    assert main(argv + ["--options", str(options)]) == 1
    assert "workers must be >= 1" in capsys.readouterr().err


def test_dump_tables(tmp_path, run_files):
    argv, _ = run_files
    dump = tmp_path / "tables.json"
    assert main(argv + ["--dump-tables", str(dump)]) == 0
    data = json.loads(dump.read_text())
    assert [i['name'] for i in data['interfaces']] == ["eth0", "eth1", "eth2"]
    assert len(data['routes']) == 3


def test_show_tables_goes_to_stderr(run_files, capsys):
    argv, outfile = run_files
    assert main(argv + ["--show-tables", "-d", "0"]) == 0
    captured = capsys.readouterr()
    assert "Static Routes" in captured.err
    assert captured.out == ""


def test_undecodable_destination_is_malformed_line(tmp_path, table_files):
    config, route_file = table_files
    infile = tmp_path / "input.bin"
    infile.write_bytes(b"10.1.2.3\n\xff\xfe\n192.168.1.9\n")
    outfile = tmp_path / "output.txt"

    argv = ["-c", str(config), "-r", str(route_file), "-i", str(infile), "-o", str(outfile), "-d", "0"]
    assert main(argv) == 0
    lines = outfile.read_text().splitlines()
    assert len(lines) == 3
    assert lines[0] == EXPECTED[1]
    assert lines[1].endswith(": malformed destination address")
    assert lines[2].startswith("Packet now being sent to destination 192.168.1.9")


def test_undefined_template_variable_is_rejected_before_processing(tmp_path, run_files, capsys):
    argv, outfile = run_files
    options = tmp_path / "router.yaml"
    options.write_text("messages:\n  no_route: '{{ dest }} unreachable'\n")
    assert main(argv + ["--options", str(options)]) == 1
    assert "messages.no_route: unknown variable(s) dest" in capsys.readouterr().err
    assert not outfile.exists()
