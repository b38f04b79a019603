import json

from routeclean.cli import main


def test_cleans_route_to_stdout(spike_csv, capsys):
    assert main([str(spike_csv)]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "0.0,0.0,0",
        "0.0,0.001,5",
        "0.0,0.002,10",
        "0.0,0.005,25",
        "0.0,0.006,30",
    ]


def test_reference_route_passes_through_unchanged(reference_csv, capsys):
    assert main([str(reference_csv)]) == 0
    assert capsys.readouterr().out == reference_csv.read_text()


def test_writes_output_and_error_files(spike_csv, tmp_path):
    output = tmp_path / "clean.csv"
    errors = tmp_path / "errors.csv"

    assert main([str(spike_csv), "-o", str(output), "--errors-output", str(errors)]) == 0
    assert len(output.read_text().splitlines()) == 5
    assert errors.read_text().splitlines() == ["0.03,0.003,15", "-0.03,0.004,20"]


def test_speed_limit_override(spike_csv, capsys):
    assert main([str(spike_csv), "--speed-limit", "1000000"]) == 0
    assert len(capsys.readouterr().out.splitlines()) == 7


def test_environment_thresholds(spike_csv, capsys, monkeypatch):
    monkeypatch.setenv("ROUTECLEAN_TIGHT_ANGLE_DEG", "0")
    assert main([str(spike_csv)]) == 0
    assert len(capsys.readouterr().out.splitlines()) == 7


def test_geojson_output(spike_csv, capsys):
    assert main([str(spike_csv), "--output-format=geojson"]) == 0

    collection = json.loads(capsys.readouterr().out)
    assert collection['features'][0]['properties']['timestamps'] == [0, 5, 10, 25, 30]


def test_header_option(tmp_path, capsys):
    p = tmp_path / "named.csv"
    p.write_text("lat,lon,timestamp\n1.5,2.5,10\n")
    assert main([str(p), "--header"]) == 0
    assert capsys.readouterr().out == "1.5,2.5,10\n"


def test_missing_input_source(capsys):
    assert main([]) == 1

    err = capsys.readouterr().err
    assert "No input source specified!" in err
    assert "usage: routeclean" in err


def test_unsupported_input(capsys):
    assert main(["route.gpx"]) == 1
    assert "Unable to handle input source: route.gpx" in capsys.readouterr().err


def test_unsupported_output_format(spike_csv, tmp_path, capsys):
    output = tmp_path / "clean.xml"
    assert main([str(spike_csv), "--output-format=xml", "-o", str(output)]) == 1
    assert "Unsupported output format: xml" in capsys.readouterr().err
    assert not output.exists()


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.csv")]) == 1
    assert "File not found" in capsys.readouterr().err


def test_invalid_threshold(spike_csv, capsys):
    assert main([str(spike_csv), "--speed-limit", "-1"]) == 1
    assert "Speed limit must not be negative" in capsys.readouterr().err


def test_header_missing_columns(tmp_path, capsys):
    p = tmp_path / "named.csv"
    p.write_text("latitude,longitude,time\n1.5,2.5,10\n")
    output = tmp_path / "clean.csv"

    assert main([str(p), "--header", "-o", str(output)]) == 1
    err = capsys.readouterr().err
    assert "Missing required columns" in err
    assert "usage: routeclean" in err
    assert not output.exists()
