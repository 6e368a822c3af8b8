import os
import zipfile

import pytest

from property_extractor import cli
from property_extractor.main import TransformError, run_transform


def test_transform_resolves_county_and_runs_every_script(seminole_dir):
    summary = run_transform(base_dir=str(seminole_dir), output_zip="out.zip")
    assert summary["county"] == "seminole"
    assert summary["results"] == {
        "owner_processor": True,
        "structure_extractor": True,
        "utility_extractor": True,
        "layout_extractor": True,
        "data_extractor": True,
    }
    assert "property_has_address" in summary["data_group"]["relationships"]
    assert os.path.exists(os.path.join(seminole_dir, "owners", "owner_data.json"))
    with zipfile.ZipFile(os.path.join(seminole_dir, "out.zip")) as archive:
        assert "property.json" in archive.namelist()
        assert "county_data_group.json" in archive.namelist()


def test_extract_only_skips_producers(seminole_dir):
    summary = run_transform(base_dir=str(seminole_dir), county="Seminole", extract_only=True)
    assert summary["results"] == {"data_extractor": True}
    assert not os.path.exists(os.path.join(seminole_dir, "owners", "owner_data.json"))


def test_extract_only_regenerates_data_and_keeps_sidecars(seminole_dir):
    run_transform(base_dir=str(seminole_dir))
    stale = os.path.join(seminole_dir, "data", "relationship_stale_has_file.json")
    with open(stale, "w") as f:
        f.write("{}")

    run_transform(base_dir=str(seminole_dir), extract_only=True)
    assert not os.path.exists(stale)
    assert os.path.exists(os.path.join(seminole_dir, "owners", "owner_data.json"))
    assert os.path.exists(os.path.join(seminole_dir, "data", "property.json"))


def test_failing_producer_does_not_stop_the_run(seminole_dir, monkeypatch):
    from property_extractor.counties.seminole import layout_extractor

    def broken(base_dir=".", strict=None):
        raise RuntimeError("boom")

    monkeypatch.setattr(layout_extractor, "main", broken)
    summary = run_transform(base_dir=str(seminole_dir))
    assert summary["results"]["layout_extractor"] is False
    assert summary["results"]["data_extractor"] is True


def test_failing_data_extractor_fails_the_run(seminole_parcel, write_parcel, seminole_dir):
    seminole_parcel["dor"] = "ABC"
    write_parcel(seminole_parcel)
    with pytest.raises(TransformError):
        run_transform(base_dir=str(seminole_dir), strict=True)
    # soft mode lets the same parcel through
    summary = run_transform(base_dir=str(seminole_dir), strict=False)
    assert os.path.exists(os.path.join(seminole_dir, "data", "error_property_type.json"))
    assert summary["results"]["data_extractor"] is True


def test_unknown_county_is_an_error(seminole_dir):
    with pytest.raises(TransformError):
        run_transform(base_dir=str(seminole_dir), county="Atlantis")


def test_cli_reports_errors_and_exits_1(seminole_dir, capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--base-dir", str(seminole_dir), "--county", "Atlantis"])
    assert excinfo.value.code == 1
    assert "Error: No scripts for county 'Atlantis'" in capsys.readouterr().out


def test_cli_strict_flag_mapping():
    assert cli.strict_flag("strict") is True
    assert cli.strict_flag("soft") is False
    assert cli.strict_flag("county") is None
    assert cli.strict_flag(None) is None
