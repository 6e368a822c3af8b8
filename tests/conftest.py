import html
import json

import pytest

SEMINOLE_PARCEL = {
    "apprId": "R123",
    "parcelNumber": "25-20-30-5AA-0000-0010",
    "dor": "01",
    "legal": "LOT 1 OAK HILLS PB 12 PG 34",
    "situsAddress": "123 N MAIN ST, SANFORD FL 32771",
    "mailingAddress": "456 OAK AVE, OVIEDO FL 32765",
    "owners": ["JOHN A SMITH & MARY SMITH"],
    "ownerDetails": [
        {"firstName": "JOHN", "lastName": "SMITH", "mi": "A", "ownershipPercentage": 50,
         "ownershipCodeDescription": "Joint Tenants"},
    ],
    "buildingDetails": [
        {
            "bldgNo": 1,
            "bldgType": "SINGLE FAMILY",
            "yearBlt": "1995 2001",
            "livingArea": 1800,
            "grossArea": 2400,
            "baseFloors": 1,
            "bedrooms": 3,
            "bathrooms": 2.5,
            "extWall": "CB STUCCO/BRICK",
            "buildingSubAreas": [{"apdgCode": "GAR", "apdgActualArea": 440}],
        }
    ],
    "saleDetails": [
        {"saleDate": "2015-06-01T00:00:00", "saleAmt": 250000, "saleCode": "SQ",
         "deedDescription": "WARRANTY DEED", "book": "8500", "page": "12", "vacImp": "I"},
        {"saleDate": "2001-02-03T00:00:00", "saleAmt": 90000, "saleCode": "UQ",
         "deedType": "QCD", "vacImp": "V"},
    ],
    "parcelValueHistory": [
        {"taxYear": 2024, "taxableValue": 200000, "exemptValue": 50000, "totalJustValue": 300000,
         "apprBldg": 220000, "apprLand": 80000, "taxBillAmt": 4200.5},
    ],
    "permitDetails": [
        {"permitNo": "B-1", "permitDesc": "REROOF", "dateAdded": "2020-01-01T00:00:00",
         "permitDate": "2020-01-05T00:00:00", "coDate": "2020-02-01T00:00:00", "statusCode": "07"},
    ],
    "landDetails": [{"method": "FRONT FOOT", "landDepth": 120, "landFrontage": 80}],
    "gisAcres": 0.22,
    "parcelSquareFt": 9583,
    "waterServiceArea": "SEMINOLE COUNTY",
    "sewerServiceArea": "SEMINOLE COUNTY",
    "powerCompanyName": "DUKE ENERGY",
    "floodZone": "X",
    "zoning": "R-1",
    "subName": "OAK HILLS",
    "footPrintImages": [{"downloadURL": "https://example.com/img/fp1.jpg"}],
}


def write_property_dir(base_dir, parcel, county="Seminole"):
    (base_dir / "input.html").write_text(
        f"<html><body><pre>{html.escape(json.dumps(parcel))}</pre></body></html>", encoding="utf-8"
    )
    (base_dir / "unnormalized_address.json").write_text(json.dumps({
        "full_address": "123 N MAIN ST, SANFORD, FL 32771",
        "county_jurisdiction": county,
        "latitude": 28.8,
        "longitude": -81.27,
    }))
    (base_dir / "property_seed.json").write_text(json.dumps({
        "parcel_id": "2520305AA00000010",
        "request_identifier": "REQ-1",
        "source_http_request": {"method": "GET", "url": "https://parcelviewer.scpafl.org/?parcel=R123"},
    }))
    return base_dir


@pytest.fixture
def seminole_parcel():
    return json.loads(json.dumps(SEMINOLE_PARCEL))


@pytest.fixture
def seminole_dir(tmp_path, seminole_parcel, monkeypatch):
    monkeypatch.delenv("EXTRACTOR_STRICT_CODES", raising=False)
    monkeypatch.setenv("EXTRACTOR_LOGS_DIR", str(tmp_path / "logs"))
    return write_property_dir(tmp_path, seminole_parcel)


@pytest.fixture
def write_parcel(seminole_dir):
    def write(parcel):
        return write_property_dir(seminole_dir, parcel)
    return write
