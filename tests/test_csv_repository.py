import pytest

from itinerary_prettifier.adapters.directory import CSVAirportRepository
from itinerary_prettifier.config import DirectoryConfig
from itinerary_prettifier.domain.errors import RecordError, ReferenceDataError, SchemaError


def test_load_builds_directory_from_csv(lookup_csv):
    repository = CSVAirportRepository(path=lookup_csv)

    directory = repository.load()

    assert directory.lookup("JFK") is directory.lookup("KJFK")
    assert directory.lookup("CDG").coordinates == "2.55, 49.01"


def test_load_uses_configured_lookup_path(lookup_csv):
    config = DirectoryConfig(data_dir=lookup_csv.parent, lookup_file=lookup_csv.name)

    directory = CSVAirportRepository(config).load()

    assert directory.lookup("LFPG").municipality == "Paris"


def test_load_is_cached_until_cleared(lookup_csv):
    repository = CSVAirportRepository(path=lookup_csv)

    first = repository.load()
    assert repository.load() is first

    repository.clear_cache()
    assert repository.load() is not first


def test_byte_order_mark_is_tolerated(tmp_path):
    path = tmp_path / "bom.csv"
    path.write_text(
        "\ufeffname,iso_country,municipality,icao_code,iata_code,coordinates\n"
        "Heathrow,GB,London,EGLL,LHR,\"-0.46, 51.47\"\n",
        encoding="utf-8",
    )

    directory = CSVAirportRepository(path=path).load()

    assert directory.lookup("LHR").name == "Heathrow"


def test_blank_lines_in_file_are_skipped(tmp_path):
    path = tmp_path / "gaps.csv"
    path.write_text(
        "name,iso_country,municipality,icao_code,iata_code,coordinates\n"
        "\n"
        "Heathrow,GB,London,EGLL,LHR,x\n"
        "\n",
        encoding="utf-8",
    )

    assert len(CSVAirportRepository(path=path).load()) == 2


def test_missing_column_reports_file_path(tmp_path):
    path = tmp_path / "no-coords.csv"
    path.write_text(
        "name,iso_country,municipality,icao_code,iata_code\n"
        "Heathrow,GB,London,EGLL,LHR\n",
        encoding="utf-8",
    )

    with pytest.raises(SchemaError) as excinfo:
        CSVAirportRepository(path=path).load()

    assert excinfo.value.missing_columns == ("coordinates",)
    assert excinfo.value.file_path == str(path)


def test_empty_file_is_a_schema_error(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")

    with pytest.raises(SchemaError):
        CSVAirportRepository(path=path).load()


def test_short_row_is_a_record_error(tmp_path):
    path = tmp_path / "short.csv"
    path.write_text(
        "name,iso_country,municipality,icao_code,iata_code,coordinates\n"
        "Heathrow,GB,London,EGLL,LHR\n",
        encoding="utf-8",
    )

    with pytest.raises(RecordError) as excinfo:
        CSVAirportRepository(path=path).load()

    assert excinfo.value.row_number == 1


def test_unreadable_file_is_wrapped(tmp_path):
    missing = tmp_path / "does-not-exist.csv"

    with pytest.raises(ReferenceDataError) as excinfo:
        CSVAirportRepository(path=missing).load()

    assert isinstance(excinfo.value.cause, OSError)
    assert excinfo.value.file_path == str(missing)
