"""Tests for the import session."""

import pytest

from zoneimport.importer import (
    ColumnIndexError,
    EmptyFileError,
    FileTooLargeError,
    ImportSession,
    NoDataRowsError,
    NothingToImportError,
    UnknownFieldError,
    UnsupportedFileTypeError,
    apply_district_values,
    get_path,
    set_path,
)
from zoneimport.routing import DistrictValue, SkipReason
from zoneimport.schema import SchemaKind


@pytest.fixture
def lot_session(mock_settings, lot_csv) -> ImportSession:
    """A lot session loaded with the sample lot file."""
    session = ImportSession(SchemaKind.LOT, settings=mock_settings)
    session.load_text(lot_csv)
    return session


class TestLoading:
    """Test loading files and text."""

    def test_load_text_auto_matches(self, lot_session):
        """Test the auto-matched column mapping."""
        assert lot_session.headers[1] == "Lot Width"
        assert len(lot_session.rows) == 3
        assert lot_session.mapping == {
            0: None,
            1: "lotWidth",
            2: "lotDepth",
            3: "setbackFront",
            4: "buildingWidth",
            5: "buildingStories",
            6: None,
        }
        assert lot_session.mapped_count == 5

    def test_empty_text(self, mock_settings):
        session = ImportSession(settings=mock_settings)

        with pytest.raises(EmptyFileError, match="appears to be empty"):
            session.load_text("\n , \n")

    def test_header_only(self, mock_settings):
        session = ImportSession(settings=mock_settings)

        with pytest.raises(NoDataRowsError, match="headers but no data rows"):
            session.load_text("Lot Width,Lot Depth\n")

    def test_load_text_with_byte_order_mark(self, mock_settings):
        """Test that text decoded without utf-8-sig still matches its first header."""
        session = ImportSession(settings=mock_settings)

        mapping = session.load_text("\ufeffLot Width,Depth\n50,100\n")

        assert session.headers[0] == "Lot Width"
        assert mapping == {0: "lotWidth", 1: "lotDepth"}

    def test_load_file(self, mock_settings, write_csv):
        """Test loading a file from disk with a byte order mark."""
        path = write_csv("\ufeffLot Width\n50\n")
        session = ImportSession(settings=mock_settings)

        mapping = session.load_file(path)

        assert mapping == {0: "lotWidth"}
        assert session.source_name == "lots.csv"

    def test_rejects_other_extensions(self, mock_settings, write_csv):
        path = write_csv("Lot Width\n50\n", name="lots.xlsx")
        session = ImportSession(settings=mock_settings)

        with pytest.raises(UnsupportedFileTypeError, match="Please select a CSV file"):
            session.load_file(path)

    def test_extension_check_is_case_insensitive(self, mock_settings, write_csv):
        path = write_csv("Lot Width\n50\n", name="LOTS.CSV")
        session = ImportSession(settings=mock_settings)

        assert session.load_file(path) == {0: "lotWidth"}

    def test_rejects_large_files(self, mock_settings, write_csv):
        """Test the configured size limit."""
        path = write_csv("Lot Width\n" + "50\n" * 400)
        session = ImportSession(settings=mock_settings)

        with pytest.raises(FileTooLargeError) as exc_info:
            session.load_file(path)

        assert exc_info.value.limit == 1024
        assert "File is too large" in str(exc_info.value)

    def test_default_limit_message(self):
        error = FileTooLargeError(6 * 1024 * 1024, 5 * 1024 * 1024)

        assert str(error) == "File is too large. Maximum size is 5MB."

    def test_reset(self, lot_session):
        lot_session.reset()

        assert lot_session.headers == []
        assert lot_session.rows == []
        assert lot_session.mapping == {}


class TestMappingUpdates:
    """Test user edits to the column mapping."""

    def test_skip_unsets(self, lot_session):
        lot_session.update_mapping(1, "skip")

        assert lot_session.mapping[1] is None
        assert lot_session.mapped_count == 4

    def test_moving_a_field(self, lot_session):
        """Test that a key claimed elsewhere moves to the new column."""
        mapping = lot_session.update_mapping(0, "lotWidth")

        assert mapping[0] == "lotWidth"
        assert mapping[1] is None

    def test_unknown_field(self, lot_session):
        with pytest.raises(UnknownFieldError):
            lot_session.update_mapping(0, "lotArea.min")

    def test_unknown_column(self, lot_session):
        with pytest.raises(ColumnIndexError):
            lot_session.update_mapping(7, "lotWidth")

    def test_mapped_field_keys(self, lot_session):
        lot_session.update_mapping(6, "maxHeight")

        assert lot_session.mapped_field_keys == [
            "lotWidth",
            "lotDepth",
            "setbackFront",
            "buildingWidth",
            "buildingStories",
            "maxHeight",
        ]

    def test_field_label(self, lot_session):
        assert lot_session.field_label("buildingStories") == "Stories"
        assert lot_session.field_label("mystery") == "mystery"


class TestLotImport:
    """Test lot previews and imports."""

    def test_import_lots(self, lot_session):
        """Test records from the sample file; the unparsable row is omitted."""
        records = lot_session.import_lots()

        assert records == [
            {
                "lotWidth": 50.0,
                "lotDepth": 100.0,
                "setbacks": {"principal": {"front": 20.0}},
                "buildings": {"principal": {"width": 30.0, "stories": 2.0}},
            },
            {
                "lotWidth": 60.5,
                "lotDepth": 120.0,
                "setbacks": {"principal": {"front": 25.0}},
                "buildings": {"principal": {"stories": 3.0}},
            },
        ]

    def test_preview_skips(self, lot_session):
        skips = lot_session.preview_lots().skips
        not_numeric = [(s.row, s.column) for s in skips if s.reason == SkipReason.NOT_NUMERIC]

        assert not_numeric == [(2, 1), (2, 2)]

    def test_preview_table(self, lot_session):
        """Test the tabulated preview with a row limit."""
        table = lot_session.preview_table(limit=1)

        assert table == [
            {
                "lotWidth": 50.0,
                "lotDepth": 100.0,
                "setbackFront": 20.0,
                "buildingWidth": 30.0,
                "buildingStories": 2.0,
            }
        ]

    def test_preview_table_default_limit(self, mock_settings):
        session = ImportSession(settings=mock_settings)
        session.load_text("width\n1\n2\n3\n")

        assert session.preview_table() == [{"lotWidth": 1.0}, {"lotWidth": 2.0}]

    def test_nothing_to_import(self, lot_session):
        for index in range(len(lot_session.headers)):
            lot_session.update_mapping(index, None)

        with pytest.raises(NothingToImportError, match="No valid data to import"):
            lot_session.import_lots()


class TestDistrictImport:
    """Test district previews and imports."""

    def test_import_district(self, mock_settings, district_csv):
        session = ImportSession(SchemaKind.DISTRICT, settings=mock_settings)
        session.load_text(district_csv)

        values = session.import_district()

        assert [value.as_tuple() for value in values] == [
            ("lotArea.min", 5000.0),
            ("lotArea.max", 20000.0),
            ("lotAccess.rearAlley.permitted", True),
            ("parkingLocations.front.permitted", False),
            ("setbacksPrincipal.btzFront", 80.0),
        ]

    def test_row_out_of_range(self, mock_settings, district_csv):
        session = ImportSession("district", settings=mock_settings)
        session.load_text(district_csv)

        assert session.preview_district(5).values == []
        with pytest.raises(NothingToImportError):
            session.import_district(5)


class TestNestedPaths:
    """Test dot-path helpers used to apply district values."""

    def test_set_and_get(self):
        tree = {}

        set_path(tree, "lotAccess.rearAlley.permitted", True)

        assert tree == {"lotAccess": {"rearAlley": {"permitted": True}}}
        assert get_path(tree, "lotAccess.rearAlley.permitted") is True
        assert get_path(tree, "lotAccess.frontAlley.permitted") is None
        assert get_path(tree, "lotAccess.rearAlley.permitted.extra", "n/a") == "n/a"

    def test_set_replaces_scalar(self):
        tree = {"lotArea": 5}

        set_path(tree, "lotArea.min", 1.0)

        assert tree == {"lotArea": {"min": 1.0}}

    def test_apply_district_values(self):
        """Test applying values and pairs onto an existing tree."""
        tree = {"lotArea": {"max": 9.0}}

        apply_district_values(
            tree,
            [DistrictValue(path="lotArea.min", value=1.0), ("parkingLocations.rear.permitted", False)],
        )

        assert tree == {
            "lotArea": {"min": 1.0, "max": 9.0},
            "parkingLocations": {"rear": {"permitted": False}},
        }
