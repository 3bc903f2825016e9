"""Tests for the command line entry point and interactive loop."""

from io import StringIO

import pytest

from hotel_allocator.main import App, main


@pytest.fixture
def data_files(write_json, hotels_json, bookings_json):
    return write_json("hotels.json", hotels_json), write_json("bookings.json", bookings_json)


@pytest.fixture
def app(data_files):
    return App.from_files(*data_files)


class TestApp:
    """Tests for App."""

    def test_availability_command(self, app):
        """Test dispatch of an availability command."""
        assert app.handle_line("Availability(H1, 20240901, DBL)") == "1"
        assert app.handle_line("Availability(H1, 20240901-20240903, SGL)") == "1"

    def test_room_types_command(self, app):
        """Test dispatch of a room types command."""
        assert app.handle_line("RoomTypes(H1, 20240904, 3)") == "H1: DBL, SGL"

    def test_unknown_hotel(self, app):
        """Test the unknown hotel message through the dispatcher."""
        assert app.handle_line("RoomTypes(H2, 20240904, 3)") == "Error: unknown hotel 'H2'."

    @pytest.mark.parametrize(
        "line",
        ["hello", "Availability(H1, 20240931, DBL)", "RoomTypes(H1, 20240904)"],
    )
    def test_unrecognized_command(self, app, line):
        """Test that malformed lines get the generic message."""
        assert app.handle_line(line) == "Error: unrecognized command or bad format."

    def test_loop_stops_on_blank_line(self, app):
        """Test that a blank line ends the session."""
        stdin = StringIO("Availability(H1, 20240901, DBL)\n\nRoomTypes(H1, 20240904, 3)\n")
        stdout = StringIO()

        app.run_interactive_loop(stdin, stdout)

        output = stdout.getvalue()
        assert "Blank line to exit" in output
        assert "> 1\n" in output
        assert "H1:" not in output
        assert output.endswith("Exiting.\n")

    def test_loop_stops_on_end_of_input(self, app):
        """Test that EOF ends the session."""
        stdin = StringIO("RoomTypes(H1, 20240904, 3)\nnonsense")
        stdout = StringIO()

        app.run_interactive_loop(stdin, stdout)

        output = stdout.getvalue()
        assert "> H1: DBL, SGL\n" in output
        assert "> Error: unrecognized command or bad format.\n" in output
        assert output.endswith("Exiting.\n")


class TestMain:
    """Tests for main()."""

    def test_missing_hotels_file(self, tmp_path, capsys):
        """Test exit code 1 when the hotels file is absent."""
        bookings = tmp_path / "bookings.json"
        bookings.write_text("[]", encoding="utf-8")

        exit_code = main(["--hotels", str(tmp_path / "missing.json"), "--bookings", str(bookings)])

        assert exit_code == 1
        assert "Hotels file not found" in capsys.readouterr().out

    def test_missing_bookings_file(self, write_json, hotels_json, tmp_path, capsys):
        """Test exit code 1 when the bookings file is absent."""
        hotels = write_json("hotels.json", hotels_json)

        exit_code = main(["--hotels", str(hotels), "--bookings", str(tmp_path / "missing.json")])

        assert exit_code == 1
        assert "Bookings file not found" in capsys.readouterr().out

    def test_invalid_data_is_fatal(self, write_json, tmp_path, capsys):
        """Test exit code 1 when a data file fails validation."""
        hotels = write_json("hotels.json", [{"id": "", "roomTypes": [], "rooms": []}])
        bookings = write_json("bookings.json", [])

        exit_code = main(["--hotels", str(hotels), "--bookings", str(bookings)])

        assert exit_code == 1
        assert "Fatal error" in capsys.readouterr().out

    def test_runs_loop_with_loaded_data(self, data_files, monkeypatch):
        """Test that valid files start the interactive loop."""
        started = []
        monkeypatch.setattr(App, "run_interactive_loop", lambda self: started.append(self))
        hotels, bookings = data_files

        exit_code = main(["--hotels", str(hotels), "--bookings", str(bookings)])

        assert exit_code == 0
        assert len(started) == 1
