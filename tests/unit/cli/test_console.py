"""Unit tests for the console boundary."""

import io

import pytest
from rich.console import Console

from productdesk.cli.console import RichConsoleIO, parse_choice, read_float, read_int
from productdesk.core.exceptions import InputParseError


class TestParseChoice:
    """Menu selections parse to a tagged result and never raise."""

    def test_integer(self) -> None:
        choice = parse_choice("2")
        assert choice.is_valid
        assert choice.value == 2

    def test_surrounding_whitespace(self) -> None:
        assert parse_choice(" 1 \n").value == 1

    def test_negative_integer_is_still_an_integer(self) -> None:
        assert parse_choice("-1").value == -1

    @pytest.mark.parametrize("text", ["", "abc", "1.5", "one", "2x"])
    def test_non_numeric(self, text: str) -> None:
        choice = parse_choice(text)
        assert not choice.is_valid
        assert choice.value is None
        assert choice.raw == text


class TestReadNumbers:
    def test_read_int(self, scripted_io) -> None:
        scripted_io.feed("34")
        assert read_int(scripted_io, "Enter Age: ") == 34
        assert scripted_io.prompts == ["Enter Age: "]

    def test_read_int_rejects_text(self, scripted_io) -> None:
        scripted_io.feed("thirty")
        with pytest.raises(InputParseError) as exc_info:
            read_int(scripted_io, "Enter Age: ")
        assert exc_info.value.message == "Invalid number: 'thirty'"
        assert exc_info.value.code == "VAL_INVALID_INPUT"

    def test_read_float(self, scripted_io) -> None:
        scripted_io.feed("2.50")
        assert read_float(scripted_io, "Enter Product Price: ") == 2.5

    def test_read_float_accepts_integers(self, scripted_io) -> None:
        scripted_io.feed("3")
        assert read_float(scripted_io, "Enter Product Price: ") == 3.0

    @pytest.mark.parametrize("text", ["cheap", "", "nan", "inf"])
    def test_read_float_rejects(self, scripted_io, text: str) -> None:
        scripted_io.feed(text)
        with pytest.raises(InputParseError):
            read_float(scripted_io, "Enter Product Price: ")


class TestRichConsoleIO:
    def _console(self) -> tuple[RichConsoleIO, io.StringIO]:
        buffer = io.StringIO()
        console = Console(file=buffer, force_terminal=False, width=120)
        return RichConsoleIO(console), buffer

    def test_write_prints_line(self) -> None:
        console_io, buffer = self._console()
        console_io.write("Product added successfully!", style="green")
        assert buffer.getvalue() == "Product added successfully!\n"

    def test_write_does_not_interpret_markup(self) -> None:
        console_io, buffer = self._console()
        console_io.write('[{"id": "1"}] [bold]')
        assert buffer.getvalue() == '[{"id": "1"}] [bold]\n'

    def test_read_uses_console_input(self, monkeypatch) -> None:
        console_io, _ = self._console()
        monkeypatch.setattr(console_io.console, "input", lambda prompt, password=False: "1")
        assert console_io.read("Enter your choice: ") == "1"
