import io

from solid_city.domain.base.ports import ConsolePort
from solid_city.infrastructure.console import BufferedConsole, StdoutConsole


def test_buffered_console_records_lines_in_order():
    console = BufferedConsole()

    console.write_line("first")
    console.write_line("second")

    assert isinstance(console, ConsolePort)
    assert console.lines == ["first", "second"]


def test_buffered_console_lines_are_a_copy():
    console = BufferedConsole()
    console.write_line("only")

    console.lines.append("sneaky")

    assert console.lines == ["only"]


def test_buffered_console_clear():
    console = BufferedConsole()
    console.write_line("gone")

    console.clear()

    assert console.lines == []


def test_stdout_console_writes_to_stdout(capsys):
    StdoutConsole().write_line("Shoots net!")

    assert capsys.readouterr().out == "Shoots net!\n"


def test_stdout_console_custom_stream():
    stream = io.StringIO()

    StdoutConsole(stream).write_line("Feed bats!")

    assert stream.getvalue() == "Feed bats!\n"
