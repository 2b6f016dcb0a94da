import io
import subprocess
import unittest
from unittest import mock

from lift.elevator import Elevator
from lift.errors import DisplayIOFailure, InvalidFloorText
from lift.floors import FloorRange
from terminal.presenter import Presenter, clear_screen, render

FLOOR_LINE = "[-2 ] [-1 ] [ 0 ] [ 1 ] [ 2 ] [ 3 ] [ 4 ] [ 5 ]"


class RenderTest(unittest.TestCase):
    def setUp(self):
        self.floors = FloorRange(-2, 5)

    def test_idle_car_at_ground_floor(self):
        elevator = Elevator(self.floors, start_floor=0)
        text = render(elevator.snapshot(), self.floors)
        self.assertEqual(
            text,
            "\nElevator\n\nEnter floor number to move elevator\n\n"
            + " " * 14
            + "^\n"
            + FLOOR_LINE
            + "\n\nState: Stopped\n",
        )

    def test_marker_sits_over_current_floor(self):
        for floor in self.floors:
            elevator = Elevator(self.floors, start_floor=floor)
            lines = render(elevator.snapshot(), self.floors).split("\n")
            marker_line, floor_line = lines[5], lines[6]
            column = len(marker_line) - 1
            cell = floor_line[column - 2:column + 3]
            self.assertEqual(cell, f"[{floor:>2} ]")

    def test_marker_shows_open_doors_and_direction(self):
        elevator = Elevator(self.floors, start_floor=0)
        elevator.move_to(-1)
        elevator.tick()
        lines = render(elevator.snapshot(), self.floors).split("\n")
        self.assertEqual(lines[5].strip(), "v")
        self.assertEqual(lines[8], "State: Moving(Down)")

        elevator.tick()
        elevator.tick()
        lines = render(elevator.snapshot(), self.floors).split("\n")
        self.assertEqual(lines[5].strip(), "*")
        self.assertEqual(lines[8], "State: Opened")


class PresenterTest(unittest.TestCase):
    def setUp(self):
        self.floors = FloorRange(-2, 5)
        self.out = io.StringIO()
        self.err = io.StringIO()

    def test_writes_error_line_to_error_stream(self):
        presenter = Presenter(self.floors, out=self.out, err=self.err, clear=None)
        presenter.show(Elevator(self.floors).snapshot(), InvalidFloorText("abc"))
        self.assertIn("State: Stopped", self.out.getvalue())
        self.assertEqual(self.err.getvalue(), "Error: invalid floor number: 'abc'\n\n")

    def test_no_error_line_without_error(self):
        presenter = Presenter(self.floors, out=self.out, err=self.err, clear=None)
        presenter.show(Elevator(self.floors).snapshot())
        self.assertEqual(self.err.getvalue(), "")

    def test_clears_before_drawing(self):
        calls = []
        presenter = Presenter(
            self.floors,
            out=self.out,
            err=self.err,
            clear=lambda: calls.append(self.out.getvalue()),
        )
        presenter.show(Elevator(self.floors).snapshot())
        self.assertEqual(calls, [""])

    def test_clear_failure_is_fatal(self):
        def broken_clear():
            raise DisplayIOFailure("no terminal")

        presenter = Presenter(self.floors, out=self.out, err=self.err, clear=broken_clear)
        with self.assertRaises(DisplayIOFailure):
            presenter.show(Elevator(self.floors).snapshot())
        self.assertEqual(self.out.getvalue(), "")


class ClearScreenTest(unittest.TestCase):
    def test_non_zero_exit_is_not_fatal(self):
        finished = subprocess.CompletedProcess(["clear"], 1)
        with mock.patch("terminal.presenter.subprocess.run", return_value=finished):
            clear_screen()

    def test_unrunnable_command_raises_display_failure(self):
        with mock.patch("terminal.presenter.subprocess.run", side_effect=PermissionError("clear")):
            with self.assertRaises(DisplayIOFailure):
                clear_screen()

    def test_missing_command_raises_display_failure(self):
        with mock.patch("terminal.presenter.subprocess.run", side_effect=FileNotFoundError("clear")):
            with self.assertRaises(DisplayIOFailure):
                clear_screen()

    def test_runs_clear(self):
        with mock.patch("terminal.presenter.subprocess.run") as run:
            clear_screen()
        run.assert_called_once_with(["clear"])


if __name__ == "__main__":
    unittest.main()
