import pytest

from gctk.extent import Extent, compute_extent
from gctk.utils.errors import EmptyExtent, UnknownPosition, UnsupportedCommand


def test_square_program_extent(parse, square_program):
    extent = compute_extent(parse(square_program))
    assert extent == Extent(min_x=0.0, min_y=0.0, max_x=10.0, max_y=5.0)


def test_absolute_extent_is_literal_min_max(parse):
    lines = parse(["G0 X3 Y-4 Z10", "G1 X-7.5 Y2 Z-100", "G1 X1", "G1 Y9"])
    extent = compute_extent(lines)
    assert (extent.min_x, extent.max_x) == (-7.5, 3.0)
    assert (extent.min_y, extent.max_y) == (-4.0, 9.0)


def test_z_never_affects_extent(parse):
    flat = compute_extent(parse(["G1 X1 Y1", "G1 X2 Y2"]))
    tall = compute_extent(parse(["G1 X1 Y1 Z-50", "G1 X2 Y2 Z50", "G0 Z1000"]))
    assert flat == tall


def test_relative_moves_accumulate_from_absolute_position(parse):
    extent = compute_extent(parse(["G90 G1 X10 Y5", "G91 G1 X2 Y-3"]))
    assert extent == Extent(min_x=10.0, min_y=2.0, max_x=12.0, max_y=5.0)


def test_relative_moves_chain(parse):
    lines = parse(["G1 X0 Y0", "G91", "G1 X5", "G1 X5 Y-1", "G1 X-20", "G90 G1 X1 Y1"])
    extent = compute_extent(lines)
    assert extent == Extent(min_x=-10.0, min_y=-1.0, max_x=10.0, max_y=1.0)


def test_relative_move_without_reference_fails(parse):
    with pytest.raises(UnknownPosition) as exc:
        compute_extent(parse("G91 G1 X1"))
    assert exc.value.line_number == 1


def test_relative_move_on_unreferenced_axis_reports_its_line(parse):
    lines = parse(["G1 X5", "", "G91", "G1 X1 Y1"])
    with pytest.raises(UnknownPosition) as exc:
        compute_extent(lines)
    assert exc.value.line_number == 4
    assert "line number 4" in str(exc.value)


@pytest.mark.parametrize(
    "program",
    [
        "",
        "G90\nG4 P1",
        "G21 G94 G64",
        "G1 X1 X2",
        "G1 Y1",
        "M3 S1000\nM5",
    ],
)
def test_missing_axis_motion_is_empty_extent(parse, program):
    with pytest.raises(EmptyExtent):
        compute_extent(parse(program))


def test_non_general_commands_are_ignored(parse):
    lines = parse(["T1 M6", "G1 X1 Y1", "M3 S100", "G1 X2 Y2", "M30"])
    assert compute_extent(lines) == Extent(1.0, 1.0, 2.0, 2.0)


@pytest.mark.parametrize("position", ["first", "last"])
@pytest.mark.parametrize("code", ["G17", "G2 X1 Y1 I1", "G28", "G3 X0 Y0 I1"])
def test_unsupported_code_aborts(parse, code, position):
    body = ["G1 X0 Y0", "G1 X1 Y1"]
    lines = parse([code] + body if position == "first" else body + [code])
    with pytest.raises(UnsupportedCommand) as exc:
        compute_extent(lines)
    assert str(exc.value.command) == code


def test_extent_does_not_modify_program(parse, render, square_program):
    lines = parse(square_program)
    before = render(lines)
    compute_extent(lines)
    assert render(lines) == before


def test_each_call_starts_fresh(parse):
    lines = parse(["G1 X0 Y0", "G91"])
    compute_extent(lines)
    # mode from the previous call must not leak into this one
    assert compute_extent(parse("G1 X3 Y4")) == Extent(3.0, 4.0, 3.0, 4.0)
