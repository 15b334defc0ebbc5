import io

import pytest

from recreations.life import Board, Command, apply_command, main, parse_command


def test_blinker_oscillates():
    board = Board(10)
    for cell in ((5, 4), (5, 5), (5, 6)):
        board.add(*cell)
    board.step()
    assert board.cells == {(4, 5), (5, 5), (6, 5)}
    board.step()
    assert board.cells == {(5, 4), (5, 5), (5, 6)}


def test_block_is_still():
    board = Board(6)
    block = {(2, 2), (2, 3), (3, 2), (3, 3)}
    for cell in block:
        board.add(*cell)
    board.step()
    assert board.cells == block


def test_lonely_cell_dies():
    board = Board(5)
    board.add(2, 2)
    board.step()
    assert board.cells == frozenset()


def test_add_off_board_is_ignored():
    board = Board(5)
    board.add(5, 0)
    board.add(-1, 2)
    assert board.cells == frozenset()


def test_remove_kills_cell():
    board = Board(5)
    board.add(1, 1)
    board.remove(1, 1)
    assert (1, 1) not in board


def test_count_neighbors_in_corner():
    board = Board(5)
    for cell in ((0, 1), (1, 0), (1, 1)):
        board.add(*cell)
    assert board.count_neighbors(0, 0) == 3


def test_edges_do_not_wrap():
    board = Board(5)
    board.add(4, 0)
    board.add(0, 4)
    assert board.count_neighbors(0, 0) == 0


def test_render_frame_and_cell():
    board = Board(5)
    board.add(1, 2)
    lines = board.render().splitlines()
    assert len(lines) == 7
    assert lines[0] == "-" * 7
    assert lines[-1] == "-" * 5
    assert lines[2] == "|  X  |"
    assert lines[1] == "|     |"


def test_parse_add_command():
    instruction = parse_command("a 3 4\n")
    assert (instruction.command, instruction.x, instruction.y) == (Command.ADD, 3, 4)


@pytest.mark.parametrize("line", ["", "z 1 2", "a 1", "r x y"])
def test_parse_rejects_bad_lines(line):
    with pytest.raises(ValueError):
        parse_command(line)


def test_apply_command_add_and_next():
    board = Board(8)
    for line in ("a 3 2", "a 3 3", "a 3 4"):
        assert apply_command(board, line) is Command.ADD
    assert apply_command(board, "n") is Command.NEXT
    assert board.cells == {(2, 3), (3, 3), (4, 3)}


def test_apply_command_quit_leaves_board():
    board = Board(4)
    board.add(1, 1)
    assert apply_command(board, "q") is Command.QUIT
    assert board.cells == {(1, 1)}


def test_main_interactive(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("a 0 0\nbogus\nq\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Please enter a valid input" in out
    assert "|X" in out
    assert out.endswith("Program terminated\n")


def test_main_script(tmp_path, capsys):
    script = tmp_path / "cells.txt"
    script.write_text("a 0 0\nr 0 0\n")
    assert main([str(script)]) == 0
    out = capsys.readouterr().out
    assert "Improper file format" in out
    assert "Program terminated" in out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "Can't open the file" in capsys.readouterr().out


def test_main_too_many_arguments(capsys):
    assert main(["a", "b"]) == 0
    out = capsys.readouterr().out
    assert "Error: please enter the proper number of elements" in out