import io
import sys

import pytest

from socialgraph.cli import MENU, main, run_menu
from socialgraph.network import Network
from socialgraph.user import User


@pytest.fixture
def network():
    net = Network()
    net.add_user(User(0, "Aled Montes", 2000, 90001))
    net.add_user(User(1, "Sandhya Krish", 2001, 90002))
    net.add_user(User(2, "Leo Griffin", 2002, 90003))
    net.add_connection("Aled Montes", "Leo Griffin")
    return net


def _run(net, lines):
    out, err = io.StringIO(), io.StringIO()
    run_menu(net, lines, out, err)
    return out.getvalue(), err.getvalue()


def test_add_user(network):
    out, err = _run(network, ["1 Jason Chen 2001 95053"])
    assert "Added user: Jason Chen with id 3" in out
    user = network.get_user(3)
    assert (user.name, user.year, user.zip_code) == ("Jason Chen", 2001, 95053)
    assert err == ""


def test_add_user_invalid_input(network):
    out, err = _run(network, ["1 Jason Chen year 95053"])
    assert "Invalid input for option 1" in err
    assert len(network) == 3


def test_menu_shown_before_each_read(network):
    out, _ = _run(network, ["", "9"])
    assert out.count(MENU) == 2


def test_connect_users(network):
    out, err = _run(network, ["2 Aled Montes Sandhya Krish"])
    assert "Connected: Aled Montes <-> Sandhya Krish" in out
    assert 1 in network.get_user(0).friends
    assert 0 in network.get_user(1).friends


def test_connect_unknown_user(network):
    _, err = _run(network, ["2 Aled Montes Nobody Here"])
    assert 'Error: one or both users do not exist ("Aled Montes", "Nobody Here").' in err


def test_connect_too_few_words(network):
    _, err = _run(network, ["2 Aled Montes"])
    assert "Invalid input for option 2" in err


def test_delete_connection(network):
    out, err = _run(network, ["3 Aled Montes Leo Griffin"])
    assert "Deleted connection: Aled Montes X Leo Griffin" in out
    assert network.get_user(0).friends == set()
    assert network.get_user(2).friends == set()


def test_delete_between_strangers(network):
    _, err = _run(network, ["3 Aled Montes Sandhya Krish"])
    assert "Error: users are not friends; nothing to delete." in err


def test_delete_unknown_user(network):
    _, err = _run(network, ["3 Nobody Here Leo Griffin"])
    assert "do not exist" in err
    assert network.get_user(2).friends == {0}


def test_write_round_trip(network, tmp_path):
    target = tmp_path / "users_new.txt"
    out, err = _run(network, [f"4 {target}"])
    assert f'Wrote 3 users to "{target}"' in out
    copy = Network()
    copy.read_users(target)
    assert [u.name for u in copy] == [u.name for u in network]
    assert copy.get_user(2).friends == {0}


def test_write_unwritable(network, tmp_path):
    target = tmp_path / "missing" / "users.txt"
    _, err = _run(network, [f"4 {target}"])
    assert f'Error: cannot open "{target}" for writing.' in err


def test_write_without_name(network):
    _, err = _run(network, ["4"])
    assert "Invalid input for option 4" in err


def test_non_number_stops(network):
    _run(network, ["quit", "1 Jason Chen 2001 95053"])
    assert len(network) == 3


def test_other_number_stops(network):
    _run(network, ["7", "1 Jason Chen 2001 95053"])
    assert len(network) == 3


def test_blank_line_is_skipped(network):
    _run(network, ["", "1 Jason Chen 2001 95053\n"])
    assert network.get_user(3).name == "Jason Chen"


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_reads_file_and_stdin(network, tmp_path, monkeypatch, capsys):
    source = tmp_path / "users.txt"
    network.write_users(source)
    target = tmp_path / "out.txt"
    monkeypatch.setattr(sys, "stdin", io.StringIO(f"2 Aled Montes Sandhya Krish\n4 {target}\n"))
    assert main([str(source)]) == 0
    copy = Network()
    copy.read_users(target)
    assert copy.get_user(0).friends == {1, 2}
    assert "Connected: Aled Montes <-> Sandhya Krish" in capsys.readouterr().out