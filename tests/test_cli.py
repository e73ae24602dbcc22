# tests/test_cli.py
import cli


def test_stats_command(sdk, capsys):
    assert cli.main(["stats"], client=sdk) == 0
    out = capsys.readouterr().out
    assert "electronics" in out
    assert "kitchen" in out


def test_list_command_with_filter(sdk, capsys):
    assert cli.main(["list", "--category", "kitchen"], client=sdk) == 0
    out = capsys.readouterr().out
    assert "Coffee" in out
    assert "Laptop" not in out


def test_create_command(sdk, store):
    code = cli.main(["create", "--name", "Mug", "--price", "10", "--category", "kitchen",
                     "--in-stock", "false"], client=sdk)
    assert code == 0
    assert len(store) == 4
    assert store.snapshot()[-1].in_stock is False


def test_delete_unknown_returns_error_code(sdk, capsys):
    assert cli.main(["delete", "nope"], client=sdk) == 1
    assert "Product not found" in capsys.readouterr().out


def test_parse_bool():
    assert cli.parse_bool("Yes") is True
    assert cli.parse_bool("0") is False
