import pytest

from craftmap import cli, constants


def test_sort_prints_ascending(capsys):
    assert cli.main(["sort", "b=1", "a=2", "c=3", "a=9"]) == 0
    assert capsys.readouterr().out == "a:9\nb:1\nc:3\n"


def test_sort_int_keys(capsys):
    assert cli.main(["sort", "--int-keys", "10=x", "9=y"]) == 0
    assert capsys.readouterr().out == "9:y\n10:x\n"


def test_sort_rejects_bad_pair():
    with pytest.raises(SystemExit) as info:
        cli.main(["sort", "novalue"])
    assert info.value.code == 2


def test_gather_is_seeded(capsys):
    cli.main(["gather", "--kind", "food", "--times", "10", "--seed", "3", "--name", "Ada"])
    first = capsys.readouterr().out
    cli.main(["gather", "--kind", "food", "--times", "10", "--seed", "3", "--name", "Ada"])
    assert capsys.readouterr().out == first
    assert "Ada's Inventory:" in first


def test_craft_success(capsys):
    assert cli.main(["craft", "Torch", "--have", "Wood=1", "--have", "Resin=2"]) == 0
    out = capsys.readouterr().out
    assert "Successfully crafted Torch!" in out
    assert out.endswith("Resin:1\nTorch:1\nWood:0\n")


def test_craft_missing_requirements(capsys):
    assert cli.main(["craft", "Torch", "--have", "Wood=1"]) == 1
    assert "missing requirements" in capsys.readouterr().err


def test_craft_unknown_recipe(capsys):
    assert cli.main(["craft", "Spaceship"]) == 1
    assert "unknown recipe" in capsys.readouterr().err


def test_empty_hero_name_is_reported(capsys):
    assert cli.main(["gather", "--name", ""]) == 1
    assert "cannot be empty" in capsys.readouterr().err


def test_recipes_sorted(capsys):
    cli.main(["recipes"])
    lines = capsys.readouterr().out.splitlines()
    names = [line.split(":", 1)[0] for line in lines]
    assert names == sorted(constants.RECIPES)
    assert "Torch:Wood, Resin" in lines


def test_areas(capsys):
    cli.main(["areas"])
    out = capsys.readouterr().out
    assert "Clearing\n" in out
    assert "Possible Exits: N E \n" in out
