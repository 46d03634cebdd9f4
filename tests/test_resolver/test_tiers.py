import json

import pytest

from clopts import ClOpts, Tiers
from clopts.exceptions import NameResolutionError


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "serve.json").write_text(json.dumps({"port": 9090, "host": "file.host"}))
    return tmp_path


def build(argv, console):
    return ClOpts(
        {"port": {"value": 3000}, "host": {"value": "localhost"}, "name": {"value": "x"}},
        argv,
        console=console,
    )


def test_command_tier(console):
    clopts = build(["--port", "8080"], console)
    assert clopts.get("port", {"command": True}) == 8080
    assert clopts.get("port", {"command": False}) == 3000
    assert clopts.get("port") == 8080
    assert clopts.get("port", False) == 3000


def test_file_tier(config_dir, console):
    clopts = build([], console).set_config_file("serve.json")
    assert clopts.get("port", True) == 9090
    assert clopts.get("port", {"file": True}) == 9090
    assert clopts.get("port", {"command": True}) == 3000


def test_command_wins_over_file(config_dir, console):
    clopts = build(["--port", "1"], console).set_config_file("serve.json")
    assert clopts.get("port") == 1
    assert clopts.get("port", Tiers(file=True)) == 9090
    assert clopts.get("port", Tiers(file=True, command=True)) == 1
    assert clopts.get("host") == "file.host"


def test_options_tier_is_read_only(console):
    clopts = build([], console)
    assert clopts.options["port"] == 3000
    with pytest.raises(TypeError):
        clopts.options["port"] = 1


def test_get_all(config_dir, console):
    clopts = build(["--name", "cli"], console).set_config_file("serve.json")
    assert clopts.get_all() == {
        "help": False,
        "host": "file.host",
        "name": "cli",
        "port": 9090,
        "version": False,
    }
    assert clopts.get_all(False) == {
        "help": False,
        "host": "localhost",
        "name": "x",
        "port": 3000,
        "version": False,
    }
    assert clopts.get_all({"command": True})["name"] == "cli"
    assert clopts.get_all({"command": True})["port"] == 3000


def test_get_unknown_name(console):
    with pytest.raises(NameResolutionError):
        build([], console).get("missing")


def test_get_options(console):
    spec = build([], console).get_options("port")
    assert spec.value == 3000
    assert spec.short == "p"


def test_unknown_tier_rejected(console):
    with pytest.raises(ValueError, match="Unknown tiers"):
        build([], console).get("port", {"files": True})


@pytest.mark.parametrize(
    "tiers, expected",
    [
        (True, Tiers(file=True, command=True)),
        (False, Tiers()),
        ({"file": True}, Tiers(file=True)),
        ({}, Tiers()),
        (Tiers(command=True), Tiers(command=True)),
    ],
)
def test_tiers_coerce(tiers, expected):
    assert Tiers.coerce(tiers) == expected
