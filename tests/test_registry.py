#!/usr/bin/env python3
"""
Tests for the command registry, groups, guilds, and client events.
"""

import pytest

from botcmd import (
    Command,
    CommandClient,
    CommandGroup,
    CommandMessage,
    ConfigurationError,
    Guild,
    RegistryError,
    UsageError,
    User,
)
from botcmd.config import Config


def make_command_class(name, group="math", member_name=None, **extra):
    info = {
        "name": name,
        "group": group,
        "member_name": member_name or name,
        "description": f"The {name} command.",
        **extra,
    }

    class _Command(Command):
        def __init__(self, client):
            super().__init__(client, info)

    _Command.__name__ = f"{name.title()}Command"
    return _Command


@pytest.fixture
def client():
    client = CommandClient()
    client.registry.register_group("math", "Math")
    return client


# ============================================================================
# Group Registration Tests
# ============================================================================

class TestGroups:

    def test_register_by_id(self, client):
        group = client.registry.register_group("util", "Utility")
        assert isinstance(group, CommandGroup)
        assert group.name == "Utility"
        assert client.registry.groups["util"] is group

    def test_name_defaults_to_id(self, client):
        assert client.registry.register_group("misc").name == "misc"

    def test_duplicate_group(self, client):
        with pytest.raises(RegistryError, match="already registered"):
            client.registry.register_group("math")

    def test_uppercase_group_id(self, client):
        with pytest.raises(ConfigurationError):
            client.registry.register_group("Util")

    def test_register_groups(self, client):
        client.registry.register_groups(["a", ("b", "Bee"), ("c", "Sea", True)])
        assert client.registry.groups["b"].name == "Bee"
        assert client.registry.groups["c"].guarded is True

    def test_guarded_group(self, client):
        group = client.registry.register_group("core", guarded=True)
        with pytest.raises(UsageError, match="guarded"):
            group.set_enabled_in(None, False)
        assert group.is_enabled_in(None) is True

    def test_group_global_toggle_emits(self, client):
        events = []
        client.on("group_status_change", lambda *args: events.append(args))
        group = client.registry.groups["math"]
        group.set_enabled_in(None, False)
        assert group.is_enabled_in(None) is False
        assert events == [(None, group, False)]

    def test_find_groups(self, client):
        client.registry.register_group("mathx", "Extended")
        assert [g.id for g in client.registry.find_groups("math")] == ["math"]
        assert [g.id for g in client.registry.find_groups("ext")] == ["mathx"]
        assert len(client.registry.find_groups()) == 2


# ============================================================================
# Command Registration Tests
# ============================================================================

class TestRegisterCommand:

    def test_register_class(self, client):
        cmd = client.registry.register_command(make_command_class("add"))
        assert client.registry.commands["add"] is cmd
        assert client.registry.groups["math"].commands["add"] is cmd
        assert cmd.group is client.registry.groups["math"]

    def test_register_instance(self, client):
        cmd = make_command_class("add")(client)
        assert client.registry.register_command(cmd) is cmd

    def test_register_emits(self, client):
        events = []
        client.on("command_register", lambda cmd, registry: events.append(cmd.name))
        client.registry.register_command(make_command_class("add"))
        assert events == ["add"]

    def test_unknown_group(self, client):
        with pytest.raises(RegistryError, match="not registered"):
            client.registry.register_command(make_command_class("add", group="nope"))

    def test_invalid_object(self, client):
        with pytest.raises(RegistryError):
            client.registry.register_command("add")

    def test_invalid_descriptor_propagates(self, client):
        with pytest.raises(ConfigurationError):
            client.registry.register_command(make_command_class("Add", member_name="add"))
        assert len(client.registry) == 0

    def test_name_collision(self, client):
        client.registry.register_command(make_command_class("add"))
        with pytest.raises(RegistryError, match="add"):
            client.registry.register_command(make_command_class("add", member_name="add2"))

    def test_alias_collision(self, client):
        client.registry.register_command(make_command_class("add", aliases=["plus"]))
        with pytest.raises(RegistryError, match="plus"):
            client.registry.register_command(make_command_class("plus"))

    def test_member_name_collision(self, client):
        client.registry.register_command(make_command_class("add"))
        with pytest.raises(RegistryError, match="member name"):
            client.registry.register_command(make_command_class("sum", member_name="add"))

    def test_unregister(self, client):
        cmd = client.registry.register_command(make_command_class("add"))
        client.registry.unregister_command(cmd)
        assert "add" not in client.registry
        assert client.registry.groups["math"].commands == {}
        with pytest.raises(RegistryError):
            client.registry.unregister_command(cmd)

    def test_iteration(self, client):
        client.registry.register_commands([make_command_class("add"), make_command_class("sub")])
        assert [c.name for c in client.registry] == ["add", "sub"]
        assert len(client.registry) == 2
        assert "add" in client.registry


# ============================================================================
# Find / Resolve Tests
# ============================================================================

class TestFindCommands:

    @pytest.fixture
    def populated(self, client):
        client.registry.register_commands([
            make_command_class("add", aliases=["plus"]),
            make_command_class("add-all"),
            make_command_class("sub", guild_only=True),
        ])
        return client

    def test_exact_match_wins(self, populated):
        assert [c.name for c in populated.registry.find_commands("add")] == ["add"]

    def test_partial_match(self, populated):
        assert [c.name for c in populated.registry.find_commands("ad")] == ["add", "add-all"]

    def test_alias_match(self, populated):
        assert [c.name for c in populated.registry.find_commands("PLUS")] == ["add"]
        assert [c.name for c in populated.registry.find_commands("addall")] == ["add-all"]

    def test_exact_only(self, populated):
        assert populated.registry.find_commands("ad", exact=True) == []

    def test_filter_by_message(self, populated):
        names = [c.name for c in populated.registry.find_commands(message=CommandMessage())]
        assert "sub" not in names
        assert "add" in names

    def test_resolve_command(self, populated):
        assert populated.registry.resolve_command("plus").name == "add"
        with pytest.raises(UsageError):
            populated.registry.resolve_command("nothing")

    def test_resolve_group(self, populated):
        assert populated.registry.resolve_group("math").id == "math"
        with pytest.raises(UsageError):
            populated.registry.resolve_group("nothing")


# ============================================================================
# Re-registration Tests
# ============================================================================

class TestReregister:

    def test_replaces_instance(self, client):
        old = client.registry.register_command(make_command_class("add"))
        new = client.registry.reregister_command(
            make_command_class("add", aliases=["plus"]), old
        )
        assert new is not old
        assert client.registry.commands["add"] is new
        assert client.registry.groups["math"].commands["add"] is new
        assert new.group is old.group
        assert new.aliases == ["plus"]

    def test_keeps_global_enabled(self, client):
        old = client.registry.register_command(make_command_class("add"))
        old.set_enabled_in(None, False)
        new = client.registry.reregister_command(make_command_class("add"), old)
        assert new.global_enabled is False

    def test_emits(self, client):
        events = []
        client.on("command_reregister", lambda new, old: events.append((new.name, old.name)))
        old = client.registry.register_command(make_command_class("add"))
        client.registry.reregister_command(make_command_class("add"), old)
        assert events == [("add", "add")]

    @pytest.mark.parametrize("replacement", [
        make_command_class("sum", member_name="add"),
        make_command_class("add", group="other"),
        make_command_class("add", member_name="plus"),
    ])
    def test_identity_cannot_change(self, client, replacement):
        client.registry.register_group("other")
        old = client.registry.register_command(make_command_class("add"))
        with pytest.raises(RegistryError, match="cannot change"):
            client.registry.reregister_command(replacement, old)
        assert client.registry.commands["add"] is old

    def test_alias_collision_with_other_command(self, client):
        old = client.registry.register_command(make_command_class("add"))
        client.registry.register_command(make_command_class("sub"))
        with pytest.raises(RegistryError, match="sub"):
            client.registry.reregister_command(make_command_class("add", aliases=["sub"]), old)


# ============================================================================
# Builtin Registration Tests
# ============================================================================

class TestDefaults:

    def test_register_defaults(self):
        client = CommandClient()
        count = client.registry.register_defaults()
        assert count == 5
        assert set(client.registry.commands) == {"ping", "help", "enable", "disable", "reload"}
        assert client.registry.groups["commands"].guarded is True
        assert client.registry.groups["util"].guarded is False

    def test_no_builtins_path(self):
        client = CommandClient()
        client.registry.builtins_path = None
        assert client.registry.register_defaults() == 0
        assert set(client.registry.groups) == {"util", "commands"}


# ============================================================================
# Guild Tests
# ============================================================================

class TestGuild:

    @pytest.fixture
    def setup(self, client):
        cmd = client.registry.register_command(make_command_class("add"))
        guild = client.add_guild("g1", "Guild One")
        return client, cmd, guild

    def test_unset_uses_global(self, setup):
        client, cmd, guild = setup
        assert guild.is_command_enabled(cmd) is True
        cmd.set_enabled_in(None, False)
        assert guild.is_command_enabled(cmd) is False

    def test_override(self, setup):
        client, cmd, guild = setup
        guild.set_command_enabled(cmd, False)
        assert guild.is_command_enabled("add") is False
        guild.clear_command_enabled(cmd)
        assert guild.is_command_enabled(cmd) is True

    def test_emits_with_guild(self, setup):
        client, cmd, guild = setup
        events = []
        client.on("command_status_change", lambda *args: events.append(args))
        cmd.set_enabled_in(guild, False)
        assert events == [(guild, cmd, False)]

    def test_guarded_command(self, client):
        client.registry.register_group("core", guarded=True)
        cmd = client.registry.register_command(make_command_class("ping", group="core", guarded=True))
        guild = client.add_guild("g1")
        with pytest.raises(UsageError, match="guarded"):
            guild.set_command_enabled(cmd, False)
        assert guild.is_command_enabled(cmd) is True
        with pytest.raises(UsageError, match="guarded"):
            guild.set_group_enabled("core", False)
        assert guild.is_group_enabled("core") is True

    def test_group_override(self, setup):
        client, cmd, guild = setup
        guild.set_group_enabled("math", False)
        assert guild.is_group_enabled(cmd.group) is False
        assert cmd.is_enabled_in(guild) is False

    def test_enabled_must_be_bool(self, setup):
        client, cmd, guild = setup
        with pytest.raises(UsageError):
            guild.set_command_enabled(cmd, "yes")

    def test_protocol(self, setup):
        from botcmd import CommandScope
        client, cmd, guild = setup
        assert isinstance(guild, CommandScope)


# ============================================================================
# Client Tests
# ============================================================================

class TestClient:

    def test_emit_without_listeners(self):
        assert CommandClient().emit("nothing", 1) == 0

    def test_on_decorator_and_off(self):
        client = CommandClient()
        calls = []

        @client.on("ready")
        def handler(value):
            calls.append(value)

        assert client.emit("ready", 1) == 1
        client.off("ready", handler)
        assert client.emit("ready", 2) == 0
        assert calls == [1]

    def test_command_prefix_from_config(self):
        assert CommandClient().command_prefix == "!"
        client = CommandClient(config=Config(command_prefix="?"))
        assert client.command_prefix == "?"
        client.command_prefix = "$"
        assert client.command_prefix == "$"

    def test_commands_path_from_config(self, tmp_path):
        client = CommandClient(config=Config(commands_dir=str(tmp_path)))
        assert client.registry.commands_path == tmp_path

    def test_is_owner(self):
        client = CommandClient(config=Config(owner="1"))
        assert client.is_owner(User(username="a", id="1")) is True
        assert client.is_owner(User(username="b", id="2")) is False
        assert CommandClient().is_owner(User(username="a", id="1")) is False

    def test_resolve_guild(self):
        client = CommandClient()
        guild = client.add_guild("g1")
        assert client.resolve_guild("g1") is guild
        assert client.resolve_guild(guild) is guild
        assert isinstance(guild, Guild)
        with pytest.raises(UsageError):
            client.resolve_guild(123)
