"""Tests for the registry and result builder (core/commands.py).

Covers:

* Registration rules and default seeding
* End-to-end parsing scenarios
* Required-parameter enforcement and the help short-circuit
* State isolation between parse calls
"""

from __future__ import annotations

import threading

import pytest

from cmdopts.core.commands import HELP_PARAM, Commands
from cmdopts.core.models import ParameterSpec, ParamType, ParseStatus
from cmdopts.exceptions import ConfigError, MissingRequiredParameterError, ValidationError


def _registry(*specs: ParameterSpec, auto_show_help: bool = True) -> Commands:
    commands = Commands(auto_show_help=auto_show_help)
    for spec in specs:
        commands.add_param(spec)
    return commands


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------

class TestRegistration:
    def test_help_param_registered_first(self) -> None:
        commands = _registry(ParameterSpec(name="files", type=ParamType.ARRAY))
        assert commands.params[0] is HELP_PARAM
        assert commands.options == {"H": False, "help": False}

    def test_add_param_is_chainable(self) -> None:
        commands = Commands()
        assert commands.add_param(ParameterSpec(name="b", type=ParamType.BOOLEAN)) is commands

    def test_default_seeded_under_name_and_alias(self) -> None:
        commands = _registry(
            ParameterSpec(name="width", alias="w", type=ParamType.INT, default=100),
        )
        assert commands.options["width"] == 100
        assert commands.options["w"] == 100

    @pytest.mark.parametrize("choices", [None, ()])
    def test_enum_without_choices_rejected(self, choices: tuple[str, ...] | None) -> None:
        with pytest.raises(ConfigError, match="permitted values"):
            _registry(ParameterSpec(name="type", type=ParamType.ENUM, choices=choices))

    def test_rejected_spec_is_not_registered(self) -> None:
        commands = Commands()
        with pytest.raises(ConfigError):
            commands.add_param(ParameterSpec(name="type", type=ParamType.ENUM))
        assert [spec.name for spec in commands.params] == ["H"]

    def test_duplicate_name_rejected(self) -> None:
        commands = _registry(ParameterSpec(name="out", type=ParamType.STRING))
        with pytest.raises(ConfigError, match="already used"):
            commands.add_param(ParameterSpec(name="out", type=ParamType.FILE))

    def test_alias_colliding_with_name_rejected(self) -> None:
        with pytest.raises(ConfigError, match="'help'"):
            _registry(ParameterSpec(name="assist", alias="help", type=ParamType.BOOLEAN))

    def test_name_colliding_with_alias_rejected(self) -> None:
        commands = _registry(ParameterSpec(name="output", alias="o", type=ParamType.FILE))
        with pytest.raises(ConfigError):
            commands.add_param(ParameterSpec(name="o", type=ParamType.STRING))

    def test_alias_equal_to_own_name_rejected(self) -> None:
        with pytest.raises(ConfigError):
            _registry(ParameterSpec(name="x", alias="x", type=ParamType.STRING))

    def test_empty_identifiers_rejected(self) -> None:
        with pytest.raises(ConfigError):
            _registry(ParameterSpec(name="", type=ParamType.STRING))
        with pytest.raises(ConfigError):
            _registry(ParameterSpec(name="x", alias="", type=ParamType.STRING))

    def test_help_text_covers_every_param(self) -> None:
        commands = _registry(ParameterSpec(name="files", type=ParamType.ARRAY))
        text = commands.help_text()
        assert "-H, --help <boolean>" in text
        assert "--files <array>" in text


# ---------------------------------------------------------------------------
# End-to-end scenarios
# ---------------------------------------------------------------------------

class TestScenarios:
    def test_boolean_enum_and_positional(self) -> None:
        commands = _registry(
            ParameterSpec(name="b", type=ParamType.BOOLEAN),
            ParameterSpec(name="type", type=ParamType.ENUM, choices=("dog", "cat")),
        )
        outcome = commands.parse(["--b", "--type", "cat", "extra"])
        assert outcome.status is ParseStatus.SUCCESS
        assert outcome.options == {"H": False, "help": False, "b": True, "type": "cat"}
        assert outcome.args == ["extra"]
        assert commands.options == outcome.options
        assert commands.args == ["extra"]

    def test_default_applies_without_input(self) -> None:
        commands = _registry(ParameterSpec(name="width", type=ParamType.INT, default=100))
        outcome = commands.parse([])
        assert outcome.ok
        assert commands.options["width"] == 100

    def test_array_then_boolean(self) -> None:
        commands = _registry(
            ParameterSpec(name="files", type=ParamType.ARRAY),
            ParameterSpec(name="b", type=ParamType.BOOLEAN),
        )
        outcome = commands.parse(["--files", "a.txt", "b.txt", "--b"])
        assert outcome.ok
        assert outcome.options["files"] == ["a.txt", "b.txt"]
        assert outcome.options["b"] is True

    def test_missing_required_string(self) -> None:
        commands = _registry(ParameterSpec(name="str", type=ParamType.STRING))
        outcome = commands.parse([])
        assert outcome.status is ParseStatus.ERROR
        assert isinstance(outcome.error, MissingRequiredParameterError)
        assert outcome.error.param_name == "str"
        assert "--str" in str(outcome.error)
        with pytest.raises(MissingRequiredParameterError):
            outcome.unwrap()


# ---------------------------------------------------------------------------
# Parsing rules
# ---------------------------------------------------------------------------

class TestParsing:
    def test_empty_input_yields_seeded_defaults(self) -> None:
        commands = _registry(
            ParameterSpec(name="width", alias="w", type=ParamType.INT, default=100),
            ParameterSpec(name="name", type=ParamType.STRING, default="x"),
        )
        seeded = dict(commands.options)
        outcome = commands.parse([])
        assert outcome.options == seeded
        assert outcome.args == []

    def test_alias_and_name_are_equivalent(self) -> None:
        spec = ParameterSpec(name="output", alias="o", type=ParamType.FILE)
        by_name = _registry(spec).parse(["--output", "log.txt"])
        by_alias = _registry(spec).parse(["-o", "log.txt"])
        assert by_name.options == by_alias.options
        assert by_name.options["output"] == by_name.options["o"] == "log.txt"

    @pytest.mark.parametrize(
        "argv",
        [
            ["--str", "v", "a", "b"],
            ["a", "--str", "v", "b"],
            ["a", "b", "--str", "v"],
        ],
    )
    def test_required_satisfied_anywhere(self, argv: list[str]) -> None:
        commands = _registry(ParameterSpec(name="str", type=ParamType.STRING))
        outcome = commands.parse(argv)
        assert outcome.ok
        assert outcome.options["str"] == "v"
        assert outcome.args == ["a", "b"]

    def test_required_satisfied_by_alias(self) -> None:
        commands = _registry(ParameterSpec(name="autoDel", alias="a", type=ParamType.BOOLEAN))
        assert commands.parse(["-a"]).ok

    def test_first_missing_required_is_reported(self) -> None:
        commands = _registry(
            ParameterSpec(name="first", type=ParamType.STRING),
            ParameterSpec(name="second", type=ParamType.STRING),
        )
        outcome = commands.parse(["--second", "v"])
        assert isinstance(outcome.error, MissingRequiredParameterError)
        assert outcome.error.param_name == "first"

    def test_last_occurrence_wins(self) -> None:
        commands = _registry(
            ParameterSpec(name="width", alias="w", type=ParamType.INT, default=100),
        )
        outcome = commands.parse(["-w", "1", "--width", "2"])
        assert outcome.options["width"] == 2
        assert outcome.options["w"] == 2

    def test_unknown_flags_pass_through(self) -> None:
        commands = _registry()
        outcome = commands.parse(["--verbose", "file.txt", "-x"])
        assert outcome.ok
        assert outcome.args == ["--verbose", "file.txt", "-x"]

    def test_valueless_flag_keeps_default(self) -> None:
        commands = _registry(ParameterSpec(name="width", type=ParamType.INT, default=100))
        outcome = commands.parse(["--width"])
        assert outcome.ok
        assert outcome.options["width"] == 100

    def test_valueless_flag_without_default_fails(self) -> None:
        commands = _registry(ParameterSpec(name="str", type=ParamType.STRING))
        outcome = commands.parse(["--str", "--other"])
        assert isinstance(outcome.error, ValidationError)
        assert outcome.error.flag == "--str"

    def test_first_validation_error_wins(self) -> None:
        commands = _registry(
            ParameterSpec(name="a", type=ParamType.INT, default=0),
            ParameterSpec(name="b", type=ParamType.INT, default=0),
        )
        outcome = commands.parse(["-b", "x", "-a", "y"])
        assert isinstance(outcome.error, ValidationError)
        assert outcome.error.param_name == "b"

    def test_error_carries_help_when_auto_show_help(self) -> None:
        commands = _registry(ParameterSpec(name="str", type=ParamType.STRING))
        outcome = commands.parse([])
        assert outcome.help_text == commands.help_text()

    def test_error_without_help_when_disabled(self) -> None:
        commands = _registry(
            ParameterSpec(name="str", type=ParamType.STRING),
            auto_show_help=False,
        )
        outcome = commands.parse([])
        assert outcome.status is ParseStatus.ERROR
        assert outcome.help_text is None


# ---------------------------------------------------------------------------
# Help short-circuit
# ---------------------------------------------------------------------------

class TestHelp:
    @pytest.mark.parametrize("argv", [["--help"], ["-H"], ["--H"], ["-help", "yes"]])
    def test_help_flag_requests_help(self, argv: list[str]) -> None:
        commands = _registry(ParameterSpec(name="str", type=ParamType.STRING))
        outcome = commands.parse(argv)
        assert outcome.status is ParseStatus.HELP_REQUESTED
        assert outcome.exit_code == 0
        assert outcome.help_text is not None
        assert "--str <string>" in outcome.help_text

    def test_help_false_does_not_request_help(self) -> None:
        commands = _registry(ParameterSpec(name="str", type=ParamType.STRING))
        outcome = commands.parse(["--help", "false"])
        assert isinstance(outcome.error, MissingRequiredParameterError)

    def test_invalid_value_reported_even_with_help(self) -> None:
        commands = _registry(ParameterSpec(name="n", type=ParamType.INT, default=1))
        outcome = commands.parse(["--help", "--n", "abc"])
        assert outcome.status is ParseStatus.ERROR


# ---------------------------------------------------------------------------
# State between parses
# ---------------------------------------------------------------------------

class TestState:
    def test_failed_parse_leaves_state_untouched(self) -> None:
        commands = _registry(ParameterSpec(name="width", type=ParamType.INT, default=100))
        commands.parse(["--width", "5", "pos"])
        outcome = commands.parse(["--width", "abc", "other"])
        assert outcome.status is ParseStatus.ERROR
        assert commands.options["width"] == 5
        assert commands.args == ["pos"]
        assert outcome.options["width"] == 5

    def test_missing_required_leaves_state_untouched(self) -> None:
        commands = _registry(ParameterSpec(name="str", type=ParamType.STRING))
        commands.parse(["--str", "kept"])
        commands.parse(["new-positional"])
        assert commands.options["str"] == "kept"
        assert commands.args == []

    def test_each_parse_starts_from_defaults(self) -> None:
        commands = _registry(ParameterSpec(name="width", type=ParamType.INT, default=100))
        commands.parse(["--width", "5", "a"])
        outcome = commands.parse(["b"])
        assert outcome.options["width"] == 100
        assert outcome.args == ["b"]

    def test_concurrent_parses_do_not_interleave(self) -> None:
        commands = _registry(ParameterSpec(name="n", type=ParamType.INT, default=0))
        results: dict[int, object] = {}

        def _run(value: int) -> None:
            outcome = commands.parse(["--n", str(value), f"p{value}"])
            results[value] = (outcome.options["n"], outcome.args)

        threads = [threading.Thread(target=_run, args=(i,)) for i in range(20)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        for value, result in results.items():
            assert result == (value, [f"p{value}"])

    def test_outcome_does_not_share_state_with_registry(self) -> None:
        commands = _registry(ParameterSpec(name="files", alias="f", type=ParamType.ARRAY))
        outcome = commands.parse(["--files", "a.txt", "pos"])
        outcome.options["H"] = True
        outcome.options["files"].append("b.txt")
        outcome.args.append("extra")
        assert commands.options["H"] is False
        assert commands.options["files"] == ["a.txt"]
        assert commands.options["f"] == ["a.txt"]
        assert commands.args == ["pos"]

    def test_help_outcome_does_not_share_state_with_registry(self) -> None:
        commands = _registry()
        outcome = commands.parse(["pos", "--help"])
        outcome.options["H"] = False
        outcome.args.clear()
        assert commands.options["H"] is True
        assert commands.args == ["pos"]
