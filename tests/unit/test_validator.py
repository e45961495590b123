"""
TEST DOC: World Validator

WHAT: Tests for authoring checks on world definitions
WHY: Worlds can load fine and still be impossible to finish
HOW: Start from a clean world and break one thing at a time

CASES:
- Clean sample world has no issues
- Unreachable locations
- Locked exits with no usable key
- Undefined and unused macros

EDGE CASES:
- Issues are sorted errors first
"""

from adventure_engine.models.world import WorldDefinition
from adventure_engine.validator import (
    ValidationIssue,
    ValidationSeverity,
    WorldValidator,
    validate_world,
)


def two_location_world(**overrides) -> WorldDefinition:
    data = {
        "metadata": {"title": "Validator World"},
        "locations": [
            {
                "id": "porch",
                "name": "Porch",
                "description": "A porch.",
                "exits": {"north": "hall"},
            },
            {
                "id": "hall",
                "name": "Hall",
                "description": "A hall.",
                "exits": {"south": "porch"},
            },
        ],
        "start_location": "porch",
    }
    data.update(overrides)
    return WorldDefinition.model_validate(data)


def messages(issues: list[ValidationIssue], severity: ValidationSeverity) -> list[str]:
    return [i.message for i in issues if i.severity == severity]


class TestValidateWorld:
    """Tests for validate_world."""

    def test_clean_sample(self, sample_world: WorldDefinition):
        """The sample world has nothing to report."""
        assert validate_world(sample_world) == []

    def test_clean_two_locations(self):
        assert validate_world(two_location_world()) == []

    def test_unreachable_location(self):
        """Locations with no way in are reported."""
        world = two_location_world(
            locations=[
                {"id": "porch", "name": "Porch", "description": "A porch.", "exits": {"n": "hall"}},
                {"id": "hall", "name": "Hall", "description": "A hall.", "exits": {"s": "porch"}},
                {"id": "attic", "name": "Attic", "description": "An attic.", "exits": {"d": "hall"}},
            ]
        )
        issues = validate_world(world)
        assert [i.location for i in issues if i.severity == ValidationSeverity.WARNING] == [
            "location:attic"
        ]

    def test_locked_exit_key_not_placed(self):
        """A key that exists but is nowhere can never unlock its exit."""
        world = two_location_world(
            items=[{"id": "key", "name": "key"}],
            locations=[
                {
                    "id": "porch",
                    "name": "Porch",
                    "description": "A porch.",
                    "exits": {"north": {"target": "hall", "locked": True, "unlock_object": "key"}},
                },
                {"id": "hall", "name": "Hall", "description": "A hall.", "exits": {"s": "porch"}},
            ],
        )
        issues = validate_world(world)
        assert issues[0].severity == ValidationSeverity.ERROR
        assert issues[0].location == "location:porch/exit:north"
        assert "not placed anywhere" in issues[0].message
        assert "Item is not placed" in messages(issues, ValidationSeverity.INFO)[0]

    def test_locked_exit_without_key(self):
        """A locked exit with no unlock object needs custom code."""
        world = two_location_world(
            locations=[
                {
                    "id": "porch",
                    "name": "Porch",
                    "description": "A porch.",
                    "exits": {"north": {"target": "hall", "locked": True}},
                },
                {"id": "hall", "name": "Hall", "description": "A hall.", "exits": {"s": "porch"}},
            ],
        )
        warnings = messages(validate_world(world), ValidationSeverity.WARNING)
        assert any("no unlock_object" in w for w in warnings)

    def test_undefined_macro(self):
        """Tokens with no macro are reported where they appear."""
        world = two_location_world(prologue="Welcome to $(house).")
        issues = validate_world(world)
        assert len(issues) == 1
        assert issues[0].severity == ValidationSeverity.WARNING
        assert issues[0].location == "prologue"
        assert "$(house)" in issues[0].message

    def test_unused_macro(self):
        """Macros nobody references are suggestions."""
        world = two_location_world(macros={"house": "the house"})
        issues = validate_world(world)
        assert [str(i) for i in issues] == ["[INFO] macro:$(house): Macro is never referenced."]

    def test_macro_used_by_macro(self):
        """A macro referenced only from another macro counts as used."""
        world = two_location_world(
            prologue="$(greeting)",
            macros={"greeting": "Hello from $(house).", "house": "the house"},
        )
        assert validate_world(world) == []

    def test_dark_without_text(self):
        """Lights off with nothing to show in the dark is worth a note."""
        world = two_location_world(
            locations=[
                {"id": "porch", "name": "Porch", "description": "A porch.", "exits": {"n": "hall"}},
                {
                    "id": "hall",
                    "name": "Hall",
                    "description": "A hall.",
                    "lights_on": False,
                    "exits": {"s": "porch"},
                },
            ]
        )
        info = messages(validate_world(world), ValidationSeverity.INFO)
        assert any("Lights start off" in m for m in info)

    def test_sorted_by_severity(self):
        """Errors come before warnings, warnings before info."""
        world = two_location_world(
            prologue="$(missing)",
            macros={"unused": "text"},
            items=[{"id": "key", "name": "key"}],
            locations=[
                {
                    "id": "porch",
                    "name": "Porch",
                    "description": "A porch.",
                    "exits": {"north": {"target": "hall", "locked": True, "unlock_object": "key"}},
                },
                {"id": "hall", "name": "Hall", "description": "A hall."},
            ],
        )
        issues = WorldValidator(world).validate()
        severities = [i.severity.value for i in issues]
        assert severities == sorted(severities)
        assert issues[0].severity == ValidationSeverity.ERROR
