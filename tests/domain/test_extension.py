import pytest

from solid_city.domain.core.exceptions import InvalidMemberError, ValidationError
from solid_city.domain.extension import (
    CompositeBlaster,
    ConditionalBlaster,
    NetLauncher,
    Shootable,
    SmokeBomber,
    SparkLauncher,
)


class TestCompositeBlaster:
    """Test attach, detach and ordered dispatch."""

    def test_attach_then_shoot_in_attachment_order(self, console):
        blaster = CompositeBlaster()
        blaster.attach(NetLauncher(console))
        blaster.attach(SmokeBomber(console))

        blaster.shoot()

        assert console.lines == ["Shoots net!", "Shoots smoke!"]

    def test_detach_excludes_member(self, console):
        net = NetLauncher(console)
        blaster = CompositeBlaster()
        blaster.attach(net)
        blaster.attach(SmokeBomber(console))

        blaster.detach(net)
        blaster.shoot()

        assert console.lines == ["Shoots smoke!"]

    def test_detach_absent_member_is_noop(self, console):
        blaster = CompositeBlaster()
        blaster.attach(NetLauncher(console))

        blaster.detach(SmokeBomber(console))
        blaster.shoot()

        assert len(blaster) == 1
        assert console.lines == ["Shoots net!"]

    def test_detach_on_empty_blaster_is_noop(self):
        blaster = CompositeBlaster()

        blaster.detach(NetLauncher())

        assert len(blaster) == 0

    def test_empty_blaster_has_no_output(self, console, capsys):
        CompositeBlaster().shoot()

        assert console.lines == []
        assert capsys.readouterr().out == ""

    def test_duplicates_are_permitted(self, console):
        net = NetLauncher(console)
        blaster = CompositeBlaster()
        blaster.attach(net)
        blaster.attach(net)

        blaster.shoot()

        assert console.lines == ["Shoots net!", "Shoots net!"]

    def test_detach_removes_first_occurrence_only(self, console):
        net = NetLauncher(console)
        smoke = SmokeBomber(console)
        blaster = CompositeBlaster()
        blaster.attach(net)
        blaster.attach(smoke)
        blaster.attach(net)

        blaster.detach(net)

        assert blaster.members == (smoke, net)

    def test_detach_matches_by_identity(self, console):
        first = NetLauncher(console)
        second = NetLauncher(console)
        blaster = CompositeBlaster()
        blaster.attach(first)
        blaster.attach(second)

        blaster.detach(second)

        assert blaster.members == (first,)

    def test_extension_without_modification(self, console):
        blaster = CompositeBlaster([NetLauncher(console), SmokeBomber(console)])
        blaster.attach(SparkLauncher(console))

        blaster.shoot()

        assert console.lines == ["Shoots net!", "Shoots smoke!", "Shoots sparks!"]

    def test_composites_nest(self, console):
        inner = CompositeBlaster([SmokeBomber(console), SparkLauncher(console)])
        outer = CompositeBlaster([NetLauncher(console), inner])

        outer.shoot()

        assert console.lines == ["Shoots net!", "Shoots smoke!", "Shoots sparks!"]

    def test_members_is_a_snapshot(self, console):
        blaster = CompositeBlaster()
        snapshot = blaster.members
        blaster.attach(NetLauncher(console))

        assert snapshot == ()
        assert len(blaster.members) == 1

    def test_attach_rejects_non_shootable(self):
        blaster = CompositeBlaster()

        with pytest.raises(InvalidMemberError) as exc:
            blaster.attach("Net")

        assert isinstance(exc.value, ValidationError)
        assert exc.value.capability == "Shootable"
        assert len(blaster) == 0

    def test_composite_is_shootable(self):
        assert isinstance(CompositeBlaster(), Shootable)


@pytest.mark.parametrize(
    "launcher_class, expected",
    [
        (NetLauncher, "Shoots net!"),
        (SmokeBomber, "Shoots smoke!"),
        (SparkLauncher, "Shoots sparks!"),
    ],
)
def test_launchers(console, launcher_class, expected):
    launcher_class(console).shoot()

    assert console.lines == [expected]


class TestConditionalBlaster:
    """Test the branch-per-kind counter-example."""

    @pytest.mark.parametrize(
        "kind, expected",
        [
            ("Net", ["Shoots net!"]),
            ("Smoke", ["Shoots smoke!"]),
            ("Sparks", ["Shoots sparks!"]),
        ],
    )
    def test_known_kinds(self, console, kind, expected):
        ConditionalBlaster(console).shoot(kind)

        assert console.lines == expected

    @pytest.mark.parametrize("kind", ["Unknown", "net", "", "Laser"])
    def test_unmatched_kind_is_silent_noop(self, console, kind):
        ConditionalBlaster(console).shoot(kind)

        assert console.lines == []

    def test_conditional_blaster_is_not_shootable(self):
        assert not isinstance(ConditionalBlaster(), Shootable)


class TestCompositeBlasterCycles:
    """Attaching a composite that would contain itself is rejected."""

    def test_self_attach_is_rejected(self, console):
        blaster = CompositeBlaster([NetLauncher(console)])

        with pytest.raises(InvalidMemberError, match="cycle"):
            blaster.attach(blaster)

        blaster.shoot()
        assert len(blaster) == 1
        assert console.lines == ["Shoots net!"]

    def test_two_level_cycle_is_rejected(self, console):
        outer = CompositeBlaster([NetLauncher(console)])
        inner = CompositeBlaster([SmokeBomber(console)])
        outer.attach(inner)

        with pytest.raises(InvalidMemberError):
            inner.attach(outer)

        outer.shoot()
        assert inner.members[-1] is not outer
        assert console.lines == ["Shoots net!", "Shoots smoke!"]

    def test_deep_cycle_is_rejected(self):
        top = CompositeBlaster()
        middle = CompositeBlaster()
        bottom = CompositeBlaster()
        top.attach(middle)
        middle.attach(bottom)

        with pytest.raises(InvalidMemberError):
            bottom.attach(top)

        assert len(bottom) == 0

    def test_shared_inner_composite_is_not_a_cycle(self, console):
        shared = CompositeBlaster([SparkLauncher(console)])
        left = CompositeBlaster([shared])
        outer = CompositeBlaster([left])

        outer.attach(shared)
        outer.shoot()

        assert console.lines == ["Shoots sparks!", "Shoots sparks!"]
