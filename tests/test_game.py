from drillbook.game import (
    CriticalBattle,
    Person,
    PersonBuilder,
    Squad,
    StandardBattle,
    Unit,
    UnitBuilder,
    UnitLeaf,
)


def _unit(name, health, attack, defense):
    return UnitBuilder().name(name).health(health).attack(attack).defense(defense).build()


def test_person_builder():
    person = PersonBuilder().name("Ivan").age(25).grade(10).build()
    assert person == Person("Ivan", 25, 10)


def test_person_builder_defaults():
    assert PersonBuilder().build() == Person("", 0, 0)


def test_builder_returns_independent_copies():
    builder = UnitBuilder().name("Archer")
    first = builder.build()
    first.health = 1
    second = builder.build()
    assert second.health == Unit().health
    assert second.name == "Archer"


def test_unit_describe_format():
    warrior = _unit("Warrior", 150, 20, 10)
    assert warrior.describe() == "Warrior [HP: 150, ATK: 20, DEF: 10]"


def test_leaf_render_and_copy():
    warrior = _unit("Warrior", 150, 20, 10)
    leaf = UnitLeaf(warrior)
    warrior.health = 0
    assert leaf.total_health() == 150
    assert leaf.render() == "  - " + leaf.unit.describe()


def test_squad_totals_nested():
    units = [_unit("Warrior", 150, 20, 10), _unit("Archer", 80, 25, 5), _unit("Knight", 200, 30, 15)]
    alpha = Squad("Alpha Squad")
    alpha.add(UnitLeaf(units[0]))
    alpha.add(UnitLeaf(units[1]))
    beta = Squad("Beta Squad")
    beta.add(UnitLeaf(units[2]))
    army = Squad("Main Army")
    army.add(alpha)
    army.add(beta)
    assert army.total_health() == sum(unit.health for unit in units)
    assert army.total_health() == alpha.total_health() + beta.total_health()
    assert len(army.members) == 2


def test_squad_render_layout():
    squad = Squad("Beta Squad")
    knight = _unit("Knight", 200, 30, 15)
    squad.add(UnitLeaf(knight))
    lines = squad.render().split("\n")
    assert lines[0] == ""
    assert lines[1] == "[Squad: Beta Squad]"
    assert lines[2] == "  - " + knight.describe()
    assert lines[-1] == f"Total HP: {knight.health}"


def test_standard_battle_reduces_health():
    attacker = _unit("Orc", 120, 18, 8)
    defender = _unit("Warrior", 150, 20, 10)
    battle = StandardBattle()
    damage = battle.damage(attacker, defender)
    log = battle.execute(attacker, defender)
    assert defender.health == 150 - damage
    assert "Orc attacks Warrior for 8 damage!" in log
    assert f"Defender HP remaining: {defender.health}" in log


def test_critical_battle_doubles_damage():
    attacker = _unit("Orc", 120, 18, 8)
    defender = _unit("Warrior", 150, 20, 10)
    assert CriticalBattle().damage(attacker, defender) == 2 * StandardBattle().damage(attacker, defender)
    log = CriticalBattle().execute(attacker, defender)
    assert "CRITICAL STRIKE! Orc vs Warrior" in log


def test_minimum_damage_is_one():
    weak = _unit("Rat", 10, 1, 0)
    tank = _unit("Golem", 300, 5, 50)
    assert StandardBattle().damage(weak, tank) == 1


def test_health_never_negative():
    attacker = _unit("Giant", 500, 400, 0)
    defender = _unit("Peasant", 5, 1, 0)
    StandardBattle().execute(attacker, defender)
    assert defender.health == 0


def test_battle_log_frame():
    attacker = _unit("Orc", 120, 18, 8)
    defender = _unit("Warrior", 150, 20, 10)
    lines = StandardBattle().execute(attacker, defender).split("\n")
    assert lines[1] == "=== Battle Start ==="
    assert lines[2] == "Orc vs Warrior"
    assert lines[-2] == "=== Battle End ==="