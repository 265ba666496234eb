"""Builders, a unit hierarchy and pluggable battle rules for a small strategy game."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import List, Optional, Sequence, Tuple

__all__ = [
    "Person",
    "PersonBuilder",
    "Unit",
    "UnitBuilder",
    "GameObject",
    "UnitLeaf",
    "Squad",
    "BattleStrategy",
    "StandardBattle",
    "CriticalBattle",
    "main",
]


@dataclass
class Person:
    name: str = ""
    age: int = 0
    grade: int = 0


class PersonBuilder:
    """Fluent builder for ``Person``."""

    def __init__(self) -> None:
        self._person = Person()

    def name(self, name: str) -> "PersonBuilder":
        self._person.name = name
        return self

    def age(self, age: int) -> "PersonBuilder":
        self._person.age = age
        return self

    def grade(self, grade: int) -> "PersonBuilder":
        self._person.grade = grade
        return self

    def build(self) -> Person:
        """Return a copy of the person built so far."""
        return replace(self._person)


@dataclass
class Unit:
    name: str = "Unit"
    health: int = 100
    attack: int = 10
    defense: int = 5

    def describe(self) -> str:
        return f"{self.name} [HP: {self.health}, ATK: {self.attack}, DEF: {self.defense}]"


class UnitBuilder:
    """Fluent builder for ``Unit``."""

    def __init__(self) -> None:
        self._unit = Unit()

    def name(self, name: str) -> "UnitBuilder":
        self._unit.name = name
        return self

    def health(self, health: int) -> "UnitBuilder":
        self._unit.health = health
        return self

    def attack(self, attack: int) -> "UnitBuilder":
        self._unit.attack = attack
        return self

    def defense(self, defense: int) -> "UnitBuilder":
        self._unit.defense = defense
        return self

    def build(self) -> Unit:
        """Return a copy of the unit built so far."""
        return replace(self._unit)


class GameObject(ABC):
    @abstractmethod
    def render(self) -> str:
        """Return a text description of the object."""

    @abstractmethod
    def total_health(self) -> int:
        """Return the combined health of everything in the object."""


class UnitLeaf(GameObject):
    """A single unit placed in an army; it holds its own copy of the unit."""

    def __init__(self, unit: Unit) -> None:
        self.unit = replace(unit)

    def render(self) -> str:
        return f"  - {self.unit.describe()}"

    def total_health(self) -> int:
        return self.unit.health


class Squad(GameObject):
    """A named group of units and other squads."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._members: List[GameObject] = []

    @property
    def members(self) -> Tuple[GameObject, ...]:
        return tuple(self._members)

    def add(self, obj: GameObject) -> None:
        self._members.append(obj)

    def render(self) -> str:
        lines = ["", f"[Squad: {self.name}]"]
        lines.extend(member.render() for member in self._members)
        lines.append(f"Total HP: {self.total_health()}")
        return "\n".join(lines)

    def total_health(self) -> int:
        return sum(member.total_health() for member in self._members)


class BattleStrategy(ABC):
    """One attack of ``attacker`` on ``defender``; subclasses choose the damage."""

    def execute(self, attacker: Unit, defender: Unit) -> str:
        """Apply the attack to ``defender`` and return the battle log."""
        lines = ["", "=== Battle Start ===", self.prepare(attacker, defender)]
        damage = self.damage(attacker, defender)
        lines.append(f"{attacker.name} attacks {defender.name} for {damage} damage!")
        defender.health = max(defender.health - damage, 0)
        lines.append(self.finalize(attacker, defender))
        lines.extend(["=== Battle End ===", ""])
        return "\n".join(lines)

    def prepare(self, attacker: Unit, defender: Unit) -> str:
        return f"{attacker.name} vs {defender.name}"

    @abstractmethod
    def damage(self, attacker: Unit, defender: Unit) -> int:
        """Return the damage ``attacker`` deals to ``defender``."""

    def finalize(self, attacker: Unit, defender: Unit) -> str:
        return f"Defender HP remaining: {defender.health}"


def _base_damage(attacker: Unit, defender: Unit) -> int:
    damage = attacker.attack - defender.defense
    return damage if damage > 0 else 1


class StandardBattle(BattleStrategy):
    def damage(self, attacker: Unit, defender: Unit) -> int:
        return _base_damage(attacker, defender)


class CriticalBattle(BattleStrategy):
    def prepare(self, attacker: Unit, defender: Unit) -> str:
        return "CRITICAL STRIKE! " + super().prepare(attacker, defender)

    def damage(self, attacker: Unit, defender: Unit) -> int:
        return _base_damage(attacker, defender) * 2


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Build a sample army, show it, and run two battles."""
    person = PersonBuilder().name("Ivan").age(25).grade(10).build()
    print(f"Name: {person.name}, Age: {person.age}, Grade: {person.grade}")
    print()
    print("=== STRATEGY GAME FRAMEWORK ===\n")
    print("--- Creating Units (Builder Pattern) ---")
    warrior = UnitBuilder().name("Warrior").health(150).attack(20).defense(10).build()
    archer = UnitBuilder().name("Archer").health(80).attack(25).defense(5).build()
    knight = UnitBuilder().name("Knight").health(200).attack(30).defense(15).build()
    for unit in (warrior, archer, knight):
        print(unit.describe())

    print("\n--- Organizing Army (Composite Pattern) ---")
    alpha = Squad("Alpha Squad")
    alpha.add(UnitLeaf(warrior))
    alpha.add(UnitLeaf(archer))
    beta = Squad("Beta Squad")
    beta.add(UnitLeaf(knight))
    army = Squad("Main Army")
    army.add(alpha)
    army.add(beta)
    print(army.render())

    print("\n--- Battle System (Template Method Pattern) ---")
    attacker = UnitBuilder().name("Orc").health(120).attack(18).defense(8).build()
    defender = replace(warrior)
    print(StandardBattle().execute(attacker, defender))
    print(CriticalBattle().execute(attacker, defender))
    print("Final state:")
    print(defender.describe())
    return 0


if __name__ == "__main__":
    sys.exit(main())