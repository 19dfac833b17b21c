from dataclasses import dataclass
from uuid import UUID, uuid4

import pytest

from selective_equatable import (
    EquivalenceMatcher,
    MatchConfig,
    NotEquivalentError,
    elements_are_equivalent,
    elements_are_not_equivalent,
    is_equivalent,
    is_not_equivalent,
)
from selective_equatable.adapters import FieldAccessor


@dataclass(frozen=True)
class Person:
    id: UUID
    name: str
    age: int


@dataclass(frozen=True)
class Product:
    id: int
    name: str
    price: float


@dataclass(frozen=True)
class Member:
    id: int
    name: str
    age: int
    height: int


def both_ways(first, second, *fields, **kwargs) -> bool:
    forward = is_equivalent(first, second, *fields, **kwargs)
    assert forward == is_equivalent(second, first, *fields, **kwargs)
    assert is_not_equivalent(first, second, *fields, **kwargs) == (not forward)
    return forward


ALICE = {"id": 1, "name": "Alice", "age": 30}
BOB = {"id": 2, "name": "Bob", "age": 25}
CAROL = {"id": 3, "name": "Carol", "age": 35}


def test_reordered_records_are_equivalent():
    assert both_ways([ALICE, BOB, CAROL], [CAROL, ALICE, BOB])


def test_count_mismatch_is_not_equivalent():
    assert not both_ways([{"id": 1, "age": 30}], [])


def test_whole_record_versus_field_subset():
    first = [{"id": 1, "name": "Alice", "age": 30}]
    second = [{"id": 1, "name": "Alice", "age": 31}]
    assert not both_ways(first, second)
    assert both_ways(first, second, "name")
    assert not both_ways(first, second, "age")


def test_duplicate_identity_in_first_collection():
    first = [{"id": 1, "name": "Alice"}, {"id": 1, "name": "Bob"}]
    assert not both_ways(first, [{"id": 1, "name": "Alice"}])
    assert not both_ways(first, [{"id": 1, "name": "Alice"}, {"id": 2, "name": "Bob"}])


def test_duplicate_identities_on_both_sides_are_never_equivalent():
    first = [{"id": 1, "name": "Alice"}, {"id": 1, "name": "Alice"}]
    assert not both_ways(first, list(first))


def test_empty_collections_are_equivalent():
    assert both_ways([], [])
    assert both_ways([], [], "name")


def test_missing_counterpart_is_not_equivalent():
    first = [ALICE, BOB, {"id": 5, "name": "Eve", "age": 40}]
    second = [ALICE, BOB, CAROL]
    assert not both_ways(first, second)


def test_collection_is_equivalent_to_itself_and_its_permutations():
    people = [Person(uuid4(), "Alice", 30), Person(uuid4(), "Bob", 25), Person(uuid4(), "Charlie", 35)]
    assert both_ways(people, people)
    assert both_ways(people, list(reversed(people)))
    assert both_ways(people, people[1:] + people[:1])


def test_same_identity_different_values():
    shared = uuid4()
    assert not both_ways([Person(shared, "Alice", 30)], [Person(shared, "Alice", 31)])


def test_products_in_different_order():
    catalog = [Product(1, "iPhone", 999.99), Product(2, "iPad", 599.99)]
    assert both_ways(catalog, catalog[::-1])


def test_field_subset_scenarios():
    a = Member(1, "Alice", 30, 60)
    a_31 = Member(1, "Alice", 31, 60)
    b = Member(2, "Bob", 30, 60)
    c = Member(3, "Carol", 30, 60)

    assert both_ways([a, b, c], [c, b, a_31], "name", "height")
    assert not both_ways([a, b, c], [c, b, a_31], "age", "height")
    assert not both_ways([a, b], [a, b, c], "name", "height")
    assert not both_ways([a, a, b], [a, b], "name", "height")
    assert not both_ways([a, b], [a_31, b], "age", "height")


def test_list_and_set_elements_are_equivalent():
    person = Person(uuid4(), "Alice", 30)
    as_list = [person]
    as_set = {person}
    assert elements_are_equivalent(as_list, as_set)
    assert elements_are_equivalent(as_set, as_list)
    assert not elements_are_not_equivalent(as_list, as_set)
    assert elements_are_not_equivalent(as_list, set())


def test_heterogeneous_containers_with_tuple_and_generator():
    people = (ALICE, BOB)
    assert elements_are_equivalent(people, (record for record in [BOB, ALICE]))
    assert elements_are_equivalent(people, [BOB, ALICE], "name")


def test_custom_identity_by_name_and_callable():
    first = [{"sku": "A-1", "qty": 2}, {"sku": "B-2", "qty": 5}]
    second = [{"sku": "B-2", "qty": 5}, {"sku": "A-1", "qty": 2}]
    assert both_ways(first, second, identity="sku")
    assert both_ways(first, second, identity=lambda record: record["sku"].lower())


def test_matcher_uses_configured_identity_and_fields():
    matcher = EquivalenceMatcher(MatchConfig(identity="sku", fields=("name",)))
    first = [{"sku": 1, "name": "Lamp", "price": 10}]
    second = [{"sku": 1, "name": "Lamp", "price": 12}]
    assert matcher.is_equivalent(first, second)
    assert matcher.is_not_equivalent(first, second, "price")
    assert matcher.elements_are_equivalent(first, tuple(second))
    assert matcher.elements_are_not_equivalent(first, [])


def test_negative_forms_are_strict_negations():
    cases = [
        ([ALICE], [ALICE]),
        ([ALICE], [BOB]),
        ([ALICE, ALICE], [ALICE, BOB]),
        ([], [ALICE]),
    ]
    for first, second in cases:
        assert is_not_equivalent(first, second) == (not is_equivalent(first, second))
        assert elements_are_not_equivalent(first, second) == (not elements_are_equivalent(first, second))


def test_unhashable_identity_raises_type_error():
    with pytest.raises(TypeError):
        is_equivalent([{"id": [1]}], [{"id": [1]}])


def test_callable_accessors_satisfy_field_accessor_protocol():
    def by_age(person):
        return person.age

    assert isinstance(by_age, FieldAccessor)
    assert not isinstance("age", FieldAccessor)
    shared = uuid4()
    assert both_ways([Person(shared, "Alice", 30)], [Person(shared, "Alicia", 30)], by_age)


def test_whole_overrides_configured_fields_for_one_call():
    matcher = EquivalenceMatcher(MatchConfig(fields=("name",)))
    first = [{"id": 1, "name": "Lamp", "price": 10}]
    second = [{"id": 1, "name": "Lamp", "price": 12}]
    assert matcher.is_equivalent(first, second)
    assert not matcher.is_equivalent(first, second, whole=True)
    assert matcher.is_not_equivalent(first, second, whole=True)
    assert matcher.elements_are_not_equivalent(first, tuple(second), whole=True)
    assert matcher.compare(first, second, whole=True).issue.field is None
    with pytest.raises(NotEquivalentError):
        matcher.assert_equivalent(first, second, whole=True)


def test_whole_cannot_be_combined_with_fields():
    matcher = EquivalenceMatcher()
    with pytest.raises(ValueError):
        matcher.compare([], [], "name", whole=True)


def test_core_package_exports_the_same_callables():
    from selective_equatable import core

    assert core.is_equivalent is is_equivalent
    assert core.EquivalenceMatcher is EquivalenceMatcher
    assert core.is_equal([], [])
    with pytest.raises(AttributeError):
        core.missing_name
