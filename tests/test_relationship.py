from ferrite.variable.relationship import (
    DependsOn,
    RefersTo,
    Supersedes,
    establish_relationships,
    inverse_relationships,
    relationships,
)


class FakeSpec:
    def __init__(self, name):
        self.name = name
        self.relationships = []

    def add_relationship(self, rel):
        self.relationships.append(rel)


def test_establish_records_on_both_sides():
    a, b = FakeSpec("A"), FakeSpec("B")
    rel = RefersTo(subject=a, refers_to=b)
    establish_relationships(rel)
    assert a.relationships == [rel]
    assert b.relationships == [rel]


def test_object_properties():
    a, b = FakeSpec("A"), FakeSpec("B")
    assert Supersedes(subject=a, supersedes=b).object is b
    assert RefersTo(subject=a, refers_to=b).object is b
    assert DependsOn(subject=a, depends_on=b).object is b


def test_relationships_only_where_subject():
    a, b = FakeSpec("A"), FakeSpec("B")
    rel = RefersTo(subject=a, refers_to=b)
    establish_relationships(rel)
    assert relationships(a, RefersTo) == [rel]
    assert relationships(b, RefersTo) == []


def test_inverse_relationships_only_where_object():
    a, b = FakeSpec("A"), FakeSpec("B")
    rel = Supersedes(subject=a, supersedes=b)
    establish_relationships(rel)
    assert inverse_relationships(b, Supersedes) == [rel]
    assert inverse_relationships(a, Supersedes) == []


def test_filters_by_kind():
    a, b = FakeSpec("A"), FakeSpec("B")
    refers = RefersTo(subject=a, refers_to=b)
    depends = DependsOn(subject=a, depends_on=b)
    establish_relationships(refers, depends)
    assert relationships(a, DependsOn) == [depends]
    assert relationships(a, RefersTo) == [refers]
    assert inverse_relationships(b, DependsOn) == [depends]


def test_multiple_relationships_keep_order():
    a, b, c = FakeSpec("A"), FakeSpec("B"), FakeSpec("C")
    first = Supersedes(subject=b, supersedes=a)
    second = Supersedes(subject=c, supersedes=a)
    establish_relationships(first, second)
    assert [r.subject for r in inverse_relationships(a, Supersedes)] == [b, c]