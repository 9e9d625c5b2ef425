from monadic.core.maybe import ABSENT, Present
from monadic.demo.family import Child, GrandChild, Parent


def test_bind_present_returns_result_as_is():
    inner = Present("x")
    assert Present(1).bind(lambda _: inner) is inner
    assert Present(1).bind(lambda _: ABSENT) is ABSENT

def test_bind_does_not_collapse_falsy_payload():
    assert Present(0).bind(lambda x: Present(x + 1)) == Present(1)

def test_bind_absent_never_invokes():
    calls = []
    assert ABSENT.bind(lambda x: calls.append(x) or Present(x)) is ABSENT
    assert calls == []

def test_map_nests():
    dad = Present(Parent())
    nested = dad.map(Parent.get_child)
    assert isinstance(nested, Present)
    assert isinstance(nested.value, Present)
    assert isinstance(nested.value.value, Child)
    assert str(nested) == "Present(Present(Child(David)))"

def test_map_nests_absent():
    dad = Present(Parent())
    nested = dad.map(Parent.get_child).map(lambda mc: mc.bind(Child.get_daughter))
    assert nested == Present(ABSENT)

def test_bind_flattens():
    dad = Present(Parent())
    child = dad.bind(Parent.get_child)
    assert isinstance(child.value, Child)
    assert child.value.name == "David"

def test_chained_bind():
    dad = Present(Parent())
    granddaughter = dad.bind(Parent.get_child).bind(Child.get_daughter)
    grandson = dad.bind(Parent.get_child).bind(Child.get_son)
    assert granddaughter is ABSENT
    assert isinstance(grandson.value, GrandChild)
    assert str(grandson) == "Present(I exist)"

def test_absent_head_short_circuits():
    mom = ABSENT
    assert mom.map(Parent.get_child) is ABSENT
    assert mom.bind(Parent.get_child).bind(Child.get_son) is ABSENT
