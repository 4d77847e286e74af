import pytest

from pimplstack.implementations import StackImplementation, StackList, StackVector


def _fresh_implementations():
    return [StackList(), StackVector()]


def test_starts_empty():
    for impl in (StackList(), StackVector()):
        assert impl.is_empty()
        assert len(impl) == 0


def test_last_in_first_out():
    values = [1.0, 2.0, 3.0]
    for impl in (StackList(), StackVector()):
        for value in values:
            impl.push(value)
        assert len(impl) == len(values)
        assert impl.top() == values[-1]
        popped = [impl.pop() for _ in values]
        assert popped == list(reversed(values))
        assert impl.is_empty()


def test_list_implementation_push_pop():
    impl = StackList()
    impl.push(5.0)
    impl.push(6.5)
    assert impl.top() == 6.5
    assert impl.pop() == 6.5
    assert impl.top() == 5.0
    assert len(impl) == 1


def test_vector_implementation_push_pop():
    impl = StackVector()
    impl.push(5.0)
    impl.push(6.5)
    assert impl.top() == 6.5
    assert impl.pop() == 6.5
    assert impl.top() == 5.0
    assert len(impl) == 1


def test_empty_operations_raise():
    for impl in (StackList(), StackVector()):
        with pytest.raises(IndexError):
            impl.pop()
        with pytest.raises(IndexError):
            impl.top()


def test_copy_is_independent():
    for impl, cls in ((StackList(), StackList), (StackVector(), StackVector)):
        impl.push(1.0)
        duplicate = impl.copy()
        assert type(duplicate) is cls
        duplicate.push(2.0)
        assert len(impl) == 1
        assert impl.top() == 1.0
        assert duplicate.top() == 2.0


def test_interface_is_abstract():
    with pytest.raises(TypeError):
        StackImplementation()