from collections import OrderedDict, UserDict, defaultdict

import pytest

from copy_spy import CopySpy
from modval import (
    HOLE, Box, HoleAccessError, UnsupportedContainerError, modify_if_present
)
from modval.modify_ops.mapping_ops import modify, modify_or_insert


def add_two(ref):
    ref.value += 2


def must_not_be_called(*args):
    raise AssertionError("must not be called")


class CounterStruct(object):
    """
    An immutable counter: incrementing produces a new instance.
    """
    def __init__(self, count):
        self.count = count

    def incremented(self):
        return CounterStruct(self.count + 1)

    def __eq__(self, other):
        return self.count == other.count

    def __repr__(self):
        return 'CounterStruct({})'.format(self.count)


class CounterClass(object):
    """
    A mutable counter: incrementing modifies the instance.
    """
    def __init__(self, count):
        self.count = count

    def increment(self):
        self.count += 1

    def __eq__(self, other):
        return self.count == other.count

    def __repr__(self):
        return 'CounterClass({})'.format(self.count)


class RecordingDict(dict):
    """
    A dict which records the writes done through item assignment.
    """
    def __init__(self, *args, **kwargs):
        super(RecordingDict, self).__init__(*args, **kwargs)
        self.writes = []

    def __setitem__(self, key, value):
        self.writes.append((key, value))
        super(RecordingDict, self).__setitem__(key, value)


def counts(mapping):
    return {k: v.count for k, v in mapping.items()}


# With a default value

def test_insert_on_absent_default():
    mapping = {}
    modify_or_insert(mapping, 'k', lambda: 0, add_two)
    assert mapping == {'k': 2}


def test_modify_or_insert():
    hues = {'Heliotrope': 296, 'Coral': 16}

    modify_or_insert(hues, 'Coral', lambda: 16, add_two)
    assert hues['Coral'] == 18

    modify_or_insert(hues, 'Cerise', lambda: 328, add_two)
    assert hues['Cerise'] == 330

    assert hues == {'Heliotrope': 296, 'Coral': 18, 'Cerise': 330}


def test_default_only_called_when_absent():
    mapping = {'a': 1}
    modify_or_insert(mapping, 'a', must_not_be_called, add_two)
    assert mapping == {'a': 3}


def test_untouched_default_is_inserted():
    mapping = {'foo': 0}
    modify_or_insert(mapping, 'baz', lambda: 0, lambda ref: None)
    assert mapping == {'foo': 0, 'baz': 0}


def test_failing_default_leaves_mapping_unchanged():
    mapping = {'a': 1}

    def fail():
        raise LookupError('no default')

    with pytest.raises(LookupError):
        modify_or_insert(mapping, 'b', fail, must_not_be_called)

    assert mapping == {'a': 1}


def test_modify_or_insert_restores_on_error():
    mapping = {'a': 5}

    def fail(ref):
        raise RuntimeError('boom')

    with pytest.raises(RuntimeError):
        modify_or_insert(mapping, 'a', lambda: 0, fail)

    assert mapping == {'a': 5}


def test_modify_or_insert_keeps_inserted_key_on_error():
    mapping = {}

    def fail(ref):
        ref.value.append('x')
        raise RuntimeError('boom')

    with pytest.raises(RuntimeError):
        modify_or_insert(mapping, 'a', list, fail)

    assert mapping == {'a': ['x']}


def test_modify_or_insert_holds_key_during_closure():
    mapping = {'a': 1}

    def check(key):
        def do(ref):
            assert mapping[key] is HOLE
            return 'done'

        return do

    assert modify_or_insert(mapping, 'a', lambda: 0, check('a')) == 'done'
    assert modify_or_insert(mapping, 'b', lambda: 0, check('b')) == 'done'
    assert mapping == {'a': 1, 'b': 0}


def test_modify_or_insert_does_not_copy():
    spy = CopySpy()
    spies = {'spy': spy}

    modify_or_insert(spies, 'spy', CopySpy, lambda ref: ref.value.mutate())

    assert spies['spy'] is spy
    assert spy.mutations == 1


def test_modify_or_insert_with_struct_and_class_values():
    structs = {'foo': CounterStruct(0)}
    classes = {'foo': CounterClass(0)}

    def increment_struct(ref):
        ref.value = ref.value.incremented()

    def increment_class(ref):
        ref.value.increment()

    for key in ('baz', 'blee', 'blee'):
        modify_or_insert(structs, key, lambda: CounterStruct(0),
                         increment_struct)
        modify_or_insert(classes, key, lambda: CounterClass(0),
                         increment_class)

    assert counts(structs) == {'foo': 0, 'baz': 1, 'blee': 2}
    assert counts(classes) == counts(structs)


# Without a default value

def test_modify_value_for_key():
    hues = {'Heliotrope': 296, 'Coral': 16}

    modify(hues, 'Coral', lambda value: modify_if_present(value, add_two))
    assert hues['Coral'] == 18

    modify(hues, 'Cerise', lambda value: modify_if_present(value, add_two))
    assert 'Cerise' not in hues

    modify(hues, 'Aquamarine', lambda value: value.set(156))
    assert hues['Aquamarine'] == 156

    assert hues == {'Heliotrope': 296, 'Coral': 18, 'Aquamarine': 156}


def test_no_insert_when_option_left_empty():
    mapping = {'a': 1}

    def check(option):
        assert option.is_empty()

    modify(mapping, 'b', check)
    assert mapping == {'a': 1}


def test_deletion_via_empty_option():
    mapping = {'a': 1}
    modify(mapping, 'a', lambda option: option.clear())
    assert mapping == {}


def test_modify_returns_closure_result():
    mapping = {'a': 1}
    assert modify(mapping, 'a', lambda option: option.take()) == 1
    assert mapping == {}


def test_modify_restores_on_error():
    mapping = {'a': 1}

    def fail(option):
        option.value += 1
        raise ValueError()

    with pytest.raises(ValueError):
        modify(mapping, 'a', fail)

    assert mapping == {'a': 2}


def test_modify_does_not_copy():
    spy = CopySpy()
    spies = {'spy': spy}

    def mutate(option):
        assert spies['spy'] is HOLE
        modify_if_present(option, lambda ref: ref.value.mutate())

    modify(spies, 'spy', mutate)

    assert spies['spy'] is spy
    assert spy.mutations == 1


def test_modify_always_writes_back():
    value = CounterClass(0)
    mapping = RecordingDict(a=value)

    modify(mapping, 'a', lambda option: option.value.increment())

    assert mapping.writes == [('a', HOLE), ('a', value)]
    assert mapping['a'] is value


def test_modify_with_struct_and_class_values():
    structs = {'foo': CounterStruct(0)}
    classes = {'foo': CounterClass(0)}

    modify(structs, 'baz', lambda option: option.set(CounterStruct(1)))
    modify(classes, 'baz', lambda option: option.set(CounterClass(1)))
    assert counts(structs) == {'foo': 0, 'baz': 1}
    assert counts(classes) == counts(structs)

    def increment_struct(ref):
        ref.value = ref.value.incremented()

    def increment_class(ref):
        ref.value.increment()

    modify(structs, 'baz',
           lambda option: modify_if_present(option, increment_struct))
    modify(classes, 'baz',
           lambda option: modify_if_present(option, increment_class))
    assert counts(structs) == {'foo': 0, 'baz': 2}
    assert counts(classes) == counts(structs)

    # keeps mappings unchanged
    modify(structs, 'blee', lambda option: None)
    modify(classes, 'blee', lambda option: None)
    assert counts(structs) == {'foo': 0, 'baz': 2}
    assert counts(classes) == counts(structs)


def test_modify_does_not_trigger_mapping_default():
    mapping = defaultdict(must_not_be_called)
    modify(mapping, 'a', lambda option: None)
    assert dict(mapping) == {}


def test_other_mapping_types():
    ordered = OrderedDict([('a', 1), ('b', 2)])
    modify(ordered, 'a', lambda option: modify_if_present(option, add_two))
    assert list(ordered.items()) == [('a', 3), ('b', 2)]

    user = UserDict({'a': 1})
    modify_or_insert(user, 'b', lambda: 0, add_two)
    modify(user, 'a', lambda option: option.clear())
    assert user == {'b': 2}


def test_reentrant_modification_is_an_error():
    mapping = {'a': 1}

    def reenter(ref):
        ref.value = 10
        modify_or_insert(mapping, 'a', lambda: 0, add_two)

    with pytest.raises(HoleAccessError):
        modify_or_insert(mapping, 'a', lambda: 0, reenter)

    assert mapping == {'a': 10}

    with pytest.raises(HoleAccessError):
        modify(mapping, 'a', lambda option: modify(mapping, 'a', add_two))

    assert mapping == {'a': 10}


def test_requires_a_mapping():
    with pytest.raises(UnsupportedContainerError):
        modify([1, 2], 0, must_not_be_called)

    with pytest.raises(UnsupportedContainerError):
        modify_or_insert(Box.holding({}), 'a', must_not_be_called,
                         must_not_be_called)
