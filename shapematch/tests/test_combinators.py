from __future__ import annotations

import pytest

from shapematch.exceptions import SchemaDefinitionError
from shapematch.matchers import (
    ArrayMatcher,
    EnumMatcher,
    NumberMatcher,
    ObjectMatcher,
    ObjectWithOnly,
    OptionalMatcher,
    StringMatcher,
)

from .conftest import dump


def test_array_requires_inner_matcher() -> None:
    with pytest.raises(SchemaDefinitionError, match="'of' is required"):
        ArrayMatcher()


def test_array_rejects_non_sequences() -> None:
    matcher = ArrayMatcher(of='number')
    assert dump(matcher.match('scores', 'nope')) == [
        {'path': 'scores', 'value': 'nope', 'message': 'should be an array'}
    ]
    assert len(matcher.match('scores', {'a': 1})) == 1


def test_array_reports_each_failing_element_in_index_order() -> None:
    errors = ArrayMatcher(of=NumberMatcher()).match('scores', [1, 'two', 3, None])
    assert dump(errors) == [
        {'path': 'scores[1]', 'value': 'two', 'message': 'should be a number'},
        {'path': 'scores[3]', 'value': None, 'message': 'should be a number'},
    ]


def test_array_of_arrays_nests_indexes() -> None:
    matcher = ArrayMatcher(of=ArrayMatcher(of='string'))
    errors = matcher.match('grid', [['a'], ['b', 2]])
    assert [error.path for error in errors] == ['grid[1][1]']


def test_array_bounds_do_not_stop_element_checks() -> None:
    matcher = ArrayMatcher(of='string', min_items=3)
    errors = matcher.match('tags', ['a', 1])
    assert [error.message for error in errors] == [
        'should have at least 3 items',
        'should be a string',
    ]
    assert ArrayMatcher(of='string', max_items=1).match('', ['a', 'b'])[0].message == (
        'should have at most 1 items'
    )


def test_array_json_schema() -> None:
    assert ArrayMatcher(of='string').to_json_schema() == {
        'type': 'array',
        'items': {'type': 'string'},
    }
    assert ArrayMatcher(of=EnumMatcher(values=['a']), min_items=1, max_items=4).to_json_schema() == {
        'type': 'array',
        'items': {'enum': ['a']},
        'minItems': 1,
        'maxItems': 4,
    }


def test_optional_delegates_at_the_same_path() -> None:
    matcher = OptionalMatcher(StringMatcher(min_length=2))
    assert matcher.is_optional is True
    assert dump(matcher.match('nick', 'a')) == [
        {'path': 'nick', 'value': 'a', 'message': 'should be a string with length >= 2'}
    ]


def test_optional_json_schema_is_the_inner_fragment() -> None:
    assert OptionalMatcher('number').to_json_schema() == {'type': 'number'}
    assert OptionalMatcher('number', description='Age').to_json_schema() == {
        'type': 'number',
        'description': 'Age',
    }


def test_optional_inside_array_of_objects() -> None:
    schema = ObjectWithOnly({
        'people': ArrayMatcher(of=ObjectWithOnly({
            'name': 'string',
            'nickname': OptionalMatcher('string'),
        })),
    })
    value = {'people': [{'name': 'a'}, {'name': 'b', 'nickname': 4}, {'nickname': 'c'}]}
    assert dump(schema.match('', value)) == [
        {'path': 'people[1].nickname', 'value': 4, 'message': 'should be a string'},
        {'path': 'people[2].name', 'value': None, 'message': 'is required'},
    ]


def test_open_object_ignores_undeclared_keys() -> None:
    schema = ObjectMatcher({'name': 'string'})
    assert schema.match('', {'name': 'bob', 'email': 'x'}) == []
    assert dump(schema.match('', {'name': 1})) == [
        {'path': 'name', 'value': 1, 'message': 'should be a string'}
    ]
    assert 'additionalProperties' not in schema.to_json_schema()


def test_open_object_rejects_non_mapping_argument() -> None:
    with pytest.raises(SchemaDefinitionError, match='Invalid argument'):
        ObjectMatcher(['name'])
