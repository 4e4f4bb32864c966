from __future__ import annotations

import pytest

from shapematch.exceptions import SchemaDefinitionError
from shapematch.matchers import EnumMatcher

from .conftest import dump


def test_enum_rejects_invalid_values_config() -> None:
    with pytest.raises(SchemaDefinitionError, match='Invalid enum values: None'):
        EnumMatcher(values=None)
    with pytest.raises(SchemaDefinitionError, match='Invalid enum values: blue'):
        EnumMatcher(values='blue')
    with pytest.raises(SchemaDefinitionError, match=r'Invalid enum values: \[\]'):
        EnumMatcher(values=[])


def test_enum_matches_from_a_list_of_values(colors) -> None:
    matcher = EnumMatcher(values=colors)
    for color in colors:
        assert matcher.match('', color) == []
    errors = matcher.match('', 'yellow')
    assert len(errors) == 1
    assert 'should be a valid enum value' in errors[0].message


def test_enum_error_echoes_path_and_value(colors) -> None:
    errors = EnumMatcher(values=colors).match('shirt.color', 'yellow')
    assert dump(errors) == [
        {'path': 'shirt.color', 'value': 'yellow', 'message': 'should be a valid enum value'}
    ]


def test_enum_name_is_used_in_message(colors) -> None:
    errors = EnumMatcher(values=colors, name='color').match('', 'yellow')
    assert errors[0].message == 'should be a valid color'


def test_enum_verbose_lists_allowed_values(colors) -> None:
    errors = EnumMatcher(values=colors, verbose=True).match('', 'yellow')
    assert errors[0].message == 'should be a valid enum value (blue,red,green)'


def test_enum_name_and_verbose_combined(colors) -> None:
    errors = EnumMatcher(values=colors, name='color', verbose=True).match('', 'yellow')
    assert errors[0].message == 'should be a valid color (blue,red,green)'


def test_enum_verbose_default_comes_from_settings(colors, restore_settings) -> None:
    restore_settings.ENUM_VERBOSE = True
    errors = EnumMatcher(values=colors).match('', 'yellow')
    assert errors[0].message.endswith('(blue,red,green)')
    errors = EnumMatcher(values=colors, verbose=False).match('', 'yellow')
    assert errors[0].message == 'should be a valid enum value'


def test_enum_does_not_confuse_booleans_and_integers() -> None:
    matcher = EnumMatcher(values=[0, 1])
    assert matcher.match('', 1) == []
    assert len(matcher.match('', True)) == 1


def test_enum_json_schema() -> None:
    values = ['foo', 'bar', 'brillian', 'kiddkai']
    assert EnumMatcher(values=values).to_json_schema() == {'enum': values}
    assert EnumMatcher(values=values, description='Lorem ipsum').to_json_schema() == {
        'enum': values,
        'description': 'Lorem ipsum',
    }
    assert EnumMatcher(values=values, type='string').to_json_schema() == {
        'enum': values,
        'type': 'string',
    }


def test_enum_verbose_renders_booleans_and_none_like_json_joins() -> None:
    errors = EnumMatcher(values=[True, None, 3, 'x'], verbose=True).match('', 'y')
    assert errors[0].message == 'should be a valid enum value (true,,3,x)'
