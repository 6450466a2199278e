# -*- coding: utf-8 -*-
# Copyright (C) 2013  Christian Ledermann
#
# This library is free software; you can redistribute it and/or
#    modify it under the terms of the GNU Lesser General Public
#    License as published by the Free Software Foundation; either
#    version 2.1 of the License, or (at your option) any later version.
#
#    This library is distributed in the hope that it will be useful,
#    but WITHOUT ANY WARRANTY; without even the implied warranty of
#    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
#    Lesser General Public License for more details.
#
#    You should have received a copy of the GNU Lesser General Public
#    License along with this library; if not, write to the Free Software
#    Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA  02110-1301  USA
"""Tests for custom properties."""
import logging

import pytest

from czmlcodec import (
    read_custom, CustomValue, CustomNull, CustomList, CustomMap,
    CustomInterval, CustomProperties,
)
from czmlcodec.exceptions import ShapeMismatch, UnrecognizedCustomPropertyShape


@pytest.fixture
def nested():
    return {
        'name': 'sat-1',
        'count': 3,
        'ratio': 0.5,
        'active': True,
        'tags': ['a', 1, 2.5, False, {'deep': {'levels': [1, 2], 'label': 'x'}}],
        'owner': {'team': 'ops', 'shifts': [{'day': 'mon', 'hours': 8}]},
    }


class TestReadCustom:
    """Custom values are a closed tree of maps, lists, intervals and leaves."""

    def test_nested_round_trip(self, nested):
        value = read_custom(nested)
        assert isinstance(value, CustomMap)
        assert value.data() == nested
        assert read_custom(value.data()) == value

    def test_map_keeps_insertion_order(self, nested):
        value = read_custom(nested)
        assert list(value) == list(nested)
        assert list(value.data()) == list(nested)

    def test_nested_types(self, nested):
        value = read_custom(nested)
        assert isinstance(value['tags'], CustomList)
        assert isinstance(value['tags'][4], CustomMap)
        assert isinstance(value['tags'][4]['deep']['levels'][0], CustomValue)
        assert value['owner']['shifts'][0]['hours'].value == 8

    def test_leaves(self):
        assert read_custom('x') == CustomValue('x')
        assert read_custom(2.5).data() == 2.5
        assert read_custom(False).data() is False

    def test_bool_is_not_a_number(self):
        assert CustomValue(True) != CustomValue(1)
        assert read_custom([True]) != read_custom([1])

    def test_null(self):
        value = read_custom({'missing': None})
        assert isinstance(value['missing'], CustomNull)
        assert value.data() == {'missing': None}

    def test_interval(self):
        value = read_custom({'interval': 'a/b', 'value': 'on'})
        assert isinstance(value, CustomInterval)
        assert value.interval == 'a/b'
        assert value.value == CustomValue('on')

    def test_interval_array(self):
        data = [{'interval': 'a/b', 'value': 1}, {'interval': 'b/c', 'value': [1, 2]}]
        value = read_custom(data)
        assert isinstance(value, CustomList)
        assert all(isinstance(v, CustomInterval) for v in value)
        assert value.data() == data

    def test_numeric_interval(self):
        assert isinstance(read_custom({'interval': 5, 'value': 1}), CustomInterval)

    def test_object_with_more_keys_is_a_map(self):
        data = {'interval': 'a/b', 'value': 1, 'note': 'x'}
        assert isinstance(read_custom(data), CustomMap)

    def test_map_shaped_like_an_interval_reads_back_as_one(self):
        built = CustomMap({'interval': 'a/b', 'value': 1})
        value = read_custom(built.data())
        assert isinstance(value, CustomInterval)
        assert value.data() == built.data()

    def test_empty_containers(self):
        assert read_custom([]).data() == []
        assert read_custom({}).data() == {}

    @pytest.mark.parametrize('fragment', [object(), {1, 2}, b'bytes'])
    def test_unrecognized(self, fragment):
        with pytest.raises(UnrecognizedCustomPropertyShape) as exc_info:
            read_custom(fragment)
        assert exc_info.value.fragment is fragment

    def test_unrecognized_nested_in_list(self):
        with pytest.raises(UnrecognizedCustomPropertyShape):
            read_custom(['ok', object()])

    def test_builders(self):
        value = CustomMap({'a': 1})
        value['b'] = [1, {'c': 'd'}]
        value['b'].append(None)
        assert value.data() == {'a': 1, 'b': [1, {'c': 'd'}, None]}
        assert CustomInterval('a/b', 3).data() == {'interval': 'a/b', 'value': 3}


class TestCustomProperties:

    def test_round_trip(self, nested):
        props = CustomProperties.from_data(nested)
        assert props.data() == nested
        assert 'tags' in props
        assert len(props) == len(nested)

    def test_unreadable_value_is_skipped(self, caplog):
        with caplog.at_level(logging.WARNING, logger='czmlcodec'):
            props = CustomProperties.from_data({'good': 1, 'bad': object(), 'also': 'x'})
        assert list(props) == ['good', 'also']
        assert 'bad' in caplog.text

    def test_not_an_object(self):
        with pytest.raises(ShapeMismatch):
            CustomProperties.from_data([1, 2])

    def test_set_and_delete(self):
        props = CustomProperties({'phase': 'cruise'})
        props['fuel'] = 0.75
        del props['phase']
        assert props.data() == {'fuel': 0.75}
