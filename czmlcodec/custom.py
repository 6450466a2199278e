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
"""Custom properties.

A packet may carry application data of any shape under its ``properties``
key. The values form a closed recursive tree: scalars, an explicit null,
lists, ordered maps and values tagged with an interval.
"""
import logging

from .core import _CZMLValue, _is_number
from .exceptions import ShapeMismatch, UnrecognizedCustomPropertyShape

logger = logging.getLogger(__name__)


def _is_interval(data):
    return (isinstance(data, dict) and set(data) == {'interval', 'value'} and
            (isinstance(data['interval'], str) or
             _is_number(data['interval'])))


def read_custom(data):
    """Decode the JSON form of a custom property.

    Objects holding exactly an ``interval`` and a ``value`` become a
    CustomInterval, every other object a CustomMap.
    The two forms share one JSON shape, so a CustomMap built with just
    those two keys writes the same JSON and reads back as a CustomInterval.

    :param data:
    :return: CustomProperty

    """
    if isinstance(data, CustomProperty):
        return data
    if data is None:
        return CustomNull()
    if _is_interval(data):
        return CustomInterval.from_data(data)
    if isinstance(data, dict):
        return CustomMap.from_data(data)
    if isinstance(data, (list, tuple)):
        return CustomList.from_data(data)
    return CustomValue.from_data(data)


class CustomProperty(_CZMLValue):
    """Base class of the values of a custom property."""


class CustomValue(CustomProperty):
    """A string, a number or a boolean."""

    value = None

    def __init__(self, value=None):
        if value is not None:
            self.load(value)

    def load(self, data):
        if not (isinstance(data, (str, bool)) or _is_number(data)):
            raise UnrecognizedCustomPropertyShape(data)
        self.value = data

    def data(self):
        return self.value

    def __eq__(self, other):
        if not isinstance(other, CustomValue):
            return NotImplemented
        # True == 1 in python, not in JSON
        return (isinstance(self.value, bool) == isinstance(other.value, bool)
                and self.value == other.value)

    __hash__ = None


class CustomNull(CustomProperty):
    """An explicit null."""

    def load(self, data):
        if data is not None:
            raise UnrecognizedCustomPropertyShape(data)

    def data(self):
        return None


class CustomList(CustomProperty):

    def __init__(self, values=None):
        self.values = [read_custom(v) for v in values or ()]

    def load(self, data):
        if not isinstance(data, (list, tuple)):
            raise UnrecognizedCustomPropertyShape(data)
        self.values = [read_custom(v) for v in data]

    def data(self):
        return [v.data() for v in self.values]

    def append(self, value):
        self.values.append(read_custom(value))

    def __iter__(self):
        return iter(self.values)

    def __len__(self):
        return len(self.values)

    def __getitem__(self, index):
        return self.values[index]

    def __eq__(self, other):
        if not isinstance(other, CustomList):
            return NotImplemented
        return self.values == other.values

    __hash__ = None


class CustomMap(CustomProperty):
    """A map of names to custom values, kept in insertion order."""

    def __init__(self, values=None):
        self.values = {}
        for name, value in (values or {}).items():
            self[name] = value

    def load(self, data):
        if not isinstance(data, dict):
            raise UnrecognizedCustomPropertyShape(data)
        self.values = {}
        for name, value in data.items():
            self[name] = value

    def data(self):
        return dict((name, value.data()) for name, value in self.values.items())

    def __setitem__(self, name, value):
        if not isinstance(name, str):
            raise UnrecognizedCustomPropertyShape(name)
        self.values[name] = read_custom(value)

    def __getitem__(self, name):
        return self.values[name]

    def __contains__(self, name):
        return name in self.values

    def __iter__(self):
        return iter(self.values)

    def __len__(self):
        return len(self.values)

    def items(self):
        return self.values.items()

    def __eq__(self, other):
        if not isinstance(other, CustomMap):
            return NotImplemented
        return list(self.values.items()) == list(other.values.items())

    __hash__ = None


class CustomInterval(CustomProperty):
    """A value valid over an interval.

    The interval is an ISO 8601 interval string, or a number.

    """

    interval = None
    value = None

    def __init__(self, interval=None, value=None):
        self.interval = interval
        self.value = read_custom(value)

    def load(self, data):
        if not _is_interval(data):
            raise UnrecognizedCustomPropertyShape(data)
        self.interval = data['interval']
        self.value = read_custom(data['value'])

    def data(self):
        return {'interval': self.interval, 'value': self.value.data()}

    def __eq__(self, other):
        if not isinstance(other, CustomInterval):
            return NotImplemented
        return self.interval == other.interval and self.value == other.value

    __hash__ = None


class CustomProperties(_CZMLValue):
    """The ``properties`` of a packet, named values of any shape.

    A value which cannot be read is skipped, the other properties are kept.

    """

    def __init__(self, properties=None):
        """

        :param properties: a dict of names to custom values or their JSON form
        :return:

        """
        self.properties = {}
        for name, value in (properties or {}).items():
            self[name] = value

    def load(self, data):
        if not isinstance(data, dict):
            raise ShapeMismatch('CustomProperties', data)
        self.properties = {}
        for name, value in data.items():
            try:
                self.properties[name] = read_custom(value)
            except UnrecognizedCustomPropertyShape as e:
                logger.warning('skipping custom property %r: %s', name, e)

    def data(self):
        return dict((name, value.data())
                    for name, value in self.properties.items())

    def __setitem__(self, name, value):
        self.properties[name] = read_custom(value)

    def __getitem__(self, name):
        return self.properties[name]

    def __delitem__(self, name):
        del self.properties[name]

    def __contains__(self, name):
        return name in self.properties

    def __iter__(self):
        return iter(self.properties)

    def __len__(self):
        return len(self.properties)
