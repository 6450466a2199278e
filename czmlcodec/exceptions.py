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
"""Errors raised while decoding CZML."""


class CZMLDecodeError(ValueError):
    """Base class for values that could not be decoded."""


class ShapeMismatch(CZMLDecodeError):
    """A JSON value did not match any of the shapes a property accepts."""

    def __init__(self, kind, value):
        self.kind = kind
        self.value = value
        super(ShapeMismatch, self).__init__(
            '%s cannot be read from %r' % (kind, value))


class InvalidTimeValue(ShapeMismatch):
    """Neither an ISO 8601 date and time string nor seconds since epoch."""

    def __init__(self, value):
        super(InvalidTimeValue, self).__init__('TimeValue', value)


class MalformedSampleArray(CZMLDecodeError):
    """The length of a numeric array fits no grouping of its arity.

    :param length: the length of the offending array
    :param arities: the untimed and timed group sizes that were expected

    """

    def __init__(self, length, arities):
        self.length = length
        self.arities = arities
        super(MalformedSampleArray, self).__init__(
            'array of length %d is neither %d values nor groups of %d'
            % (length, arities[0], arities[1]))


class UnrecognizedCustomPropertyShape(ShapeMismatch):

    def __init__(self, fragment):
        self.fragment = fragment
        super(UnrecognizedCustomPropertyShape, self).__init__(
            'custom property', fragment)


class DocumentParseFailure(CZMLDecodeError):
    """The document is not a JSON array of packets."""
