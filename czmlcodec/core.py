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
"""Polymorphic CZML values.

Most CZML properties can be written as a bare scalar, a bare array or an
object carrying an interval, a reference or interpolation settings. Every
class here reads all the shapes of one property with ``load`` and writes
the most compact one back with ``data``.
"""
import logging
import math
from datetime import datetime, date, timedelta
from itertools import zip_longest

import simplejson as json
import dateutil.parser
from pytz import utc

from pygeoif import geometry
from pygeoif.factories import shape as as_shape

from .exceptions import ShapeMismatch, InvalidTimeValue, MalformedSampleArray

logger = logging.getLogger(__name__)

# interpolationAlgorithm
LINEAR = 'LINEAR'
LAGRANGE = 'LAGRANGE'
HERMITE = 'HERMITE'

# forwardExtrapolationType, backwardExtrapolationType
NONE = 'NONE'
HOLD = 'HOLD'
EXTRAPOLATE = 'EXTRAPOLATE'

# referenceFrame
FIXED = 'FIXED'
INERTIAL = 'INERTIAL'


def grouper(iterable, n, fillvalue=None):
    """Collect data into fixed-length chunks.

    :param iterable:
    :param n:
    :param fillvalue:
    :return:

    """
    args = [iter(iterable)] * n
    return zip_longest(*args, fillvalue=fillvalue)


def _is_number(value):
    # bool is an int subclass but never a CZML number
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_finite(value):
    # ints past the float range cannot be represented either
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def _isoformat(dt):
    if dt.utcoffset() == timedelta(0):
        return dt.replace(tzinfo=None).isoformat() + 'Z'
    return dt.isoformat()


def _checked(value, kind, name):
    if kind is float:
        if _is_number(value) and _is_finite(value):
            return value
    elif kind is int:
        if (_is_number(value) and _is_finite(value)
                and float(value).is_integer()):
            return int(value)
    elif isinstance(value, kind):
        return value
    raise ShapeMismatch(name, value)


def class_property(cls, name, doc=None):
    """

    Returns a property function that checks to be sure
    the value being assigned is a certain class before assigning it to a hidden
    variable defined by "_" + name.  Any other value is handed to
    ``cls.from_data``, so the property can be set from its JSON form.

    :param cls:
    :param name:
    :param doc:
    :return:

    """
    hidden_attribute = '_' + name

    def getter(self):
        return getattr(self, hidden_attribute, None)

    def setter(self, val):
        """

        :param val:

        """
        if val is None or isinstance(val, cls):
            setattr(self, hidden_attribute, val)
        else:
            setattr(self, hidden_attribute, cls.from_data(val))

    return property(getter, setter, doc=doc)


def datetime_property(name, allow_offset=False, doc=None):
    """Generates a TimeValue property that handles strings and timezones.

    :param name:
    :param allow_offset: accept seconds since epoch as well as dates
    :param doc:
    :return:

    """
    reserved_name = '_' + name

    def getter(self):
        return getattr(self, reserved_name, None)

    def setter(self, dt):
        """

        :param dt:
        :return:

        """
        if dt is None or isinstance(dt, TimeValue):
            value = dt
        else:
            value = TimeValue(dt)
        if value is not None and value.is_offset and not allow_offset:
            raise InvalidTimeValue(dt)
        setattr(self, reserved_name, value)

    return property(getter, setter, doc=doc)


def value_property(name, kind, doc=None):
    """Generates a property for a plain JSON value.

    :param name:
    :param kind: one of ``str``, ``float``, ``int`` or ``bool``
    :param doc:
    :return:

    """
    reserved_name = '_' + name

    def getter(self):
        return getattr(self, reserved_name, None)

    def setter(self, val):
        if val is not None:
            val = _checked(val, kind, name)
        setattr(self, reserved_name, val)

    return property(getter, setter, doc=doc)


def list_property(name, kind, length=None, doc=None):
    """Generates a property for a JSON array of plain values.

    :param name:
    :param kind: the type of the elements, see ``value_property``
    :param length: the required length, if any
    :param doc:
    :return:

    """
    reserved_name = '_' + name

    def getter(self):
        return getattr(self, reserved_name, None)

    def setter(self, val):
        if val is not None:
            if not isinstance(val, (list, tuple)):
                raise ShapeMismatch(name, val)
            if length is not None and len(val) != length:
                raise ShapeMismatch(name, val)
            val = [_checked(v, kind, name) for v in val]
        setattr(self, reserved_name, val)

    return property(getter, setter, doc=doc)


class _CZMLValue(object):
    """Serialization and equality shared by every CZML value."""

    def data(self):
        raise NotImplementedError

    def load(self, data):
        raise NotImplementedError

    @classmethod
    def from_data(cls, data):
        """Decode a new instance from its JSON form.

        :param data:
        :return:

        """
        obj = cls()
        obj.load(data)
        return obj

    def dumps(self, indent=None):
        """

        :return:

        """
        return json.dumps(self.data(), indent=indent)

    def loads(self, data):
        """

        :param data:
        :return:

        """
        self.load(json.loads(data))

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.data() == other.data()

    __hash__ = None

    def __repr__(self):
        return '%s(%s)' % (self.__class__.__name__, self.dumps())


class _CZMLBaseObject(_CZMLValue):
    """Implements behavior for loading parameters and formatting/loading to the CZML standard."""

    _properties = ()

    def __init__(self, **kwargs):
        """Default init functionality is to set kwargs

        :param kwargs:
        :return:

        """
        for k, v in kwargs.items():
            if k not in self._properties:
                raise ValueError('Unknown parameter: %s' % k)
            setattr(self, k, v)

    def data(self):
        """

        :return:

        """
        d = {}
        for attr in self._properties:
            a = getattr(self, attr)
            if a is not None:
                # These classes have a data method that should be called.
                if isinstance(a, _CZMLValue):
                    d[attr] = a.data()
                elif isinstance(a, list):
                    d[attr] = list(a)
                else:
                    d[attr] = a
        return d

    def load(self, data):
        """Set every known field of a JSON object, unknown fields are skipped.

        :param data:
        :return:

        """
        if not isinstance(data, dict):
            raise ShapeMismatch(self.__class__.__name__, data)
        for k, v in data.items():
            if k in self._properties:
                setattr(self, k, v)
            else:
                logger.debug('%s ignores unknown field %r',
                             self.__class__.__name__, k)


class TimeValue(_CZMLValue):
    """A time, specified as either an ISO 8601 date and time string
    or as seconds since epoch.

    Dates are held as timezone aware datetimes, times without a zone
    are taken to be UTC.

    """

    value = None

    def __init__(self, value=None):
        if value is not None:
            self.load(value)

    def load(self, data):
        """

        :param data:
        :return:

        """
        if isinstance(data, datetime):
            self.value = data if data.tzinfo else utc.localize(data)
        elif isinstance(data, date):
            self.value = utc.localize(
                datetime.combine(data, datetime.min.time()))
        elif isinstance(data, str):
            try:
                dt = dateutil.parser.isoparse(data)
            except (ValueError, OverflowError):
                raise InvalidTimeValue(data)
            self.value = dt if dt.tzinfo else utc.localize(dt)
        elif _is_number(data) and _is_finite(data):
            self.value = float(data)
        else:
            raise InvalidTimeValue(data)

    @property
    def is_offset(self):
        """True when the time is given in seconds since an epoch."""
        return isinstance(self.value, float)

    def data(self):
        if isinstance(self.value, datetime):
            return _isoformat(self.value)
        return self.value


class TimeInterval(_CZMLValue):
    """ An time period containing a start and end time, written as
    ``start/stop`` in ISO 8601."""

    interval = None

    def __init__(self, interval=None):
        if interval is not None:
            self.load(interval)

    @classmethod
    def from_times(cls, start, stop):
        """

        :param start: a datetime or an ISO 8601 string
        :param stop: a datetime or an ISO 8601 string
        :return: TimeInterval

        """
        start, stop = TimeValue(start), TimeValue(stop)
        for t in (start, stop):
            if t.is_offset:
                raise InvalidTimeValue(t.value)
        return cls('%s/%s' % (start.data(), stop.data()))

    def load(self, data):
        if not isinstance(data, str) or '/' not in data:
            raise ShapeMismatch('TimeInterval', data)
        self.interval = data

    @property
    def start(self):
        """ The start of an interval """
        return TimeValue(self.interval.split('/', 1)[0]).value

    @property
    def stop(self):
        """ The end of an interval """
        return TimeValue(self.interval.split('/', 1)[1]).value

    def data(self):
        return self.interval


class Sample(object):
    """ One element of a sample array: the values and an optional time.

    [X, Y, Z] or [Time, X, Y, Z], [Red, Green, Blue, Alpha] or
    [Time, Red, Green, Blue, Alpha] and so on.

    """

    t = None

    def __init__(self, values, t=None):
        """

        :param values: the components of the sample
        :param t: a TimeValue, an ISO 8601 string, a datetime or seconds since epoch
        :return:

        """
        self.values = tuple(values)
        if t is None or isinstance(t, TimeValue):
            self.t = t
        else:
            self.t = TimeValue(t)

    def __eq__(self, other):
        if not isinstance(other, Sample):
            return NotImplemented
        return self.values == other.values and self.t == other.t

    __hash__ = None

    def __repr__(self):
        if self.t is None:
            return 'Sample(%r)' % (self.values,)
        return 'Sample(%r, t=%r)' % (self.values, self.t.data())


class _Samples(_CZMLValue):
    """A constant value or time-tagged samples packed in one flat array.

    An array of ``arity`` elements is a constant. An array of groups of
    ``arity + 1`` elements holds samples arranged as
    [Time, V1, ..., Vn, Time, V1, ..., Vn, ...], where Time is an ISO 8601
    date and time string or seconds since epoch. No other length is valid.

    """

    arity = 3
    num = float
    samples = None

    def __init__(self, samples=None):
        """

        :param samples: Sample instances or sequences of untimed values
        :return:

        """
        self.samples = []
        for sample in samples or ():
            if not isinstance(sample, Sample):
                sample = Sample(sample)
            self.append(sample.values, sample.t)

    def append(self, values, t=None):
        """

        :param values:
        :param t:
        :return:

        """
        values = tuple(values)
        if len(values) != self.arity:
            raise ValueError('%s takes %d values, %d given' %
                             (self.__class__.__name__, self.arity, len(values)))
        self.samples.append(Sample([self._component(v) for v in values], t))

    def _component(self, value):
        return self.num(_checked(value, self.num, self.__class__.__name__))

    def _from_geometry(self, geom):
        raise ShapeMismatch(self.__class__.__name__, geom)

    @property
    def is_timed(self):
        return bool(self.samples) and self.samples[0].t is not None

    def load(self, data):
        """

        :param data:
        :return:

        """
        if not isinstance(data, (list, tuple)):
            data = self._from_geometry(data)
        n = len(data)
        k = self.arity
        samples = []
        if n >= k + 1 and n % (k + 1) == 0:
            for group in grouper(data, k + 1):
                samples.append(Sample([self._component(v) for v in group[1:]],
                                      TimeValue.from_data(group[0])))
        elif n == k:
            samples.append(Sample([self._component(v) for v in data]))
        else:
            raise MalformedSampleArray(n, (k, k + 1))
        self.samples = samples

    def data(self):
        """

        :return:

        """
        timed = self.is_timed
        if not timed and len(self.samples) > 1:
            raise ValueError('%s can hold only one untimed value' %
                             self.__class__.__name__)
        d = []
        for sample in self.samples:
            if (sample.t is not None) != timed:
                raise ValueError('cannot mix timed and untimed samples')
            if timed:
                d.append(sample.t.data())
            d.extend(sample.values)
        return d


class _Coordinates(_Samples):
    """Coordinates which may also be given as a point geometry."""

    def _from_geometry(self, geom):
        try:
            geom = as_shape(geom)
        except (AttributeError, KeyError, TypeError, ValueError,
                NotImplementedError):
            raise ShapeMismatch(self.__class__.__name__, geom)
        if not isinstance(geom, geometry.Point):
            raise ShapeMismatch(self.__class__.__name__, geom)
        coords = list(geom.coords[0])
        if len(coords) == self.arity - 1:
            coords.append(0)
        if len(coords) != self.arity:
            raise ShapeMismatch(self.__class__.__name__, geom)
        return coords


class NumberSamples(_Samples):
    """ The value may be a single number,
    in which case the value is constant over the interval, or it may
    be an array. If it is an array and the array has one element,
    the value is constant over the interval. If it has two or more
    elements, they are time-tagged samples arranged as
    [Time, Value, Time, Value, ...], where Time is an ISO 8601 date
    and time string or seconds since epoch."""

    arity = 1

    def load(self, data):
        if _is_number(data):
            data = [data]
        super(NumberSamples, self).load(data)

    def data(self):
        d = super(NumberSamples, self).data()
        if len(d) == 1:
            return d[0]
        return d


class Cartesian(_Coordinates):
    """ [X, Y, Z] in meters, or [Time, X, Y, Z, ...] """

    arity = 3


class Cartesian2D(_Coordinates):
    """ [X, Y], or [Time, X, Y, ...] """

    arity = 2


class Cartographic(_Coordinates):
    """ [Longitude, Latitude, Height], or
    [Time, Longitude, Latitude, Height, ...] """

    arity = 3


class UnitQuaternion(_Samples):
    """ [X, Y, Z, W], or [Time, X, Y, Z, W, ...] """

    arity = 4


class CartesianVelocity(_Samples):
    """ [X, Y, Z, dX, dY, dZ], or [Time, X, Y, Z, dX, dY, dZ, ...] """

    arity = 6


class Rgba(_Samples):
    """ [Red, Green, Blue, Alpha] where each component is in the range 0-255. """

    arity = 4
    num = int


class Rgbaf(_Samples):
    """ [Red, Green, Blue, Alpha] where each component is in the range 0.0-1.0. """

    arity = 4


class Vertices(_CZMLValue):
    """The list of positions [X, Y, Z, X, Y, Z, ...]"""

    coords = None

    def __init__(self, coords=None):
        """

        :param coords: a flat list of numbers or a line geometry
        :return:

        """
        self.coords = []
        if coords is not None:
            self.load(coords)

    def load(self, data):
        if isinstance(data, (list, tuple)):
            if not data or len(data) % 3:
                raise ShapeMismatch('Vertices', data)
            for coord in data:
                if not (_is_number(coord) and _is_finite(coord)):
                    raise ShapeMismatch('Vertices', data)
            self.coords = list(data)
            return
        try:
            geom = as_shape(data)
        except (AttributeError, KeyError, TypeError, ValueError,
                NotImplementedError):
            raise ShapeMismatch('Vertices', data)
        if isinstance(geom, geometry.Polygon):
            geom = geom.exterior
        if not isinstance(geom, (geometry.LineString, geometry.LinearRing)):
            raise ShapeMismatch('Vertices', data)
        self.coords = []
        for coord in geom.coords:
            if len(coord) == 2:
                self.coords += [coord[0], coord[1], 0]
            else:
                self.coords += list(coord)

    def data(self):
        return list(self.coords)


class _Interpolatable(_CZMLBaseObject):
    """ A baseclass for values which may be sampled over time. """

    _properties = ('epoch', 'nextTime', 'previousTime',
                   'interpolationAlgorithm', 'interpolationDegree',
                   'forwardExtrapolationType', 'forwardExtrapolationDuration',
                   'backwardExtrapolationType', 'backwardExtrapolationDuration')

    epoch = datetime_property('epoch', doc=
    """The epoch to use for times specified as seconds since an epoch.""")
    nextTime = datetime_property('nextTime', allow_offset=True, doc=
    """The time of the next sample within this interval, specified as
    either an ISO 8601 date and time string or as seconds since epoch.
    This property is used to determine if there is a gap between samples
    specified in different packets.""")
    previousTime = datetime_property('previousTime', allow_offset=True, doc=
    """The time of the previous sample within this interval, specified
    as either an ISO 8601 date and time string or as seconds since epoch.
    This property is used to determine if there is a gap between samples
    specified in different packets.""")
    interpolationAlgorithm = value_property('interpolationAlgorithm', str, doc=
    """LINEAR, LAGRANGE or HERMITE.""")
    interpolationDegree = value_property('interpolationDegree', int)
    forwardExtrapolationType = value_property('forwardExtrapolationType', str, doc=
    """NONE, HOLD or EXTRAPOLATE, used after the last sample.""")
    forwardExtrapolationDuration = value_property('forwardExtrapolationDuration', float)
    backwardExtrapolationType = value_property('backwardExtrapolationType', str, doc=
    """NONE, HOLD or EXTRAPOLATE, used before the first sample.""")
    backwardExtrapolationDuration = value_property('backwardExtrapolationDuration', float)


_INTERPOLATABLE = _Interpolatable._properties


class Availability(_CZMLValue):
    """The set of time intervals over which data for an object is available,
    either one interval string or a list of them."""

    value = None

    def __init__(self, value=None):
        if value is not None:
            self.load(value)

    def load(self, data):
        if isinstance(data, str):
            self.value = data
        elif isinstance(data, (list, tuple)) and all(
                isinstance(v, str) for v in data):
            self.value = list(data)
        else:
            raise ShapeMismatch('Availability', data)

    def intervals(self):
        """

        :return: list of TimeInterval

        """
        if isinstance(self.value, str):
            return [TimeInterval(self.value)]
        return [TimeInterval(v) for v in self.value or ()]

    def data(self):
        if isinstance(self.value, list):
            return list(self.value)
        return self.value


class BooleanInterval(_CZMLBaseObject):

    _properties = ('interval', 'boolean')

    interval = value_property('interval', str)
    boolean = value_property('boolean', bool)


class CzmlBoolean(_CZMLValue):
    """A boolean, or a list of booleans each valid over an interval
    ``[{"interval": "...", "boolean": true}, ...]``."""

    value = None

    def __init__(self, value=None):
        if value is not None:
            self.load(value)

    def load(self, data):
        if isinstance(data, bool):
            self.value = data
        elif isinstance(data, (list, tuple)):
            self.value = [v if isinstance(v, BooleanInterval)
                          else BooleanInterval.from_data(v) for v in data]
        else:
            raise ShapeMismatch('CzmlBoolean', data)

    def data(self):
        if isinstance(self.value, list):
            return [v.data() for v in self.value]
        return self.value


Show = CzmlBoolean


class CzmlNumber(_Interpolatable):
    """Represents numbers"""

    _properties = ('interval', 'reference', 'number') + _INTERPOLATABLE

    interval = value_property('interval', str)
    reference = value_property('reference', str)
    number = class_property(NumberSamples, 'number', doc=NumberSamples.__doc__)

    def load(self, data):
        if _is_number(data):
            self.number = data
        else:
            super(CzmlNumber, self).load(data)

    def data(self):
        """A lone constant number is written bare.

        :return:

        """
        d = super(CzmlNumber, self).data()
        if list(d) == ['number'] and _is_number(d['number']):
            return d['number']
        return d


class _IntervalList(_CZMLValue):
    """One value of ``item``, or a list of them each valid over its
    own interval. A single value is written without the list."""

    item = None
    values = None

    def __init__(self, values=None):
        self.values = []
        for value in values or ():
            self.append(value)

    def append(self, value):
        """

        :param value: an instance of ``item`` or its JSON form
        :return:

        """
        if not isinstance(value, self.item):
            value = self.item.from_data(value)
        self.values.append(value)

    def load(self, data):
        if isinstance(data, (list, tuple)):
            if not data:
                raise ShapeMismatch(self.__class__.__name__, data)
            self.values = [self.item.from_data(v) for v in data]
        else:
            self.values = [self.item.from_data(data)]

    def data(self):
        if len(self.values) == 1:
            return self.values[0].data()
        return [v.data() for v in self.values]

    def __iter__(self):
        return iter(self.values)

    def __len__(self):
        return len(self.values)

    def __getitem__(self, index):
        return self.values[index]


class Number(_IntervalList):
    """A number, which may vary over time, as a bare number, an array of
    time-tagged samples, an object or a list of objects."""

    item = CzmlNumber

    def load(self, data):
        if (isinstance(data, (list, tuple)) and data and
                all(isinstance(v, dict) for v in data)):
            self.values = [CzmlNumber.from_data(v) for v in data]
        elif isinstance(data, (list, tuple)):
            self.values = [CzmlNumber(number=NumberSamples.from_data(data))]
        else:
            self.values = [CzmlNumber.from_data(data)]

    def data(self):
        if len(self.values) == 1:
            return self.values[0].data()
        d = []
        for value in self.values:
            v = value.data()
            # inside a list a bare number would read back as samples
            d.append(v if isinstance(v, dict) else {'number': v})
        return d


class CzmlColor(_Interpolatable):
    """Color object to contain optionally time varying color values."""

    _properties = ('interval', 'reference', 'rgba', 'rgbaf') + _INTERPOLATABLE

    interval = value_property('interval', str)
    reference = value_property('reference', str)
    rgba = class_property(Rgba, 'rgba', doc=
    """The color specified as an array of color components

    [Red, Green, Blue, Alpha] where each component is in the
    range 0-255. If the array has four elements, the color is constant.
    If it has five or more elements, they are time-tagged samples arranged as
    [Time, Red, Green, Blue, Alpha, Time, Red, Green, Blue, Alpha, ...],
    where Time is an ISO 8601 date and time string or seconds since epoch.""")
    rgbaf = class_property(Rgbaf, 'rgbaf', doc=
    """The color specified as an array of color components

    [Red, Green, Blue, Alpha] where each component is in the
    range 0.0-1.0.""")


class ColorProperty(_IntervalList):
    """A color, or a list of colors each valid over an interval."""

    item = CzmlColor


class CzmlCartesian(_Interpolatable):
    """A Cartesian [X, Y, Z], which may vary over time.

    May also be written as the bare array.

    """

    _properties = ('interval', 'reference', 'cartesian') + _INTERPOLATABLE

    interval = value_property('interval', str)
    reference = value_property('reference', str)
    cartesian = class_property(Cartesian, 'cartesian')

    def load(self, data):
        if isinstance(data, (list, tuple)):
            self.cartesian = data
        else:
            super(CzmlCartesian, self).load(data)


class EyeOffset(CzmlCartesian):
    """An offset in eye coordinates, X right, Y up and Z into the screen."""


class AlignedAxis(CzmlCartesian):
    """The axis an object's rotation is aligned to."""


class Radii(CzmlCartesian):
    """ Radii is in support of ellipsoids. """


class ViewFrom(CzmlCartesian):
    """A suggested initial offset for the camera when tracking an object,
    in the east-north-up frame at the object's position."""


class CzmlCartesian2(_Interpolatable):
    """A two dimensional Cartesian [X, Y], which may vary over time."""

    _properties = ('interval', 'reference', 'cartesian2') + _INTERPOLATABLE

    interval = value_property('interval', str)
    reference = value_property('reference', str)
    cartesian2 = class_property(Cartesian2D, 'cartesian2')

    def load(self, data):
        if isinstance(data, (list, tuple)):
            self.cartesian2 = data
        else:
            super(CzmlCartesian2, self).load(data)


class PixelOffset(CzmlCartesian2):
    """A pixel offset in screen space, X right and Y down."""


class _StringOrReference(_CZMLBaseObject):
    """A string which may also be written as an object with a reference.

    The first name in ``_properties`` is the field holding the string.

    """

    def __init__(self, value=None, **kwargs):
        super(_StringOrReference, self).__init__(**kwargs)
        if value is not None:
            self.load(value)

    def load(self, data):
        if isinstance(data, str):
            setattr(self, self._properties[0], data)
        else:
            super(_StringOrReference, self).load(data)

    def data(self):
        d = super(_StringOrReference, self).data()
        if list(d) == [self._properties[0]]:
            return d[self._properties[0]]
        return d


class Font(_StringOrReference):
    """The font to use, in CSS font syntax, for example "12pt sans-serif"."""

    _properties = ('font', 'reference')

    font = value_property('font', str)
    reference = value_property('reference', str)


class Style(_StringOrReference):
    """The style of a label: FILL, OUTLINE or FILL_AND_OUTLINE."""

    _properties = ('labelStyle', 'reference')

    labelStyle = value_property('labelStyle', str)
    reference = value_property('reference', str)


class ImageUri(_StringOrReference):
    """An image expressed as a URL or a data URI.

    For broadest client compatibility, the URL should be accessible
    via Cross-Origin Resource Sharing (CORS).

    """

    _properties = ('uri', 'reference')

    uri = value_property('uri', str)
    reference = value_property('reference', str)


class HorizontalOrigin(_StringOrReference):
    """LEFT, CENTER or RIGHT"""

    _properties = ('horizontalOrigin', 'reference')

    horizontalOrigin = value_property('horizontalOrigin', str)
    reference = value_property('reference', str)


class VerticalOrigin(_StringOrReference):
    """BOTTOM, CENTER or TOP"""

    _properties = ('verticalOrigin', 'reference')

    verticalOrigin = value_property('verticalOrigin', str)
    reference = value_property('reference', str)


class PortionToDisplay(_StringOrReference):
    """Which part of a sensor to display: COMPLETE, BELOW_ELLIPSOID_HORIZON
    or ABOVE_ELLIPSOID_HORIZON."""

    _properties = ('portionToDisplay', 'reference')

    portionToDisplay = value_property('portionToDisplay', str)
    reference = value_property('reference', str)


class StripeOrientation(_StringOrReference):
    """HORIZONTAL or VERTICAL"""

    _properties = ('stripeOrientation', 'reference')

    stripeOrientation = value_property('stripeOrientation', str)
    reference = value_property('reference', str)


class StringInterval(_CZMLBaseObject):

    _properties = ('interval', 'string')

    interval = value_property('interval', str)
    string = value_property('string', str)


class Text(_CZMLValue):
    """The text displayed by a label.

    Read in order as a bare string, as an object with ``string`` and
    ``reference`` fields, or as a list of ``{"interval", "string"}``
    objects.

    """

    string = None
    reference = None

    def __init__(self, string=None, reference=None):
        """

        :param string: a string or a list of StringInterval
        :param reference:
        :return:

        """
        self.string = string
        self.reference = reference

    @staticmethod
    def _intervals(data):
        return [StringInterval.from_data(v) for v in data]

    def load(self, data):
        if isinstance(data, str):
            self.string = data
            self.reference = None
        elif isinstance(data, dict):
            string = data.get('string')
            reference = data.get('reference')
            if reference is not None and not isinstance(reference, str):
                raise ShapeMismatch('Text', data)
            if isinstance(string, (list, tuple)):
                string = self._intervals(string)
            elif string is not None and not isinstance(string, str):
                raise ShapeMismatch('Text', data)
            self.string = string
            self.reference = reference
        elif isinstance(data, (list, tuple)):
            self.string = self._intervals(data)
            self.reference = None
        else:
            raise ShapeMismatch('Text', data)

    def data(self):
        if isinstance(self.string, list):
            value = [s.data() for s in self.string]
        else:
            value = self.string
        if self.reference is None and value is not None:
            return value
        d = {}
        if value is not None:
            d['string'] = value
        if self.reference is not None:
            d['reference'] = self.reference
        return d


class Position(_Interpolatable):
    """The world-space positions of vertices.

    The vertex positions have no direct visual representation, but they
    are used to define polygons, polylines, and other objects attached
    to the object.

    """

    _properties = ('referenceFrame', 'interval', 'cartesian',
                   'cartographicRadians', 'cartographicDegrees',
                   'cartesianVelocity', 'references') + _INTERPOLATABLE

    # The reference frame in which cartesian positions are specified.
    # Possible values are "FIXED" and "INERTIAL".
    referenceFrame = value_property('referenceFrame', str)
    interval = value_property('interval', str)
    cartesian = class_property(Vertices, 'cartesian', doc=
    """The list of positions represented as Cartesian
    [X, Y, Z, X, Y, Z, ...] in the meters relative to the referenceFrame.""")
    cartographicRadians = class_property(Vertices, 'cartographicRadians', doc=
    """The list of positions represented as WGS 84
    [Longitude, Latitude, Height, Longitude, Latitude, Height, ...]
    where longitude and latitude are in radians and height is in meters.""")
    cartographicDegrees = class_property(Vertices, 'cartographicDegrees', doc=
    """The list of positions represented as WGS 84
    [Longitude, Latitude, Height, Longitude, Latitude, Height, ...]
    where longitude and latitude are in degrees and height is in meters.""")
    cartesianVelocity = class_property(CartesianVelocity, 'cartesianVelocity')
    # The list of positions specified as references. Each reference is
    # to a property that defines a single position,
    # possible as it changes with time.
    references = list_property('references', str)


class Positions(_IntervalList):
    """Vertex positions, or a list of them each valid over an interval."""

    item = Position


class CzmlPosition(_Interpolatable):
    """ The position of the object in the world.

    The position has no direct visual representation, but it is used to locate billboards,
    labels, and other primitives attached to the object.

    """

    _properties = ('referenceFrame', 'interval', 'reference', 'cartesian',
                   'cartographicRadians', 'cartographicDegrees',
                   'cartesianVelocity') + _INTERPOLATABLE

    # The reference frame in which cartesian positions are specified.
    # Possible values are "FIXED" and "INERTIAL". In addition, the value
    # of this property can be a hash (#) symbol followed by the ID of
    # another object in the same scope whose "position" and "orientation"
    # properties define the reference frame in which this position is defined.
    referenceFrame = value_property('referenceFrame', str)
    interval = value_property('interval', str)
    reference = value_property('reference', str)
    cartesian = class_property(Cartesian, 'cartesian', doc=
    """ The position represented as a Cartesian [X, Y, Z] in the meters relative to the referenceFrame.

    If the array has three elements,
    the position is constant. If it has four or more elements, they
    are time-tagged samples arranged as
    [Time, X, Y, Z, Time, X, Y, Z, Time, X, Y, Z, ...],
    where Time is an ISO 8601 date and time string or seconds since epoch.""")
    cartographicRadians = class_property(Cartographic, 'cartographicRadians', doc=
    """The position represented as a WGS 84 Cartographic

    [Longitude, Latitude, Height] where longitude and latitude are in
    radians and height is in meters.""")
    cartographicDegrees = class_property(Cartographic, 'cartographicDegrees', doc=
    """The position represented as a WGS 84 Cartographic

    [Longitude, Latitude, Height] where longitude and latitude are in
    degrees and height is in meters. If the array has three elements,
    the position is constant. If it has four or more elements, they are
    time-tagged samples arranged as
    [Time, Longitude, Latitude, Height, Time, Longitude, Latitude, Height, ...],
    where Time is an ISO 8601 date and time string or seconds since epoch.""")
    cartesianVelocity = class_property(CartesianVelocity, 'cartesianVelocity', doc=
    """The position and velocity represented as
    [X, Y, Z, dX, dY, dZ] in meters and meters per second.""")


class CzmlPositions(_IntervalList):
    """The position of an object, or a list of positions each valid
    over an interval."""

    item = CzmlPosition


class Orientation(_Interpolatable):
    """The orientation of the object in the world.

    The orientation has no direct visual representation, but it is used
    to orient models, cones, and pyramids attached to the object.

    """

    _properties = ('interval', 'reference', 'axes',
                   'unitQuaternion') + _INTERPOLATABLE

    interval = value_property('interval', str)
    reference = value_property('reference', str)
    axes = value_property('axes', str)
    unitQuaternion = class_property(UnitQuaternion, 'unitQuaternion', doc=
    """The orientation specified as a 4-dimensional unit magnitude
    quaternion, specified as [X, Y, Z, W]. If the array has four elements,
    the value is constant. If it has five or more elements, they are
    time-tagged samples arranged as [Time, X, Y, Z, W, Time, X, Y, Z, W, ...],
    where Time is an ISO 8601 date and time string or seconds since epoch.""")


# We make lots of number, boolean and color properties.
number_property = lambda x, doc=None: class_property(Number, x, doc=doc)
boolean_property = lambda x, doc=None: class_property(CzmlBoolean, x, doc=doc)
color_property = lambda x, doc=None: class_property(ColorProperty, x, doc=doc)


class SolidColor(_CZMLBaseObject):
    """A material that fills the surface with a solid color, which may be translucent."""

    _properties = ('color',)

    color = color_property('color')


class Image(_CZMLBaseObject):
    """A material that fills the surface with an image."""

    _properties = ('image', 'repeat')

    image = class_property(ImageUri, 'image', doc=
    """The image to display on the surface.""")
    repeat = class_property(CzmlCartesian2, 'repeat', doc=
    """The number of times the image repeats along each axis.""")


class Grid(_CZMLBaseObject):
    """A material that fills the surface with a two-dimensional grid."""

    _properties = ('color', 'cellAlpha', 'lineCount', 'lineThickness',
                   'lineOffset')

    color = color_property('color')
    cellAlpha = number_property('cellAlpha', doc=
    """Alpha value for the space between grid lines.""")
    lineCount = number_property('lineCount')
    lineThickness = number_property('lineThickness')
    lineOffset = class_property(CzmlCartesian2, 'lineOffset')


class Stripe(_CZMLBaseObject):
    """A material that fills the surface with alternating colors."""

    _properties = ('orientation', 'evenColor', 'oddColor', 'offset',
                   'repeat')

    orientation = class_property(StripeOrientation, 'orientation')
    evenColor = color_property('evenColor')
    oddColor = color_property('oddColor')
    offset = number_property('offset')
    repeat = number_property('repeat')


class Material(_CZMLBaseObject):
    """The material to use to fill in the object you are creating."""

    _properties = ('solidColor', 'image', 'grid', 'stripe')

    solidColor = class_property(SolidColor, 'solidColor')
    image = class_property(Image, 'image')
    grid = class_property(Grid, 'grid')
    stripe = class_property(Stripe, 'stripe')


class PolylineGlow(_CZMLBaseObject):
    """A material that fills a line with a glowing color."""

    _properties = ('color', 'glowPower')

    color = color_property('color')
    glowPower = number_property('glowPower')


class PolylineOutline(_CZMLBaseObject):
    """A material that fills a line with a color and an outline."""

    _properties = ('color', 'outlineColor', 'outlineWidth')

    color = color_property('color')
    outlineColor = color_property('outlineColor')
    outlineWidth = number_property('outlineWidth')


class LineMaterial(_CZMLBaseObject):
    """The material used to draw a line."""

    _properties = ('solidColor', 'polylineOutline', 'polylineGlow')

    solidColor = class_property(SolidColor, 'solidColor')
    polylineOutline = class_property(PolylineOutline, 'polylineOutline')
    polylineGlow = class_property(PolylineGlow, 'polylineGlow')


material_property = lambda x: class_property(Material, x, doc=
"""The material to use to fill in the object you are creating.""")
line_material_property = lambda x: class_property(LineMaterial, x, doc=
"""The material to use to draw the line.""")


class Directions(_CZMLBaseObject):
    """A list of directions, as flat arrays of spherical
    [Clock, Cone, Magnitude, ...], unit spherical [Clock, Cone, ...] or
    Cartesian [X, Y, Z, ...] components."""

    _properties = ('spherical', 'unitSpherical', 'cartesian',
                   'unitCartesian')

    spherical = list_property('spherical', float)
    unitSpherical = list_property('unitSpherical', float)
    cartesian = list_property('cartesian', float)
    unitCartesian = list_property('unitCartesian', float)


class WsenDegrees(_CZMLBaseObject):
    """A rectangle as [West, South, East, North] in degrees."""

    _properties = ('wsenDegrees',)

    wsenDegrees = list_property('wsenDegrees', float, length=4)


class NodeTransformation(_CZMLBaseObject):
    """The transformation applied to one node of a model."""

    _properties = ('scale', 'translation', 'rotation')

    scale = class_property(CzmlCartesian, 'scale')
    translation = class_property(CzmlCartesian, 'translation')
    rotation = class_property(Orientation, 'rotation')


class NodeTransformations(_CZMLValue):
    """Node transformations of a model keyed by node name."""

    def __init__(self, nodes=None):
        self.nodes = {}
        for name, node in (nodes or {}).items():
            self[name] = node

    def __setitem__(self, name, node):
        if not isinstance(node, NodeTransformation):
            node = NodeTransformation.from_data(node)
        self.nodes[name] = node

    def __getitem__(self, name):
        return self.nodes[name]

    def __iter__(self):
        return iter(self.nodes)

    def __len__(self):
        return len(self.nodes)

    def load(self, data):
        if not isinstance(data, dict):
            raise ShapeMismatch('NodeTransformations', data)
        self.nodes = {}
        for name, node in data.items():
            self[name] = node

    def data(self):
        return dict((name, node.data()) for name, node in self.nodes.items())
