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
"""Packets and documents.

A CZML document is a JSON array of packets, each packet an object
describing one entity through a fixed set of named properties.
"""
import logging

import simplejson as json

from .core import (
    _CZMLBaseObject, _CZMLValue, class_property, datetime_property,
    value_property, list_property, number_property, boolean_property,
    color_property, material_property, line_material_property,
    Availability, CzmlPositions, Positions, Orientation, ViewFrom, Radii,
    EyeOffset, PixelOffset, AlignedAxis, ImageUri, Font, Style, Text,
    HorizontalOrigin, VerticalOrigin, PortionToDisplay, Directions,
    WsenDegrees, NodeTransformations,
)
from .custom import CustomProperties
from .exceptions import ShapeMismatch, DocumentParseFailure

logger = logging.getLogger(__name__)

DEFAULT_VERSION = '1.0'
STREAM_INDENT = 2

# Clock range
UNBOUNDED = 'UNBOUNDED'
CLAMPED = 'CLAMPED'
LOOP_STOP = 'LOOP_STOP'

# Clock step
SYSTEM_CLOCK = 'SYSTEM_CLOCK'
SYSTEM_CLOCK_MULTIPLIER = 'SYSTEM_CLOCK_MULTIPLIER'
TICK_DEPENDENT = 'TICK_DEPENDENT'


class Billboard(_CZMLBaseObject):
    """A billboard, or viewport-aligned image.

    The billboard is positioned in the scene by the position property.
    A billboard is sometimes called a marker.

    """

    _properties = ('show', 'image', 'scale', 'color', 'eyeOffset',
                   'pixelOffset', 'horizontalOrigin', 'verticalOrigin',
                   'rotation', 'alignedAxis')

    show = boolean_property('show', doc=
    """Whether or not the billboard is shown.""")
    image = class_property(ImageUri, 'image', doc=
    """The image displayed on the billboard, expressed as a URL.""")
    scale = number_property('scale', doc=
    """The scale of the billboard.

    The scale is multiplied with the
    pixel size of the billboard's image. For example, if the scale is 2.0,
    the billboard will be rendered with twice the number of pixels,
    in each direction, of the image.""")
    color = color_property('color', doc=
    """The color of the billboard. This color value is multiplied
    with the values of the billboard's "image" to produce the
    final color.""")
    eyeOffset = class_property(EyeOffset, 'eyeOffset')
    pixelOffset = class_property(PixelOffset, 'pixelOffset')
    horizontalOrigin = class_property(HorizontalOrigin, 'horizontalOrigin')
    verticalOrigin = class_property(VerticalOrigin, 'verticalOrigin')
    rotation = number_property('rotation')
    alignedAxis = class_property(AlignedAxis, 'alignedAxis')


class Label(_CZMLBaseObject):
    """A string of text.

    The label is positioned in the scene by the position property.

    """

    _properties = ('show', 'text', 'font', 'style', 'scale', 'fillColor',
                   'outlineColor', 'outlineWidth', 'eyeOffset',
                   'pixelOffset', 'horizontalOrigin', 'verticalOrigin')

    show = boolean_property('show', doc=
    """Whether or not the label is shown.""")
    text = class_property(Text, 'text', doc=
    """The text displayed by the label.""")
    font = class_property(Font, 'font', doc=
    """The font to use for the label.""")
    style = class_property(Style, 'style', doc=
    """The style of the label.""")
    scale = number_property('scale')
    fillColor = color_property('fillColor')
    outlineColor = color_property('outlineColor')
    outlineWidth = number_property('outlineWidth')
    eyeOffset = class_property(EyeOffset, 'eyeOffset')
    pixelOffset = class_property(PixelOffset, 'pixelOffset')
    horizontalOrigin = class_property(HorizontalOrigin, 'horizontalOrigin')
    verticalOrigin = class_property(VerticalOrigin, 'verticalOrigin')


class Point(_CZMLBaseObject):
    """A point, or viewport-aligned circle.
    The point is positioned in the scene by the position property.
    """

    _properties = ('show', 'color', 'pixelSize', 'outlineColor',
                   'outlineWidth')

    show = boolean_property('show')
    color = color_property('color', doc=
    """The color of the point.""")
    pixelSize = number_property('pixelSize', doc=
    """The size of the point, in pixels.""")
    outlineColor = color_property('outlineColor')
    outlineWidth = number_property('outlineWidth')


class Path(_CZMLBaseObject):
    """A path, which is a polyline defined by the motion of an object over
    time. The possible vertices of the path are specified by the position
    property."""

    _properties = ('show', 'material', 'width', 'resolution', 'leadTime',
                   'trailTime')

    show = boolean_property('show')
    material = line_material_property('material')
    width = number_property('width', doc=
    """The width of the path line.""")
    resolution = number_property('resolution', doc=
    """The maximum step-size, in seconds, used to sample the path.""")
    leadTime = number_property('leadTime', doc=
    """The time ahead of the animation time, in seconds, to show the path.""")
    trailTime = number_property('trailTime', doc=
    """The time behind the animation time, in seconds, to show the path.""")


class Polyline(_CZMLBaseObject):
    """ A polyline, which is a line in the scene composed of multiple segments.

    The vertices of the polyline are specified by the positions property.

    """

    _properties = ('show', 'positions', 'material', 'width', 'followSurface')

    show = boolean_property('show')
    positions = class_property(Positions, 'positions')
    material = line_material_property('material')
    width = number_property('width')
    followSurface = boolean_property('followSurface')


class Polygon(_CZMLBaseObject):
    """A polygon, which is a closed figure on the surface of the Earth.

    The vertices of the polygon are specified by the positions property.

    """

    _properties = ('show', 'positions', 'material', 'height',
                   'extrudedHeight', 'granularity', 'stRotation', 'fill',
                   'outline', 'outlineColor', 'perPositionHeight')

    show = boolean_property('show')
    positions = class_property(Positions, 'positions')
    material = material_property('material')
    height = number_property('height')
    extrudedHeight = number_property('extrudedHeight')
    granularity = number_property('granularity')
    stRotation = number_property('stRotation')
    fill = boolean_property('fill')
    outline = boolean_property('outline')
    outlineColor = color_property('outlineColor')
    perPositionHeight = boolean_property('perPositionHeight')


class Ellipse(_CZMLBaseObject):
    """An ellipse, which is a closed curve on the surface of the Earth.

    The ellipse is positioned using the position property.

    """

    _properties = ('show', 'semiMajorAxis', 'semiMinorAxis', 'rotation',
                   'material', 'height', 'extrudedHeight', 'granularity',
                   'stRotation', 'fill', 'outline', 'outlineColor',
                   'numberOfVerticalLines')

    show = boolean_property('show')
    semiMajorAxis = number_property('semiMajorAxis', doc=
    """The length of the ellipse's semi-major axis in meters.""")
    semiMinorAxis = number_property('semiMinorAxis', doc=
    """The length of the ellipse's semi-minor axis in meters.""")
    rotation = number_property('rotation', doc=
    """The angle from north (clockwise) in radians.""")
    material = material_property('material')
    height = number_property('height')
    extrudedHeight = number_property('extrudedHeight')
    granularity = number_property('granularity')
    stRotation = number_property('stRotation')
    fill = boolean_property('fill')
    outline = boolean_property('outline')
    outlineColor = color_property('outlineColor')
    numberOfVerticalLines = number_property('numberOfVerticalLines')


class Ellipsoid(_CZMLBaseObject):
    """An ellipsoid, which is a closed quadric surface that is a three
    dimensional analogue of an ellipse.

    The ellipsoid is positioned and oriented using the position and
    orientation properties.

    """

    _properties = ('show', 'radii', 'fill', 'material', 'outline',
                   'outlineColor', 'stackPartitions', 'slicePartitions',
                   'subdivisions')

    show = boolean_property('show')
    radii = class_property(Radii, 'radii')
    fill = boolean_property('fill')
    material = material_property('material')
    outline = boolean_property('outline')
    outlineColor = color_property('outlineColor')
    stackPartitions = number_property('stackPartitions')
    slicePartitions = number_property('slicePartitions')
    subdivisions = number_property('subdivisions')


class Rectangle(_CZMLBaseObject):
    """A cartographic rectangle, which conforms to the curvature of the
    globe and can be placed on the surface or at altitude."""

    _properties = ('show', 'coordinates', 'material', 'height',
                   'extrudedHeight', 'granularity', 'rotation', 'stRotation',
                   'fill', 'outline', 'outlineColor', 'outlineWidth',
                   'closeBottom', 'closeTop')

    show = boolean_property('show')
    coordinates = class_property(WsenDegrees, 'coordinates')
    material = material_property('material')
    height = number_property('height')
    extrudedHeight = number_property('extrudedHeight')
    granularity = number_property('granularity')
    rotation = number_property('rotation')
    stRotation = number_property('stRotation')
    fill = boolean_property('fill')
    outline = boolean_property('outline')
    outlineColor = color_property('outlineColor')
    outlineWidth = number_property('outlineWidth')
    closeBottom = boolean_property('closeBottom')
    closeTop = boolean_property('closeTop')


class Wall(_CZMLBaseObject):
    """A two dimensional wall defined as a line strip and optional maximum
    and minimum heights."""

    _properties = ('show', 'positions', 'material', 'minimumHeights',
                   'maximumHeights', 'granularity', 'fill', 'outline',
                   'outlineColor', 'outlineWidth')

    show = boolean_property('show')
    positions = class_property(Positions, 'positions')
    material = material_property('material')
    minimumHeights = list_property('minimumHeights', float)
    maximumHeights = list_property('maximumHeights', float)
    granularity = number_property('granularity')
    fill = boolean_property('fill')
    outline = boolean_property('outline')
    outlineColor = color_property('outlineColor')
    outlineWidth = number_property('outlineWidth')


class Model(_CZMLBaseObject):
    """A 3D model. The model is positioned and oriented using the position
    and orientation properties."""

    _properties = ('show', 'scale', 'minimumPixelSize', 'gltf',
                   'runAnimations', 'nodeTransformations')

    show = boolean_property('show')
    scale = number_property('scale')
    minimumPixelSize = number_property('minimumPixelSize')
    gltf = class_property(ImageUri, 'gltf', doc=
    """The URL of a glTF model.""")
    runAnimations = boolean_property('runAnimations')
    nodeTransformations = class_property(NodeTransformations,
                                         'nodeTransformations')


class Clock(_CZMLBaseObject):
    """A simulated clock.

    Property Name: clock
    interpolatable: no
    Sub-properties:

    currentTime:
        Scope: Interval
        Type: String
        Description: The current time.

    multiplier:
        Scope: Interval
        Type: Number
        Description: The multiplier, which in TICK_DEPENDENT mode is the number of seconds to advance each tick.
        In SYSTEM_CLOCK_DEPENDENT mode, it is the multiplier applied to the amount of time elapsed
        between ticks. This value is ignored in SYSTEM_CLOCK mode.

    range:
        Scope: Interval
        Type: String
        Description: The behavior of a clock when its current time reaches its start or end points.
        Valid values are 'UNBOUNDED', 'CLAMPED', and 'LOOP_STOP'.

    step:
        Scope: Interval
        Type: String
        Description: Defines how a clock steps in time. Valid values are 'SYSTEM_CLOCK',
        'SYSTEM_CLOCK_MULTIPLIER', and 'TICK_DEPENDENT'.

    """

    _properties = ('interval', 'currentTime', 'multiplier', 'range', 'step')

    interval = value_property('interval', str)
    currentTime = datetime_property('currentTime')
    multiplier = value_property('multiplier', float)
    range = value_property('range', str)
    step = value_property('step', str)


class ConicSensor(_CZMLBaseObject):
    """A conical sensor volume taking into account occlusion of an ellipsoid,
    i.e., the globe."""

    _properties = ('show', 'innerHalfAngle', 'outerHalfAngle',
                   'minimumClockAngle', 'maximumClockAngle', 'radius',
                   'showIntersection', 'intersectionColor',
                   'intersectionWidth', 'showLateralSurfaces',
                   'lateralSurfaceMaterial', 'showEllipsoidSurfaces',
                   'ellipsoidSurfaceMaterial', 'showEllipsoidHorizonSurfaces',
                   'ellipsoidHorizonSurfaceMaterial', 'showDomeSurfaces',
                   'domeSurfaceMaterial', 'portionToDisplay')

    show = boolean_property('show')
    innerHalfAngle = number_property('innerHalfAngle')
    outerHalfAngle = number_property('outerHalfAngle')
    minimumClockAngle = number_property('minimumClockAngle')
    maximumClockAngle = number_property('maximumClockAngle')
    radius = number_property('radius')
    showIntersection = boolean_property('showIntersection')
    intersectionColor = color_property('intersectionColor')
    intersectionWidth = number_property('intersectionWidth')
    showLateralSurfaces = boolean_property('showLateralSurfaces')
    lateralSurfaceMaterial = material_property('lateralSurfaceMaterial')
    showEllipsoidSurfaces = boolean_property('showEllipsoidSurfaces')
    ellipsoidSurfaceMaterial = material_property('ellipsoidSurfaceMaterial')
    showEllipsoidHorizonSurfaces = boolean_property('showEllipsoidHorizonSurfaces')
    ellipsoidHorizonSurfaceMaterial = material_property('ellipsoidHorizonSurfaceMaterial')
    showDomeSurfaces = boolean_property('showDomeSurfaces')
    domeSurfaceMaterial = material_property('domeSurfaceMaterial')
    portionToDisplay = class_property(PortionToDisplay, 'portionToDisplay')


class CustomPatternSensor(_CZMLBaseObject):
    """A custom sensor volume taking into account occlusion of an ellipsoid."""

    _properties = ('show', 'directions', 'radius', 'showIntersection',
                   'intersectionColor', 'intersectionWidth',
                   'showLateralSurfaces', 'lateralSurfaceMaterial',
                   'showEllipsoidSurfaces', 'ellipsoidSurfaceMaterial',
                   'showEllipsoidHorizonSurfaces',
                   'ellipsoidHorizonSurfaceMaterial', 'showDomeSurfaces',
                   'domeSurfaceMaterial', 'portionToDisplay')

    show = boolean_property('show')
    directions = class_property(Directions, 'directions')
    radius = number_property('radius')
    showIntersection = boolean_property('showIntersection')
    intersectionColor = color_property('intersectionColor')
    intersectionWidth = number_property('intersectionWidth')
    showLateralSurfaces = boolean_property('showLateralSurfaces')
    lateralSurfaceMaterial = material_property('lateralSurfaceMaterial')
    showEllipsoidSurfaces = boolean_property('showEllipsoidSurfaces')
    ellipsoidSurfaceMaterial = material_property('ellipsoidSurfaceMaterial')
    showEllipsoidHorizonSurfaces = boolean_property('showEllipsoidHorizonSurfaces')
    ellipsoidHorizonSurfaceMaterial = material_property('ellipsoidHorizonSurfaceMaterial')
    showDomeSurfaces = boolean_property('showDomeSurfaces')
    domeSurfaceMaterial = material_property('domeSurfaceMaterial')
    portionToDisplay = class_property(PortionToDisplay, 'portionToDisplay')


class Fan(_CZMLBaseObject):
    """Defines a fan, which starts at a point or apex and extends in a
    specified list of directions from the apex."""

    _properties = ('show', 'directions', 'radius', 'perDirectionRadius',
                   'material', 'fill', 'outline', 'numberOfRings',
                   'outlineColor')

    show = boolean_property('show')
    directions = class_property(Directions, 'directions')
    radius = number_property('radius')
    perDirectionRadius = boolean_property('perDirectionRadius')
    material = material_property('material')
    fill = boolean_property('fill')
    outline = boolean_property('outline')
    numberOfRings = number_property('numberOfRings')
    outlineColor = color_property('outlineColor')


class RectangularSensor(_CZMLBaseObject):
    """A rectangular pyramid sensor volume taking into account occlusion
    of an ellipsoid."""

    _properties = ('show', 'xHalfAngle', 'yHalfAngle', 'radius',
                   'showIntersection', 'intersectionColor',
                   'intersectionWidth', 'showLateralSurfaces',
                   'lateralSurfaceMaterial', 'showEllipsoidSurfaces',
                   'ellipsoidSurfaceMaterial', 'showEllipsoidHorizonSurfaces',
                   'ellipsoidHorizonSurfaceMaterial', 'showDomeSurfaces',
                   'domeSurfaceMaterial', 'portionToDisplay')

    show = boolean_property('show')
    xHalfAngle = number_property('xHalfAngle')
    yHalfAngle = number_property('yHalfAngle')
    radius = number_property('radius')
    showIntersection = boolean_property('showIntersection')
    intersectionColor = color_property('intersectionColor')
    intersectionWidth = number_property('intersectionWidth')
    showLateralSurfaces = boolean_property('showLateralSurfaces')
    lateralSurfaceMaterial = material_property('lateralSurfaceMaterial')
    showEllipsoidSurfaces = boolean_property('showEllipsoidSurfaces')
    ellipsoidSurfaceMaterial = material_property('ellipsoidSurfaceMaterial')
    showEllipsoidHorizonSurfaces = boolean_property('showEllipsoidHorizonSurfaces')
    ellipsoidHorizonSurfaceMaterial = material_property('ellipsoidHorizonSurfaceMaterial')
    showDomeSurfaces = boolean_property('showDomeSurfaces')
    domeSurfaceMaterial = material_property('domeSurfaceMaterial')
    portionToDisplay = class_property(PortionToDisplay, 'portionToDisplay')


class AgiVector(_CZMLBaseObject):
    """A graphical vector that originates at the position property and
    extends in the provided direction for the provided length."""

    _properties = ('show', 'color', 'direction', 'length',
                   'minimumLengthInPixels')

    show = boolean_property('show')
    color = color_property('color')
    direction = class_property(Directions, 'direction')
    length = number_property('length')
    minimumLengthInPixels = number_property('minimumLengthInPixels')


# The wire key of every packet property and the class reading and
# writing it, in the order the keys are written.
PACKET_PROPERTIES = (
    ('availability', Availability),
    ('position', CzmlPositions),
    ('billboard', Billboard),
    ('orientation', Orientation),
    ('point', Point),
    ('label', Label),
    ('path', Path),
    ('polyline', Polyline),
    ('polygon', Polygon),
    ('ellipsoid', Ellipsoid),
    ('viewFrom', ViewFrom),
    ('rectangle', Rectangle),
    ('wall', Wall),
    ('model', Model),
    ('ellipse', Ellipse),
    ('clock', Clock),
    ('agi_conicSensor', ConicSensor),
    ('agi_customPatternSensor', CustomPatternSensor),
    ('agi_fan', Fan),
    ('agi_rectangularSensor', RectangularSensor),
    ('agi_vector', AgiVector),
    ('properties', CustomProperties),
)

_KEYS = dict((cls, key) for key, cls in PACKET_PROPERTIES)
_KINDS = dict(PACKET_PROPERTIES)


def _kind(kind):
    if isinstance(kind, str):
        try:
            return _KINDS[kind]
        except KeyError:
            raise ValueError('Unknown packet property: %s' % kind)
    if kind not in _KEYS:
        raise ValueError('%r is not a packet property' % (kind,))
    return kind


def packet_property(cls):
    """Returns a property exposing the packet property read by ``cls``.

    Setting it to None removes the property, any value other than an
    instance of ``cls`` is decoded by ``cls``.

    """

    def getter(self):
        return self.get_property(cls)

    def setter(self, val):
        if val is None:
            self.remove_property(cls)
        elif isinstance(val, cls):
            self.add_property(val)
        else:
            self.add_property(cls.from_data(val))

    return property(getter, setter, doc=cls.__doc__)


class CZMLPacket(_CZMLBaseObject):
    """A CZML packet describes the graphical properties for a single
    object in the scene, such as a single aircraft.

    """

    _properties = ('id', 'name', 'parent', 'description', 'version')

    id = value_property('id', str, doc=
    """Each packet has an id property identifying the object it is describing.
    IDs do not need to be GUIDs - URIs make good IDs - but they do need to uniquely
    identify a single object within a CZML source and any other CZML sources loaded
    into the same scope.

    If an id is not specified, the client will automatically generate a unique one.
    However, this prevents later packets from referring to this object in order to,
    for example, add more data to it. A packet without an id is essentially a way of
    saying "this object exists" without allowing it to be updated later.""")
    name = value_property('name', str)
    parent = value_property('parent', str)
    description = value_property('description', str)
    version = value_property('version', str, doc=
    """The CZML version, conventionally given by the first packet of a
    document.""")

    def __init__(self, **kwargs):
        """

        :param kwargs: identity fields and packet properties by their keys
        :return:

        """
        self._property_list = []
        for k, v in kwargs.items():
            if k not in self._properties and k not in _KINDS:
                raise ValueError('Unknown parameter: %s' % k)
            setattr(self, k, v)

    @property
    def property_list(self):
        """The packet properties, in the order they were added."""
        return list(self._property_list)

    def add_property(self, prop):
        """Add a packet property, replacing one of the same kind.

        :param prop:
        :return:

        """
        _kind(type(prop))
        for i, p in enumerate(self._property_list):
            if type(p) is type(prop):
                self._property_list[i] = prop
                return
        self._property_list.append(prop)

    def get_property(self, kind):
        """

        :param kind: the class or the wire key of the property
        :return: the property, or None

        """
        cls = _kind(kind)
        for p in self._property_list:
            if type(p) is cls:
                return p

    def remove_property(self, kind):
        cls = _kind(kind)
        self._property_list = [p for p in self._property_list
                               if type(p) is not cls]

    def data(self):
        """

        :return:

        """
        d = super(CZMLPacket, self).data()
        for key, cls in PACKET_PROPERTIES:
            prop = self.get_property(cls)
            if prop is not None:
                d[key] = prop.data()
        return d

    def load(self, data, strict=False):
        """Read a packet. A property which cannot be read is left out.

        :param data:
        :param strict: raise on the first property which cannot be read
        :return:

        """
        if not isinstance(data, dict):
            raise ShapeMismatch('CZMLPacket', data)
        self._property_list = []
        for key in self._properties:
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                if strict:
                    raise ShapeMismatch(key, value)
                logger.warning('ignoring %s %r, it is not a string', key, value)
                value = None
            setattr(self, key, value)
        for key, cls in PACKET_PROPERTIES:
            value = data.get(key)
            if value is None:
                continue
            try:
                self.add_property(cls.from_data(value))
            except (ValueError, TypeError) as e:
                if strict:
                    raise
                logger.warning('packet %s: dropping %s: %s', self.id, key, e)
        for key in data:
            if key not in self._properties and key not in _KINDS:
                logger.debug('packet %s: ignoring unknown property %r',
                             self.id, key)

    def as_event_source(self, indent=STREAM_INDENT):
        """The packet as one frame of a server sent event stream.

        :param indent:
        :return:

        """
        return 'event: czml\ndata: %s\n' % json.dumps(self.data(), indent=indent)


for _key, _cls in PACKET_PROPERTIES:
    setattr(CZMLPacket, _key, packet_property(_cls))
del _key, _cls


def document_packet(version=DEFAULT_VERSION, **kwargs):
    """The packet conventionally heading a CZML document.

    :param version:
    :param kwargs: other identity fields and packet properties
    :return: CZMLPacket

    """
    return CZMLPacket(id='document', version=version, **kwargs)


class CZML(_CZMLValue):
    """ CZML is a subset of JSON, meaning that a valid CZML document is also a valid JSON document.

    Specifically, a CZML document contains a single JSON array where each object-literal element in the array is
    a CZML packet.

    A document is not thread safe, callers sharing one serialize
    ``append`` and ``remove``.

    """

    packets = None

    def __init__(self, packets=None):
        """

        :param packets:
        :return:

        """
        self.packets = []
        for p in packets or ():
            self.append(p)

    def __iter__(self):
        return iter(self.packets)

    def __len__(self):
        return len(self.packets)

    def data(self):
        """

        :return:

        """
        return [p.data() for p in self.packets]

    def dump(self, fp, indent=None):
        """Write the document to a file object.

        :param fp:
        :param indent:
        :return:

        """
        json.dump(self.data(), fp, indent=indent)

    def load(self, data, strict=False):
        """Read a document, leaving out the packets which cannot be read.

        :param data:
        :param strict: raise instead of leaving anything out
        :return:

        """
        self.packets = []
        if not isinstance(data, (list, tuple)):
            if strict:
                raise DocumentParseFailure(
                    'a CZML document is an array, not %s' % type(data).__name__)
            logger.error('a CZML document is an array, not %s',
                         type(data).__name__)
            return
        for i, packet in enumerate(data):
            p = CZMLPacket()
            try:
                p.load(packet, strict=strict)
            except (ValueError, TypeError) as e:
                if strict:
                    raise
                logger.warning('dropping packet %d: %s', i, e)
                continue
            self.packets.append(p)

    def loads(self, data, strict=False):
        """

        :param data: the JSON text of a document
        :param strict:
        :return:

        """
        try:
            packets = json.loads(data)
        except (ValueError, TypeError) as e:
            if strict:
                raise DocumentParseFailure(str(e))
            logger.error('CZML document is not valid JSON: %s', e)
            self.packets = []
            return
        self.load(packets, strict=strict)

    def append(self, packet):
        """

        :param packet:
        :return:

        """
        if isinstance(packet, CZMLPacket):
            self.packets.append(packet)
        else:
            raise ValueError('%r is not a CZMLPacket' % (packet,))

    def remove(self, packet):
        """Remove the first packet equal to ``packet``.

        :param packet:
        :return:

        """
        self.packets.remove(packet)

    def as_stream_data(self, indent=STREAM_INDENT):
        """The packets as a sequence of server sent events, wrapped in
        brackets. The result is not JSON.

        :param indent:
        :return:

        """
        frames = ''.join(p.as_event_source(indent) + '\n'
                         for p in self.packets)
        return '[\n' + frames + ']'
