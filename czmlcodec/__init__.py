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
"""Read and write CZML, the JSON format describing time-dynamic scenes."""
import logging

from .exceptions import (
    CZMLDecodeError, ShapeMismatch, InvalidTimeValue, MalformedSampleArray,
    UnrecognizedCustomPropertyShape, DocumentParseFailure,
)
from .core import (
    TimeValue, TimeInterval, Sample, NumberSamples, Cartesian, Cartesian2D,
    Cartographic, UnitQuaternion, CartesianVelocity, Rgba, Rgbaf, Vertices,
    Availability, BooleanInterval, CzmlBoolean, Show, CzmlNumber, Number,
    CzmlColor, ColorProperty, CzmlCartesian, EyeOffset, AlignedAxis, Radii,
    ViewFrom, CzmlCartesian2, PixelOffset, Font, Style, ImageUri,
    HorizontalOrigin, VerticalOrigin, PortionToDisplay, StripeOrientation,
    StringInterval, Text, Position, Positions, CzmlPosition, CzmlPositions,
    Orientation, SolidColor, Image, Grid, Stripe, Material, PolylineGlow,
    PolylineOutline, LineMaterial, Directions, WsenDegrees,
    NodeTransformation, NodeTransformations,
)
from .custom import (
    read_custom, CustomProperty, CustomValue, CustomNull, CustomList,
    CustomMap, CustomInterval, CustomProperties,
)
from .czml import (
    Billboard, Label, Point, Path, Polyline, Polygon, Ellipse, Ellipsoid,
    Rectangle, Wall, Model, Clock, ConicSensor, CustomPatternSensor, Fan,
    RectangularSensor, AgiVector, PACKET_PROPERTIES, CZMLPacket, CZML,
    document_packet, DEFAULT_VERSION, STREAM_INDENT,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())
