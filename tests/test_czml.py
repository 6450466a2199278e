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
"""Tests for packets and documents."""
import io
import logging

import pytest
import simplejson as json

from czmlcodec import (
    CZML, CZMLPacket, PACKET_PROPERTIES, Billboard, Point, Font,
    CustomProperties, CzmlPositions, document_packet,
)
from czmlcodec.exceptions import ShapeMismatch, DocumentParseFailure

END_TO_END = ('[{"id":"document","version":"1.0"},'
              '{"id":"e1","billboard":{"image":"http://x/y.png","scale":2.0}}]')

RGBA = {'rgba': [255, 255, 255, 255]}
SOLID = {'solidColor': {'color': RGBA}}
VERTICES = {'cartographicDegrees': [0.0, 0.0, 0.0, 1.0, 1.0, 0.0]}

# One example value for every packet property key.
EXAMPLES = {
    'availability': '2012-08-04T16:00:00Z/2012-08-04T18:00:00Z',
    'position': {'epoch': '2012-08-04T16:00:00Z',
                 'cartographicDegrees': [0, 1.0, 2.0, 3.0, 60, 4.0, 5.0, 6.0]},
    'billboard': {'image': 'http://x/y.png', 'scale': 2.0, 'show': True,
                  'color': RGBA, 'horizontalOrigin': 'CENTER'},
    'orientation': {'unitQuaternion': [0.0, 0.0, 0.0, 1.0]},
    'point': {'pixelSize': 10.0, 'color': {'rgbaf': [1.0, 0.0, 0.0, 1.0]}},
    'label': {'text': 'hello', 'font': '12pt sans-serif', 'style': 'FILL',
              'pixelOffset': {'cartesian2': [5.0, 5.0]}},
    'path': {'width': 2.0, 'leadTime': 0.0,
             'material': {'polylineOutline': {'color': RGBA, 'outlineWidth': 1.0}}},
    'polyline': {'positions': VERTICES, 'followSurface': False,
                 'material': {'polylineGlow': {'glowPower': 0.25}}},
    'polygon': {'positions': VERTICES, 'material': SOLID, 'perPositionHeight': True},
    'ellipsoid': {'radii': {'cartesian': [1.0, 2.0, 3.0]}, 'fill': True},
    'viewFrom': {'cartesian': [-1000.0, 0.0, 300.0]},
    'rectangle': {'coordinates': {'wsenDegrees': [-10.0, -5.0, 10.0, 5.0]},
                  'material': {'stripe': {'orientation': 'VERTICAL',
                                          'evenColor': RGBA, 'repeat': 4.0}}},
    'wall': {'positions': VERTICES, 'minimumHeights': [0.0, 0.0],
             'maximumHeights': [10.0, 20.0]},
    'model': {'gltf': 'http://x/m.gltf', 'scale': 1.5,
              'nodeTransformations': {'wheel': {'rotation': {
                  'unitQuaternion': [0.0, 0.0, 0.0, 1.0]}}}},
    'ellipse': {'semiMajorAxis': 300.0, 'semiMinorAxis': 200.0,
                'material': {'grid': {'cellAlpha': 0.1, 'lineCount': 8.0}}},
    'clock': {'interval': '2012-08-04T16:00:00Z/2012-08-04T18:00:00Z',
              'currentTime': '2012-08-04T16:00:00Z', 'multiplier': 60.0,
              'range': 'LOOP_STOP', 'step': 'SYSTEM_CLOCK_MULTIPLIER'},
    'agi_conicSensor': {'outerHalfAngle': 0.5, 'showIntersection': True,
                        'portionToDisplay': 'COMPLETE',
                        'lateralSurfaceMaterial': SOLID},
    'agi_customPatternSensor': {'directions': {'unitSpherical': [0.0, 0.1, 1.0, 0.2]},
                                'radius': 1000.0},
    'agi_fan': {'directions': {'unitCartesian': [1.0, 0.0, 0.0]},
                'perDirectionRadius': False},
    'agi_rectangularSensor': {'xHalfAngle': 0.3, 'yHalfAngle': 0.2},
    'agi_vector': {'direction': {'unitCartesian': [0.0, 0.0, 1.0]}, 'length': 10.0},
    'properties': {'mission': {'phase': 'cruise', 'legs': [1, 2]}},
}


@pytest.fixture
def packet_data():
    return {'id': 'e1', 'name': 'Entity',
            'billboard': {'image': 'http://x/y.png'},
            'point': {'pixelSize': 'big'}}


class TestPacketDispatch:
    """Each known key is read by its own class."""

    def test_every_key_has_an_example(self):
        assert sorted(EXAMPLES) == sorted(key for key, _ in PACKET_PROPERTIES)

    @pytest.mark.parametrize('key, cls', PACKET_PROPERTIES)
    def test_round_trip(self, key, cls):
        data = {'id': 'e', key: EXAMPLES[key]}
        packet = CZMLPacket.from_data(data)
        assert isinstance(packet.get_property(key), cls)
        assert isinstance(getattr(packet, key), cls)
        assert packet.data() == data
        assert CZMLPacket.from_data(packet.data()) == packet

    def test_unknown_keys_are_dropped(self):
        packet = CZMLPacket.from_data({'id': 'e1', 'billboard': {'image': 'x'},
                                       'unknownKey': 123})
        assert packet.data() == {'id': 'e1', 'billboard': {'image': 'x'}}

    def test_key_order(self):
        packet = CZMLPacket(properties={'a': 1}, billboard={'image': 'x'},
                            version='1.0', position={'cartesian': [1, 2, 3]},
                            description='d', availability='a/b', parent='p',
                            name='n', id='e')
        assert list(packet.data()) == [
            'id', 'name', 'parent', 'description', 'version',
            'availability', 'position', 'billboard', 'properties']

    def test_null_property_is_absent(self):
        packet = CZMLPacket.from_data({'id': 'e1', 'billboard': None})
        assert packet.property_list == []

    def test_non_string_identity_is_ignored(self, caplog):
        with caplog.at_level(logging.WARNING, logger='czmlcodec'):
            packet = CZMLPacket.from_data({'id': 5, 'name': 'n'})
        assert packet.id is None
        assert packet.data() == {'name': 'n'}
        assert 'id' in caplog.text

    def test_not_an_object(self):
        with pytest.raises(ShapeMismatch):
            CZMLPacket.from_data(['id', 'e1'])


class TestPacketLeniency:
    """A property which cannot be read is left out of its packet."""

    def test_bad_property_is_dropped(self, packet_data, caplog):
        with caplog.at_level(logging.WARNING, logger='czmlcodec'):
            packet = CZMLPacket.from_data(packet_data)
        assert packet.point is None
        assert packet.data() == {'id': 'e1', 'name': 'Entity',
                                 'billboard': {'image': 'http://x/y.png'}}
        assert 'point' in caplog.text

    def test_strict(self, packet_data):
        packet = CZMLPacket()
        with pytest.raises(ShapeMismatch):
            packet.load(packet_data, strict=True)

    def test_malformed_samples_drop_only_the_position(self):
        packet = CZMLPacket.from_data({'id': 'e1', 'position': {'cartesian': [1, 2]},
                                       'label': {'text': 'ok'}})
        assert packet.data() == {'id': 'e1', 'label': {'text': 'ok'}}

    def test_bad_custom_field_keeps_the_others(self):
        packet = CZMLPacket(id='e1')
        packet.properties = CustomProperties({'kept': 1})
        packet.properties.load({'kept': 1, 'lost': object()})
        assert packet.data() == {'id': 'e1', 'properties': {'kept': 1}}

    def test_out_of_range_color_drops_only_the_point(self, caplog):
        text = ('[{"id": "a", "point": {"color": {"rgba": [1e400, 0, 0, 255]}},'
                ' "label": {"text": "ok"}}]')
        doc = CZML()
        with caplog.at_level(logging.WARNING, logger='czmlcodec'):
            doc.loads(text)
        assert len(doc) == 1
        assert doc.data() == [{'id': 'a', 'label': {'text': 'ok'}}]
        assert 'point' in caplog.text
        with pytest.raises(ShapeMismatch):
            CZML().loads(text, strict=True)

    def test_fractional_rgba_drops_the_point(self):
        packet = CZMLPacket.from_data({'id': 'a', 'point': {'color': {'rgba': [1.5, 2, 3, 4]}}})
        assert packet.point is None


class TestPacketProperties:

    def test_add_replaces_the_same_kind(self):
        packet = CZMLPacket(id='e1')
        packet.add_property(Billboard(image='a'))
        packet.add_property(Point(pixelSize=3))
        packet.add_property(Billboard(image='b'))
        assert len(packet.property_list) == 2
        assert packet.billboard.image.uri == 'b'
        assert isinstance(packet.property_list[0], Billboard)

    def test_add_rejects_other_values(self):
        with pytest.raises(ValueError):
            CZMLPacket().add_property(Font('12pt sans-serif'))

    def test_get_unknown_key(self):
        with pytest.raises(ValueError):
            CZMLPacket().get_property('bogus')

    def test_remove(self):
        packet = CZMLPacket(id='e1', billboard={'image': 'x'}, point={'pixelSize': 2})
        packet.remove_property('billboard')
        packet.point = None
        assert packet.property_list == []

    def test_unknown_keyword(self):
        with pytest.raises(ValueError):
            CZMLPacket(id='e1', bogus=1)

    def test_attribute_accepts_json(self):
        packet = CZMLPacket(id='e1')
        packet.position = {'cartographicDegrees': [10, 20, 0]}
        assert isinstance(packet.position, CzmlPositions)
        assert packet.data()['position'] == {'cartographicDegrees': [10.0, 20.0, 0.0]}


class TestDocument:

    def test_end_to_end(self):
        doc = CZML()
        doc.loads(END_TO_END)
        assert len(doc) == 2
        assert doc.packets[1].billboard.scale.data() == 2.0
        assert doc.data() == json.loads(END_TO_END)

    def test_bad_property_keeps_the_packet(self):
        doc = CZML()
        doc.load([{'id': 'document', 'version': '1.0'},
                  {'id': 'e1', 'billboard': {'image': 'x'}, 'point': {'show': 'yes'}}])
        assert len(doc) == 2
        assert doc.data()[1] == {'id': 'e1', 'billboard': {'image': 'x'}}

    def test_bad_packets_are_dropped(self, caplog):
        doc = CZML()
        with caplog.at_level(logging.WARNING, logger='czmlcodec'):
            doc.load([{'id': 'a'}, 5, 'b', {'id': 'c'}])
        assert [p.id for p in doc] == ['a', 'c']
        assert 'dropping packet 1' in caplog.text

    @pytest.mark.parametrize('data', [{'id': 'document'}, 'czml', None])
    def test_not_an_array(self, data, caplog):
        doc = CZML([document_packet()])
        with caplog.at_level(logging.ERROR, logger='czmlcodec'):
            doc.load(data)
        assert len(doc) == 0
        assert 'array' in caplog.text

    def test_invalid_json(self, caplog):
        doc = CZML()
        with caplog.at_level(logging.ERROR, logger='czmlcodec'):
            doc.loads('[{"id": ')
        assert len(doc) == 0
        assert caplog.records

    @pytest.mark.parametrize('data', [b'\xff\xfe[', None, 5])
    def test_unreadable_input(self, data, caplog):
        doc = CZML([document_packet()])
        with caplog.at_level(logging.ERROR, logger='czmlcodec'):
            doc.loads(data)
        assert len(doc) == 0
        assert caplog.records
        with pytest.raises(DocumentParseFailure):
            CZML().loads(data, strict=True)

    def test_strict(self):
        with pytest.raises(DocumentParseFailure):
            CZML().load({'id': 'document'}, strict=True)
        with pytest.raises(DocumentParseFailure):
            CZML().loads('not json', strict=True)
        with pytest.raises(ShapeMismatch):
            CZML().load([5], strict=True)

    def test_append_and_remove(self):
        first, second = document_packet(), CZMLPacket(id='e1')
        doc = CZML([first])
        doc.append(second)
        assert list(doc) == [first, second]
        doc.remove(first)
        assert doc.packets == [second]
        with pytest.raises(ValueError):
            doc.append({'id': 'e2'})

    def test_document_packet(self):
        assert document_packet().data() == {'id': 'document', 'version': '1.0'}
        assert document_packet(name='scene').data() == {
            'id': 'document', 'name': 'scene', 'version': '1.0'}

    def test_dumps_and_dump(self):
        doc = CZML()
        doc.loads(END_TO_END)
        fp = io.StringIO()
        doc.dump(fp)
        assert json.loads(fp.getvalue()) == json.loads(doc.dumps())
        assert json.loads(doc.dumps(indent=2)) == doc.data()


class TestStream:
    """The stream output is a bracketed list of server sent events."""

    def test_format(self):
        doc = CZML()
        doc.loads(END_TO_END)
        first, second = doc.data()
        expected = ('[\n'
                    'event: czml\ndata: %s\n\n'
                    'event: czml\ndata: %s\n\n'
                    ']') % (json.dumps(first, indent=2), json.dumps(second, indent=2))
        assert doc.as_stream_data() == expected

    def test_empty_document(self):
        assert CZML().as_stream_data() == '[\n]'

    def test_frame(self):
        packet = CZMLPacket(id='e1')
        assert packet.as_event_source(indent=None) == 'event: czml\ndata: {"id": "e1"}\n'
