import pytest

from h3geo import config
from h3geo.coords.latlng import GeoCoord
from h3geo.errors import TopologyError
from h3geo.topology.iterate import Edge
from h3geo.topology.linked import LinkedGeoLoop, LinkedGeoPolygon


def _v(i):
    return GeoCoord.from_degrees(float(i), float(-i))


def _loop(n):
    loop = LinkedGeoLoop()
    for i in range(n):
        loop.add_coord(_v(i))
    return loop


def test_three_vertex_loop_edges_in_order():
    loop = _loop(3)
    v0, v1, v2 = _v(0), _v(1), _v(2)
    assert list(loop.edges()) == [Edge(v0, v1), Edge(v1, v2), Edge(v2, v0)]


def test_empty_loop_is_done_on_first_step():
    loop = LinkedGeoLoop()
    out = [None, None]
    assert loop.is_zero()
    assert loop.new_iterate().step(out) is False
    assert out == [None, None]


@pytest.mark.parametrize("n", [1, 2, 5, 40])
def test_linked_matches_array_contract(n):
    loop = _loop(n)
    edges = loop.edge_list()
    assert len(edges) == n
    for i in range(n):
        assert edges[i].b == edges[(i + 1) % n].a
    assert edges == loop.to_geofence().edge_list()


def test_step_writes_slots_and_stays_done():
    loop = _loop(2)
    cursor = loop.new_iterate()
    out = [None, None]
    assert cursor.step(out) and out == [_v(0), _v(1)]
    assert cursor.step(out) and out == [_v(1), _v(0)]
    done = ["a", "b"]
    assert cursor.step(done) is False
    assert cursor.step(done) is False
    assert done == ["a", "b"]


def test_independent_cursors_do_not_interfere():
    loop = _loop(4)
    first = loop.new_iterate()
    next(first)
    second = loop.new_iterate()
    assert next(second) == Edge(_v(0), _v(1))
    assert next(first) == Edge(_v(1), _v(2))


def test_iteration_does_not_mutate_loop():
    loop = _loop(3)
    first, last = loop.first, loop.last
    list(loop.edges())
    assert loop.first is first and loop.last is last
    assert last.next is None
    assert list(loop.coords()) == [_v(0), _v(1), _v(2)]


def test_add_coord_keeps_first_and_last():
    loop = LinkedGeoLoop()
    node = loop.add_coord(_v(7))
    assert loop.first is node and loop.last is node
    node2 = loop.add_coord(_v(8))
    assert loop.first is node and loop.last is node2
    assert node.next is node2
    assert loop.count_coords() == 2 == len(loop)


def test_cycle_guard_trips_on_relinked_chain():
    loop = _loop(3)
    loop.last.next = loop.first
    cursor = loop.new_iterate()
    for _ in range(3):
        next(cursor)
    with pytest.raises(TopologyError):
        next(cursor)


def test_cycle_guard_can_be_disabled():
    config.configure({"LINKED_CYCLE_GUARD": False})
    loop = _loop(2)
    loop.last.next = loop.first
    cursor = loop.new_iterate()
    edges = [next(cursor) for _ in range(5)]
    assert edges[4] == Edge(_v(0), _v(1))


def test_polygon_loops_in_append_order():
    polygon = LinkedGeoPolygon()
    exterior = polygon.add_new_loop()
    hole = polygon.add_new_loop()
    assert polygon.first is exterior and polygon.last is hole
    assert list(polygon.loops()) == [exterior, hole]
    assert polygon.count_loops() == 2
    assert exterior.next is hole and hole.next is None


def test_polygon_rings_iterate_independently():
    polygon = LinkedGeoPolygon()
    for start in (0, 10):
        loop = polygon.add_new_loop()
        for i in range(start, start + 4):
            loop.add_coord(_v(i))
    assert [len(loop.edge_list()) for loop in polygon.loops()] == [4, 4]


def test_add_loop_rejects_chained_or_repeated_loops():
    polygon = LinkedGeoPolygon()
    loop = polygon.add_loop(_loop(3))
    with pytest.raises(TopologyError):
        polygon.add_loop(loop)
    chained = LinkedGeoLoop()
    chained.next = LinkedGeoLoop()
    with pytest.raises(TopologyError):
        polygon.add_loop(chained)
    assert polygon.count_loops() == 1


def test_sibling_polygons():
    polygon = LinkedGeoPolygon()
    sibling = polygon.add_new_polygon()
    third = sibling.add_new_polygon()
    assert polygon.count_polygons() == 3
    assert sibling.count_polygons() == 2
    assert list(polygon.polygons()) == [polygon, sibling, third]
    with pytest.raises(TopologyError):
        polygon.add_new_polygon()


def test_empty_polygon():
    polygon = LinkedGeoPolygon()
    assert polygon.is_zero()
    assert polygon.count_loops() == 0
    assert polygon.to_polygon().is_zero()


def test_to_multipolygon():
    polygon = LinkedGeoPolygon()
    polygon.add_loop(_loop(4))
    polygon.add_loop(_loop(3))
    polygon.add_new_polygon().add_loop(_loop(5))
    multi = polygon.to_multipolygon()
    assert multi.num_polygons == 2
    first, second = multi.polygons
    assert first.geofence.num_verts == 4
    assert first.num_holes == 1 and first.holes[0].num_verts == 3
    assert second.geofence.num_verts == 5 and second.num_holes == 0


def test_loop_cannot_be_shared_between_polygons():
    a = LinkedGeoPolygon()
    b = LinkedGeoPolygon()
    loop = a.add_new_loop()
    with pytest.raises(TopologyError):
        b.add_loop(loop)
    a.add_new_loop()
    assert b.count_loops() == 0
    assert a.count_loops() == 2


def test_cursor_sees_coords_appended_after_creation():
    loop = LinkedGeoLoop()
    cursor = loop.new_iterate()
    loop.add_coord(_v(0))
    assert next(cursor) == Edge(_v(0), _v(0))
    assert list(cursor) == []
