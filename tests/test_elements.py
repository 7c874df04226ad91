import pytest

from geolayout import Element, Geometric, Group, Image, Point, Rect, Solver, Text, Variable, align, fix


def test_edges_follow_primitive_variables():
    rect = Rect(x=3, y=4, width=10, height=6)

    assert rect.right_edge.equivalent(rect.x + rect.width)
    assert rect.bottom_edge.equivalent(rect.y + rect.height)
    assert rect.center_x.equivalent(rect.x + rect.width / 2)
    assert rect.center_y.equivalent(rect.y + rect.height / 2)

    for x, y, w, h in [(0, 0, 0, 0), (-5, 2.5, 8, 1), (100, 200, 33, 44)]:
        rect.x.value, rect.y.value, rect.width.value, rect.height.value = x, y, w, h
        assert rect.left_edge.value() == pytest.approx(x, abs=1e-6)
        assert rect.top_edge.value() == pytest.approx(y, abs=1e-6)
        assert rect.right_edge.value() == pytest.approx(x + w, abs=1e-6)
        assert rect.bottom_edge.value() == pytest.approx(y + h, abs=1e-6)
        assert rect.center_x.value() == pytest.approx(x + w / 2, abs=1e-6)
        assert rect.center_y.value() == pytest.approx(y + h / 2, abs=1e-6)


def test_display_attributes_drop_geometry_keys():
    rect = Rect(
        width=10,
        attributes={"fill": "red", "x": 99, "font-size": 12},
        stroke="black",
        stroke_width=2,
    )

    assert rect.attributes == {"fill": "red", "stroke": "black", "stroke-width": 2}
    assert rect.width.value == 10


def test_every_element_kind_satisfies_the_geometric_contract(surface):
    items = [Element(), Rect(), Image("a.png"), Point(), Group(), Text(surface, "label")]
    for item in items:
        assert isinstance(item, Geometric)


def test_point_edges_collapse_to_coordinates():
    point = Point(4, 9)

    assert point.width is None
    assert point.left_edge.equivalent(point.right_edge)
    assert point.center_y.equivalent(point.y)
    assert point.coordinates() == {"x": 4, "y": 9}


def test_point_can_anchor_a_rect():
    point = Point(40, 15)
    rect = Rect(width=10, height=10)
    solver = Solver()
    solver.add_constraints(fix(point.x, point.y, rect.width, rect.height))
    solver.add_constraints([align(rect.center_x, point.center_x), align(rect.center_y, point.center_y)])
    solver.solve()

    assert rect.x.value == pytest.approx(35, abs=1e-6)
    assert rect.y.value == pytest.approx(10, abs=1e-6)


def test_render_writes_attributes_children_and_geometry(surface):
    outer = Element("svg", x=1, y=2, width=30, height=40, fill="none")
    inner = Rect(x=5, y=6, width=7, height=8, fill="blue")
    outer.append(inner)

    node = outer.render(surface, surface.root)

    assert surface.root.children == [node]
    assert node.kind == "svg"
    assert node.attributes == {"fill": "none", "x": 1, "y": 2, "width": 30, "height": 40}
    (child,) = node.children
    assert child.kind == "rect"
    assert child.attributes["fill"] == "blue"
    assert child.attributes["width"] == 7


def test_image_carries_href(surface):
    image = Image("logo.svg", width=20, height=20)
    node = image.render(surface, surface.root)
    assert node.kind == "image"
    assert node.attributes["href"] == "logo.svg"


def test_bare_element_renders_as_a_positioned_shape(surface):
    node = Element(x=3, y=4, width=5, height=6).render(surface, surface.root)

    assert node.kind == "rect"
    assert node.attributes == {"x": 3, "y": 4, "width": 5, "height": 6}


def test_point_renders_nothing(surface):
    assert Point().render(surface, surface.root) is None
    assert surface.root.children == []


def test_append_returns_element():
    parent = Element()
    a, b = Rect(), Rect()
    assert parent.append(a).append(b) is parent
    assert parent.children == [a, b]


def test_element_variables_are_independent():
    first, second = Rect(), Rect()
    assert isinstance(first.x, Variable)
    assert first.x is not second.x
    assert first.x.name != second.x.name
