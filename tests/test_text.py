import pytest

from conftest import FakeSurface

from geolayout import (
    STRONG,
    LayoutConfig,
    MeasurementUnavailable,
    Rect,
    Solver,
    Text,
    align,
    equal,
    fix,
    set_layout_config,
)


def test_measurement_captures_ratios_and_offsets(surface):
    text = Text(surface, "hello", x=0, y=0, font_size=16)

    assert text.metrics.width_ratio == pytest.approx(2.5, abs=1e-6)
    assert text.metrics.height_ratio == pytest.approx(1.25, abs=1e-6)
    assert text.metrics.offset_x == pytest.approx(1.0, abs=1e-6)
    assert text.metrics.offset_y == pytest.approx(-12.0, abs=1e-6)
    assert text.width.value() == pytest.approx(40, abs=1e-6)
    assert text.height.value() == pytest.approx(20, abs=1e-6)
    assert text.left_edge.value() == pytest.approx(1, abs=1e-6)
    assert text.top_edge.value() == pytest.approx(-12, abs=1e-6)
    assert text.right_edge.value() == pytest.approx(41, abs=1e-6)
    assert text.center_y.value() == pytest.approx(-2, abs=1e-6)


def test_font_size_changes_propagate_without_remeasuring(surface):
    text = Text(surface, "hello", font_size=16)
    measured = surface.measurements

    text.font_size.value = 32

    assert text.width.value() == pytest.approx(80, abs=1e-6)
    assert text.height.value() == pytest.approx(40, abs=1e-6)
    assert surface.measurements == measured


def test_baseline_ignores_ink_offset(surface):
    text = Text(surface, "hello", x=4, y=30, font_size=16)

    assert text.baseline.value() == pytest.approx(30, abs=1e-6)
    assert text.top_edge.value() == pytest.approx(18, abs=1e-6)

    text.font_size.value = 32
    assert text.baseline.value() == pytest.approx(30, abs=1e-6)


def test_shape_can_hang_from_baseline(surface):
    text = Text(surface, "hello", y=50, font_size=16)
    rect = Rect(width=10, height=10)
    solver = Solver()
    solver.add_constraints(fix(text.y, strength=STRONG))
    solver.add_constraint(align(rect.top_edge, text.baseline, 5))
    solver.solve()

    assert rect.y.value == pytest.approx(55, abs=1e-6)


def test_default_font_size_comes_from_config(surface, layout_config):
    assert Text(surface, "a").font_size.value == 16
    set_layout_config(LayoutConfig(default_font_size=10))
    assert Text(surface, "a").font_size.value == 10


def test_font_size_must_be_positive(surface):
    with pytest.raises(ValueError):
        Text(surface, "a", font_size=0)


def test_scratch_region_is_torn_down(surface):
    Text(surface, "hello")
    assert surface.root.children == []


def test_measurement_unavailable_still_tears_down():
    surface = FakeSurface(measurable=False)

    with pytest.raises(MeasurementUnavailable):
        Text(surface, "hello")

    assert surface.root.children == []


def test_set_text_remeasures(surface):
    text = Text(surface, "hello", font_size=16)
    old_width = text.width

    assert text.set_text("hi") is text

    assert text.metrics.width_ratio == pytest.approx(1.0, abs=1e-6)
    assert text.width.value() == pytest.approx(16, abs=1e-6)
    assert not old_width.equivalent(text.width)
    # expressions captured before set_text keep the old measurement
    assert old_width.value() == pytest.approx(40, abs=1e-6)


def test_failed_set_text_keeps_previous_content():
    surface = FakeSurface()
    text = Text(surface, "hello")
    surface.measurable = False

    with pytest.raises(MeasurementUnavailable):
        text.set_text("changed")

    assert text.text == "hello"
    assert text.width.value() == pytest.approx(40, abs=1e-6)
    assert surface.root.children == []


def test_solver_drives_font_size_through_width(surface):
    text = Text(surface, "hello", font_size=16)
    solver = Solver()
    solver.add_constraints(fix(text.font_size))
    solver.add_constraint(equal(text.width, 80, STRONG))
    solver.solve()

    assert text.font_size.value == pytest.approx(32, abs=1e-6)
    assert text.height.value() == pytest.approx(40, abs=1e-6)


def test_constraints_built_after_set_text_use_new_metrics(surface):
    text = Text(surface, "hello", font_size=16)
    text.set_text("hey")
    solver = Solver()
    solver.add_constraint(equal(text.width, 48, STRONG))
    solver.solve()

    assert text.font_size.value == pytest.approx(32, abs=1e-6)


def test_render_writes_text_and_font_size(surface):
    text = Text(surface, "hello", x=3, y=20, font_size=12, fill="black", font_family="serif")

    node = text.render(surface, surface.root)

    assert node.kind == "text"
    assert node.text == "hello"
    assert node.attributes == {"fill": "black", "font-family": "serif", "x": 3, "y": 20, "font-size": 12}
