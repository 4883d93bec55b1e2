import pytest

from stacksimulator.controller.render_model import (
    build_render_model,
    gauge_band,
    GaugeBand,
    ValueSign,
)


def test_rows_cover_full_capacity_with_live_values_at_the_bottom():
    model = build_render_model([10.0, 20.0, 30.0], capacity=5)

    assert len(model.rows) == 5
    assert [r.is_empty for r in model.rows] == [True, True, False, False, False]
    assert [r.index for r in model.rows] == [None, None, 2, 1, 0]
    assert [r.value for r in model.rows[2:]] == [30.0, 20.0, 10.0]


def test_only_uppermost_live_row_is_marked_as_top():
    model = build_render_model([1.0, 2.0], capacity=4)

    tops = [r for r in model.rows if r.is_top]
    assert len(tops) == 1
    assert tops[0].index == 1
    assert tops[0].value == 2.0


def test_empty_stack_has_no_top_marker():
    model = build_render_model([], capacity=3)

    assert all(r.is_empty for r in model.rows)
    assert not any(r.is_top for r in model.rows)
    assert model.fill_ratio == 0.0
    assert model.capacity_label == "Capacity: 3 | Used: 0"


def test_value_sign_classes():
    model = build_render_model([-3.0, 0.0, 8.0], capacity=3)

    assert [r.sign for r in model.rows] == [ValueSign.POSITIVE, ValueSign.ZERO, ValueSign.NEGATIVE]
    assert build_render_model([], capacity=1).rows[0].sign is None


@pytest.mark.parametrize(
    "ratio, band",
    [
        (0.0, GaugeBand.LOW),
        (0.69, GaugeBand.LOW),
        (0.7, GaugeBand.MEDIUM),
        (0.89, GaugeBand.MEDIUM),
        (0.9, GaugeBand.HIGH),
        (1.0, GaugeBand.HIGH),
    ],
)
def test_gauge_bands(ratio, band):
    assert gauge_band(ratio) is band


def test_gauge_for_full_stack():
    model = build_render_model([1.0] * 10, capacity=10)

    assert model.fill_ratio == 1.0
    assert model.fill_percent == 100
    assert model.band is GaugeBand.HIGH
    assert model.capacity_label == "Capacity: 10 | Used: 10"


def test_gauge_thresholds_on_real_capacities():
    # 7 of 10 is exactly the first threshold
    assert build_render_model([0.0] * 6, capacity=10).band is GaugeBand.LOW
    assert build_render_model([0.0] * 7, capacity=10).band is GaugeBand.MEDIUM
    assert build_render_model([0.0] * 9, capacity=10).band is GaugeBand.HIGH


def test_more_elements_than_capacity_is_rejected():
    with pytest.raises(ValueError):
        build_render_model([1.0, 2.0], capacity=1)
