import pytest

from cubesolve.colors import (
    Color,
    bgr_to_hue,
    classify_color,
    median_color,
    sample_face,
)


@pytest.mark.parametrize(
    "color",
    [Color.WHITE, Color.ORANGE, Color.YELLOW, Color.GREEN, Color.BLUE],
)
def test_display_colors_classify_as_themselves(color):
    assert classify_color(color.display_bgr) is color


def test_pure_red_falls_back_to_white():
    assert classify_color(Color.RED.display_bgr) is Color.WHITE


def test_magenta_red_is_red():
    assert classify_color((60, 0, 255)) is Color.RED


def test_dim_white_is_not_white_by_brightness():
    # Grey has hue 0, outside every range, so it still falls back to white.
    assert classify_color((100, 100, 100)) is Color.WHITE


def test_gray_hue_is_zero():
    assert bgr_to_hue((77, 77, 77)) == 0


@pytest.mark.parametrize(
    "bgr", [(0, 0, 0), (10, 200, 30), (255, 1, 2), (3, 4, 250), (90, 180, 45)]
)
def test_hue_in_range(bgr):
    assert 0 <= bgr_to_hue(bgr) <= 180


def test_hue_ignores_brightness_scaling():
    assert bgr_to_hue((40, 80, 120)) == bgr_to_hue((80, 160, 240))


def test_median_ignores_outlier():
    base = (10, 20, 30)
    frame = [[base] * 5 for _ in range(5)]
    frame[2][2] = (255, 255, 255)
    assert median_color(frame, 2, 2) == base


def test_median_clips_to_frame():
    frame = [[(5, 6, 7)] * 3 for _ in range(3)]
    assert median_color(frame, 0, 0) == (5, 6, 7)


def test_median_outside_frame_raises():
    frame = [[(5, 6, 7)] * 3 for _ in range(3)]
    with pytest.raises(ValueError):
        median_color(frame, 50, 50)


def test_sample_face_reads_grid():
    layout = [
        [Color.WHITE, Color.ORANGE, Color.YELLOW],
        [Color.GREEN, Color.BLUE, Color.WHITE],
        [Color.YELLOW, Color.GREEN, Color.ORANGE],
    ]
    box = 10
    frame = [
        [layout[y // box][x // box].display_bgr for x in range(3 * box)]
        for y in range(3 * box)
    ]
    assert sample_face(frame, box) == layout


def test_sample_face_centred_in_larger_frame():
    box = 8
    size = 40
    border = (0, 0, 0)
    offset = (size - 3 * box) // 2
    frame = [
        [
            Color.BLUE.display_bgr
            if offset <= x < offset + 3 * box and offset <= y < offset + 3 * box
            else border
            for x in range(size)
        ]
        for y in range(size)
    ]
    assert sample_face(frame, box) == [[Color.BLUE] * 3 for _ in range(3)]


def test_sample_face_frame_too_small():
    frame = [[(0, 0, 0)] * 20 for _ in range(20)]
    with pytest.raises(ValueError):
        sample_face(frame, 10)