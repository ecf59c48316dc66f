import json

import pytest

from video_morse_decode.cli import build_parser, main, options_from_args

from helpers import PARIS_TEXT


@pytest.fixture
def frame_dump(tmp_path, paris_luminance):
    path = tmp_path / "frames.txt"
    path.write_text("".join(f"{i}: {v}\n" for i, v in enumerate(paris_luminance)))
    return path


def test_parser_accepts_disabled_bounds():
    args = build_parser().parse_args(["video.mp4", "-", "0", "-1", "0.40", "0.5", "0.6", "0.75"])
    options = options_from_args(args)

    assert options.json_file_name == "-"
    assert options.start_frame == 0
    assert options.end_frame == -1
    assert (options.x0, options.y0, options.x1, options.y1) == (0.40, 0.5, 0.6, 0.75)
    assert options.channel == "blue"
    assert options.gaussian_window == 3
    assert options.method == "peaks"


def test_wrong_argument_count_prints_usage(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["video.mp4", "-", "0"])
    assert excinfo.value.code == 2
    assert "usage:" in capsys.readouterr().err


def test_report_to_file(tmp_path, frame_dump):
    out = tmp_path / "report.json"
    code = main([str(frame_dump), str(out), "-1", "-1", "0", "0", "1", "1", "--load-frames"])

    assert code == 0
    report = json.loads(out.read_text())
    assert report["message"] == PARIS_TEXT
    assert report["off_thresholds"] == [4, 10]


def test_report_to_stdout(capsys, frame_dump):
    code = main([str(frame_dump), "-", "-1", "-1", "0", "0", "1", "1", "--load-frames", "-m", "kmeans"])

    assert code == 0
    report = json.loads(capsys.readouterr().out)
    assert report["message"] == PARIS_TEXT
    assert report["on_time_peaks"] == [2, 6]


def test_empty_range_fails_without_report(tmp_path, frame_dump):
    out = tmp_path / "report.json"
    code = main([str(frame_dump), str(out), "5000", "6000", "0", "0", "1", "1", "--load-frames"])

    assert code == 1
    assert not out.exists()


def test_unreadable_video_fails(tmp_path):
    out = tmp_path / "report.json"
    code = main([str(tmp_path / "missing.mp4"), str(out), "-1", "-1", "0", "0", "1", "1"])

    assert code == 1
    assert not out.exists()


def test_bad_region_fails(tmp_path, frame_dump):
    code = main([str(frame_dump), "-", "-1", "-1", "0.9", "0", "0.1", "1", "--load-frames"])
    assert code == 1


def test_error_is_logged_once(tmp_path, caplog):
    code = main([str(tmp_path / "missing.mp4"), "-", "-1", "-1", "0", "0", "1", "1"])

    assert code == 1
    messages = [r.getMessage() for r in caplog.records if r.levelname == "ERROR"]
    assert messages
    assert all("[ERROR]" not in m for m in messages)
