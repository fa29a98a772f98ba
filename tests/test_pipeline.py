from datetime import datetime, timezone

import pytest

from conftest import make_tcx
from ride_distance.config import ExportConfig
from ride_distance.errors import ConfigurationError, EmptyActivityError, ExportNotFoundError
from ride_distance.models.types import DateRange, ReportingWindow
from ride_distance.pipeline import run, scoped_temp_dir


def _config(base_dir, **kwargs):
    start = datetime(2023, 4, 1, tzinfo=timezone.utc)
    windows = [
        ReportingWindow("Zwischenstand", DateRange(start, datetime(2023, 6, 2, tzinfo=timezone.utc))),
        ReportingWindow("Gesamtergebnis", DateRange(start, datetime(2023, 10, 31, tzinfo=timezone.utc))),
    ]
    return ExportConfig(base_dir=base_dir, windows=windows, **kwargs)


def test_run_reports_every_window_and_cleans_up(export_zip):
    config = _config(export_zip.parent)
    results = run(config)
    assert [(r.window.label, r.formatted()) for r in results] == [
        ("Zwischenstand", "1000.00"),
        ("Gesamtergebnis", "3000.00"),
    ]
    assert not config.temp_dir.exists()


def test_default_windows_match_the_2023_challenge(export_zip):
    results = run(ExportConfig(base_dir=export_zip.parent))
    assert [r.formatted() for r in results] == ["1000.00", "3000.00"]


def test_temp_dir_removed_after_fatal_error(export_zip):
    import zipfile

    with zipfile.ZipFile(export_zip, "a") as zf:
        zf.writestr("Takeout/Fit/Activities/2023-07-01_Radfahren.tcx", make_tcx([[None]]))
    config = _config(export_zip.parent)
    with pytest.raises(EmptyActivityError):
        run(config)
    assert not config.temp_dir.exists()


def test_keep_temp_leaves_files(export_zip):
    config = _config(export_zip.parent, keep_temp=True)
    run(config)
    assert sorted(p.name for p in config.temp_dir.iterdir())[0] == "2023-05-01_Radfahren.tcx"


def test_stale_temp_dir_is_replaced(export_zip):
    config = _config(export_zip.parent)
    config.temp_dir.mkdir()
    (config.temp_dir / "2023-05-20_Radfahren.tcx").write_bytes(make_tcx([[0.0, 99999.0]]))
    results = run(config)
    assert results[-1].formatted() == "3000.00"


def test_missing_archive_aborts_before_extraction(tmp_path):
    config = _config(tmp_path)
    with pytest.raises(ExportNotFoundError):
        run(config)
    assert not config.temp_dir.exists()


def test_invalid_config_aborts(export_zip):
    config = _config(export_zip.parent, activity_pattern="")
    with pytest.raises(ConfigurationError):
        run(config)


def test_scoped_temp_dir_cleans_up_on_error(tmp_path):
    target = tmp_path / "scratch"
    with pytest.raises(RuntimeError):
        with scoped_temp_dir(target, tmp_path) as d:
            d.mkdir()
            (d / "file").write_text("x")
            raise RuntimeError("boom")
    assert not target.exists()


@pytest.mark.parametrize("name", ["", ".", "..", "sub/dir", "..\\up"])
def test_unsafe_temp_dir_name_leaves_base_dir_alone(export_zip, name):
    base = export_zip.parent
    (base / "my_thesis.docx").write_text("draft")
    config = _config(base, temp_dir_name=name)
    with pytest.raises(ConfigurationError):
        run(config)
    assert export_zip.exists()
    assert (base / "my_thesis.docx").read_text() == "draft"


@pytest.mark.parametrize("relative", [".", "..", "nested/scratch"])
def test_scoped_temp_dir_refuses_anything_but_a_direct_child(tmp_path, relative):
    (tmp_path / "keep.txt").write_text("x")
    (tmp_path / "nested").mkdir()
    with pytest.raises(ConfigurationError):
        with scoped_temp_dir(tmp_path / relative, tmp_path):
            pass
    assert (tmp_path / "keep.txt").exists()
    assert (tmp_path / "nested").exists()
