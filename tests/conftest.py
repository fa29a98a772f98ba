import zipfile

import pytest

TCX_NS = "http://www.garmin.com/xmlschemas/TrainingCenterDatabase/v2"


def make_tcx(laps, namespaced=True, activities=1):
    """Build a TCX document. ``laps`` is a list of laps, each a list of trackpoint
    distances; ``None`` writes a trackpoint without DistanceMeters."""
    xmlns = f' xmlns="{TCX_NS}"' if namespaced else ""
    activity_xml = []
    for _ in range(activities):
        lap_xml = []
        for lap in laps:
            points = []
            for dist in lap:
                body = "<Time>2023-05-01T10:00:00Z</Time>"
                if dist is not None:
                    body += f"<DistanceMeters>{dist}</DistanceMeters>"
                points.append(f"<Trackpoint>{body}</Trackpoint>")
            lap_total = max([d for d in lap if d is not None], default=0)
            lap_xml.append(
                f'<Lap StartTime="2023-05-01T10:00:00Z">'
                # lap summary distance must never be treated as a sample
                f"<DistanceMeters>{lap_total * 100}</DistanceMeters>"
                f"<Track>{''.join(points)}</Track></Lap>"
            )
        activity_xml.append(f'<Activity Sport="Biking"><Id>2023-05-01T10:00:00Z</Id>{"".join(lap_xml)}</Activity>')
    return (
        f'<?xml version="1.0" encoding="UTF-8"?>'
        f"<TrainingCenterDatabase{xmlns}><Activities>{''.join(activity_xml)}</Activities></TrainingCenterDatabase>"
    ).encode("utf-8")


SCENARIO_FILES = {
    "2023-05-01_Radfahren.tcx": [[0.0, 250.0, 1000.0]],
    "2023-05-15_Laufen.tcx": [[0.0, 500.0]],
    "2023-06-10_Radfahren.tcx": [[0.0, 900.0], [900.0, 2000.0, 1500.0]],
}


@pytest.fixture
def workout_dir(tmp_path):
    """Directory with two rides (1000 m, 2000 m) and one run (500 m)."""
    d = tmp_path / "workouts"
    d.mkdir()
    for name, laps in SCENARIO_FILES.items():
        (d / name).write_bytes(make_tcx(laps))
    return d


@pytest.fixture
def export_zip(tmp_path):
    """GoogleFitExport.zip with the scenario files nested in takeout folders."""
    path = tmp_path / "GoogleFitExport.zip"
    with zipfile.ZipFile(path, "w") as zf:
        zf.writestr("Takeout/Fit/", "")
        for name, laps in SCENARIO_FILES.items():
            zf.writestr(f"Takeout/Fit/Activities/{name}", make_tcx(laps))
        zf.writestr("Takeout/Fit/Daily activity metrics/2023-05-01.csv", "date,steps\n2023-05-01,1000\n")
        zf.writestr("Takeout/archive_browser.html", "<html></html>")
    return path
