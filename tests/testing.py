import csv
import pathlib

data_dir = pathlib.Path(__file__).parent / "data"


def read_csv_cases(name: str) -> list[list[str]]:
    """Read the rows of a test case table from tests/data, skipping blank
    lines and lines commented out with `#`."""
    with open(data_dir / f"{name}.csv", newline="", encoding="utf-8") as cases_file:
        reader = csv.reader(line for line in cases_file if line.strip() and not line.startswith("#"))
        return [row for row in reader]
