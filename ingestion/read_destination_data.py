import csv
from pathlib import Path

from models.destination_profile import DestinationProfile

# Resolve paths safely
BASE_DIR = Path(__file__).resolve().parents[1]
CATALOG_CSV_PATH = BASE_DIR / "data" / "destinations" / "catalog.csv"


def load_destination_catalog(csv_path: Path = CATALOG_CSV_PATH) -> list[DestinationProfile]:
    """
    Load the curated destination catalog.

    Columns follow the echoprint_destinations table; list-valued columns
    (climate_tags, highlights, primary_dimensions) are pipe-separated.
    """
    destinations = []

    with open(csv_path, newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)

        if reader.fieldnames is None or "id" not in reader.fieldnames:
            raise ValueError("catalog.csv must contain an id column")

        for row in reader:
            if not (row.get("id") or "").strip():
                continue
            destinations.append(DestinationProfile.from_row(row))

    return destinations


# -----------------------------
# Entry point
# -----------------------------

if __name__ == "__main__":
    catalog = load_destination_catalog()

    print(f"Loaded {len(catalog)} destinations\n")

    for destination in catalog:
        print(f"{destination.id}: {destination.name}, {destination.country} ({destination.region})")
