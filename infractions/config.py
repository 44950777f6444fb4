import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

ROOT_DIR = Path(__file__).resolve().parents[1]
DATA_DIR = ROOT_DIR / "data" / "processed"

THEMES = [
    "Snelheid",
    "Stilstaan en parkeren",
    "GSM",
    "Helm en beschermende kledij",
    "Gordel en kinderzitje",
    "Verkeerslichten",
    "Wegcode (rest)",
    "Alcohol",
    "Drugs",
    "Inschrijving",
    "Rijbewijs",
    "Technische eisen",
    "Verzekering",
    "Zwaar vervoer",
    "Andere",
    "Onbekend",
]

MONTHS_NL = ["Jan", "Feb", "Maa", "Apr", "Mei", "Jun", "Jul", "Aug", "Sep", "Okt", "Nov", "Dec"]

COLORS = [
    "#2563eb", "#16a34a", "#dc2626", "#7c3aed", "#ea580c", "#0891b2",
    "#84cc16", "#9333ea", "#059669", "#f59e0b", "#3b82f6", "#ef4444",
    "#14b8a6", "#a855f7", "#10b981", "#e11d48", "#0ea5e9", "#22c55e",
]

KEY_FIELD_YEAR = "year"
KEY_FIELD_MONTH = "maand"
TOTAL_FIELD = "Totaal"

# (field, label, colour)
SPEED_BANDS = [
    ("_0_10", "0–10 km/u", "#2563eb"),
    ("_11_20", "11–20 km/u", "#16a34a"),
    ("_21_30", "21–30 km/u", "#dc2626"),
    ("_31_40", "31–40 km/u", "#7c3aed"),
    ("_gt40", "> 40 km/u", "#ea580c"),
    ("_unk", "onbekend", "#0891b2"),
]

SEVERITY_GRADES = [
    ("graad1", "1ste graad", "#2563eb"),
    ("graad2", "2de graad", "#16a34a"),
    ("graad3", "3de graad", "#dc2626"),
    ("graad4", "4de graad", "#7c3aed"),
    ("unk", "Onbekend/NVT", "#0891b2"),
]

VIEWS = {
    "jaartrend": "Jaartrend",
    "maand2023": "2023 per maand",
    "pie2023": "Verdeling 2023",
    "snelheidsbanden": "Snelheidsbanden",
    "nietsnelheid": "Niet‑snelheid",
    "tabel": "Tabel",
}

VIEW_FILES = {view: f"{view}.json" for view in VIEWS}
SUMMARY_FILE = "dashboard.json"
HTML_FILE = "dashboard.html"

METRIC_ABS = "abs"
METRIC_PCT = "pct"
METRICS = [METRIC_ABS, METRIC_PCT]

DEFAULT_THEMES = ["Snelheid", "Stilstaan en parkeren", "Verkeerslichten"]
DEFAULT_METRIC = METRIC_ABS
DEFAULT_STACKED = True
DEFAULT_VIEW = "jaartrend"

PEAK_THEME = "Snelheid"

EXPORT_FILENAME = "verkeersinbreuken_pz_antwerpen_2023.csv"

TITLE = "Verkeersinbreuken — PZ Antwerpen"
SUBTITLE = (
    "2015–2023 (jaarlijks) en 2023 (maandelijks). Autosnelwegen inbegrepen. "
    "Bron: Federale Politie / BIPOL."
)
FOOTER = (
    "Laatste update dataset: 30/04/2024 (sluitingsdatum bronrapport). "
    "— Dit dashboard bevat jaartotalen (2015–2023) en maandoverzicht (2023)."
)


def theme_color(idx: int) -> str:
    return COLORS[idx % len(COLORS)]


@dataclass
class GeneratorConfig:
    out_dir: Path
    export_filename: str = EXPORT_FILENAME
    write_html: bool = False
    header: str = "fixed"  # "fixed" | "union"


def load_config(out_dir: Optional[str] = None, write_html: bool = False, header: str = "fixed") -> GeneratorConfig:
    """
    Resolve the output directory from (in order) the explicit argument,
    the DASHBOARD_DATA_DIR environment variable and the repo default.
    """
    target = out_dir or os.getenv("DASHBOARD_DATA_DIR")
    return GeneratorConfig(
        out_dir=Path(target) if target else DATA_DIR,
        export_filename=os.getenv("DASHBOARD_EXPORT_FILENAME", EXPORT_FILENAME),
        write_html=write_html,
        header=header,
    )
