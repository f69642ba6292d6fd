"""Global configuration: policy constants, defaults, file names."""

from pathlib import Path

# Bundled sample catalog
PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_CATALOG_PATH = PACKAGE_DIR / "data" / "bracing_data.json"

# Custom bracing store file name
CUSTOM_STORE_FILENAME = "custom_bracings.json"

# Per-project settings file, relative to the project root
PROJECT_CONFIG_DIR = ".bracecalc"
PROJECT_CONFIG_FILENAME = "config.json"

# Reserved rating-table key for per-unit (per-pile, per-portal) ratings
NUMBER_BASED_KEY = "n_1"

# System that receives user-defined bracing types
CUSTOM_SYSTEM_NAME = "Custom"

# Catalog ratings are calibrated for this element height (m)
REFERENCE_HEIGHT_M = 2.4

# Maximum length-based rating (BU/m) allowed per floor type
FLOOR_TYPE_CAPS: dict[str, float] = {
    "Timber": 120,
    "Concrete": 150,
}

# Bracing line minimum demand: max(absolute, per-metre * wall, share * demand / lines)
MIN_DEMAND_ABSOLUTE = 100
MIN_DEMAND_PER_WALL_METRE = 15
FAIR_SHARE_FACTOR = 0.5

# Enforced by the editing layer; the engine tolerates fewer lines
MIN_BRACINGLINES_PER_TAB = 2

# Default values for newly created entities
DEFAULT_SYSTEM = "GIB"
DEFAULT_TYPE = "GS1-N"
DEFAULT_LENGTH_OR_COUNT = 1.2
DEFAULT_HEIGHT_M = 2.4
DEFAULT_DIRECTION = "NS-Cross"
DEFAULT_FLOOR_TYPE = "Timber"
DEFAULT_DEMAND_WIND = 500.0
DEFAULT_DEMAND_EQ = 500.0
DEFAULT_PROJECT_NAME = "New Project"
