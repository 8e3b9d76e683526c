from pathlib import Path

DEFAULT_DATA_DIR = (Path(__file__).parent.parent.resolve() / "data").absolute().resolve()

# Persistence boundary
STATE_KEY = "global_store"  # Single logical document per deployment
STATE_API_PATH = "/api/monitor-data"
HTTP_TIMEOUT_SECONDS = 30.0

# Rubric part maximums
PART1_MAX = 60  # Configuration completeness and standardization
PART2_MAX = 20  # Fault detection
PART3_MAX = 10  # Alert configuration
PART4_MAX = 10  # Operations team
TOTAL_MAX = PART1_MAX + PART2_MAX + PART3_MAX + PART4_MAX

# Display colors by share of a part's maximum
SCORE_COLOR_GOOD_RATIO = 0.9
SCORE_COLOR_FAIR_RATIO = 0.7

# Id prefixes for entities created by editing operations
SYSTEM_ID_PREFIX = "sys_"
TOOL_ID_PREFIX = "t_"
SCENARIO_ID_PREFIX = "scen_"
