# shared/config.py
import os

# Feature count of the reference model (length of Sample.to_vec()).
N_FEATURES = 13

# Split tolerance used by tree traversal: a feature value within this
# distance of a node threshold routes left. Part of the model format;
# changing it changes which leaf some boundary inputs reach.
THRESHOLD_EPSILON = 1e-5

# children_left / children_right value meaning "no child".
LEAF_SENTINEL = -1

_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# Model artifact shipped inside the server package.
EMBEDDED_MODEL_PATH = os.path.join(_project_root, "server", "model", "forest_model.json")

# Artifact used by the HTTP server and plain_predict unless overridden.
MODEL_PATH = os.getenv("FOREST_MODEL_PATH") or EMBEDDED_MODEL_PATH

# HTTP endpoint settings (server and client must agree).
SERVER_HOST = os.getenv("FOREST_SERVER_HOST", "127.0.0.1")
SERVER_PORT = int(os.getenv("FOREST_SERVER_PORT", "5000"))
SERVER_URL = os.getenv("FOREST_SERVER_URL", f"http://{SERVER_HOST}:{SERVER_PORT}/predict")
REQUEST_TIMEOUT = 10

# Logging (see shared/logger.py).
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.getenv("LOG_FORMAT", "json").strip().lower()
