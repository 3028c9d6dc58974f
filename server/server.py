# server/server.py
from flask import Flask, jsonify, request

from shared.config import MODEL_PATH, SERVER_HOST, SERVER_PORT
from shared.errors import InvalidArgumentError
from shared.logger import get_logger
from server.predictor import load_predictor

logger = get_logger(__name__)

app = Flask(__name__)

# Loaded once; read-only and shared by every request thread.
PREDICTOR = load_predictor(MODEL_PATH)


def _as_feature_list(raw):
    """Copy a JSON array into a fresh list of floats (one buffer per request)."""
    if not isinstance(raw, list):
        raise TypeError("features must be a list of numbers")
    values = []
    for v in raw:
        # bool, str and null are not numbers here
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise TypeError(f"feature values must be numbers, got {v!r}")
        values.append(float(v))
    return values


def _invalid_vector(e: InvalidArgumentError):
    logger.info("predict_request_rejected", expected=e.expected, actual=e.actual)
    return (
        jsonify(
            {
                "error": "invalid feature vector",
                "detail": str(e),
                "expected": e.expected,
                "actual": e.actual,
            }
        ),
        400,
    )


@app.route("/predict", methods=["POST"])
def predict():
    """
    Expected JSON from client:

    {"features": [x_0, ..., x_12]}            -> {"label": int}
    {"instances": [[x_0, ...], [x_0, ...]]}   -> {"labels": [int, ...]}

    Features are raw (unscaled) values in model feature order.
    """
    data = request.get_json(force=True, silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "invalid json"}), 400

    if "features" in data:
        try:
            features = _as_feature_list(data["features"])
        except TypeError as e:
            return jsonify({"error": "invalid features", "detail": str(e)}), 400
        try:
            label = PREDICTOR.predict(features)
        except InvalidArgumentError as e:
            return _invalid_vector(e)
        return jsonify({"label": label}), 200

    if "instances" in data:
        instances = data["instances"]
        if not isinstance(instances, list):
            return jsonify({"error": "invalid instances", "detail": "instances must be a list"}), 400
        try:
            batch = [_as_feature_list(row) for row in instances]
        except TypeError as e:
            return jsonify({"error": "invalid instances", "detail": str(e)}), 400
        try:
            labels = [PREDICTOR.predict(features) for features in batch]
        except InvalidArgumentError as e:
            return _invalid_vector(e)
        return jsonify({"labels": labels}), 200

    return jsonify({"error": "missing fields"}), 400


@app.route("/health", methods=["GET"])
def health():
    return jsonify({"status": "ok"}), 200


def main():
    logger.info("server_starting", host=SERVER_HOST, port=SERVER_PORT, model=MODEL_PATH)
    app.run(host=SERVER_HOST, port=SERVER_PORT, threaded=True)


if __name__ == "__main__":
    main()
