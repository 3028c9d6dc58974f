# client/plain_predict.py
from shared.config import MODEL_PATH
from server.predictor import load_predictor

_predictor = None


def get_predictor():
    """Process-wide Predictor for MODEL_PATH, loaded on first use."""
    global _predictor
    if _predictor is None:
        _predictor = load_predictor(MODEL_PATH)
    return _predictor


def plain_predict(features, predictor=None):
    """
    features: raw (unscaled) model features, e.g. Sample.to_vec().
    The caller's sequence is not modified.
    """
    predictor = predictor or get_predictor()
    return int(predictor.predict(list(features)))
