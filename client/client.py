# client/client.py
import requests

from shared.config import REQUEST_TIMEOUT, SERVER_URL


def remote_predict(features, url=SERVER_URL):
    """
    features: raw model features, e.g. Sample.to_vec().
    Returns predicted label (int) from the prediction server.
    """
    json_data = {"features": [float(v) for v in features]}

    r = requests.post(url, json=json_data, timeout=REQUEST_TIMEOUT)
    if r.status_code != 200:
        raise RuntimeError(f"Server error: {r.status_code}, {r.text}")

    resp = r.json()
    label = resp.get("label")
    if label is None:
        raise RuntimeError("No label in server response")
    return int(label)
