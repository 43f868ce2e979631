#!/usr/bin/env python3

import json
import sys
import time
import uuid

from recurrente.services.webhook_signing import sign_payload


def make_svix_headers(secret: str, payload: str) -> dict[str, str]:
    """Generate Svix webhook headers for testing a receiver."""
    msg_id = f"msg_{uuid.uuid4().hex}"
    ts = int(time.time())
    return {
        "svix-id": msg_id,
        "svix-timestamp": str(ts),
        "svix-signature": sign_payload(secret, msg_id, ts, payload),
    }


if __name__ == "__main__":
    if len(sys.argv) != 3:
        print("Usage: make_sig.py <secret> <payload>")
        sys.exit(1)

    secret = sys.argv[1]
    payload = sys.argv[2]

    # Validate payload is valid JSON
    try:
        json.loads(payload)
    except json.JSONDecodeError:
        print("Error: Payload must be valid JSON", file=sys.stderr)
        sys.exit(1)

    for name, value in make_svix_headers(secret, payload).items():
        print(f"{name}: {value}")
